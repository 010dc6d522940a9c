"""Syllable codec and the shared decode engine.

WHY: Every supported type (u16, u32, u64, IPv4, IPv6) is built from the same
two primitives: turning one 16-bit chunk into a syllable, and accumulating
bits out of a proquint string. Keeping them here means the type codecs only
deal with splitting and joining chunks.

HOW: syllable.py encodes a 16-bit value as C V C V C. decoder.py scans a
string character by character and accumulates bits, either over the whole
string (exact-width mode) or up to a bit budget with a resume index
(bounded mode).

RULES:
- No type-specific logic in this package
- Decoding never rejects unknown characters; it skips them
"""

from proquint.core.decoder import decode_exact, from_quint, unquint_exactly
from proquint.core.syllable import encode_u16

__all__ = ["decode_exact", "encode_u16", "from_quint", "unquint_exactly"]
