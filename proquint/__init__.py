"""proquint: PRO-nounceable QUINT-uplet identifiers.

WHY: Hex and dotted-decimal identifiers are hard to say aloud and to copy
by ear. A proquint spells every 16 bits as one consonant-vowel syllable
(``127.0.0.1`` → ``lusab-babad``), so IDs and addresses can be read aloud.
See https://arxiv.org/html/0901.4016 for the original proposal.

HOW: Three layers: the syllable codec and bit-accumulating decoder (core),
per-type codecs for u16/u32/u64/IPv4/IPv6 (codecs), and adapters for model
libraries (adapters). Every function is pure; there is no shared state.

RULES:
- The alphabet order in config.py is the wire contract
- Decoding skips characters outside the alphabets instead of rejecting them
- Decode failures raise QuintError subclasses (which are ValueErrors)
"""

import logging

from proquint.codecs import CODECS, QuintCodec, decode, encode, get_codec
from proquint.codecs.integers import (
    decode_u16,
    decode_u32,
    decode_u64,
    encode_u32,
    encode_u64,
)
from proquint.codecs.network import decode_ipv4, decode_ipv6, encode_ipv4, encode_ipv6
from proquint.core.decoder import decode_exact, from_quint, unquint_exactly
from proquint.core.syllable import encode_u16
from proquint.errors import InputInvalid, InputTooLarge, InputTooSmall, QuintError

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CODECS",
    "QuintCodec",
    "decode",
    "encode",
    "get_codec",
    "encode_u16",
    "decode_u16",
    "encode_u32",
    "decode_u32",
    "encode_u64",
    "decode_u64",
    "encode_ipv4",
    "decode_ipv4",
    "encode_ipv6",
    "decode_ipv6",
    "from_quint",
    "decode_exact",
    "unquint_exactly",
    "QuintError",
    "InputTooSmall",
    "InputTooLarge",
    "InputInvalid",
]
