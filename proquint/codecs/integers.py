"""Proquint codecs for 16-, 32- and 64-bit unsigned integers.

WHY: Integers are the base case. IPv4 reuses the 32-bit codec and the
registry exposes all three widths by name.

HOW: Encoding splits the value into big-endian 16-bit chunks and joins their
syllables with the separator. Decoding hands the whole string to the shared
exact-width decoder with the target width; the accumulator spans chunk
boundaries on its own, so no per-syllable decoding happens here.

RULES:
- Chunk order is big-endian: the most significant chunk comes first
- u16 → 5 chars, u32 → 11 chars, u64 → 23 chars
- Decode errors come straight from decode_exact (InputTooSmall / InputTooLarge)
"""

from __future__ import annotations

from proquint.config import SEPARATOR, SUPPORTED_WIDTHS, SYLLABLE_BITS
from proquint.core.decoder import decode_exact
from proquint.core.syllable import check_unsigned, encode_u16

_MASK_U16 = (1 << SYLLABLE_BITS) - 1


def split_chunks(value: int, count: int) -> list[int]:
    """Split ``value`` into ``count`` 16-bit chunks, most significant first."""
    return [
        (value >> (SYLLABLE_BITS * i)) & _MASK_U16
        for i in reversed(range(count))
    ]


def encode_chunks(chunks: list[int]) -> str:
    """Encode each 16-bit chunk as a syllable and join them with the separator."""
    return SEPARATOR.join(encode_u16(chunk) for chunk in chunks)


def encode_uint(value: int, bits: int) -> str:
    """Encode an unsigned integer of one of the supported widths."""
    check_unsigned(value, bits)
    return encode_chunks(split_chunks(value, SUPPORTED_WIDTHS[bits]))


def decode_u16(quint: str) -> int:
    """Decode a single-syllable proquint into a 16-bit integer."""
    return decode_exact(quint, 16)


def encode_u32(value: int) -> str:
    """Encode a 32-bit integer, e.g. ``3141592653`` → ``"rotab-vinat"``."""
    return encode_uint(value, 32)


def decode_u32(quint: str) -> int:
    return decode_exact(quint, 32)


def encode_u64(value: int) -> str:
    return encode_uint(value, 64)


def decode_u64(quint: str) -> int:
    return decode_exact(quint, 64)
