"""Codec registry, one proquint codec per supported value type.

WHY: Callers that pick the target type at runtime (config files, model
fields, tests that sweep every type) need a single lookup instead of a
chain of if/else over function names.

HOW: CODECS maps a short type name to a QuintCodec holding the type's bit
width and its encode/decode functions. encode() and decode() look the name
up and delegate. encode() can infer the name for ipaddress objects; plain
integers are ambiguous and must name their width.

RULES:
- Keys: "u16", "u32", "u64", "ipv4", "ipv6"
- Adding a type = one codec function pair plus one entry here
- Unknown names raise ValueError listing the available keys
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Any, Callable

from proquint.codecs.integers import (
    decode_u16,
    decode_u32,
    decode_u64,
    encode_u32,
    encode_u64,
)
from proquint.codecs.network import decode_ipv4, decode_ipv6, encode_ipv4, encode_ipv6
from proquint.config import SEPARATOR, SYLLABLE_BITS, SYLLABLE_LENGTH
from proquint.core.syllable import encode_u16


@dataclass(frozen=True)
class QuintCodec:
    """Encode/decode pair for one value type.

    Attributes:
        name: Registry key, e.g. ``"u32"``.
        bits: Width of the value in bits (a multiple of 16).
        encode: Value → proquint string.
        decode: Proquint string → value. Raises QuintError subclasses.
    """

    name: str
    bits: int
    encode: Callable[[Any], str]
    decode: Callable[[str], Any]

    @property
    def syllables(self) -> int:
        return self.bits // SYLLABLE_BITS

    @property
    def length(self) -> int:
        """Length of every string this codec encodes to."""
        return self.syllables * (SYLLABLE_LENGTH + len(SEPARATOR)) - len(SEPARATOR)


CODECS: dict[str, QuintCodec] = {
    "u16": QuintCodec("u16", 16, encode_u16, decode_u16),
    "u32": QuintCodec("u32", 32, encode_u32, decode_u32),
    "u64": QuintCodec("u64", 64, encode_u64, decode_u64),
    "ipv4": QuintCodec("ipv4", 32, encode_ipv4, decode_ipv4),
    "ipv6": QuintCodec("ipv6", 128, encode_ipv6, decode_ipv6),
}


def get_codec(kind: str) -> QuintCodec:
    """Look up a codec by name.

    Raises:
        ValueError: If ``kind`` is not a registered codec name.
    """
    try:
        return CODECS[kind]
    except KeyError:
        raise ValueError(
            "Unknown proquint type '{}'. Available: {}".format(
                kind, ", ".join(CODECS.keys())
            )
        ) from None


def _infer_kind(value: Any) -> str:
    if isinstance(value, ipaddress.IPv4Address):
        return "ipv4"
    if isinstance(value, ipaddress.IPv6Address):
        return "ipv6"
    if isinstance(value, int):
        raise TypeError(
            "Integer width is ambiguous; pass kind='u16', 'u32' or 'u64'"
        )
    raise TypeError(
        "Cannot infer proquint type for {}".format(type(value).__name__)
    )


def encode(value: Any, kind: str | None = None) -> str:
    """Encode ``value`` as a proquint.

    Args:
        value: Integer or ipaddress object.
        kind: Registry key. Optional for IPv4Address / IPv6Address values,
              required for integers.
    """
    if kind is None:
        kind = _infer_kind(value)
    return get_codec(kind).encode(value)


def decode(quint: str, kind: str) -> Any:
    """Decode ``quint`` into the type named by ``kind``."""
    return get_codec(kind).decode(quint)


__all__ = [
    "CODECS",
    "QuintCodec",
    "decode",
    "encode",
    "get_codec",
]
