"""Proquint codecs for IPv4 and IPv6 addresses.

WHY: Addresses are the original use case for proquints: ``127.0.0.1`` is
easier to read out loud as ``lusab-babad``.

HOW: IPv4 packs its four octets into a big-endian 32-bit integer and goes
through the u32 codec. IPv6 encodes its eight network-order segments one
syllable each. Decoding IPv6 walks the string with the bounded decoder,
reading 16 bits at a time and resuming just past the last character each
read consumed.

RULES:
- Addresses are anything ipaddress accepts (instance, string, int, packed bytes)
- Decoders return ipaddress.IPv4Address / ipaddress.IPv6Address
- IPv4 errors are the u32 errors; IPv6 errors come from each bounded read
- Characters after the eighth IPv6 segment are not inspected
"""

from __future__ import annotations

import ipaddress
import struct

from proquint.codecs.integers import decode_u32, encode_chunks, encode_u32
from proquint.config import IPV6_SEGMENTS, SYLLABLE_BITS
from proquint.core.decoder import unquint_exactly

_IPV6_FORMAT = "!{}H".format(IPV6_SEGMENTS)


def encode_ipv4(address) -> str:
    """Encode an IPv4 address as two syllables."""
    octets = ipaddress.IPv4Address(address).packed
    return encode_u32(int.from_bytes(octets, "big"))


def decode_ipv4(quint: str) -> ipaddress.IPv4Address:
    """Decode a two-syllable proquint into an IPv4 address."""
    value = decode_u32(quint)
    return ipaddress.IPv4Address(value.to_bytes(4, "big"))


def encode_ipv6(address) -> str:
    """Encode an IPv6 address as eight syllables."""
    segments = struct.unpack(_IPV6_FORMAT, ipaddress.IPv6Address(address).packed)
    return encode_chunks(list(segments))


def decode_ipv6(quint: str) -> ipaddress.IPv6Address:
    """Decode an eight-syllable proquint into an IPv6 address.

    Raises:
        InputTooSmall: The string ran out before all eight segments were read.
        InputInvalid: A segment did not end on a 16-bit boundary.
    """
    segments = []
    cursor = 0
    for _ in range(IPV6_SEGMENTS):
        segment, last_index = unquint_exactly(quint, SYLLABLE_BITS, cursor)
        segments.append(segment)
        cursor = last_index + 1
    return ipaddress.IPv6Address(struct.pack(_IPV6_FORMAT, *segments))
