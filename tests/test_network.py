"""Tests for the IPv4 and IPv6 codecs.

WHY: Addresses are the headline use of proquints. IPv4 must reproduce
the published reference table exactly, and IPv6 exercises the bounded
decoder's resume logic across eight segments.

HOW: The reference table from conftest, round trips over seeded random
addresses, and the error paths of the segment-by-segment IPv6 decoder.
"""

from ipaddress import IPv4Address, IPv6Address

import pytest

from conftest import IPV4_VECTORS
from proquint.codecs.network import decode_ipv4, decode_ipv6, encode_ipv4, encode_ipv6
from proquint.errors import InputInvalid, InputTooLarge, InputTooSmall

LOOPBACK_V6 = "-".join(["babab"] * 7 + ["babad"])


class TestIPv4Vectors:

    @pytest.mark.parametrize("address, quint", IPV4_VECTORS)
    def test_encode(self, address, quint):
        assert encode_ipv4(IPv4Address(address)) == quint

    @pytest.mark.parametrize("address, quint", IPV4_VECTORS)
    def test_decode(self, address, quint):
        assert decode_ipv4(quint) == IPv4Address(address)

    def test_octets_are_big_endian(self):
        assert encode_ipv4(IPv4Address(bytes([127, 0, 0, 1]))) == "lusab-babad"


class TestIPv4Inputs:

    def test_accepts_dotted_string(self):
        assert encode_ipv4("127.0.0.1") == "lusab-babad"

    def test_accepts_int(self):
        assert encode_ipv4(2130706433) == "lusab-babad"

    def test_rejects_bad_address(self):
        with pytest.raises(ValueError):
            encode_ipv4("256.0.0.1")


class TestIPv4Errors:

    def test_too_small(self):
        with pytest.raises(InputTooSmall):
            decode_ipv4("lusab")

    def test_too_large(self):
        with pytest.raises(InputTooLarge):
            decode_ipv4("lusab-babad-babad")


class TestIPv6:

    def test_loopback(self):
        assert encode_ipv6(IPv6Address("::1")) == LOOPBACK_V6
        assert decode_ipv6(LOOPBACK_V6) == IPv6Address("::1")

    def test_documentation_prefix(self):
        quint = "fabad-bukum-babab-babab-babab-babab-babab-babad"
        assert encode_ipv6(IPv6Address("2001:db8::1")) == quint
        assert decode_ipv6(quint) == IPv6Address("2001:db8::1")

    def test_length(self, rng):
        for _ in range(50):
            assert len(encode_ipv6(IPv6Address(rng.getrandbits(128)))) == 47

    def test_without_separators(self):
        assert decode_ipv6(LOOPBACK_V6.replace("-", "")) == IPv6Address("::1")

    def test_extra_separators(self):
        assert decode_ipv6("--" + LOOPBACK_V6.replace("-", "---")) == IPv6Address("::1")

    def test_trailing_input_is_ignored(self):
        assert decode_ipv6(LOOPBACK_V6 + "-lusab") == IPv6Address("::1")


class TestIPv6Errors:

    def test_too_small(self):
        with pytest.raises(InputTooSmall):
            decode_ipv6("lusab-babad")

    def test_last_segment_truncated(self):
        with pytest.raises(InputTooSmall):
            decode_ipv6(LOOPBACK_V6[:-1])

    def test_misaligned_first_segment(self):
        with pytest.raises(InputInvalid):
            decode_ipv6("aaaaaaab-" + LOOPBACK_V6)

    def test_misaligned_later_segment(self):
        # Dropping a vowel shifts every following segment by two bits.
        broken = LOOPBACK_V6[:7] + LOOPBACK_V6[8:]
        with pytest.raises(InputInvalid):
            decode_ipv6(broken)


class TestRoundTrip:

    def test_ipv4(self, rng):
        for _ in range(200):
            address = IPv4Address(rng.getrandbits(32))
            assert decode_ipv4(encode_ipv4(address)) == address

    def test_ipv6(self, rng):
        for _ in range(200):
            address = IPv6Address(rng.getrandbits(128))
            assert decode_ipv6(encode_ipv6(address)) == address
