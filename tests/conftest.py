"""Shared test fixtures for the proquint test suite.

WHY: Several modules check the same reference addresses and need the same
reproducible random samples for round-trip checks.

HOW: IPV4_VECTORS holds the address/proquint pairs from the original
proquint proposal. The ``rng`` fixture is a seeded random.Random so every
run samples the same values.

RULES:
- Vectors are published reference values; never regenerate them from the codec
- Random samples always come from the seeded fixture, never the global RNG
"""

import random
from typing import List, Tuple

import pytest

IPV4_VECTORS: List[Tuple[str, str]] = [
    ("127.0.0.1",      "lusab-babad"),
    ("63.84.220.193",  "gutih-tugad"),
    ("63.118.7.35",    "gutuk-bisog"),
    ("140.98.193.141", "mudof-sakat"),
    ("64.255.6.200",   "haguz-biram"),
    ("128.30.52.45",   "mabiv-gibot"),
    ("147.67.119.2",   "natag-lisaf"),
    ("212.58.253.68",  "tibup-zujah"),
    ("216.35.68.215",  "tobog-higil"),
    ("216.68.232.21",  "todah-vobij"),
    ("198.81.129.136", "sinid-makam"),
    ("12.110.110.204", "budov-kuras"),
]

SAMPLE_SIZE = 200


@pytest.fixture
def rng():
    """Seeded RNG for reproducible round-trip samples."""
    return random.Random(0x7F000001)


@pytest.fixture
def sample_bits(rng):
    """Return a helper that draws SAMPLE_SIZE random ``bits``-wide integers
    plus the two boundary values."""

    def _sample(bits):
        values = [rng.getrandbits(bits) for _ in range(SAMPLE_SIZE)]
        return [0, (1 << bits) - 1] + values

    return _sample
