"""Alphabets, separator, and bit-width constants for proquint encoding.

WHY: The consonant and vowel orderings are part of the external contract.
Every implementation must map the same character to the same bits, so the
alphabets live here as plain data instead of inside the codec logic.

HOW: Constants are module-level strings and ints. CHAR_BITS is built once
at import from the two alphabets and maps each recognised character to a
(bit width, value) pair that the decoder looks up per character.

RULES:
- CONSONANTS order is b d f g h j k l m n p r s t v z (index = 4-bit value)
- VOWELS order is a i o u (index = 2-bit value)
- Alphabets are lowercase only; anything else is a separator when decoding
- Nothing in this module is mutated at runtime
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Alphabets
# ---------------------------------------------------------------------------

CONSONANTS = "bdfghjklmnprstvz"
"""16 consonants; the index of each character is its 4-bit value."""

VOWELS = "aiou"
"""4 vowels; the index of each character is its 2-bit value."""

SEPARATOR = "-"
"""Joins syllables on encode. Skipped like any other unknown character on decode."""

# ---------------------------------------------------------------------------
# Bit layout
# ---------------------------------------------------------------------------

CONSONANT_BITS = 4
VOWEL_BITS = 2

SYLLABLE_BITS = 16
SYLLABLE_LENGTH = 5

# C V C V C
SYLLABLE_PATTERN: tuple[int, ...] = (
    CONSONANT_BITS,
    VOWEL_BITS,
    CONSONANT_BITS,
    VOWEL_BITS,
    CONSONANT_BITS,
)

# Supported integer widths and how many syllables each one takes.
SUPPORTED_WIDTHS: dict[int, int] = {16: 1, 32: 2, 64: 4}

IPV6_SEGMENTS = 8

# ---------------------------------------------------------------------------
# Decode lookup table: character → (bit width, value)
# ---------------------------------------------------------------------------

CHAR_BITS: dict[str, tuple[int, int]] = {}
CHAR_BITS.update({c: (CONSONANT_BITS, i) for i, c in enumerate(CONSONANTS)})
CHAR_BITS.update({v: (VOWEL_BITS, i) for i, v in enumerate(VOWELS)})


def alphabet_for(width: int) -> str:
    """Return the alphabet that encodes a chunk of ``width`` bits."""
    if width == CONSONANT_BITS:
        return CONSONANTS
    if width == VOWEL_BITS:
        return VOWELS
    raise ValueError("No alphabet for {}-bit chunks".format(width))
