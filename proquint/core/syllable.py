"""16-bit value → 5-character syllable.

WHY: The syllable is the unit every proquint is built from. Larger values
are just several syllables joined by the separator.

HOW: Walk the C V C V C pattern, peel the top 4 or 2 bits off a 16-bit
working register, look the bits up in the matching alphabet, then shift the
consumed bits out.

RULES:
- Output is always exactly 5 characters
- Every value in 0..0xFFFF has exactly one encoding
- Anything else is rejected before encoding starts
"""

from __future__ import annotations

from proquint.config import SYLLABLE_BITS, SYLLABLE_PATTERN, alphabet_for

_MASK_U16 = (1 << SYLLABLE_BITS) - 1


def check_unsigned(value: int, bits: int) -> int:
    """Reject anything that is not an unsigned ``bits``-wide integer.

    Raises:
        TypeError: If value is not an int.
        ValueError: If value does not fit in ``bits`` unsigned bits.
    """
    if not isinstance(value, int):
        raise TypeError(
            "Expected an int, got {}".format(type(value).__name__)
        )
    if value < 0 or value >> bits:
        raise ValueError(
            "{} does not fit in an unsigned {}-bit integer".format(value, bits)
        )
    return value


def encode_u16(value: int) -> str:
    """Encode a 16-bit unsigned integer as one proquint syllable.

    Args:
        value: Integer in the range 0..65535.

    Returns:
        Five characters following the consonant-vowel-consonant-vowel-consonant
        pattern, e.g. ``0x7F00`` → ``"lusab"``.
    """
    register = check_unsigned(value, SYLLABLE_BITS)
    out = []
    for width in SYLLABLE_PATTERN:
        index = register >> (SYLLABLE_BITS - width)
        out.append(alphabet_for(width)[index])
        register = (register << width) & _MASK_U16
    return "".join(out)
