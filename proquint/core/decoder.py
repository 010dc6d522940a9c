"""Bit-accumulating decoder for proquint strings of any width.

WHY: A u32 proquint is not two independent u16 decodes glued together; it is
one stream of 4- and 2-bit chunks that happens to contain a separator. A
single accumulator that shifts left and adds handles every width the same
way, so u16, u32, u64 and IPv4 share one code path.

HOW: _scan() is the only loop. It looks every character up in
config.CHAR_BITS, skips anything unknown, and folds known characters into an
int accumulator. Two modes sit on top of it:

  exact-width  from_quint() / decode_exact() consume the whole string and
               compare the total bit count against the target width.
  bounded      unquint_exactly() stops as soon as the bit budget is reached
               and returns the index of the last character consumed, so the
               caller can resume from the next index. IPv6 uses this to walk
               its eight segments without slicing the input.

RULES:
- Unknown characters (separator, uppercase, digits, whitespace) add 0 bits
- Exact-width: fewer bits → InputTooSmall, more bits → InputTooLarge
- Bounded: budget overshot by one character → InputInvalid,
  string exhausted first → InputTooSmall
- Nothing is logged on the error path; errors are raised to the caller
"""

from __future__ import annotations

import logging

from proquint.config import CHAR_BITS, SEPARATOR
from proquint.errors import InputInvalid, InputTooLarge, InputTooSmall

logger = logging.getLogger(__name__)


def _scan(quint: str, start: int = 0, limit: int | None = None) -> tuple[int, int, int]:
    """Accumulate bits from ``quint`` starting at index ``start``.

    Stops after the character that brings the bit count to ``limit`` or
    beyond; with no limit the whole string is consumed.

    Returns:
        (value, bits, last_index) where last_index is the index of the last
        character examined, or ``start - 1`` if nothing was examined.
    """
    value = 0
    bits = 0
    index = start - 1
    for index in range(start, len(quint)):
        char = quint[index]
        entry = CHAR_BITS.get(char)
        if entry is None:
            if char != SEPARATOR:
                logger.debug("Skipping %r at index %d", char, index)
            continue
        width, chunk = entry
        value = (value << width) + chunk
        bits += width
        if limit is not None and bits >= limit:
            break
    return value, bits, index


def from_quint(quint: str) -> tuple[int, int]:
    """Decode a whole proquint string without checking its width.

    Returns:
        (value, bits): the accumulated integer and how many bits it holds.
        A well-formed proquint holds a multiple of 16 bits.
    """
    value, bits, _ = _scan(quint)
    return value, bits


def decode_exact(quint: str, bits: int) -> int:
    """Decode ``quint`` and require it to hold exactly ``bits`` bits.

    Raises:
        InputTooSmall: The string holds fewer than ``bits`` bits.
        InputTooLarge: The string holds more than ``bits`` bits.
    """
    value, found = from_quint(quint)
    if found < bits:
        raise InputTooSmall()
    if found > bits:
        raise InputTooLarge()
    return value


def unquint_exactly(quint: str, bits: int, start: int = 0) -> tuple[int, int]:
    """Decode the next ``bits`` bits of ``quint`` beginning at ``start``.

    Args:
        quint: The full proquint string.
        bits: How many bits to read.
        start: Index to begin scanning from.

    Returns:
        (value, last_index). Resume the next read at ``last_index + 1``.

    Raises:
        InputInvalid: The last character consumed pushed the count past
            ``bits`` (its bits straddle the boundary).
        InputTooSmall: The string ran out before ``bits`` bits were read.
    """
    value, found, last_index = _scan(quint, start, limit=bits)
    if found == bits:
        return value, last_index
    if found > bits:
        raise InputInvalid()
    raise InputTooSmall()
