"""Exception types raised when a proquint cannot be decoded.

WHY: Callers need to tell apart "not enough proquint", "too much proquint"
and "proquint that does not line up with the chunk boundaries". A typed
hierarchy lets them catch one kind or all of them at once.

HOW: QuintError is the base and subclasses ValueError, so code that already
handles ValueError (including pydantic validators) treats a bad proquint as
bad input. Each subclass carries a default message.

RULES:
- InputTooSmall: fewer bits than the target width
- InputTooLarge: more bits than the target width (exact-width decoding only)
- InputInvalid: a character crossed a chunk boundary (bounded decoding only)
- Errors propagate unchanged through every codec; nothing catches and retries
"""

from __future__ import annotations


class QuintError(ValueError):
    """Base class for proquint decoding failures."""

    default_message = "invalid proquint"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InputTooSmall(QuintError):
    """The proquint holds fewer bits than the target type needs."""

    default_message = "expected larger proquint"


class InputTooLarge(QuintError):
    """The proquint holds more bits than the target type allows."""

    default_message = "proquint was too large"


class InputInvalid(QuintError):
    """A character's bits straddle the end of a bounded chunk."""

    default_message = "input was not a valid proquint"
