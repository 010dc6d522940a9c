"""pydantic field types that read and write proquints.

WHY: An API model holding a host address or a numeric ID can expose it as
a proquint on the wire while the application works with the native value.

HOW: Each type is an ``Annotated`` alias over the native Python type. A
BeforeValidator decodes string input with the matching registry codec;
native values pass through to pydantic's own validation (which also
enforces the unsigned range for integers). A PlainSerializer encodes the
value back to a proquint when dumping to JSON.

RULES:
- String input is always read as a proquint, never as a dotted address
  or decimal number
- Decode failures are QuintError (a ValueError), which pydantic reports
  as a ValidationError
- Python-mode dumps keep the native value; JSON dumps emit the proquint
"""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address
from typing import Annotated, Any, Callable

from pydantic import BeforeValidator, Field, PlainSerializer

from proquint.codecs import get_codec


def _decode_strings(kind: str) -> Callable[[Any], Any]:
    codec = get_codec(kind)

    def _validate(value: Any) -> Any:
        if isinstance(value, str):
            return codec.decode(value)
        return value

    return _validate


def _quint_type(native: type, kind: str, *constraints: Any) -> Any:
    codec = get_codec(kind)
    metadata = (
        BeforeValidator(_decode_strings(kind)),
        *constraints,
        PlainSerializer(codec.encode, return_type=str, when_used="json"),
    )
    return Annotated[(native, *metadata)]


QuintU16 = _quint_type(int, "u16", Field(ge=0, le=0xFFFF))
QuintU32 = _quint_type(int, "u32", Field(ge=0, le=0xFFFFFFFF))
QuintU64 = _quint_type(int, "u64", Field(ge=0, le=0xFFFFFFFFFFFFFFFF))
QuintIPv4 = _quint_type(IPv4Address, "ipv4")
QuintIPv6 = _quint_type(IPv6Address, "ipv6")
