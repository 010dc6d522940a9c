"""Adapters that plug proquint codecs into other libraries.

WHY: Proquints usually travel inside larger documents (API payloads,
config models). Adapters let those models accept and emit proquints without
each caller wiring encode/decode by hand.

RULES:
- Adapters only delegate to proquint.codecs; no encoding logic here
- One module per target library
"""

from proquint.adapters.pydantic_types import (
    QuintIPv4,
    QuintIPv6,
    QuintU16,
    QuintU32,
    QuintU64,
)

__all__ = ["QuintIPv4", "QuintIPv6", "QuintU16", "QuintU32", "QuintU64"]
