"""Membership test for the value types the Parse protocol can transport.

Every class accepted here must also be encodable by the request layer, and
vice versa. Keep :data:`SUPPORTED_TYPES` as the single list of them.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any

from .values import NULL, ParseFile, ParseGeoPoint, RemoteValue

SUPPORTED_TYPES = (
    dict,
    list,
    tuple,
    str,
    bool,
    RemoteValue,
    ParseFile,
    ParseGeoPoint,
    datetime,
    bytes,
    bytearray,
)


def is_supported_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    return False


def is_valid_type(value: Any) -> bool:
    """Return True if ``value`` can be stored in a Parse object field."""
    if value is NULL:
        return True
    if is_supported_number(value):
        return True
    return isinstance(value, SUPPORTED_TYPES)


__all__ = ["SUPPORTED_TYPES", "is_supported_number", "is_valid_type"]
