"""Encoding and decoding of the Parse date wire format.

Parse exchanges dates as ``yyyy-MM-dd'T'HH:mm:ss.SSS'Z'`` strings, for example
``2015-07-14T15:55:52.133Z``, always in UTC. Both directions are stateless, so
they are safe to call from any thread without locking.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from .constants import DATE_FORMAT

logger = logging.getLogger(__name__)

WIRE_DATE_LENGTH = 24

# (offset, character) pairs that must match for the fixed-width fast path.
_SEPARATORS = ((4, "-"), (7, "-"), (10, "T"), (13, ":"), (16, ":"), (19, "."), (23, "Z"))


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware datetimes are returned unchanged.

    Timestamps handled by the SDK are always timezone-aware, so values that
    came in naive compare equal to what :func:`parse_date` returns for them.
    """
    if value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def encode_date(value: datetime) -> str:
    """Express ``value`` in the format required by Parse.

    Naive datetimes are taken to already be in UTC. Raises ``ValueError`` for
    an aware datetime whose UTC instant falls outside years 1-9999, which the
    wire format cannot express.
    """
    try:
        value = ensure_utc(value).astimezone(timezone.utc)
    except OverflowError as exc:
        raise ValueError(f"{value!r} is outside the range of the Parse date format") from exc
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond // 1000:03d}Z"
    )


def _digits(value: str, start: int, end: int) -> Optional[int]:
    chunk = value[start:end]
    if not (chunk.isascii() and chunk.isdigit()):
        return None
    return int(chunk)


def _parse_fixed_width(value: str) -> Optional[datetime]:
    for offset, char in _SEPARATORS:
        if value[offset] != char:
            return None
    fields = [
        _digits(value, 0, 4),
        _digits(value, 5, 7),
        _digits(value, 8, 10),
        _digits(value, 11, 13),
        _digits(value, 14, 16),
        _digits(value, 17, 19),
        _digits(value, 20, 23),
    ]
    if any(part is None for part in fields):
        return None
    year, month, day, hour, minute, second, millis = fields
    try:
        return datetime(year, month, day, hour, minute, second, millis * 1000, tzinfo=timezone.utc)
    except ValueError:
        return None


def _parse_with_format(value: str) -> Optional[datetime]:
    try:
        parsed = datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        return None
    millis = parsed.microsecond // 1000
    return parsed.replace(microsecond=millis * 1000, tzinfo=timezone.utc)


def parse_date(value: Any) -> Optional[datetime]:
    """Convert a Parse date string into a timezone-aware UTC datetime.

    Returns ``None`` when ``value`` is not a recognisable Parse date.
    """
    if not isinstance(value, str):
        return None
    if len(value) == WIRE_DATE_LENGTH:
        parsed = _parse_fixed_width(value)
        if parsed is not None:
            return parsed
    parsed = _parse_with_format(value)
    if parsed is None:
        logger.debug("Unable to parse date string %r", value)
    return parsed


__all__ = ["WIRE_DATE_LENGTH", "encode_date", "ensure_utc", "parse_date"]
