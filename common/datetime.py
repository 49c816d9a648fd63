"""Datetime helpers shared by the client and its scripts.

Provides:
    parse_iso8601(s): parse an ISO-8601 string (or datetime) into an aware
        UTC datetime. Accepts a trailing "Z", explicit offsets and fractional
        seconds.
    format_rfc3339(v): render a datetime, date or ISO-8601 string as the
        RFC3339 text the API expects in query strings.
    format_date(v): render a date-like value as ``YYYY-MM-DD``.
"""
from __future__ import annotations

import datetime as _dt
from typing import Union

from dateutil.parser import isoparse as _isoparse

__all__ = ["parse_iso8601", "format_rfc3339", "format_date"]

DateLike = Union[str, _dt.date, _dt.datetime]


def _ensure_utc(dt: _dt.datetime) -> _dt.datetime:
    """Return *dt* converted to UTC and TZ-aware."""
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        # naive → assume already UTC
        return dt.replace(tzinfo=_dt.timezone.utc)
    return dt.astimezone(_dt.timezone.utc)


def parse_iso8601(value: Union[str, _dt.datetime]) -> _dt.datetime:
    """Parse *value* into a timezone-aware UTC datetime.

    Accepts ISO-8601 strings or datetime objects. If *value* is already a
    datetime, it will be normalised to UTC.
    """
    if isinstance(value, _dt.datetime):
        return _ensure_utc(value)

    if not isinstance(value, str):
        raise TypeError("parse_iso8601 expects str or datetime, got " + type(value).__name__)

    try:
        dt = _isoparse(value)
    except ValueError as exc:
        raise ValueError(f"invalid ISO-8601 datetime: {value}") from exc

    return _ensure_utc(dt)


def format_rfc3339(value: DateLike) -> str:
    """Format *value* as ``YYYY-MM-DDTHH:MM:SSZ`` in UTC.

    Plain dates are taken as midnight UTC. Fractional seconds are kept only
    when present.
    """
    if isinstance(value, _dt.date) and not isinstance(value, _dt.datetime):
        value = _dt.datetime(value.year, value.month, value.day, tzinfo=_dt.timezone.utc)
    dt = parse_iso8601(value)
    text = dt.isoformat(timespec="microseconds" if dt.microsecond else "seconds")
    return text.replace("+00:00", "Z")


def format_date(value: DateLike) -> str:
    """Return a calendar date (``YYYY-MM-DD``) for card expiry style fields.

    Strings are passed through untouched so callers can send whatever the API
    accepts (``2025-04-18`` or a full timestamp).
    """
    if isinstance(value, str):
        return value
    if isinstance(value, _dt.datetime):
        return _ensure_utc(value).date().isoformat()
    return value.isoformat()
