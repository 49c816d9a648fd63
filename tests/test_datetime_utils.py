import datetime as _dt

import pytest

from common.datetime import format_date, format_rfc3339, parse_iso8601


@pytest.mark.parametrize(
    "s,expected",
    [
        ("2025-08-27T12:00:00Z", _dt.datetime(2025, 8, 27, 12, 0, 0, tzinfo=_dt.timezone.utc)),
        ("2025-08-27T12:00:00+00:00", _dt.datetime(2025, 8, 27, 12, 0, 0, tzinfo=_dt.timezone.utc)),
        ("2025-08-27T07:00:00-05:00", _dt.datetime(2025, 8, 27, 12, 0, 0, tzinfo=_dt.timezone.utc)),
        ("2025-08-27T12:00:00.123456Z", _dt.datetime(2025, 8, 27, 12, 0, 0, 123456, tzinfo=_dt.timezone.utc)),
    ],
)
def test_parse_iso8601(s, expected):
    assert parse_iso8601(s) == expected


def test_parse_datetime_roundtrip():
    dt = _dt.datetime(2025, 1, 1, 0, 0, tzinfo=_dt.timezone.utc)
    assert parse_iso8601(dt) is dt  # same object when already UTC-aware


@pytest.mark.parametrize(
    "value,expected",
    [
        (_dt.datetime(2022, 6, 1, 8, 30, tzinfo=_dt.timezone.utc), "2022-06-01T08:30:00Z"),
        (_dt.datetime(2022, 6, 1, 8, 30), "2022-06-01T08:30:00Z"),
        (_dt.date(2022, 6, 1), "2022-06-01T00:00:00Z"),
        ("2022-06-01T10:30:00+02:00", "2022-06-01T08:30:00Z"),
        ("2022-05-27T08:46:37.549Z", "2022-05-27T08:46:37.549000Z"),
    ],
)
def test_format_rfc3339(value, expected):
    assert format_rfc3339(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (_dt.date(2025, 4, 19), "2025-04-19"),
        (_dt.datetime(2025, 4, 19, 23, 0, tzinfo=_dt.timezone(_dt.timedelta(hours=-2))), "2025-04-20"),
        ("2025-04-19T00:00:00.000Z", "2025-04-19T00:00:00.000Z"),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


def test_invalid_string_is_rejected():
    with pytest.raises(ValueError):
        format_rfc3339("yesterday")
