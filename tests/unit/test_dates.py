"""Unit tests for fouroneone.dates."""

import logging

import pytest

from fouroneone.dates import format_date, format_datetime, format_time, parse_dates

# 2023-11-14 22:13:20 UTC
TS = 1_700_000_000


def test_parse_raw_milliseconds_pass_through():
    """'#' returns the values as integer milliseconds."""
    assert parse_dates("#", [1, "2", 3.0]) == [1, 2, 3]


def test_parse_unix_seconds():
    """'@' converts seconds to milliseconds."""
    assert parse_dates("@", [0, "1", TS]) == [0, 1000, TS * 1000]


def test_parse_free_form_utc():
    """Without a format, free-form strings are parsed (UTC by default)."""
    assert parse_dates(None, ["2023-11-14 22:13:20"]) == [TS * 1000]
    assert parse_dates("", ["Nov 14 2023 22:13:20"]) == [TS * 1000]


def test_parse_free_form_with_offset_ignores_timezone_argument():
    """An explicit UTC offset in the value wins over `timezone`."""
    out = parse_dates(None, ["2023-11-14T23:13:20+01:00"], timezone="Asia/Tokyo")
    assert out == [TS * 1000]


def test_parse_naive_values_use_timezone():
    """Naive values are interpreted in the given timezone."""
    out = parse_dates(None, ["2023-11-14 14:13:20"], timezone="America/Los_Angeles")
    assert out == [TS * 1000]


def test_parse_with_strptime_format():
    """Any other format is a strptime format."""
    assert parse_dates("%d/%m/%Y %H:%M:%S", ["14/11/2023 22:13:20"]) == [TS * 1000]


def test_parse_drops_unparseable_values(caplog):
    """Values that cannot be parsed are skipped and logged."""
    with caplog.at_level(logging.WARNING, logger="fouroneone.dates"):
        out = parse_dates("%Y-%m-%d", ["2023-11-14", "not a date", "2023-11-15"])
    assert out == [1_699_920_000_000, 1_700_006_400_000]
    assert "not a date" in caplog.text


def test_parse_free_form_drops_garbage():
    """Free-form garbage is dropped instead of becoming 0."""
    assert parse_dates(None, ["garbage!!"]) == []


def test_parse_preserves_order():
    """Output order follows input order."""
    assert parse_dates("@", [3, 1, 2]) == [3000, 1000, 2000]


def test_format_date_utc():
    """Dates render as YYYY-MM-DD."""
    assert format_date(TS) == "2023-11-14"


def test_format_date_in_other_timezone_can_change_day():
    """The date is taken in the requested timezone."""
    assert format_date(TS, "Asia/Tokyo") == "2023-11-15"


def test_format_time_includes_offset():
    """Times render as HH:MM:SS+hhmm."""
    assert format_time(TS) == "22:13:20+0000"
    assert format_time(TS, "America/New_York") == "17:13:20-0500"


def test_format_datetime():
    """Datetimes join date and time with a space."""
    assert format_datetime(TS, "Europe/Paris") == "2023-11-14 23:13:20+0100"


def test_format_date_uses_calendar_year_not_iso_week_year():
    """Dec 30 2024 belongs to ISO week-year 2025 but must print 2024."""
    assert format_date(1_735_560_000) == "2024-12-30"


def test_unknown_timezone_raises():
    """An unknown zone is a caller error."""
    with pytest.raises(KeyError):
        format_date(TS, "Not/AZone")
