"""Date parsing to millisecond timestamps and consistent date formatting.

Formatting takes the timezone as an argument instead of swapping the
process-wide default back and forth, so it is safe to call from threads.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timezone as dt_timezone
from zoneinfo import ZoneInfo

from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)

RAW_MILLISECONDS = "#"
UNIX_SECONDS = "@"

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S%z"
DATETIME_FORMAT = f"{DATE_FORMAT} {TIME_FORMAT}"


def parse_dates(
    fmt: str | None, dates: Iterable[int | float | str], *, timezone: str = "UTC"
) -> list[int]:
    """Convert dates to unix timestamps in milliseconds.

    Args:
        fmt: How to read `dates`:
            ``"#"`` values already are millisecond timestamps;
            ``"@"`` values are unix timestamps in seconds;
            None or ``""`` values are free-form date strings;
            anything else is a `datetime.strptime` format.
        dates: The values to convert.
        timezone: IANA zone applied to values that carry no UTC offset.

    Returns:
        list[int]: Millisecond timestamps, in input order. Values that cannot
        be parsed are skipped (and logged).
    """
    tz = ZoneInfo(timezone)
    ret: list[int] = []
    for date in dates:
        try:
            ret.append(_parse_one(fmt, date, tz))
        except (ValueError, TypeError, OverflowError) as e:
            logger.warning("Skipping unparseable date %r: %s", date, e)
    return ret


def _parse_one(fmt: str | None, date: int | float | str, tz: ZoneInfo) -> int:
    if fmt == RAW_MILLISECONDS:
        return int(date)
    if fmt == UNIX_SECONDS:
        return int(float(date) * 1000)
    if not isinstance(date, str):
        raise TypeError(f"expected a string, got {type(date).__name__}")
    if not fmt:
        parsed = dateutil_parser.parse(date)
    else:
        parsed = datetime.strptime(date, fmt)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return int(parsed.timestamp()) * 1000


def _localize(ts: float, timezone: str) -> datetime:
    return datetime.fromtimestamp(ts, tz=dt_timezone.utc).astimezone(ZoneInfo(timezone))


def format_date(ts: float, timezone: str = "UTC") -> str:
    """Format a unix timestamp as ``YYYY-MM-DD`` in `timezone`."""
    return _localize(ts, timezone).strftime(DATE_FORMAT)


def format_time(ts: float, timezone: str = "UTC") -> str:
    """Format a unix timestamp as ``HH:MM:SS+hhmm`` in `timezone`."""
    return _localize(ts, timezone).strftime(TIME_FORMAT)


def format_datetime(ts: float, timezone: str = "UTC") -> str:
    """Format a unix timestamp as ``YYYY-MM-DD HH:MM:SS+hhmm`` in `timezone`."""
    return _localize(ts, timezone).strftime(DATETIME_FORMAT)
