"""ISO-8601 subset parser and instant formatter.

The parser accepts a calendar date optionally followed by a time of day and
a zone designator::

    2024-03-20
    20240320
    2024-03-20T14:30
    2024-03-20 14:30:15.250
    2024-03-20T23:00:00-02:00
    2024-03-20T23:00:00Z

A zone designator is only valid after a time of day.  Strings without a zone
are taken to be UTC already; strings with one are converted to UTC, which may
move the calendar date by a day.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime, timedelta, timezone

logger = logging.getLogger(__name__)

MIN_YEAR = 1
MAX_YEAR = 9999

_DATE_TIME_RE = re.compile(
    r"""
    (?P<year>[+-]?\d{4,6}) -? (?P<month>\d\d) -? (?P<day>\d\d)
    (?:
        [Tt\x20] (?P<hour>\d\d)
        (?: :? (?P<minute>\d\d)
            (?: :? (?P<second>\d\d) (?: [.,] (?P<fraction>\d+) )? )?
        )?
        (?P<zone>
            \x20? [Zz]
          | \x20? (?P<sign>[-+]) (?P<offset_hour>\d\d) (?: :? (?P<offset_minute>\d\d) )?
        )?
    )?
    """,
    re.VERBOSE | re.ASCII,
)


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def _reject(text: str, reason: str) -> None:
    logger.debug("Rejected date-time %r: %s", text, reason)


def parse_instant(text: str) -> datetime | None:
    """Parse *text* into an aware UTC datetime, or return ``None``.

    Sub-second digits are accepted and dropped.  Out-of-range fields,
    including hour 24 and leap second 60, make the whole string invalid.
    """
    match = _DATE_TIME_RE.fullmatch(text)
    if match is None:
        _reject(text, "does not match the ISO-8601 date-time grammar")
        return None

    year = int(match["year"])
    month = int(match["month"])
    day = int(match["day"])
    if not MIN_YEAR <= year <= MAX_YEAR:
        _reject(text, f"year {year} out of range")
        return None
    if not 1 <= month <= 12:
        _reject(text, f"month {month} out of range")
        return None
    if not 1 <= day <= days_in_month(year, month):
        _reject(text, f"day {day} out of range")
        return None

    hour = int(match["hour"] or 0)
    minute = int(match["minute"] or 0)
    second = int(match["second"] or 0)
    if hour > 23 or minute > 59 or second > 59:
        _reject(text, f"time {hour:02d}:{minute:02d}:{second:02d} out of range")
        return None

    instant = datetime(year, month, day, hour, minute, second, tzinfo=UTC)

    if match["sign"] is None:
        # No zone or an explicit Z: the fields already describe UTC.
        return instant

    offset_hour = int(match["offset_hour"])
    offset_minute = int(match["offset_minute"] or 0)
    if offset_hour > 23 or offset_minute > 59:
        _reject(text, f"offset {offset_hour:02d}:{offset_minute:02d} out of range")
        return None
    offset = timedelta(hours=offset_hour, minutes=offset_minute)
    if match["sign"] == "-":
        offset = -offset

    try:
        return instant.replace(tzinfo=timezone(offset)).astimezone(UTC)
    except OverflowError:
        _reject(text, "UTC conversion leaves the representable range")
        return None


def format_instant(instant: datetime) -> str:
    """Render an aware *instant* as ISO-8601 with millisecond precision.

    UTC instants end in ``Z``; any other offset is written as ``+HH:MM``.
    """
    if instant.tzinfo is None:
        raise ValueError("cannot format a naive datetime")
    text = instant.isoformat(timespec="milliseconds")
    if instant.tzinfo is UTC:
        return text.removesuffix("+00:00") + "Z"
    return text
