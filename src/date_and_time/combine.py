"""Helpers that join a Date and a Time into one instant, and split it again."""

from __future__ import annotations

from datetime import UTC, datetime

from date_and_time._internal.iso import format_instant
from date_and_time.date import Date
from date_and_time.time_of_day import Time


def combine(date: Date, time: Time) -> datetime:
    """Return the UTC instant at *time* on *date*."""
    return datetime(
        date.year,
        date.month,
        date.day,
        time.hour,
        time.minute,
        time.second,
        tzinfo=UTC,
    )


def decompose(instant: datetime) -> tuple[Date, Time]:
    """Split *instant* into its UTC date and UTC time of day."""
    return Date(instant), Time(instant)


def current_utc_instant() -> datetime:
    """The current instant in UTC, truncated to whole seconds.

    Date and time are read separately, so a provider that returns a different
    value on every call may contribute a different instant to each half.
    """
    return combine(Date.today(), Time.now())


def current_utc_iso_string() -> str:
    """E.g. ``2024-03-15T14:30:15.000Z``."""
    return format_instant(current_utc_instant())


def current_local_instant() -> datetime:
    """:func:`current_utc_instant` in the process's local offset, for display."""
    return current_utc_instant().astimezone()


def current_local_iso_string() -> str:
    return format_instant(current_local_instant())
