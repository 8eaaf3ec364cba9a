"""Date — a calendar date with no time-of-day, normalized to UTC."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import ClassVar

from date_and_time._internal.clock import now_instant, to_utc
from date_and_time._internal.iso import MAX_YEAR, MIN_YEAR, days_in_month, parse_instant
from date_and_time.exceptions import InvalidComponentsError


@dataclass(frozen=True, order=True, init=False, repr=False)
class Date:
    """Immutable calendar date (proleptic Gregorian, years 1-9999).

    Wraps a UTC instant whose time-of-day is always midnight.  Any instant
    passed in is converted to UTC first and then truncated, so two instants
    on the same UTC calendar day produce equal dates regardless of their
    time-of-day.  Ordering is chronological.

    Examples::

        Date(datetime(2024, 3, 20, 23, 59, tzinfo=UTC))   # 2024-03-20
        Date.from_values(2024, 2, 29)
        Date.try_parse("2024-03-20T23:00:00-02:00")       # 2024-03-21
    """

    _instant: datetime

    min_value: ClassVar[Date]
    max_value: ClassVar[Date]

    def __init__(self, instant: datetime) -> None:
        utc = to_utc(instant)
        object.__setattr__(self, "_instant", datetime(utc.year, utc.month, utc.day, tzinfo=UTC))

    # ── Factory helpers ──────────────────────────────────────

    @classmethod
    def from_values(cls, year: int, month: int, day: int) -> Date:
        """Build a date from explicit components.

        Raises:
            InvalidComponentsError: If the year, month or day is out of range.
        """
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise InvalidComponentsError(
                "date",
                f"year must be between {MIN_YEAR} and {MAX_YEAR}",
                year=year,
                month=month,
                day=day,
            )
        if not 1 <= month <= 12:
            raise InvalidComponentsError(
                "date", "month must be between 1 and 12", year=year, month=month, day=day
            )
        last_day = days_in_month(year, month)
        if not 1 <= day <= last_day:
            raise InvalidComponentsError(
                "date",
                f"day must be between 1 and {last_day}",
                year=year,
                month=month,
                day=day,
            )
        return cls(datetime(year, month, day, tzinfo=UTC))

    @classmethod
    def today(cls) -> Date:
        """The current UTC date, read through the active now override."""
        return cls(now_instant())

    @classmethod
    def try_parse(cls, text: str) -> Date | None:
        """Parse an ISO-8601 date or date-time string, or return ``None``.

        A string without a zone is read as UTC.  A string with an offset is
        converted to UTC first, so the resulting date may differ from the
        one written.
        """
        instant = parse_instant(text)
        if instant is None:
            return None
        return cls(instant)

    # ── Components ───────────────────────────────────────────

    @property
    def year(self) -> int:
        return self._instant.year

    @property
    def month(self) -> int:
        return self._instant.month

    @property
    def day(self) -> int:
        return self._instant.day

    @property
    def weekday(self) -> int:
        """Day of the week, 1 (Monday) to 7 (Sunday)."""
        return self._instant.isoweekday()

    # ── Arithmetic ───────────────────────────────────────────

    def add(self, duration: timedelta) -> Date:
        """Return the date *duration* after this one.

        Sub-day parts of *duration* count from midnight, so ``hours=23``
        leaves the date unchanged.
        """
        return Date(self._instant + duration)

    def subtract(self, duration: timedelta) -> Date:
        return Date(self._instant - duration)

    # ── Formatting ───────────────────────────────────────────

    def to_date_string(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.to_date_string()

    def __repr__(self) -> str:
        return f"Date({self.to_date_string()!r})"


Date.min_value = Date.from_values(MIN_YEAR, 1, 1)
Date.max_value = Date.from_values(MAX_YEAR, 12, 31)
