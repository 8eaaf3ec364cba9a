"""Time — a time of day with no calendar date, normalized to UTC."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import ClassVar

from date_and_time._internal.clock import now_instant, to_utc
from date_and_time.exceptions import InvalidComponentsError

logger = logging.getLogger(__name__)

_FIELD_RE = re.compile(r"\d{1,2}", re.ASCII)


def _anchored(hour: int, minute: int, second: int) -> datetime:
    # Every Time shares the sentinel date 0001-01-01 so only the clock fields
    # take part in comparisons.
    return datetime(1, 1, 1, hour, minute, second, tzinfo=UTC)


@dataclass(frozen=True, order=True, init=False, repr=False)
class Time:
    """Immutable time of day with whole-second precision.

    Any instant passed in is converted to UTC, then only its hour, minute and
    second are kept.  Equality and ordering depend solely on
    :attr:`total_seconds`.
    """

    _instant: datetime

    midnight: ClassVar[Time]

    def __init__(self, instant: datetime) -> None:
        utc = to_utc(instant)
        object.__setattr__(self, "_instant", _anchored(utc.hour, utc.minute, utc.second))

    # ── Factory helpers ──────────────────────────────────────

    @classmethod
    def from_values(cls, hour: int, minute: int, second: int = 0) -> Time:
        """Build a time from explicit components.

        Raises:
            InvalidComponentsError: If hour is outside 0-23 or minute/second
                outside 0-59.
        """
        if not 0 <= hour <= 23:
            raise InvalidComponentsError(
                "time", "hour must be between 0 and 23", hour=hour, minute=minute, second=second
            )
        if not 0 <= minute <= 59:
            raise InvalidComponentsError(
                "time", "minute must be between 0 and 59", hour=hour, minute=minute, second=second
            )
        if not 0 <= second <= 59:
            raise InvalidComponentsError(
                "time", "second must be between 0 and 59", hour=hour, minute=minute, second=second
            )
        return cls(_anchored(hour, minute, second))

    @classmethod
    def now(cls) -> Time:
        """The current UTC time of day, read through the active now override."""
        return cls(now_instant())

    @classmethod
    def try_parse(cls, text: str) -> Time | None:
        """Parse ``HH:MM`` or ``HH:MM:SS``, or return ``None``.

        Fields are one or two ASCII digits.  Hour 24, minute 60 and second 60
        are rejected, as are signs, fractions and zone suffixes.
        """
        fields = text.split(":")
        if not 2 <= len(fields) <= 3:
            logger.debug("Rejected time %r: expected 2 or 3 fields, got %d", text, len(fields))
            return None
        if not all(_FIELD_RE.fullmatch(field) for field in fields):
            logger.debug("Rejected time %r: non-numeric field", text)
            return None

        hour, minute, second = (int(field) for field in [*fields, "0"][:3])
        try:
            return cls.from_values(hour, minute, second)
        except InvalidComponentsError as e:
            logger.debug("Rejected time %r: %s", text, e)
            return None

    # ── Components ───────────────────────────────────────────

    @property
    def hour(self) -> int:
        return self._instant.hour

    @property
    def minute(self) -> int:
        return self._instant.minute

    @property
    def second(self) -> int:
        return self._instant.second

    @property
    def total_seconds(self) -> int:
        """Seconds elapsed since midnight."""
        return self.hour * 3600 + self.minute * 60 + self.second

    # ── Comparison ───────────────────────────────────────────

    def compare_to(self, other: Time) -> int:
        """Signed distance in seconds from *other* to this time.

        Negative when this time is earlier, positive when later, zero when
        equal.  The magnitude is not clamped: 14:31 vs 14:30 gives ``60``.
        """
        return self.total_seconds - other.total_seconds

    # ── Formatting ───────────────────────────────────────────

    def to_time_string(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def __str__(self) -> str:
        return self.to_time_string()

    def __repr__(self) -> str:
        return f"Time({self.to_time_string()!r})"


Time.midnight = Time.from_values(0, 0, 0)
