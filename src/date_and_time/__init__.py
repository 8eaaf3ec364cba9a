"""date_and_time — immutable Date and Time values normalized to UTC.

``Date`` keeps only the calendar date of an instant and ``Time`` only its
time of day; both convert to UTC first.  ``Date.today()`` and ``Time.now()``
read the clock through :func:`now_instant`, which tests can pin with
:func:`override_now`.
"""

from date_and_time._internal.clock import (
    Clock,
    Now,
    SystemClock,
    now_instant,
    now_key,
    override_now,
    with_override,
)
from date_and_time._internal.iso import days_in_month, is_leap_year
from date_and_time.combine import (
    combine,
    current_local_instant,
    current_local_iso_string,
    current_utc_instant,
    current_utc_iso_string,
    decompose,
)
from date_and_time.date import Date
from date_and_time.exceptions import DateTimeError, InvalidComponentsError
from date_and_time.time_of_day import Time

__all__ = [
    "Clock",
    "Date",
    "DateTimeError",
    "InvalidComponentsError",
    "Now",
    "SystemClock",
    "Time",
    "combine",
    "current_local_instant",
    "current_local_iso_string",
    "current_utc_instant",
    "current_utc_iso_string",
    "days_in_month",
    "decompose",
    "is_leap_year",
    "now_instant",
    "now_key",
    "override_now",
    "with_override",
]
