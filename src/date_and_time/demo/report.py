# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Builds the demo report from a date line and a time line.

Flow:
1. Read today's date and the current time (through any now override)
2. Parse the entered date and derive its fields and neighbours
3. Parse the entered time and compare it with the current time
4. Return a structured result
"""

from __future__ import annotations

import logging
from datetime import timedelta

from date_and_time import Date, Time

from .schema import DateReport, DemoOutput, TimeReport

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = {
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
    7: "Sunday",
}

_ONE_DAY = timedelta(days=1)


def describe_relation(comparison: int) -> str:
    if comparison < 0:
        return "earlier than"
    if comparison > 0:
        return "later than"
    return "the same as"


def build_date_report(date: Date) -> DateReport:
    return DateReport(
        value=date.to_date_string(),
        year=date.year,
        month=date.month,
        day=date.day,
        weekday=date.weekday,
        weekday_name=WEEKDAY_NAMES[date.weekday],
        tomorrow=None if date == Date.max_value else date.add(_ONE_DAY).to_date_string(),
        yesterday=None if date == Date.min_value else date.subtract(_ONE_DAY).to_date_string(),
    )


def build_time_report(time: Time, now: Time) -> TimeReport:
    return TimeReport(
        value=time.to_time_string(),
        hour=time.hour,
        minute=time.minute,
        second=time.second,
        total_seconds=time.total_seconds,
        relation_to_now=describe_relation(time.compare_to(now)),
    )


class Reporter:
    """Turns raw input lines into a :class:`DemoOutput`.

    Example:
        output = Reporter().run("2024-03-20", "14:30")
    """

    def run(self, date_line: str, time_line: str) -> DemoOutput:
        today = Date.today()
        now = Time.now()
        output = DemoOutput(
            success=True,
            today=today.to_date_string(),
            now=now.to_time_string(),
        )

        date_text = date_line.strip()
        date = Date.try_parse(date_text)
        if date is None:
            output.errors.append(f"Invalid date {date_text!r}. Please use YYYY-MM-DD")
        else:
            output.date = build_date_report(date)

        time_text = time_line.strip()
        time = Time.try_parse(time_text)
        if time is None:
            output.errors.append(f"Invalid time {time_text!r}. Please use HH:MM:SS or HH:MM")
        else:
            output.time = build_time_report(time, now)

        output.success = not output.errors
        if output.errors:
            logger.info("Demo input rejected: %s", "; ".join(output.errors))
        return output
