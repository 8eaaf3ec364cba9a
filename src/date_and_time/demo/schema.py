# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for the demo's settings and JSON output."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DemoSettings(BaseSettings):
    """Settings read from the environment.

    Attributes:
        verbose: Emit DEBUG logs for the package (``DATE_AND_TIME_VERBOSE``)
        log_json: Render log lines as JSON (``DATE_AND_TIME_LOG_JSON``)
    """

    verbose: bool = False
    log_json: bool = False

    model_config = SettingsConfigDict(env_prefix="DATE_AND_TIME_")


class DateReport(BaseModel):
    """Fields derived from the entered date.

    Attributes:
        value: Normalized ``YYYY-MM-DD`` string
        weekday: 1 (Monday) to 7 (Sunday)
        weekday_name: English weekday name
        tomorrow: The following date, or None past the last representable day
        yesterday: The preceding date, or None before the first representable day
    """

    value: str
    year: int
    month: int
    day: int
    weekday: int
    weekday_name: str
    tomorrow: str | None
    yesterday: str | None


class TimeReport(BaseModel):
    """Fields derived from the entered time.

    Attributes:
        value: Normalized ``HH:MM:SS`` string
        total_seconds: Seconds since midnight
        relation_to_now: ``"earlier than"``, ``"later than"`` or ``"the same as"``
    """

    value: str
    hour: int
    minute: int
    second: int
    total_seconds: int
    relation_to_now: str


class DemoOutput(BaseModel):
    """Complete output written to stdout.

    Attributes:
        success: Whether both inputs parsed
        today: Current date at the time of the run
        now: Current time of day at the time of the run
        date: Report for the entered date, if it parsed
        time: Report for the entered time, if it parsed
        errors: One message per input that failed to parse
        error: Unexpected error message, if any
        error_type: Unexpected error class name, if any
    """

    success: bool
    today: str | None = None
    now: str | None = None
    date: DateReport | None = None
    time: TimeReport | None = None
    errors: list[str] = Field(default_factory=list)
    error: str | None = None
    error_type: str | None = None
