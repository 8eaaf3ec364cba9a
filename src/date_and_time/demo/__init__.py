# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Illustrative stdin demo for Date and Time.

Usage:
    python -m date_and_time.demo < input.txt

Exports:
    Reporter: Builds the report from a date line and a time line
    DemoOutput: JSON output schema
    DemoSettings: Environment-driven settings
"""

from .report import Reporter, build_date_report, build_time_report, describe_relation
from .schema import DateReport, DemoOutput, DemoSettings, TimeReport

__all__ = [
    "DateReport",
    "DemoOutput",
    "DemoSettings",
    "Reporter",
    "TimeReport",
    "build_date_report",
    "build_time_report",
    "describe_relation",
]
