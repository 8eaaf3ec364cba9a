"""Custom exceptions for the date_and_time package."""

from __future__ import annotations

from typing import Any


class DateTimeError(Exception):
    """Base exception for all date_and_time errors."""


class InvalidComponentsError(DateTimeError, ValueError):
    """Raised when explicit components fall outside the calendar or clock range.

    Attributes:
        kind:       ``"date"`` or ``"time"``.
        components: The rejected values, keyed by field name.
    """

    def __init__(self, kind: str, message: str, **components: Any) -> None:
        self.kind = kind
        self.components = components
        fields = ", ".join(f"{k}={v!r}" for k, v in components.items())
        super().__init__(f"Invalid {kind} components ({fields}): {message}")
