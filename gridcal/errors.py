"""Error types raised by gridcal (library-facing)."""

from __future__ import annotations

from typing import Any


class CalendarError(ValueError):
    """Base class for every error gridcal raises on bad input."""


class DateParseError(CalendarError):
    """Raised when a date/time input cannot be parsed."""

    def __init__(self, value: Any, reason: str | None = None) -> None:
        self.value = value
        msg = f"Unparseable date input: {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class MissingFieldError(CalendarError):
    """Raised by bulk event insertion when an entry lacks a required field."""

    def __init__(self, field: str, index: int) -> None:
        self.field = field
        self.index = index
        super().__init__(f"events[{index}] is missing required field {field!r}")


class UnsupportedOperationError(CalendarError):
    """Raised for weekday directives that do not name a weekday."""


class InvalidConfigurationError(CalendarError):
    """Raised for configuration values that are out of range or malformed."""


__all__ = [
    "CalendarError",
    "DateParseError",
    "MissingFieldError",
    "UnsupportedOperationError",
    "InvalidConfigurationError",
]
