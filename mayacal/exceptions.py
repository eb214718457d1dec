"""Exception hierarchy shared by the calendar conversion helpers."""

from __future__ import annotations

__all__ = ["MayacalError", "InvalidDate", "InvalidLongCount"]


class MayacalError(Exception):
    """Base class for errors raised by :mod:`mayacal`."""


class InvalidDate(MayacalError, ValueError):
    """Raised when a Gregorian date has an out-of-range month or day."""

    def __init__(
        self,
        message: str,
        *,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> None:
        super().__init__(message)
        self.year = year
        self.month = month
        self.day = day


class InvalidLongCount(MayacalError, ValueError):
    """Raised when a Long Count place value falls outside its radix."""
