"""Proleptic Gregorian calendar helpers and Julian Day Number transforms.

Dates use astronomical year numbering (year ``0`` is 1 BCE, year ``-1`` is
2 BCE) so the arithmetic stays continuous across the era boundary.  The
Julian Day Number formulas are the integer forms popularised by Fliegel &
Van Flandern (1968) and restated in Claus Tøndering's *Calendar FAQ*; they
treat January and February as months 13 and 14 of the preceding year.
Floor division keeps both directions exact for every integer input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo

from ..exceptions import InvalidDate

__all__ = [
    "GregorianDate",
    "is_leap_year",
    "days_in_month",
    "validate_gregorian",
    "gregorian_to_julian_day_number",
    "julian_day_number_to_gregorian",
]

_MONTH_LENGTHS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_ISO_PATTERN = re.compile(r"^(-?\d{4,})-(\d{2})-(\d{2})$", re.ASCII)


def is_leap_year(year: int) -> bool:
    """Return ``True`` when ``year`` is a Gregorian leap year."""

    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidDate(f"Month must be between 1 and 12, got {month}", year=year, month=month)
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def validate_gregorian(year: int, month: int, day: int) -> None:
    """Raise :class:`InvalidDate` unless ``year-month-day`` is a real date."""

    for label, value in (("year", year), ("month", month), ("day", day)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDate(f"{label} must be an integer, got {type(value).__name__}")
    limit = days_in_month(year, month)
    if not 1 <= day <= limit:
        raise InvalidDate(
            f"Day {day} is out of range for {year:04d}-{month:02d} (1..{limit})",
            year=year,
            month=month,
            day=day,
        )


def gregorian_to_julian_day_number(year: int, month: int, day: int) -> int:
    """Return the Julian Day Number of a proleptic Gregorian date.

    Raises
    ------
    InvalidDate
        If ``month`` is outside ``1..12`` or ``day`` does not exist in that
        month (leap years included).
    """

    validate_gregorian(year, month, day)
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def julian_day_number_to_gregorian(jdn: int) -> "GregorianDate":
    """Return the proleptic Gregorian date for ``jdn``."""

    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - 146097 * b // 4
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return GregorianDate(year, month, day)


@dataclass(frozen=True, order=True)
class GregorianDate:
    """Validated proleptic Gregorian calendar date without a time component."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        validate_gregorian(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, moment: date | datetime) -> "GregorianDate":
        if isinstance(moment, datetime):
            moment = moment.date()
        elif not isinstance(moment, date):
            raise TypeError("moment must be a date or datetime instance")
        return cls(moment.year, moment.month, moment.day)

    @classmethod
    def from_iso(cls, text: str) -> "GregorianDate":
        """Parse a strict ``YYYY-MM-DD`` string (leading ``-`` for BCE years)."""

        match = _ISO_PATTERN.match(text.strip())
        if match is None:
            raise InvalidDate(f"Expected an ISO date like 2025-02-05, got {text!r}")
        year, month, day = (int(part) for part in match.groups())
        return cls(year, month, day)

    @classmethod
    def from_julian_day_number(cls, jdn: int) -> "GregorianDate":
        return julian_day_number_to_gregorian(jdn)

    @classmethod
    def today(cls, timezone: str = "UTC") -> "GregorianDate":
        return cls.from_date(datetime.now(ZoneInfo(timezone)))

    def julian_day_number(self) -> int:
        return gregorian_to_julian_day_number(self.year, self.month, self.day)

    def to_date(self) -> date:
        """Return a :class:`datetime.date` (only years 1..9999 are representable)."""

        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()
