"""Gregorian to Mayan Long Count, Tzolk'in and Haab conversion."""

from __future__ import annotations

from .converter import ConversionResult, convert, convert_julian_day, convert_range, format_report
from .exceptions import InvalidDate, InvalidLongCount, MayacalError
from .systems import (
    GMT_CORRELATION,
    GregorianDate,
    HaabDate,
    MayanLongCount,
    TzolkinDate,
    elapsed_days_since_creation,
    gregorian_to_julian_day_number,
    to_haab,
    to_long_count,
    to_tzolkin,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionResult",
    "GMT_CORRELATION",
    "GregorianDate",
    "HaabDate",
    "InvalidDate",
    "InvalidLongCount",
    "MayacalError",
    "MayanLongCount",
    "TzolkinDate",
    "convert",
    "convert_julian_day",
    "convert_range",
    "elapsed_days_since_creation",
    "format_report",
    "gregorian_to_julian_day_number",
    "to_haab",
    "to_long_count",
    "to_tzolkin",
    "__version__",
]
