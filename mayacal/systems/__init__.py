"""Calendar systems packaged for mayacal."""

from __future__ import annotations

from .events import HISTORICAL_EVENTS, HistoricalEvent, event_for_julian_day
from .gregorian import (
    GregorianDate,
    days_in_month,
    gregorian_to_julian_day_number,
    is_leap_year,
    julian_day_number_to_gregorian,
    validate_gregorian,
)
from .mayan import (
    GMT_CORRELATION,
    HAAB_MONTHS,
    LORDS_OF_NIGHT,
    TZOLKIN_KICHE_NAMES,
    TZOLKIN_NAMES,
    WAYEB,
    HaabDate,
    MayanCalendarRound,
    MayanLongCount,
    TzolkinDate,
    calendar_round,
    calendar_round_from_gregorian,
    elapsed_days_since_creation,
    from_long_count,
    gregorian_from_long_count,
    long_count_from_gregorian,
    lord_of_night,
    parse_long_count,
    to_haab,
    to_long_count,
    to_tzolkin,
    year_bearer,
)
from .numerals import bar_and_dot, long_count_bar_and_dot, long_count_numerals, unicode_numeral

__all__ = [
    # Gregorian
    "GregorianDate",
    "days_in_month",
    "gregorian_to_julian_day_number",
    "is_leap_year",
    "julian_day_number_to_gregorian",
    "validate_gregorian",
    # Mayan
    "GMT_CORRELATION",
    "HAAB_MONTHS",
    "LORDS_OF_NIGHT",
    "TZOLKIN_KICHE_NAMES",
    "TZOLKIN_NAMES",
    "WAYEB",
    "HaabDate",
    "MayanCalendarRound",
    "MayanLongCount",
    "TzolkinDate",
    "calendar_round",
    "calendar_round_from_gregorian",
    "elapsed_days_since_creation",
    "from_long_count",
    "gregorian_from_long_count",
    "long_count_from_gregorian",
    "lord_of_night",
    "parse_long_count",
    "to_haab",
    "to_long_count",
    "to_tzolkin",
    "year_bearer",
    # Numerals
    "bar_and_dot",
    "long_count_bar_and_dot",
    "long_count_numerals",
    "unicode_numeral",
    # Events
    "HISTORICAL_EVENTS",
    "HistoricalEvent",
    "event_for_julian_day",
]
