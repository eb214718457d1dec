"""Gregorian → Julian Day Number → Long Count / Tzolk'in / Haab pipeline."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from .systems.events import HistoricalEvent, event_for_julian_day
from .systems.gregorian import GregorianDate
from .systems.mayan import (
    HaabDate,
    MayanLongCount,
    TzolkinDate,
    elapsed_days_since_creation,
    lord_of_night,
    to_haab,
    to_long_count,
    to_tzolkin,
    year_bearer,
)
from .systems.numerals import long_count_bar_and_dot, long_count_numerals

__all__ = [
    "ConversionResult",
    "convert",
    "convert_julian_day",
    "convert_range",
    "format_report",
]

LOG = logging.getLogger(__name__)

DateLike = GregorianDate | date | datetime


@dataclass(frozen=True)
class ConversionResult:
    """Every calendar representation derived from a single civil date."""

    gregorian: GregorianDate
    julian_day_number: int
    elapsed_days: int
    long_count: MayanLongCount
    tzolkin: TzolkinDate
    haab: HaabDate
    lord_of_night: str
    year_bearer: TzolkinDate
    event: HistoricalEvent | None = None

    def as_dict(self, *, extended: bool = False) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "gregorian": self.gregorian.isoformat(),
            "julianDayNumber": self.julian_day_number,
            "elapsedDays": self.elapsed_days,
            "longCount": {
                "baktun": self.long_count.baktun,
                "katun": self.long_count.katun,
                "tun": self.long_count.tun,
                "uinal": self.long_count.uinal,
                "kin": self.long_count.kin,
            },
            "tzolkin": {"number": self.tzolkin.number, "name": self.tzolkin.name},
            "haab": {"day": self.haab.day, "name": self.haab.name},
        }
        if extended:
            payload["tzolkin"]["kicheName"] = self.tzolkin.kiche_name
            payload["lordOfNight"] = self.lord_of_night
            payload["yearBearer"] = {
                "number": self.year_bearer.number,
                "name": self.year_bearer.name,
            }
            payload["event"] = self.event.description if self.event else None
        return payload


def _coerce(moment: DateLike) -> GregorianDate:
    if isinstance(moment, GregorianDate):
        return moment
    return GregorianDate.from_date(moment)


def convert_julian_day(jdn: int) -> ConversionResult:
    """Return the conversion for an absolute Julian Day Number."""

    gregorian = GregorianDate.from_julian_day_number(jdn)
    elapsed = elapsed_days_since_creation(jdn)
    result = ConversionResult(
        gregorian=gregorian,
        julian_day_number=jdn,
        elapsed_days=elapsed,
        long_count=to_long_count(elapsed),
        tzolkin=to_tzolkin(elapsed),
        haab=to_haab(elapsed),
        lord_of_night=lord_of_night(elapsed),
        year_bearer=year_bearer(elapsed),
        event=event_for_julian_day(jdn),
    )
    LOG.debug(
        "Converted %s (JDN %d) to %s, %s, %s",
        gregorian,
        jdn,
        result.long_count,
        result.tzolkin,
        result.haab,
    )
    return result


def convert(moment: DateLike) -> ConversionResult:
    """Convert a Gregorian date into its Mayan calendar representations.

    Parameters
    ----------
    moment:
        A :class:`GregorianDate`, :class:`datetime.date` or
        :class:`datetime.datetime` (the time of day is ignored).

    Raises
    ------
    InvalidDate
        If the date does not exist in the proleptic Gregorian calendar.
    TypeError
        If ``moment`` is not a supported date type.
    """

    gregorian = _coerce(moment)
    return convert_julian_day(gregorian.julian_day_number())


def convert_range(start: DateLike, end: DateLike) -> Iterator[ConversionResult]:
    """Yield conversions for every day from ``start`` through ``end`` inclusive."""

    first = _coerce(start).julian_day_number()
    last = _coerce(end).julian_day_number()
    if last < first:
        raise ValueError(f"Range end {end} precedes start {start}")
    for jdn in range(first, last + 1):
        yield convert_julian_day(jdn)


def format_report(result: ConversionResult, *, extended: bool = False, numerals: bool = False) -> str:
    """Render ``result`` in the reference plain-text layout."""

    lines = [
        f"Gregorian Date: {result.gregorian.isoformat()}",
        f"Julian Day Number: {result.julian_day_number}",
        f"Days since Mayan creation (0.0.0.0.0): {result.elapsed_days}",
        f"Long Count: {result.long_count}",
        f"Tzolkin Date: {result.tzolkin}",
        f"Haab Date: {result.haab}",
    ]
    if numerals:
        places = result.long_count.places()
        lines.append(f"Long Count Numerals: {long_count_numerals(places)}")
        lines.append("Long Count Bar-and-Dot:")
        lines.extend(f"  {row}" for row in long_count_bar_and_dot(places))
    if extended:
        lines.append(f"Tzolkin Date (K'iche'): {result.tzolkin.number} {result.tzolkin.kiche_name}")
        lines.append(f"Lord of the Night: {result.lord_of_night}")
        lines.append(f"Year Bearer: {result.year_bearer}")
        if result.event is not None:
            lines.append(f"Historical Event: {result.event.description}")
    return "\n".join(lines)
