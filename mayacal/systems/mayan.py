"""Mayan calendrical helpers following the GMT correlation (584283).

The algorithms implement the transformations documented in the
Smithsonian Institution's *Handbook of Maya Glyphs* and in
Dershowitz & Reingold's *Calendrical Calculations* (4th ed.).  Every
helper works on the count of days elapsed since the creation date
0.0.0.0.0 (11 August 3114 BCE, proleptic Gregorian), which falls on
4 Ajaw 8 Kumk'u under the Goodman–Martínez–Thompson correlation.

Python's floor division and modulo already round toward negative
infinity, so the decompositions stay in range for dates that precede
the creation date as well.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime

from ..exceptions import InvalidLongCount
from .gregorian import GregorianDate

__all__ = [
    "TZOLKIN_NAMES",
    "TZOLKIN_KICHE_NAMES",
    "HAAB_MONTHS",
    "WAYEB",
    "LORDS_OF_NIGHT",
    "GMT_CORRELATION",
    "MayanLongCount",
    "TzolkinDate",
    "HaabDate",
    "MayanCalendarRound",
    "elapsed_days_since_creation",
    "to_long_count",
    "from_long_count",
    "parse_long_count",
    "to_tzolkin",
    "to_haab",
    "lord_of_night",
    "year_bearer",
    "calendar_round",
    "long_count_from_gregorian",
    "gregorian_from_long_count",
    "calendar_round_from_gregorian",
]

TZOLKIN_NAMES: tuple[str, ...] = (
    "Imix",
    "Ik'",
    "Ak'b'al",
    "K'an",
    "Chikchan",
    "Kimi",
    "Manik'",
    "Lamat",
    "Muluk",
    "Ok",
    "Chuwen",
    "Eb",
    "B'en",
    "Ix",
    "Men",
    "K'ib",
    "Kab'an",
    "Etz'nab",
    "Kawak",
    "Ajaw",
)

# Highland K'iche' names for the same twenty day signs, in the same order.
TZOLKIN_KICHE_NAMES: tuple[str, ...] = (
    "Imox",
    "Iq'",
    "Aq'ab'al",
    "K'at",
    "Kan",
    "Kame",
    "Kej",
    "Q'anil",
    "Toj",
    "Tz'i'",
    "B'atz'",
    "E",
    "Aj",
    "I'x",
    "Tz'ikin",
    "Ajmaq",
    "No'j",
    "Tijax",
    "Kawoq",
    "Ajpu",
)

HAAB_MONTHS: tuple[str, ...] = (
    "Pop",
    "Wo",
    "Sip",
    "Sotz'",
    "Sek",
    "Xul",
    "Yaxk'in",
    "Mol",
    "Ch'en",
    "Yax",
    "Sak",
    "Keh",
    "Mak",
    "K'ank'in",
    "Muwan",
    "Pax",
    "K'ayab",
    "Kumk'u",
)

WAYEB = "Wayeb"

LORDS_OF_NIGHT: tuple[str, ...] = (
    "G1 (Itzamna)",
    "G2",
    "G3",
    "G4",
    "G5",
    "G6",
    "G7",
    "G8",
    "G9 (Bolon Yokte')",
)

GMT_CORRELATION = 584283  # Goodman–Martínez–Thompson

_TZOLKIN_NUMBER_OFFSET = 3
_TZOLKIN_NAME_OFFSET = 19
_HAAB_OFFSET = 348
_LORD_OFFSET = 8

_LONG_COUNT_PATTERN = re.compile(r"^(-?\d+)\.(\d+)\.(\d+)\.(\d+)\.(\d+)$", re.ASCII)


@dataclass(frozen=True)
class MayanLongCount:
    """Long Count representation (baktun.katun.tun.uinal.kin)."""

    baktun: int
    katun: int
    tun: int
    uinal: int
    kin: int

    def total_days(self) -> int:
        return (
            self.baktun * 144000
            + self.katun * 7200
            + self.tun * 360
            + self.uinal * 20
            + self.kin
        )

    def places(self) -> tuple[int, int, int, int, int]:
        return (self.baktun, self.katun, self.tun, self.uinal, self.kin)

    def __str__(self) -> str:
        return ".".join(str(value) for value in self.places())


@dataclass(frozen=True)
class TzolkinDate:
    """Position in the 260-day count: a number 1..13 paired with a day sign."""

    number: int
    name_index: int

    @property
    def name(self) -> str:
        return TZOLKIN_NAMES[self.name_index]

    @property
    def kiche_name(self) -> str:
        return TZOLKIN_KICHE_NAMES[self.name_index]

    def __str__(self) -> str:
        return f"{self.number} {self.name}"


@dataclass(frozen=True)
class HaabDate:
    """Position in the 365-day year.

    ``month_index`` 0..17 addresses the named twenty-day months; index 18
    is the five-day Wayeb closing the year.
    """

    day: int
    month_index: int

    @property
    def is_wayeb(self) -> bool:
        return self.month_index == len(HAAB_MONTHS)

    @property
    def name(self) -> str:
        if self.is_wayeb:
            return WAYEB
        return HAAB_MONTHS[self.month_index]

    @property
    def position(self) -> int:
        """Day of the Haab year, 0 (0 Pop) through 364 (4 Wayeb)."""

        return self.month_index * 20 + self.day

    def __str__(self) -> str:
        return f"{self.day} {self.name}"


@dataclass(frozen=True)
class MayanCalendarRound:
    """Calendar round pair combining Tzolk'in and Haab designations."""

    tzolkin: TzolkinDate
    haab: HaabDate
    lord_of_night: str

    @property
    def tzolkin_number(self) -> int:
        return self.tzolkin.number

    @property
    def tzolkin_name(self) -> str:
        return self.tzolkin.name

    @property
    def haab_day(self) -> int:
        return self.haab.day

    @property
    def haab_month(self) -> str:
        return self.haab.name

    def __str__(self) -> str:
        return f"{self.tzolkin} {self.haab}"


def _validate_long_count(long_count: MayanLongCount) -> None:
    if not (0 <= long_count.katun < 20):
        raise InvalidLongCount("Katun must be between 0 and 19")
    if not (0 <= long_count.tun < 20):
        raise InvalidLongCount("Tun must be between 0 and 19")
    if not (0 <= long_count.uinal < 18):
        raise InvalidLongCount("Uinal must be between 0 and 17")
    if not (0 <= long_count.kin < 20):
        raise InvalidLongCount("Kin must be between 0 and 19")


def _coerce_gregorian(moment: GregorianDate | date | datetime) -> GregorianDate:
    if isinstance(moment, GregorianDate):
        return moment
    return GregorianDate.from_date(moment)


def elapsed_days_since_creation(jdn: int) -> int:
    """Return days elapsed since 0.0.0.0.0; negative before the creation date."""

    return jdn - GMT_CORRELATION


def to_long_count(elapsed: int) -> MayanLongCount:
    """Decompose ``elapsed`` days into Long Count places.

    Negative counts yield a negative baktun while the lower places stay
    within their radices, so :meth:`MayanLongCount.total_days` always
    reproduces ``elapsed``.
    """

    baktun, remainder = divmod(elapsed, 144000)
    katun, remainder = divmod(remainder, 7200)
    tun, remainder = divmod(remainder, 360)
    uinal, kin = divmod(remainder, 20)
    return MayanLongCount(baktun, katun, tun, uinal, kin)


def from_long_count(long_count: MayanLongCount) -> int:
    """Return the elapsed-day count for a validated Long Count."""

    _validate_long_count(long_count)
    return long_count.total_days()


def parse_long_count(text: str) -> MayanLongCount:
    """Parse dotted ``baktun.katun.tun.uinal.kin`` notation."""

    match = _LONG_COUNT_PATTERN.match(text.strip())
    if match is None:
        raise InvalidLongCount(f"Expected a Long Count like 13.0.0.0.0, got {text!r}")
    long_count = MayanLongCount(*(int(part) for part in match.groups()))
    _validate_long_count(long_count)
    return long_count


def to_tzolkin(elapsed: int) -> TzolkinDate:
    number = (elapsed + _TZOLKIN_NUMBER_OFFSET) % 13 + 1
    name_index = (elapsed + _TZOLKIN_NAME_OFFSET) % 20
    return TzolkinDate(number, name_index)


def to_haab(elapsed: int) -> HaabDate:
    position = (elapsed + _HAAB_OFFSET) % 365
    if position < 360:
        month_index, day = divmod(position, 20)
        return HaabDate(day, month_index)
    return HaabDate(position - 360, len(HAAB_MONTHS))


def lord_of_night(elapsed: int) -> str:
    """Return the Lord of the Night (G1..G9) ruling ``elapsed``."""

    return LORDS_OF_NIGHT[(elapsed + _LORD_OFFSET) % 9]


def year_bearer(elapsed: int) -> TzolkinDate:
    """Return the Tzolk'in date on which the current Haab year began (0 Pop)."""

    return to_tzolkin(elapsed - to_haab(elapsed).position)


def calendar_round(elapsed: int) -> MayanCalendarRound:
    return MayanCalendarRound(to_tzolkin(elapsed), to_haab(elapsed), lord_of_night(elapsed))


def long_count_from_gregorian(moment: GregorianDate | date | datetime) -> MayanLongCount:
    """Return the Mayan Long Count for a Gregorian calendar date."""

    gregorian = _coerce_gregorian(moment)
    return to_long_count(elapsed_days_since_creation(gregorian.julian_day_number()))


def gregorian_from_long_count(long_count: MayanLongCount) -> GregorianDate:
    """Convert a Mayan Long Count designation to the Gregorian calendar."""

    jdn = from_long_count(long_count) + GMT_CORRELATION
    return GregorianDate.from_julian_day_number(jdn)


def calendar_round_from_gregorian(moment: GregorianDate | date | datetime) -> MayanCalendarRound:
    """Return the calendar round (Tzolk'in + Haab) for a Gregorian date."""

    gregorian = _coerce_gregorian(moment)
    return calendar_round(elapsed_days_since_creation(gregorian.julian_day_number()))
