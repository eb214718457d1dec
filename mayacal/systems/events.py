"""Notable Maya dates keyed by proleptic Gregorian date."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from .gregorian import gregorian_to_julian_day_number

__all__ = ["HistoricalEvent", "HISTORICAL_EVENTS", "event_for_julian_day"]


@dataclass(frozen=True)
class HistoricalEvent:
    year: int
    month: int
    day: int
    description: str

    def julian_day_number(self) -> int:
        return gregorian_to_julian_day_number(self.year, self.month, self.day)


HISTORICAL_EVENTS: tuple[HistoricalEvent, ...] = (
    HistoricalEvent(-3113, 8, 11, "The Maya creation date (0.0.0.0.0)"),
    HistoricalEvent(292, 1, 1, "Earliest Long Count date found"),
    HistoricalEvent(378, 1, 16, "Teotihuacan influence over Tikal begins"),
    HistoricalEvent(426, 1, 1, "Dynasty of Copán founded"),
    HistoricalEvent(562, 1, 1, "Tikal defeated by Calakmul"),
    HistoricalEvent(682, 6, 3, "Jasaw Chan K'awiil I crowned in Tikal"),
    HistoricalEvent(751, 1, 1, "Uxmal emerges as a major power"),
    HistoricalEvent(869, 12, 1, "Tikal abandoned"),
    HistoricalEvent(987, 1, 1, "Toltec-Maya rule in Chichén Itzá begins"),
    HistoricalEvent(1200, 1, 1, "Decline of Chichén Itzá"),
    HistoricalEvent(1511, 8, 1, "Spanish make first contact with the Maya"),
    HistoricalEvent(1697, 3, 13, "Spanish conquer Tayasal, the last Maya city"),
)


@lru_cache(maxsize=1)
def _events_by_jdn() -> dict[int, HistoricalEvent]:
    return {event.julian_day_number(): event for event in HISTORICAL_EVENTS}


def event_for_julian_day(jdn: int) -> HistoricalEvent | None:
    """Return the notable event falling on ``jdn``, if any."""

    return _events_by_jdn().get(jdn)
