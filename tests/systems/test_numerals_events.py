from __future__ import annotations

import pytest

from mayacal.systems.events import HISTORICAL_EVENTS, event_for_julian_day
from mayacal.systems.mayan import GMT_CORRELATION
from mayacal.systems.numerals import (
    MAYAN_ZERO,
    bar_and_dot,
    long_count_bar_and_dot,
    long_count_numerals,
    unicode_numeral,
)


def test_bar_and_dot_layouts():
    assert bar_and_dot(0) == MAYAN_ZERO
    assert bar_and_dot(3) == "● ● ●"
    assert bar_and_dot(7) == "● ●\n▬▬▬"
    assert bar_and_dot(10) == "▬▬▬\n▬▬▬"
    assert bar_and_dot(19).count("▬▬▬") == 3


def test_unicode_numerals():
    assert unicode_numeral(0) == "\U0001D2E0"
    assert unicode_numeral(13) == "\U0001D2ED"
    assert long_count_numerals((13, 0, 0, 0, 0)).split(" ")[0] == "\U0001D2ED"
    assert long_count_numerals((-1, 19, 19, 17, 19)).startswith("-1 ")


@pytest.mark.parametrize("value", [-1, 20])
def test_numerals_out_of_range(value):
    with pytest.raises(ValueError):
        bar_and_dot(value)
    with pytest.raises(ValueError):
        unicode_numeral(value)


def test_long_count_bar_and_dot_stacks_places():
    rows = long_count_bar_and_dot((13, 0, 0, 7, 5))
    assert rows == [
        "Baktun ● ● ●",
        "       ▬▬▬",
        "       ▬▬▬",
        f"Katun  {MAYAN_ZERO}",
        f"Tun    {MAYAN_ZERO}",
        "Uinal  ● ●",
        "       ▬▬▬",
        "Kin    ▬▬▬",
    ]


def test_long_count_bar_and_dot_shows_out_of_range_baktun_as_digits():
    rows = long_count_bar_and_dot((-1, 19, 19, 17, 19))
    assert rows[0] == "Baktun -1"
    with pytest.raises(ValueError):
        long_count_bar_and_dot((13, 0, 0))


def test_creation_event_lookup():
    event = event_for_julian_day(GMT_CORRELATION)
    assert event is not None
    assert "creation" in event.description


def test_no_event_on_ordinary_day():
    assert event_for_julian_day(2460712) is None


def test_event_dates_are_distinct():
    jdns = [event.julian_day_number() for event in HISTORICAL_EVENTS]
    assert len(set(jdns)) == len(jdns)
