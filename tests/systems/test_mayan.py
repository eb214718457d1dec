from __future__ import annotations

from datetime import datetime

import pytest

from mayacal.exceptions import InvalidLongCount
from mayacal.systems import mayan


def test_mayan_long_count_reaches_baktun_13():
    moment = datetime(2012, 12, 21)

    long_count = mayan.long_count_from_gregorian(moment)
    assert long_count.places() == (13, 0, 0, 0, 0)
    assert mayan.gregorian_from_long_count(long_count).to_date() == moment.date()

    calendar_round = mayan.calendar_round_from_gregorian(moment)
    assert (calendar_round.tzolkin_number, calendar_round.tzolkin_name) == (4, "Ajaw")
    assert (calendar_round.haab_day, calendar_round.haab_month) == (3, "K'ank'in")
    assert calendar_round.lord_of_night.startswith("G9")
    assert str(calendar_round) == "4 Ajaw 3 K'ank'in"


def test_creation_date_anchors():
    assert mayan.elapsed_days_since_creation(mayan.GMT_CORRELATION) == 0
    assert mayan.to_long_count(0).places() == (0, 0, 0, 0, 0)
    assert str(mayan.to_tzolkin(0)) == "4 Ajaw"
    assert str(mayan.to_haab(0)) == "8 Kumk'u"
    assert mayan.lord_of_night(0).startswith("G9")
    assert mayan.lord_of_night(1).startswith("G1")


def test_february_2025_decomposition():
    elapsed = 1876429
    assert str(mayan.to_long_count(elapsed)) == "13.0.12.5.9"
    assert str(mayan.to_tzolkin(elapsed)) == "13 Muluk"
    assert str(mayan.to_haab(elapsed)) == "12 Pax"
    assert str(mayan.year_bearer(elapsed)) == "13 Kab'an"


def test_long_count_for_elapsed_day_count_1842106():
    long_count = mayan.to_long_count(1842106)
    assert long_count.places() == (12, 15, 16, 17, 6)
    assert long_count.total_days() == 1842106


def test_negative_elapsed_days():
    long_count = mayan.to_long_count(-1)
    assert long_count.places() == (-1, 19, 19, 17, 19)
    assert long_count.total_days() == -1
    assert str(mayan.to_tzolkin(-1)) == "3 Kawak"
    assert str(mayan.to_haab(-1)) == "7 Kumk'u"


@pytest.mark.parametrize(
    ("elapsed", "expected", "wayeb"),
    [
        (11, "19 Kumk'u", False),
        (12, "0 Wayeb", True),
        (16, "4 Wayeb", True),
        (17, "0 Pop", False),
    ],
)
def test_haab_wayeb_boundary(elapsed, expected, wayeb):
    haab = mayan.to_haab(elapsed)
    assert str(haab) == expected
    assert haab.is_wayeb is wayeb


def test_haab_positions_at_boundary():
    assert mayan.to_haab(11).position == 359
    assert mayan.to_haab(12).position == 360
    assert mayan.to_haab(12).month_index == 18


def test_kiche_day_names_follow_yucatec_order():
    tzolkin = mayan.to_tzolkin(0)
    assert tzolkin.name == "Ajaw"
    assert tzolkin.kiche_name == "Ajpu"
    assert len(mayan.TZOLKIN_KICHE_NAMES) == len(mayan.TZOLKIN_NAMES) == 20
    assert len(mayan.HAAB_MONTHS) == 18


def test_year_bearer_of_creation_year():
    assert str(mayan.year_bearer(0)) == "7 Eb"


def test_parse_long_count():
    assert mayan.parse_long_count("13.0.0.0.0") == mayan.MayanLongCount(13, 0, 0, 0, 0)
    assert mayan.parse_long_count(" 9.12.11.5.18 ").places() == (9, 12, 11, 5, 18)
    assert mayan.parse_long_count("-1.19.19.17.19").total_days() == -1


@pytest.mark.parametrize("text", ["13.0.0.0", "13.0.0.18.0", "13.20.0.0.0", "13.0.0.0.20", "a.b.c.d.e"])
def test_parse_long_count_rejects_bad_input(text):
    with pytest.raises(InvalidLongCount):
        mayan.parse_long_count(text)


@pytest.mark.parametrize("text", ["１３.0.0.0.0", "13.0.0.0.٥"])
def test_parse_long_count_rejects_non_ascii_digits(text):
    with pytest.raises(InvalidLongCount):
        mayan.parse_long_count(text)


def test_from_long_count_validates_places():
    assert mayan.from_long_count(mayan.MayanLongCount(13, 0, 0, 0, 0)) == 1872000
    with pytest.raises(InvalidLongCount):
        mayan.from_long_count(mayan.MayanLongCount(13, 0, 0, 18, 0))


def test_gregorian_from_creation_long_count():
    creation = mayan.gregorian_from_long_count(mayan.MayanLongCount(0, 0, 0, 0, 0))
    assert creation.isoformat() == "-3113-08-11"


def test_long_count_from_gregorian_rejects_other_types():
    with pytest.raises(TypeError):
        mayan.long_count_from_gregorian("2012-12-21")  # type: ignore[arg-type]
