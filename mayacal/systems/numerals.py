"""Bar-and-dot renderings of Mayan numerals (0..19)."""

from __future__ import annotations

__all__ = [
    "LONG_COUNT_PLACES",
    "MAYAN_ZERO",
    "UNICODE_NUMERAL_BASE",
    "bar_and_dot",
    "long_count_bar_and_dot",
    "long_count_numerals",
    "unicode_numeral",
]

MAYAN_ZERO = "𝋠"
UNICODE_NUMERAL_BASE = 0x1D2E0  # MAYAN NUMERAL ZERO
LONG_COUNT_PLACES = ("Baktun", "Katun", "Tun", "Uinal", "Kin")


def _check_digit(value: int) -> None:
    if not 0 <= value <= 19:
        raise ValueError(f"Mayan numerals cover 0..19, got {value}")


def bar_and_dot(value: int) -> str:
    """Return a stacked text glyph: dots on top, one bar per five."""

    _check_digit(value)
    if value == 0:
        return MAYAN_ZERO
    bars, dots = divmod(value, 5)
    rows: list[str] = []
    if dots:
        rows.append(" ".join("●" * dots))
    rows.extend("▬▬▬" for _ in range(bars))
    return "\n".join(rows)


def unicode_numeral(value: int) -> str:
    _check_digit(value)
    return chr(UNICODE_NUMERAL_BASE + value)


def long_count_numerals(places: tuple[int, ...]) -> str:
    """Render Long Count places as Unicode numerals.

    Values outside 0..19 (a baktun of 20+ or a negative baktun) are shown
    in Arabic digits.
    """

    return " ".join(unicode_numeral(value) if 0 <= value <= 19 else str(value) for value in places)


def long_count_bar_and_dot(places: tuple[int, ...]) -> list[str]:
    """Stack the Long Count places top to bottom, one labelled glyph each.

    Continuation rows of a glyph are indented under the first. Values outside
    0..19 are shown in Arabic digits, as in :func:`long_count_numerals`.
    """

    if len(places) != len(LONG_COUNT_PLACES):
        raise ValueError(f"Expected {len(LONG_COUNT_PLACES)} Long Count places, got {len(places)}")
    width = max(len(label) for label in LONG_COUNT_PLACES) + 1
    rows: list[str] = []
    for label, value in zip(LONG_COUNT_PLACES, places):
        glyph = bar_and_dot(value) if 0 <= value <= 19 else str(value)
        first, *rest = glyph.split("\n")
        rows.append(f"{label:<{width}}{first}")
        rows.extend(" " * width + row for row in rest)
    return rows
