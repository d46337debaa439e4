"""
feastcal.engines.easter
-----------------------
Easter Sunday in the Gregorian calendar (Meeus/Jones/Butcher).

Easter is the Sunday following the ecclesiastical full moon on or after
March 21. Christian movable feasts are offsets from this date.
"""

from __future__ import annotations

from feastcal.core.errors import UnsupportedYearError
from feastcal.core.types import CalendarDate

# first full year of the Gregorian reform
FIRST_GREGORIAN_YEAR = 1583


def calc_easter_sunday(year: int) -> CalendarDate:
    """
    Meeus/Jones/Butcher. All steps are integer floor division / modulo.
    `p` counts days from the start of March; month = p // 31, day = p % 31 + 1.
    """
    if year < FIRST_GREGORIAN_YEAR:
        raise UnsupportedYearError(f"Easter is only computed for Gregorian years >= {FIRST_GREGORIAN_YEAR}: {year}")

    a = year % 19           # position in the 19-year Metonic cycle
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    m = (32 + 2 * e + 2 * i - h - k) % 7
    n = (a + 11 * h + 22 * m) // 451
    p = h + m - 7 * n + 114

    return CalendarDate(day=p % 31 + 1, month=p // 31, year=year)
