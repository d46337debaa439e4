from __future__ import annotations

from .errors import InvalidKeyError, InvalidRuleParameterError
from .types import CalendarDate, Weekday

# JDN of 1970-01-01, a Thursday
JDN_UNIX_EPOCH = 2440588
WEEK = 7


def to_jdn(d: CalendarDate) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> CalendarDate:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return CalendarDate(day=day, month=month, year=year)

def add_days(base: CalendarDate, delta_days: int) -> CalendarDate:
    """Date `delta_days` after (negative: before) `base`."""
    return from_jdn(to_jdn(base) + delta_days)

def get_weekday(d: CalendarDate) -> Weekday:
    days = to_jdn(d) - JDN_UNIX_EPOCH
    return Weekday((days + 3) % WEEK + 1)

def _as_weekday(weekday: int) -> Weekday:
    try:
        return Weekday(weekday)
    except ValueError as e:
        raise InvalidRuleParameterError(f"weekday must be in 1..7 (Monday=1), got {weekday!r}") from e

def calc_date_by_wdmy(week_count: int, weekday: Weekday, month: int, year: int) -> CalendarDate:
    """
    The week_count-th `weekday` in month/year.

    week_count == 0 selects the last occurrence: the search is anchored at the
    1st of the following month and steps back one week. Counts beyond the
    month's last occurrence continue into the next month.

    calc_date_by_wdmy(1, Weekday.WEDNESDAY, 9, 2015)  -> first Wednesday, Sep 2015
    calc_date_by_wdmy(0, Weekday.SUNDAY, 9, 2015)     -> last Sunday, Sep 2015
    """
    if week_count < 0:
        raise InvalidRuleParameterError(f"week_count must be >= 0, got {week_count}")
    weekday = _as_weekday(weekday)

    if week_count == 0:
        month += 1
        if month > 12:
            month = 1
            year += 1

    first = CalendarDate(day=1, month=month, year=year)

    # first occurrence on/after the 1st consumes one count
    delta = weekday - get_weekday(first)
    if delta >= 0:
        week_count -= 1

    return add_days(first, delta + week_count * WEEK)

def calc_date_by_nth_weekday_relative_to_date(
    day: int, month: int, year: int, week_count: int, weekday: Weekday
) -> CalendarDate:
    """
    The week_count-th `weekday` before (week_count < 0) or after (week_count > 0)
    the reference date day/month/year. The reference date itself never counts.

    4th Advent 2015 (first Sunday before Christmas):
        calc_date_by_nth_weekday_relative_to_date(25, 12, 2015, -1, Weekday.SUNDAY)
    """
    if week_count == 0:
        raise InvalidRuleParameterError("week_count must not be 0")
    weekday = _as_weekday(weekday)

    reference = CalendarDate(day=day, month=month, year=year)

    # nearest occurrence already lies in the requested direction
    delta = weekday - get_weekday(reference)
    if week_count < 0 and delta < 0:
        week_count += 1
    elif week_count > 0 and delta > 0:
        week_count -= 1

    return add_days(reference, delta + week_count * WEEK)

# ------------------------------------------------------------
# Date keys ('YYYYMMDD')
# ------------------------------------------------------------

def build_key(d: CalendarDate) -> str:
    return f"{d.year:04d}{d.month:02d}{d.day:02d}"

def check_key(key: str) -> str:
    if not isinstance(key, str) or len(key) != 8 or not (key.isascii() and key.isdigit()):
        raise InvalidKeyError(f"Invalid key format: {key!r} (expected 'YYYYMMDD')")
    return key

def parse_key(key: str) -> CalendarDate:
    check_key(key)
    return CalendarDate(day=int(key[6:8]), month=int(key[4:6]), year=int(key[0:4]))
