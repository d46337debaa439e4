from __future__ import annotations

from typing import Dict

from ..core.types import (
    EasterRelativeRule,
    FixedDayRule,
    NthWeekdayInMonthRule,
    NthWeekdayRelativeToDateRule,
    RuleConfig,
    Weekday,
)


# ============================================================
# GERMANY (nationwide holidays plus common observances)
# ============================================================

GERMAN_RULES = RuleConfig(
    easter_relative=(
        EasterRelativeRule(-48, "Rosenmontag"),
        EasterRelativeRule(-46, "Aschermittwoch"),
        EasterRelativeRule(-7, "Palmsonntag"),
        EasterRelativeRule(-3, "Gründonnerstag"),
        EasterRelativeRule(-2, "Karfreitag", True),
        EasterRelativeRule(0, "Ostersonntag", True),
        EasterRelativeRule(1, "Ostermontag", True),
        EasterRelativeRule(39, "Christi Himmelfahrt", True),
        EasterRelativeRule(49, "Pfingstsonntag", True),
        EasterRelativeRule(50, "Pfingstmontag", True),
        EasterRelativeRule(60, "Fronleichnam"),
    ),
    fixed=(
        FixedDayRule(1, 1, "Neujahr", True),
        FixedDayRule(6, 1, "Heilige Drei Könige"),
        FixedDayRule(14, 2, "Valentinstag"),
        FixedDayRule(1, 5, "Tag der Arbeit", True),
        FixedDayRule(3, 10, "Tag der Deutschen Einheit", True),
        FixedDayRule(31, 10, "Reformationstag"),
        # 500th anniversary, a nationwide holiday once
        FixedDayRule(31, 10, "Reformationstag", True, year=2017),
        FixedDayRule(1, 11, "Allerheiligen"),
        FixedDayRule(24, 12, "Heiligabend"),
        FixedDayRule(25, 12, "1. Weihnachtstag", True),
        FixedDayRule(26, 12, "2. Weihnachtstag", True),
        FixedDayRule(31, 12, "Silvester"),
    ),
    nth_weekday_in_month=(
        NthWeekdayInMonthRule(2, Weekday.SUNDAY, 5, "Muttertag"),
        NthWeekdayInMonthRule(1, Weekday.SUNDAY, 10, "Erntedankfest"),
    ),
    nth_weekday_relative_to_date=(
        NthWeekdayRelativeToDateRule(23, 11, -1, Weekday.WEDNESDAY, "Buß- und Bettag"),
        NthWeekdayRelativeToDateRule(25, 12, -6, Weekday.SUNDAY, "Volkstrauertag"),
        NthWeekdayRelativeToDateRule(25, 12, -5, Weekday.SUNDAY, "Totensonntag"),
        NthWeekdayRelativeToDateRule(25, 12, -4, Weekday.SUNDAY, "1. Advent"),
        NthWeekdayRelativeToDateRule(25, 12, -3, Weekday.SUNDAY, "2. Advent"),
        NthWeekdayRelativeToDateRule(25, 12, -2, Weekday.SUNDAY, "3. Advent"),
        NthWeekdayRelativeToDateRule(25, 12, -1, Weekday.SUNDAY, "4. Advent"),
    ),
)


# ============================================================
# UNITED STATES (federal holidays, observed-date shifts not applied)
# ============================================================

US_FEDERAL_RULES = RuleConfig(
    easter_relative=(
        EasterRelativeRule(0, "Easter Sunday"),
    ),
    fixed=(
        FixedDayRule(1, 1, "New Year's Day", True),
        FixedDayRule(4, 7, "Independence Day", True),
        FixedDayRule(11, 11, "Veterans Day", True),
        FixedDayRule(25, 12, "Christmas Day", True),
    ),
    nth_weekday_in_month=(
        NthWeekdayInMonthRule(3, Weekday.MONDAY, 1, "Martin Luther King Jr. Day", True),
        NthWeekdayInMonthRule(3, Weekday.MONDAY, 2, "Washington's Birthday", True),
        NthWeekdayInMonthRule(2, Weekday.SUNDAY, 5, "Mother's Day"),
        NthWeekdayInMonthRule(0, Weekday.MONDAY, 5, "Memorial Day", True),
        NthWeekdayInMonthRule(3, Weekday.SUNDAY, 6, "Father's Day"),
        NthWeekdayInMonthRule(1, Weekday.MONDAY, 9, "Labor Day", True),
        NthWeekdayInMonthRule(2, Weekday.MONDAY, 10, "Columbus Day", True),
        NthWeekdayInMonthRule(4, Weekday.THURSDAY, 11, "Thanksgiving Day", True),
    ),
)


ALL_RULESETS: Dict[str, RuleConfig] = {
    "de": GERMAN_RULES,
    "us": US_FEDERAL_RULES,
}
