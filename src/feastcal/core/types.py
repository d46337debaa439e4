from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from typing import Optional, Tuple


class Weekday(IntEnum):
    """
    Weekday numbering used by every rule: Monday=1 .. Sunday=7.
    Anchored so that 1970-01-01 (a Thursday) maps to 4.
    """
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

@dataclass(frozen=True)
class CalendarDate:
    day: int
    month: int
    year: int

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(day=d.day, month=d.month, year=d.year)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class DayEntry:
    name: str = ""
    is_feast_day: bool = False

    def __bool__(self) -> bool:
        return bool(self.name) or self.is_feast_day

EMPTY_ENTRY = DayEntry()

# ------------------------------------------------------------
# Rule records (pure data payloads)
# ------------------------------------------------------------

@dataclass(frozen=True)
class EasterRelativeRule:
    """Day at a signed offset from Easter Sunday (negative = before)."""
    delta: int
    name: str
    is_feast_day: bool = False

@dataclass(frozen=True)
class FixedDayRule:
    """Same day/month every year, or only in `year` when given."""
    day: int
    month: int
    name: str
    is_feast_day: bool = False
    year: Optional[int] = None

@dataclass(frozen=True)
class NthWeekdayInMonthRule:
    """week_count-th weekday of the month; week_count == 0 is the last one."""
    week_count: int
    weekday: Weekday
    month: int
    name: str
    is_feast_day: bool = False

@dataclass(frozen=True)
class NthWeekdayRelativeToDateRule:
    """week_count-th weekday before (<0) or after (>0) day/month of the year."""
    day: int
    month: int
    week_count: int
    weekday: Weekday
    name: str
    is_feast_day: bool = False

@dataclass(frozen=True)
class RuleConfig:
    """Immutable rule set; categories are applied in field order."""
    easter_relative: Tuple[EasterRelativeRule, ...] = ()
    fixed: Tuple[FixedDayRule, ...] = ()
    nth_weekday_in_month: Tuple[NthWeekdayInMonthRule, ...] = ()
    nth_weekday_relative_to_date: Tuple[NthWeekdayRelativeToDateRule, ...] = ()

    def __post_init__(self) -> None:
        # accept any iterable, store tuples
        for name in ("easter_relative", "fixed", "nth_weekday_in_month", "nth_weekday_relative_to_date"):
            object.__setattr__(self, name, tuple(getattr(self, name) or ()))

    def merged(self, other: "RuleConfig") -> "RuleConfig":
        return RuleConfig(
            easter_relative=self.easter_relative + other.easter_relative,
            fixed=self.fixed + other.fixed,
            nth_weekday_in_month=self.nth_weekday_in_month + other.nth_weekday_in_month,
            nth_weekday_relative_to_date=self.nth_weekday_relative_to_date + other.nth_weekday_relative_to_date,
        )

    @property
    def rule_count(self) -> int:
        return (
            len(self.easter_relative)
            + len(self.fixed)
            + len(self.nth_weekday_in_month)
            + len(self.nth_weekday_relative_to_date)
        )
