# tests/test_store.py

from concurrent.futures import ThreadPoolExecutor

import pytest

from feastcal.core.errors import InvalidKeyError, InvalidRuleParameterError, UnsupportedYearError
from feastcal.core.types import (
    DayEntry,
    EasterRelativeRule,
    FixedDayRule,
    NthWeekdayInMonthRule,
    NthWeekdayRelativeToDateRule,
    RuleConfig,
    Weekday,
)
from feastcal.engines.rulesets import GERMAN_RULES, US_FEDERAL_RULES
from feastcal.engines.store import CalendarStore


@pytest.fixture
def german():
    return CalendarStore(GERMAN_RULES)

@pytest.fixture
def mothers_day():
    """Second Sunday in May and in June."""
    return CalendarStore(RuleConfig(
        nth_weekday_in_month=(
            NthWeekdayInMonthRule(2, Weekday.SUNDAY, 5, "Muttertag"),
            NthWeekdayInMonthRule(2, Weekday.SUNDAY, 6, "Vatertag"),
        ),
    ))


# --- construction / lookup ---

def test_construction_is_lazy(german):
    assert german.materialized_years == frozenset()

def test_nth_weekday_in_month_2015(mothers_day):
    entry = mothers_day.lookup("20150510")
    assert entry.name == "Muttertag"
    assert not entry.is_feast_day
    assert mothers_day.lookup("20150614").name == "Vatertag"

def test_unmatched_day_is_empty(german):
    entry = german.lookup("20150702")
    assert entry == DayEntry(name="", is_feast_day=False)
    assert not entry

@pytest.mark.parametrize(
    "key, name, feast",
    [
        ("20150101", "Neujahr", True),
        ("20150216", "Rosenmontag", False),
        ("20150403", "Karfreitag", True),
        ("20150405", "Ostersonntag", True),
        ("20150406", "Ostermontag", True),
        ("20150514", "Christi Himmelfahrt", True),
        ("20150525", "Pfingstmontag", True),
        ("20151004", "Erntedankfest", False),
        ("20151003", "Tag der Deutschen Einheit", True),
        ("20151118", "Buß- und Bettag", False),
        ("20151122", "Totensonntag", False),
        ("20151129", "1. Advent", False),
        ("20151220", "4. Advent", False),
        ("20151224", "Heiligabend", False),
        ("20151225", "1. Weihnachtstag", True),
    ],
)
def test_german_2015(german, key, name, feast):
    entry = german.lookup(key)
    assert entry.name == name
    assert entry.is_feast_day is feast

def test_fixed_rule_with_explicit_year(german):
    assert german.lookup("20171031").is_feast_day
    assert german.lookup("20161031").name == "Reformationstag"
    assert not german.lookup("20161031").is_feast_day

def test_us_federal_2015():
    store = CalendarStore(US_FEDERAL_RULES)
    assert store.lookup("20150119").name == "Martin Luther King Jr. Day"
    assert store.lookup("20150216").name == "Washington's Birthday"
    assert store.lookup("20150525").name == "Memorial Day"
    assert store.lookup("20150907").name == "Labor Day"
    assert store.lookup("20151012").name == "Columbus Day"
    assert store.lookup("20151126").name == "Thanksgiving Day"
    assert store.is_feast_day("20151126")


# --- memoization ---

def test_lookup_materializes_once_per_year(german, monkeypatch):
    calls = []
    original = german.materialize

    def counting(year):
        calls.append(year)
        original(year)

    monkeypatch.setattr(german, "materialize", counting)

    first = german.lookup("20151225")
    second = german.lookup("20151225")
    german.lookup("20150101")

    assert first == second
    assert calls == [2015]
    assert german.materialized_years == frozenset({2015})

def test_new_year_replaces_previous_year(german):
    german.lookup("20151225")
    german.write("20150702", DayEntry("Betriebsfeier", True))
    assert german.lookup("20150702").name == "Betriebsfeier"

    german.lookup("20161225")
    assert german.materialized_years == frozenset({2016})
    assert "20151225" not in german.entries(2016)

    # 2015 is rebuilt from the rules; the written entry is gone
    assert german.lookup("20150702") == DayEntry()
    assert german.lookup("20151225").name == "1. Weihnachtstag"
    assert german.materialized_years == frozenset({2015})

def test_entries_sorted_and_limited_to_year(german):
    entries = german.entries(2015)
    keys = list(entries)
    assert keys == sorted(keys)
    assert all(k.startswith("2015") for k in keys)
    assert entries["20150405"].name == "Ostersonntag"


# --- precedence ---

def test_later_categories_overwrite_earlier():
    store = CalendarStore(RuleConfig(
        easter_relative=(EasterRelativeRule(0, "easter"),),
        fixed=(
            FixedDayRule(5, 4, "fixed-on-easter"),
            FixedDayRule(10, 5, "fixed-on-mothers-day", True),
        ),
        nth_weekday_in_month=(
            NthWeekdayInMonthRule(2, Weekday.SUNDAY, 5, "nth"),
            NthWeekdayInMonthRule(4, Weekday.SUNDAY, 11, "nth-november"),
        ),
        nth_weekday_relative_to_date=(
            NthWeekdayRelativeToDateRule(25, 12, -5, Weekday.SUNDAY, "relative"),
        ),
    ))
    assert store.lookup("20150405").name == "fixed-on-easter"
    assert store.lookup("20150510") == DayEntry("nth", False)
    assert store.lookup("20151122").name == "relative"

def test_later_rule_in_same_category_wins():
    store = CalendarStore(RuleConfig(fixed=(
        FixedDayRule(1, 5, "first"),
        FixedDayRule(1, 5, "second", True),
    )))
    assert store.lookup("20150501") == DayEntry("second", True)


# --- write ---

def test_write_overwrites(german):
    german.lookup("20151224")
    german.write("20151224", DayEntry("Christmas Eve", True))
    assert german.lookup("20151224") == DayEntry("Christmas Eve", True)


# --- errors ---

@pytest.mark.parametrize("key", ["2015122", "201512245", "2015-1-1", "yyyymmdd"])
def test_lookup_rejects_bad_key(german, key):
    with pytest.raises(InvalidKeyError):
        german.lookup(key)
    assert german.materialized_years == frozenset()

def test_write_rejects_bad_key(german):
    with pytest.raises(InvalidKeyError):
        german.write("2015124", DayEntry("x"))

def test_lookup_before_1971_rejected(german):
    with pytest.raises(UnsupportedYearError):
        german.lookup("19701231")
    assert german.materialized_years == frozenset()

def test_materialize_before_1971_rejected(german):
    with pytest.raises(UnsupportedYearError):
        german.materialize(1970)

def test_failed_materialization_leaves_cache_untouched():
    bad = NthWeekdayRelativeToDateRule(25, 12, 0, Weekday.SUNDAY, "broken")
    store = CalendarStore(RuleConfig(
        fixed=(FixedDayRule(1, 1, "Neujahr", True, year=2015),),
        nth_weekday_relative_to_date=(bad,),
    ))
    store.write("20150101", DayEntry("kept"))
    with pytest.raises(InvalidRuleParameterError):
        store.lookup("20150101")
    assert store.materialized_years == frozenset()
    # the retry runs again instead of serving a half-built year
    with pytest.raises(InvalidRuleParameterError):
        store.lookup("20150101")


# --- concurrency ---

def test_concurrent_lookups_agree(german):
    keys = ["20151225", "20161225", "20150405", "20160327"] * 25
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(german.lookup, keys))
    for key, entry in zip(keys, results):
        assert entry.name in ("1. Weihnachtstag", "Ostersonntag"), key
