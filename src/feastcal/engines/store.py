"""
feastcal.engines.store
----------------------
The CalendarStore. Materializes one year of a RuleConfig into a
'YYYYMMDD' -> DayEntry map on first access and serves lookups from it.

Only one year is held at a time: touching a new year discards the entries
of the previous one (including entries added with write()).
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, FrozenSet, Iterator, Tuple

from feastcal.core.errors import UnsupportedYearError
from feastcal.core.time import (
    add_days,
    build_key,
    calc_date_by_nth_weekday_relative_to_date,
    calc_date_by_wdmy,
    check_key,
)
from feastcal.core.types import EMPTY_ENTRY, CalendarDate, DayEntry, RuleConfig
from feastcal.engines.easter import calc_easter_sunday

logger = logging.getLogger(__name__)

MIN_YEAR = 1971


class CalendarStore:
    """
    Named-day storage driven by a rule set, so the configuration does not
    have to be updated every year.
    """
    def __init__(self, config: RuleConfig):
        self.config = config
        self._entries: Dict[str, DayEntry] = {}
        self._years: set[int] = set()
        self._lock = threading.RLock()

    @property
    def materialized_years(self) -> FrozenSet[int]:
        with self._lock:
            return frozenset(self._years)

    # ---------------------------------------------------------
    # Materialization
    # ---------------------------------------------------------

    def _resolve(self, year: int) -> Iterator[Tuple[CalendarDate, DayEntry]]:
        """Yields (date, entry) for every rule, in precedence order (last wins)."""
        cfg = self.config

        if cfg.easter_relative:
            easter = calc_easter_sunday(year)
            for r in cfg.easter_relative:
                yield add_days(easter, r.delta), DayEntry(r.name, r.is_feast_day)

        for r in cfg.fixed:
            if r.year is None or r.year == year:
                yield CalendarDate(r.day, r.month, year), DayEntry(r.name, r.is_feast_day)

        for r in cfg.nth_weekday_in_month:
            d = calc_date_by_wdmy(r.week_count, r.weekday, r.month, year)
            yield d, DayEntry(r.name, r.is_feast_day)

        for r in cfg.nth_weekday_relative_to_date:
            d = calc_date_by_nth_weekday_relative_to_date(r.day, r.month, year, r.week_count, r.weekday)
            yield d, DayEntry(r.name, r.is_feast_day)

    def materialize(self, year: int) -> None:
        """
        Rebuild the cache for `year`, replacing any previously held year.

        The new map is built completely before it replaces the old one, so a
        failing rule leaves the previous state untouched and `year` unmarked.
        """
        if year < MIN_YEAR:
            raise UnsupportedYearError(f"Year before {MIN_YEAR} is not supported: {year}")

        fresh: Dict[str, DayEntry] = {}
        for d, entry in self._resolve(year):
            fresh[check_key(build_key(d))] = entry

        with self._lock:
            self._entries = fresh
            self._years = {year}
        logger.debug("materialized %d entries for %d (%d rules)", len(fresh), year, self.config.rule_count)

    def _ensure_year(self, year: int) -> None:
        with self._lock:
            if year not in self._years:
                self.materialize(year)

    # ---------------------------------------------------------
    # Access
    # ---------------------------------------------------------

    def write(self, key: str, entry: DayEntry) -> None:
        """Set the entry for a day given as 'YYYYMMDD', e.g. '20150614'."""
        check_key(key)
        with self._lock:
            self._entries[key] = entry

    def lookup(self, key: str) -> DayEntry:
        """Entry for a day given as 'YYYYMMDD'; the empty entry when no rule matched."""
        check_key(key)
        with self._lock:
            self._ensure_year(int(key[:4]))
            return self._entries.get(key, EMPTY_ENTRY)

    def is_feast_day(self, key: str) -> bool:
        return self.lookup(key).is_feast_day

    def entries(self, year: int) -> Dict[str, DayEntry]:
        """Sorted copy of the named days of `year` (materializes it if needed)."""
        prefix = f"{year:04d}"
        with self._lock:
            self._ensure_year(year)
            return {k: v for k, v in sorted(self._entries.items()) if k.startswith(prefix)}

    def __repr__(self) -> str:
        return (
            f"CalendarStore(rules={self.config.rule_count}, "
            f"materialized_years={sorted(self._years)})"
        )
