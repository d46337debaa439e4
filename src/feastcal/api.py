from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Union

from .core.registry import StoreRegistry
from .core.time import build_key, check_key
from .core.types import CalendarDate, DayEntry, RuleConfig
from .engines.easter import calc_easter_sunday
from .engines.store import CalendarStore

DayLike = Union[date, CalendarDate, str]

_registry: Optional[StoreRegistry] = None

def set_registry(reg: StoreRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> StoreRegistry:
    if _registry is None:
        raise RuntimeError("Store registry not initialized")
    return _registry

def _key(d: DayLike) -> str:
    if isinstance(d, str):
        return check_key(d)
    if isinstance(d, CalendarDate):
        return build_key(d)
    return build_key(CalendarDate.from_date(d))

def list_rulesets() -> List[str]:
    return _reg().list()

def get_store(ruleset: str = "de") -> CalendarStore:
    return _reg().get(ruleset)

def register_ruleset(name: str, config: RuleConfig, *, overwrite: bool = False) -> CalendarStore:
    store = CalendarStore(config)
    _reg().register(name, store, overwrite=overwrite)
    return store

def _store(ruleset: str, store: Optional[CalendarStore]) -> CalendarStore:
    return store if store is not None else _reg().get(ruleset)

def day_entry(d: DayLike, *, ruleset: str = "de", store: Optional[CalendarStore] = None) -> DayEntry:
    """Named-day entry for a date, a CalendarDate or a 'YYYYMMDD' key.

    An explicit `store` takes precedence over the registered `ruleset`.
    """
    return _store(ruleset, store).lookup(_key(d))

def is_feast_day(d: DayLike, *, ruleset: str = "de", store: Optional[CalendarStore] = None) -> bool:
    return day_entry(d, ruleset=ruleset, store=store).is_feast_day

def year_entries(
    year: int,
    *,
    ruleset: str = "de",
    store: Optional[CalendarStore] = None,
    feast_only: bool = False,
) -> Dict[date, DayEntry]:
    out = {}
    for key, entry in _store(ruleset, store).entries(year).items():
        if feast_only and not entry.is_feast_day:
            continue
        out[date(int(key[:4]), int(key[4:6]), int(key[6:]))] = entry
    return out

def easter_sunday(year: int) -> date:
    return calc_easter_sunday(year).to_date()
