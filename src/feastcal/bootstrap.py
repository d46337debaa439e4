from __future__ import annotations
from feastcal.core.registry import StoreRegistry
from feastcal.engines.rulesets import ALL_RULESETS
from feastcal.engines.store import CalendarStore

def build_registry() -> StoreRegistry:
    stores = {}
    for name, config in ALL_RULESETS.items():
        stores[name] = CalendarStore(config)
    return StoreRegistry(stores)
