from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List

if TYPE_CHECKING:
    from ..engines.store import CalendarStore

@dataclass
class StoreRegistry:
    """
    Ruleset name (e.g. "de", "us") -> the CalendarStore built from that
    RuleConfig. One store per name, so lookups through the API share its
    materialized year.
    """
    _stores: Dict[str, "CalendarStore"]

    def get(self, name: str) -> "CalendarStore":
        if name not in self._stores:
            raise KeyError(f"Unknown ruleset '{name}'. Available: {sorted(self._stores)}")
        return self._stores[name]

    def list(self) -> List[str]:
        return sorted(self._stores.keys())

    def register(self, name: str, store: "CalendarStore", *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._stores):
            raise KeyError(f"Ruleset '{name}' already exists. Use overwrite=True to replace.")
        self._stores[name] = store
