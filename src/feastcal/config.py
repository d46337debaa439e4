"""
Rule configuration documents.

A document is a mapping with up to four lists of rules. Both the snake_case
layout and the camelCase layout of the original JSON rule files are read:

    {
      "configEasterDependantDays": [{"delta": -2, "name": "Karfreitag", "isFeastDay": true}],
      "configFixedDays": [{"day": 24, "month": 12, "name": "Heiligabend", "isFeastDay": false}],
      "configNthWeekdayInMonthDays": [
          {"weekCount": 2, "weekday": 7, "month": 5, "name": "Muttertag", "isFeastDay": false}
      ],
      "configNthWeekdayRelativeToDateDays": [
          {"day": 25, "month": 12, "weekCount": -1, "weekday": "sunday", "name": "4. Advent"}
      ]
    }

Weekdays are numbers (Monday=1 .. Sunday=7) or English weekday names.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Sequence, Tuple, Union

from .core.errors import ConfigError
from .core.types import (
    EasterRelativeRule,
    FixedDayRule,
    NthWeekdayInMonthRule,
    NthWeekdayRelativeToDateRule,
    RuleConfig,
    Weekday,
)

logger = logging.getLogger(__name__)

# category -> accepted document keys
_CATEGORY_KEYS: Dict[str, Tuple[str, ...]] = {
    "easter_relative": ("easter_relative", "configEasterDependantDays"),
    "fixed": ("fixed", "configFixedDays"),
    "nth_weekday_in_month": ("nth_weekday_in_month", "configNthWeekdayInMonthDays"),
    "nth_weekday_relative_to_date": ("nth_weekday_relative_to_date", "configNthWeekdayRelativeToDateDays"),
}

# camelCase field -> dataclass field
_FIELD_ALIASES = {
    "weekCount": "week_count",
    "isFeastDay": "is_feast_day",
}


def parse_weekday(value: Union[int, str, Weekday]) -> Weekday:
    if isinstance(value, bool):
        raise ConfigError(f"Invalid weekday: {value!r}")
    if isinstance(value, int):
        try:
            return Weekday(value)
        except ValueError as e:
            raise ConfigError(f"Weekday number must be in 1..7 (Monday=1), got {value}") from e
    if isinstance(value, str):
        key = value.strip().upper()
        if key in Weekday.__members__:
            return Weekday[key]
        if key.isdigit():
            return parse_weekday(int(key))
    raise ConfigError(f"Invalid weekday: {value!r}. Available: {[w.name.lower() for w in Weekday]}")


def _fields(raw: Any, where: str) -> Dict[str, Any]:
    if not isinstance(raw, Mapping):
        raise ConfigError(f"{where}: rule must be a mapping, got {type(raw).__name__}")
    return {_FIELD_ALIASES.get(k, k): v for k, v in raw.items()}


def _require(fields: Dict[str, Any], names: Sequence[str], where: str) -> None:
    missing = [n for n in names if n not in fields]
    if missing:
        raise ConfigError(f"{where}: missing field(s) {missing}")


def _int(fields: Dict[str, Any], name: str, where: str) -> int:
    v = fields[name]
    if isinstance(v, bool) or not isinstance(v, int):
        raise ConfigError(f"{where}: field '{name}' must be an integer, got {v!r}")
    return v


def _bool(fields: Dict[str, Any], name: str, where: str) -> bool:
    v = fields.get(name, False)
    if not isinstance(v, bool):
        raise ConfigError(f"{where}: field '{name}' must be true or false, got {v!r}")
    return v


def _easter(f: Dict[str, Any], where: str) -> EasterRelativeRule:
    _require(f, ("delta", "name"), where)
    return EasterRelativeRule(
        delta=_int(f, "delta", where),
        name=str(f["name"]),
        is_feast_day=_bool(f, "is_feast_day", where),
    )


def _fixed(f: Dict[str, Any], where: str) -> FixedDayRule:
    _require(f, ("day", "month", "name"), where)
    year = f.get("year")
    return FixedDayRule(
        day=_int(f, "day", where),
        month=_int(f, "month", where),
        name=str(f["name"]),
        is_feast_day=_bool(f, "is_feast_day", where),
        year=None if year is None else _int(f, "year", where),
    )


def _in_month(f: Dict[str, Any], where: str) -> NthWeekdayInMonthRule:
    _require(f, ("week_count", "weekday", "month", "name"), where)
    return NthWeekdayInMonthRule(
        week_count=_int(f, "week_count", where),
        weekday=parse_weekday(f["weekday"]),
        month=_int(f, "month", where),
        name=str(f["name"]),
        is_feast_day=_bool(f, "is_feast_day", where),
    )


def _relative(f: Dict[str, Any], where: str) -> NthWeekdayRelativeToDateRule:
    _require(f, ("day", "month", "week_count", "weekday", "name"), where)
    week_count = _int(f, "week_count", where)
    if week_count == 0:
        raise ConfigError(f"{where}: weekCount must not be 0")
    return NthWeekdayRelativeToDateRule(
        day=_int(f, "day", where),
        month=_int(f, "month", where),
        week_count=week_count,
        weekday=parse_weekday(f["weekday"]),
        name=str(f["name"]),
        is_feast_day=_bool(f, "is_feast_day", where),
    )


_PARSERS: Dict[str, Callable[[Dict[str, Any], str], Any]] = {
    "easter_relative": _easter,
    "fixed": _fixed,
    "nth_weekday_in_month": _in_month,
    "nth_weekday_relative_to_date": _relative,
}


def rule_config_from_mapping(data: Mapping[str, Any]) -> RuleConfig:
    """Build a RuleConfig from a plain mapping (e.g. decoded JSON)."""
    if not isinstance(data, Mapping):
        raise ConfigError(f"Rule document must be a mapping, got {type(data).__name__}")

    known = {k for keys in _CATEGORY_KEYS.values() for k in keys}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning("ignoring unknown rule categories: %s", unknown)

    out: Dict[str, List[Any]] = {}
    for category, keys in _CATEGORY_KEYS.items():
        rules: List[Any] = []
        for key in keys:
            raw = data.get(key)
            if raw is None:
                continue
            if not isinstance(raw, list):
                raise ConfigError(f"'{key}' must be a list of rules")
            parse = _PARSERS[category]
            rules.extend(parse(_fields(r, f"{key}[{i}]"), f"{key}[{i}]") for i, r in enumerate(raw))
        out[category] = rules

    return RuleConfig(**out)


def load_rule_config(path: Union[str, Path]) -> RuleConfig:
    """Read a JSON rule document."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path}: not valid UTF-8 ({e})") from e
    cfg = rule_config_from_mapping(data)
    logger.info("loaded %d rules from %s", cfg.rule_count, path)
    return cfg
