"""feastcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    day_entry,
    is_feast_day,
    year_entries,
    easter_sunday,
    list_rulesets,
    get_store,
    register_ruleset,
)
from .core.errors import (
    FeastcalError,
    InvalidKeyError,
    UnsupportedYearError,
    InvalidRuleParameterError,
    ConfigError,
)
from .core.time import (
    add_days,
    get_weekday,
    calc_date_by_wdmy,
    calc_date_by_nth_weekday_relative_to_date,
)
from .core.types import (
    CalendarDate,
    DayEntry,
    Weekday,
    RuleConfig,
    EasterRelativeRule,
    FixedDayRule,
    NthWeekdayInMonthRule,
    NthWeekdayRelativeToDateRule,
)
from .config import rule_config_from_mapping, load_rule_config
from .engines.easter import calc_easter_sunday
from .engines.store import CalendarStore

__all__ = [
    "day_entry",
    "is_feast_day",
    "year_entries",
    "easter_sunday",
    "list_rulesets",
    "get_store",
    "register_ruleset",
    "FeastcalError",
    "InvalidKeyError",
    "UnsupportedYearError",
    "InvalidRuleParameterError",
    "ConfigError",
    "add_days",
    "get_weekday",
    "calc_date_by_wdmy",
    "calc_date_by_nth_weekday_relative_to_date",
    "calc_easter_sunday",
    "CalendarDate",
    "DayEntry",
    "Weekday",
    "RuleConfig",
    "EasterRelativeRule",
    "FixedDayRule",
    "NthWeekdayInMonthRule",
    "NthWeekdayRelativeToDateRule",
    "rule_config_from_mapping",
    "load_rule_config",
    "CalendarStore",
]
