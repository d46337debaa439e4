class FeastcalError(Exception):
    """Base error."""

class InvalidKeyError(FeastcalError, ValueError):
    """Raised when a date key is not an 8-digit 'YYYYMMDD' string."""

class UnsupportedYearError(FeastcalError, ValueError):
    """Raised when a year lies outside the supported range."""

class InvalidRuleParameterError(FeastcalError, ValueError):
    """Raised when a rule parameter cannot locate a date (e.g. weekCount == 0)."""

class ConfigError(FeastcalError, ValueError):
    """Raised when a rule configuration document is malformed."""
