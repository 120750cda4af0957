"""timeparser - Compact duration strings to seconds."""

# Duration parsing
from timeparser.duration import (
    DurationParser,
    parse,
    parse_duration,
    parse_timedelta,
    parse_unit,
    parse_with_fallback,
)

# Errors
from timeparser.errors import (
    BareNumberError,
    DanglingNumberError,
    DuplicateUnitError,
    DurationError,
    EmptyInputError,
    MalformedNumberError,
    UnknownUnitError,
)

# Core types
from timeparser.types import (
    DAY_IN_SECONDS,
    HOUR_IN_SECONDS,
    MINUTE_IN_SECONDS,
    MONTH_IN_SECONDS,
    SECOND,
    VALID_MARKERS,
    WEEK_IN_SECONDS,
    YEAR_IN_SECONDS,
    Duration,
    Unit,
)

__version__ = "0.1.0"

__all__ = [
    "DAY_IN_SECONDS",
    "HOUR_IN_SECONDS",
    "MINUTE_IN_SECONDS",
    "MONTH_IN_SECONDS",
    "SECOND",
    "VALID_MARKERS",
    "WEEK_IN_SECONDS",
    "YEAR_IN_SECONDS",
    "BareNumberError",
    "DanglingNumberError",
    "DuplicateUnitError",
    "Duration",
    "DurationError",
    "DurationParser",
    "EmptyInputError",
    "MalformedNumberError",
    "Unit",
    "UnknownUnitError",
    "parse",
    "parse_duration",
    "parse_timedelta",
    "parse_unit",
    "parse_with_fallback",
]
