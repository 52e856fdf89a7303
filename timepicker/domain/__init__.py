"""
Domain layer - Pure time parsing, comparison and availability logic.
"""

from .availability import check_constraint, is_time_available, iter_available_times
from .comparator import is_between, is_same_or_after, is_same_or_before
from .exceptions import ConfigurationError, MinutesGapError, TimepickerError
from .formatter import INVALID_TIME, format_hour, format_time, from_datetime_to_string, is_twenty_four
from .locale import looks_like_plain_digits, resolve_locale_options
from .models import (
    AvailabilityConstraint,
    Granularity,
    LocaleOptions,
    Period,
    TimeFormat,
    TimeValue,
)
from .normalizer import normalize
from .time_model import from_hour_minute, parse

__all__ = [
    "AvailabilityConstraint",
    "ConfigurationError",
    "Granularity",
    "INVALID_TIME",
    "LocaleOptions",
    "MinutesGapError",
    "Period",
    "TimeFormat",
    "TimeValue",
    "TimepickerError",
    "check_constraint",
    "format_hour",
    "format_time",
    "from_datetime_to_string",
    "from_hour_minute",
    "is_between",
    "is_same_or_after",
    "is_same_or_before",
    "is_time_available",
    "is_twenty_four",
    "iter_available_times",
    "looks_like_plain_digits",
    "normalize",
    "parse",
    "resolve_locale_options",
]
