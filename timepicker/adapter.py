"""
Function-call surface consumed by picker UIs.

Widgets call these to seed their selection from free text, render the
current selection and decide which times can be offered. Everything here is
stateless; ``TimepickerAdapter`` only groups the functions under one name.
"""

from __future__ import annotations

from .domain.availability import check_constraint, is_time_available, iter_available_times
from .domain.comparator import is_between, is_same_or_after, is_same_or_before
from .domain.formatter import format_hour, format_time, from_datetime_to_string, is_twenty_four
from .domain.models import DEFAULT_FORMAT, DEFAULT_LOCALE, DEFAULT_NUMBERING_SYSTEM
from .domain.normalizer import normalize
from .domain.time_model import parse as parse_time


class TimepickerAdapter:
    """Namespace over the picker functions. Holds no state."""

    default_format = DEFAULT_FORMAT
    default_locale = DEFAULT_LOCALE
    default_numbering_system = DEFAULT_NUMBERING_SYSTEM

    format_hour = staticmethod(format_hour)
    format_time = staticmethod(format_time)
    from_datetime_to_string = staticmethod(from_datetime_to_string)
    normalize = staticmethod(normalize)
    is_between = staticmethod(is_between)
    is_same_or_after = staticmethod(is_same_or_after)
    is_same_or_before = staticmethod(is_same_or_before)
    is_time_available = staticmethod(is_time_available)
    is_twenty_four = staticmethod(is_twenty_four)
    parse_time = staticmethod(parse_time)


__all__ = [
    "TimepickerAdapter",
    "check_constraint",
    "format_hour",
    "format_time",
    "from_datetime_to_string",
    "is_between",
    "is_same_or_after",
    "is_same_or_before",
    "is_time_available",
    "is_twenty_four",
    "iter_available_times",
    "normalize",
    "parse_time",
]
