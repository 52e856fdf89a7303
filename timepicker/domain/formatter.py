"""
Display formatting for time values and hour wheel selections.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .locale import to_pendulum_locale
from .models import (
    DEFAULT_LOCALE,
    DEFAULT_NUMBERING_SYSTEM,
    DisplayPattern,
    LocaleOptions,
    Period,
    TimeFormat,
    TimeValue,
)
from .normalizer import MIN_TIME_LENGTH, normalize

if TYPE_CHECKING:
    from ..config import TimepickerOptions


INVALID_TIME = "Invalid Time"

PRESENTATION_LOCALE = LocaleOptions(
    locale=DEFAULT_LOCALE,
    numbering_system=DEFAULT_NUMBERING_SYSTEM
)


def is_twenty_four(format: TimeFormat | int | None) -> bool:
    """Check whether ``format`` is the 24-hour clock; anything else is not."""
    return format is TimeFormat.TWENTY_FOUR or format == 24


def format_hour(current_hour: int, format: TimeFormat | int, period: Period | str) -> int:
    """
    Convert an hour wheel selection to a 24-hour hour.

    On the 24-hour clock the hour passes through. On the 12-hour clock
    12 AM is hour 0 and 12 PM stays 12.
    """
    if is_twenty_four(format):
        return current_hour

    period = Period(period)
    hour = current_hour if period is Period.AM else current_hour + 12

    if period is Period.AM and hour == 12:
        return 0
    if period is Period.PM and hour == 24:
        return 12

    return hour


def format_time(time: str | None, options: "TimepickerOptions | None" = None) -> str | None:
    """Quick display form: INVALID_TIME for missing or short text, else normalized."""
    if not time or len(time) < MIN_TIME_LENGTH:
        return INVALID_TIME
    return normalize(time)


def from_datetime_to_string(time: TimeValue, format: TimeFormat | int) -> str:
    """
    Render a time value for the input field.

    Display always uses the presentation locale, whatever locale the value
    was parsed under.
    """
    if not time.is_valid:
        return INVALID_TIME

    time = time.reconfigure(PRESENTATION_LOCALE)
    pattern = DisplayPattern.TWENTY_FOUR if is_twenty_four(format) else DisplayPattern.TWELVE
    locale = to_pendulum_locale(time.locale_options.locale) or "en"

    return time.moment.format(pattern.value, locale=locale)
