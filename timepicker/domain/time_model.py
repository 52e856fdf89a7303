"""
Builds TimeValue objects from raw time text.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pendulum

from .locale import resolve_locale_options
from .models import DEFAULT_TIMEZONE, LocaleOptions, TimeValue
from .normalizer import MIN_TIME_LENGTH, normalize

if TYPE_CHECKING:
    from ..config import TimepickerOptions


logger = logging.getLogger(__name__)


def from_hour_minute(
    hour: int,
    minute: int,
    locale_options: LocaleOptions | None = None,
    timezone: str = DEFAULT_TIMEZONE
) -> TimeValue:
    """
    Anchor an hour/minute pair to today.

    Out-of-range hours or minutes give an invalid TimeValue rather than an
    exception.
    """
    locale_options = locale_options or LocaleOptions()
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return TimeValue.invalid(
            f"{hour:02d}:{minute:02d} is not a time of day",
            locale_options=locale_options
        )

    moment = pendulum.today(timezone).set(hour=hour, minute=minute, second=0, microsecond=0)
    return TimeValue(moment=moment, locale_options=locale_options)


def parse(
    raw: str | None,
    options: "TimepickerOptions | None" = None,
    timezone: str = DEFAULT_TIMEZONE
) -> TimeValue | None:
    """
    Turn raw time text into a TimeValue.

    Args:
        raw: Time text such as "18:30", "6:30 pm" or "1815"
        options: Requested picker options used for locale resolution
        timezone: Timezone of the anchor date

    Returns:
        None for empty text or text shorter than four characters, an
        invalid TimeValue when the text cannot be normalized, otherwise a
        valid TimeValue
    """
    if not raw or len(raw) < MIN_TIME_LENGTH:
        return None

    locale_options = resolve_locale_options(raw, options)
    canonical = normalize(raw)

    if canonical is None:
        return TimeValue.invalid(f"unparsable time {raw!r}", locale_options=locale_options)

    hours, minutes = canonical.split(":")
    value = from_hour_minute(int(hours), int(minutes), locale_options=locale_options, timezone=timezone)

    logger.debug("Parsed %r as %s under %s", raw, value, locale_options.locale)
    return value
