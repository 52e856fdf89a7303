"""
Domain models for time-of-day values and availability constraints.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from pendulum import DateTime


DEFAULT_LOCALE = "en-US"
DEFAULT_NUMBERING_SYSTEM = "latn"
DEFAULT_TIMEZONE = "UTC"

# Canonical "HH:mm" interchange form, always five characters
CanonicalTimeString = str


class TimeFormat(Enum):
    """Clock used for display and for the hour wheel."""
    TWELVE = 12
    TWENTY_FOUR = 24


DEFAULT_FORMAT = TimeFormat.TWELVE


class Period(Enum):
    """AM/PM designator, only meaningful for the 12-hour clock."""
    AM = "AM"
    PM = "PM"


class Granularity(str, Enum):
    """Resolution used when comparing two time values."""
    HOURS = "hours"
    MINUTES = "minutes"


class DisplayPattern(str, Enum):
    """pendulum format tokens for each presentation."""
    TWELVE = "hh:mm A"
    TWENTY_FOUR = "HH:mm"


@dataclass(frozen=True)
class LocaleOptions:
    """Locale and numbering system resolved for a single parse call."""
    locale: str = DEFAULT_LOCALE
    numbering_system: str = DEFAULT_NUMBERING_SYSTEM


@dataclass(frozen=True)
class TimeValue:
    """
    A time of day anchored to a date.

    Only the hour and minute carry meaning; the anchor date is there so the
    value behaves like any other pendulum DateTime and must never influence
    ordering. A value without a moment is the invalid state produced when the
    raw text could not be normalized.
    """
    moment: DateTime | None
    locale_options: LocaleOptions = field(default_factory=LocaleOptions)
    invalid_reason: str | None = None

    @classmethod
    def invalid(cls, reason: str, locale_options: LocaleOptions | None = None) -> "TimeValue":
        """Build the invalid value for text that could not be understood."""
        return cls(
            moment=None,
            locale_options=locale_options or LocaleOptions(),
            invalid_reason=reason,
        )

    @property
    def is_valid(self) -> bool:
        return self.moment is not None

    @property
    def hour(self) -> int | None:
        return self.moment.hour if self.moment is not None else None

    @property
    def minute(self) -> int | None:
        return self.moment.minute if self.moment is not None else None

    @property
    def minute_of_day(self) -> int | None:
        """Minutes elapsed since midnight, ignoring the anchor date."""
        if self.moment is None:
            return None
        return self.moment.hour * 60 + self.moment.minute

    def reconfigure(self, locale_options: LocaleOptions) -> "TimeValue":
        """Return the same instant under different locale options."""
        return replace(self, locale_options=locale_options)

    def __str__(self) -> str:
        if self.moment is None:
            return f"Invalid TimeValue ({self.invalid_reason})"
        return self.moment.format("HH:mm")


@dataclass(frozen=True)
class AvailabilityConstraint:
    """
    Bounds and step a candidate time has to satisfy.

    Supplied by the caller for each check and never mutated.
    """
    min: TimeValue | None = None
    max: TimeValue | None = None
    granularity: Granularity | None = None
    minutes_gap: int | None = None
