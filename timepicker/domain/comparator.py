"""
Ordering predicates for time values.

Hour granularity compares the hour alone, so 14:59 is same-or-after a 14:00
minimum. Minute granularity compares the minute of the day; the anchor date
never takes part. Invalid values never compare true.
"""

from __future__ import annotations

from .models import Granularity, TimeValue


def _coerce(granularity: Granularity | str | None) -> Granularity:
    if granularity is None:
        return Granularity.MINUTES
    return Granularity(granularity)


def is_same_or_after(
    time: TimeValue,
    compare_with: TimeValue,
    granularity: Granularity | str | None = Granularity.MINUTES
) -> bool:
    """True if ``time`` is at or later than ``compare_with``."""
    if not (time.is_valid and compare_with.is_valid):
        return False

    if _coerce(granularity) is Granularity.HOURS:
        return time.hour >= compare_with.hour

    return time.minute_of_day >= compare_with.minute_of_day


def is_same_or_before(
    time: TimeValue,
    compare_with: TimeValue,
    granularity: Granularity | str | None = Granularity.MINUTES
) -> bool:
    """True if ``time`` is at or earlier than ``compare_with``."""
    if not (time.is_valid and compare_with.is_valid):
        return False

    if _coerce(granularity) is Granularity.HOURS:
        return time.hour <= compare_with.hour

    return time.minute_of_day <= compare_with.minute_of_day


def is_between(
    time: TimeValue,
    before: TimeValue,
    after: TimeValue,
    granularity: Granularity | str | None = Granularity.MINUTES
) -> bool:
    """
    True if ``time`` lies within [before, after], bounds included.

    Hour granularity is applied to both sides only when asked for;
    anything else compares minutes.
    """
    inner = Granularity.HOURS if _coerce(granularity) is Granularity.HOURS else None

    return (
        is_same_or_before(time, after, inner)
        and is_same_or_after(time, before, inner)
    )
