"""
Availability decisions for candidate times.

This is the part the picker asks before offering or accepting a time: does
the value sit inside the min/max bounds, and is it on the minutes grid?
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from .comparator import is_between, is_same_or_after, is_same_or_before
from .exceptions import MinutesGapError
from .models import AvailabilityConstraint, Granularity, TimeFormat, TimeValue
from .normalizer import to_canonical
from .time_model import parse

if TYPE_CHECKING:
    from ..config import TimepickerOptions


logger = logging.getLogger(__name__)


def is_time_available(
    time: str | None,
    min: TimeValue | None = None,
    max: TimeValue | None = None,
    granularity: Granularity | str | None = None,
    minutes_gap: int | None = None,
    format: TimeFormat | None = None,
    options: "TimepickerOptions | None" = None
) -> bool | None:
    """
    Decide whether a raw time may be selected.

    Args:
        time: Raw time text
        min: Lower bound, inclusive
        max: Upper bound, inclusive
        granularity: "hours" or "minutes" (default)
        minutes_gap: Step the minutes have to be aligned to
        format: Clock the caller displays; does not change the decision
        options: Requested picker options for locale resolution

    Returns:
        None when no time was entered yet, otherwise True or False

    Raises:
        MinutesGapError: If the minute is off the ``minutes_gap`` grid
    """
    if not time:
        return None

    converted = parse(time, options)
    if converted is None:
        converted = TimeValue.invalid(f"time {time!r} is too short")

    minutes = converted.minute
    if minutes_gap and minutes is not None and minutes % minutes_gap != 0:
        raise MinutesGapError(minutes, minutes_gap)

    # Exactly one branch can hold for a given combination of bounds
    is_after = min is not None and max is None and is_same_or_after(converted, min, granularity)
    is_before = max is not None and min is None and is_same_or_before(converted, max, granularity)
    between = min is not None and max is not None and is_between(converted, min, max, granularity)
    unconstrained = min is None and max is None

    available = is_after or is_before or between or unconstrained
    logger.debug("Time %r available=%s (format=%s)", time, available, format)
    return available


def check_constraint(
    time: str | None,
    constraint: AvailabilityConstraint,
    format: TimeFormat | None = None,
    options: "TimepickerOptions | None" = None
) -> bool | None:
    """Run is_time_available against an AvailabilityConstraint."""
    return is_time_available(
        time,
        min=constraint.min,
        max=constraint.max,
        granularity=constraint.granularity,
        minutes_gap=constraint.minutes_gap,
        format=format,
        options=options
    )


def iter_available_times(
    constraint: AvailabilityConstraint,
    options: "TimepickerOptions | None" = None
) -> Iterator[str]:
    """
    Yield every canonical time on the minutes grid that the constraint admits.

    The grid runs over minutes 0, gap, 2*gap, ... of every hour, which is
    the set of times a picker built from the constraint can offer.
    """
    step = constraint.minutes_gap or 1

    for hour in range(24):
        for minute in range(0, 60, step):
            candidate = to_canonical(hour, minute)
            if check_constraint(candidate, constraint, options=options):
                yield candidate
