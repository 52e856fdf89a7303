"""
Normalization of free-form time text into the canonical "HH:mm" form.

Accepted grammar (ASCII digits only, nothing before or after):

    time    := (clock | block) [" " marker]
    clock   := D{1,2} ":" D{1,2}
    block   := D{4}                      # HHMM, e.g. "0815", "1815"
    marker  := "am" | "pm" | "AM" | "PM"

Examples: "00:00", "12:18", "1:23", "06:30 am", "0815", "2218", "6:30 PM".
Text shorter than four characters and anything else is unparsable and
yields None.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time

from .models import CanonicalTimeString


logger = logging.getLogger(__name__)

MIN_TIME_LENGTH = 4

_TIME_GRAMMAR = re.compile(
    r"(?:(?P<hour>[0-9]{1,2}):(?P<minute>[0-9]{1,2})|(?P<block>[0-9]{4}))"
    r"(?: (?P<marker>am|pm|AM|PM))?"
)


def to_canonical(hour: int, minute: int) -> CanonicalTimeString:
    """Zero-pad an hour/minute pair to "HH:mm"."""
    return f"{hour:02d}:{minute:02d}"


def apply_marker(hour: int, marker: str | None) -> int:
    """
    Shift a clock hour according to an am/pm marker.

    12 am becomes 0, 12 pm stays 12 and any other pm hour gains twelve.
    Hours above 12 with a pm marker are not guarded against.
    """
    if marker is None:
        return hour
    marker = marker.lower()
    if marker == "am" and hour == 12:
        return 0
    if marker == "pm" and hour != 12:
        return hour + 12
    return hour


def normalize(raw: str | datetime | time | date | None) -> CanonicalTimeString | None:
    """
    Convert a time representation to the canonical "HH:mm" string.

    Args:
        raw: Time text, or a datetime/time value (a bare date counts as
            midnight)

    Returns:
        The canonical string, or None if ``raw`` is empty or unparsable

    Example:
        >>> normalize("06:30 pm")
        '18:30'
        >>> normalize("1815")
        '18:15'
    """
    if not raw:
        return None

    if isinstance(raw, (datetime, time)):
        return to_canonical(raw.hour, raw.minute)

    if isinstance(raw, date):
        return to_canonical(0, 0)

    if not isinstance(raw, str):
        logger.debug("Cannot normalize value of type %s", type(raw).__name__)
        return None

    if len(raw) < MIN_TIME_LENGTH:
        return None

    match = _TIME_GRAMMAR.fullmatch(raw)
    if not match:
        logger.debug("Unparsable time text %r", raw)
        return None

    block = match.group("block")
    if block:
        hour = int(block[:2])
        minute = int(block[2:])
    else:
        hour = int(match.group("hour"))
        minute = int(match.group("minute"))

    hour = apply_marker(hour, match.group("marker"))

    return to_canonical(hour, minute)
