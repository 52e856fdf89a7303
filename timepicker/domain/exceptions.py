"""
Domain-specific exception hierarchy for the timepicker core.
"""


class TimepickerError(Exception):
    """Base class for all timepicker errors."""


class ConfigurationError(TimepickerError, ValueError):
    """Raised when picker options or constraints cannot be loaded."""


class MinutesGapError(TimepickerError, ValueError):
    """
    Raised when a time does not sit on the configured minutes grid.

    This is a caller configuration fault, not an ordinary out-of-range
    value, so it is raised instead of being returned as ``False``.
    """

    def __init__(self, minutes: int, minutes_gap: int):
        self.minutes = minutes
        self.minutes_gap = minutes_gap
        super().__init__(
            f"Your minutes - {minutes} doesn't match your minutesGap - {minutes_gap}"
        )
