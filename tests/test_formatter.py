"""
Tests for display formatting.
"""

import pytest

from timepicker.domain.formatter import (
    INVALID_TIME,
    format_hour,
    format_time,
    from_datetime_to_string,
    is_twenty_four,
)
from timepicker.domain.models import LocaleOptions, Period, TimeFormat, TimeValue
from timepicker.domain.time_model import from_hour_minute, parse


class TestFormatHour:
    """Tests for format_hour()."""

    @pytest.mark.parametrize(
        "hour, clock, period, expected",
        [
            (12, TimeFormat.TWELVE, Period.AM, 0),
            (12, TimeFormat.TWELVE, Period.PM, 12),
            (6, TimeFormat.TWELVE, Period.PM, 18),
            (6, TimeFormat.TWELVE, Period.AM, 6),
            (6, TimeFormat.TWENTY_FOUR, Period.PM, 6),
            (0, TimeFormat.TWENTY_FOUR, Period.AM, 0),
        ],
    )
    def test_wheel_to_24_hour(self, hour, clock, period, expected):
        """Test the hour wheel maps onto the 24-hour clock."""
        assert format_hour(hour, clock, period) == expected

    def test_plain_values_are_accepted(self):
        """Test 12/24 numbers and AM/PM strings are coerced."""
        assert format_hour(12, 12, "AM") == 0
        assert format_hour(6, 24, "PM") == 6

    def test_unknown_format_uses_twelve_hour_rules(self):
        """Test anything other than the 24-hour clock applies the period."""
        assert format_hour(6, 13, Period.PM) == 18
        assert format_hour(6, "24", Period.PM) == 18


class TestIsTwentyFour:
    """Tests for is_twenty_four()."""

    def test_is_twenty_four(self):
        """Test only the 24-hour clock qualifies."""
        assert is_twenty_four(TimeFormat.TWENTY_FOUR)
        assert is_twenty_four(24)
        assert not is_twenty_four(TimeFormat.TWELVE)
        assert not is_twenty_four(None)

    @pytest.mark.parametrize("value", ["24", 13, 0, "twenty-four"])
    def test_other_values_are_not_twenty_four(self, value):
        """Test unknown values answer False instead of raising."""
        assert is_twenty_four(value) is False


class TestFromDatetimeToString:
    """Tests for from_datetime_to_string()."""

    def test_twelve_hour(self):
        """Test the 12-hour pattern pads the hour and adds the period."""
        assert from_datetime_to_string(from_hour_minute(18, 30), TimeFormat.TWELVE) == "06:30 PM"
        assert from_datetime_to_string(from_hour_minute(0, 5), TimeFormat.TWELVE) == "12:05 AM"

    def test_twenty_four_hour(self):
        """Test the 24-hour pattern."""
        assert from_datetime_to_string(from_hour_minute(18, 30), TimeFormat.TWENTY_FOUR) == "18:30"
        assert from_datetime_to_string(from_hour_minute(7, 5), 24) == "07:05"

    def test_display_locale_is_fixed(self):
        """Test values parsed under another locale render the same way."""
        value = from_hour_minute(18, 30, LocaleOptions(locale="fr", numbering_system="arab"))

        assert from_datetime_to_string(value, TimeFormat.TWELVE) == "06:30 PM"

    def test_invalid_value(self):
        """Test an invalid value renders as the invalid sentinel."""
        assert from_datetime_to_string(TimeValue.invalid("bad"), TimeFormat.TWELVE) == INVALID_TIME

    def test_round_trip_is_canonical(self):
        """Test 24-hour rendering of parsed text equals its normalized form."""
        for raw, expected in [("6:30 pm", "18:30"), ("1815", "18:15"), ("12:00 am", "00:00")]:
            assert from_datetime_to_string(parse(raw), TimeFormat.TWENTY_FOUR) == expected


class TestFormatTime:
    """Tests for format_time()."""

    @pytest.mark.parametrize("raw", ["", None, "1:2"])
    def test_short_input(self, raw):
        """Test missing or short text renders the invalid sentinel."""
        assert format_time(raw) == "Invalid Time"

    def test_normalizes(self):
        """Test longer text is normalized."""
        assert format_time("6:30 pm") == "18:30"
        assert format_time("nope") is None
