"""
Tests for building TimeValue objects.
"""

import pendulum
import pytest

from timepicker.config import TimepickerOptions
from timepicker.domain.models import LocaleOptions, TimeValue
from timepicker.domain.time_model import from_hour_minute, parse


class TestParse:
    """Tests for parse()."""

    def test_parse_anchors_to_today(self):
        """Test the parsed value carries today's date and the parsed time."""
        value = parse("18:30")

        assert value.is_valid
        assert value.hour == 18
        assert value.minute == 30
        assert value.moment.date() == pendulum.today("UTC").date()

    def test_parse_am_pm_and_block(self):
        """Test marker and HHMM inputs parse to the right time."""
        assert parse("6:30 pm").minute_of_day == 18 * 60 + 30
        assert parse("1815").hour == 18
        assert parse("12:00 am").hour == 0

    @pytest.mark.parametrize("raw", [None, "", "1:2", "930"])
    def test_short_input_returns_none(self, raw):
        """Test missing and short text is rejected outright."""
        assert parse(raw) is None

    def test_unparsable_input_is_invalid(self):
        """Test text outside the grammar produces an invalid value."""
        value = parse("half past six")

        assert value is not None
        assert not value.is_valid
        assert value.hour is None
        assert value.minute is None
        assert "unparsable" in value.invalid_reason

    def test_out_of_range_hour_is_invalid(self):
        """Test a pm marker pushing past 23 gives an invalid value."""
        value = parse("13:00 pm")

        assert value is not None
        assert not value.is_valid

    def test_parse_uses_resolved_locale(self):
        """Test digit input is parsed under the default locale options."""
        value = parse("18:30", TimepickerOptions(locale="fr", numbering_system="arab"))

        assert value.locale_options == LocaleOptions(locale="en-US", numbering_system="latn")

    def test_parse_in_timezone(self):
        """Test the anchor date follows the requested timezone."""
        value = parse("0815", timezone="Europe/Berlin")

        assert value.moment.timezone_name == "Europe/Berlin"
        assert value.hour == 8


class TestFromHourMinute:
    """Tests for from_hour_minute()."""

    def test_valid(self):
        """Test a valid hour/minute pair."""
        value = from_hour_minute(14, 0)

        assert value.is_valid
        assert str(value) == "14:00"

    def test_invalid(self):
        """Test out-of-range values give an invalid TimeValue."""
        assert not from_hour_minute(24, 0).is_valid
        assert not from_hour_minute(10, 60).is_valid


class TestTimeValue:
    """Tests for the TimeValue model."""

    def test_reconfigure_keeps_moment(self):
        """Test reconfiguring only swaps the locale options."""
        value = from_hour_minute(9, 15)
        other = value.reconfigure(LocaleOptions(locale="fr", numbering_system="arab"))

        assert other.moment == value.moment
        assert other.locale_options.locale == "fr"
        assert value.locale_options.locale == "en-US"

    def test_invalid_str(self):
        """Test the invalid value describes itself."""
        assert "Invalid" in str(TimeValue.invalid("bad input"))
