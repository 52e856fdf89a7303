"""
Tests for locale resolution.
"""

import pytest

from timepicker.config import TimepickerOptions
from timepicker.domain.locale import (
    canonical_tag,
    looks_like_plain_digits,
    negotiate_locale,
    negotiate_numbering_system,
    resolve_locale_options,
    to_pendulum_locale,
)
from timepicker.domain.models import LocaleOptions


class TestPlainDigitHeuristic:
    """Tests for looks_like_plain_digits()."""

    @pytest.mark.parametrize("raw", ["1815", "18:30", "6:30 pm", " 0815", "+1200"])
    def test_plain_digit_strings(self, raw):
        """Test strings starting with an ASCII integer qualify."""
        assert looks_like_plain_digits(raw)

    @pytest.mark.parametrize("raw", ["", "abc", "pm 6:30", "١٨:٣٠", ":30"])
    def test_other_strings(self, raw):
        """Test strings not starting with an ASCII integer do not qualify."""
        assert not looks_like_plain_digits(raw)


class TestResolveLocaleOptions:
    """Tests for resolve_locale_options()."""

    def test_plain_digits_force_defaults(self):
        """Test ASCII digit input ignores the requested locale."""
        options = TimepickerOptions(locale="fr-FR", numbering_system="arab")

        resolved = resolve_locale_options("18:30", options)

        assert resolved == LocaleOptions(locale="en-US", numbering_system="latn")

    def test_requested_options_used_for_other_text(self):
        """Test non-digit text is read under the requested options."""
        options = TimepickerOptions(locale="fr", numbering_system="arab")

        resolved = resolve_locale_options("١٨:٣٠", options)

        assert resolved.locale == "fr"
        assert resolved.numbering_system == "arab"

    def test_unknown_numbering_system_falls_back(self):
        """Test unknown numbering systems resolve to latn."""
        options = TimepickerOptions(locale="fr", numbering_system="klingon")

        assert resolve_locale_options("abcd", options).numbering_system == "latn"

    @pytest.mark.parametrize("tag", ["-", "_", "-US", "_us", "--"])
    def test_malformed_locale_tags_fall_back(self, tag):
        """Test tags without a language subtag resolve instead of raising."""
        resolved = resolve_locale_options("abcd", TimepickerOptions(locale=tag, default_to_en=True))

        assert isinstance(resolved, LocaleOptions)
        assert resolved.locale == "en-US"

    def test_no_options(self):
        """Test missing options resolve to en-US."""
        assert resolve_locale_options("abcd") == LocaleOptions()


class TestNegotiation:
    """Tests for the locale negotiation helpers."""

    def test_canonical_tag(self):
        """Test tags are normalized to language-REGION form."""
        assert canonical_tag("en_us") == "en-US"
        assert canonical_tag("IT-it") == "it-IT"
        assert canonical_tag("FR") == "fr"

    def test_unsupported_locale_defaults_to_en(self):
        """Test an unknown locale falls back to en-US when asked to."""
        assert negotiate_locale("zz-ZZ", default_to_en=True) == "en-US"

    def test_missing_locale_defaults_to_en(self):
        """Test no locale at all falls back to en-US when asked to."""
        assert negotiate_locale(None, default_to_en=True) == "en-US"

    def test_region_falls_back_to_language(self):
        """Test a region pendulum does not ship resolves to its language."""
        assert negotiate_locale("fr-ZZ") == "fr"

    def test_to_pendulum_locale(self):
        """Test BCP-47 tags map to loadable pendulum locales."""
        assert to_pendulum_locale("fr-FR") in {"fr_fr", "fr"}
        assert to_pendulum_locale("zz") is None
        assert to_pendulum_locale("-") is None
        assert to_pendulum_locale("_") is None

    def test_numbering_system(self):
        """Test numbering systems are lower-cased and validated."""
        assert negotiate_numbering_system("ARAB") == "arab"
        assert negotiate_numbering_system(None) == "latn"
