"""
Locale resolution for time parsing.

Decides which locale and numbering system a raw time string is read under.
Plain-digit strings are always read under the defaults so localized digits
are never assumed for text that is already ASCII.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import TYPE_CHECKING

import pendulum
from pendulum.locales.locale import Locale

from .models import DEFAULT_LOCALE, DEFAULT_NUMBERING_SYSTEM, LocaleOptions

if TYPE_CHECKING:
    from ..config import TimepickerOptions


logger = logging.getLogger(__name__)


# Numbering systems a picker can be asked to display digits in
KNOWN_NUMBERING_SYSTEMS = frozenset({
    "arab", "arabext", "bali", "beng", "deva", "fullwide", "gujr", "guru",
    "hanidec", "khmr", "knda", "laoo", "latn", "limb", "mlym", "mong",
    "mymr", "orya", "tamldec", "telu", "thai", "tibt",
})

# Mirrors a lenient integer parse: optional whitespace and sign, then a digit
_LEADING_INTEGER = re.compile(r"^\s*[+-]?[0-9]")


def looks_like_plain_digits(raw: str) -> bool:
    """
    Check whether a raw time string starts like a plain ASCII integer.

    "1815", "18:30" and "6:30 pm" all qualify; text starting with a letter or
    a non-ASCII digit does not.
    """
    return bool(_LEADING_INTEGER.match(raw or ""))


def canonical_tag(tag: str) -> str:
    """Normalize "en_us" / "EN-us" style tags to "en-US"."""
    parts = tag.replace("_", "-").split("-")
    language = parts[0].lower()
    if len(parts) > 1 and parts[1]:
        return f"{language}-{parts[1].upper()}"
    return language


@lru_cache(maxsize=64)
def _pendulum_has_locale(name: str) -> bool:
    if not name:
        return False
    try:
        Locale.load(name)
    except (ValueError, ImportError):
        return False
    return True


def to_pendulum_locale(tag: str) -> str | None:
    """
    Map a BCP-47 tag to a locale name pendulum can load.

    Tries the full tag first ("en_us"), then the language subtag ("en").
    Returns None when pendulum knows neither.
    """
    normalized = Locale.normalize_locale(canonical_tag(tag))
    if _pendulum_has_locale(normalized):
        return normalized
    language = normalized.split("_")[0]
    if _pendulum_has_locale(language):
        return language
    return None


def negotiate_locale(requested: str | None, default_to_en: bool = False) -> str:
    """
    Pick the locale tag actually used for a request.

    Missing or unsupported locales fall back to en-US when ``default_to_en``
    is set, otherwise to pendulum's process-wide locale.
    """
    if requested:
        tag = canonical_tag(requested)
        name = to_pendulum_locale(tag)
        if name is not None:
            if name == Locale.normalize_locale(tag):
                return tag
            return canonical_tag(name)
        logger.warning("Locale %r is not supported, falling back", requested)

    if default_to_en:
        return DEFAULT_LOCALE
    return canonical_tag(pendulum.get_locale())


def negotiate_numbering_system(requested: str | None) -> str:
    """Return the requested numbering system if known, else latn."""
    if not requested:
        return DEFAULT_NUMBERING_SYSTEM
    system = requested.lower()
    if system not in KNOWN_NUMBERING_SYSTEMS:
        logger.warning("Numbering system %r is not supported, using %s", requested, DEFAULT_NUMBERING_SYSTEM)
        return DEFAULT_NUMBERING_SYSTEM
    return system


def resolve_locale_options(
    raw: str,
    options: "TimepickerOptions | None" = None
) -> LocaleOptions:
    """
    Resolve the locale options used to parse ``raw``.

    Args:
        raw: The raw time text as typed or received
        options: Requested picker options, or None for the defaults

    Returns:
        LocaleOptions; never raises
    """
    if looks_like_plain_digits(raw):
        return LocaleOptions(
            locale=DEFAULT_LOCALE,
            numbering_system=DEFAULT_NUMBERING_SYSTEM
        )

    if options is None:
        return LocaleOptions(
            locale=negotiate_locale(None, default_to_en=True),
            numbering_system=DEFAULT_NUMBERING_SYSTEM
        )

    if options.output_calendar and options.output_calendar != "gregory":
        logger.debug("Output calendar %r ignored, only gregory is rendered", options.output_calendar)

    return LocaleOptions(
        locale=negotiate_locale(options.locale, default_to_en=options.default_to_en),
        numbering_system=negotiate_numbering_system(options.numbering_system)
    )
