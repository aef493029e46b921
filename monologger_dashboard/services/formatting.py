"""
Date Formatting - locale rendering of ISO-8601 dates for chart labels.

Formatters are plain functions of the date string, so callers can inject a
different one and get reproducible output.
"""

import logging
from datetime import date
from functools import partial
from typing import Callable, Dict

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)

DateFormatter = Callable[[str], str]

DEFAULT_LOCALE = "cs-CZ"
FALLBACK_DISPLAY = "-"

LOCALE_PATTERNS: Dict[str, Callable[[date], str]] = {
    "cs-CZ": lambda d: f"{d.day}. {d.month}. {d.year}",
    "de-DE": lambda d: f"{d.day}.{d.month}.{d.year}",
    "en-GB": lambda d: f"{d.day:02d}/{d.month:02d}/{d.year}",
    "en-US": lambda d: f"{d.month}/{d.day}/{d.year}",
    "iso": lambda d: d.isoformat(),
}


def format_display_date(value: str, locale: str = DEFAULT_LOCALE) -> str:
    """Render an ISO-8601 date (or date-time) in the given locale.

    The calendar date is taken as written; no timezone conversion is done.
    Unparseable input is returned unchanged instead of raising.

    Args:
        value: ISO-8601 date string, e.g. "2024-01-15"
        locale: Key of LOCALE_PATTERNS

    Returns:
        Non-empty display string
    """
    try:
        parsed = isoparse(value)
    except (ValueError, TypeError, OverflowError):
        logger.debug(f"Could not parse date {value!r}, showing it as-is")
        return value or FALLBACK_DISPLAY
    return LOCALE_PATTERNS[locale](parsed.date())


def get_date_formatter(locale: str = DEFAULT_LOCALE) -> DateFormatter:
    """Get a formatter bound to a supported locale.

    Raises:
        ValueError: If the locale is not supported
    """
    if locale not in LOCALE_PATTERNS:
        supported = ", ".join(sorted(LOCALE_PATTERNS))
        raise ValueError(f"Unsupported display locale {locale!r} (supported: {supported})")
    return partial(format_display_date, locale=locale)
