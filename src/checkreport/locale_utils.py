"""Locale utilities for plural selection.

Report texts are English, but the count header picks its noun form from
CLDR plural rules through Babel rather than a hardcoded ``n == 1`` test.

Python 3.11+. Depends on Babel for CLDR data.
"""

import functools
import logging

from babel.core import Locale, UnknownLocaleError

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "select_plural_category",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=32)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    return Locale.parse(normalize_locale(locale_code))


def select_plural_category(n: int, locale: str) -> str:
    """Select CLDR plural category for a count.

    Args:
        n: Count to categorize
        locale: Locale code (e.g., "en", "en_US", "pl-PL")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other".
        Unknown locales fall back to the one/other rule.

    Examples:
        >>> select_plural_category(1, "en")
        'one'
        >>> select_plural_category(3, "en")
        'other'
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("Unknown locale '%s': %s. Using one/other plural rule", locale, e)
        return "one" if abs(n) == 1 else "other"
    return locale_obj.plural_form(n)
