"""Locale utilities for translation block keys.

Translation blocks use locale codes as their top-level keys, in either
BCP-47 (en-GB) or POSIX (en_GB) spelling. The keys are emitted unchanged;
these helpers only recognize them, so a misspelled locale can be reported
while the build still succeeds.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "is_known_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-GB")
        'en_GB'
        >>> normalize_locale("ru_RU")  # Already normalized
        'ru_RU'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
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
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def is_known_locale(locale_code: str) -> bool:
    """Check whether Babel recognizes locale_code.

    Example:
        >>> is_known_locale("en_GB")
        True
        >>> is_known_locale("xx_YY_ZZ")
        False
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    if not locale_code:
        return False
    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return True
