"""Locale-sensitive collation keys backed by PyICU.

The region sort order compares display names the way speakers of the locale
expect ("Österreich" sorts with "O" in German, after "Z" in Swedish).
Python's built-in string ordering compares code points, so ICU collators
supply the keys.

PyICU is an optional dependency (``pip install cldrforge[icu]``); the region
order computer accepts any key function, so callers without ICU can inject
their own.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeAlias

from cldrforge.core.babel_compat import get_icu_module
from cldrforge.locales import LocaleKey

__all__ = [
    "CollationKey",
    "code_point_key",
    "collation_key_for",
]

logger = logging.getLogger(__name__)

CollationKey: TypeAlias = Callable[[str], Any]


def code_point_key(value: str) -> str:
    """Collation key that orders by code point (locale-insensitive)."""
    return value


def _icu_locale_id(locale: LocaleKey) -> str:
    if locale.is_default:
        return "root"
    return locale.tag


def collation_key_for(locale: LocaleKey) -> CollationKey:
    """Return an ICU sort-key function for a locale.

    The root locale uses the ICU root collation. ICU collators are not
    thread-safe, so every call creates a fresh collator.

    Args:
        locale: Locale whose collation rules apply

    Returns:
        Callable mapping a string to its ICU sort key (bytes)

    Raises:
        IcuImportError: If PyICU is not installed
    """
    icu = get_icu_module()
    locale_id = _icu_locale_id(locale)
    collator = icu.Collator.createInstance(icu.Locale(locale_id))
    logger.debug("Created ICU collator for %s", locale_id)
    return collator.getSortKey
