"""CLDR supplemental data loaders backed by Babel.

Populate the inputs of the currency and region derivers from the CLDR data
bundled with Babel: legal tender per region, currency precision, localized
territory names and currency descriptors. Results are plain dicts ready for
InMemoryLocaleDataSource or DefaultCurrencyResolver.

Babel is imported lazily through cldrforge.core.babel_compat so importing
this module stays cheap.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from cldrforge.constants import UNKNOWN_CURRENCY_CODE, UNKNOWN_REGION_CODE
from cldrforge.core.babel_compat import get_babel_numbers, require_babel
from cldrforge.locale_utils import get_babel_locale

__all__ = [
    "currency_fraction_digits",
    "load_currency_descriptors",
    "load_region_currencies",
    "load_territory_names",
]

logger = logging.getLogger(__name__)

_REFERENCE_LOCALE = "en"


def load_region_currencies(
    territories: Iterable[str] | None = None,
    *,
    on_date: date | None = None,
) -> dict[str, str]:
    """Build the region -> current legal tender map.

    The first tender currency in use on ``on_date`` wins. The unknown
    region ``ZZ`` and the "no currency" code ``XXX`` are skipped.

    Args:
        territories: Region codes to look up; defaults to every territory
            CLDR names in English
        on_date: Reference date (default: today)

    Returns:
        Mapping from region code to ISO 4217 code

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("load_region_currencies")
    numbers = get_babel_numbers()
    if territories is None:
        territories = get_babel_locale(_REFERENCE_LOCALE).territories.keys()

    result: dict[str, str] = {}
    for territory in territories:
        if territory == UNKNOWN_REGION_CODE:
            continue
        currencies = numbers.get_territory_currencies(territory, start_date=on_date, tender=True)
        for currency in currencies:
            if currency != UNKNOWN_CURRENCY_CODE:
                result[territory] = currency
                break
    logger.debug("Loaded tender currencies for %d regions", len(result))
    return result


def currency_fraction_digits(code: str) -> int:
    """Return the standard number of fraction digits of a currency.

    Raises:
        BabelImportError: If Babel is not installed
    """
    return get_babel_numbers().get_currency_precision(code)


def load_territory_names(locale_code: str) -> dict[str, str]:
    """Return localized territory display names for a locale.

    Includes numeric UN M.49 codes ("001", "150"); the region order computer
    filters those out of its candidates.

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If the locale is not in CLDR
    """
    require_babel("load_territory_names")
    return dict(get_babel_locale(locale_code).territories)


def load_currency_descriptors(locale_code: str, codes: Iterable[str]) -> dict[str, str]:
    """Build primary currency descriptors (``name|symbol|digits``) from CLDR.

    A currency without a localized name falls back to its code for every
    field Babel cannot supply.

    Args:
        locale_code: Locale whose names and symbols are used
        codes: ISO 4217 codes to describe

    Returns:
        Mapping from currency code to primary descriptor

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("load_currency_descriptors")
    numbers = get_babel_numbers()
    locale = get_babel_locale(locale_code)
    descriptors: dict[str, str] = {}
    for code in codes:
        name = numbers.get_currency_name(code, locale=locale)
        symbol = numbers.get_currency_symbol(code, locale=locale)
        digits = numbers.get_currency_precision(code)
        descriptors[code] = f"{name}|{symbol}|{digits}"
    return descriptors
