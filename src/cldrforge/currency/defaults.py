"""Default currency resolution.

A locale's default currency comes from its region when it has one, and from
the most populated region where its language is spoken when it does not.
A locale that resolves to nothing inherits its parent's default.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from cldrforge.constants import FALLBACK_DEFAULT_CURRENCY
from cldrforge.locales import LocaleKey

__all__ = [
    "DefaultCurrencyResolver",
    "resolve_default_currency",
]

logger = logging.getLogger(__name__)


def resolve_default_currency(
    locale: LocaleKey,
    region_to_currency: Mapping[str, str],
    language_to_most_populated_region: Mapping[str, str],
    *,
    fallback: str = FALLBACK_DEFAULT_CURRENCY,
) -> str | None:
    """Resolve the currency a locale specifies for itself.

    Args:
        locale: Locale to resolve
        region_to_currency: Current legal tender per region code
        language_to_most_populated_region: Region with the most speakers per language
        fallback: Currency of the root locale

    Returns:
        ISO 4217 code, or None when the locale inherits its parent's default

    Example:
        >>> regions = {"US": "USD", "FR": "EUR"}
        >>> resolve_default_currency(LocaleKey.parse("fr"), regions, {"fr": "FR"})
        'EUR'
        >>> resolve_default_currency(LocaleKey.parse("fr_CA"), regions, {"fr": "FR"}) is None
        True
    """
    if locale.is_default:
        return fallback
    if locale.region:
        return region_to_currency.get(locale.region)
    region = language_to_most_populated_region.get(locale.language)
    if region is None:
        return None
    return region_to_currency.get(region)


class DefaultCurrencyResolver:
    """Default currency lookup over fixed supplemental maps.

    Immutable after construction; safe to share between derivers.

    Example:
        >>> resolver = DefaultCurrencyResolver({"GB": "GBP"}, {"en": "US"})
        >>> resolver.resolve(LocaleKey.parse("en"))  # "US" has no currency entry
        >>> resolver.effective(LocaleKey.parse("en"))
        'USD'
    """

    __slots__ = ("_fallback", "_language_regions", "_region_currencies")

    def __init__(
        self,
        region_to_currency: Mapping[str, str],
        language_to_most_populated_region: Mapping[str, str],
        *,
        fallback: str = FALLBACK_DEFAULT_CURRENCY,
    ) -> None:
        self._region_currencies = MappingProxyType(dict(region_to_currency))
        self._language_regions = MappingProxyType(dict(language_to_most_populated_region))
        self._fallback = fallback

    @property
    def region_to_currency(self) -> Mapping[str, str]:
        """Read-only region -> currency map."""
        return self._region_currencies

    @property
    def language_to_most_populated_region(self) -> Mapping[str, str]:
        """Read-only language -> region map."""
        return self._language_regions

    def resolve(self, locale: LocaleKey) -> str | None:
        """Resolve the locale's own default (None means inherit)."""
        return resolve_default_currency(
            locale,
            self._region_currencies,
            self._language_regions,
            fallback=self._fallback,
        )

    def effective(self, locale: LocaleKey) -> str:
        """Return the default in effect for a locale, following inheritance.

        Walks the ancestor chain until a locale resolves. The root locale
        always resolves, so the walk terminates.
        """
        for ancestor in locale.ancestors():
            currency = self.resolve(ancestor)
            if currency is not None:
                if ancestor != locale:
                    logger.debug("Locale %s inherits default currency %s from %s",
                                 locale, currency, ancestor)
                return currency
        return self._fallback
