"""Currency list derivation.

Builds, per locale, the table of currencies the locale redefines, its
display-name overrides and its default currency. Locales are visited in
dispatch order and each variant only carries what differs from the variant
it inherits from.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Protocol

from cldrforge.config import GenerationConfig
from cldrforge.constants import CATEGORY_CURRENCY
from cldrforge.currency.defaults import DefaultCurrencyResolver
from cldrforge.currency.record import CurrencyRecord
from cldrforge.diagnostics import MalformedDescriptorError
from cldrforge.enums import ArtifactFamily
from cldrforge.locales import LocaleDataSource, LocaleKey
from cldrforge.pipeline import DerivationResult, Deriver

__all__ = [
    "CurrencyListDeriver",
    "CurrencyListVariant",
    "CurrencyOverlaySource",
    "InMemoryCurrencyOverlaySource",
]

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, str] = MappingProxyType({})


class CurrencyOverlaySource(Protocol):
    """Protocol for hand-curated overlay descriptors.

    Overlays apply to exactly one locale and are never inherited.
    """

    def extra(self, locale: LocaleKey) -> Mapping[str, str]:
        """Return currency code -> overlay descriptor for one locale."""


class InMemoryCurrencyOverlaySource:
    """Overlay source backed by a locale tag -> code -> descriptor mapping.

    Example:
        >>> overlays = InMemoryCurrencyOverlaySource({"en": {"USD": "US$|SymPrefix"}})
        >>> overlays.extra(LocaleKey.parse("en"))["USD"]
        'US$|SymPrefix'
        >>> dict(overlays.extra(LocaleKey.parse("en_GB")))
        {}
    """

    __slots__ = ("_extras",)

    def __init__(self, extras: Mapping[str, Mapping[str, str]]) -> None:
        self._extras: dict[LocaleKey, Mapping[str, str]] = {
            LocaleKey.parse(tag): MappingProxyType(dict(descriptors))
            for tag, descriptors in extras.items()
        }

    def extra(self, locale: LocaleKey) -> Mapping[str, str]:
        """Return the overlay of exactly this locale."""
        return self._extras.get(locale, _EMPTY)


@dataclass(frozen=True, slots=True)
class CurrencyListVariant:
    """Currency data one locale adds on top of the variant it inherits from.

    Attributes:
        locale: Locale of this variant
        inherits_from: Variant locale this one extends (None for the root)
        currencies: Records the locale redefines, sorted by code
        names: Display names that differ from the currency code
        default_currency: Default currency record, or None to inherit
    """

    locale: LocaleKey
    inherits_from: LocaleKey | None
    currencies: tuple[CurrencyRecord, ...]
    names: Mapping[str, str]
    default_currency: CurrencyRecord | None

    @property
    def default_currency_code(self) -> str | None:
        """ISO code of the default currency, or None to inherit."""
        if self.default_currency is None:
            return None
        return self.default_currency.code


class CurrencyListDeriver(Deriver):
    """Derives per-locale currency tables and default currencies.

    A locale's default currency is re-specified when the locale resolves one
    itself, or when it redefines the record of the default it inherits.
    If the default currency has no descriptor anywhere in the locale's
    ancestor chain, a record is synthesized from the code alone.
    """

    family = ArtifactFamily.CURRENCY_LIST
    categories = (CATEGORY_CURRENCY,)

    def __init__(
        self,
        source: LocaleDataSource,
        resolver: DefaultCurrencyResolver | None = None,
        overlays: CurrencyOverlaySource | None = None,
        config: GenerationConfig | None = None,
    ) -> None:
        """Initialize the deriver.

        Args:
            source: Locale-data collaborator holding primary descriptors
            resolver: Default currency resolver; without one every locale
                inherits the root default
            overlays: Overlay descriptor source (optional)
            config: Generation settings
        """
        super().__init__(source, config)
        if resolver is None:
            resolver = DefaultCurrencyResolver({}, {}, fallback=self.config.default_currency)
        self._resolver = resolver
        self._overlays = overlays

    def cleanup_data(self) -> None:
        """Drop descriptors identical to the inherited ones."""
        self.data.remove_duplicates(CATEGORY_CURRENCY)

    def derive(self) -> DerivationResult:
        """Build one CurrencyListVariant per locale that has something to say."""
        data = self.data
        variants: dict[LocaleKey, CurrencyListVariant] = {}
        for locale in self.dispatch_order(data.all_locales()):
            try:
                variant = self._derive_locale(locale)
            except MalformedDescriptorError as error:
                logger.error(
                    "Malformed %s descriptor for %s in locale %s: %s",
                    error.field,
                    error.currency_code,
                    locale,
                    error.descriptor,
                )
                raise error.with_locale(locale.tag) from error
            if variant is not None:
                variants[locale] = variant
        return self.build_result(
            {
                locale: replace(variant, inherits_from=self.nearest_variant(locale, variants))
                for locale, variant in variants.items()
            }
        )

    def _derive_locale(self, locale: LocaleKey) -> CurrencyListVariant | None:
        data = self.data
        descriptors = data.get_entries(CATEGORY_CURRENCY, locale)
        extra = self._overlays.extra(locale) if self._overlays is not None else _EMPTY

        records = tuple(
            CurrencyRecord.from_descriptors(code, descriptors[code], extra.get(code))
            for code in sorted(descriptors)
        )

        default_code = self._resolver.resolve(locale)
        if default_code is None:
            parent = locale.parent()
            inherited = self._resolver.effective(parent) if parent is not None else None
            if inherited is not None and inherited in descriptors:
                default_code = inherited

        if not records and default_code is None:
            logger.debug("Locale %s adds no currency data", locale)
            return None

        default_record = None
        if default_code is not None:
            default_record = next((r for r in records if r.code == default_code), None)
            if default_record is None:
                primary = data.get_entry(CATEGORY_CURRENCY, locale, default_code)
                if primary is None:
                    logger.debug("Synthesizing default currency %s for %s", default_code, locale)
                    default_record = CurrencyRecord.from_descriptors(default_code)
                else:
                    default_record = CurrencyRecord.from_descriptors(
                        default_code, primary, extra.get(default_code)
                    )

        names = {
            record.code: record.display_name
            for record in records
            if record.display_name and record.display_name != record.code
        }
        logger.debug(
            "Locale %s: %d currencies, default %s", locale, len(records), default_code
        )
        return CurrencyListVariant(
            locale=locale,
            inherits_from=None,
            currencies=records,
            names=MappingProxyType(names),
            default_currency=default_record,
        )
