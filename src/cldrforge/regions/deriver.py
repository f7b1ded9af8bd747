"""Localized display-name derivation.

Loads region, language, script and variant display names, seeds the root
locale from a reference language, computes the two region orderings for
every locale and deduplicates everything against ancestors before building
one LocalizedNamesVariant per locale with territory data. Each variant also
carries the locale's native display name ("français - Canada") and its
writing direction.

Python 3.13+. Zero external dependencies (PyICU optional for collation).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType

from cldrforge.config import GenerationConfig
from cldrforge.constants import (
    CATEGORY_LANGUAGE,
    CATEGORY_SCRIPT,
    CATEGORY_TERRITORY,
    CATEGORY_VARIANT,
    LIKELY_ORDER_KEY,
    NATIVE_NAME_SEPARATOR,
    RESERVED_KEY_PREFIX,
    SORT_ORDER_KEY,
)
from cldrforge.enums import ArtifactFamily
from cldrforge.locales import LocaleDataSource, LocaleKey
from cldrforge.pipeline import DerivationResult, Deriver
from cldrforge.regions.collation import CollationKey, collation_key_for
from cldrforge.regions.order import RegionOrderComputer, join_region_order, split_region_order
from cldrforge.regions.population import RegionLanguageSource

__all__ = [
    "LocalizedNamesDeriver",
    "LocalizedNamesVariant",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocalizedNamesVariant:
    """Display names and region orderings one locale adds to its ancestor.

    An ordering of None means the locale inherits it; an empty tuple is an
    explicitly empty ordering.

    Attributes:
        locale: Locale of this variant
        inherits_from: Variant locale this one extends (None for the root)
        region_names: Region code -> display name, sorted by code
        sort_order: Region codes in display-name order, or None
        likely_order: Most relevant region codes, or None
        language_names: Language code -> display name
        script_names: Script code -> display name
        variant_names: Variant code -> display name
        native_name: The locale named in its own language, with the region
            appended after " - " when it has one; None for the root or when
            no language name resolves
        is_rtl: True when the language is written right to left
    """

    locale: LocaleKey
    inherits_from: LocaleKey | None
    region_names: Mapping[str, str]
    sort_order: tuple[str, ...] | None
    likely_order: tuple[str, ...] | None
    language_names: Mapping[str, str]
    script_names: Mapping[str, str]
    variant_names: Mapping[str, str]
    native_name: str | None = None
    is_rtl: bool = False


def _sorted_names(entries: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType({key: entries[key] for key in sorted(entries)})


class LocalizedNamesDeriver(Deriver):
    """Derives localized names and region orderings."""

    family = ArtifactFamily.LOCALIZED_NAMES
    categories = (CATEGORY_TERRITORY, CATEGORY_LANGUAGE, CATEGORY_SCRIPT, CATEGORY_VARIANT)

    def __init__(
        self,
        source: LocaleDataSource,
        regions: RegionLanguageSource,
        config: GenerationConfig | None = None,
        *,
        collation_key: Callable[[LocaleKey], CollationKey] = collation_key_for,
    ) -> None:
        """Initialize the deriver.

        Args:
            source: Locale-data collaborator holding display names
            regions: Region population collaborator for likely orders
            config: Generation settings
            collation_key: Factory of per-locale collation key functions
                (default: ICU collators)
        """
        super().__init__(source, config)
        self._orders = RegionOrderComputer(
            regions,
            collation_key=collation_key,
            limit=self.config.likely_order_limit,
            min_literate_population=self.config.likely_min_literate_population,
        )

    def cleanup_data(self) -> None:
        """Seed the root locale, compute orderings, then deduplicate."""
        data = self.data
        config = self.config
        root_source = LocaleKey.parse(config.root_source_locale)
        data.copy_locale_data(root_source, LocaleKey.DEFAULT, *config.root_copy_categories)

        for tag, names in config.region_name_overrides.items():
            data.add_entries(CATEGORY_TERRITORY, LocaleKey.parse(tag), names)

        # Orderings are computed from complete name sets, before deduplication.
        for locale in data.non_empty_locales(CATEGORY_TERRITORY):
            names = data.get_entries(CATEGORY_TERRITORY, locale)
            order = self._orders.sort_order(locale, names)
            data.add_entry(CATEGORY_TERRITORY, locale, SORT_ORDER_KEY, join_region_order(order))

        for locale in data.all_locales():
            order = self._orders.likely_order(locale)
            data.add_entry(CATEGORY_TERRITORY, locale, LIKELY_ORDER_KEY, join_region_order(order))

        for category in self.categories:
            data.remove_duplicates(category)

    def derive(self) -> DerivationResult:
        """Build one LocalizedNamesVariant per locale with territory facts."""
        data = self.data
        variants: dict[LocaleKey, LocalizedNamesVariant] = {}
        for locale in self.dispatch_order(data.non_empty_locales(CATEGORY_TERRITORY)):
            entries = data.get_entries(CATEGORY_TERRITORY, locale)
            region_names = {
                code: name
                for code, name in entries.items()
                if not code.startswith(RESERVED_KEY_PREFIX)
                and name
                and (locale.is_default or name != code)
            }
            sort_order = entries.get(SORT_ORDER_KEY)
            likely_order = entries.get(LIKELY_ORDER_KEY)
            variants[locale] = LocalizedNamesVariant(
                locale=locale,
                inherits_from=None,
                region_names=_sorted_names(region_names),
                sort_order=None if sort_order is None else split_region_order(sort_order),
                likely_order=None if likely_order is None else split_region_order(likely_order),
                language_names=_sorted_names(data.get_entries(CATEGORY_LANGUAGE, locale)),
                script_names=_sorted_names(data.get_entries(CATEGORY_SCRIPT, locale)),
                variant_names=_sorted_names(data.get_entries(CATEGORY_VARIANT, locale)),
                native_name=self._native_name(locale),
                is_rtl=locale.language in self.config.rtl_languages,
            )
            logger.debug("Locale %s: %d region names", locale, len(region_names))
        return self.build_result(
            {
                locale: replace(variant, inherits_from=self.nearest_variant(locale, variants))
                for locale, variant in variants.items()
            }
        )

    def native_names(self, result: DerivationResult) -> dict[str, str]:
        """Collect the native display name of every generated locale.

        Overrides for languages with no generated variant are included, so
        the mapping can back a locale picker directly.

        Args:
            result: Output of run()

        Returns:
            Locale tag -> native display name, sorted by tag
        """
        names = {
            locale.tag: variant.native_name
            for locale, variant in result.variants.items()
            if isinstance(variant, LocalizedNamesVariant) and variant.native_name is not None
        }
        names.update(self.config.native_name_overrides)
        return {tag: names[tag] for tag in sorted(names)}

    def _native_name(self, locale: LocaleKey) -> str | None:
        if locale.is_default:
            return None
        override = self.config.native_name_overrides.get(locale.tag)
        if override is not None:
            return override
        data = self.data
        language_name = data.get_entry(CATEGORY_LANGUAGE, locale, locale.language)
        if language_name is None:
            logger.debug("Locale %s: no native language name", locale)
            return None
        if locale.region is None:
            return language_name
        region_name = data.get_entry(CATEGORY_TERRITORY, locale, locale.region)
        if region_name is None:
            return language_name
        return f"{language_name}{NATIVE_NAME_SEPARATOR}{region_name}"
