"""Tests for the per-family derivers over a small CLDR-like dataset."""

import logging
from collections.abc import Callable
from typing import TypeAlias

import pytest

from cldrforge.config import GenerationConfig
from cldrforge.currency import (
    CurrencyListDeriver,
    CurrencyListVariant,
    DefaultCurrencyResolver,
    InMemoryCurrencyOverlaySource,
)
from cldrforge.enums import ArtifactFamily, DispatchStrategy
from cldrforge.list_patterns import ListPatternsDeriver, ListPatternsVariant
from cldrforge.locales import InMemoryLocaleDataSource, LocaleKey
from cldrforge.number_constants import NumberConstantsDeriver, NumberConstantsVariant
from cldrforge.regions import (
    CollationKey,
    InMemoryRegionLanguageSource,
    LocalizedNamesDeriver,
    LocalizedNamesVariant,
)

DEFAULT = LocaleKey.DEFAULT
EN = LocaleKey.parse("en")
EN_GB = LocaleKey.parse("en_GB")
EN_US = LocaleKey.parse("en_US")
FR = LocaleKey.parse("fr")
FR_CA = LocaleKey.parse("fr_CA")
FR_FR = LocaleKey.parse("fr_FR")
AR = LocaleKey.parse("ar")

CollationFactory: TypeAlias = Callable[[LocaleKey], CollationKey]


class TestCurrencyListDeriver:
    """Test CurrencyListDeriver."""

    def _variants(
        self,
        source: InMemoryLocaleDataSource,
        resolver: DefaultCurrencyResolver,
        overlays: InMemoryCurrencyOverlaySource | None = None,
    ) -> dict[LocaleKey, CurrencyListVariant]:
        result = CurrencyListDeriver(source, resolver, overlays).run()
        assert result.family == ArtifactFamily.CURRENCY_LIST
        return dict(result.variants)  # type: ignore[arg-type]

    def test_generated_locales(
        self, sample_source: InMemoryLocaleDataSource, resolver: DefaultCurrencyResolver
    ) -> None:
        """Locales with records or their own default produce a variant."""
        variants = self._variants(sample_source, resolver)
        assert set(variants) == {DEFAULT, EN, EN_GB, EN_US, FR, FR_CA, FR_FR}

    def test_root_default_is_synthesized(
        self, sample_source: InMemoryLocaleDataSource, resolver: DefaultCurrencyResolver
    ) -> None:
        """The root variant carries the fallback default built from its code."""
        root = self._variants(sample_source, resolver)[DEFAULT]
        assert root.currencies == ()
        assert root.default_currency is not None
        assert root.default_currency.code == "USD"
        assert root.default_currency.symbol == "USD"
        assert root.inherits_from is None

    def test_duplicates_removed(
        self, sample_source: InMemoryLocaleDataSource, resolver: DefaultCurrencyResolver
    ) -> None:
        """en_GB only redefines what differs from en."""
        en_gb = self._variants(sample_source, resolver)[EN_GB]
        assert [record.code for record in en_gb.currencies] == ["USD"]
        assert en_gb.currencies[0].symbol == "US$"
        assert en_gb.inherits_from == EN

    def test_default_from_region_uses_inherited_descriptor(
        self, sample_source: InMemoryLocaleDataSource, resolver: DefaultCurrencyResolver
    ) -> None:
        """en_GB defaults to GBP, whose record comes from en."""
        en_gb = self._variants(sample_source, resolver)[EN_GB]
        assert en_gb.default_currency_code == "GBP"
        assert en_gb.default_currency is not None
        assert en_gb.default_currency.symbol == "£"

    def test_default_from_language(
        self, sample_source: InMemoryLocaleDataSource, resolver: DefaultCurrencyResolver
    ) -> None:
        """Language-only locales use their most populated region."""
        variants = self._variants(sample_source, resolver)
        assert variants[EN].default_currency_code == "USD"
        assert variants[FR].default_currency_code == "EUR"
        assert variants[FR].names == {"EUR": "euro", "USD": "dollar des États-Unis"}

    def test_region_locale_without_records(
        self, sample_source: InMemoryLocaleDataSource, resolver: DefaultCurrencyResolver
    ) -> None:
        """fr_FR has no descriptors but re-specifies its default."""
        fr_fr = self._variants(sample_source, resolver)[FR_FR]
        assert fr_fr.currencies == ()
        assert fr_fr.default_currency is not None
        assert fr_fr.default_currency.display_name == "euro"
        assert fr_fr.inherits_from == FR

    def test_inherited_default_respecified_when_redefined(
        self, resolver: DefaultCurrencyResolver
    ) -> None:
        """A locale redefining its inherited default's record re-specifies it."""
        source = InMemoryLocaleDataSource(
            {
                "currency": {
                    "en": {"USD": "US Dollar|$|2"},
                    "en_001": {"USD": "US Dollar|US$|2"},
                }
            }
        )
        variant = self._variants(source, resolver)[LocaleKey.parse("en_001")]
        assert variant.default_currency is not None
        assert variant.default_currency.symbol == "US$"

    def test_overlay_applies_to_exact_locale(
        self, sample_source: InMemoryLocaleDataSource, resolver: DefaultCurrencyResolver
    ) -> None:
        """Overlays apply to one locale and are not inherited."""
        overlays = InMemoryCurrencyOverlaySource({"en": {"USD": "US$|SymPrefix"}})
        variants = self._variants(sample_source, resolver, overlays)
        usd = next(record for record in variants[EN].currencies if record.code == "USD")
        assert usd.portable_symbol == "US$"
        assert usd.position_fixed
        assert not variants[EN_GB].currencies[0].position_fixed

    def test_variant_for_request(
        self, sample_source: InMemoryLocaleDataSource, resolver: DefaultCurrencyResolver
    ) -> None:
        """Requests are routed through the dispatch table."""
        result = CurrencyListDeriver(sample_source, resolver).run()
        assert result.variant_for("en_AU") is result.variants[EN]
        assert result.variant_for("ar") is result.variants[DEFAULT]
        assert result.dispatch.lookup("fr_CA") == "CurrencyListImpl_fr_CA"

    def test_without_resolver_uses_config_fallback(
        self, sample_source: InMemoryLocaleDataSource
    ) -> None:
        """Without a resolver defaults come from the root or a redefined record."""
        result = CurrencyListDeriver(
            sample_source, config=GenerationConfig(default_currency="EUR")
        ).run()
        root = result.variants[DEFAULT]
        assert isinstance(root, CurrencyListVariant)
        assert root.default_currency_code == "EUR"
        en = result.variants[EN]
        assert isinstance(en, CurrencyListVariant)
        assert en.default_currency_code == "EUR"
        en_gb = result.variants[EN_GB]
        assert isinstance(en_gb, CurrencyListVariant)
        assert en_gb.default_currency_code is None


class TestLocalizedNamesDeriver:
    """Test LocalizedNamesDeriver."""

    @pytest.fixture
    def variants(
        self,
        sample_source: InMemoryLocaleDataSource,
        region_source: InMemoryRegionLanguageSource,
        casefold_collation: CollationFactory,
    ) -> dict[LocaleKey, LocalizedNamesVariant]:
        deriver = LocalizedNamesDeriver(
            sample_source, region_source, collation_key=casefold_collation
        )
        return dict(deriver.run().variants)  # type: ignore[arg-type]

    def test_generated_locales(self, variants: dict[LocaleKey, LocalizedNamesVariant]) -> None:
        """en_GB duplicates en entirely and produces no variant."""
        assert set(variants) == {DEFAULT, EN, FR}

    def test_root_seeded_from_english(
        self, variants: dict[LocaleKey, LocalizedNamesVariant]
    ) -> None:
        """The root carries English names, including codes it cannot sort."""
        root = variants[DEFAULT]
        assert root.region_names["US"] == "United States"
        assert root.region_names["ZZ"] == "Unknown Region"
        assert root.sort_order == ("FR", "DE", "GB", "US")
        assert root.likely_order == ()
        assert root.language_names == {"en": "English", "fr": "French"}

    def test_english_only_adds_likely_order(
        self, variants: dict[LocaleKey, LocalizedNamesVariant]
    ) -> None:
        """Names and sort order equal to the root's are inherited."""
        en = variants[EN]
        assert en.region_names == {}
        assert en.sort_order is None
        assert en.likely_order == ("US", "IN", "GB", "CA")
        assert en.inherits_from == DEFAULT

    def test_french_names_and_orders(
        self, variants: dict[LocaleKey, LocalizedNamesVariant]
    ) -> None:
        """French keeps the names that differ and its own orderings."""
        fr = variants[FR]
        assert dict(fr.region_names) == {
            "DE": "Allemagne",
            "GB": "Royaume-Uni",
            "US": "États-Unis",
        }
        assert fr.sort_order == ("DE", "FR", "GB", "US")
        assert fr.likely_order == ("FR", "CA")
        assert fr.language_names == {"en": "anglais", "fr": "français"}

    def test_region_name_overrides(
        self,
        sample_source: InMemoryLocaleDataSource,
        region_source: InMemoryRegionLanguageSource,
        casefold_collation: CollationFactory,
    ) -> None:
        """Overrides replace loaded names before orderings are computed."""
        config = GenerationConfig(region_name_overrides={"en": {"US": "America"}})
        result = LocalizedNamesDeriver(
            sample_source, region_source, config, collation_key=casefold_collation
        ).run()
        en = result.variants[EN]
        assert isinstance(en, LocalizedNamesVariant)
        assert en.region_names == {"US": "America"}
        assert en.sort_order == ("US", "FR", "DE", "GB")

    def test_reserved_keys_not_exposed(
        self, variants: dict[LocaleKey, LocalizedNamesVariant]
    ) -> None:
        """Stored orderings never leak into the region names."""
        for variant in variants.values():
            assert not any(code.startswith("!") for code in variant.region_names)


class TestNativeNames:
    """Test native display names and writing direction of LocalizedNames."""

    SOURCE = InMemoryLocaleDataSource(
        {
            "territory": {
                "en": {"US": "United States", "CA": "Canada", "EG": "Egypt"},
                "fr": {"US": "États-Unis", "CA": "Canada", "EG": "Égypte"},
                "fr_CA": {"US": "É.-U."},
                "ar": {"EG": "مصر"},
                "ssy": {"ER": "Eritrea"},
            },
            "language": {
                "en": {"en": "English", "fr": "French", "ar": "Arabic"},
                "fr": {"fr": "français"},
                "ar": {"ar": "العربية"},
            },
        }
    )

    @pytest.fixture
    def deriver(self, casefold_collation: CollationFactory) -> LocalizedNamesDeriver:
        return LocalizedNamesDeriver(
            self.SOURCE, InMemoryRegionLanguageSource({}), collation_key=casefold_collation
        )

    @pytest.fixture
    def variants(
        self, deriver: LocalizedNamesDeriver
    ) -> dict[LocaleKey, LocalizedNamesVariant]:
        return dict(deriver.run().variants)  # type: ignore[arg-type]

    def test_language_only_locale(
        self, variants: dict[LocaleKey, LocalizedNamesVariant]
    ) -> None:
        """A locale without a region is named by its language alone."""
        assert variants[FR].native_name == "français"
        assert variants[FR].is_rtl is False

    def test_region_appended_from_inherited_names(
        self, variants: dict[LocaleKey, LocalizedNamesVariant]
    ) -> None:
        """Language and region names resolve through the locale's ancestors."""
        assert variants[FR_CA].native_name == "français - Canada"

    def test_rtl_language(self, variants: dict[LocaleKey, LocalizedNamesVariant]) -> None:
        """Arabic is named in Arabic and flagged right to left."""
        assert variants[AR].native_name == "العربية"
        assert variants[AR].is_rtl is True

    def test_root_has_no_native_name(
        self, variants: dict[LocaleKey, LocalizedNamesVariant]
    ) -> None:
        """The root locale is not a user-selectable locale."""
        assert variants[DEFAULT].native_name is None
        assert variants[DEFAULT].is_rtl is False

    def test_override_replaces_derived_name(
        self, variants: dict[LocaleKey, LocalizedNamesVariant]
    ) -> None:
        """Saho has no name of its own in CLDR and uses the curated one."""
        assert variants[LocaleKey.parse("ssy")].native_name == "Saho"

    def test_native_names_mapping(self, deriver: LocalizedNamesDeriver) -> None:
        """The collected mapping is sorted by tag and excludes the root."""
        names = deriver.native_names(deriver.run())
        assert names == {
            "ar": "العربية",
            "fr": "français",
            "fr_CA": "français - Canada",
            "ssy": "Saho",
        }

    def test_configured_direction_and_overrides(
        self, casefold_collation: CollationFactory
    ) -> None:
        """RTL languages and overrides come from the configuration."""
        config = GenerationConfig(
            rtl_languages=frozenset({"fr"}), native_name_overrides={"ar": "Arabic (native)"}
        )
        deriver = LocalizedNamesDeriver(
            self.SOURCE, InMemoryRegionLanguageSource({}), config, collation_key=casefold_collation
        )
        result = deriver.run()
        fr = result.variants[FR]
        ar = result.variants[AR]
        assert isinstance(fr, LocalizedNamesVariant)
        assert isinstance(ar, LocalizedNamesVariant)
        assert fr.is_rtl is True
        assert ar.is_rtl is False
        assert ar.native_name == "Arabic (native)"
        assert "ssy" not in deriver.native_names(result)


class TestNumberConstantsDeriver:
    """Test NumberConstantsDeriver."""

    @pytest.fixture
    def variants(
        self, sample_source: InMemoryLocaleDataSource, resolver: DefaultCurrencyResolver
    ) -> dict[LocaleKey, NumberConstantsVariant]:
        result = NumberConstantsDeriver(sample_source, resolver).run()
        return dict(result.variants)  # type: ignore[arg-type]

    def test_generated_locales(self, variants: dict[LocaleKey, NumberConstantsVariant]) -> None:
        """The root plus every locale with number data."""
        assert set(variants) == {DEFAULT, EN, FR, AR}

    def test_english_patterns(self, variants: dict[LocaleKey, NumberConstantsVariant]) -> None:
        """Simple and global patterns derive from the currency pattern."""
        en = variants[EN]
        assert en.currency_pattern == "¤#,##0.00;(¤#,##0.00)"
        assert en.simple_currency_pattern == "¤¤¤¤#,##0.00;(¤¤¤¤#,##0.00)"
        assert en.global_currency_pattern == "¤¤¤¤#,##0.00 ¤¤;(¤¤¤¤#,##0.00) ¤¤"
        assert en.zero_digit == "0"
        assert en.default_currency_code == "USD"
        assert en.monetary_separator == "."
        assert en.monetary_grouping_separator == ","

    def test_french_separators(self, variants: dict[LocaleKey, NumberConstantsVariant]) -> None:
        """French symbols are its own; missing ones resolve through the root."""
        fr = variants[FR]
        assert fr.decimal_separator == ","
        assert fr.grouping_separator == " "
        assert fr.percent is None
        assert fr.global_currency_pattern == "#,##0.00 ¤¤¤¤ ¤¤"
        assert fr.default_currency_code == "EUR"

    def test_root_without_pattern(
        self, variants: dict[LocaleKey, NumberConstantsVariant]
    ) -> None:
        """A locale chain without a currency pattern leaves the derived ones unset."""
        root = variants[DEFAULT]
        assert root.currency_pattern is None
        assert root.global_currency_pattern is None
        assert root.default_currency_code == "USD"

    def test_unknown_numbering_system(
        self,
        sample_source: InMemoryLocaleDataSource,
        resolver: DefaultCurrencyResolver,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Unknown numbering systems log a warning and leave the zero digit unset."""
        with caplog.at_level(logging.WARNING, logger="cldrforge.number_constants"):
            result = NumberConstantsDeriver(sample_source, resolver).run()
        ar = result.variants[AR]
        assert isinstance(ar, NumberConstantsVariant)
        assert ar.zero_digit is None
        assert "arab" in caplog.text

    def test_known_numbering_system(
        self, sample_source: InMemoryLocaleDataSource, resolver: DefaultCurrencyResolver
    ) -> None:
        """Configured numbering systems supply their zero digit."""
        deriver = NumberConstantsDeriver(
            sample_source,
            resolver,
            numbering_systems={"latn": "0123456789", "arab": "٠١٢٣٤٥٦٧٨٩"},
        )
        ar = deriver.run().variants[AR]
        assert isinstance(ar, NumberConstantsVariant)
        assert ar.zero_digit == "٠"


class TestListPatternsDeriver:
    """Test ListPatternsDeriver."""

    def test_complete_sets_only(self, sample_source: InMemoryLocaleDataSource) -> None:
        """en_AU equals en and is dropped; en_GB keeps a complete set."""
        result = ListPatternsDeriver(sample_source).run()
        assert set(result.variants) == {EN, EN_GB}
        en_gb = result.variants[EN_GB]
        assert isinstance(en_gb, ListPatternsVariant)
        assert en_gb.two == "{0} and {1}"
        assert en_gb.end == "{0} and {1}"

    def test_routing(self, sample_source: InMemoryLocaleDataSource) -> None:
        """en_AU requests reach the en variant."""
        result = ListPatternsDeriver(sample_source).run()
        en = result.variant_for("en_AU")
        assert isinstance(en, ListPatternsVariant)
        assert en.format(["a", "b", "c"]) == "a, b, and c"
        assert result.variant_for("fr") is None

    @pytest.mark.parametrize(
        ("items", "expected"),
        [
            ([], ""),
            (["a"], "a"),
            (["a", "b"], "a and b"),
            (["a", "b", "c", "d"], "a, b, c and d"),
        ],
    )
    def test_format(self, items: list[str], expected: str) -> None:
        """Items are joined with the two, start, middle and end patterns."""
        variant = ListPatternsVariant(EN_GB, "{0} and {1}", "{0}, {1}", "{0}, {1}", "{0} and {1}")
        assert variant.format(items) == expected

    def test_most_specific_strategy(self, sample_source: InMemoryLocaleDataSource) -> None:
        """The dispatch strategy orders variants and entries alike."""
        config = GenerationConfig(dispatch_strategy=DispatchStrategy.MOST_SPECIFIC)
        result = ListPatternsDeriver(sample_source, config).run()
        assert list(result.variants) == [EN_GB, EN]
        assert result.dispatch.tags == ("en_GB", "en")
