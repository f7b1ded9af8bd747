"""Pytest configuration and shared fixtures for the cldrforge test suite.

Hypothesis profiles (max_examples):
- dev: Local development, 300 examples
- ci: CI runs, 50 examples, derandomized
- verbose: Debug mode with progress output, 100 examples

Profile selection: HYPOTHESIS_PROFILE overrides; CI=true selects "ci";
otherwise "dev". Example: HYPOTHESIS_PROFILE=verbose pytest tests/

Tests marked @pytest.mark.fuzz are skipped unless requested with
``pytest -m fuzz``.

Fixtures:
    sample_source - A small CLDR-like locale data source (en, en_GB, fr, ...)
    region_source - Literate population per language for likely orders
    resolver      - DefaultCurrencyResolver over a few regions
    casefold_collation - Collation key factory that needs no ICU
"""

import os
from collections.abc import Callable

import pytest
from hypothesis import Phase, Verbosity, settings

from cldrforge.currency import DefaultCurrencyResolver
from cldrforge.locales import InMemoryLocaleDataSource, LocaleKey
from cldrforge.regions import CollationKey, InMemoryRegionLanguageSource, RegionPopulation

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=300, phases=_PHASES, derandomize=False)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile: explicit override, then CI, then dev."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless ``-m fuzz`` was given."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# DOMAIN FIXTURES
# =============================================================================

SAMPLE_DATA: dict[str, dict[str, dict[str, str]]] = {
    "currency": {
        "en": {
            "USD": "US Dollar|$|2",
            "GBP": "British Pound|£|2",
            "EUR": "Euro|€|2",
            "JPY": "Japanese Yen|¥|0",
        },
        "en_GB": {
            "USD": "US Dollar|US$|2",
            "GBP": "British Pound|£|2",
        },
        "fr": {
            "EUR": "euro|€|2",
            "USD": "dollar des États-Unis|$US|2",
        },
        "fr_CA": {
            "CAD": "dollar canadien|$|2",
        },
    },
    "territory": {
        "en": {
            "US": "United States",
            "GB": "United Kingdom",
            "FR": "France",
            "DE": "Germany",
            "ZZ": "Unknown Region",
            "001": "World",
        },
        "en_GB": {
            "US": "United States",
            "GB": "United Kingdom",
            "FR": "France",
            "DE": "Germany",
        },
        "fr": {
            "US": "États-Unis",
            "GB": "Royaume-Uni",
            "FR": "France",
            "DE": "Allemagne",
        },
    },
    "language": {
        "en": {"en": "English", "fr": "French"},
        "fr": {"en": "anglais", "fr": "français"},
    },
    "numberConstants": {
        "en": {
            "decimal": ".",
            "group": ",",
            "percentSign": "%",
            "plusSign": "+",
            "minusSign": "-",
            "exponential": "E",
            "perMille": "‰",
            "infinity": "∞",
            "nan": "NaN",
            "decimalPattern": "#,##0.###",
            "scientificPattern": "#E0",
            "percentPattern": "#,##0%",
            "currencyPattern": "¤#,##0.00;(¤#,##0.00)",
        },
        "fr": {
            "decimal": ",",
            "group": " ",
            "currencyPattern": "#,##0.00 ¤",
        },
    },
    "defaultNumberingSystem": {
        "ar": {"defaultNumberingSystem": "arab"},
    },
    "list": {
        "en": {"2": "{0} and {1}", "start": "{0}, {1}", "middle": "{0}, {1}", "end": "{0}, and {1}"},
        "en_GB": {"2": "{0} and {1}", "start": "{0}, {1}", "middle": "{0}, {1}", "end": "{0} and {1}"},
        "en_AU": {"2": "{0} and {1}", "start": "{0}, {1}", "middle": "{0}, {1}", "end": "{0}, and {1}"},
    },
}


@pytest.fixture
def sample_source() -> InMemoryLocaleDataSource:
    """Small CLDR-like locale data source."""
    return InMemoryLocaleDataSource(SAMPLE_DATA, locales=["en_US", "fr_FR", "ar"])


@pytest.fixture
def region_source() -> InMemoryRegionLanguageSource:
    """Literate population per language (figures rounded)."""
    return InMemoryRegionLanguageSource(
        {
            "en": [
                RegionPopulation("US", "United States", 290_000_000),
                RegionPopulation("IN", "India", 125_000_000),
                RegionPopulation("GB", "United Kingdom", 60_000_000),
                RegionPopulation("MT", "Malta", 400_000),
                RegionPopulation("CA", "Canada", 25_000_000),
            ],
            "fr": [
                RegionPopulation("FR", "France", 60_000_000),
                RegionPopulation("CA", "Canada", 7_000_000),
            ],
            "sr_Latn": [RegionPopulation("RS", "Serbia", 4_000_000)],
            "sr": [RegionPopulation("BA", "Bosnia", 1_000_000)],
        }
    )


@pytest.fixture
def resolver() -> DefaultCurrencyResolver:
    """Default currency resolver over a handful of regions."""
    return DefaultCurrencyResolver(
        {"US": "USD", "GB": "GBP", "FR": "EUR", "CA": "CAD", "JP": "JPY"},
        {"en": "US", "fr": "FR", "ja": "JP"},
    )


@pytest.fixture
def casefold_collation() -> Callable[[LocaleKey], CollationKey]:
    """Collation key factory ordering names case-insensitively (no ICU)."""

    def factory(_locale: LocaleKey) -> CollationKey:
        return str.casefold

    return factory
