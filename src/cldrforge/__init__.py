"""cldrforge - CLDR locale-data derivation core.

Turns a flat table of locale-tagged facts into a minimal, inheritance
deduplicated dataset plus derived locale facts: region orderings, default
currencies, currency records and currency patterns, with dispatch tables
routing runtime locale requests to the generated per-locale variants.

Public API:
    LocaleKey - Locale identity and parent chain
    LocaleData - Inheritance-aware locale fact table
    CurrencyRecord - Currency descriptor codec
    DefaultCurrencyResolver - Default currency resolution
    RegionOrderComputer - Region sort order and likely order
    build_dispatch_table - Variant dispatch tables
    GenerationConfig - Settings of a generation run
    generate - Run derivers and collect their results

Exceptions:
    CldrForgeError - Base exception class
    MalformedDescriptorError - Unparseable currency descriptor
    LocaleTagError - Invalid locale tag

Submodules:
    cldrforge.locales - LocaleKey, LocaleData, locale-data sources
    cldrforge.currency - Currency codec, patterns, defaults, deriver
    cldrforge.regions - Region orderings and localized names
    cldrforge.number_constants - Number constants deriver
    cldrforge.list_patterns - List patterns deriver
    cldrforge.dispatch - Variant dispatch tables
    cldrforge.pipeline - Deriver base class and generate()
    cldrforge.diagnostics - Error types and diagnostics
"""

from .config import GenerationConfig
from .currency import (
    CurrencyListDeriver,
    CurrencyRecord,
    DefaultCurrencyResolver,
    to_global_currency_pattern,
)
from .diagnostics import CldrForgeError, LocaleTagError, MalformedDescriptorError
from .dispatch import DispatchTable, build_dispatch_table
from .enums import ArtifactFamily, DispatchStrategy
from .list_patterns import ListPatternsDeriver
from .locales import InMemoryLocaleDataSource, LocaleData, LocaleKey
from .number_constants import NumberConstantsDeriver
from .pipeline import DerivationResult, Deriver, GenerationResult, generate
from .regions import InMemoryRegionLanguageSource, LocalizedNamesDeriver, RegionOrderComputer

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("cldrforge")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArtifactFamily",
    "CldrForgeError",
    "CurrencyListDeriver",
    "CurrencyRecord",
    "DefaultCurrencyResolver",
    "DerivationResult",
    "Deriver",
    "DispatchStrategy",
    "DispatchTable",
    "GenerationConfig",
    "GenerationResult",
    "InMemoryLocaleDataSource",
    "InMemoryRegionLanguageSource",
    "ListPatternsDeriver",
    "LocaleData",
    "LocaleKey",
    "LocaleTagError",
    "LocalizedNamesDeriver",
    "MalformedDescriptorError",
    "NumberConstantsDeriver",
    "RegionOrderComputer",
    "__version__",
    "build_dispatch_table",
    "generate",
    "to_global_currency_pattern",
]
