"""Shared constants for cldrforge.

This module provides centralized constants used across the locale,
currency, region and dispatch packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Locale identity: Root locale tag and separators
- Currency: Placeholders, fallbacks and packed flag bits
- Region ordering: Likely-order bounds and reserved keys
- Native names: Right-to-left languages and native-name overrides
- Data categories: Names of the locale-data tables

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
from collections.abc import Mapping
from types import MappingProxyType

__all__ = [
    # Locale identity
    "DEFAULT_LOCALE_TAG",
    "ROOT_LOCALE_ALIASES",
    "SUBTAG_SEPARATOR",
    # Currency
    "CURRENCY_PLACEHOLDER",
    "GLOBAL_CURRENCY_MARKER",
    "FALLBACK_DEFAULT_CURRENCY",
    "DEFAULT_FRACTION_DIGITS",
    "PRECISION_MASK",
    "DEPRECATED_FLAG",
    "POS_FIXED_FLAG",
    "POS_SUFFIX_FLAG",
    "SPACING_FIXED_FLAG",
    "SPACE_FORCED_FLAG",
    "UNKNOWN_CURRENCY_CODE",
    # Region ordering
    "UNKNOWN_REGION_CODE",
    "LIKELY_ORDER_LIMIT",
    "LIKELY_MIN_LITERATE_POPULATION",
    "SORT_ORDER_KEY",
    "LIKELY_ORDER_KEY",
    "RESERVED_KEY_PREFIX",
    # Native names
    "RTL_LANGUAGES",
    "NATIVE_NAME_OVERRIDES",
    "NATIVE_NAME_SEPARATOR",
    # Data categories
    "CATEGORY_CURRENCY",
    "CATEGORY_TERRITORY",
    "CATEGORY_LANGUAGE",
    "CATEGORY_SCRIPT",
    "CATEGORY_VARIANT",
    "CATEGORY_NUMBER_CONSTANTS",
    "CATEGORY_NUMBERING_SYSTEM",
    "CATEGORY_LIST",
]

# ============================================================================
# LOCALE IDENTITY
# ============================================================================

# Canonical string form of the root locale. Also the explicit dispatch
# request that selects the root variant by equality rather than by prefix.
DEFAULT_LOCALE_TAG: str = "default"

# Tags that parse to the root locale.
ROOT_LOCALE_ALIASES: frozenset[str] = frozenset({"", DEFAULT_LOCALE_TAG, "root"})

# Separator between subtags in the canonical string form (POSIX style).
SUBTAG_SEPARATOR: str = "_"

# ============================================================================
# CURRENCY
# ============================================================================

# Single-character currency sign placeholder used by CLDR number patterns.
CURRENCY_PLACEHOLDER: str = "¤"

# Marker appended to every sub-pattern of a global currency pattern:
# a space followed by the double-wide (ISO code) currency placeholder.
GLOBAL_CURRENCY_MARKER: str = " " + CURRENCY_PLACEHOLDER * 2

# Default currency of the root locale when no region data applies.
FALLBACK_DEFAULT_CURRENCY: str = "USD"

# Fraction digits used when a descriptor omits the field.
DEFAULT_FRACTION_DIGITS: int = 2

# Packed flag word layout shared with the generated CurrencyData classes.
# Bits 0-2 carry the fraction digit count.
PRECISION_MASK: int = 7
DEPRECATED_FLAG: int = 128
POS_FIXED_FLAG: int = 256
POS_SUFFIX_FLAG: int = 512
SPACING_FIXED_FLAG: int = 1024
SPACE_FORCED_FLAG: int = 2048

# ISO 4217 "no currency" code. Listed as in use for Antarctica in CLDR.
UNKNOWN_CURRENCY_CODE: str = "XXX"

# ============================================================================
# REGION ORDERING
# ============================================================================

# CLDR "unknown region" sentinel, never a sort-order candidate.
UNKNOWN_REGION_CODE: str = "ZZ"

# Likely-order truncation bounds: take at most this many regions, and stop
# at the first region whose literate population is below the threshold.
LIKELY_ORDER_LIMIT: int = 10
LIKELY_MIN_LITERATE_POPULATION: int = 3_000_000

# Reserved keys stored alongside region names in the territory category.
# The prefix cannot start a real region code, so derived facts never collide.
RESERVED_KEY_PREFIX: str = "!"
SORT_ORDER_KEY: str = RESERVED_KEY_PREFIX + "sortorder"
LIKELY_ORDER_KEY: str = RESERVED_KEY_PREFIX + "likelyorder"

# ============================================================================
# NATIVE NAMES
# ============================================================================

# Languages written right to left. CLDR has no character-order flag in the
# display-name data this package reads, so the set is curated.
RTL_LANGUAGES: frozenset[str] = frozenset({"ar", "fa", "he", "ps", "ur"})

# Native display names for languages CLDR does not name in their own locale.
NATIVE_NAME_OVERRIDES: Mapping[str, str] = MappingProxyType({"ssy": "Saho"})

# Joins the language and region parts of a native display name.
NATIVE_NAME_SEPARATOR: str = " - "

# ============================================================================
# DATA CATEGORIES
# ============================================================================

CATEGORY_CURRENCY: str = "currency"
CATEGORY_TERRITORY: str = "territory"
CATEGORY_LANGUAGE: str = "language"
CATEGORY_SCRIPT: str = "script"
CATEGORY_VARIANT: str = "variant"
CATEGORY_NUMBER_CONSTANTS: str = "numberConstants"
CATEGORY_NUMBERING_SYSTEM: str = "defaultNumberingSystem"
CATEGORY_LIST: str = "list"
