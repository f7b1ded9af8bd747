"""Enumerations for cldrforge type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class DispatchStrategy(StrEnum):
    """Ordering used when building a variant dispatch table.

    StrEnum provides automatic string conversion:
    str(DispatchStrategy.LEXICOGRAPHIC) == "lexicographic"
    """

    LEXICOGRAPHIC = "lexicographic"
    """Descending string sort of locale tags (reference ordering)."""

    MOST_SPECIFIC = "most_specific"
    """Descending tag length, lexicographic tie-break."""


class ArtifactFamily(StrEnum):
    """Family of generated artifacts a deriver produces.

    The value doubles as the prefix of generated variant identifiers.
    """

    CURRENCY_LIST = "CurrencyList"
    """Per-locale currency tables and default currency."""

    LOCALIZED_NAMES = "LocalizedNames"
    """Region display names, sort order and likely order."""

    NUMBER_CONSTANTS = "NumberConstants"
    """Number symbols and number/currency patterns."""

    LIST_PATTERNS = "ListPatterns"
    """List formatting patterns."""


class SymbolPosition(StrEnum):
    """Currency symbol placement flags recognized in overlay descriptors."""

    PREFIX = "SymPrefix"
    """Symbol always precedes the number."""

    SUFFIX = "SymSuffix"
    """Symbol always follows the number."""


class SymbolSpacing(StrEnum):
    """Currency symbol spacing flags recognized in overlay descriptors."""

    FORCE_SPACE = "ForceSpace"
    """Always separate symbol and number with a space."""

    FORCE_NO_SPACE = "ForceNoSpace"
    """Never separate symbol and number with a space."""


__all__ = [
    "ArtifactFamily",
    "DispatchStrategy",
    "SymbolPosition",
    "SymbolSpacing",
]
