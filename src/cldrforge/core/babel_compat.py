"""Lazy import infrastructure for the CLDR backends.

Provides centralized, lazy import helpers for Babel and PyICU so every module
reports a missing backend the same way.

Design Rationale:
    The derivation core (locale keys, descriptor codec, pattern rewriting,
    dispatch tables) is pure Python and never touches a backend. Backends
    are only needed at the edges:
    - Babel: supplemental CLDR data (territory currencies, currency
      precision, territory display names)
    - PyICU: locale-sensitive collation for region sort order
      (`pip install cldrforge[icu]`)

    This module ensures that:
    1. Importing cldrforge never triggers a backend import
    2. Callers get consistent, helpful error messages when a backend is missing
    3. Backend types are available for TYPE_CHECKING without runtime import

Python 3.13+.
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from babel import Locale


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class BabelNumbersProtocol(Protocol):
    """Protocol for Babel numbers module interface.

    Defines the subset of babel.numbers API actually used by cldrforge.
    """

    def get_territory_currencies(
        self,
        territory: str,
        start_date: date | None = None,
        end_date: date | None = None,
        tender: bool = True,
        non_tender: bool = False,
        include_details: bool = False,
    ) -> list[str]:
        """Return the currencies in use in a territory."""
        ...

    def get_currency_precision(self, currency: str) -> int:
        """Return the standard fraction digit count of a currency."""
        ...

    def get_currency_name(
        self,
        currency: str,
        count: Any = None,
        locale: Locale | str | None = None,
    ) -> str:
        """Return the localized display name of a currency."""
        ...

    def get_currency_symbol(self, currency: str, locale: Locale | str | None = None) -> str:
        """Return the localized symbol of a currency."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "IcuImportError",
    "get_babel_numbers",
    "get_icu_module",
    "is_babel_available",
    "is_icu_available",
    "require_babel",
    "require_icu",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


@lru_cache(maxsize=1)
def _check_icu_available() -> bool:
    """Check if PyICU is installed (computed once, cached via lru_cache)."""
    try:
        import icu  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR supplemental data. "
            "Install with: pip install babel"
        )
        super().__init__(message)
        self.feature = feature


class IcuImportError(ImportError):
    """Raised when PyICU is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring PyICU
        """
        message = (
            f"{feature} requires PyICU for locale-sensitive collation. "
            "Install with: pip install cldrforge[icu]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed."""
    return _check_babel_available()


def is_icu_available() -> bool:
    """Check if PyICU is installed."""
    return _check_icu_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def require_icu(feature: str) -> None:
    """Assert that PyICU is available, raising IcuImportError if not.

    Args:
        feature: Name of the feature requiring PyICU (for error message)

    Raises:
        IcuImportError: If PyICU is not installed
    """
    if not _check_icu_available():
        raise IcuImportError(feature)


def get_babel_numbers() -> BabelNumbersProtocol:
    """Get the Babel numbers module.

    Returns:
        The babel.numbers module (typed via BabelNumbersProtocol)

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers


def get_icu_module() -> Any:
    """Get the PyICU module.

    Returns:
        The icu module

    Raises:
        IcuImportError: If PyICU is not installed
    """
    require_icu("get_icu_module")
    import icu  # noqa: PLC0415

    return icu
