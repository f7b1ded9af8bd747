"""Core utilities shared across the derivation packages.

Exports:
    BabelImportError: Raised when Babel is required but missing
    IcuImportError: Raised when PyICU is required but missing
    require_babel / require_icu: Fail-fast backend checks

Python 3.13+.
"""

from .babel_compat import (
    BabelImportError,
    IcuImportError,
    is_babel_available,
    is_icu_available,
    require_babel,
    require_icu,
)

__all__ = [
    "BabelImportError",
    "IcuImportError",
    "is_babel_available",
    "is_icu_available",
    "require_babel",
    "require_icu",
]
