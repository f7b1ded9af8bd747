"""Locale identity and the inheritance-aware locale data table.

Submodules:
    key  - LocaleKey, parent and ancestor_chain
    data - LocaleDataSource protocol, InMemoryLocaleDataSource, LocaleData

Python 3.13+. Zero external dependencies.
"""

from cldrforge.locales.data import InMemoryLocaleDataSource, LocaleData, LocaleDataSource
from cldrforge.locales.key import LocaleKey, ancestor_chain, parent

__all__ = [
    "InMemoryLocaleDataSource",
    "LocaleData",
    "LocaleDataSource",
    "LocaleKey",
    "ancestor_chain",
    "parent",
]
