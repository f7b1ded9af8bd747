"""Currency derivation: descriptor codec, pattern rewriting, default resolution.

Submodules:
    record       - CurrencyRecord and the descriptor codec
    patterns     - Global and simple currency pattern rewriting
    defaults     - Default currency resolution
    deriver      - CurrencyListDeriver and overlay sources
    supplemental - Babel-backed CLDR supplemental loaders

Python 3.13+.
"""

from cldrforge.currency.defaults import DefaultCurrencyResolver, resolve_default_currency
from cldrforge.currency.deriver import (
    CurrencyListDeriver,
    CurrencyListVariant,
    CurrencyOverlaySource,
    InMemoryCurrencyOverlaySource,
)
from cldrforge.currency.patterns import to_global_currency_pattern, to_simple_currency_pattern
from cldrforge.currency.record import CompactCurrency, CurrencyRecord

__all__ = [
    "CompactCurrency",
    "CurrencyListDeriver",
    "CurrencyListVariant",
    "CurrencyOverlaySource",
    "CurrencyRecord",
    "DefaultCurrencyResolver",
    "InMemoryCurrencyOverlaySource",
    "resolve_default_currency",
    "to_global_currency_pattern",
    "to_simple_currency_pattern",
]
