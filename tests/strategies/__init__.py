"""Hypothesis strategies for cldrforge property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- locales: Locale keys, tag spellings, dispatch tag sets, region populations
- currency: Currency descriptors and currency patterns

Usage:
    from tests.strategies import locale_keys, primary_descriptors
    from tests.strategies.locales import dispatch_tag_sets
    from tests.strategies.currency import currency_patterns
"""

from .currency import (
    currency_codes,
    currency_patterns,
    field_text,
    overlay_descriptors,
    primary_descriptors,
    symbols,
)
from .locales import (
    alpha2_codes,
    dispatch_requests,
    dispatch_tag_sets,
    languages,
    locale_keys,
    locale_tags,
    region_populations,
    regions,
    scripts,
    variants,
)

__all__ = [
    "alpha2_codes",
    "currency_codes",
    "currency_patterns",
    "dispatch_requests",
    "dispatch_tag_sets",
    "field_text",
    "languages",
    "locale_keys",
    "locale_tags",
    "overlay_descriptors",
    "primary_descriptors",
    "region_populations",
    "regions",
    "scripts",
    "variants",
]
