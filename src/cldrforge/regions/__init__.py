"""Region orderings and localized names.

Submodules:
    population - RegionPopulation and the region population sources
    collation  - PyICU-backed collation keys
    order      - Sort order and likely order computation
    deriver    - LocalizedNamesDeriver

Python 3.13+.
"""

from cldrforge.regions.collation import CollationKey, code_point_key, collation_key_for
from cldrforge.regions.deriver import LocalizedNamesDeriver, LocalizedNamesVariant
from cldrforge.regions.order import (
    RegionOrderComputer,
    compute_likely_order,
    compute_sort_order,
    join_region_order,
    sort_candidates,
    split_region_order,
)
from cldrforge.regions.population import (
    InMemoryRegionLanguageSource,
    RegionLanguageSource,
    RegionPopulation,
)

__all__ = [
    "CollationKey",
    "InMemoryRegionLanguageSource",
    "LocalizedNamesDeriver",
    "LocalizedNamesVariant",
    "RegionLanguageSource",
    "RegionOrderComputer",
    "RegionPopulation",
    "code_point_key",
    "collation_key_for",
    "compute_likely_order",
    "compute_sort_order",
    "join_region_order",
    "sort_candidates",
    "split_region_order",
]
