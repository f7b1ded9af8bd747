"""Region orderings derived per locale.

Two orderings are computed for every locale:

    sort order   - region codes sorted by their localized display names,
                   using the locale's collation rules
    likely order - the regions most likely to be relevant to speakers of the
                   locale's language, by literate population

Both are stored as comma-joined strings under reserved territory keys so
they are deduplicated against ancestors like any other fact.

Python 3.13+. Zero external dependencies (PyICU optional for collation).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from cldrforge.constants import (
    LIKELY_MIN_LITERATE_POPULATION,
    LIKELY_ORDER_LIMIT,
    UNKNOWN_REGION_CODE,
)
from cldrforge.locales import LocaleKey
from cldrforge.regions.collation import CollationKey, collation_key_for
from cldrforge.regions.population import RegionLanguageSource

__all__ = [
    "RegionOrderComputer",
    "compute_likely_order",
    "compute_sort_order",
    "join_region_order",
    "sort_candidates",
    "split_region_order",
]

logger = logging.getLogger(__name__)

_REGION_CODE_LENGTH = 2
_ORDER_SEPARATOR = ","


def sort_candidates(names: Mapping[str, str]) -> list[str]:
    """Return the region codes eligible for the sort order.

    Two-letter codes other than ``ZZ`` that have a non-empty display name,
    in mapping order. Numeric area codes ("001") and reserved keys are
    excluded by the length check.
    """
    return [
        code
        for code, name in names.items()
        if len(code) == _REGION_CODE_LENGTH and code != UNKNOWN_REGION_CODE and name
    ]


def compute_sort_order(names: Mapping[str, str], key: CollationKey) -> tuple[str, ...]:
    """Sort region codes by the collation key of their display names.

    The sort is stable: regions whose names collate equal keep their
    mapping order.

    Args:
        names: Region code -> display name
        key: Collation key function for the locale

    Returns:
        Region codes in display order

    Example:
        >>> compute_sort_order({"US": "United States", "DE": "Germany", "ZZ": "Unknown"}, str)
        ('DE', 'US')
    """
    candidates = sort_candidates(names)
    return tuple(sorted(candidates, key=lambda code: key(names[code])))


def compute_likely_order(
    locale: LocaleKey,
    source: RegionLanguageSource,
    *,
    limit: int = LIKELY_ORDER_LIMIT,
    min_literate_population: int = LIKELY_MIN_LITERATE_POPULATION,
) -> tuple[str, ...]:
    """Return the regions most relevant to speakers of a locale's language.

    Queries ``language_Script`` first, falling back to the bare language when
    the locale has no script or the scripted query is empty. Regions are
    taken in population order while fewer than ``limit`` are taken and the
    population reaches ``min_literate_population``; the first region that
    fails either bound ends the walk. The root locale has no language, so
    its likely order is empty.

    Args:
        locale: Locale to compute for
        source: Region population collaborator
        limit: Maximum number of regions
        min_literate_population: Population cut-off

    Returns:
        Region codes, most populated first
    """
    if locale.is_default:
        return ()
    regions = source.regions_for(locale.language_script) if locale.script else ()
    if not regions:
        regions = source.regions_for(locale.language)

    taken: list[str] = []
    for entry in regions:
        if len(taken) >= limit or entry.literate_population < min_literate_population:
            break
        taken.append(entry.region)
    return tuple(taken)


def join_region_order(codes: tuple[str, ...] | list[str]) -> str:
    """Encode an ordering as the comma-joined stored form."""
    return _ORDER_SEPARATOR.join(codes)


def split_region_order(value: str | None) -> tuple[str, ...]:
    """Decode the stored form; None and "" both mean no ordering."""
    if not value:
        return ()
    return tuple(value.split(_ORDER_SEPARATOR))


class RegionOrderComputer:
    """Computes both region orderings with fixed collaborators.

    Example:
        >>> computer = RegionOrderComputer(
        ...     InMemoryRegionLanguageSource({}),
        ...     collation_key=lambda locale: str.casefold,
        ... )
        >>> names = {"DE": "Germany", "AT": "austria", "001": "World"}
        >>> computer.sort_order(LocaleKey.parse("en"), names)
        ('AT', 'DE')
    """

    __slots__ = ("_collation_key", "_limit", "_min_population", "_source")

    def __init__(
        self,
        source: RegionLanguageSource,
        *,
        collation_key: Callable[[LocaleKey], CollationKey] = collation_key_for,
        limit: int = LIKELY_ORDER_LIMIT,
        min_literate_population: int = LIKELY_MIN_LITERATE_POPULATION,
    ) -> None:
        """Initialize the computer.

        Args:
            source: Region population collaborator
            collation_key: Factory of per-locale collation key functions
                (default: ICU collators)
            limit: Likely-order size bound
            min_literate_population: Likely-order population bound
        """
        self._source = source
        self._collation_key = collation_key
        self._limit = limit
        self._min_population = min_literate_population

    def sort_order(self, locale: LocaleKey, names: Mapping[str, str]) -> tuple[str, ...]:
        """Region codes sorted by display name under the locale's collation."""
        order = compute_sort_order(names, self._collation_key(locale))
        logger.debug("Sort order for %s: %d regions", locale, len(order))
        return order

    def likely_order(self, locale: LocaleKey) -> tuple[str, ...]:
        """Most relevant regions for the locale's language."""
        order = compute_likely_order(
            locale,
            self._source,
            limit=self._limit,
            min_literate_population=self._min_population,
        )
        logger.debug("Likely order for %s: %s", locale, order)
        return order
