"""Region population data for likely-order computation.

Components:
    RegionPopulation - Literate speakers of a language in one region
    RegionLanguageSource - Protocol for the population collaborator
    InMemoryRegionLanguageSource - Source backed by plain mappings

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol

__all__ = [
    "InMemoryRegionLanguageSource",
    "RegionLanguageSource",
    "RegionPopulation",
]


@dataclass(frozen=True, slots=True)
class RegionPopulation:
    """Literate population speaking a language in one region.

    Attributes:
        region: Region code (e.g., "US")
        display_name: Region display name, informational only
        literate_population: Number of literate speakers
    """

    region: str
    display_name: str
    literate_population: int


class RegionLanguageSource(Protocol):
    """Protocol for per-language region population data."""

    def regions_for(self, language_script: str) -> Sequence[RegionPopulation]:
        """Return regions where a language is spoken, most populated first.

        Args:
            language_script: ``language_Script`` or a bare ``language``

        Returns:
            Regions ordered by descending literate population; empty when unknown
        """


class InMemoryRegionLanguageSource:
    """Region population source backed by a language -> regions mapping.

    Regions are ordered by descending literate population; ties keep the
    order they were supplied in.

    Example:
        >>> source = InMemoryRegionLanguageSource({
        ...     "en": [
        ...         RegionPopulation("GB", "United Kingdom", 60_000_000),
        ...         RegionPopulation("US", "United States", 300_000_000),
        ...     ],
        ... })
        >>> [entry.region for entry in source.regions_for("en")]
        ['US', 'GB']
    """

    __slots__ = ("_regions",)

    def __init__(self, regions: Mapping[str, Iterable[RegionPopulation]]) -> None:
        self._regions: dict[str, tuple[RegionPopulation, ...]] = {
            language: tuple(
                sorted(entries, key=lambda entry: entry.literate_population, reverse=True)
            )
            for language, entries in regions.items()
        }

    def regions_for(self, language_script: str) -> tuple[RegionPopulation, ...]:
        """Return the regions of a language, most populated first."""
        return self._regions.get(language_script, ())

    def most_populated_regions(self) -> dict[str, str]:
        """Return language -> region with the most literate speakers.

        Suitable as the ``language_to_most_populated_region`` input of
        DefaultCurrencyResolver.
        """
        return {
            language: entries[0].region
            for language, entries in self._regions.items()
            if entries
        }
