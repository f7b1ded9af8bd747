"""Inheritance-aware locale data table.

Holds the flat table of locale facts (category -> locale -> key -> value) and
implements the operations every deriver shares:

    - inheritance-aware lookup (walk the ancestor chain until found)
    - deduplication against ancestors (the "minimal dataset")
    - whole-locale deduplication for categories emitted as complete sets
    - copying one locale's data into another (seeding the root locale)

Components:
    LocaleDataSource - Protocol for the external locale-data collaborator
    InMemoryLocaleDataSource - Source backed by nested mappings
    LocaleData - Mutable working table used during one derivation

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Protocol

from cldrforge.locales.key import LocaleKey

__all__ = [
    "InMemoryLocaleDataSource",
    "LocaleData",
    "LocaleDataSource",
]

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, str] = MappingProxyType({})


class LocaleDataSource(Protocol):
    """Protocol for the read-only locale-data collaborator.

    Implementations extract key/value facts per locale and category from a
    locale-data repository (CLDR XML, JSON, a database). Only the locale's
    own facts are returned; inheritance is resolved by LocaleData.

    Example:
        >>> class JsonSource:
        ...     def locales(self) -> Iterable[LocaleKey]:
        ...         return [LocaleKey.parse(name) for name in os.listdir("main")]
        ...     def entries(self, category: str, locale: LocaleKey) -> Mapping[str, str]:
        ...         return load_json(f"main/{locale}/{category}.json")
    """

    def locales(self) -> Iterable[LocaleKey]:
        """Return every locale the source has data for."""

    def entries(self, category: str, locale: LocaleKey) -> Mapping[str, str]:
        """Return the locale-specific facts of one category.

        Args:
            category: Data category (e.g., 'currency', 'territory')
            locale: Locale whose own facts are requested

        Returns:
            Mapping from key to value; empty if the locale has none
        """


class InMemoryLocaleDataSource:
    """Locale-data source backed by nested mappings.

    Tags are parsed with LocaleKey.parse, so "en-US", "en_US" and "root"
    style keys are all accepted.

    Example:
        >>> source = InMemoryLocaleDataSource({
        ...     "currency": {
        ...         "en": {"USD": "US Dollar|$"},
        ...         "en_GB": {"GBP": "British Pound|£"},
        ...     },
        ... })
        >>> source.entries("currency", LocaleKey.parse("en_GB"))
        mappingproxy({'GBP': 'British Pound|£'})
    """

    __slots__ = ("_data", "_locales")

    def __init__(
        self,
        data: Mapping[str, Mapping[str, Mapping[str, str]]],
        *,
        locales: Iterable[str] = (),
    ) -> None:
        """Initialize from category -> locale tag -> key -> value mappings.

        Args:
            data: Facts grouped by category, then by locale tag
            locales: Extra locale tags that exist without any facts
        """
        self._data: dict[str, dict[LocaleKey, Mapping[str, str]]] = {}
        known: dict[LocaleKey, None] = {}
        for category, by_locale in data.items():
            table: dict[LocaleKey, Mapping[str, str]] = {}
            for tag, entries in by_locale.items():
                key = LocaleKey.parse(tag)
                table[key] = MappingProxyType(dict(entries))
                known[key] = None
            self._data[category] = table
        for tag in locales:
            known[LocaleKey.parse(tag)] = None
        self._locales = tuple(known)

    def locales(self) -> tuple[LocaleKey, ...]:
        """Return every locale mentioned by the source, in first-seen order."""
        return self._locales

    def entries(self, category: str, locale: LocaleKey) -> Mapping[str, str]:
        """Return the facts of one category for exactly this locale."""
        return self._data.get(category, {}).get(locale, _EMPTY)


class LocaleData:
    """Working table of locale facts with inheritance-aware operations.

    The root locale is always a member. Maps preserve insertion order, which
    is the iteration order derivers see (e.g., region sort candidates).

    Example:
        >>> data = LocaleData([LocaleKey.parse("en"), LocaleKey.parse("en_GB")])
        >>> data.add_entry("territory", LocaleKey.parse("en"), "US", "United States")
        >>> data.get_entry("territory", LocaleKey.parse("en_GB"), "US")
        'United States'
        >>> data.is_inherited("territory", LocaleKey.parse("en_GB"), "US")
        True
    """

    __slots__ = ("_locales", "_maps")

    def __init__(self, locales: Iterable[LocaleKey] = ()) -> None:
        """Initialize with the locales taking part in this derivation.

        Args:
            locales: Locale keys to register (the root locale is implicit)
        """
        self._locales: dict[LocaleKey, None] = {LocaleKey.DEFAULT: None}
        for locale in locales:
            self._locales[locale] = None
        self._maps: dict[str, dict[LocaleKey, dict[str, str]]] = {}

    @classmethod
    def from_source(cls, source: LocaleDataSource, *categories: str) -> LocaleData:
        """Build a table holding the given categories of a source.

        Args:
            source: Locale-data collaborator
            categories: Categories to load

        Returns:
            Populated LocaleData
        """
        data = cls(source.locales())
        for category in categories:
            data.load(source, category)
        return data

    def load(self, source: LocaleDataSource, category: str) -> None:
        """Copy one category of every registered locale from a source."""
        loaded = 0
        for locale in self._locales:
            entries = source.entries(category, locale)
            if entries:
                self.add_entries(category, locale, entries)
                loaded += 1
        logger.debug("Loaded category %s for %d locales", category, loaded)

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def add_locale(self, locale: LocaleKey) -> None:
        """Register a locale without facts."""
        self._locales.setdefault(locale, None)

    def all_locales(self) -> tuple[LocaleKey, ...]:
        """Return every registered locale, sorted by canonical tag."""
        return tuple(sorted(self._locales))

    def non_empty_locales(self, category: str | None = None) -> tuple[LocaleKey, ...]:
        """Return locales with at least one fact, sorted by canonical tag.

        Args:
            category: Restrict to one category; None means any category
        """
        categories = [category] if category is not None else list(self._maps)
        found: set[LocaleKey] = set()
        for name in categories:
            for locale, entries in self._maps.get(name, {}).items():
                if entries:
                    found.add(locale)
        return tuple(sorted(found))

    def parent_of(self, locale: LocaleKey) -> LocaleKey | None:
        """Return the structural parent of a locale (see LocaleKey.parent)."""
        return locale.parent()

    def inherits_from(self, locale: LocaleKey) -> LocaleKey | None:
        """Return the nearest registered ancestor of a locale.

        Intermediate ancestors that are not registered are skipped, so the
        result is always a locale that has its own generated variant. The
        root locale is always registered, so only the root returns None.
        """
        current = locale.parent()
        while current is not None and current not in self._locales:
            current = current.parent()
        return current

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def add_entry(self, category: str, locale: LocaleKey, key: str, value: str) -> None:
        """Set one fact for a locale, registering the locale if needed."""
        self.add_locale(locale)
        self._maps.setdefault(category, {}).setdefault(locale, {})[key] = value

    def add_entries(self, category: str, locale: LocaleKey, entries: Mapping[str, str]) -> None:
        """Set several facts for a locale, preserving the mapping's order."""
        self.add_locale(locale)
        self._maps.setdefault(category, {}).setdefault(locale, {}).update(entries)

    def remove_entries(self, category: str, locale: LocaleKey, keys: Iterable[str]) -> None:
        """Remove facts from a locale; missing keys are ignored."""
        entries = self._maps.get(category, {}).get(locale)
        if entries is None:
            return
        for key in keys:
            entries.pop(key, None)

    def get_entries(self, category: str, locale: LocaleKey) -> Mapping[str, str]:
        """Return a read-only view of the locale's own facts (no inheritance)."""
        entries = self._maps.get(category, {}).get(locale)
        if entries is None:
            return _EMPTY
        return MappingProxyType(entries)

    def get_keys(self, category: str, locale: LocaleKey) -> tuple[str, ...]:
        """Return the locale's own keys, sorted."""
        return tuple(sorted(self._maps.get(category, {}).get(locale, {})))

    def get_entry(self, category: str, locale: LocaleKey, key: str) -> str | None:
        """Resolve a fact by walking the ancestor chain until it is found.

        Args:
            category: Data category
            locale: Locale to resolve for
            key: Fact key

        Returns:
            The value from the most specific locale that defines it, or None
        """
        table = self._maps.get(category, {})
        for ancestor in locale.ancestors():
            entries = table.get(ancestor)
            if entries is not None and key in entries:
                return entries[key]
        return None

    def resolved_entries(self, category: str, locale: LocaleKey) -> dict[str, str]:
        """Return the locale's full view of a category, inherited facts included."""
        table = self._maps.get(category, {})
        merged: dict[str, str] = {}
        for ancestor in reversed(locale.ancestors()):
            merged.update(table.get(ancestor, {}))
        return merged

    def is_inherited(self, category: str, locale: LocaleKey, key: str) -> bool:
        """True if the locale sees a value for ``key`` only through an ancestor."""
        if key in self._maps.get(category, {}).get(locale, {}):
            return False
        parent = locale.parent()
        return parent is not None and self.get_entry(category, parent, key) is not None

    # ------------------------------------------------------------------
    # Bulk operations
    # ------------------------------------------------------------------

    def copy_locale_data(
        self, source: LocaleKey, destination: LocaleKey, *categories: str
    ) -> None:
        """Copy a locale's own facts into another locale.

        Facts the destination already defines are kept. Used to seed the root
        locale from a reference language before orderings are computed.
        """
        for category in categories:
            entries = self._maps.get(category, {}).get(source)
            if not entries:
                continue
            target = self._maps.setdefault(category, {}).setdefault(destination, {})
            for key, value in entries.items():
                target.setdefault(key, value)
        self.add_locale(destination)

    def remove_duplicates(self, category: str) -> int:
        """Drop every fact equal to the value the locale would inherit.

        Each comparison is made against the parent's resolved value. Removing
        a fact that equals its inherited value never changes any locale's
        resolved value, so the result is independent of processing order.

        Returns:
            Number of facts removed
        """
        table = self._maps.get(category, {})
        removed = 0
        for locale in sorted(table):
            parent = locale.parent()
            if parent is None:
                continue
            entries = table[locale]
            duplicates = [
                key
                for key, value in entries.items()
                if self.get_entry(category, parent, key) == value
            ]
            for key in duplicates:
                del entries[key]
            removed += len(duplicates)
        logger.debug("Removed %d inherited duplicates from %s", removed, category)
        return removed

    def remove_complete_duplicates(self, category: str) -> tuple[LocaleKey, ...]:
        """Clear locales whose resolved view equals their parent's.

        Unlike remove_duplicates, locales that differ from their parent keep
        every fact, so each remaining locale holds a complete set.

        Returns:
            Locales whose facts were cleared, sorted
        """
        table = self._maps.get(category, {})
        cleared: list[LocaleKey] = []
        for locale in sorted(table):
            parent = locale.parent()
            if parent is None or not table[locale]:
                continue
            if self.resolved_entries(category, locale) == self.resolved_entries(
                category, parent
            ):
                table[locale].clear()
                cleared.append(locale)
        logger.debug("Cleared %d complete duplicates from %s", len(cleared), category)
        return tuple(cleared)

    def reset(self) -> None:
        """Discard every fact (registered locales are kept)."""
        self._maps.clear()
