"""Locale variant dispatch tables.

Every artifact family generates one variant per locale that produced output.
At runtime a locale request is routed to a variant by prefix match over the
generated locale tags, so a request for ``en_AU`` reaches the ``en`` variant
when no ``en_AU`` variant exists.

Ordering strategies:
    LEXICOGRAPHIC - tags in descending string order (reference ordering)
    MOST_SPECIFIC - longest tag first, descending string order on ties

For any request the tags that prefix it form a chain, and the longest tag of
a chain is also its lexicographic maximum, so both strategies always select
the same variant. What prefix matching cannot tell apart is a tag that
prefixes another inside a subtag ("ar" and "ars"); such pairs are reported
as DispatchAmbiguity and logged, never raised.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from itertools import combinations
from typing import TypeAlias

from cldrforge.constants import DEFAULT_LOCALE_TAG, SUBTAG_SEPARATOR
from cldrforge.diagnostics import Diagnostic, ErrorTemplate
from cldrforge.enums import DispatchStrategy
from cldrforge.locale_utils import normalize_locale
from cldrforge.locales import LocaleKey

__all__ = [
    "DispatchAmbiguity",
    "DispatchEntry",
    "DispatchTable",
    "VariantId",
    "build_dispatch_table",
    "find_ambiguities",
    "order_tags",
    "variant_id",
]

logger = logging.getLogger(__name__)

VariantId: TypeAlias = str

_IMPL_SUFFIX = "Impl"


def variant_id(family: str, locale: LocaleKey) -> VariantId:
    """Return the generated variant identifier of a family for a locale.

    Example:
        >>> variant_id("CurrencyList", LocaleKey.parse("en_GB"))
        'CurrencyListImpl_en_GB'
        >>> variant_id("CurrencyList", LocaleKey.DEFAULT)
        'CurrencyListImpl'
    """
    base = f"{family}{_IMPL_SUFFIX}"
    if locale.is_default:
        return base
    return f"{base}{SUBTAG_SEPARATOR}{locale.tag}"


@dataclass(frozen=True, slots=True)
class DispatchEntry:
    """One routing rule: requests starting with ``tag`` go to ``target``."""

    tag: str
    target: VariantId


@dataclass(frozen=True, slots=True)
class DispatchAmbiguity:
    """A tag that is a string prefix of another without a subtag boundary.

    Attributes:
        shorter: The prefixing tag (e.g., "ar")
        longer: The tag it prefixes (e.g., "ars")
    """

    shorter: str
    longer: str

    @property
    def diagnostic(self) -> Diagnostic:
        """Warning diagnostic describing the ambiguity."""
        return ErrorTemplate.ambiguous_dispatch_prefix(self.shorter, self.longer)


@dataclass(frozen=True, slots=True)
class DispatchTable:
    """Ordered routing rules plus the fallback variant.

    Attributes:
        entries: Routing rules in match order
        default_target: Variant used when no rule matches
        strategy: Ordering the entries were built with
        ambiguities: Prefix ambiguities detected at build time
    """

    entries: tuple[DispatchEntry, ...]
    default_target: VariantId
    strategy: DispatchStrategy = DispatchStrategy.LEXICOGRAPHIC
    ambiguities: tuple[DispatchAmbiguity, ...] = ()

    def lookup(self, request: str) -> VariantId:
        """Route a locale request to a variant.

        The request ``"default"`` matches only the entry tagged ``"default"``.
        Any other request takes the first non-default entry whose tag is a
        prefix of it. Hyphenated requests are normalized to underscores.

        Args:
            request: Locale tag requested at runtime

        Returns:
            Target variant identifier (default_target when nothing matches)
        """
        request = normalize_locale(request)
        if request == DEFAULT_LOCALE_TAG:
            for entry in self.entries:
                if entry.tag == DEFAULT_LOCALE_TAG:
                    return entry.target
            return self.default_target
        for entry in self.entries:
            if entry.tag and entry.tag != DEFAULT_LOCALE_TAG and request.startswith(entry.tag):
                return entry.target
        return self.default_target

    @property
    def tags(self) -> tuple[str, ...]:
        """Entry tags in match order."""
        return tuple(entry.tag for entry in self.entries)

    def __iter__(self) -> Iterator[DispatchEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def order_tags(tags: Iterable[str], strategy: DispatchStrategy) -> list[str]:
    """Sort tags into dispatch order for a strategy."""
    match strategy:
        case DispatchStrategy.LEXICOGRAPHIC:
            return sorted(tags, reverse=True)
        case DispatchStrategy.MOST_SPECIFIC:
            return sorted(tags, key=lambda tag: (len(tag), tag), reverse=True)
        case _:
            msg = f"Unknown dispatch strategy: {strategy!r}"
            raise ValueError(msg)


def find_ambiguities(tags: Iterable[str]) -> tuple[DispatchAmbiguity, ...]:
    """Find tags that prefix another tag inside a subtag.

    ``en`` prefixing ``en_GB`` is the intended inheritance match and is not
    reported; ``ar`` prefixing ``ars`` is.

    Returns:
        Ambiguous pairs sorted by (shorter, longer)
    """
    candidates = sorted({tag for tag in tags if tag and tag != DEFAULT_LOCALE_TAG})
    found: list[DispatchAmbiguity] = []
    for first, second in combinations(candidates, 2):
        shorter, longer = (first, second) if len(first) <= len(second) else (second, first)
        if longer.startswith(shorter) and longer[len(shorter)] != SUBTAG_SEPARATOR:
            found.append(DispatchAmbiguity(shorter, longer))
    return tuple(sorted(found, key=lambda item: (item.shorter, item.longer)))


def build_dispatch_table(
    locales: Iterable[LocaleKey],
    variant_for: Callable[[LocaleKey], VariantId],
    default_target: VariantId,
    *,
    strategy: DispatchStrategy = DispatchStrategy.LEXICOGRAPHIC,
    detect_ambiguity: bool = True,
) -> DispatchTable:
    """Build the dispatch table of one artifact family.

    Must be called with the complete set of locales that produced output.

    Args:
        locales: Locales with a generated variant
        variant_for: Maps a locale to its variant identifier
        default_target: Fallback variant (usually the root locale's)
        strategy: Entry ordering
        detect_ambiguity: Report and log prefix ambiguities

    Returns:
        Immutable DispatchTable

    Example:
        >>> table = build_dispatch_table(
        ...     [LocaleKey.parse("en"), LocaleKey.parse("en_GB")],
        ...     lambda key: variant_id("CurrencyList", key),
        ...     "CurrencyListImpl",
        ... )
        >>> table.lookup("en_GB_oed")
        'CurrencyListImpl_en_GB'
        >>> table.lookup("en_AU")
        'CurrencyListImpl_en'
        >>> table.lookup("fr")
        'CurrencyListImpl'
    """
    by_tag = {locale.tag: locale for locale in locales}
    entries = tuple(
        DispatchEntry(tag, variant_for(by_tag[tag])) for tag in order_tags(by_tag, strategy)
    )
    ambiguities: tuple[DispatchAmbiguity, ...] = ()
    if detect_ambiguity:
        ambiguities = find_ambiguities(by_tag)
        for ambiguity in ambiguities:
            logger.warning(
                "Dispatch tag %s prefixes %s inside a subtag; other languages "
                "starting with %s will select %s",
                ambiguity.shorter,
                ambiguity.longer,
                ambiguity.shorter,
                variant_for(by_tag[ambiguity.shorter]),
            )
    logger.debug("Built dispatch table with %d entries (%s)", len(entries), strategy)
    return DispatchTable(
        entries=entries,
        default_target=default_target,
        strategy=strategy,
        ambiguities=ambiguities,
    )
