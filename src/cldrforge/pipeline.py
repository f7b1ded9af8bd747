"""Deriver base class and the generation pipeline.

A deriver turns one family of locale facts into per-locale variants plus
the dispatch table routing locale requests to them. Every deriver runs the
same three phases over a private LocaleData table:

    load_data    - copy the family's categories from the locale-data source
    cleanup_data - compute derived facts, then deduplicate against ancestors
    derive       - build one frozen variant per locale and the dispatch table

The table is discarded afterwards whether or not derivation succeeded, so a
deriver instance can be run again.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Collection, Iterable, Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar

from cldrforge.config import GenerationConfig
from cldrforge.dispatch import (
    DispatchTable,
    VariantId,
    build_dispatch_table,
    order_tags,
    variant_id,
)
from cldrforge.enums import ArtifactFamily
from cldrforge.locales import LocaleData, LocaleDataSource, LocaleKey

__all__ = [
    "DerivationResult",
    "Deriver",
    "GenerationResult",
    "generate",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DerivationResult:
    """Output of one deriver.

    Attributes:
        family: Artifact family the variants belong to
        variants: Locale -> frozen variant record, in dispatch order
        dispatch: Routing table over the variants
    """

    family: ArtifactFamily
    variants: Mapping[LocaleKey, object]
    dispatch: DispatchTable

    def variant_for(self, request: str) -> object | None:
        """Return the variant a runtime locale request is routed to.

        Returns:
            The variant record, or None if the fallback variant was not generated
        """
        target = self.dispatch.lookup(request)
        for locale, variant in self.variants.items():
            if variant_id(self.family, locale) == target:
                return variant
        return None


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Results of a generation run, in deriver registration order."""

    results: tuple[DerivationResult, ...]

    def __getitem__(self, family: ArtifactFamily | str) -> DerivationResult:
        for result in self.results:
            if result.family == family:
                return result
        raise KeyError(family)

    def __iter__(self) -> Iterator[DerivationResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    @property
    def families(self) -> tuple[ArtifactFamily, ...]:
        """Families produced, in registration order."""
        return tuple(result.family for result in self.results)


class Deriver(ABC):
    """Base class of the per-family derivation steps.

    Subclasses declare their family and the categories they load, and
    implement derive(). cleanup_data() is optional.
    """

    family: ClassVar[ArtifactFamily]
    categories: ClassVar[tuple[str, ...]]

    def __init__(self, source: LocaleDataSource, config: GenerationConfig | None = None) -> None:
        """Initialize the deriver.

        Args:
            source: Locale-data collaborator
            config: Generation settings (default: GenerationConfig())
        """
        self._source = source
        self._config = config if config is not None else GenerationConfig()
        self._data: LocaleData | None = None

    @property
    def config(self) -> GenerationConfig:
        """Generation settings of this deriver."""
        return self._config

    @property
    def data(self) -> LocaleData:
        """Working table of the current run.

        Raises:
            RuntimeError: If accessed outside run()
        """
        if self._data is None:
            msg = f"{type(self).__name__} has no data loaded; call run()"
            raise RuntimeError(msg)
        return self._data

    def run(self) -> DerivationResult:
        """Load, clean up and derive, discarding the working table afterwards."""
        logger.info("Deriving %s", self.family)
        try:
            self.load_data()
            self.cleanup_data()
            result = self.derive()
        finally:
            self.reset()
        logger.info("Derived %s: %d variants", self.family, len(result.variants))
        return result

    def load_data(self) -> None:
        """Populate the working table from the source."""
        logger.debug("Loading %s for %s", ", ".join(self.categories), self.family)
        self._data = LocaleData.from_source(self._source, *self.categories)

    def cleanup_data(self) -> None:  # noqa: B027 - optional hook
        """Compute derived facts and deduplicate; nothing by default."""

    @abstractmethod
    def derive(self) -> DerivationResult:
        """Build the variants and the dispatch table from the working table."""

    def reset(self) -> None:
        """Discard the working table."""
        self._data = None

    def variant_id(self, locale: LocaleKey) -> VariantId:
        """Identifier of this family's variant for a locale."""
        return variant_id(self.family, locale)

    @staticmethod
    def nearest_variant(
        locale: LocaleKey, generated: Collection[LocaleKey]
    ) -> LocaleKey | None:
        """Return the closest proper ancestor that has a generated variant."""
        for ancestor in locale.ancestors()[1:]:
            if ancestor in generated:
                return ancestor
        return None

    def dispatch_order(self, locales: Iterable[LocaleKey]) -> list[LocaleKey]:
        """Sort locales the way the dispatch table orders its entries."""
        by_tag = {locale.tag: locale for locale in locales}
        return [by_tag[tag] for tag in order_tags(by_tag, self._config.dispatch_strategy)]

    def build_result(self, variants: Mapping[LocaleKey, object]) -> DerivationResult:
        """Wrap variants and their dispatch table into a DerivationResult."""
        dispatch = build_dispatch_table(
            variants,
            self.variant_id,
            self.variant_id(LocaleKey.DEFAULT),
            strategy=self._config.dispatch_strategy,
            detect_ambiguity=self._config.detect_dispatch_ambiguity,
        )
        return DerivationResult(
            family=self.family,
            variants=MappingProxyType(dict(variants)),
            dispatch=dispatch,
        )


def generate(
    derivers: Iterable[Deriver],
    *,
    max_workers: int | None = None,
    config: GenerationConfig | None = None,
) -> GenerationResult:
    """Run derivers and collect their results.

    Derivers share no mutable state, so with more than one worker they run on
    a thread pool. Results keep registration order either way; the first
    failure propagates.

    Args:
        derivers: Derivers to run
        max_workers: Worker threads (1 runs sequentially); overrides the
            configured count
        config: Settings supplying max_workers when it is not given
            (default: GenerationConfig())

    Returns:
        GenerationResult in registration order

    Raises:
        ValueError: If max_workers is not positive
    """
    if max_workers is None:
        max_workers = (config if config is not None else GenerationConfig()).max_workers
    if max_workers <= 0:
        msg = "max_workers must be positive"
        raise ValueError(msg)
    pending = list(derivers)
    logger.info("Generating %d artifact families (max_workers=%d)", len(pending), max_workers)
    if max_workers == 1 or len(pending) <= 1:
        results = [deriver.run() for deriver in pending]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(lambda deriver: deriver.run(), pending))
    return GenerationResult(tuple(results))
