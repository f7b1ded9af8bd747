"""Generation configuration for the derivation pipeline.

Provides a single frozen dataclass holding every tunable of a generation
run: likely-order bounds, dispatch ordering, root-locale seeding, the
right-to-left language set and the hand-curated name overrides.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from cldrforge.constants import (
    CATEGORY_LANGUAGE,
    CATEGORY_SCRIPT,
    CATEGORY_TERRITORY,
    CATEGORY_VARIANT,
    FALLBACK_DEFAULT_CURRENCY,
    LIKELY_MIN_LITERATE_POPULATION,
    LIKELY_ORDER_LIMIT,
    NATIVE_NAME_OVERRIDES,
    RTL_LANGUAGES,
)
from cldrforge.enums import DispatchStrategy

__all__ = ["GenerationConfig"]

_CURRENCY_CODE_LENGTH = 3


def _freeze_overrides(
    overrides: Mapping[str, Mapping[str, str]],
) -> Mapping[str, Mapping[str, str]]:
    return MappingProxyType(
        {tag: MappingProxyType(dict(names)) for tag, names in overrides.items()}
    )


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Immutable configuration for one generation run.

    All fields have sensible defaults; ``GenerationConfig()`` reproduces the
    reference behavior.

    Attributes:
        default_currency: Default currency of the root locale (default: "USD").
        likely_order_limit: Maximum regions in a likely order (default: 10).
        likely_min_literate_population: Likely-order cut-off; the walk stops
            at the first region below it (default: 3,000,000).
        dispatch_strategy: Ordering of dispatch table entries
            (default: LEXICOGRAPHIC).
        detect_dispatch_ambiguity: Log a WARNING for every dispatch tag that
            prefixes another inside a subtag (default: True).
        root_source_locale: Locale whose names seed the root locale before
            orderings are computed (default: "en").
        root_copy_categories: Categories copied from root_source_locale.
        region_name_overrides: Locale tag -> region code -> display name,
            applied on top of the loaded territory names. Wrapped read-only.
        rtl_languages: Language codes written right to left
            (default: ar, fa, he, ps, ur).
        native_name_overrides: Locale tag -> native display name, replacing
            the derived name (default: ssy -> Saho). Wrapped read-only.
        max_workers: Worker threads generate() uses when no explicit count
            is given; derivers run concurrently when above 1 (default: 1).

    Example:
        >>> config = GenerationConfig(
        ...     dispatch_strategy=DispatchStrategy.MOST_SPECIFIC,
        ...     region_name_overrides={"en": {"HK": "Hong Kong"}},
        ... )
        >>> config.region_name_overrides["en"]["HK"]
        'Hong Kong'
    """

    default_currency: str = FALLBACK_DEFAULT_CURRENCY
    likely_order_limit: int = LIKELY_ORDER_LIMIT
    likely_min_literate_population: int = LIKELY_MIN_LITERATE_POPULATION
    dispatch_strategy: DispatchStrategy = DispatchStrategy.LEXICOGRAPHIC
    detect_dispatch_ambiguity: bool = True
    root_source_locale: str = "en"
    root_copy_categories: tuple[str, ...] = (
        CATEGORY_TERRITORY,
        CATEGORY_LANGUAGE,
        CATEGORY_SCRIPT,
        CATEGORY_VARIANT,
    )
    region_name_overrides: Mapping[str, Mapping[str, str]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    rtl_languages: frozenset[str] = RTL_LANGUAGES
    native_name_overrides: Mapping[str, str] = field(
        default_factory=lambda: NATIVE_NAME_OVERRIDES
    )
    max_workers: int = 1

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_currency is not three uppercase letters,
                likely_order_limit or max_workers is not positive, or
                likely_min_literate_population is negative.
        """
        if not (
            len(self.default_currency) == _CURRENCY_CODE_LENGTH
            and self.default_currency.isascii()
            and self.default_currency.isalpha()
            and self.default_currency.isupper()
        ):
            msg = "default_currency must be a three-letter uppercase ISO 4217 code"
            raise ValueError(msg)
        if self.likely_order_limit <= 0:
            msg = "likely_order_limit must be positive"
            raise ValueError(msg)
        if self.likely_min_literate_population < 0:
            msg = "likely_min_literate_population must be non-negative"
            raise ValueError(msg)
        if self.max_workers <= 0:
            msg = "max_workers must be positive"
            raise ValueError(msg)
        object.__setattr__(self, "dispatch_strategy", DispatchStrategy(self.dispatch_strategy))
        object.__setattr__(self, "root_copy_categories", tuple(self.root_copy_categories))
        object.__setattr__(
            self, "region_name_overrides", _freeze_overrides(self.region_name_overrides)
        )
        object.__setattr__(self, "rtl_languages", frozenset(self.rtl_languages))
        object.__setattr__(
            self, "native_name_overrides", MappingProxyType(dict(self.native_name_overrides))
        )
