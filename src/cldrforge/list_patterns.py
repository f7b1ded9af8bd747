"""List formatting pattern derivation.

List patterns are emitted as complete sets: a locale either carries all of
its parts or inherits all of them, so only locales whose whole resolved set
differs from their parent's produce a variant.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cldrforge.constants import CATEGORY_LIST
from cldrforge.enums import ArtifactFamily
from cldrforge.locales import LocaleKey
from cldrforge.pipeline import DerivationResult, Deriver

__all__ = [
    "ListPatternsDeriver",
    "ListPatternsVariant",
]

logger = logging.getLogger(__name__)

# CLDR listPatternPart types.
_TWO = "2"
_START = "start"
_MIDDLE = "middle"
_END = "end"


@dataclass(frozen=True, slots=True)
class ListPatternsVariant:
    """List patterns of one locale (``{0}``/``{1}`` placeholders).

    Attributes:
        locale: Locale of this variant
        two: Pattern joining exactly two items
        start: Pattern joining the first two of three or more items
        middle: Pattern joining interior items
        end: Pattern joining the last two items
    """

    locale: LocaleKey
    two: str | None
    start: str | None
    middle: str | None
    end: str | None

    def format(self, items: list[str]) -> str:
        """Join items with the locale's list patterns.

        Example:
            >>> variant = ListPatternsVariant(
            ...     LocaleKey.parse("en"), "{0} and {1}", "{0}, {1}", "{0}, {1}", "{0}, and {1}"
            ... )
            >>> variant.format(["a", "b", "c"])
            'a, b, and c'
        """
        match items:
            case []:
                return ""
            case [only]:
                return only
            case [first, second]:
                return (self.two or "{0}, {1}").format(first, second)
        result = (self.end or "{0}, {1}").format(items[-2], items[-1])
        for item in reversed(items[1:-2]):
            result = (self.middle or "{0}, {1}").format(item, result)
        return (self.start or "{0}, {1}").format(items[0], result)


class ListPatternsDeriver(Deriver):
    """Derives list patterns for every locale with a distinct pattern set."""

    family = ArtifactFamily.LIST_PATTERNS
    categories = (CATEGORY_LIST,)

    def cleanup_data(self) -> None:
        """Drop locales whose complete pattern set equals their parent's."""
        self.data.remove_complete_duplicates(CATEGORY_LIST)

    def derive(self) -> DerivationResult:
        """Build one ListPatternsVariant per locale with list patterns."""
        data = self.data
        variants: dict[LocaleKey, ListPatternsVariant] = {}
        for locale in self.dispatch_order(data.non_empty_locales(CATEGORY_LIST)):
            patterns = data.resolved_entries(CATEGORY_LIST, locale)
            variants[locale] = ListPatternsVariant(
                locale=locale,
                two=patterns.get(_TWO),
                start=patterns.get(_START),
                middle=patterns.get(_MIDDLE),
                end=patterns.get(_END),
            )
            logger.debug("Locale %s has its own list patterns", locale)
        return self.build_result(variants)
