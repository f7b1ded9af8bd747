"""Number constants derivation.

Resolves every number symbol and pattern of a locale through inheritance,
derives the simple and global currency patterns, the zero digit of the
locale's numbering system and its effective default currency.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from cldrforge.config import GenerationConfig
from cldrforge.constants import CATEGORY_NUMBER_CONSTANTS, CATEGORY_NUMBERING_SYSTEM
from cldrforge.currency.defaults import DefaultCurrencyResolver
from cldrforge.currency.patterns import to_global_currency_pattern, to_simple_currency_pattern
from cldrforge.enums import ArtifactFamily
from cldrforge.locales import LocaleDataSource, LocaleKey
from cldrforge.pipeline import DerivationResult, Deriver

__all__ = [
    "DEFAULT_NUMBERING_SYSTEM",
    "NumberConstantsDeriver",
    "NumberConstantsVariant",
]

logger = logging.getLogger(__name__)

DEFAULT_NUMBERING_SYSTEM = "latn"

_LATIN_DIGITS: Mapping[str, str] = MappingProxyType({DEFAULT_NUMBERING_SYSTEM: "0123456789"})

# Keys of the numberConstants category, as extracted from CLDR symbols and formats.
_DECIMAL = "decimal"
_GROUP = "group"
_PERCENT_SIGN = "percentSign"
_PLUS_SIGN = "plusSign"
_MINUS_SIGN = "minusSign"
_EXPONENTIAL = "exponential"
_PER_MILLE = "perMille"
_INFINITY = "infinity"
_NAN = "nan"
_DECIMAL_PATTERN = "decimalPattern"
_SCIENTIFIC_PATTERN = "scientificPattern"
_PERCENT_PATTERN = "percentPattern"
_CURRENCY_PATTERN = "currencyPattern"
_NUMBERING_SYSTEM_KEY = "defaultNumberingSystem"


@dataclass(frozen=True, slots=True)
class NumberConstantsVariant:
    """Complete number formatting constants of one locale.

    Every field is resolved through inheritance; None means no locale in the
    ancestor chain defines it. Monetary separators equal the plain ones.
    """

    locale: LocaleKey
    decimal_separator: str | None
    grouping_separator: str | None
    percent: str | None
    zero_digit: str | None
    plus_sign: str | None
    minus_sign: str | None
    exponential_symbol: str | None
    per_mill: str | None
    infinity: str | None
    not_a_number: str | None
    decimal_pattern: str | None
    scientific_pattern: str | None
    percent_pattern: str | None
    currency_pattern: str | None
    simple_currency_pattern: str | None
    global_currency_pattern: str | None
    default_currency_code: str

    @property
    def monetary_separator(self) -> str | None:
        """Decimal separator used for monetary amounts."""
        return self.decimal_separator

    @property
    def monetary_grouping_separator(self) -> str | None:
        """Grouping separator used for monetary amounts."""
        return self.grouping_separator


class NumberConstantsDeriver(Deriver):
    """Derives number constants for every locale with number data."""

    family = ArtifactFamily.NUMBER_CONSTANTS
    categories = (CATEGORY_NUMBER_CONSTANTS, CATEGORY_NUMBERING_SYSTEM)

    def __init__(
        self,
        source: LocaleDataSource,
        resolver: DefaultCurrencyResolver | None = None,
        config: GenerationConfig | None = None,
        *,
        numbering_systems: Mapping[str, str] = _LATIN_DIGITS,
    ) -> None:
        """Initialize the deriver.

        Args:
            source: Locale-data collaborator holding symbols and patterns
            resolver: Default currency resolver
            config: Generation settings
            numbering_systems: Numbering system -> its ten digits
        """
        super().__init__(source, config)
        if resolver is None:
            resolver = DefaultCurrencyResolver({}, {}, fallback=self.config.default_currency)
        self._resolver = resolver
        self._numbering_systems = MappingProxyType(dict(numbering_systems))

    def derive(self) -> DerivationResult:
        """Build one NumberConstantsVariant per locale with number data."""
        data = self.data
        locales = {LocaleKey.DEFAULT, *data.non_empty_locales()}
        variants = {
            locale: self._derive_locale(locale) for locale in self.dispatch_order(locales)
        }
        return self.build_result(variants)

    def zero_digit(self, numbering_system: str) -> str | None:
        """Return the first digit of a numbering system, or None if unknown."""
        digits = self._numbering_systems.get(numbering_system)
        if not digits:
            logger.warning("Unknown numbering system %s; zero digit left unset", numbering_system)
            return None
        return digits[0]

    def _derive_locale(self, locale: LocaleKey) -> NumberConstantsVariant:
        data = self.data

        def entry(key: str) -> str | None:
            return data.get_entry(CATEGORY_NUMBER_CONSTANTS, locale, key)

        numbering_system = (
            data.get_entry(CATEGORY_NUMBERING_SYSTEM, locale, _NUMBERING_SYSTEM_KEY)
            or DEFAULT_NUMBERING_SYSTEM
        )
        currency_pattern = entry(_CURRENCY_PATTERN)
        simple_pattern = global_pattern = None
        if currency_pattern is not None:
            simple_pattern = to_simple_currency_pattern(currency_pattern)
            global_pattern = to_global_currency_pattern(simple_pattern)
        else:
            logger.debug("Locale %s has no currency pattern", locale)

        return NumberConstantsVariant(
            locale=locale,
            decimal_separator=entry(_DECIMAL),
            grouping_separator=entry(_GROUP),
            percent=entry(_PERCENT_SIGN),
            zero_digit=self.zero_digit(numbering_system),
            plus_sign=entry(_PLUS_SIGN),
            minus_sign=entry(_MINUS_SIGN),
            exponential_symbol=entry(_EXPONENTIAL),
            per_mill=entry(_PER_MILLE),
            infinity=entry(_INFINITY),
            not_a_number=entry(_NAN),
            decimal_pattern=entry(_DECIMAL_PATTERN),
            scientific_pattern=entry(_SCIENTIFIC_PATTERN),
            percent_pattern=entry(_PERCENT_PATTERN),
            currency_pattern=currency_pattern,
            simple_currency_pattern=simple_pattern,
            global_currency_pattern=global_pattern,
            default_currency_code=self._resolver.effective(locale),
        )
