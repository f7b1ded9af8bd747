"""Currency record codec.

Builds one immutable CurrencyRecord per (locale, currency code) from two
layered pipe-delimited descriptors and encodes it back to the compact tuple
and packed flag word consumed by generated CurrencyData classes.

Primary descriptor (from the locale-data repository)::

    display name|symbol|fraction digits|deprecated flag

    - If no symbol is supplied, the fallbacks below apply
    - If fraction digits are omitted, 2 is used
    - A non-zero deprecated flag marks a currency no longer in general use
    - Trailing empty fields can be omitted
    - A missing descriptor means "use the currency code as display name"

Overlay descriptor (hand-curated, per exact locale)::

    portable symbol|flags|symbol override|simple symbol override

    flags is a space-separated list holding at most one of
        SymPrefix     symbol goes before the number
        SymSuffix     symbol goes after the number
    and at most one of
        ForceSpace    always put a space between symbol and number
        ForceNoSpace  never put a space between symbol and number

Symbol precedence, first non-empty wins: symbol override, primary symbol,
portable symbol, currency code.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TypeAlias

from cldrforge.constants import (
    DEFAULT_FRACTION_DIGITS,
    DEPRECATED_FLAG,
    POS_FIXED_FLAG,
    POS_SUFFIX_FLAG,
    PRECISION_MASK,
    SPACE_FORCED_FLAG,
    SPACING_FIXED_FLAG,
)
from cldrforge.diagnostics import ErrorTemplate, MalformedDescriptorError
from cldrforge.enums import SymbolPosition, SymbolSpacing

__all__ = [
    "CompactCurrency",
    "CurrencyRecord",
]

CompactCurrency: TypeAlias = tuple[str, str, int, str, str]
"""(code, symbol, flags, portable symbol, simple symbol)."""

_FIELD_SEPARATOR = "|"
_COMPACT_LENGTH = 5

# ASCII digits only: str.isdigit() would accept superscripts and other scripts.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

_KNOWN_FLAGS = frozenset(SymbolPosition) | frozenset(SymbolSpacing)


def _field(fields: list[str], index: int) -> str | None:
    """Return a descriptor field, treating absent and empty alike."""
    if index < len(fields) and fields[index]:
        return fields[index]
    return None


def _parse_int(value: str) -> int | None:
    if _INTEGER_PATTERN.fullmatch(value) is None:
        return None
    return int(value)


@dataclass(frozen=True, slots=True)
class CurrencyRecord:
    """Display attributes of one currency in one locale.

    Immutable, hashable. Constructed during derivation and consumed by the
    emitter; never mutated.

    Attributes:
        code: ISO 4217 currency code
        display_name: Localized display name
        symbol: Resolved currency symbol
        fraction_digits: Digits after the decimal separator (0-7)
        deprecated: Currency is no longer in general use
        portable_symbol: Symbol safe to show outside the locale
        simple_symbol: Symbol used by the simple currency pattern
        position_fixed: Symbol position ignores the locale's pattern
        symbol_suffix: With position_fixed, the symbol follows the number
        spacing_fixed: Symbol spacing ignores the locale's pattern
        space_forced: With spacing_fixed, a space is always inserted
    """

    code: str
    display_name: str
    symbol: str
    portable_symbol: str
    simple_symbol: str
    fraction_digits: int = DEFAULT_FRACTION_DIGITS
    deprecated: bool = False
    position_fixed: bool = False
    symbol_suffix: bool = False
    spacing_fixed: bool = False
    space_forced: bool = False

    @classmethod
    def from_descriptors(
        cls, code: str, primary: str | None = None, extra: str | None = None
    ) -> CurrencyRecord:
        """Decode a currency from its primary and overlay descriptors.

        Args:
            code: ISO 4217 currency code
            primary: Primary descriptor, or None to use the code as display name
            extra: Overlay descriptor, or None when the locale has no overlay

        Returns:
            Complete CurrencyRecord

        Raises:
            MalformedDescriptorError: If fraction digits or a flag field
                cannot be parsed

        Example:
            >>> record = CurrencyRecord.from_descriptors("USD", "US Dollar|$", "US$|SymPrefix")
            >>> record.symbol, record.portable_symbol, record.position_fixed
            ('$', 'US$', True)
        """
        primary_text = code if primary is None else primary
        fields = primary_text.split(_FIELD_SEPARATOR)
        display_name = fields[0]
        symbol = _field(fields, 1)

        fraction_digits = DEFAULT_FRACTION_DIGITS
        digits_text = _field(fields, 2)
        if digits_text is not None:
            parsed = _parse_int(digits_text)
            if parsed is None or not 0 <= parsed <= PRECISION_MASK:
                raise MalformedDescriptorError(
                    ErrorTemplate.invalid_fraction_digits(code, digits_text, primary_text),
                    currency_code=code,
                    descriptor=primary_text,
                    field="fraction_digits",
                )
            fraction_digits = parsed

        deprecated = False
        deprecated_text = _field(fields, 3)
        if deprecated_text is not None:
            parsed = _parse_int(deprecated_text)
            if parsed is None:
                raise MalformedDescriptorError(
                    ErrorTemplate.invalid_deprecated_flag(code, deprecated_text, primary_text),
                    currency_code=code,
                    descriptor=primary_text,
                    field="deprecated",
                )
            deprecated = parsed != 0

        portable = ""
        simple: str | None = None
        position_fixed = symbol_suffix = spacing_fixed = space_forced = False
        if extra is not None:
            extra_fields = extra.split(_FIELD_SEPARATOR)
            portable = extra_fields[0]
            flags_text = _field(extra_fields, 1)
            if flags_text is not None:
                tokens = set(flags_text.split())
                unknown = sorted(tokens - _KNOWN_FLAGS)
                if unknown:
                    raise MalformedDescriptorError(
                        ErrorTemplate.unknown_space_flag(code, unknown[0], extra),
                        currency_code=code,
                        descriptor=extra,
                        field="flags",
                    )
                if SymbolPosition.PREFIX in tokens:
                    position_fixed = True
                elif SymbolPosition.SUFFIX in tokens:
                    position_fixed = symbol_suffix = True
                if SymbolSpacing.FORCE_SPACE in tokens:
                    spacing_fixed = space_forced = True
                elif SymbolSpacing.FORCE_NO_SPACE in tokens:
                    spacing_fixed = True
            override = _field(extra_fields, 2)
            if override is not None:
                symbol = override
            simple = _field(extra_fields, 3)
            if symbol is None and portable:
                symbol = portable

        if symbol is None:
            symbol = code
        return cls(
            code=code,
            display_name=display_name,
            symbol=symbol,
            portable_symbol=portable or symbol,
            simple_symbol=simple or symbol,
            fraction_digits=fraction_digits,
            deprecated=deprecated,
            position_fixed=position_fixed,
            symbol_suffix=symbol_suffix,
            spacing_fixed=spacing_fixed,
            space_forced=space_forced,
        )

    @classmethod
    def from_compact(
        cls, compact: CompactCurrency, *, display_name: str | None = None
    ) -> CurrencyRecord:
        """Decode the compact tuple produced by to_compact().

        Args:
            compact: (code, symbol, flags, portable symbol, simple symbol)
            display_name: Display name to attach (the tuple does not carry it);
                defaults to the currency code

        Returns:
            CurrencyRecord equal to the encoded one

        Raises:
            MalformedDescriptorError: If the tuple does not have the expected shape
        """
        if len(compact) != _COMPACT_LENGTH or not isinstance(compact[2], int):
            raise MalformedDescriptorError(
                ErrorTemplate.invalid_compact_form(repr(compact)),
                descriptor=repr(compact),
                field="compact",
            )
        code, symbol, flags, portable, simple = compact
        return cls(
            code=code,
            display_name=code if display_name is None else display_name,
            symbol=symbol,
            portable_symbol=portable,
            simple_symbol=simple,
            fraction_digits=flags & PRECISION_MASK,
            deprecated=bool(flags & DEPRECATED_FLAG),
            position_fixed=bool(flags & POS_FIXED_FLAG),
            symbol_suffix=bool(flags & POS_SUFFIX_FLAG),
            spacing_fixed=bool(flags & SPACING_FIXED_FLAG),
            space_forced=bool(flags & SPACE_FORCED_FLAG),
        )

    @property
    def flags(self) -> int:
        """Packed flag word: fraction digits in bits 0-2 plus flag bits."""
        value = self.fraction_digits
        if self.deprecated:
            value |= DEPRECATED_FLAG
        if self.position_fixed:
            value |= POS_FIXED_FLAG
        if self.symbol_suffix:
            value |= POS_SUFFIX_FLAG
        if self.spacing_fixed:
            value |= SPACING_FIXED_FLAG
        if self.space_forced:
            value |= SPACE_FORCED_FLAG
        return value

    def to_compact(self) -> CompactCurrency:
        """Encode as (code, symbol, flags, portable symbol, simple symbol)."""
        return (self.code, self.symbol, self.flags, self.portable_symbol, self.simple_symbol)

    def to_json(self) -> str:
        """Render the JSON array form with double quotes backslash-escaped.

        Example:
            >>> CurrencyRecord.from_descriptors("USD", "US Dollar|$").to_json()
            '[ "USD", "$", 2, "$", "$"]'
        """
        return (
            f'[ "{_quote(self.code)}", "{_quote(self.symbol)}", {self.flags}, '
            f'"{_quote(self.portable_symbol)}", "{_quote(self.simple_symbol)}"]'
        )


def _quote(value: str) -> str:
    return value.replace('"', '\\"')
