"""Currency pattern rewriting.

CLDR number patterns use ``¤`` as the currency sign placeholder, ``;`` to
separate the positive and negative sub-patterns, and single quotes to escape
literal text. The global currency pattern appends the ISO code placeholder
(`` ¤¤``) to every sub-pattern so formatted amounts are unambiguous outside
their home locale.

Python 3.13+. Zero external dependencies.
"""

from cldrforge.constants import CURRENCY_PLACEHOLDER, GLOBAL_CURRENCY_MARKER

__all__ = [
    "to_global_currency_pattern",
    "to_simple_currency_pattern",
]

_QUOTE = "'"
_SUBPATTERN_SEPARATOR = ";"


def to_global_currency_pattern(pattern: str) -> str:
    """Append the international currency marker to every sub-pattern.

    Quote-aware: a ``;`` inside single quotes is literal text. Unbalanced
    quotes are tolerated; everything after an unmatched quote counts as
    quoted. Not idempotent: rewriting twice appends the marker twice.

    Args:
        pattern: CLDR currency pattern

    Returns:
        Pattern with " ¤¤" before each unquoted ";" and at the end

    Example:
        >>> to_global_currency_pattern("¤#,##0.00;¤-#,##0.00")
        '¤#,##0.00 ¤¤;¤-#,##0.00 ¤¤'
        >>> to_global_currency_pattern("#,##0.00 '¤;x'")
        "#,##0.00 '¤;x' ¤¤"
    """
    parts: list[str] = []
    in_quote = False
    for char in pattern:
        if char == _QUOTE:
            in_quote = not in_quote
        elif char == _SUBPATTERN_SEPARATOR and not in_quote:
            parts.append(GLOBAL_CURRENCY_MARKER)
        parts.append(char)
    parts.append(GLOBAL_CURRENCY_MARKER)
    return "".join(parts)


def to_simple_currency_pattern(pattern: str) -> str:
    """Widen every currency placeholder to the simple-symbol form ``¤¤¤¤``."""
    return pattern.replace(CURRENCY_PLACEHOLDER, CURRENCY_PLACEHOLDER * 4)
