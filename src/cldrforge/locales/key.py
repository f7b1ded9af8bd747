"""Locale identity and the canonical parent-derivation rule.

A LocaleKey names one node of the locale inheritance graph. Every lookup in
cldrforge walks the same linear ancestor path:

    lang_Script_RG_VAR -> lang_Script_RG -> lang_Script -> lang -> default

Fields are dropped in the order variant, region, script, language. The root
locale (LocaleKey.DEFAULT) has no parent, so every walk terminates.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from cldrforge.constants import DEFAULT_LOCALE_TAG, ROOT_LOCALE_ALIASES, SUBTAG_SEPARATOR
from cldrforge.diagnostics import ErrorTemplate, LocaleTagError

__all__ = [
    "LocaleKey",
    "ancestor_chain",
    "parent",
]

_SCRIPT_LENGTH = 4
_REGION_ALPHA_LENGTH = 2
_REGION_NUMERIC_LENGTH = 3


@dataclass(frozen=True, slots=True, eq=False)
class LocaleKey:
    """Immutable locale identity.

    Equality, hashing and ordering use the canonical string form
    ``language[_script][_region][_variant]``; the root locale's canonical
    form is ``"default"``.

    Attributes:
        language: Language subtag; empty only for the root locale
        script: Script subtag (title case) or None
        region: Region subtag (upper case, 2 letters or 3 digits) or None
        variant: Variant subtag(s) joined by ``_`` or None

    Example:
        >>> key = LocaleKey.parse("zh-Hant-TW")
        >>> key.parent()
        LocaleKey('zh_Hant')
        >>> [str(k) for k in key.ancestors()]
        ['zh_Hant_TW', 'zh_Hant', 'zh', 'default']
    """

    language: str = ""
    script: str | None = None
    region: str | None = None
    variant: str | None = None

    DEFAULT: ClassVar[LocaleKey]

    def __post_init__(self) -> None:
        """Validate that only the root locale omits the language.

        Raises:
            LocaleTagError: If script, region or variant is set without a
                language, or the language spells the root locale
        """
        if not self.language and (self.script or self.region or self.variant):
            raise LocaleTagError(ErrorTemplate.invalid_locale_tag(self._join()))
        if self.language and self.language.lower() in ROOT_LOCALE_ALIASES:
            raise LocaleTagError(ErrorTemplate.reserved_locale_language(self.language))

    @classmethod
    def parse(cls, tag: str) -> LocaleKey:
        """Parse a BCP-47 or POSIX locale tag.

        A 4-letter alphabetic subtag is a script, a 2-letter alphabetic or
        3-digit subtag is a region, and everything after the first
        unrecognized subtag is the variant.

        Args:
            tag: Locale tag such as "en", "en_US", "sr-Latn-RS", "en_US_POSIX"

        Returns:
            Parsed LocaleKey; LocaleKey.DEFAULT for "", "default" and "root"
            in any case

        Raises:
            LocaleTagError: If the tag has subtags but no language, or a
                root spelling followed by subtags
        """
        if tag.lower() in ROOT_LOCALE_ALIASES:
            return cls.DEFAULT
        subtags = tag.replace("-", SUBTAG_SEPARATOR).split(SUBTAG_SEPARATOR)
        language = subtags[0].lower()
        if not language:
            raise LocaleTagError(ErrorTemplate.invalid_locale_tag(tag))

        script: str | None = None
        region: str | None = None
        rest = subtags[1:]
        if rest and len(rest[0]) == _SCRIPT_LENGTH and rest[0].isalpha():
            script = rest.pop(0).title()
        if rest and (
            (len(rest[0]) == _REGION_ALPHA_LENGTH and rest[0].isalpha())
            or (len(rest[0]) == _REGION_NUMERIC_LENGTH and rest[0].isdigit())
        ):
            region = rest.pop(0).upper()
        variants = [subtag.upper() for subtag in rest if subtag]
        variant = SUBTAG_SEPARATOR.join(variants) if variants else None
        return cls(language=language, script=script, region=region, variant=variant)

    @property
    def is_default(self) -> bool:
        """True for the root locale."""
        return not self.language

    @property
    def tag(self) -> str:
        """Canonical string form (``"default"`` for the root locale)."""
        if self.is_default:
            return DEFAULT_LOCALE_TAG
        return self._join()

    @property
    def language_script(self) -> str:
        """``language_script`` when a script is present, else ``language``."""
        if self.script:
            return f"{self.language}{SUBTAG_SEPARATOR}{self.script}"
        return self.language

    def parent(self) -> LocaleKey | None:
        """Return the next ancestor, or None for the root locale."""
        if self.is_default:
            return None
        if self.variant:
            return LocaleKey(self.language, self.script, self.region)
        if self.region:
            return LocaleKey(self.language, self.script)
        if self.script:
            return LocaleKey(self.language)
        return LocaleKey.DEFAULT

    def ancestors(self) -> tuple[LocaleKey, ...]:
        """Return this key followed by every ancestor up to the root locale."""
        chain: list[LocaleKey] = []
        current: LocaleKey | None = self
        while current is not None:
            chain.append(current)
            current = current.parent()
        return tuple(chain)

    def _join(self) -> str:
        parts = [self.language]
        parts.extend(p for p in (self.script, self.region, self.variant) if p)
        return SUBTAG_SEPARATOR.join(parts)

    def __str__(self) -> str:
        return self.tag

    def __repr__(self) -> str:
        return f"LocaleKey({self.tag!r})"

    def __hash__(self) -> int:
        return hash(self.tag)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocaleKey):
            return NotImplemented
        return self.tag == other.tag

    def __lt__(self, other: LocaleKey) -> bool:
        return self.tag < other.tag

    def __le__(self, other: LocaleKey) -> bool:
        return self.tag <= other.tag

    def __gt__(self, other: LocaleKey) -> bool:
        return self.tag > other.tag

    def __ge__(self, other: LocaleKey) -> bool:
        return self.tag >= other.tag


LocaleKey.DEFAULT = LocaleKey()


def parent(key: LocaleKey) -> LocaleKey | None:
    """Return the parent of a locale key (None for the root locale)."""
    return key.parent()


def ancestor_chain(key: LocaleKey) -> tuple[LocaleKey, ...]:
    """Return ``key`` and its ancestors, ending with LocaleKey.DEFAULT."""
    return key.ancestors()
