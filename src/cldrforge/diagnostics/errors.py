"""cldrforge exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import replace

from .codes import Diagnostic

__all__ = [
    "CldrForgeError",
    "LocaleTagError",
    "MalformedDescriptorError",
]


class CldrForgeError(Exception):
    """Base exception for all cldrforge errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CldrForgeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LocaleTagError(CldrForgeError, ValueError):
    """Locale tag cannot be turned into a LocaleKey."""


class MalformedDescriptorError(CldrForgeError):
    """Currency descriptor field cannot be parsed as its expected type.

    Fatal for the currency generation of the locale being processed: a
    wrong fraction digit count corrupts every monetary amount formatted
    with the record, so the value is never defaulted.

    Attributes:
        currency_code: ISO 4217 code of the record being built
        descriptor: The raw descriptor text that failed
        field: Name of the offending field
        locale_code: Locale being processed (empty until attached)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        currency_code: str = "",
        descriptor: str = "",
        field: str = "",
        locale_code: str = "",
    ) -> None:
        """Initialize MalformedDescriptorError.

        Args:
            message: Error message string OR Diagnostic object
            currency_code: ISO 4217 code of the record being built
            descriptor: The raw descriptor text that failed
            field: Name of the offending field
            locale_code: Locale being processed
        """
        super().__init__(message)
        self.currency_code = currency_code
        self.descriptor = descriptor
        self.field = field
        self.locale_code = locale_code

    def with_locale(self, locale_code: str) -> MalformedDescriptorError:
        """Return a copy of this error attributed to a locale.

        Args:
            locale_code: Canonical tag of the locale being generated

        Returns:
            New error carrying the locale in both attribute and diagnostic
        """
        message: str | Diagnostic
        if self.diagnostic is not None:
            message = replace(self.diagnostic, locale_code=locale_code)
        else:
            message = f"{self.args[0]} (locale {locale_code})"
        return MalformedDescriptorError(
            message,
            currency_code=self.currency_code,
            descriptor=self.descriptor,
            field=self.field,
            locale_code=locale_code,
        )
