"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps every failure mode of the derivation pipeline documented in one place
    and lets tests assert on diagnostic codes instead of message wording.
    """

    @staticmethod
    def invalid_fraction_digits(code: str, value: str, descriptor: str) -> Diagnostic:
        """Fraction digit field is not an integer in the accepted range.

        Args:
            code: ISO 4217 currency code
            value: The offending field text
            descriptor: The full primary descriptor

        Returns:
            Diagnostic for DESCRIPTOR_FRACTION_DIGITS_INVALID
        """
        msg = f"Currency '{code}' has invalid fraction digits '{value}'"
        return Diagnostic(
            code=DiagnosticCode.DESCRIPTOR_FRACTION_DIGITS_INVALID,
            message=msg,
            hint="Fraction digits must be an integer between 0 and 7",
            input_value=descriptor,
        )

    @staticmethod
    def invalid_deprecated_flag(code: str, value: str, descriptor: str) -> Diagnostic:
        """Deprecated flag field is not an integer.

        Args:
            code: ISO 4217 currency code
            value: The offending field text
            descriptor: The full primary descriptor

        Returns:
            Diagnostic for DESCRIPTOR_DEPRECATED_FLAG_INVALID
        """
        msg = f"Currency '{code}' has invalid deprecated flag '{value}'"
        return Diagnostic(
            code=DiagnosticCode.DESCRIPTOR_DEPRECATED_FLAG_INVALID,
            message=msg,
            hint="Use 1 for a currency no longer in general use, 0 or empty otherwise",
            input_value=descriptor,
        )

    @staticmethod
    def unknown_space_flag(code: str, token: str, descriptor: str) -> Diagnostic:
        """Overlay flag field contains an unrecognized token."""
        msg = f"Currency '{code}' overlay has unknown flag '{token}'"
        return Diagnostic(
            code=DiagnosticCode.DESCRIPTOR_SPACE_FLAG_UNKNOWN,
            message=msg,
            hint="Recognized flags: SymPrefix, SymSuffix, ForceSpace, ForceNoSpace",
            input_value=descriptor,
        )

    @staticmethod
    def invalid_compact_form(value: str) -> Diagnostic:
        """Compact currency tuple does not have the expected shape."""
        msg = "Compact currency record must be (code, symbol, flags, portable, simple)"
        return Diagnostic(
            code=DiagnosticCode.DESCRIPTOR_COMPACT_FORM_INVALID,
            message=msg,
            input_value=value,
        )

    @staticmethod
    def invalid_locale_tag(tag: str) -> Diagnostic:
        """Locale tag has subtags but no language."""
        msg = f"Locale tag '{tag}' has no language subtag"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_TAG_INVALID,
            message=msg,
            hint="Only the root locale may omit the language",
            input_value=tag,
        )

    @staticmethod
    def reserved_locale_language(language: str) -> Diagnostic:
        """Language subtag spells the root locale."""
        msg = f"Language subtag '{language}' is reserved for the root locale"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_LANGUAGE_RESERVED,
            message=msg,
            hint="Use LocaleKey.DEFAULT or LocaleKey.parse('default')",
            input_value=language,
        )

    @staticmethod
    def ambiguous_dispatch_prefix(shorter: str, longer: str) -> Diagnostic:
        """One dispatch tag is a string prefix of another inside a subtag.

        Args:
            shorter: The tag that is a prefix
            longer: The tag it prefixes without a subtag boundary

        Returns:
            Warning diagnostic for DISPATCH_PREFIX_AMBIGUOUS
        """
        msg = (
            f"Dispatch tag '{shorter}' is a prefix of '{longer}' inside a subtag; "
            f"requests for other languages starting with '{shorter}' select its variant"
        )
        return Diagnostic(
            code=DiagnosticCode.DISPATCH_PREFIX_AMBIGUOUS,
            message=msg,
            hint="Generate a variant for the longer language, or match on subtag boundaries",
            input_value=longer,
            severity="warning",
        )
