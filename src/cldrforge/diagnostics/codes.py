"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for locale-data derivation.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Descriptor errors (currency descriptor parsing)
        2000-2999: Locale identity errors
        3000-3999: Dispatch diagnostics (warnings)
    """

    # Descriptor errors (1000-1999)
    DESCRIPTOR_FRACTION_DIGITS_INVALID = 1001
    DESCRIPTOR_DEPRECATED_FLAG_INVALID = 1002
    DESCRIPTOR_SPACE_FLAG_UNKNOWN = 1004
    DESCRIPTOR_COMPACT_FORM_INVALID = 1005

    # Locale identity errors (2000-2999)
    LOCALE_TAG_INVALID = 2001
    LOCALE_LANGUAGE_RESERVED = 2002

    # Dispatch diagnostics (3000-3999)
    DISPATCH_PREFIX_AMBIGUOUS = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context for a
    generation run to report which locale and which input went wrong.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale being processed when the error occurred
        input_value: The offending input (descriptor, tag, field)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None
    input_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[DESCRIPTOR_FRACTION_DIGITS_INVALID]: Currency 'USD' ...
              --> locale en_US
              = input: US Dollar|$|two
              = help: Fraction digits must be an integer between 0 and 7

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
