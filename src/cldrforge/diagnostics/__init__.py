"""Diagnostic system for cldrforge errors.

Provides structured error diagnostics with codes, hints and locale context.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import CldrForgeError, LocaleTagError, MalformedDescriptorError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CldrForgeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LocaleTagError",
    "MalformedDescriptorError",
    "OutputFormat",
]
