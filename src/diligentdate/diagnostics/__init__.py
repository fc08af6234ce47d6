"""Diagnostic system for diligentdate.

Provides structured error diagnostics with codes, hints, and renderings.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import DiligentDateError, InvalidMomentError, PatternSyntaxError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DiligentDateError",
    "ErrorTemplate",
    "InvalidMomentError",
    "OutputFormat",
    "PatternSyntaxError",
]
