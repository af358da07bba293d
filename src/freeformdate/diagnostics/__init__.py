"""Diagnostic system for freeformdate errors.

Provides structured error diagnostics with codes, hints and severities.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import DateParseError, DateParserError, HintError
from .templates import ErrorTemplate

__all__ = [
    "DateParseError",
    "DateParserError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "HintError",
]
