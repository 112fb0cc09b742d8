"""Diagnostic system for gencheck errors.

Provides structured error diagnostics with codes, hints, and formatting.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    ConfigurationError,
    GenCheckError,
    PropertyFailure,
    RejectionExhaustedError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "GenCheckError",
    "OutputFormat",
    "PropertyFailure",
    "RejectionExhaustedError",
]
