"""Diagnostic system for charstream errors.

Provides structured error diagnostics with codes, positions, and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, Direction
from .errors import CharStreamError, OutOfBoundsError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CharStreamError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "Direction",
    "ErrorTemplate",
    "OutOfBoundsError",
    "OutputFormat",
]
