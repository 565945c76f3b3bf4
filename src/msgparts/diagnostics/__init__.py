"""Diagnostic system for msgparts errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DepthLimitExceededError,
    InvalidArgumentError,
    InvalidLocaleTagError,
    MsgPartsError,
    UnhandledSpanKindError,
)
from .formatter import DiagnosticFormatter
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidArgumentError",
    "InvalidLocaleTagError",
    "MsgPartsError",
    "UnhandledSpanKindError",
]
