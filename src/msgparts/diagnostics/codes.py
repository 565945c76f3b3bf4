"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
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
        1000-1999: Argument errors (caller contract violations)
        2000-2999: Locale errors (canonicalization, negotiation)
        3000-3999: Span errors (tree reconstruction)
    """

    # Argument errors (1000-1999)
    ARGUMENT_NOT_SEQUENCE = 1001
    ARGUMENT_EMPTY = 1002
    ARGUMENT_ITEM_INVALID = 1003
    MATCHER_UNKNOWN = 1004
    LOCALE_NOT_CONFIGURED = 1005
    FORMATTER_MISSING = 1006
    SPAN_RANGE_INVALID = 1007
    MESSAGE_LOCALE_MISSING = 1008

    # Locale errors (2000-2999)
    LOCALE_TAG_INVALID = 2001

    # Span errors (3000-3999)
    SPAN_KIND_UNHANDLED = 3001
    MAX_DEPTH_EXCEEDED = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[LOCALE_TAG_INVALID]: Invalid locale tag 'en_US!'
              = help: Use a BCP-47 tag such as 'en-US' or 'zh-Hant-HK'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
