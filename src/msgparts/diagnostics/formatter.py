"""Diagnostic formatting service.

Renders diagnostics in Rust compiler style for exception messages and logs.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = ["DiagnosticFormatter"]


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> print(formatter.format(ErrorTemplate.argument_empty("user_locales")))
        error[ARGUMENT_EMPTY]: user_locales must be a non-empty sequence
          = help: Pass at least one locale tag
    """

    def format(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[ARGUMENT_EMPTY]: supported_locales must be a non-empty sequence
              = help: Pass at least one locale tag
        """
        parts = [f"{diagnostic.severity}[{diagnostic.code.name}]: {diagnostic.message}"]
        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")
        return "\n".join(parts)
