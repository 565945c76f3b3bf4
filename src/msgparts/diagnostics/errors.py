"""msgparts exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.
None of these errors is retried or swallowed inside msgparts: every one
propagates to the immediate caller.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class MsgPartsError(Exception):
    """Base exception for all msgparts errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MsgPartsError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidArgumentError(MsgPartsError, ValueError):
    """Caller contract violation.

    Examples:
    - Empty user or supported locale sequence
    - A bare string passed where a sequence of tags is expected
    - Unknown locale matcher
    """


class InvalidLocaleTagError(InvalidArgumentError):
    """Locale tag rejected by canonicalization.

    Subclasses InvalidArgumentError: an empty or malformed tag is both a
    contract violation and a canonicalization failure.

    Attributes:
        tag: The rejected tag (as received)
    """

    def __init__(self, message: str | Diagnostic, *, tag: object = "") -> None:
        super().__init__(message)
        self.tag = tag


class UnhandledSpanKindError(MsgPartsError, TypeError):
    """Span shape not recognized by the tree builder.

    Signals a contract break between the formatting engine and the tree
    builder. Callers in production may catch it and render a fallback.

    Attributes:
        span: The offending span object
    """

    def __init__(self, message: str | Diagnostic, *, span: object = None) -> None:
        super().__init__(message)
        self.span = span


class DepthLimitExceededError(MsgPartsError):
    """Raised when maximum nesting depth is exceeded.

    This error indicates either:
    - Malformed engine output with runaway markup nesting
    - Programmatically constructed adversarial span sequences
    """
