"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def argument_not_sequence(name: str, value: object) -> Diagnostic:
        """Argument is not a list/tuple-like sequence of strings.

        Args:
            name: Parameter name
            value: Value received

        Returns:
            Diagnostic for ARGUMENT_NOT_SEQUENCE
        """
        msg = f"{name} must be a non-empty sequence, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_NOT_SEQUENCE,
            message=msg,
            hint="Pass a list or tuple of locale tags; a bare string is not accepted",
        )

    @staticmethod
    def argument_empty(name: str) -> Diagnostic:
        """Required sequence is empty.

        Args:
            name: Parameter name

        Returns:
            Diagnostic for ARGUMENT_EMPTY
        """
        msg = f"{name} must be a non-empty sequence"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_EMPTY,
            message=msg,
            hint="Pass at least one locale tag",
        )

    @staticmethod
    def argument_item_invalid(name: str, index: int, value: object) -> Diagnostic:
        """Sequence item is not a non-empty string.

        Args:
            name: Parameter name
            index: Position of the offending item
            value: Offending item

        Returns:
            Diagnostic for ARGUMENT_ITEM_INVALID
        """
        msg = f"{name}[{index}] must be a non-empty string, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_ITEM_INVALID,
            message=msg,
        )

    @staticmethod
    def matcher_unknown(matcher: object) -> Diagnostic:
        """Unknown locale matcher.

        Args:
            matcher: Value received

        Returns:
            Diagnostic for MATCHER_UNKNOWN
        """
        msg = f"Unknown locale matcher {matcher!r}"
        return Diagnostic(
            code=DiagnosticCode.MATCHER_UNKNOWN,
            message=msg,
            hint="Use 'best-fit' or 'lookup'",
        )

    @staticmethod
    def locale_not_configured(locale: str) -> Diagnostic:
        """Locale has no entry in a MessageConfig.

        Args:
            locale: Requested locale

        Returns:
            Diagnostic for LOCALE_NOT_CONFIGURED
        """
        msg = f"{locale} not found in config"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_CONFIGURED,
            message=msg,
            hint="Add the locale to MessageConfig.locales or negotiate with resolve_locale()",
        )

    @staticmethod
    def message_locale_missing(locale: str) -> Diagnostic:
        """Message mapping has no entry for the locale."""
        msg = f"Message has no translation for {locale}"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_LOCALE_MISSING,
            message=msg,
        )

    @staticmethod
    def formatter_missing() -> Diagnostic:
        """MessageConfig has no formatting engine attached."""
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_MISSING,
            message="No parts formatter configured",
            hint="Pass formatter= to MessageConfig",
        )

    @staticmethod
    def span_range_invalid(start: int, stop: int, length: int) -> Diagnostic:
        """Requested span range lies outside the sequence."""
        msg = f"Span range [{start}, {stop}) is invalid for {length} span(s)"
        return Diagnostic(
            code=DiagnosticCode.SPAN_RANGE_INVALID,
            message=msg,
        )

    @staticmethod
    def locale_tag_invalid(tag: object, reason: str) -> Diagnostic:
        """Locale tag rejected by canonicalization.

        Args:
            tag: The rejected tag
            reason: Short explanation

        Returns:
            Diagnostic for LOCALE_TAG_INVALID
        """
        msg = f"Invalid locale tag {tag!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_TAG_INVALID,
            message=msg,
            hint="Use a BCP-47 tag such as 'en-US' or 'zh-Hant-HK'",
        )

    @staticmethod
    def span_kind_unhandled(span: object) -> Diagnostic:
        """Span shape not recognized by the tree builder.

        Args:
            span: The unrecognized span

        Returns:
            Diagnostic for SPAN_KIND_UNHANDLED
        """
        msg = f"Unhandled message span {span!r}"
        return Diagnostic(
            code=DiagnosticCode.SPAN_KIND_UNHANDLED,
            message=msg,
            hint="The formatting engine and msgparts versions may not match",
        )

    @staticmethod
    def max_depth_exceeded(max_depth: int) -> Diagnostic:
        """Nesting exceeded the recursion limit.

        Args:
            max_depth: Configured limit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Check for deeply nested markup in the message",
        )
