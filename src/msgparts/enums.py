"""Enumerations for msgparts type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LocaleMatcher(StrEnum):
    """Matching algorithm passed to the runtime-support query.

    StrEnum provides automatic string conversion: str(LocaleMatcher.LOOKUP) == "lookup"
    """

    BEST_FIT = "best-fit"
    """Database-defined matching; may resolve likely subtags."""

    LOOKUP = "lookup"
    """RFC 4647 lookup: truncate subtags until the database has data."""


class MarkupKind(StrEnum):
    """Role of a markup span.

    StrEnum provides automatic string conversion: str(MarkupKind.OPEN) == "open"
    """

    OPEN = "open"
    """Opening tag: {#b}"""

    CLOSE = "close"
    """Closing tag: {/b}"""

    STANDALONE = "standalone"
    """Self-contained tag: {#br/}"""


class SpanType(StrEnum):
    """Well-known span ``type`` values emitted by formatting engines."""

    TEXT = "text"
    STRING = "string"
    BIDI_ISOLATION = "bidiIsolation"
    MARKUP = "markup"
    NUMBER = "number"
    DATETIME = "datetime"
    FALLBACK = "fallback"


__all__ = [
    "LocaleMatcher",
    "MarkupKind",
    "SpanType",
]
