"""Span types: the flat output of a message-formatting engine.

A formatted message arrives as an ordered sequence of spans. Markup spans
come in open/close pairs that the tree builder folds back into a nested
structure; composite spans (formatted numbers, dates) carry their own
sub-span sequences.

Span variants:
    - TextSpan: literal text from the message pattern
    - StringSpan: a formatted string value
    - BidiIsolationSpan: zero-width directional isolate around a value
    - MarkupSpan: open, close, or standalone markup tag
    - CompositeSpan: value whose rendering has internal structure
    - ValueSpan: any other engine part carrying a string value
    - FallbackSpan: placeholder the engine could not resolve

All spans are immutable. coerce_span() converts mapping-shaped engine
output (e.g. decoded JSON) into these dataclasses.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar

from msgparts.diagnostics import ErrorTemplate, UnhandledSpanKindError
from msgparts.enums import MarkupKind, SpanType

__all__ = [
    "BidiIsolationSpan",
    "CompositeSpan",
    "FallbackSpan",
    "MarkupSpan",
    "Span",
    "StringSpan",
    "TextSpan",
    "ValueSpan",
    "coerce_span",
]


@dataclass(frozen=True, slots=True)
class TextSpan:
    """Literal text from the message pattern."""

    type: ClassVar[str] = SpanType.TEXT

    value: str


@dataclass(frozen=True, slots=True)
class StringSpan:
    """Formatted string value (e.g. a variable reference)."""

    type: ClassVar[str] = SpanType.STRING

    value: str
    locale: str | None = None
    source: str | None = None


@dataclass(frozen=True, slots=True)
class BidiIsolationSpan:
    """Directional isolate (U+2066..U+2069) with no visible content."""

    type: ClassVar[str] = SpanType.BIDI_ISOLATION

    value: str


@dataclass(frozen=True, slots=True)
class MarkupSpan:
    """Markup boundary.

    Open and close spans for the same name may nest; the tree builder
    matches them by per-name depth.

    Attributes:
        kind: OPEN, CLOSE, or STANDALONE
        name: Tag name, e.g. "b"
        options: Declared attributes (open and standalone spans only)
        source: Engine source text, for diagnostics
    """

    type: ClassVar[str] = SpanType.MARKUP

    kind: MarkupKind
    name: str
    options: Mapping[str, object] = field(default_factory=dict)
    source: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))


@dataclass(frozen=True, slots=True)
class CompositeSpan:
    """Value whose rendered output has internal structure.

    Example: a number formatted as "1,234.5" arrives with sub-spans
    integer "1", group ",", integer "234", decimal ".", fraction "5".

    Attributes:
        type: Engine value type ("number", "datetime", ...)
        parts: Nested sub-spans, in rendering order
        value: Optional flat rendering
        locale: Locale used by the engine
        source: Engine source text, for diagnostics
    """

    type: str
    parts: tuple[Span, ...]
    value: str | None = None
    locale: str | None = None
    source: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", tuple(self.parts))


@dataclass(frozen=True, slots=True)
class ValueSpan:
    """Any other engine part carrying a string value ("integer", "literal", ...)."""

    type: str
    value: str
    source: str | None = None


@dataclass(frozen=True, slots=True)
class FallbackSpan:
    """Placeholder the engine could not resolve (missing function or argument)."""

    type: ClassVar[str] = SpanType.FALLBACK

    source: str


type Span = (
    TextSpan
    | StringSpan
    | BidiIsolationSpan
    | MarkupSpan
    | CompositeSpan
    | ValueSpan
    | FallbackSpan
)


def _unhandled(part: object) -> UnhandledSpanKindError:
    return UnhandledSpanKindError(ErrorTemplate.span_kind_unhandled(part), span=part)


def _optional_str(part: Mapping[str, Any], key: str) -> str | None:
    value = part.get(key)
    return value if isinstance(value, str) else None


def _required_str(part: Mapping[str, Any], key: str) -> str:
    value = part.get(key)
    if not isinstance(value, str):
        raise _unhandled(part)
    return value


def coerce_span(part: Mapping[str, Any]) -> Span:
    """Convert one mapping-shaped engine part into a Span.

    Well-known types map onto their dataclasses. Any other type becomes a
    CompositeSpan when it carries a ``parts`` sequence, or a ValueSpan when
    it carries a string ``value``.

    Args:
        part: Mapping with at least a string ``type`` key

    Returns:
        The equivalent Span (sub-parts converted recursively)

    Raises:
        UnhandledSpanKindError: If the mapping matches no known shape

    Example:
        >>> coerce_span({"type": "markup", "kind": "open", "name": "b"})
        MarkupSpan(kind=<MarkupKind.OPEN: 'open'>, name='b', options=mappingproxy({}), source=None)
    """
    if not isinstance(part, Mapping) or not isinstance(part.get("type"), str):
        raise _unhandled(part)

    span_type: str = part["type"]
    match span_type:
        case SpanType.TEXT:
            return TextSpan(_required_str(part, "value"))
        case SpanType.STRING:
            return StringSpan(
                _required_str(part, "value"),
                locale=_optional_str(part, "locale"),
                source=_optional_str(part, "source"),
            )
        case SpanType.BIDI_ISOLATION:
            return BidiIsolationSpan(_required_str(part, "value"))
        case SpanType.MARKUP:
            try:
                kind = MarkupKind(part.get("kind"))
            except ValueError as e:
                raise _unhandled(part) from e
            options = part.get("options") or {}
            if not isinstance(options, Mapping):
                raise _unhandled(part)
            return MarkupSpan(
                kind,
                _required_str(part, "name"),
                options,
                source=_optional_str(part, "source"),
            )
        case SpanType.FALLBACK:
            return FallbackSpan(_required_str(part, "source"))

    nested = part.get("parts")
    if isinstance(nested, Sequence) and not isinstance(nested, str):
        return CompositeSpan(
            span_type,
            tuple(coerce_span(sub) for sub in nested),
            value=_optional_str(part, "value"),
            locale=_optional_str(part, "locale"),
            source=_optional_str(part, "source"),
        )
    if isinstance(part.get("value"), str):
        return ValueSpan(span_type, part["value"], source=_optional_str(part, "source"))
    raise _unhandled(part)
