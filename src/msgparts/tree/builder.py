"""Tree reconstruction from flat span sequences.

Folds a formatting engine's flat, ordered span output back into a nested
node tree. Markup open/close pairs become Element nodes, composite values
become Fragment nodes, unresolved placeholders become Placeholder nodes.

Architecture:
    Single-pass recursive descent with one frame per open markup span.
    For each open span the builder scans forward for the matching close,
    counting depth for that tag name only, so re-opening the same name
    before its outer close nests correctly. Children are built over the
    enclosed index range; no intermediate parse stack is materialized.

Malformed input policy:
    - Unmatched open: the element absorbs every remaining span up to the
      end of the range (truncation). Logged at WARNING.
    - Stray close (no matching open in this frame): ends the current frame;
      remaining spans of that frame are not rendered. Logged at WARNING.
    - Unknown span shapes raise UnhandledSpanKindError.

Thread Safety:
    SpanTreeBuilder instances carry a DepthGuard and must not be shared
    across threads. build_tree() creates a fresh builder per call.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from msgparts.constants import MAX_DEPTH
from msgparts.core.depth_guard import DepthGuard
from msgparts.diagnostics import (
    ErrorTemplate,
    InvalidArgumentError,
    UnhandledSpanKindError,
)
from msgparts.enums import MarkupKind
from msgparts.spans import (
    BidiIsolationSpan,
    CompositeSpan,
    FallbackSpan,
    MarkupSpan,
    Span,
    StringSpan,
    TextSpan,
    ValueSpan,
)

from .nodes import Element, Fragment, Node, Override, Placeholder, ResolvedTag

__all__ = ["SpanTreeBuilder", "build_tree"]

logger = logging.getLogger(__name__)


class SpanTreeBuilder:
    """Rebuilds a node tree from a flat span sequence.

    Example:
        >>> builder = SpanTreeBuilder({"b": "strong"})
        >>> builder.build([
        ...     TextSpan("Hello "),
        ...     MarkupSpan(MarkupKind.OPEN, "b"),
        ...     TextSpan("world"),
        ...     MarkupSpan(MarkupKind.CLOSE, "b"),
        ... ])
        ['Hello ', Element(type='strong', attributes=mappingproxy({}), children=('world',), key='markup-b-1')]
    """

    __slots__ = ("_guard", "_overrides")

    def __init__(
        self,
        overrides: Mapping[str, Override] | None = None,
        *,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """Initialize builder.

        Args:
            overrides: Substitutes keyed by markup tag name
            max_depth: Maximum markup/composite nesting depth
        """
        self._overrides: Mapping[str, Override] = overrides if overrides is not None else {}
        self._guard = DepthGuard(max_depth=max_depth)

    def build(
        self, spans: Sequence[Span], start: int = 0, stop: int | None = None
    ) -> list[Node]:
        """Build nodes from ``spans[start:stop]``.

        Args:
            spans: Flat span sequence from the formatting engine
            start: First index to consume
            stop: End index, exclusive (default: len(spans))

        Returns:
            Nodes in left-to-right span order

        Raises:
            InvalidArgumentError: If the range lies outside the sequence
            UnhandledSpanKindError: If a span has an unrecognized shape
            DepthLimitExceededError: If nesting exceeds max_depth
        """
        end = len(spans) if stop is None else stop
        if start < 0 or end < start or end > len(spans):
            raise InvalidArgumentError(ErrorTemplate.span_range_invalid(start, end, len(spans)))
        return self._build(spans, start, end)

    def _build(self, spans: Sequence[Span], start: int, stop: int) -> list[Node]:
        result: list[Node] = []
        i = start
        while i < stop:
            span = spans[i]
            match span:
                case TextSpan(value=value) | StringSpan(value=value) | ValueSpan(value=value):
                    result.append(value)
                    i += 1
                case BidiIsolationSpan():
                    i += 1
                case MarkupSpan(kind=MarkupKind.OPEN):
                    close = self._find_close(spans, i, stop)
                    with self._guard:
                        children = self._build(spans, i + 1, close)
                    result.append(self._element(span, children, i))
                    i = close + 1
                case MarkupSpan(kind=MarkupKind.STANDALONE):
                    result.append(self._element(span, [], i))
                    i += 1
                case MarkupSpan(kind=MarkupKind.CLOSE):
                    if i + 1 < stop:
                        logger.warning(
                            "Unmatched close markup '%s' at index %d; %d span(s) not rendered",
                            span.name,
                            i,
                            stop - i - 1,
                        )
                    break
                case CompositeSpan(parts=parts):
                    with self._guard:
                        children = self._build(parts, 0, len(parts))
                    result.append(Fragment(children, kind=span.type, key=f"{span.type}-{i}"))
                    i += 1
                case FallbackSpan(source=source):
                    logger.warning("Unresolved message value rendered as fallback: %s", source)
                    result.append(Placeholder(source, key=f"fallback-{i}"))
                    i += 1
                case _:
                    raise UnhandledSpanKindError(ErrorTemplate.span_kind_unhandled(span), span=span)
        return result

    def _element(self, span: MarkupSpan, children: list[Node], index: int) -> Element:
        tag = ResolvedTag.resolve(span.name, span.options, self._overrides)
        return Element(
            tag.component,
            tag.attributes,
            tuple(children),
            key=f"{span.type}-{span.name}-{index}",
        )

    @staticmethod
    def _find_close(spans: Sequence[Span], open_index: int, stop: int) -> int:
        """Return the index of the close span matching ``spans[open_index]``.

        Returns ``stop`` when the open span is never closed within range.
        """
        name = spans[open_index].name  # type: ignore[union-attr]  # caller matched MarkupSpan
        depth = 1
        for j in range(open_index + 1, stop):
            candidate = spans[j]
            if not isinstance(candidate, MarkupSpan) or candidate.name != name:
                continue
            if candidate.kind == MarkupKind.OPEN:
                depth += 1
            elif candidate.kind == MarkupKind.CLOSE:
                depth -= 1
                if depth == 0:
                    return j
        logger.warning(
            "Markup '%s' opened at index %d is never closed; wrapping remaining spans",
            name,
            open_index,
        )
        return stop


def build_tree(
    spans: Sequence[Span],
    overrides: Mapping[str, Override] | None = None,
    start: int = 0,
    stop: int | None = None,
    *,
    max_depth: int = MAX_DEPTH,
) -> list[Node]:
    """Rebuild a node tree from a flat span sequence.

    Args:
        spans: Flat span sequence from the formatting engine
        overrides: Substitutes keyed by markup tag name. A Substitute's
            attributes merge under the span's declared options; any other
            value replaces the tag name as the element type.
        start: First index to consume
        stop: End index, exclusive (default: len(spans))
        max_depth: Maximum markup/composite nesting depth

    Returns:
        Nodes in left-to-right span order

    Raises:
        InvalidArgumentError: If the range lies outside the sequence
        UnhandledSpanKindError: If a span has an unrecognized shape
        DepthLimitExceededError: If nesting exceeds max_depth

    Example:
        >>> nodes = build_tree([
        ...     MarkupSpan(MarkupKind.OPEN, "b"),
        ...     MarkupSpan(MarkupKind.OPEN, "i"),
        ...     TextSpan("x"),
        ...     MarkupSpan(MarkupKind.CLOSE, "i"),
        ...     MarkupSpan(MarkupKind.CLOSE, "b"),
        ... ])
        >>> nodes[0].children[0].children
        ('x',)
    """
    return SpanTreeBuilder(overrides, max_depth=max_depth).build(spans, start, stop)
