"""Span sequence strategies.

Spans are generated from nested *shapes* so that every open markup span has
its matching close by construction. A shape is one of:

    str                                  text leaf
    ("bidi", char)                       directional isolate (no node)
    ("standalone", name)                 standalone markup
    ("fallback", source)                 unresolved placeholder
    ("markup", name, children)           open ... close pair
    ("composite", kind, children)        composite value with sub-spans

flatten_shapes() turns shapes into the flat span sequence an engine would
emit; expected_nodes() projects the same shapes onto the node shape the
tree builder must produce, ignoring position-derived keys.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from hypothesis import event
from hypothesis import strategies as st

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
from msgparts.tree import Element, Fragment, Node, Placeholder

__all__ = [
    "COMPOSITE_TYPES",
    "TAG_NAMES",
    "count_value_leaves",
    "count_value_spans",
    "expected_nodes",
    "flatten_shapes",
    "node_shapes",
    "span_shape_lists",
    "span_shapes",
]

TAG_NAMES: tuple[str, ...] = ("b", "i", "em", "a", "span")

COMPOSITE_TYPES: tuple[str, ...] = ("number", "datetime")

# LRI, RLI, FSI, PDI
BIDI_ISOLATES: tuple[str, ...] = ("\u2066", "\u2067", "\u2068", "\u2069")

type Shape = str | tuple[object, ...]

_text = st.text(
    alphabet=st.characters(codec="utf-8", exclude_categories=("Cs",)),
    max_size=8,
)

_leaves: st.SearchStrategy[Shape] = st.one_of(
    _text,
    st.tuples(st.just("bidi"), st.sampled_from(BIDI_ISOLATES)),
    st.tuples(st.just("standalone"), st.sampled_from(TAG_NAMES)),
    st.tuples(st.just("fallback"), st.text(min_size=1, max_size=8)),
)


def _containers(children: st.SearchStrategy[Shape]) -> st.SearchStrategy[Shape]:
    child_tuples = st.lists(children, max_size=4).map(tuple)
    return st.one_of(
        st.tuples(st.just("markup"), st.sampled_from(TAG_NAMES), child_tuples),
        st.tuples(st.just("composite"), st.sampled_from(COMPOSITE_TYPES), child_tuples),
    )


def span_shapes(max_leaves: int = 20) -> st.SearchStrategy[Shape]:
    """One nested shape with bounded size."""
    return st.recursive(_leaves, _containers, max_leaves=max_leaves)


@st.composite
def span_shape_lists(draw: st.DrawFn, max_size: int = 6) -> list[Shape]:
    """Top-level shape sequences, emitting nesting-depth events."""
    shapes = draw(st.lists(span_shapes(), max_size=max_size))
    depth = max((_depth(shape) for shape in shapes), default=0)
    event(f"shape_depth={min(depth, 5)}")
    return shapes


def _depth(shape: Shape) -> int:
    if isinstance(shape, tuple) and shape[0] in ("markup", "composite"):
        children: tuple[Shape, ...] = shape[2]  # type: ignore[assignment]
        return 1 + max((_depth(child) for child in children), default=0)
    return 0


def flatten_shapes(shapes: Iterable[Shape]) -> list[Span]:
    """Emit the flat span sequence for ``shapes``."""
    spans: list[Span] = []
    for shape in shapes:
        if isinstance(shape, str):
            spans.append(TextSpan(shape))
            continue
        match shape:
            case ("bidi", str(char)):
                spans.append(BidiIsolationSpan(char))
            case ("standalone", str(name)):
                spans.append(MarkupSpan(MarkupKind.STANDALONE, name))
            case ("fallback", str(source)):
                spans.append(FallbackSpan(source))
            case ("markup", str(name), tuple(children)):
                spans.append(MarkupSpan(MarkupKind.OPEN, name))
                spans.extend(flatten_shapes(children))
                spans.append(MarkupSpan(MarkupKind.CLOSE, name))
            case ("composite", str(kind), tuple(children)):
                spans.append(CompositeSpan(kind, tuple(flatten_shapes(children))))
    return spans


def expected_nodes(shapes: Iterable[Shape]) -> list[object]:
    """Project ``shapes`` onto the key-free node shape the builder must produce."""
    nodes: list[object] = []
    for shape in shapes:
        if isinstance(shape, str):
            nodes.append(shape)
            continue
        match shape:
            case ("bidi", _):
                pass
            case ("standalone", name):
                nodes.append(("element", name, ()))
            case ("fallback", source):
                nodes.append(("placeholder", source))
            case ("markup", name, tuple(children)):
                nodes.append(("element", name, tuple(expected_nodes(children))))
            case ("composite", kind, tuple(children)):
                nodes.append(("fragment", kind, tuple(expected_nodes(children))))
    return nodes


def node_shapes(nodes: Iterable[Node]) -> list[object]:
    """Project built nodes onto the same key-free shape as expected_nodes()."""
    result: list[object] = []
    for node in nodes:
        match node:
            case str():
                result.append(node)
            case Element(type=component, children=children):
                result.append(("element", component, tuple(node_shapes(children))))
            case Fragment(kind=kind, children=children):
                result.append(("fragment", kind, tuple(node_shapes(children))))
            case Placeholder(source=source):
                result.append(("placeholder", source))
    return result


def count_value_spans(spans: Sequence[Span]) -> int:
    """Count text/string/value spans, including those inside composites."""
    total = 0
    for span in spans:
        match span:
            case TextSpan() | StringSpan() | ValueSpan():
                total += 1
            case CompositeSpan(parts=parts):
                total += count_value_spans(parts)
    return total


def count_value_leaves(nodes: Iterable[Node]) -> int:
    """Count literal string nodes anywhere in a node tree."""
    total = 0
    for node in nodes:
        match node:
            case str():
                total += 1
            case Element(children=children) | Fragment(children=children):
                total += count_value_leaves(children)
    return total
