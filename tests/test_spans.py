"""Tests for span dataclasses and coerce_span().

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from msgparts.diagnostics import DiagnosticCode, UnhandledSpanKindError
from msgparts.enums import MarkupKind, SpanType
from msgparts.spans import (
    BidiIsolationSpan,
    CompositeSpan,
    FallbackSpan,
    MarkupSpan,
    StringSpan,
    TextSpan,
    ValueSpan,
    coerce_span,
)

# ============================================================================
# Dataclasses
# ============================================================================


class TestSpanDataclasses:
    """Test span construction and immutability."""

    def test_type_tags(self) -> None:
        """Fixed-type spans expose their wire type."""
        assert TextSpan("a").type == SpanType.TEXT
        assert StringSpan("a").type == "string"
        assert BidiIsolationSpan("⁨").type == "bidiIsolation"
        assert MarkupSpan(MarkupKind.OPEN, "b").type == "markup"
        assert FallbackSpan("$x").type == "fallback"

    def test_frozen(self) -> None:
        """Spans cannot be mutated."""
        span = TextSpan("a")

        with pytest.raises(dataclasses.FrozenInstanceError):
            span.value = "b"  # type: ignore[misc]

    def test_markup_options_read_only_copy(self) -> None:
        """Markup options are copied into a read-only mapping."""
        options = {"href": "/x"}
        span = MarkupSpan(MarkupKind.OPEN, "a", options)
        options["href"] = "/y"

        assert span.options["href"] == "/x"
        with pytest.raises(TypeError):
            span.options["href"] = "/z"  # type: ignore[index]

    def test_composite_parts_become_tuple(self) -> None:
        """Composite parts are stored as a tuple."""
        span = CompositeSpan("number", [ValueSpan("integer", "1")])  # type: ignore[arg-type]

        assert span.parts == (ValueSpan("integer", "1"),)

    def test_equality_by_value(self) -> None:
        """Spans compare by field values."""
        assert MarkupSpan(MarkupKind.OPEN, "b", {"x": 1}) == MarkupSpan(
            MarkupKind.OPEN, "b", {"x": 1}
        )


# ============================================================================
# coerce_span
# ============================================================================


class TestCoerceSpan:
    """Test conversion of mapping-shaped engine parts."""

    def test_text(self) -> None:
        """text parts become TextSpan."""
        assert coerce_span({"type": "text", "value": "Hi"}) == TextSpan("Hi")

    def test_string_with_metadata(self) -> None:
        """string parts keep locale and source."""
        span = coerce_span({"type": "string", "value": "Ada", "locale": "en", "source": "$name"})

        assert span == StringSpan("Ada", locale="en", source="$name")

    def test_bidi_isolation(self) -> None:
        """bidiIsolation parts become BidiIsolationSpan."""
        assert coerce_span({"type": "bidiIsolation", "value": "⁨"}) == BidiIsolationSpan(
            "⁨"
        )

    @pytest.mark.parametrize("kind", list(MarkupKind))
    def test_markup(self, kind: MarkupKind) -> None:
        """markup parts become MarkupSpan for each kind."""
        span = coerce_span({"type": "markup", "kind": kind.value, "name": "b"})

        assert span == MarkupSpan(kind, "b")

    def test_markup_options(self) -> None:
        """Markup options are carried over."""
        span = coerce_span(
            {"type": "markup", "kind": "open", "name": "a", "options": {"href": "/help"}}
        )

        assert isinstance(span, MarkupSpan)
        assert dict(span.options) == {"href": "/help"}

    def test_markup_null_options(self) -> None:
        """A null options entry means no options."""
        span = coerce_span({"type": "markup", "kind": "open", "name": "a", "options": None})

        assert isinstance(span, MarkupSpan)
        assert dict(span.options) == {}

    def test_fallback(self) -> None:
        """fallback parts become FallbackSpan."""
        assert coerce_span({"type": "fallback", "source": "$count"}) == FallbackSpan("$count")

    def test_number_with_parts(self) -> None:
        """Parts-bearing values become CompositeSpan with converted sub-spans."""
        span = coerce_span(
            {
                "type": "number",
                "locale": "en",
                "parts": [
                    {"type": "integer", "value": "1"},
                    {"type": "group", "value": ","},
                    {"type": "integer", "value": "234"},
                ],
            }
        )

        assert span == CompositeSpan(
            "number",
            (
                ValueSpan("integer", "1"),
                ValueSpan("group", ","),
                ValueSpan("integer", "234"),
            ),
            locale="en",
        )

    def test_unknown_type_with_parts_is_composite(self) -> None:
        """Any type with a parts sequence is composite."""
        span = coerce_span({"type": "currency", "parts": [{"type": "text", "value": "$"}]})

        assert span == CompositeSpan("currency", (TextSpan("$"),))

    def test_unknown_type_with_value(self) -> None:
        """Any other type with a string value is a ValueSpan."""
        assert coerce_span({"type": "literal", "value": "x"}) == ValueSpan("literal", "x")

    @pytest.mark.parametrize(
        "part",
        [
            {"type": "mystery"},
            {"type": "mystery", "value": 3},
            {"type": "text"},
            {"type": "text", "value": None},
            {"type": "markup", "kind": "sideways", "name": "b"},
            {"type": "markup", "kind": "open"},
            {"type": "markup", "kind": "open", "name": "b", "options": ["x"]},
            {"type": "fallback"},
            {"value": "no type"},
            {"type": 5, "value": "x"},
        ],
    )
    def test_unrecognized_shapes_raise(self, part: dict[str, Any]) -> None:
        """Unrecognized part shapes fail loudly."""
        with pytest.raises(UnhandledSpanKindError) as exc_info:
            coerce_span(part)

        assert exc_info.value.span == part
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.SPAN_KIND_UNHANDLED

    def test_non_mapping_raises(self) -> None:
        """Only mappings can be coerced."""
        with pytest.raises(UnhandledSpanKindError):
            coerce_span(["text", "x"])  # type: ignore[arg-type]

    def test_invalid_nested_part_raises(self) -> None:
        """Errors in nested parts propagate."""
        with pytest.raises(UnhandledSpanKindError):
            coerce_span({"type": "number", "parts": [{"type": "mystery"}]})
