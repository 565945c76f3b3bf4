"""Hypothesis strategies for msgparts property-based testing.

Strategies are organized by domain:

- locales: Locale tags with known Babel support, unknown tags, extensions
- spans: Well-formed span sequences generated from nested shapes

Usage:
    from tests.strategies import known_locales, span_shapes
    from tests.strategies.spans import flatten_shapes, expected_nodes

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - user_locale_lists, span_shape_lists
"""

from .locales import (
    EXTENSION_SUFFIXES,
    KNOWN_LOCALES,
    UNKNOWN_LOCALES,
    known_locales,
    supported_locale_lists,
    user_locale_lists,
)
from .spans import (
    COMPOSITE_TYPES,
    TAG_NAMES,
    count_value_leaves,
    count_value_spans,
    expected_nodes,
    flatten_shapes,
    node_shapes,
    span_shape_lists,
    span_shapes,
)

__all__ = [
    "COMPOSITE_TYPES",
    "EXTENSION_SUFFIXES",
    "KNOWN_LOCALES",
    "TAG_NAMES",
    "UNKNOWN_LOCALES",
    "count_value_leaves",
    "count_value_spans",
    "expected_nodes",
    "flatten_shapes",
    "known_locales",
    "node_shapes",
    "span_shape_lists",
    "span_shapes",
    "supported_locale_lists",
    "user_locale_lists",
]
