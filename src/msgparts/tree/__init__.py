"""Span tree reconstruction package.

Submodules:
    nodes   - Element, Fragment, Placeholder, Substitute, ResolvedTag
    builder - SpanTreeBuilder and build_tree()
    visitor - NodeVisitor base class
    render  - text_content() and render_html()

Python 3.13+. Zero external dependencies.
"""

from .builder import SpanTreeBuilder, build_tree
from .nodes import Element, Fragment, Node, Override, Placeholder, ResolvedTag, Substitute
from .render import render_html, text_content
from .visitor import NodeVisitor

__all__ = [
    "Element",
    "Fragment",
    "Node",
    "NodeVisitor",
    "Override",
    "Placeholder",
    "ResolvedTag",
    "SpanTreeBuilder",
    "Substitute",
    "build_tree",
    "render_html",
    "text_content",
]
