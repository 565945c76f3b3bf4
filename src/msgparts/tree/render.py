"""Plain-text and HTML rendering of node trees.

Two reference renderers for callers without a UI framework (emails, logs,
server-side templates) and for tests:
    - text_content(): visible text only, like DOM textContent
    - render_html(): escaped HTML for string-typed element types

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Iterable
from html import escape

from .nodes import Element, Fragment, Node, Placeholder
from .visitor import NodeVisitor

__all__ = ["HtmlRenderer", "TextRenderer", "render_html", "text_content"]

_ATTRIBUTE_NAME: re.Pattern[str] = re.compile(r"[A-Za-z_:][-A-Za-z0-9_:.]*")


class TextRenderer(NodeVisitor[str]):
    """Concatenate the visible text of a node tree."""

    __slots__ = ()

    def visit_str(self, node: str) -> str:
        return node

    def visit_Element(self, node: Element) -> str:
        return "".join(self.generic_visit(node))

    def visit_Fragment(self, node: Fragment) -> str:
        return "".join(self.generic_visit(node))

    def visit_Placeholder(self, node: Placeholder) -> str:
        return node.text


class HtmlRenderer(NodeVisitor[str]):
    """Render a node tree as an HTML string.

    Element types must be tag-name strings; component overrides need a
    framework adapter and raise TypeError here. Attribute values of None
    or False are omitted, True renders as a bare attribute. Attribute names
    must be XML-style names; anything else raises TypeError.
    """

    __slots__ = ()

    def visit_str(self, node: str) -> str:
        return escape(node, quote=False)

    def visit_Element(self, node: Element) -> str:
        if not isinstance(node.type, str):
            msg = f"Cannot render component {node.type!r} as HTML"
            raise TypeError(msg)
        attributes = "".join(
            self._attribute(name, value) for name, value in node.attributes.items()
        )
        inner = "".join(self.generic_visit(node))
        return f"<{node.type}{attributes}>{inner}</{node.type}>"

    def visit_Fragment(self, node: Fragment) -> str:
        return "".join(self.generic_visit(node))

    def visit_Placeholder(self, node: Placeholder) -> str:
        return escape(node.text, quote=False)

    @staticmethod
    def _attribute(name: str, value: object) -> str:
        if not isinstance(name, str) or _ATTRIBUTE_NAME.fullmatch(name) is None:
            msg = f"Invalid HTML attribute name {name!r}"
            raise TypeError(msg)
        if value is None or value is False:
            return ""
        if value is True:
            return f" {name}"
        return f' {name}="{escape(str(value))}"'


def text_content(nodes: Iterable[Node]) -> str:
    """Return the visible text of ``nodes``.

    Example:
        >>> text_content(["Hello ", Element("b", children=("world",)), "!"])
        'Hello world!'
    """
    return "".join(TextRenderer().visit_all(nodes))


def render_html(nodes: Iterable[Node]) -> str:
    """Render ``nodes`` as escaped HTML.

    Raises:
        TypeError: If an element type is not a tag-name string

    Example:
        >>> render_html(["a < b ", Element("em", {"class": "x"}, ("c",))])
        'a &lt; b <em class="x">c</em>'
    """
    return "".join(HtmlRenderer().visit_all(nodes))
