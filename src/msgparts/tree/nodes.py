"""Node types produced by the tree builder.

Nodes are rendering-framework agnostic. A presentation adapter turns them
into real UI elements; msgparts.tree.render provides text and HTML output.

Node variants:
    - str: literal text or formatted value
    - Element: markup tag (or its override) with attributes and children
    - Fragment: grouping node for a composite value
    - Placeholder: visible diagnostic for an unresolved value

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from msgparts.constants import FALLBACK_PLACEHOLDER

__all__ = [
    "Element",
    "Fragment",
    "Node",
    "Override",
    "Placeholder",
    "ResolvedTag",
    "Substitute",
]


def _freeze(mapping: Mapping[str, object]) -> Mapping[str, object]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class Element:
    """Markup tag reconstructed from an open/close span pair.

    Attributes:
        type: Override component, or the raw tag name when not overridden
        attributes: Merged attributes
        children: Child nodes, in span order
        key: Position-derived identifier, stable across renders
    """

    type: object
    attributes: Mapping[str, object] = field(default_factory=dict)
    children: tuple[Node, ...] = ()
    key: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _freeze(self.attributes))
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True, slots=True)
class Fragment:
    """Grouping node wrapping the sub-spans of a composite value.

    Attributes:
        children: Child nodes
        kind: Composite span type ("number", "datetime", ...)
        key: Position-derived identifier
    """

    children: tuple[Node, ...] = ()
    kind: str = ""
    key: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Diagnostic node for a value the formatting engine could not resolve.

    Example:
        >>> str(Placeholder("$count"))
        '[$count]'
    """

    source: str
    key: str = ""

    @property
    def text(self) -> str:
        """Visible rendering of the placeholder."""
        return FALLBACK_PLACEHOLDER.format(source=self.source)

    def __str__(self) -> str:
        return self.text


type Node = str | Element | Fragment | Placeholder


@dataclass(frozen=True, slots=True)
class Substitute:
    """Override that carries its own attributes.

    Attributes merge with the span's declared options; the span's options
    win on key collision.

    Example:
        >>> Substitute("a", {"href": "/help", "class": "link"})
    """

    component: object
    attributes: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _freeze(self.attributes))


# A raw component (tag-name string, class, callable) or a Substitute.
type Override = Substitute | object


@dataclass(frozen=True, slots=True)
class ResolvedTag:
    """Component and attributes resolved for one open-markup event."""

    component: object
    attributes: Mapping[str, object]

    @classmethod
    def resolve(
        cls,
        name: str,
        options: Mapping[str, object],
        overrides: Mapping[str, Override],
    ) -> ResolvedTag:
        """Resolve a tag name against the override map.

        Args:
            name: Markup tag name
            options: Attributes declared on the span
            overrides: Caller-supplied substitutes keyed by tag name

        Returns:
            ResolvedTag with merged attributes (span options win)
        """
        if name not in overrides:
            return cls(name, _freeze(options))
        override = overrides[name]
        if isinstance(override, Substitute):
            return cls(override.component, _freeze({**override.attributes, **options}))
        return cls(override, _freeze(options))
