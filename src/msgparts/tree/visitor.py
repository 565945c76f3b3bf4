"""Visitor pattern for node tree traversal.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name.
Literal string nodes dispatch to visit_str.

Python 3.13+.
"""

from collections.abc import Callable, Iterable
from typing import ClassVar

from msgparts.constants import MAX_DEPTH
from msgparts.core.depth_guard import DepthGuard

from .nodes import Element, Fragment, Node

__all__ = ["NodeVisitor"]


class NodeVisitor[T]:
    """Base visitor for traversing node trees.

    Dispatch table is built once per class definition via __init_subclass__.
    generic_visit() visits the children of Element and Fragment nodes with
    depth protection and returns their results as a list.

    Example:
        >>> class CountElements(NodeVisitor[int]):
        ...     def visit_Element(self, node: Element) -> int:
        ...         return 1 + sum(self.generic_visit(node))
        ...
        ...     def visit_str(self, node: str) -> int:
        ...         return 0
        ...
        ...     def visit_Placeholder(self, node: Placeholder) -> int:
        ...         return 0
    """

    __slots__ = ("_depth_guard",)

    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {
            name[6:]: name for name in dir(cls) if name.startswith("visit_")
        }

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with depth guard.

        Args:
            max_depth: Maximum traversal depth (default: MAX_DEPTH from constants)
        """
        self._depth_guard = DepthGuard(max_depth=max_depth if max_depth is not None else MAX_DEPTH)

    def visit(self, node: Node) -> T:
        """Visit a node, dispatching on its type name."""
        method_name = self._class_visit_methods.get(type(node).__name__)
        if method_name is None:
            msg = f"{type(self).__name__} has no visitor for {type(node).__name__}"
            raise TypeError(msg)
        method: Callable[[Node], T] = getattr(self, method_name)
        return method(node)

    def visit_all(self, nodes: Iterable[Node]) -> list[T]:
        """Visit a sequence of sibling nodes."""
        return [self.visit(node) for node in nodes]

    def generic_visit(self, node: Element | Fragment) -> list[T]:
        """Visit children with depth protection.

        Raises:
            DepthLimitExceededError: If traversal depth exceeds max_depth
        """
        with self._depth_guard:
            return self.visit_all(node.children)
