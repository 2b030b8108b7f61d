"""Visitor pattern for ESTree program traversal.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeType after the ESTree `type` (visit_CallExpression)
rather than snake_case, so visitor code reads like the node types it handles.

Nodes are plain dicts carrying a `type` key; any other dict (such as a
regex descriptor) or scalar is data, not a node.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, ClassVar

from i18nscope.constants import MAX_PROGRAM_DEPTH
from i18nscope.diagnostics import DepthLimitExceededError, ErrorTemplate

from .program import Node

__all__ = ["ProgramVisitor", "is_node", "iter_children", "iter_nodes"]


def is_node(value: Any) -> bool:
    """Check whether value is an ESTree node dict."""
    return isinstance(value, dict) and isinstance(value.get("type"), str)


def iter_children(node: Node) -> Iterator[Node]:
    """Yield the direct child nodes of node in field order."""
    for key, value in node.items():
        if key in ("type", "range", "loc"):
            continue
        if isinstance(value, list):
            for item in value:
                if is_node(item):
                    yield item
        elif is_node(value):
            yield value


def iter_nodes(
    node: Node,
    node_type: str | None = None,
    *,
    max_depth: int = MAX_PROGRAM_DEPTH,
) -> Iterator[Node]:
    """Yield node and its descendants depth-first, parents before children.

    The walk keeps its own stack, so program nesting is bounded by max_depth
    rather than by the interpreter's recursion limit.

    Args:
        node: Root node (usually a Program)
        node_type: Only yield nodes of this ESTree type when given
        max_depth: Nesting limit

    Raises:
        DepthLimitExceededError: If nesting exceeds max_depth
    """
    stack: list[tuple[Node, int]] = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        if depth > max_depth:
            raise DepthLimitExceededError(ErrorTemplate.depth_exceeded(max_depth, "program"))
        if node_type is None or current.get("type") == node_type:
            yield current
        # Reversed so the first child is popped first
        children = list(iter_children(current))
        stack.extend((child, depth + 1) for child in reversed(children))


class ProgramVisitor:
    """Base visitor for traversing ESTree programs.

    Follows stdlib ast.NodeVisitor naming: override visit_NodeType methods to
    handle a node type. Unlike ast.NodeVisitor, visit() walks the whole tree
    itself (parents before children) and calls the handler of every node,
    so handlers never descend on their own. Nodes without a handler go to
    generic_visit(), which does nothing by default.

    Uses class-level dispatch table built once per subclass via
    __init_subclass__.

    Example:
        >>> class CountCallsVisitor(ProgramVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_CallExpression(self, node):
        ...         self.count += 1
        ...
        >>> visitor = CountCallsVisitor()
        >>> visitor.visit(program)
        >>> print(visitor.count)
    """

    # Class-level dispatch table (method names only, not bound methods)
    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name != "visit":
                # "visit_CallExpression" -> "CallExpression"
                cls._class_visit_methods[name[6:]] = name

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with nesting limit and dispatch cache.

        Subclasses MUST call super().__init__().

        Args:
            max_depth: Maximum traversal depth (default: MAX_PROGRAM_DEPTH)
        """
        self.max_depth = max_depth if max_depth is not None else MAX_PROGRAM_DEPTH
        self._instance_dispatch_cache: dict[str, Callable[[Node], None]] = {}

    def _handler(self, node_type: str) -> Callable[[Node], None]:
        method = self._instance_dispatch_cache.get(node_type)
        if method is None:
            method_name = self._class_visit_methods.get(node_type)
            method = getattr(self, method_name) if method_name else self.generic_visit
            self._instance_dispatch_cache[node_type] = method
        return method

    def visit(self, node: Node) -> None:
        """Walk node and its descendants, dispatching each on its ESTree type.

        Raises:
            DepthLimitExceededError: If nesting exceeds max_depth
        """
        for current in iter_nodes(node, max_depth=self.max_depth):
            self._handler(current.get("type", ""))(current)

    def generic_visit(self, node: Node) -> None:
        """Handle a node that has no visit_NodeType method."""
