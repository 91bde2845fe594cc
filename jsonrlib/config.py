"""Configuration system for jsonrlib.

This module defines how callers specify transform and traversal
requirements: which order to walk the tree in, whether to work on a copy,
and which nodes to prune or report.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, FrozenSet, Iterable, List, Optional, Union

from .errors import InvalidTraversalOrderError


class TraversalOrder(Enum):
    """How to walk the tree.

    Values match the short strategy names; the camel-case names used in
    JSON configuration files are accepted as aliases by ``resolve_order``.
    """
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    BREADTH_FIRST = "bfs"           # Level by level


_ORDER_ALIASES = {
    "depthFirstPre": TraversalOrder.DEPTH_FIRST_PRE,
    "depthFirstPost": TraversalOrder.DEPTH_FIRST_POST,
    "breadthFirst": TraversalOrder.BREADTH_FIRST,
}


def resolve_order(order: Union[TraversalOrder, str, None]) -> TraversalOrder:
    """Normalize an order option to a ``TraversalOrder``.

    Args:
        order: Enum member, strategy name, camel-case alias, or None for
               the default (pre-order depth-first)

    Returns:
        The matching TraversalOrder

    Raises:
        InvalidTraversalOrderError: If the value names no known order
    """
    if order is None:
        return TraversalOrder.DEPTH_FIRST_PRE
    if isinstance(order, TraversalOrder):
        return order
    if isinstance(order, str):
        if order in _ORDER_ALIASES:
            return _ORDER_ALIASES[order]
        try:
            return TraversalOrder(order)
        except ValueError:
            pass
    raise InvalidTraversalOrderError(order)


# prune(node, context) -> True to latch skip_children before descent
PrunePredicate = Callable[[Any, Any], bool]


@dataclass
class TransformOptions:
    """Options for ``jsonrlib.aio.transform``."""

    order: Union[TraversalOrder, str] = TraversalOrder.DEPTH_FIRST_PRE
    clone: bool = True                          # Work on a structural copy of the input
    prune: Optional[PrunePredicate] = None      # Checked before descending into a node

    @classmethod
    def in_place(cls, order: Union[TraversalOrder, str] = TraversalOrder.DEPTH_FIRST_PRE) -> 'TransformOptions':
        """Create options that mutate the caller's tree instead of a copy.

        The caller must not read or modify the tree while the transform runs.
        """
        return cls(order=order, clone=False)

    @classmethod
    def bottom_up(cls, prune: Optional[PrunePredicate] = None) -> 'TransformOptions':
        """Create options for post-order (children first) transforms."""
        return cls(order=TraversalOrder.DEPTH_FIRST_POST, prune=prune)

    @property
    def traversal_order(self) -> TraversalOrder:
        return resolve_order(self.order)

    def validate(self) -> List[str]:
        """Validate options for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        try:
            resolve_order(self.order)
        except InvalidTraversalOrderError as e:
            errors.append(str(e))
        if self.prune is not None and not callable(self.prune):
            errors.append("prune must be callable")
        return errors


@dataclass
class TraverseOptions:
    """Options for the lazy ``jsonrlib.sync.traverse_tree`` iterator."""

    order: Union[TraversalOrder, str] = TraversalOrder.DEPTH_FIRST_PRE
    node_types: Optional[FrozenSet[str]] = None  # Only yield structured nodes of these types
    clone: bool = False

    def __post_init__(self):
        if self.node_types is not None and not isinstance(self.node_types, frozenset):
            self.node_types = _as_type_set(self.node_types)

    @property
    def traversal_order(self) -> TraversalOrder:
        return resolve_order(self.order)

    def validate(self) -> List[str]:
        """Validate options for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        try:
            resolve_order(self.order)
        except InvalidTraversalOrderError as e:
            errors.append(str(e))
        if self.node_types is not None:
            if any(not isinstance(t, str) or not t for t in self.node_types):
                errors.append("node_types must contain non-empty strings")
        return errors


def _as_type_set(node_types: Iterable[str]) -> FrozenSet[str]:
    # A bare string is one type name, not a set of characters
    if isinstance(node_types, str):
        return frozenset([node_types])
    return frozenset(node_types)
