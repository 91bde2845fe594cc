"""Per-node visitation context.

A fresh ``TransformContext`` is built for every node a traversal visits and
dropped once that node (and its subtree, unless skipped) is done.
"""

from typing import Any, Dict, Optional


class TransformContext:
    """Where a node sits in the tree, plus the skip-children latch.

    Attributes:
        depth: Distance from the top level (root = 0)
        parent: Structured node owning the child list, None at top level.
                This is a back-reference only; the context never owns it.
        index: Position among siblings (0 for the root and single children)
        should_skip_children: True once ``skip_children()`` has been called

    Visitors may set additional attributes on a context to pass data from
    ``enter`` to ``exit`` for the same node.
    """

    def __init__(self, depth: int = 0, parent: Optional[Dict[str, Any]] = None, index: int = 0):
        self.depth = depth
        self.parent = parent
        self.index = index
        self._skip_children = False

    @property
    def should_skip_children(self) -> bool:
        return self._skip_children

    def skip_children(self) -> None:
        """Do not descend into this node's children.

        The latch is one-way; the node's exit visitors still run.
        """
        self._skip_children = True

    @property
    def is_root(self) -> bool:
        return self.parent is None and self.depth == 0

    def __repr__(self) -> str:
        parent_type = self.parent.get('type') if isinstance(self.parent, dict) else None
        return (f"TransformContext(depth={self.depth}, parent={parent_type!r}, "
                f"index={self.index}, skip={self._skip_children})")


def create_context(depth: int = 0, parent: Optional[Dict[str, Any]] = None, index: int = 0) -> TransformContext:
    """Build the context for one visit.

    Args:
        depth: Depth of the node being visited
        parent: Structured node whose children include the visited node
        index: Sibling position of the visited node

    Returns:
        New TransformContext with the skip latch cleared
    """
    return TransformContext(depth=depth, parent=parent, index=index)
