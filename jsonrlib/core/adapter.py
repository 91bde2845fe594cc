"""Tree adapter for JSON node trees.

The adapter knows HOW to navigate a JSON tree: where a structured node keeps
its children, how arrays flatten into sibling positions, and how to write a
replacement back into the exact place a node came from. Traversers only
deal with ``ChildSlot`` objects and never index into dicts or lists
themselves.
"""

from typing import Any, Dict, Iterator, List, Optional

from .node import is_array, is_structured


class ChildSlot:
    """A node together with the position it occupies in the tree.

    Attributes:
        node: Current value at this position
        parent: Structured node owning the position (None at top level)
        index: Sibling index reported to visitors
    """

    __slots__ = ('node', 'parent', 'index', '_holder', '_key')

    def __init__(self, node: Any, parent: Optional[Dict[str, Any]], index: int, holder: Any, key: Any):
        self.node = node
        self.parent = parent
        self.index = index
        self._holder = holder
        self._key = key

    def replace(self, value: Any) -> None:
        """Write ``value`` into this position of the tree."""
        self._holder[self._key] = value
        self.node = value

    def __repr__(self) -> str:
        return f"ChildSlot(node={self.node!r}, index={self.index})"


class JsonTreeAdapter:
    """Navigates plain JSON node trees.

    Arrays are transparent: an array found at a position is expanded into
    one slot per element, each keeping the array's parent, and the element's
    own position as its index. Nested arrays expand recursively.
    """

    def root_slots(self, box: List[Any]) -> List[ChildSlot]:
        """Slots for the top level of a tree held in a one-element list.

        Keeping the root in a box lets a visitor replace the root itself.
        Elements of a top-level array are independent roots, so every slot
        returned here has index 0.

        Args:
            box: ``[root]``

        Returns:
            One slot for a node root, one per element for an array root
        """
        slots = list(self._expand(box[0], None, 0, box, 0))
        for slot in slots:
            slot.index = 0
        return slots

    def get_children(self, node: Any) -> List[ChildSlot]:
        """Slots for the children of a node, in document order.

        The list is materialized up front so a visitor replacing a child
        does not disturb the iteration over its siblings.

        Args:
            node: Any tree value; only structured nodes have children

        Returns:
            Child slots (empty for primitives and childless nodes)
        """
        if not is_structured(node):
            return []
        children = node.get('children')
        if children is None:
            return []
        return list(self._expand(children, node, 0, node, 'children'))

    def _expand(self, value: Any, parent: Optional[Dict[str, Any]], index: int,
                holder: Any, key: Any) -> Iterator[ChildSlot]:
        if is_array(value):
            for i, element in enumerate(value):
                yield from self._expand(element, parent, i, value, i)
        else:
            yield ChildSlot(value, parent, index, holder, key)
