"""Lazy tree traversal for jsonrlib.

Traversers here invoke no visitors. They yield ``TraversalItem(node,
context)`` pairs in the requested order and let the consumer decide what to
do with each one, including calling ``item.context.skip_children()`` before
asking for the next item.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, FrozenSet, Iterator, List, NamedTuple, Optional, Tuple

from ..config import TraverseOptions, TraversalOrder, resolve_order
from ..core.adapter import ChildSlot, JsonTreeAdapter
from ..core.context import TransformContext, create_context
from ..core.node import NodeKind, classify, clone_tree


class TraversalItem(NamedTuple):
    """A visited node and its context."""
    node: Any
    context: TransformContext


class TreeTraverser(ABC):
    """Abstract base class for lazy traversal strategies.

    Traversers are independent of what the caller does with the nodes;
    they work through the JsonTreeAdapter and only decide the order.
    """

    order: TraversalOrder

    def __init__(self, adapter: Optional[JsonTreeAdapter] = None,
                 node_types: Optional[FrozenSet[str]] = None):
        """Initialize traverser.

        Args:
            adapter: Tree adapter (defaults to JsonTreeAdapter)
            node_types: If set, only structured nodes of these types are
                        yielded; primitives are never yielded. Filtered-out
                        nodes are still descended into.
        """
        self.adapter = adapter or JsonTreeAdapter()
        self.node_types = node_types

    @abstractmethod
    def traverse(self, root: Any) -> Iterator[TraversalItem]:
        """Traverse the tree starting from root.

        Args:
            root: Tree to walk

        Yields:
            TraversalItem for every (matching) node
        """
        pass

    def _should_yield(self, kind: NodeKind, node: Any) -> bool:
        if self.node_types is None:
            return True
        return kind is NodeKind.STRUCTURED and node['type'] in self.node_types


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order: parent before children.

    A consumer that calls ``skip_children()`` on the yielded context before
    resuming prevents descent into that node.
    """

    order = TraversalOrder.DEPTH_FIRST_PRE

    def traverse(self, root: Any) -> Iterator[TraversalItem]:
        for slot in self.adapter.root_slots([root]):
            yield from self._traverse_recursive(slot, 0)

    def _traverse_recursive(self, slot: ChildSlot, depth: int) -> Iterator[TraversalItem]:
        node = slot.node
        kind = classify(node)
        context = create_context(depth, slot.parent, slot.index)

        if self._should_yield(kind, node):
            yield TraversalItem(node, context)

        if kind is NodeKind.STRUCTURED and not context.should_skip_children:
            for child in self.adapter.get_children(node):
                yield from self._traverse_recursive(child, depth + 1)


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order: children before parent.

    Children have already been yielded by the time a parent is, so the
    skip latch has no effect on descent in this order.
    """

    order = TraversalOrder.DEPTH_FIRST_POST

    def traverse(self, root: Any) -> Iterator[TraversalItem]:
        for slot in self.adapter.root_slots([root]):
            yield from self._traverse_recursive(slot, 0)

    def _traverse_recursive(self, slot: ChildSlot, depth: int) -> Iterator[TraversalItem]:
        node = slot.node
        kind = classify(node)
        context = create_context(depth, slot.parent, slot.index)

        if kind is NodeKind.STRUCTURED and not context.should_skip_children:
            for child in self.adapter.get_children(node):
                yield from self._traverse_recursive(child, depth + 1)

        if self._should_yield(kind, node):
            yield TraversalItem(node, context)


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    Children are enqueued after their parent has been yielded, so the
    consumer's skip latch is honoured. Roots of a top-level array are
    walked one after another.
    """

    order = TraversalOrder.BREADTH_FIRST

    def traverse(self, root: Any) -> Iterator[TraversalItem]:
        for slot in self.adapter.root_slots([root]):
            yield from self._traverse_from(slot)

    def _traverse_from(self, root: ChildSlot) -> Iterator[TraversalItem]:
        # Queue stores (slot, depth) tuples
        queue: Deque[Tuple[ChildSlot, int]] = deque([(root, 0)])

        while queue:
            slot, depth = queue.popleft()
            node = slot.node
            kind = classify(node)
            context = create_context(depth, slot.parent, slot.index)

            if self._should_yield(kind, node):
                yield TraversalItem(node, context)

            if kind is NodeKind.STRUCTURED and not context.should_skip_children:
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


_TRAVERSERS = {
    TraversalOrder.DEPTH_FIRST_PRE: PreOrderTraverser,
    TraversalOrder.DEPTH_FIRST_POST: PostOrderTraverser,
    TraversalOrder.BREADTH_FIRST: BreadthFirstTraverser,
}


def create_traverser(order: Any = None, node_types: Optional[FrozenSet[str]] = None,
                     adapter: Optional[JsonTreeAdapter] = None) -> TreeTraverser:
    """Create the lazy traverser for an order.

    Raises:
        InvalidTraversalOrderError: If the order is unknown
    """
    return _TRAVERSERS[resolve_order(order)](adapter=adapter, node_types=node_types)


def traverse_tree(root: Any, options: Optional[TraverseOptions] = None, **overrides) -> Iterator[TraversalItem]:
    """Walk a tree lazily, yielding each node with its context.

    Each call starts a fresh walk. The returned iterator belongs to one
    consumer; it is not meant to be shared or resumed elsewhere.

    Args:
        root: Tree to walk
        options: TraverseOptions (order, node_types, clone)
        **overrides: Individual TraverseOptions fields

    Returns:
        Iterator of TraversalItem

    Raises:
        InvalidTraversalOrderError: If the order is unknown (raised on
                                    call, not on first iteration)
    """
    if options is None:
        options = TraverseOptions(**overrides)
    elif overrides:
        merged = {
            'order': options.order,
            'node_types': options.node_types,
            'clone': options.clone,
        }
        merged.update(overrides)
        options = TraverseOptions(**merged)

    traverser = create_traverser(options.order, options.node_types)
    tree = clone_tree(root) if options.clone else root
    return traverser.traverse(tree)


def collect_nodes(root: Any, node_types=None, order: Any = None) -> List[Any]:
    """Return every node of the given types in traversal order.

    Args:
        root: Tree to walk
        node_types: Type name or iterable of type names (None for all nodes)
        order: Traversal order

    Returns:
        List of matching nodes (the nodes themselves, not copies)
    """
    return [item.node for item in traverse_tree(root, order=order, node_types=node_types)]
