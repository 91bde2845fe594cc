"""Async tree transform strategies.

Implements the eager "apply visitors and write back" traversal in three
orders. Every visitor hook is awaited before the next one starts, so a
transform is a single logical thread whose only suspension points are the
visitor calls themselves.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, List, Optional, Sequence, Tuple

from ..config import PrunePredicate, TraversalOrder, resolve_order
from ..core.adapter import ChildSlot, JsonTreeAdapter
from ..core.context import TransformContext, create_context
from ..core.node import NodeKind, classify
from ..core.visitor import run_enter, run_exit


class AsyncTransformTraverser(ABC):
    """Abstract base class for async transform traversers.

    A traverser walks a tree held in a one-element box, runs the visitors
    on every node (primitives included) and writes replacements back
    through the adapter's child slots.
    """

    order: TraversalOrder

    def __init__(
        self,
        visitors: Sequence[Any],
        adapter: Optional[JsonTreeAdapter] = None,
        prune: Optional[PrunePredicate] = None
    ):
        """Initialize traverser.

        Args:
            visitors: Visitors applied in list order
            adapter: Tree adapter (defaults to JsonTreeAdapter)
            prune: Optional predicate; True latches skip_children on a
                   structured node before its children are visited
        """
        self.visitors = list(visitors)
        self.adapter = adapter or JsonTreeAdapter()
        self.prune = prune

    @abstractmethod
    async def run(self, box: List[Any]) -> None:
        """Transform the tree held in ``box`` in place.

        Args:
            box: ``[root]``; a replaced root is written to ``box[0]``
        """
        pass

    def should_descend(self, kind: NodeKind, node: Any, context: TransformContext) -> bool:
        """Check if children of a visited node should be visited.

        Args:
            kind: Classification of the node
            node: The node
            context: The node's context (its skip latch may be set here)

        Returns:
            True if the node is structured and not skipped
        """
        if kind is not NodeKind.STRUCTURED:
            return False
        if self.prune is not None and not context.should_skip_children and self.prune(node, context):
            context.skip_children()
        return not context.should_skip_children


class AsyncPreOrderTraverser(AsyncTransformTraverser):
    """Depth-first, parent before children.

    enter(node) -> children left to right -> exit(node). A replacement from
    enter is final: the subtree is not visited and exit does not run.
    """

    order = TraversalOrder.DEPTH_FIRST_PRE

    async def run(self, box: List[Any]) -> None:
        for slot in self.adapter.root_slots(box):
            await self._visit(slot, 0)

    async def _visit(self, slot: ChildSlot, depth: int) -> None:
        node = slot.node
        kind = classify(node)
        context = create_context(depth, slot.parent, slot.index)

        result = await run_enter(self.visitors, node, context)
        if result.replaced:
            slot.replace(result.node)
            return

        if self.should_descend(kind, node, context):
            for child in self.adapter.get_children(node):
                await self._visit(child, depth + 1)

        result = await run_exit(self.visitors, node, context)
        if result.replaced:
            slot.replace(result.node)


class AsyncPostOrderTraverser(AsyncTransformTraverser):
    """Depth-first, children before parent.

    children -> enter(node) -> exit(node). Descent is decided before the
    node's own visitors run, so only ``prune`` can stop it.
    """

    order = TraversalOrder.DEPTH_FIRST_POST

    async def run(self, box: List[Any]) -> None:
        for slot in self.adapter.root_slots(box):
            await self._visit(slot, 0)

    async def _visit(self, slot: ChildSlot, depth: int) -> None:
        node = slot.node
        kind = classify(node)
        context = create_context(depth, slot.parent, slot.index)

        if self.should_descend(kind, node, context):
            for child in self.adapter.get_children(node):
                await self._visit(child, depth + 1)

        result = await run_enter(self.visitors, node, context)
        if result.replaced:
            slot.replace(result.node)
            return

        result = await run_exit(self.visitors, node, context)
        if result.replaced:
            slot.replace(result.node)


class AsyncBreadthFirstTraverser(AsyncTransformTraverser):
    """Level-order traversal.

    Visits all nodes at depth N before any node at depth N+1. Only enter
    hooks run; exit has no meaning without a way back up the tree. Roots of
    a top-level array are walked one after another.
    """

    order = TraversalOrder.BREADTH_FIRST

    async def run(self, box: List[Any]) -> None:
        for root in self.adapter.root_slots(box):
            await self._run_from(root)

    async def _run_from(self, root: ChildSlot) -> None:
        # Queue stores (slot, depth) tuples
        queue: Deque[Tuple[ChildSlot, int]] = deque([(root, 0)])

        while queue:
            slot, depth = queue.popleft()
            node = slot.node
            kind = classify(node)
            context = create_context(depth, slot.parent, slot.index)

            result = await run_enter(self.visitors, node, context)
            if result.replaced:
                slot.replace(result.node)
                continue

            if self.should_descend(kind, node, context):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


_TRAVERSERS = {
    TraversalOrder.DEPTH_FIRST_PRE: AsyncPreOrderTraverser,
    TraversalOrder.DEPTH_FIRST_POST: AsyncPostOrderTraverser,
    TraversalOrder.BREADTH_FIRST: AsyncBreadthFirstTraverser,
}


def create_traverser(
    order: Any,
    visitors: Sequence[Any],
    adapter: Optional[JsonTreeAdapter] = None,
    prune: Optional[PrunePredicate] = None
) -> AsyncTransformTraverser:
    """Create the traverser for an order.

    Args:
        order: TraversalOrder or its string name
        visitors: Visitors to apply
        adapter: Optional tree adapter
        prune: Optional pre-descent predicate

    Returns:
        Traverser instance

    Raises:
        InvalidTraversalOrderError: If the order is unknown
    """
    traverser_class = _TRAVERSERS[resolve_order(order)]
    return traverser_class(visitors, adapter=adapter, prune=prune)
