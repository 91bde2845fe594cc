"""Asynchronous transform engine of jsonrlib.

Visitors may be plain or ``async``; the engine awaits each hook before
calling the next, so ordering across visitors and nodes is deterministic.
"""

from .traverser import (
    AsyncTransformTraverser,
    AsyncPreOrderTraverser,
    AsyncPostOrderTraverser,
    AsyncBreadthFirstTraverser,
    create_traverser,
)
from .api import transform

__all__ = [
    # Traversers
    'AsyncTransformTraverser',
    'AsyncPreOrderTraverser',
    'AsyncPostOrderTraverser',
    'AsyncBreadthFirstTraverser',
    'create_traverser',
    # High-level API
    'transform',
]
