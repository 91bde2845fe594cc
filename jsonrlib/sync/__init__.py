"""Synchronous, lazy traversal of jsonrlib trees.

These iterators never call visitors; they yield nodes with their context
and leave the work to the consumer.
"""

from .traverser import (
    TraversalItem,
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
    traverse_tree,
    collect_nodes,
)

__all__ = [
    'TraversalItem',
    'TreeTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'BreadthFirstTraverser',
    'create_traverser',
    'traverse_tree',
    'collect_nodes',
]
