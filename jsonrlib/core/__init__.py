"""Core abstractions for jsonrlib.

This module defines the node model, the per-node traversal context, the
visitor protocol and the tree adapter shared by the async transform engine
and the lazy traversal iterators.
"""

from .node import (
    ABSENT,
    FRAGMENT,
    PORTAL,
    NodeKind,
    classify,
    clone_tree,
    create_group,
    create_node,
    create_redirect,
    is_array,
    is_primitive,
    is_structured,
)
from .context import TransformContext, create_context
from .visitor import (
    NO_CHANGE,
    FunctionVisitor,
    Replace,
    TransformVisitor,
    VisitResult,
    as_result,
    run_enter,
    run_exit,
)
from .adapter import ChildSlot, JsonTreeAdapter

__all__ = [
    # Node model
    'ABSENT',
    'FRAGMENT',
    'PORTAL',
    'NodeKind',
    'classify',
    'clone_tree',
    'create_group',
    'create_node',
    'create_redirect',
    'is_array',
    'is_primitive',
    'is_structured',
    # Context
    'TransformContext',
    'create_context',
    # Visitors
    'NO_CHANGE',
    'FunctionVisitor',
    'Replace',
    'TransformVisitor',
    'VisitResult',
    'as_result',
    'run_enter',
    'run_exit',
    # Adapter
    'ChildSlot',
    'JsonTreeAdapter',
]
