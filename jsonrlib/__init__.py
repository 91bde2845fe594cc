"""jsonrlib - JSON UI tree transformation and rendering.

jsonrlib turns a declarative, JSON-shaped description of a UI tree into
host framework elements, with a pluggable async transformation stage in
between:

━━━━━━━━━━━━━━━━━━━━━━━━━━
Transform (async visitors):
    from jsonrlib import transform
    tree = await transform(tree, [visitor], order='dfs_post')

Walk lazily (no visitors):
    from jsonrlib import traverse_tree
    for node, context in traverse_tree(tree, node_types={'button'}): ...

Render:
    from jsonrlib import render, create_registry, RenderContext
    element = render(tree, create_registry(), RenderContext(event_handlers=...))
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .errors import DiagnosticError, InvalidNodeError, InvalidTraversalOrderError, JsonrError
from .config import TransformOptions, TraverseOptions, TraversalOrder
from .diagnostics import (
    CallbackPolicy,
    CollectDiagnosticsPolicy,
    Diagnostic,
    DiagnosticKind,
    DiagnosticPolicy,
    FailFastPolicy,
    ThresholdPolicy,
    WarnPolicy,
)
from .core import (
    FRAGMENT,
    PORTAL,
    NO_CHANGE,
    FunctionVisitor,
    NodeKind,
    Replace,
    TransformContext,
    TransformVisitor,
    classify,
    clone_tree,
    create_group,
    create_node,
    create_redirect,
    is_array,
    is_primitive,
    is_structured,
)
from .aio import transform
from .sync import TraversalItem, collect_nodes, traverse_tree
from .rendering import (
    ComponentRegistry,
    DefaultRenderHost,
    Element,
    PortalElement,
    RenderContext,
    RenderHost,
    Renderer,
    create_registry,
    render,
)
from .plugins import EventHandlerPlugin, create_event_handler_plugin

__all__ = [
    "__version__",
    # Errors
    "JsonrError",
    "InvalidTraversalOrderError",
    "InvalidNodeError",
    "DiagnosticError",
    # Configuration
    "TransformOptions",
    "TraverseOptions",
    "TraversalOrder",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticPolicy",
    "WarnPolicy",
    "CollectDiagnosticsPolicy",
    "FailFastPolicy",
    "ThresholdPolicy",
    "CallbackPolicy",
    # Node model
    "FRAGMENT",
    "PORTAL",
    "NodeKind",
    "classify",
    "clone_tree",
    "create_node",
    "create_group",
    "create_redirect",
    "is_array",
    "is_primitive",
    "is_structured",
    # Visitors
    "NO_CHANGE",
    "Replace",
    "TransformContext",
    "TransformVisitor",
    "FunctionVisitor",
    # Transform and traversal
    "transform",
    "traverse_tree",
    "collect_nodes",
    "TraversalItem",
    # Rendering
    "ComponentRegistry",
    "create_registry",
    "RenderHost",
    "DefaultRenderHost",
    "Element",
    "PortalElement",
    "RenderContext",
    "Renderer",
    "render",
    # Plugins
    "EventHandlerPlugin",
    "create_event_handler_plugin",
]
