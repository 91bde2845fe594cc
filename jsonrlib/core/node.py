"""JSON tree node model.

A node is a plain JSON-compatible value. There is no wrapper class: trees
produced by a compiler or by ``json.loads`` are used as-is. This module
classifies values into the three node kinds and builds new nodes.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..errors import InvalidNodeError

FRAGMENT = 'Fragment'
PORTAL = 'Portal'

PRIMITIVE_TYPES = (str, int, float, bool, type(None))
ARRAY_TYPES = (list,)


class NodeKind(Enum):
    """The three shapes a value in the tree can take."""
    PRIMITIVE = "primitive"     # str, number, bool or None
    ARRAY = "array"             # Ordered siblings, flattened on render
    STRUCTURED = "structured"   # {"type": ..., "props": ..., "children": ...}


class _Absent:
    """Marker for an argument that was not supplied.

    ``None`` is a valid child value, so it cannot mean "omitted".
    """

    def __repr__(self) -> str:
        return 'ABSENT'

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()

# Convenience alias for annotations; values stay plain Python objects
Node = Union[str, int, float, bool, None, Dict[str, Any], List[Any]]


def is_primitive(node: Any) -> bool:
    """Check if a value is a primitive node (string, number, bool or None)."""
    return isinstance(node, PRIMITIVE_TYPES)


def is_array(node: Any) -> bool:
    """Check if a value is an array of nodes."""
    return isinstance(node, ARRAY_TYPES)


def is_structured(node: Any) -> bool:
    """Check if a value is a structured node with a non-empty string type."""
    return isinstance(node, dict) and isinstance(node.get('type'), str) and bool(node['type'])


def classify(node: Any) -> NodeKind:
    """Classify a value into its node kind.

    Args:
        node: Any value found in a tree

    Returns:
        The NodeKind of the value

    Raises:
        InvalidNodeError: If the value is not a valid node
    """
    if is_primitive(node):
        return NodeKind.PRIMITIVE
    if is_array(node):
        return NodeKind.ARRAY
    if is_structured(node):
        return NodeKind.STRUCTURED
    if isinstance(node, dict):
        raise InvalidNodeError(f"Structured node requires a non-empty string 'type': {node!r}")
    raise InvalidNodeError(f"Not a tree node: {type(node).__name__}")


def create_node(
    type: str,
    props: Optional[Dict[str, Any]] = None,
    children: Any = ABSENT,
    key: Optional[str] = None,
    id: Optional[str] = None
) -> Dict[str, Any]:
    """Create a structured node.

    Optional fields that are not supplied are left out of the result
    entirely, so nodes compare equal to their JSON literal counterparts.

    Args:
        type: Registry key or generic tag name
        props: Property map
        children: A single node or a list of nodes
        key: Identity key for the rendered element
        id: Fallback identity key

    Returns:
        New structured node

    Raises:
        InvalidNodeError: If type is not a non-empty string
    """
    if not isinstance(type, str) or not type:
        raise InvalidNodeError(f"Node type must be a non-empty string, got {type!r}")

    node: Dict[str, Any] = {'type': type}
    if props is not None:
        node['props'] = props
    if children is not ABSENT:
        node['children'] = children
    if key:
        node['key'] = key
    if id:
        node['id'] = id
    return node


def create_group(children: Any, key: Optional[str] = None) -> Dict[str, Any]:
    """Create a Fragment node that renders its children without a wrapper."""
    return create_node(FRAGMENT, {}, children, key)


def create_redirect(target: Any, children: Any, key: Optional[str] = None) -> Dict[str, Any]:
    """Create a Portal node that renders its children into another container.

    Args:
        target: Container selector string or a direct container reference
        children: Content to render into the target
        key: Identity key
    """
    return create_node(PORTAL, {'container': target}, children, key)


def clone_tree(node: Any) -> Any:
    """Return a structural duplicate of a tree.

    Every dict and list is copied recursively. Any other value (primitives,
    event handlers bound by an earlier pass, direct portal targets) is
    shared with the input, never copied.
    """
    if isinstance(node, dict):
        return {key: clone_tree(value) for key, value in node.items()}
    if isinstance(node, list):
        return [clone_tree(child) for child in node]
    return node
