"""Test fixtures for jsonrlib consumers.

These helpers give test suites of projects that build on jsonrlib a stable
way to observe traversals and to build trees of a known shape, without
depending on engine internals.
"""

from typing import Any, Dict, List, Optional

from ..core.context import TransformContext
from ..core.node import create_node, is_structured
from ..core.visitor import TransformVisitor


class RecordingVisitor(TransformVisitor):
    """Visitor that records every hook call and changes nothing.

    Example:
        recorder = RecordingVisitor()
        await transform(tree, [recorder], order='dfs_post')
        assert recorder.events == ['enter-a', 'exit-a', 'enter-root', 'exit-root']

    Attributes:
        events: ``"<phase>-<label>"`` strings in call order
        contexts: ``(phase, label, depth, index)`` tuples in call order
    """

    def __init__(self, skip_types=(), record_primitives: bool = True):
        """Initialize the recorder.

        Args:
            skip_types: Structured node types whose children should be
                        skipped (``skip_children()`` is called in enter)
            record_primitives: Also record visits to primitive nodes
        """
        self.skip_types = set(skip_types)
        self.record_primitives = record_primitives
        self.events: List[str] = []
        self.contexts: List[tuple] = []

    def enter(self, node: Any, context: TransformContext) -> None:
        self._record('enter', node, context)
        if is_structured(node) and node['type'] in self.skip_types:
            context.skip_children()

    def exit(self, node: Any, context: TransformContext) -> None:
        self._record('exit', node, context)

    def entered(self) -> List[str]:
        """Labels of entered nodes, in order."""
        return [e.split('-', 1)[1] for e in self.events if e.startswith('enter-')]

    def exited(self) -> List[str]:
        """Labels of exited nodes, in order."""
        return [e.split('-', 1)[1] for e in self.events if e.startswith('exit-')]

    def _record(self, phase: str, node: Any, context: TransformContext) -> None:
        if not is_structured(node) and not self.record_primitives:
            return
        label = node['type'] if is_structured(node) else repr(node)
        self.events.append(f"{phase}-{label}")
        self.contexts.append((phase, label, context.depth, context.index))


def sample_tree() -> Dict[str, Any]:
    """Small tree used across the documentation and tests.

    Structure:
        root
        ├── a
        └── b
            └── c
    """
    return create_node('root', children=[
        create_node('a', children=[]),
        create_node('b', children=[create_node('c', children=[])]),
    ])


def build_wide_tree(depth: int, breadth: int, type_name: str = 'div',
                    leaf_text: Optional[str] = 'text') -> Dict[str, Any]:
    """Build a complete tree for benchmarks and stress tests.

    Args:
        depth: Levels below the root
        breadth: Children per structured node
        type_name: Type used for every structured node
        leaf_text: Primitive child of each leaf node (None for no child)

    Returns:
        Structured root node; it has ``(breadth ** (depth + 1) - 1) /
        (breadth - 1)`` structured nodes for breadth > 1
    """
    if depth <= 0:
        if leaf_text is None:
            return create_node(type_name)
        return create_node(type_name, children=leaf_text)
    return create_node(type_name, children=[
        build_wide_tree(depth - 1, breadth, type_name, leaf_text) for _ in range(breadth)
    ])


def count_structured(node: Any) -> int:
    """Count structured nodes in a tree (arrays are transparent)."""
    if isinstance(node, list):
        return sum(count_structured(child) for child in node)
    if not is_structured(node):
        return 0
    return 1 + count_structured(node.get('children'))
