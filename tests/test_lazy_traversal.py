"""
Tests for the lazy, visitor-free traversal iterators.
"""

import pytest

from jsonrlib import (
    InvalidTraversalOrderError,
    TraverseOptions,
    TraversalOrder,
    collect_nodes,
    create_node,
    traverse_tree,
)
from jsonrlib.sync import BreadthFirstTraverser, PostOrderTraverser, PreOrderTraverser, create_traverser
from jsonrlib.testing import sample_tree


def labels(items):
    return [item.node["type"] if isinstance(item.node, dict) else repr(item.node) for item in items]


class TestLazyOrders:
    """Lazy iterators yield the same order as the eager strategies."""

    def test_pre_order(self):
        assert labels(traverse_tree(sample_tree())) == ["root", "a", "b", "c"]

    def test_post_order(self):
        assert labels(traverse_tree(sample_tree(), order="dfs_post")) == ["a", "c", "b", "root"]

    def test_breadth_first(self):
        tree = create_node("root", children=[
            create_node("a", children=[create_node("a1")]),
            create_node("b", children=[create_node("b1")]),
        ])
        assert labels(traverse_tree(tree, order=TraversalOrder.BREADTH_FIRST)) == [
            "root", "a", "b", "a1", "b1"
        ]

    def test_items_unpack_into_node_and_context(self):
        depths = {node["type"]: context.depth for node, context in traverse_tree(sample_tree())}
        assert depths == {"root": 0, "a": 1, "b": 1, "c": 2}

    def test_primitives_are_yielded(self):
        tree = create_node("p", children=["hi", create_node("b", children=2)])
        assert labels(traverse_tree(tree)) == ["p", "'hi'", "b", "2"]

    def test_primitive_root(self):
        items = list(traverse_tree("alone"))
        assert len(items) == 1
        assert items[0].node == "alone"
        assert items[0].context.is_root

    def test_array_root(self):
        items = list(traverse_tree(["x", create_node("span")]))
        assert [(labels([i])[0], i.context.index) for i in items] == [("'x'", 0), ("span", 0)]
        assert all(i.context.is_root for i in items)

    def test_array_root_breadth_first_walks_each_root_in_turn(self):
        tree = [
            create_node("a", children=[create_node("a1")]),
            create_node("b", children=[create_node("b1")]),
        ]
        assert labels(traverse_tree(tree, order="bfs")) == ["a", "a1", "b", "b1"]

    @pytest.mark.parametrize("order,expected", [
        ("dfs_pre", PreOrderTraverser),
        ("depthFirstPost", PostOrderTraverser),
        ("bfs", BreadthFirstTraverser),
    ])
    def test_create_traverser(self, order, expected):
        assert isinstance(create_traverser(order), expected)


class TestLazyControl:

    def test_invalid_order_raises_on_call(self):
        with pytest.raises(InvalidTraversalOrderError):
            traverse_tree(sample_tree(), order="random")

    def test_iterator_is_lazy(self):
        iterator = traverse_tree(sample_tree())
        first = next(iterator)
        assert first.node["type"] == "root"
        assert first.context.depth == 0

    def test_consumer_can_stop_early(self):
        seen = []
        for node, _ in traverse_tree(sample_tree()):
            seen.append(node["type"])
            if node["type"] == "a":
                break
        assert seen == ["root", "a"]

    def test_skip_children_in_pre_order(self):
        seen = []
        for node, context in traverse_tree(sample_tree()):
            seen.append(node["type"])
            if node["type"] == "b":
                context.skip_children()
        assert seen == ["root", "a", "b"]

    def test_skip_children_breadth_first(self):
        seen = []
        for node, context in traverse_tree(sample_tree(), order="bfs"):
            seen.append(node["type"])
            if node["type"] == "root":
                context.skip_children()
        assert seen == ["root"]

    def test_each_call_is_a_fresh_walk(self):
        tree = sample_tree()
        assert labels(traverse_tree(tree)) == labels(traverse_tree(tree))

    def test_nodes_are_the_callers_objects(self):
        tree = sample_tree()
        first = next(traverse_tree(tree))
        assert first.node is tree

    def test_clone_option_yields_copies(self):
        tree = sample_tree()
        first = next(traverse_tree(tree, clone=True))
        assert first.node == tree
        assert first.node is not tree


class TestNodeTypeFilter:

    def test_filter_by_type(self):
        tree = create_node("form", children=[
            create_node("button", {"id": "ok"}),
            create_node("div", children=[create_node("button", {"id": "cancel"}), "text"]),
        ])
        buttons = collect_nodes(tree, node_types="button")
        assert [b["props"]["id"] for b in buttons] == ["ok", "cancel"]

    def test_filter_descends_through_unmatched_nodes(self):
        assert [n["type"] for n in collect_nodes(sample_tree(), {"c", "a"})] == ["a", "c"]

    def test_filter_with_post_order(self):
        nodes = collect_nodes(sample_tree(), ["root", "b"], order="dfs_post")
        assert [n["type"] for n in nodes] == ["b", "root"]

    def test_filter_never_yields_primitives(self):
        tree = create_node("p", children=["button"])
        assert collect_nodes(tree, "button") == []

    def test_options_object_with_override(self):
        options = TraverseOptions(order="bfs", node_types={"a", "c"})
        items = traverse_tree(sample_tree(), options, order="dfs_post")
        assert labels(items) == ["a", "c"]

    def test_collect_all_nodes(self):
        assert len(collect_nodes(sample_tree())) == 4
