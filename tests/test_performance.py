"""
Performance tests on large generated trees.

These are marked slow and excluded from the default run_tests.py run.
"""

import time

import pytest

from jsonrlib import collect_nodes, render, transform, RenderContext, CollectDiagnosticsPolicy
from jsonrlib.testing import RecordingVisitor, build_wide_tree, count_structured


@pytest.mark.slow
@pytest.mark.asyncio
@pytest.mark.parametrize("order", ["dfs_pre", "dfs_post", "bfs"])
async def test_transform_large_tree(order):
    """Every node of a ~20k node tree is visited exactly once."""
    tree = build_wide_tree(depth=6, breadth=5, leaf_text=None)
    expected = count_structured(tree)

    recorder = RecordingVisitor()
    start = time.perf_counter()
    await transform(tree, [recorder], order=order)
    elapsed = time.perf_counter() - start

    assert len(recorder.entered()) == expected
    print(f"\n{order}: {expected} nodes in {elapsed:.3f}s")


@pytest.mark.slow
def test_lazy_traversal_large_tree():
    tree = build_wide_tree(depth=6, breadth=5)
    nodes = collect_nodes(tree, node_types="div")
    assert len(nodes) == count_structured(tree)


@pytest.mark.slow
def test_render_large_tree():
    tree = build_wide_tree(depth=5, breadth=6)
    element = render(tree, context=RenderContext(diagnostics=CollectDiagnosticsPolicy()))
    assert len(element.children) == 6


@pytest.mark.slow
def test_build_wide_tree_size():
    assert count_structured(build_wide_tree(depth=3, breadth=4)) == (4 ** 4 - 1) // 3
