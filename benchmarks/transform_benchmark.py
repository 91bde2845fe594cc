#!/usr/bin/env python3
"""
Benchmark for jsonrlib transform and render throughput.

This benchmark:
1. Builds complete trees of increasing size
2. Runs each traversal order several times and takes the median
3. Compares the eager async transform with the lazy iterator
4. Measures rendering of the same trees
"""

import asyncio
import gc
import statistics
import sys
import time
from pathlib import Path
from typing import Callable, Dict

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from jsonrlib import CollectDiagnosticsPolicy, FunctionVisitor, RenderContext, render, transform, traverse_tree
from jsonrlib.testing import build_wide_tree, count_structured


class TransformBenchmark:
    """Median timings for one tree."""

    def __init__(self, tree, iterations: int = 5):
        self.tree = tree
        self.iterations = iterations

    def _measure(self, fn: Callable[[], None]) -> float:
        times = []
        for _ in range(self.iterations):
            gc.collect()
            start = time.perf_counter()
            fn()
            times.append(time.perf_counter() - start)
        return statistics.median(times)

    def benchmark_transform(self, order: str, clone: bool = True) -> float:
        visitor = FunctionVisitor(enter=lambda node, context: None)
        return self._measure(lambda: asyncio.run(transform(self.tree, [visitor], order=order, clone=clone)))

    def benchmark_lazy(self, order: str) -> float:
        def walk():
            for _ in traverse_tree(self.tree, order=order):
                pass
        return self._measure(walk)

    def benchmark_render(self) -> float:
        context = RenderContext(diagnostics=CollectDiagnosticsPolicy())
        return self._measure(lambda: render(self.tree, context=context))

    def run(self) -> Dict[str, float]:
        results = {}
        for order in ("dfs_pre", "dfs_post", "bfs"):
            results[f"transform {order}"] = self.benchmark_transform(order)
            results[f"transform {order} (in place)"] = self.benchmark_transform(order, clone=False)
            results[f"lazy {order}"] = self.benchmark_lazy(order)
        results["render"] = self.benchmark_render()
        return results


def main():
    sizes = [(3, 5), (5, 5), (6, 5)]
    for depth, breadth in sizes:
        tree = build_wide_tree(depth, breadth)
        nodes = count_structured(tree)
        print(f"\nTree depth={depth} breadth={breadth} ({nodes:,} structured nodes)")
        print("-" * 60)
        for name, seconds in TransformBenchmark(tree).run().items():
            rate = nodes / seconds if seconds else float("inf")
            print(f"  {name:<32} {seconds * 1000:8.2f} ms  {rate:12,.0f} nodes/s")


if __name__ == "__main__":
    main()
