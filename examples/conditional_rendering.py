#!/usr/bin/env python3
"""
Transform pipeline example: conditional rendering and handler binding.

This example demonstrates:
- Async visitors that remove nodes based on a condition
- Post-order transforms that rewrite parents after their children
- The event handler plugin
- Lazy traversal to inspect the result before rendering
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from jsonrlib import (
    FunctionVisitor,
    RenderContext,
    Replace,
    TransformOptions,
    TransformVisitor,
    create_event_handler_plugin,
    create_node,
    render,
    transform,
    traverse_tree,
)


class FeatureFlagVisitor(TransformVisitor):
    """Drops nodes whose ``feature`` prop names a disabled flag."""

    def __init__(self, flags):
        self.flags = flags

    async def enter(self, node, context):
        # A real implementation would fetch flags from a service here
        await asyncio.sleep(0)
        if isinstance(node, dict):
            feature = node.get("props", {}).get("feature")
            if feature is not None and not self.flags.get(feature, False):
                return Replace(None)
        return None


def count_items(node, context):
    """Post-order: children are final, so the parent can summarize them."""
    if isinstance(node, dict) and node["type"] == "ul":
        items = [child for child in node.get("children", []) if child is not None]
        node.setdefault("props", {})["data-count"] = len(items)


def build_page():
    return create_node("main", children=[
        create_node("ul", children=[
            create_node("li", {"key": "a"}, "Dashboard"),
            create_node("li", {"key": "b", "feature": "reports"}, "Reports"),
            create_node("li", {"key": "c", "feature": "billing"}, "Billing"),
        ]),
        create_node("button", {"onClick": "refresh"}, "Refresh"),
    ])


async def main():
    page = build_page()

    page = await transform(page, [
        FeatureFlagVisitor({"billing": True}),
        create_event_handler_plugin({"refresh": lambda: print("refreshing")}),
    ])
    page = await transform(page, [FunctionVisitor(exit=count_items)], TransformOptions.bottom_up())

    print("Nodes after transform:")
    for node, context in traverse_tree(page):
        if isinstance(node, dict):
            print(f"  {'  ' * context.depth}{node['type']} {node.get('props', {})}")

    element = render(page, context=RenderContext())
    menu = element.children[0]
    print(f"\nRendered menu items: {[li.children[0] for li in menu.children]}")
    print(f"Menu count prop: {menu.props['data-count']}")


if __name__ == "__main__":
    asyncio.run(main())
