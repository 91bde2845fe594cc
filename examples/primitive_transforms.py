#!/usr/bin/env python3
"""
Primitive transforms example: visitors that rewrite strings and numbers.

This example demonstrates:
- Visitors that see primitive children, not just structured nodes
- Replacing a primitive with a different primitive
- Replacing a primitive with a structured node
- Using ``context.parent`` to decide based on the enclosing node
- Ordering visitors: the first replacement for a node wins
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from jsonrlib import Element, FunctionVisitor, create_node, render, transform


def uppercase_strings(node, context):
    if isinstance(node, str):
        return node.upper()
    return None


def format_numbers(node, context):
    # bool is an int subclass but is not a number here
    if isinstance(node, (int, float)) and not isinstance(node, bool):
        return f"Number: {node}"
    return None


def emphasize_clickable(node, context):
    """Wrap call-to-action text in a styled ``strong`` node."""
    if not isinstance(node, str) or "click" not in node.lower():
        return None
    return create_node("strong", {"style": {"cursor": "pointer", "color": "blue"}}, node)


def mark_button_labels(node, context):
    if isinstance(node, str) and context.parent is not None and context.parent.get("type") == "button":
        return f"[{node}]"
    return None


def build_tree():
    return create_node("div", {"className": "container"}, [
        "Hello, world!",
        123,
        create_node("span", children="This is a span"),
        "Click me",
        create_node("button", children="Submit"),
    ])


def print_element(element, indent=0):
    pad = "  " * indent
    if isinstance(element, Element):
        print(f"{pad}<{element.type} {element.props}>")
        for child in element.children:
            print_element(child, indent + 1)
    else:
        print(f"{pad}{element!r}")


async def main():
    tree = build_tree()

    result = await transform(tree, [
        # Specific rewrites first, the catch-all uppercase last
        FunctionVisitor(enter=mark_button_labels),
        FunctionVisitor(enter=emphasize_clickable),
        FunctionVisitor(enter=format_numbers),
        FunctionVisitor(enter=uppercase_strings),
    ])

    print("Original children:")
    for child in tree["children"]:
        print(f"  {child!r}")

    print("\nTransformed children:")
    for child in result["children"]:
        print(f"  {child!r}")

    print("\nRendered:")
    print_element(render(result))


if __name__ == "__main__":
    asyncio.run(main())
