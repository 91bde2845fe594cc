#!/usr/bin/env python3
"""
Basic example: render a JSON UI description into elements.

This example demonstrates:
- Building a tree from a JSON document
- Resolving types through a component registry
- Binding string event handlers at render time
- Rendering into a portal container
"""

import json
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from jsonrlib import (
    CollectDiagnosticsPolicy,
    DefaultRenderHost,
    Element,
    PortalElement,
    RenderContext,
    create_registry,
    render,
)


DOCUMENT = """
{
  "type": "div",
  "props": {"className": "app"},
  "children": [
    {"type": "Card", "props": {"title": "Inbox"}, "children": [
      {"type": "p", "children": "3 unread messages"},
      {"type": "button", "props": {"onClick": "openInbox"}, "children": "Open"}
    ]},
    {"type": "Portal", "props": {"container": "#toast"}, "children": "Saved"},
    {"type": "button", "props": {"onClick": "logout"}, "children": "Log out"}
  ]
}
"""


def Card(props, children):
    """Stand-in for a framework component."""
    return None


def print_element(element, indent=0):
    pad = "  " * indent
    if isinstance(element, PortalElement):
        print(f"{pad}<portal into={element.container!r}>")
        for child in element.children:
            print_element(child, indent + 1)
    elif isinstance(element, Element):
        name = element.type if isinstance(element.type, str) else element.type.__name__
        props = {k: (v.__name__ if callable(v) else v) for k, v in element.props.items()}
        print(f"{pad}<{name} {props}>")
        for child in element.children:
            print_element(child, indent + 1)
    else:
        print(f"{pad}{element!r}")


def main():
    """Render the document and list what could not be resolved."""
    tree = json.loads(DOCUMENT)

    def open_inbox():
        print("opening inbox")

    diagnostics = CollectDiagnosticsPolicy()
    context = RenderContext(
        event_handlers={"openInbox": open_inbox},
        host=DefaultRenderHost(containers={"toast": "TOAST_ROOT"}),
        diagnostics=diagnostics,
    )

    element = render(tree, create_registry({"Card": Card}), context)
    print_element(element)

    print(f"\nDiagnostics: {len(diagnostics)}")
    for diagnostic in diagnostics.diagnostics:
        print(f"  [{diagnostic.kind.value}] {diagnostic.message}")


if __name__ == "__main__":
    main()
