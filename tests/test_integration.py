"""
Integration tests: transform pipelines feeding the renderer.
"""

import json

import pytest

from jsonrlib import (
    CollectDiagnosticsPolicy,
    Element,
    FunctionVisitor,
    RenderContext,
    Replace,
    create_event_handler_plugin,
    create_node,
    create_registry,
    render,
    transform,
)


PAGE = """
{
  "type": "div",
  "props": {"className": "page"},
  "children": [
    {"type": "h1", "children": "Orders"},
    {"type": "ul", "children": [
      {"type": "li", "key": "1", "children": "Widget", "props": {"visible": true}},
      {"type": "li", "key": "2", "children": "Gadget", "props": {"visible": false}}
    ]},
    {"type": "Portal", "props": {"container": "#modal"}, "children": [
      {"type": "button", "props": {"onClick": "close"}, "children": "Close"}
    ]}
  ]
}
"""


def hide_invisible(node, context):
    """Conditional rendering: drop nodes whose ``visible`` prop is false."""
    if isinstance(node, dict) and node.get("props", {}).get("visible") is False:
        return Replace(None)
    return None


def strip_visible(node, context):
    if isinstance(node, dict):
        node.get("props", {}).pop("visible", None)


class TestPipeline:
    """Parse, transform, render."""

    @pytest.mark.asyncio
    async def test_conditional_rendering(self):
        tree = json.loads(PAGE)
        tree = await transform(tree, [FunctionVisitor(enter=hide_invisible, exit=strip_visible)])

        items = tree["children"][1]["children"]
        assert items[1] is None

        policy = CollectDiagnosticsPolicy()
        page = render(tree, context=RenderContext(diagnostics=policy))
        list_element = page.children[1]
        assert [li.key for li in list_element.children] == ["1"]
        assert list_element.children[0].props == {}

    @pytest.mark.asyncio
    async def test_handlers_bound_by_plugin_then_rendered(self):
        def close():
            pass

        policy = CollectDiagnosticsPolicy()
        tree = await transform(json.loads(PAGE), [create_event_handler_plugin({"close": close}, diagnostics=policy)])

        context = RenderContext(diagnostics=policy)
        context.host.add_container("modal", "MODAL")
        page = render(tree, context=context)

        portal = page.children[2]
        assert portal.container == "MODAL"
        assert portal.children[0].props["onClick"] is close
        assert len(policy) == 0

    @pytest.mark.asyncio
    async def test_registry_substitution(self):
        def Heading(props, children):
            return None

        tree = await transform(json.loads(PAGE), [
            FunctionVisitor(enter=lambda n, ctx: create_node("h2", children=n["children"])
                            if isinstance(n, dict) and n["type"] == "h1" else None),
        ])
        policy = CollectDiagnosticsPolicy()
        page = render(tree, create_registry({"h2": Heading}), RenderContext(diagnostics=policy))
        assert page.children[0] == Element(type=Heading, props={}, children=["Orders"])
        assert sorted(d.kind.value for d in policy.diagnostics) == [
            "unresolved_container",
            "unresolved_handler",
        ]

    @pytest.mark.asyncio
    async def test_transform_output_is_json_serializable(self):
        tree = json.loads(PAGE)
        upper = FunctionVisitor(enter=lambda n, ctx: n.upper() if isinstance(n, str) else None)
        result = await transform(tree, [upper], order="bfs")
        assert json.loads(json.dumps(result))["children"][0]["children"] == "ORDERS"
        assert tree["children"][0]["children"] == "Orders"

    @pytest.mark.asyncio
    async def test_primitive_rewrites_with_parent_awareness(self):
        def button_label(n, ctx):
            if isinstance(n, str) and ctx.parent is not None and ctx.parent["type"] == "button":
                return f"[{n}]"
            return None

        def emphasize(n, ctx):
            if isinstance(n, str) and "click" in n.lower():
                return create_node("strong", {"style": {"color": "blue"}}, n)
            return None

        def number(n, ctx):
            return f"Number: {n}" if isinstance(n, int) else None

        def upper(n, ctx):
            return n.upper() if isinstance(n, str) else None

        tree = create_node("div", {"className": "container"}, [
            "Hello, world!",
            123,
            create_node("span", children="This is a span"),
            "Click me",
            create_node("button", children="Submit"),
        ])
        result = await transform(tree, [FunctionVisitor(enter=f) for f in (button_label, emphasize, number, upper)])

        assert result["children"] == [
            "HELLO, WORLD!",
            "Number: 123",
            {"type": "span", "children": "THIS IS A SPAN"},
            {"type": "strong", "props": {"style": {"color": "blue"}}, "children": "Click me"},
            {"type": "button", "children": "[Submit]"},
        ]

        element = render(result)
        assert element.children[3] == Element(type="strong", props={"style": {"color": "blue"}}, children=["Click me"])
        assert element.children[4].children == ["[Submit]"]
