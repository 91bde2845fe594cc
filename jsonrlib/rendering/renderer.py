"""Renderer: JSON node tree to host elements.

Rendering is synchronous and read-only with respect to the tree and the
registry. Children are rendered before their parent is constructed, so
elements are built bottom-up while nodes are visited top-down.

Data-shape problems never abort a render. Each one is reported to the
context's diagnostic policy and the renderer falls back locally:

- unknown or blocked type: the node renders as nothing
- unresolved handler name: the literal string is passed through
- unresolved portal container: the host's default container is used
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..core.node import NodeKind, classify, is_array
from ..diagnostics import Diagnostic, DiagnosticKind, DiagnosticPolicy, as_policy
from ..errors import InvalidNodeError
from .host import DefaultRenderHost, RenderHost
from .registry import BUILTIN_COMPONENTS, FRAGMENT_COMPONENT, PORTAL_COMPONENT, create_registry


@dataclass
class RenderContext:
    """Everything a render needs besides the tree and the registry.

    Attributes:
        event_handlers: Handler name -> callable, for string handler props
        handler_prefix: Props whose name starts with this and whose value
                        is a string are treated as handler references
        host: Element construction backend
        diagnostics: DiagnosticPolicy or callable; None for a WarnPolicy
    """
    event_handlers: Mapping[str, Callable] = field(default_factory=dict)
    handler_prefix: str = 'on'
    host: RenderHost = field(default_factory=DefaultRenderHost)
    diagnostics: Any = None

    def __post_init__(self):
        self.diagnostics = as_policy(self.diagnostics)


class Renderer:
    """Converts JSON trees into host elements using a component registry.

    ``registry`` is usually a ``ComponentRegistry``, which resolves every
    string type. A plain mapping is used strictly: only its own keys and
    the built-in ``Fragment``/``Portal`` markers resolve, so anything else
    is reported as an unknown type.
    """

    def __init__(self, registry: Any = None, context: Optional[RenderContext] = None):
        self.registry = create_registry() if registry is None else registry
        self.context = context or RenderContext()

    @property
    def host(self) -> RenderHost:
        return self.context.host

    @property
    def diagnostics(self) -> DiagnosticPolicy:
        return self.context.diagnostics

    def render(self, node: Any) -> Any:
        """Render any node.

        Returns:
            None for nothing (None, True, False, unknown types), the value
            itself for strings and numbers, a list for arrays and
            fragments, otherwise the host's element
        """
        try:
            kind = classify(node)
        except InvalidNodeError as e:
            self._report(DiagnosticKind.UNKNOWN_TYPE, f"Cannot render node: {e}", node)
            return None

        if kind is NodeKind.PRIMITIVE:
            return self._render_primitive(node)
        if kind is NodeKind.ARRAY:
            return self.render_children(node)
        return self._render_structured(node)

    def render_children(self, children: Any) -> List[Any]:
        """Render a single child or a list of children into a flat list.

        Nested arrays and fragments are flattened; children that render
        as nothing are dropped.
        """
        rendered: List[Any] = []
        if children is None:
            return rendered
        for child in (children if is_array(children) else [children]):
            output = self.render(child)
            if output is None:
                continue
            if isinstance(output, list):
                rendered.extend(output)
            else:
                rendered.append(output)
        return rendered

    def resolve_component(self, type_name: str) -> Optional[Any]:
        """Resolve a type through the registry; None when it cannot be."""
        resolve = getattr(self.registry, 'resolve', None)
        if resolve is not None:
            return resolve(type_name)
        component = self.registry.get(type_name)
        if component is None:
            component = BUILTIN_COMPONENTS.get(type_name)
        return component

    def _render_primitive(self, node: Any) -> Any:
        # None and booleans render as nothing
        if node is None or isinstance(node, bool):
            return None
        return node

    def _render_structured(self, node: Dict[str, Any]) -> Any:
        type_name = node['type']
        component = self.resolve_component(type_name)
        if component is None:
            self._report(DiagnosticKind.UNKNOWN_TYPE, f"Unknown component type: {type_name}", node,
                         type=type_name)
            return None

        props = self.process_props(node.get('props') or {}, node)
        key = self._resolve_key(node, props)
        children = self.render_children(node.get('children'))

        if component is FRAGMENT_COMPONENT:
            return children
        if component is PORTAL_COMPONENT:
            container = self._resolve_container(props.get('container'), node)
            return self.host.create_portal(children, container, key)
        return self.host.create_element(component, props, children, key)

    def process_props(self, props: Mapping[str, Any], node: Any = None) -> Dict[str, Any]:
        """Copy props, replacing string handler references with callables.

        Args:
            props: The node's props (never modified)
            node: Node the props belong to, for diagnostics

        Returns:
            New props dict
        """
        prefix = self.context.handler_prefix
        handlers = self.context.event_handlers or {}
        result: Dict[str, Any] = {}

        for name, value in props.items():
            if name.startswith(prefix) and isinstance(value, str):
                handler = handlers.get(value)
                if callable(handler):
                    result[name] = handler
                else:
                    self._report(DiagnosticKind.UNRESOLVED_HANDLER, f"Event handler not found: {value}",
                                 node, prop=name, handler=value)
                    result[name] = value
            else:
                result[name] = value
        return result

    def _resolve_key(self, node: Mapping[str, Any], props: Dict[str, Any]) -> Optional[str]:
        # Node-level key, node-level id, then the same names in props.
        # "key" is consumed; "id" stays a regular prop.
        prop_key = props.pop('key', None)
        for candidate in (node.get('key'), node.get('id'), prop_key, props.get('id')):
            if candidate is not None and candidate != '':
                return candidate
        return None

    def _resolve_container(self, container: Any, node: Any) -> Any:
        if container is None:
            return self.host.default_container
        if not isinstance(container, str):
            return container

        found = self.host.find_container(container)
        if found is None:
            self._report(DiagnosticKind.UNRESOLVED_CONTAINER, f"Portal container not found: {container}",
                         node, container=container)
            return self.host.default_container
        return found

    def _report(self, kind: DiagnosticKind, message: str, node: Any, **detail) -> None:
        self.diagnostics.report(Diagnostic(kind=kind, message=message, node=node, detail=detail))


def render(node: Any, registry: Any = None, context: Optional[RenderContext] = None) -> Any:
    """Render a JSON tree into host elements.

    Args:
        node: Tree to render
        registry: ComponentRegistry or plain mapping (default: empty
                  ComponentRegistry, so every type is a generic tag)
        context: RenderContext with handlers, host and diagnostic policy

    Returns:
        See ``Renderer.render``
    """
    return Renderer(registry, context).render(node)
