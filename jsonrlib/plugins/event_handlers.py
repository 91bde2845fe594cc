"""Event handler plugin.

A transform visitor that swaps string event handler references in props
(``{"onClick": "save"}``) for the functions registered under those names,
so the tree can be rendered without passing handlers to the renderer.
"""

from typing import Any, Callable, Mapping, Optional

from ..core.context import TransformContext
from ..core.node import is_structured
from ..core.visitor import TransformVisitor
from ..diagnostics import Diagnostic, DiagnosticKind, as_policy


class EventHandlerPlugin(TransformVisitor):
    """Visitor that resolves handler names to callables in place.

    Only structured nodes with props are touched. Names that are not in the
    handler map stay as strings and, when ``warn_on_missing`` is set, are
    reported to the diagnostic policy.
    """

    def __init__(
        self,
        handlers: Mapping[str, Callable],
        prefix: str = 'on',
        warn_on_missing: bool = True,
        diagnostics: Any = None
    ):
        """Initialize the plugin.

        Args:
            handlers: Handler name -> function
            prefix: Prop name prefix marking handler props
            warn_on_missing: Report names missing from ``handlers``
            diagnostics: DiagnosticPolicy or callable (default WarnPolicy)
        """
        self.handlers = handlers
        self.prefix = prefix
        self.warn_on_missing = warn_on_missing
        self.diagnostics = as_policy(diagnostics)

    def enter(self, node: Any, context: TransformContext) -> None:
        if not is_structured(node):
            return None
        props = node.get('props')
        if not props:
            return None

        for name, value in list(props.items()):
            if not name.startswith(self.prefix) or not isinstance(value, str):
                continue
            handler = self.handlers.get(value)
            if callable(handler):
                props[name] = handler
            elif self.warn_on_missing:
                self.diagnostics.report(Diagnostic(
                    kind=DiagnosticKind.UNRESOLVED_HANDLER,
                    message=f"Event handler not found: {value}",
                    node=node,
                    detail={'prop': name, 'handler': value},
                ))
        return None


def create_event_handler_plugin(
    handlers: Mapping[str, Callable],
    prefix: str = 'on',
    warn_on_missing: bool = True,
    diagnostics: Optional[Any] = None
) -> EventHandlerPlugin:
    """Create a visitor that maps string event handlers to functions.

    Example:
        plugin = create_event_handler_plugin({'save': on_save})
        tree = await transform(tree, [plugin])
    """
    return EventHandlerPlugin(handlers, prefix=prefix, warn_on_missing=warn_on_missing,
                              diagnostics=diagnostics)
