"""Visitor protocol for tree transforms.

A visitor is any object with an optional ``enter(node, context)`` and/or
``exit(node, context)``. Either hook may be a plain function or a coroutine
function; the engine awaits whatever is awaitable, one call at a time.

A hook reports its outcome as a ``VisitResult``:

- ``None`` or ``NO_CHANGE``: keep the node (in-place mutation is allowed)
- ``Replace(node)``: put ``node`` at this position in the tree

Returning any other value is shorthand for ``Replace(value)``. Use
``Replace(None)`` to replace a node with null.

Plain dicts such as ``{'enter': fn}`` are accepted as visitors too.
"""

import inspect
from typing import Any, Callable, Optional, Sequence

from .context import TransformContext


class VisitResult:
    """Base class for the outcome of a visitor hook."""

    replaced = False


class _NoChange(VisitResult):

    def __repr__(self) -> str:
        return 'NO_CHANGE'


NO_CHANGE = _NoChange()


class Replace(VisitResult):
    """Replace the visited node with ``node``."""

    replaced = True

    def __init__(self, node: Any):
        self.node = node

    def __eq__(self, other) -> bool:
        return isinstance(other, Replace) and other.node == self.node

    def __repr__(self) -> str:
        return f"Replace({self.node!r})"


def as_result(value: Any) -> VisitResult:
    """Normalize a hook's return value into a VisitResult."""
    if value is None:
        return NO_CHANGE
    if isinstance(value, VisitResult):
        return value
    return Replace(value)


class TransformVisitor:
    """Base class for visitors.

    Subclasses override ``enter`` and/or ``exit``. Both may be declared
    ``async``. The defaults leave the node unchanged.
    """

    def enter(self, node: Any, context: TransformContext) -> Any:
        return None

    def exit(self, node: Any, context: TransformContext) -> Any:
        return None


class FunctionVisitor(TransformVisitor):
    """Visitor built from plain callables.

    Example:
        upper = FunctionVisitor(enter=lambda n, ctx: n.upper() if isinstance(n, str) else None)
    """

    def __init__(self, enter: Optional[Callable] = None, exit: Optional[Callable] = None):
        self._enter = enter
        self._exit = exit

    def enter(self, node, context):
        if self._enter is None:
            return None
        return self._enter(node, context)

    def exit(self, node, context):
        if self._exit is None:
            return None
        return self._exit(node, context)


async def _call_hook(hook: Callable, node: Any, context: TransformContext) -> VisitResult:
    result = hook(node, context)
    if inspect.isawaitable(result):
        result = await result
    return as_result(result)


async def _run_phase(phase: str, visitors: Sequence[Any], node: Any,
                     context: TransformContext) -> VisitResult:
    for visitor in visitors:
        if isinstance(visitor, dict):
            hook = visitor.get(phase)
        else:
            hook = getattr(visitor, phase, None)
        if hook is None:
            continue
        result = await _call_hook(hook, node, context)
        if result.replaced:
            # First replacement wins for this phase
            return result
    return NO_CHANGE


async def run_enter(visitors: Sequence[Any], node: Any, context: TransformContext) -> VisitResult:
    """Run the enter hooks of ``visitors`` in order.

    Returns:
        The first Replace returned, or NO_CHANGE
    """
    return await _run_phase('enter', visitors, node, context)


async def run_exit(visitors: Sequence[Any], node: Any, context: TransformContext) -> VisitResult:
    """Run the exit hooks of ``visitors`` in order.

    Returns:
        The first Replace returned, or NO_CHANGE
    """
    return await _run_phase('exit', visitors, node, context)
