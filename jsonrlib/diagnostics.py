"""
Diagnostic policies for jsonrlib.

Rendering recovers locally from data-shape problems (an unknown component
type, an event handler name that is not registered, a portal container that
cannot be found). Each such problem is described by a ``Diagnostic`` and
handed to a pluggable policy, which decides whether to print it, collect it,
or escalate it into an exception.

Nothing in the library writes diagnostics to a global logger; callers inject
the policy they want through ``RenderContext`` or the plugin factories.
"""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from .errors import DiagnosticError


class DiagnosticKind(Enum):
    """Non-fatal conditions reported while rendering or transforming."""
    UNKNOWN_TYPE = "unknown_type"                   # Registry could not resolve a type
    UNRESOLVED_HANDLER = "unresolved_handler"       # Named event handler not found
    UNRESOLVED_CONTAINER = "unresolved_container"   # Portal target not found


@dataclass
class Diagnostic:
    """A single reported condition.

    Attributes:
        kind: What went wrong
        message: Human-readable description
        node: The structured node being processed, if any
        detail: Extra context (handler name, prop name, selector, ...)
    """
    kind: DiagnosticKind
    message: str
    node: Any = None
    detail: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class DiagnosticPolicy(ABC):
    """
    Base class for diagnostic policies.

    Subclasses implement different strategies for handling conditions that
    the renderer recovers from. ``report`` is called once per diagnostic,
    after the renderer has already chosen its fallback.
    """

    @abstractmethod
    def report(self, diagnostic: Diagnostic) -> None:
        """
        Handle a diagnostic.

        Args:
            diagnostic: The condition being reported

        Raises:
            DiagnosticError: If the policy refuses to continue
        """
        pass

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.report(diagnostic)


class _RecordingPolicy(DiagnosticPolicy):
    """Shared bookkeeping for policies that keep what they were given."""

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        """Return the recorded diagnostics of one kind, in report order."""
        return [d for d in self.diagnostics if d.kind is kind]

    def clear(self) -> None:
        self.diagnostics.clear()

    def get_statistics(self) -> dict:
        """
        Get statistics about diagnostics reported so far.

        Returns:
            Dictionary with counts per kind and the full diagnostic list
        """
        return {
            'total': len(self.diagnostics),
            'unknown_types': len(self.of_kind(DiagnosticKind.UNKNOWN_TYPE)),
            'unresolved_handlers': len(self.of_kind(DiagnosticKind.UNRESOLVED_HANDLER)),
            'unresolved_containers': len(self.of_kind(DiagnosticKind.UNRESOLVED_CONTAINER)),
            'diagnostics': list(self.diagnostics),
        }

    def __len__(self) -> int:
        return len(self.diagnostics)


class WarnPolicy(_RecordingPolicy):
    """
    Policy that prints warnings and continues.

    This is the default policy. Diagnostics are recorded for later
    inspection and, when verbose, written to stderr as they happen.
    """

    def __init__(self, verbose: bool = True, stream=None):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when diagnostics occur
            stream: Alternative text stream for warnings (defaults to sys.stderr)
        """
        super().__init__()
        self.verbose = verbose
        self.stream = stream

    def report(self, diagnostic: Diagnostic) -> None:
        super().report(diagnostic)
        if self.verbose:
            print(f"WARNING: {diagnostic.message}", file=self.stream or sys.stderr)


class CollectDiagnosticsPolicy(_RecordingPolicy):
    """
    Policy that collects all diagnostics without output.

    Similar to WarnPolicy but silent. Useful in tests and for presenting
    every problem in a tree at once after rendering.
    """


class FailFastPolicy(DiagnosticPolicy):
    """
    Policy that turns every diagnostic into a ``DiagnosticError``.

    Useful for validating trees in CI where a degraded render is not
    acceptable.
    """

    def report(self, diagnostic: Diagnostic) -> None:
        raise DiagnosticError(diagnostic)


class ThresholdPolicy(_RecordingPolicy):
    """
    Policy that tolerates diagnostics up to a threshold, then fails.

    Useful when a few unresolved names are expected but many indicate
    that the wrong handler map or registry was supplied.
    """

    def __init__(self, max_diagnostics: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_diagnostics: Maximum diagnostics to tolerate before failing
            verbose: If True, print warnings for tolerated diagnostics
        """
        super().__init__()
        self.max_diagnostics = max_diagnostics
        self.verbose = verbose

    def report(self, diagnostic: Diagnostic) -> None:
        super().report(diagnostic)
        count = len(self.diagnostics)
        if count > self.max_diagnostics:
            raise DiagnosticError(diagnostic)
        if self.verbose:
            print(f"WARNING [{count}/{self.max_diagnostics}]: {diagnostic.message}",
                  file=sys.stderr)


class CallbackPolicy(DiagnosticPolicy):
    """Policy that forwards each diagnostic to a plain callable."""

    def __init__(self, callback: Callable[[Diagnostic], Any]):
        self.callback = callback

    def report(self, diagnostic: Diagnostic) -> None:
        self.callback(diagnostic)


def as_policy(sink: Optional[Any]) -> DiagnosticPolicy:
    """Coerce a diagnostic sink argument into a policy.

    Args:
        sink: A DiagnosticPolicy, a callable taking a Diagnostic, or None
              for a fresh WarnPolicy

    Returns:
        A DiagnosticPolicy instance
    """
    if sink is None:
        return WarnPolicy()
    if isinstance(sink, DiagnosticPolicy):
        return sink
    if callable(sink):
        return CallbackPolicy(sink)
    raise TypeError(f"Diagnostic sink must be a DiagnosticPolicy or callable, got {type(sink).__name__}")
