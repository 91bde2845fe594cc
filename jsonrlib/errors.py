"""Exception types for jsonrlib.

Only configuration problems are raised. Data-shape problems found while
rendering (unknown types, unresolved handlers, missing portal containers)
are reported through a diagnostic policy instead, see ``jsonrlib.diagnostics``.
"""


class JsonrError(Exception):
    """Base class for all jsonrlib errors."""


class InvalidTraversalOrderError(JsonrError, ValueError):
    """Raised when a transform or traversal is asked for an unknown order."""

    def __init__(self, order):
        self.order = order
        super().__init__(f"Invalid traversal order: {order!r}")


class InvalidNodeError(JsonrError, TypeError):
    """Raised when a value is not a primitive, array or structured node."""


class DiagnosticError(JsonrError):
    """Raised by strict diagnostic policies instead of recovering.

    Attributes:
        diagnostic: The diagnostic that triggered the failure
    """

    def __init__(self, diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)
