"""
Tests for diagnostic policies.
"""

import io

import pytest

from jsonrlib import (
    CallbackPolicy,
    CollectDiagnosticsPolicy,
    Diagnostic,
    DiagnosticError,
    DiagnosticKind,
    FailFastPolicy,
    ThresholdPolicy,
    WarnPolicy,
)
from jsonrlib.diagnostics import as_policy


def make(kind=DiagnosticKind.UNKNOWN_TYPE, message="Unknown component type: x"):
    return Diagnostic(kind=kind, message=message, node={"type": "x"})


class TestDiagnosticPolicies:
    """Test individual policy behaviors."""

    def test_warn_policy_prints_and_records(self):
        stream = io.StringIO()
        policy = WarnPolicy(stream=stream)
        policy.report(make())
        assert stream.getvalue() == "WARNING: Unknown component type: x\n"
        assert len(policy) == 1

    def test_warn_policy_defaults_to_stderr(self, capsys):
        WarnPolicy().report(make(message="hello"))
        assert capsys.readouterr().err == "WARNING: hello\n"

    def test_warn_policy_quiet(self, capsys):
        policy = WarnPolicy(verbose=False)
        policy(make())
        assert capsys.readouterr().err == ""
        assert len(policy) == 1

    def test_collect_policy_is_silent(self, capsys):
        policy = CollectDiagnosticsPolicy()
        policy.report(make())
        policy.report(make(DiagnosticKind.UNRESOLVED_HANDLER, "Event handler not found: h"))
        assert capsys.readouterr().err == ""
        assert len(policy.of_kind(DiagnosticKind.UNRESOLVED_HANDLER)) == 1

    def test_statistics(self):
        policy = CollectDiagnosticsPolicy()
        policy.report(make())
        policy.report(make(DiagnosticKind.UNRESOLVED_CONTAINER, "Portal container not found: #m"))
        stats = policy.get_statistics()
        assert stats["total"] == 2
        assert stats["unknown_types"] == 1
        assert stats["unresolved_handlers"] == 0
        assert stats["unresolved_containers"] == 1
        assert len(stats["diagnostics"]) == 2

    def test_clear(self):
        policy = CollectDiagnosticsPolicy()
        policy.report(make())
        policy.clear()
        assert len(policy) == 0

    def test_fail_fast_policy(self):
        diagnostic = make()
        with pytest.raises(DiagnosticError) as exc_info:
            FailFastPolicy().report(diagnostic)
        assert exc_info.value.diagnostic is diagnostic
        assert str(exc_info.value) == "Unknown component type: x"

    def test_threshold_policy(self, capsys):
        policy = ThresholdPolicy(max_diagnostics=2)
        policy.report(make())
        policy.report(make())
        assert "WARNING [2/2]" in capsys.readouterr().err
        with pytest.raises(DiagnosticError):
            policy.report(make())

    def test_callback_policy(self):
        seen = []
        CallbackPolicy(seen.append).report(make())
        assert len(seen) == 1


class TestAsPolicy:

    def test_none_gives_warn_policy(self):
        assert isinstance(as_policy(None), WarnPolicy)

    def test_policy_passes_through(self):
        policy = CollectDiagnosticsPolicy()
        assert as_policy(policy) is policy

    def test_callable_is_wrapped(self):
        assert isinstance(as_policy(print), CallbackPolicy)

    def test_other_values_rejected(self):
        with pytest.raises(TypeError):
            as_policy("stderr")
