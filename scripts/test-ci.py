#!/usr/bin/env python
"""
Local CI check for jsonrlib
===========================

Runs the checks CI runs, in the order they usually fail:

1. The package imports and every name in ``jsonrlib.__all__`` exists
2. Option defaults are what the documentation promises
3. A transform/render smoke run produces the expected element
4. The fast test suite (``run_tests.py``)
5. flake8 syntax errors in the package, tests and examples
6. Every script in ``examples/`` runs against the installed API
7. ``python -m build`` produces an sdist and wheel

Usage:
    python scripts/test-ci.py
    python scripts/test-ci.py --skip-build
"""

import argparse
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

API_CHECK = """
import jsonrlib
missing = [name for name in jsonrlib.__all__ if not hasattr(jsonrlib, name)]
assert not missing, f"exported but undefined: {missing}"
"""

DEFAULTS_CHECK = """
from jsonrlib import TransformOptions, TraverseOptions, TraversalOrder
options = TransformOptions()
assert options.traversal_order is TraversalOrder.DEPTH_FIRST_PRE, options.order
assert options.clone is True, "transform must clone by default"
assert options.validate() == [], options.validate()
lazy = TraverseOptions()
assert lazy.clone is False, "lazy traversal must not clone by default"
assert lazy.validate() == [], lazy.validate()
assert TransformOptions(order="sideways").validate(), "invalid order not reported"
"""

SMOKE_CHECK = """
import asyncio
from jsonrlib import (CollectDiagnosticsPolicy, RenderContext, create_event_handler_plugin,
                      create_node, render, transform)

def save():
    pass

tree = create_node("form", children=[create_node("button", {"onClick": "save"}, "Save")])
policy = CollectDiagnosticsPolicy()
tree = asyncio.run(transform(tree, [create_event_handler_plugin({"save": save}, diagnostics=policy)]))
element = render(tree, context=RenderContext(diagnostics=policy))
assert element.children[0].props["onClick"] is save, element
assert len(policy) == 0, policy.diagnostics
"""


def run_step(cmd, description, critical=True):
    """Run one check and return True if it succeeds."""
    print(f"\n[Testing] {description}...")
    result = subprocess.run(cmd, cwd=PROJECT_ROOT, capture_output=True, text=True)

    if result.returncode == 0:
        print("  PASSED")
        return True

    if critical:
        print("  FAILED - This will fail in CI!")
        output = (result.stderr or result.stdout).strip()
        if output:
            print(f"  Error: {output[-800:]}")
    else:
        print("  WARNING - Non-critical issue")
    return False


def python_step(source, description):
    return run_step([sys.executable, "-c", source], description)


def main():
    parser = argparse.ArgumentParser(description="Local CI check for jsonrlib")
    parser.add_argument("--skip-build", action="store_true", help="Skip the sdist/wheel build")
    args = parser.parse_args()

    print("=" * 60)
    print("JSONRLIB LOCAL CI CHECK")
    print("=" * 60)

    failures = []

    if not python_step(API_CHECK, "Import package and check exported API"):
        failures.append("Check jsonrlib/__init__.py imports and __all__")

    if not python_step(DEFAULTS_CHECK, "Check option defaults"):
        failures.append("Restore documented defaults in jsonrlib/config.py")

    if not python_step(SMOKE_CHECK, "Transform and render a small tree"):
        failures.append("Debug the transform -> render pipeline")

    if not run_step([sys.executable, "run_tests.py"], "Run fast tests (what CI runs)"):
        failures.append("Debug the failing tests")

    if not run_step([sys.executable, "-m", "flake8", "--version"], "Check if flake8 is available",
                    critical=False):
        print("  [Skipped] flake8 not installed (pip install -e .[dev])")
    elif not run_step([sys.executable, "-m", "flake8", "jsonrlib", "tests", "examples",
                       "--count", "--select=E9,F63,F7,F82", "--show-source"],
                      "Check for Python syntax errors"):
        failures.append("Fix the syntax errors shown above")

    for example in sorted((PROJECT_ROOT / "examples").glob("*.py")):
        if not run_step([sys.executable, str(example)], f"Run example {example.name}"):
            failures.append(f"Update examples/{example.name} or the exported API")

    if args.skip_build:
        print("\n[Skipped] Package build")
    elif not run_step([sys.executable, "-m", "build", "--version"], "Check if build is available",
                      critical=False):
        print("  [Skipped] build not installed (pip install -e .[dev])")
    elif not run_step([sys.executable, "-m", "build"], "Build sdist and wheel"):
        failures.append("Check setup.py for errors")

    # Summary
    print("\n" + "=" * 60)
    if not failures:
        print("SUCCESS: All CI checks passed")
    else:
        print(f"FAILURE: {len(failures)} check(s) failed")
        for fix in failures:
            print(f"  Fix: {fix}")
    print("=" * 60)

    return 0 if not failures else 1


if __name__ == "__main__":
    sys.exit(main())
