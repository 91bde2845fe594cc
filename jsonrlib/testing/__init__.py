"""Testing utilities for jsonrlib consumers."""

from .fixtures import RecordingVisitor, build_wide_tree, count_structured, sample_tree

__all__ = ['RecordingVisitor', 'build_wide_tree', 'count_structured', 'sample_tree']
