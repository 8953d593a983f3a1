"""Hypothesis strategies for spline testing."""

from ._breakpoint_sequences import breakpoint_sequences
from ._knot_vectors import knot_vectors

__all__ = [
    "breakpoint_sequences",
    "knot_vectors",
]
