from ._spline_error import SplineError


class KnotError(SplineError):
    """Raised for invalid knot vectors (not 1-D, empty, decreasing)."""

    pass
