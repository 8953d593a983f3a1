from ._spline_error import SplineError


class OrderError(SplineError):
    """Raised when an order is invalid for the given knot count."""

    pass
