from ._spline_error import SplineError


class InvalidArgumentError(SplineError, ValueError):
    """Raised when an edit to breakpoints or continuities is rejected.

    The operation that raises leaves its inputs unchanged.
    """

    pass
