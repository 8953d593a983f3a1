from .._tolerance import KNOT_TOLERANCE
from ..basis._basis_segment import _segment_support
from ._spline import Spline, spline_basis


def spline_segment(
    s: Spline,
    first: int,
    last: int,
    tolerance: float = KNOT_TOLERANCE,
) -> Spline:
    """
    Restrict a spline to a range of segments.

    Parameters
    ----------
    s : Spline
        Input spline.
    first : int
        Index of the first segment. Segment ``i`` spans
        ``[breakpoints[i], breakpoints[i + 1]]``.
    last : int
        Index of the last segment (inclusive).
    tolerance : float
        Knot tolerance used to read the breakpoints.

    Returns
    -------
    Spline
        Spline on ``basis_segment(...)`` with the coefficients of the
        basis functions supporting the segment range. It equals ``s`` on
        ``[breakpoints[first], breakpoints[last + 1]]``.

    Raises
    ------
    IndexError
        If the segment range is invalid.
    """
    a, b = _segment_support(spline_basis(s), first, last, tolerance)

    return Spline(
        knots=s.knots[a : b + int(s.order) + 1].clone(),
        coefficients=s.coefficients[a : b + 1].clone(),
        order=int(s.order),
        batch_size=[],
    )
