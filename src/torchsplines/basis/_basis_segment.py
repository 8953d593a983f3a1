from typing import Tuple

from .._tolerance import KNOT_TOLERANCE
from ._basis import Basis


def _segment_support(
    basis: Basis,
    first: int,
    last: int,
    tolerance: float,
) -> Tuple[int, int]:
    """Indices ``a..b`` of basis functions nonzero on segments first..last."""
    from ._basis_breakpoints import basis_breakpoints

    breakpoints, _ = basis_breakpoints(basis, tolerance)
    n_segments = breakpoints.shape[0] - 1

    if first < 0 or last >= n_segments or first > last:
        raise IndexError(
            f"Segment range [{first}, {last}] out of range "
            f"[0, {n_segments - 1}]"
        )

    knots = basis.knots
    order = int(basis.order)
    dim = knots.shape[0] - order

    begin = breakpoints[first]
    end = breakpoints[last + 1]

    right_ends = knots[order : order + dim]
    left_ends = knots[:dim]

    a = int((right_ends > begin + tolerance).nonzero()[0])
    b = int((left_ends < end - tolerance).nonzero()[-1])

    return a, b


def basis_segment(
    basis: Basis,
    first: int,
    last: int,
    tolerance: float = KNOT_TOLERANCE,
) -> Basis:
    """
    Basis restricted to a range of segments.

    Parameters
    ----------
    basis : Basis
        Input basis.
    first : int
        Index of the first segment. Segment ``s`` spans
        ``[breakpoints[s], breakpoints[s + 1]]``.
    last : int
        Index of the last segment (inclusive).
    tolerance : float
        Knot tolerance used to read the breakpoints.

    Returns
    -------
    Basis
        Basis on ``knots[a : b + order + 1]`` where ``a..b`` are the indices
        of the basis functions that do not vanish on the segment range. On
        ``[breakpoints[first], breakpoints[last + 1]]`` it spans the same
        functions as the input, so spline coefficients restrict to
        ``coefficients[a : b + 1]``.

    Raises
    ------
    IndexError
        If ``first`` or ``last`` is not a segment index or
        ``first > last``.
    """
    a, b = _segment_support(basis, first, last, tolerance)

    return Basis(
        knots=basis.knots[a : b + int(basis.order) + 1].clone(),
        order=int(basis.order),
        batch_size=[],
    )
