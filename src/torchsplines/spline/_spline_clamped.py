import torch

from .._tolerance import KNOT_TOLERANCE
from ..basis import basis_clamped, basis_evaluate, basis_greville
from ..interpolate._solve import _solve
from ._spline import Spline, spline_basis
from ._spline_evaluate import spline_evaluate


def spline_clamped(s: Spline, tolerance: float = KNOT_TOLERANCE) -> Spline:
    """
    Equivalent spline on a basis clamped at its valid domain.

    Parameters
    ----------
    s : Spline
        Input spline, typically from ``spline_segment``.
    tolerance : float
        Interior knots closer than this to a domain end are dropped.

    Returns
    -------
    Spline
        Spline on ``basis_clamped(...)`` equal to ``s`` on
        ``[knots[order - 1], knots[dim]]``.

    Notes
    -----
    A clamped spline interpolates its first and last coefficients at the
    domain ends, so those are set to the values of ``s`` there. The
    remaining coefficients are fitted at the interior Greville sites with
    the end contributions moved to the right-hand side.
    """
    clamped = basis_clamped(spline_basis(s), tolerance)
    dim = clamped.knots.shape[0] - int(clamped.order)

    begin = clamped.knots[0]
    end = clamped.knots[-1]

    first = spline_evaluate(s, begin)
    last = spline_evaluate(s, end)

    if dim == 1:
        coefficients = first.unsqueeze(0)
    elif dim == 2:
        coefficients = torch.stack([first, last])
    else:
        sites = basis_greville(clamped)[1:-1]

        values = basis_evaluate(clamped, sites)
        observations = spline_evaluate(s, sites)

        shape = (-1,) + (1,) * first.dim()
        observations = (
            observations
            - values[:, 0].reshape(shape) * first
            - values[:, -1].reshape(shape) * last
        )

        interior = _solve(values[:, 1:-1], observations)

        coefficients = torch.cat(
            [first.unsqueeze(0), interior, last.unsqueeze(0)]
        )

    return Spline(
        knots=clamped.knots,
        coefficients=coefficients,
        order=int(clamped.order),
        batch_size=[],
    )
