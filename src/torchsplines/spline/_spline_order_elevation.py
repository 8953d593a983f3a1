from .._tolerance import KNOT_TOLERANCE
from ..basis import basis_greville, basis_order_elevation
from ..interpolate import interpolate_fit
from ._spline import Spline, spline_basis
from ._spline_evaluate import spline_evaluate


def spline_order_elevation(
    s: Spline,
    n: int = 1,
    tolerance: float = KNOT_TOLERANCE,
) -> Spline:
    """
    Raise the order of a spline without changing the function.

    Parameters
    ----------
    s : Spline
        Input spline.
    n : int
        Number of orders to add (default 1).
    tolerance : float
        Knot tolerance used to read the breakpoints.

    Returns
    -------
    Spline
        Spline of order ``s.order + n`` with the same breakpoints and
        continuities, refitted at the Greville sites of the elevated basis.

    Raises
    ------
    ValueError
        If n is negative.
    """
    elevated = basis_order_elevation(spline_basis(s), n, tolerance)
    sites = basis_greville(elevated)

    return Spline(
        knots=elevated.knots,
        coefficients=interpolate_fit(
            elevated, spline_evaluate(s, sites), sites
        ),
        order=int(elevated.order),
        batch_size=[],
    )
