from .._tolerance import DENOMINATOR_TOLERANCE
from ..basis import basis_derivative_coefficients
from ._spline import Spline, spline_basis


def spline_derivative(
    s: Spline,
    order: int = 1,
    tolerance: float = DENOMINATOR_TOLERANCE,
) -> Spline:
    """
    Derivative of a spline.

    Parameters
    ----------
    s : Spline
        Input spline.
    order : int
        Derivative order (default 1).
    tolerance : float
        Knot spans at or below this width contribute zero.

    Returns
    -------
    Spline
        Spline of order ``s.order - order`` on ``knots[order:-order]``.

    Raises
    ------
    OrderError
        If order is not below the spline order.
    """
    derivative, coefficients = basis_derivative_coefficients(
        spline_basis(s), s.coefficients, order, tolerance
    )

    return Spline(
        knots=derivative.knots,
        coefficients=coefficients,
        order=int(derivative.order),
        batch_size=[],
    )
