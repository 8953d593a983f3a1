from ..basis import basis_integral_coefficients
from ._spline import Spline, spline_basis


def spline_integral(s: Spline, order: int = 1) -> Spline:
    """
    Antiderivative of a spline.

    Parameters
    ----------
    s : Spline
        Input spline.
    order : int
        Number of integrations (default 1).

    Returns
    -------
    Spline
        Spline of order ``s.order + order`` that vanishes at the first knot.
        For a clamped basis this is ``x -> integral of s from knots[0] to x``.
    """
    integral, coefficients = basis_integral_coefficients(
        spline_basis(s), s.coefficients, order
    )

    return Spline(
        knots=integral.knots,
        coefficients=coefficients,
        order=int(integral.order),
        batch_size=[],
    )
