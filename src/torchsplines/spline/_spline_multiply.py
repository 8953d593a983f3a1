from .._tolerance import KNOT_TOLERANCE
from ..basis import basis_combine, basis_greville
from ..interpolate import interpolate_fit
from ._spline import Spline, spline_basis
from ._spline_evaluate import spline_evaluate


def spline_multiply(
    s: Spline,
    t: Spline,
    accuracy: float = KNOT_TOLERANCE,
) -> Spline:
    """
    Multiply two splines pointwise.

    Parameters
    ----------
    s, t : Spline
        Splines to multiply. Their value shapes must broadcast.
    accuracy : float
        Knot merging tolerance passed to ``basis_combine``.

    Returns
    -------
    Spline
        Spline of order ``s.order + t.order - 1`` whose values are
        ``s(x) * t(x)``.

    Notes
    -----
    A product of polynomials of degree ``o1 - 1`` and ``o2 - 1`` has degree
    ``o1 + o2 - 2``, hence the order. The pointwise product is interpolated
    at the Greville sites of the combined basis. The result agrees with the
    ``basis_prod`` map.
    """
    order = int(s.order) + int(t.order) - 1

    combined = basis_combine(spline_basis(s), spline_basis(t), order, accuracy)
    sites = basis_greville(combined)

    values = spline_evaluate(s, sites) * spline_evaluate(t, sites)

    return Spline(
        knots=combined.knots,
        coefficients=interpolate_fit(combined, values, sites),
        order=int(combined.order),
        batch_size=[],
    )
