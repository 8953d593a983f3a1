from .._tolerance import KNOT_TOLERANCE
from ..basis import basis_combine, basis_greville
from ..interpolate import interpolate_fit
from ._spline import Spline, spline_basis
from ._spline_evaluate import spline_evaluate


def spline_add(
    s: Spline,
    t: Spline,
    accuracy: float = KNOT_TOLERANCE,
) -> Spline:
    """
    Add two splines, possibly defined on different knots.

    Parameters
    ----------
    s, t : Spline
        Splines to add. Their value shapes must broadcast.
    accuracy : float
        Knot merging tolerance passed to ``basis_combine``.

    Returns
    -------
    Spline
        Spline of order ``max(s.order, t.order)`` on the merged
        breakpoints whose values are ``s(x) + t(x)``.

    Notes
    -----
    The pointwise sum is interpolated at the Greville sites of the combined
    basis. The result agrees with the ``basis_add`` maps.
    """
    order = max(int(s.order), int(t.order))

    combined = basis_combine(spline_basis(s), spline_basis(t), order, accuracy)
    sites = basis_greville(combined)

    values = spline_evaluate(s, sites) + spline_evaluate(t, sites)

    return Spline(
        knots=combined.knots,
        coefficients=interpolate_fit(combined, values, sites),
        order=int(combined.order),
        batch_size=[],
    )
