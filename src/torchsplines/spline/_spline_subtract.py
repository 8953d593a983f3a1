from .._tolerance import KNOT_TOLERANCE
from ._spline import Spline
from ._spline_add import spline_add
from ._spline_negate import spline_negate


def spline_subtract(
    s: Spline,
    t: Spline,
    accuracy: float = KNOT_TOLERANCE,
) -> Spline:
    """Subtract two splines.

    Parameters
    ----------
    s, t : Spline
        Splines to subtract.
    accuracy : float
        Knot merging tolerance passed to ``basis_combine``.

    Returns
    -------
    Spline
        Difference s - t.
    """
    return spline_add(s, spline_negate(t), accuracy)
