from ._spline import Spline


def spline_negate(s: Spline) -> Spline:
    """Negate a spline.

    Parameters
    ----------
    s : Spline
        Spline to negate.

    Returns
    -------
    Spline
        Spline on the same knots with negated coefficients.
    """
    return Spline(
        knots=s.knots,
        coefficients=-s.coefficients,
        order=int(s.order),
        batch_size=[],
    )
