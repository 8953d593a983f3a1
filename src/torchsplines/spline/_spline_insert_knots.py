from typing import Sequence, Union

from torch import Tensor

from ..basis import basis_greville, basis_insert_knots
from ..interpolate import interpolate_fit
from ._spline import Spline, spline_basis
from ._spline_evaluate import spline_evaluate


def spline_insert_knots(
    s: Spline,
    knots: Union[Tensor, Sequence[float]],
) -> Spline:
    """
    Insert knots into a spline without changing the function.

    Parameters
    ----------
    s : Spline
        Input spline.
    knots : Tensor or sequence of float
        Knots to insert.

    Returns
    -------
    Spline
        Spline on the refined basis, refitted at its Greville sites. The
        represented function is unchanged as long as no knot multiplicity
        reaches the order.
    """
    refined = basis_insert_knots(spline_basis(s), knots)
    sites = basis_greville(refined)

    return Spline(
        knots=refined.knots,
        coefficients=interpolate_fit(
            refined, spline_evaluate(s, sites), sites
        ),
        order=int(refined.order),
        batch_size=[],
    )
