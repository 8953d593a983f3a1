from typing import Tuple

from torch import Tensor

from .._tolerance import KNOT_TOLERANCE
from ._basis import Basis


def basis_add(
    basis: Basis,
    other: Basis,
    accuracy: float = KNOT_TOLERANCE,
) -> Tuple[Basis, Tensor, Tensor]:
    """
    Basis and linear maps representing the sum of two splines.

    Parameters
    ----------
    basis : Basis
        Basis of the left operand.
    other : Basis
        Basis of the right operand.
    accuracy : float
        Knot merging tolerance passed to ``basis_combine``.

    Returns
    -------
    combined : Basis
        Basis of order ``max(basis.order, other.order)`` on the merged
        breakpoints.
    left : Tensor
        Shape (combined dim, basis dim).
    right : Tensor
        Shape (combined dim, other dim). The sum of splines with coefficients
        ``c1`` and ``c2`` has coefficients ``left @ c1 + right @ c2``.

    Notes
    -----
    Each operand's basis functions are sampled at the combined Greville
    sites and fitted independently. Fitting is linear, so the fitted
    coefficients of each basis function form the columns of the map.
    """
    from ..interpolate import interpolate_fit
    from ._basis_combine import basis_combine
    from ._basis_evaluate import basis_evaluate
    from ._basis_greville import basis_greville

    combined = basis_combine(
        basis, other, max(int(basis.order), int(other.order)), accuracy
    )
    sites = basis_greville(combined)

    left = interpolate_fit(combined, basis_evaluate(basis, sites), sites)
    right = interpolate_fit(combined, basis_evaluate(other, sites), sites)

    return combined, left, right
