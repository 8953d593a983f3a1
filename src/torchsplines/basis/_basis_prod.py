from typing import Tuple

from torch import Tensor

from .._tolerance import KNOT_TOLERANCE
from ._basis import Basis


def basis_prod(
    basis: Basis,
    other: Basis,
    accuracy: float = KNOT_TOLERANCE,
) -> Tuple[Basis, Tensor]:
    """
    Basis and linear map representing the product of two splines.

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
        Basis of order ``basis.order + other.order - 1``.
    transform : Tensor
        Shape (combined dim, basis dim * other dim). For coefficient vectors
        ``c1`` and ``c2`` the product has coefficients
        ``transform @ kron(c1[:, None], c2[:, None])``. Column ``j`` of
        ``khatri_rao(C1.T, C2.T).T`` applies the map to coefficient columns
        ``C1[:, j]`` and ``C2[:, j]``.

    Notes
    -----
    The product of two splines is a bilinear combination of
    ``B_i(x) * C_j(x)``. Those products, sampled at the combined Greville
    sites, form the Khatri-Rao product of both collocation matrices; fitting
    it yields the map.
    """
    from ..interpolate import interpolate_fit
    from ..linear_algebra import khatri_rao
    from ._basis_combine import basis_combine
    from ._basis_evaluate import basis_evaluate
    from ._basis_greville import basis_greville

    combined = basis_combine(
        basis, other, int(basis.order) + int(other.order) - 1, accuracy
    )
    sites = basis_greville(combined)

    products = khatri_rao(
        basis_evaluate(basis, sites), basis_evaluate(other, sites)
    )

    return combined, interpolate_fit(combined, products, sites)
