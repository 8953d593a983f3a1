import torch

from .._tolerance import KNOT_TOLERANCE
from ._basis import Basis


def basis_clamped(basis: Basis, tolerance: float = KNOT_TOLERANCE) -> Basis:
    """
    Clamp a basis at the ends of its valid domain.

    Parameters
    ----------
    basis : Basis
        Input basis, typically the result of ``basis_segment``.
    tolerance : float
        Interior knots closer than this to a domain end are dropped.

    Returns
    -------
    Basis
        Basis of the same order whose knots are ``order`` copies of
        ``k_{order-1}``, the knots strictly inside
        ``(k_{order-1}, k_{dim})``, and ``order`` copies of ``k_{dim}``.

    Notes
    -----
    The valid domain ``[k_{order-1}, k_{dim}]`` is where the basis functions
    sum to one. Outside it an unclamped basis is incomplete.
    """
    knots = basis.knots
    order = int(basis.order)
    dim = knots.shape[0] - order

    begin = knots[order - 1]
    end = knots[dim]

    inside = (knots > begin + tolerance) & (knots < end - tolerance)

    clamped = torch.cat(
        [begin.repeat(order), knots[inside], end.repeat(order)]
    )

    return Basis(knots=clamped, order=order, batch_size=[])
