from typing import Sequence, Union

import torch
from torch import Tensor

from ._basis import Basis


def basis_insert_knots(
    basis: Basis,
    knots: Union[Tensor, Sequence[float]],
) -> Basis:
    """
    Insert knots into a basis.

    Parameters
    ----------
    basis : Basis
        Input basis.
    knots : Tensor or sequence of float
        Knots to insert. Values equal to existing knots raise their
        multiplicity.

    Returns
    -------
    Basis
        Basis of the same order on the sorted union of both knot vectors.
        Every spline of the input basis is representable in the result as
        long as no multiplicity exceeds the order.
    """
    knots = torch.as_tensor(
        knots, dtype=basis.knots.dtype, device=basis.knots.device
    ).reshape(-1)

    merged, _ = torch.sort(torch.cat([basis.knots, knots]), stable=True)

    return Basis(knots=merged, order=int(basis.order), batch_size=[])
