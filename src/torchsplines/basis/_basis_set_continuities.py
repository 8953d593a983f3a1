from typing import Sequence, Union

import torch
from torch import Tensor

from .._invalid_argument_error import InvalidArgumentError
from .._tolerance import KNOT_TOLERANCE
from ._basis import Basis
from ._basis import basis as basis_factory
from ._basis_set_breakpoints import _selection


def basis_set_continuities(
    basis: Basis,
    values: Union[Tensor, Sequence[int]],
    indices: Union[Tensor, Sequence[int]],
    tolerance: float = KNOT_TOLERANCE,
) -> Basis:
    """
    Change the continuity at selected breakpoints of a basis.

    Parameters
    ----------
    basis : Basis
        Input basis. It is not modified.
    values : Tensor or sequence of int
        New continuities, each in ``[0, order - 1]``.
    indices : Tensor or sequence of int
        Breakpoint indices to overwrite, one per value.
    tolerance : float
        Knot tolerance used to read the current breakpoints.

    Returns
    -------
    Basis
        New basis with rebuilt knots. Its dimension changes by the total
        change in multiplicity.

    Raises
    ------
    InvalidArgumentError
        If values and indices differ in length, an index is out of range,
        or a continuity lies outside ``[0, order - 1]``.
    OrderError
        If the rebuilt knot vector leaves no basis function.
    """
    from ._basis_breakpoints import basis_breakpoints
    from ._breakpoints_to_knots import breakpoints_to_knots

    order = int(basis.order)
    breakpoints, continuities = basis_breakpoints(basis, tolerance)

    values, indices = _selection(
        values,
        indices,
        continuities.shape[0],
        torch.int64,
        continuities.device,
    )

    if torch.any(values < 0) or torch.any(values >= order):
        raise InvalidArgumentError(
            f"Continuities must lie in [0, {order - 1}], "
            f"got {values.tolist()}"
        )

    continuities = continuities.clone()
    continuities[indices] = values

    return basis_factory(
        breakpoints_to_knots(breakpoints, continuities, order), order
    )
