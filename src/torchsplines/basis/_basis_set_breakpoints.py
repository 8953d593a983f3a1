from typing import Sequence, Union

import torch
from torch import Tensor

from .._invalid_argument_error import InvalidArgumentError
from .._tolerance import KNOT_TOLERANCE
from ._basis import Basis


def _selection(
    values: Union[Tensor, Sequence],
    indices: Union[Tensor, Sequence[int]],
    size: int,
    dtype: torch.dtype,
    device: torch.device,
):
    values = torch.as_tensor(values, dtype=dtype, device=device).reshape(-1)
    indices = torch.as_tensor(
        indices, dtype=torch.int64, device=device
    ).reshape(-1)

    if values.shape != indices.shape:
        raise InvalidArgumentError(
            f"Expected one value per index, got {values.shape[0]} values "
            f"and {indices.shape[0]} indices"
        )

    if torch.any(indices < -size) or torch.any(indices >= size):
        raise InvalidArgumentError(
            f"Indices {indices.tolist()} out of range for {size} breakpoints"
        )

    return values, indices


def basis_set_breakpoints(
    basis: Basis,
    values: Union[Tensor, Sequence[float]],
    indices: Union[Tensor, Sequence[int]],
    tolerance: float = KNOT_TOLERANCE,
) -> Basis:
    """
    Move selected breakpoints of a basis.

    Parameters
    ----------
    basis : Basis
        Input basis. It is not modified.
    values : Tensor or sequence of float
        New breakpoint locations.
    indices : Tensor or sequence of int
        Breakpoint indices to overwrite, one per value.
    tolerance : float
        Knot tolerance used to read the current breakpoints.

    Returns
    -------
    Basis
        New basis with the same order and continuities whose knots are
        rebuilt from the edited breakpoints.

    Raises
    ------
    InvalidArgumentError
        If values and indices differ in length, an index is out of range,
        or the edited breakpoints are not strictly increasing.
    """
    from ._basis_breakpoints import basis_breakpoints
    from ._breakpoints_to_knots import breakpoints_to_knots

    breakpoints, continuities = basis_breakpoints(basis, tolerance)

    values, indices = _selection(
        values,
        indices,
        breakpoints.shape[0],
        breakpoints.dtype,
        breakpoints.device,
    )

    breakpoints = breakpoints.clone()
    breakpoints[indices] = values

    if not torch.all(breakpoints[1:] > breakpoints[:-1]):
        raise InvalidArgumentError(
            f"Breakpoints must be strictly increasing, "
            f"got {breakpoints.tolist()}"
        )

    order = int(basis.order)

    return Basis(
        knots=breakpoints_to_knots(breakpoints, continuities, order),
        order=order,
        batch_size=[],
    )
