from typing import Sequence, Union

import torch
from torch import Tensor

from .._invalid_argument_error import InvalidArgumentError


def breakpoints_to_knots(
    breakpoints: Tensor,
    continuities: Union[Tensor, Sequence[int]],
    order: int,
) -> Tensor:
    """
    Convert breakpoints and continuities to a knot vector.

    Parameters
    ----------
    breakpoints : Tensor
        Breakpoint locations, shape (n_breakpoints,).
    continuities : Tensor or sequence of int
        Continuity at each breakpoint, shape (n_breakpoints,).
    order : int
        Basis order.

    Returns
    -------
    knots : Tensor
        Each breakpoint repeated ``order - continuity`` times, in
        breakpoint order. Length ``n_breakpoints * order - sum(continuities)``.

    Raises
    ------
    InvalidArgumentError
        If the lengths differ or a continuity is at least ``order``.
    """
    continuities = torch.as_tensor(
        continuities, dtype=torch.int64, device=breakpoints.device
    )

    if breakpoints.shape != continuities.shape:
        raise InvalidArgumentError(
            f"Expected one continuity per breakpoint, got "
            f"{breakpoints.shape[0]} breakpoints and "
            f"{continuities.shape[0]} continuities"
        )

    multiplicities = order - continuities

    if torch.any(multiplicities < 1):
        raise InvalidArgumentError(
            f"Continuities must be below the order {order}, "
            f"got {continuities.tolist()}"
        )

    return torch.repeat_interleave(breakpoints, multiplicities)
