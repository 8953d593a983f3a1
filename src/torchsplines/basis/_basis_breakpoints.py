from typing import Tuple

import torch
from torch import Tensor

from .._tolerance import KNOT_TOLERANCE
from ._basis import Basis


def knots_to_breakpoints(
    knots: Tensor,
    order: int,
    tolerance: float = KNOT_TOLERANCE,
) -> Tuple[Tensor, Tensor]:
    """
    Convert a knot vector to breakpoints and continuities.

    Parameters
    ----------
    knots : Tensor
        Non-decreasing knot vector, shape (n_knots,).
    order : int
        Basis order.
    tolerance : float
        A knot starts a new breakpoint when it exceeds the last breakpoint
        by more than this value.

    Returns
    -------
    breakpoints : Tensor
        Strictly increasing breakpoints, shape (n_breakpoints,).
    continuities : Tensor
        int64 tensor, shape (n_breakpoints,). ``order - multiplicity`` of
        each breakpoint.

    Notes
    -----
    Each knot either starts a new breakpoint or raises the multiplicity of
    the last one. Knots whose multiplicity exceeds the order yield
    negative continuities; ``breakpoints_to_knots`` inverts them exactly.
    """
    order = int(order)
    values = knots.tolist()

    breakpoints = [values[0]]
    multiplicities = [1]

    for knot in values[1:]:
        if knot > breakpoints[-1] + tolerance:
            breakpoints.append(knot)
            multiplicities.append(1)
        else:
            multiplicities[-1] += 1

    continuities = [order - m for m in multiplicities]

    return (
        torch.tensor(breakpoints, dtype=knots.dtype, device=knots.device),
        torch.tensor(continuities, dtype=torch.int64, device=knots.device),
    )


def basis_breakpoints(
    basis: Basis,
    tolerance: float = KNOT_TOLERANCE,
) -> Tuple[Tensor, Tensor]:
    """
    Breakpoints and continuities of a basis.

    Parameters
    ----------
    basis : Basis
        Input basis.
    tolerance : float
        Knots closer than this belong to the same breakpoint.

    Returns
    -------
    breakpoints : Tensor
        Strictly increasing breakpoints.
    continuities : Tensor
        Continuity at each breakpoint (int64).

    Examples
    --------
    >>> b = basis([0.0, 0.0, 0.0, 0.5, 0.5, 1.0, 1.0, 1.0], 3)
    >>> basis_breakpoints(b)
    (tensor([0.0000, 0.5000, 1.0000], dtype=torch.float64), tensor([0, 1, 0]))
    """
    return knots_to_breakpoints(basis.knots, int(basis.order), tolerance)
