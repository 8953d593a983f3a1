from typing import Tuple

import torch
from torch import Tensor

from ._basis import Basis


def _check_order(order: int) -> None:
    if order < 0:
        raise ValueError(f"Integral order must be non-negative, got {order}")


def _scale(basis: Basis) -> Tensor:
    # (k_{c+order} - k_c) / order for c in [0, dim - 1]
    knots = basis.knots
    order = int(basis.order)
    dim = knots.shape[0] - order

    return (knots[order : order + dim] - knots[:dim]) / order


def _increased(basis: Basis) -> Basis:
    knots = basis.knots

    return Basis(
        knots=torch.cat([knots[:1], knots, knots[-1:]]),
        order=int(basis.order) + 1,
        batch_size=[],
    )


def basis_integral(basis: Basis, order: int = 1) -> Tuple[Basis, Tensor]:
    """
    Antiderivative of a basis as a linear map on coefficients.

    Parameters
    ----------
    basis : Basis
        Input basis.
    order : int
        Number of integrations (default 1).

    Returns
    -------
    integral : Basis
        Basis of order ``basis.order + order`` whose end knots are repeated
        ``order`` more times.
    transform : Tensor
        Shape (dim + order, dim). The antiderivative of each step vanishes
        at the first knot.

    Raises
    ------
    ValueError
        If order is negative.

    Notes
    -----
    Column ``c`` of the single-step transform holds
    ``(k_{c+o} - k_c) / o`` in every row below ``c``; the first row is zero.
    """
    _check_order(order)

    knots = basis.knots
    dim = knots.shape[0] - int(basis.order)

    transform = torch.eye(dim, dtype=knots.dtype, device=knots.device)

    for _ in range(order):
        scale = _scale(basis)
        n = scale.shape[0]

        rows = torch.arange(n + 1, device=knots.device).unsqueeze(-1)
        columns = torch.arange(n, device=knots.device).unsqueeze(0)

        step = torch.where(rows > columns, scale.unsqueeze(0), 0.0)

        transform = step @ transform
        basis = _increased(basis)

    return basis, transform


def basis_integral_coefficients(
    basis: Basis,
    coefficients: Tensor,
    order: int = 1,
) -> Tuple[Basis, Tensor]:
    """
    Apply the integral transform directly to coefficients.

    Parameters
    ----------
    basis : Basis
        Input basis.
    coefficients : Tensor
        Shape (dim,) or (dim, n_outputs).
    order : int
        Number of integrations (default 1).

    Returns
    -------
    integral : Basis
        Order-increased basis.
    coefficients : Tensor
        Shape (dim + order,) or (dim + order, n_outputs). A running sum of
        the scaled coefficients seeded with zero.
    """
    _check_order(order)

    for _ in range(order):
        scale = _scale(basis)

        if coefficients.dim() > 1:
            scale = scale.unsqueeze(-1)

        increments = torch.cumsum(scale * coefficients, dim=0)

        coefficients = torch.cat(
            [torch.zeros_like(increments[:1]), increments], dim=0
        )
        basis = _increased(basis)

    return basis, coefficients
