from typing import Tuple

import torch
from torch import Tensor

from .._order_error import OrderError
from .._tolerance import DENOMINATOR_TOLERANCE
from ._basis import Basis


def _check_order(basis: Basis, order: int) -> None:
    if order < 0:
        raise ValueError(f"Derivative order must be non-negative, got {order}")

    if order >= int(basis.order):
        raise OrderError(
            f"Derivative order {order} must be less than basis order "
            f"{int(basis.order)}"
        )

    if basis.knots.shape[0] - int(basis.order) - order < 1:
        raise OrderError(
            f"Derivative order {order} leaves no basis function"
        )


def _scale(basis: Basis, tolerance: float) -> Tensor:
    # (order - 1) / (k_{i+order} - k_{i+1}) for i in [0, dim - 2]
    knots = basis.knots
    order = int(basis.order)
    dim = knots.shape[0] - order

    span = knots[order : order + dim - 1] - knots[1:dim]
    valid = span.abs() > tolerance

    return torch.where(
        valid, (order - 1) / torch.where(valid, span, 1.0), 0.0
    )


def _reduced(basis: Basis) -> Basis:
    return Basis(
        knots=basis.knots[1:-1].clone(),
        order=int(basis.order) - 1,
        batch_size=[],
    )


def basis_derivative(
    basis: Basis,
    order: int = 1,
    tolerance: float = DENOMINATOR_TOLERANCE,
) -> Tuple[Basis, Tensor]:
    """
    Derivative of a basis as a linear map on coefficients.

    Parameters
    ----------
    basis : Basis
        Input basis.
    order : int
        Derivative order (default 1).
    tolerance : float
        Knot spans at or below this width contribute zero.

    Returns
    -------
    derivative : Basis
        Basis of order ``basis.order - order`` on ``knots[order:-order]``.
    transform : Tensor
        Shape (dim - order, dim). Coefficients ``c`` on ``basis`` map to
        ``transform @ c`` on ``derivative``.

    Raises
    ------
    ValueError
        If order is negative.
    OrderError
        If order is not below the basis order.

    Notes
    -----
    Row ``i`` of the first-order transform is bidiagonal:

        T[i, i]     = -(o - 1) / (k_{i+o} - k_{i+1})
        T[i, i + 1] =  (o - 1) / (k_{i+o} - k_{i+1})

    Higher orders compose the first-order transform of each reduced basis.
    """
    _check_order(basis, order)

    knots = basis.knots
    dim = knots.shape[0] - int(basis.order)

    transform = torch.eye(dim, dtype=knots.dtype, device=knots.device)

    for _ in range(order):
        scale = _scale(basis, tolerance)

        n = scale.shape[0]
        index = torch.arange(n, device=knots.device)

        step = torch.zeros(n, n + 1, dtype=knots.dtype, device=knots.device)
        step[index, index] = -scale
        step[index, index + 1] = scale

        transform = step @ transform
        basis = _reduced(basis)

    return basis, transform


def basis_derivative_coefficients(
    basis: Basis,
    coefficients: Tensor,
    order: int = 1,
    tolerance: float = DENOMINATOR_TOLERANCE,
) -> Tuple[Basis, Tensor]:
    """
    Apply the derivative transform directly to coefficients.

    Equivalent to ``transform @ coefficients`` with the matrix from
    ``basis_derivative`` but without building it.

    Parameters
    ----------
    basis : Basis
        Input basis.
    coefficients : Tensor
        Shape (dim,) or (dim, n_outputs).
    order : int
        Derivative order (default 1).
    tolerance : float
        Knot spans at or below this width contribute zero.

    Returns
    -------
    derivative : Basis
        Order-reduced basis.
    coefficients : Tensor
        Shape (dim - order,) or (dim - order, n_outputs).
    """
    _check_order(basis, order)

    for _ in range(order):
        scale = _scale(basis, tolerance)

        if coefficients.dim() > 1:
            scale = scale.unsqueeze(-1)

        coefficients = scale * (coefficients[1:] - coefficients[:-1])
        basis = _reduced(basis)

    return basis, coefficients
