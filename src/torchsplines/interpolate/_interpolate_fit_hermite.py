from typing import Sequence, Union

import torch
from torch import Tensor

from ..basis import Basis, basis_derivative, basis_evaluate
from ._solve import _solve


def interpolate_fit_hermite(
    basis: Basis,
    observations: Sequence[Union[Tensor, Sequence[float]]],
    derivative_orders: Sequence[Sequence[int]],
    points: Union[Tensor, Sequence[float]],
) -> Tensor:
    """
    Fit spline coefficients to mixed value and derivative observations.

    Parameters
    ----------
    basis : Basis
        Basis to fit in.
    observations : sequence
        ``observations[j]`` holds the observations at ``points[j]``, one per
        entry of ``derivative_orders[j]``. Each observation is a scalar or a
        tensor of shape ``value_shape``.
    derivative_orders : sequence of sequence of int
        ``derivative_orders[j][m]`` is the derivative order of
        ``observations[j][m]``. Order 0 is a plain value.
    points : Tensor
        Observation locations, shape (n_points,).

    Returns
    -------
    coefficients : Tensor
        Shape (dim,) or (dim, *value_shape).

    Raises
    ------
    ValueError
        If the three inputs disagree in length, or an observation and its
        derivative orders disagree in length.
    OrderError
        If a derivative order is not below the basis order.

    Notes
    -----
    An observation of derivative order ``d`` at ``x`` contributes the row
    ``basis_evaluate(D_d, x) @ T_d`` to the collocation matrix, where
    ``(D_d, T_d) = basis_derivative(basis, d)``. All rows are solved in one
    least-squares problem.
    """
    knots = basis.knots

    points = torch.as_tensor(
        points, dtype=knots.dtype, device=knots.device
    ).reshape(-1)

    if len(observations) != points.shape[0]:
        raise ValueError(
            f"Got {len(observations)} observation groups for "
            f"{points.shape[0]} points"
        )

    if len(derivative_orders) != points.shape[0]:
        raise ValueError(
            f"Got {len(derivative_orders)} derivative order groups for "
            f"{points.shape[0]} points"
        )

    transforms = {}
    rows = []
    values = []

    for j, (group, orders) in enumerate(zip(observations, derivative_orders)):
        group = torch.as_tensor(group, dtype=knots.dtype, device=knots.device)

        if group.dim() == 0:
            group = group.unsqueeze(0)

        if group.shape[0] != len(orders):
            raise ValueError(
                f"Point {j} has {group.shape[0]} observations but "
                f"{len(orders)} derivative orders"
            )

        for m, order in enumerate(orders):
            order = int(order)

            if order not in transforms:
                transforms[order] = basis_derivative(basis, order)

            derivative, transform = transforms[order]

            rows.append(basis_evaluate(derivative, points[j]) @ transform)
            values.append(group[m])

    return _solve(torch.stack(rows), torch.stack(values))
