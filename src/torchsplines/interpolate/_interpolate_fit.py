from typing import Sequence, Union

import torch
from torch import Tensor

from ..basis import Basis, basis_evaluate
from ._solve import _solve


def interpolate_fit(
    basis: Basis,
    observations: Union[Tensor, Sequence[float]],
    points: Union[Tensor, Sequence[float]],
) -> Tensor:
    """
    Fit spline coefficients to observations by least squares.

    Parameters
    ----------
    basis : Basis
        Basis to fit in.
    observations : Tensor
        Values at ``points``, shape (n_points,) or (n_points, *value_shape).
    points : Tensor
        Sample locations, shape (n_points,).

    Returns
    -------
    coefficients : Tensor
        Shape (dim,) or (dim, *value_shape).

    Raises
    ------
    ValueError
        If the number of observations differs from the number of points.

    Warns
    -----
    InterpolationWarning
        If the collocation matrix is rank deficient. The least-squares
        (minimum norm) solution is still returned.

    Notes
    -----
    Solves ``min ||B(points) @ c - observations||^2`` where ``B(points)`` is
    the collocation matrix from ``basis_evaluate``. With ``dim`` distinct
    points inside the support of every basis function the fit interpolates.
    """
    knots = basis.knots

    points = torch.as_tensor(
        points, dtype=knots.dtype, device=knots.device
    ).reshape(-1)
    observations = torch.as_tensor(
        observations, dtype=knots.dtype, device=knots.device
    )

    return _solve(basis_evaluate(basis, points), observations)
