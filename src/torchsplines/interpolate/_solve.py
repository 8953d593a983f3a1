import warnings

import torch
from torch import Tensor

from .._interpolation_warning import InterpolationWarning


def _solve(collocation: Tensor, observations: Tensor) -> Tensor:
    """Least-squares solution of ``collocation @ c = observations``.

    ``observations`` has shape (n_rows,) or (n_rows, *value_shape); the
    solution has shape (n_columns,) or (n_columns, *value_shape).
    """
    n_rows, n_columns = collocation.shape

    if observations.shape[0] != n_rows:
        raise ValueError(
            f"Got {observations.shape[0]} observations for {n_rows} points"
        )

    value_shape = observations.shape[1:]
    rhs = observations.reshape(n_rows, -1).to(dtype=collocation.dtype)

    if collocation.device.type == "cpu":
        # pivoted QR; handles rank deficient and underdetermined systems
        result = torch.linalg.lstsq(collocation, rhs, driver="gelsy")
        solution = result.solution
        rank = int(result.rank)
    else:
        solution = torch.linalg.pinv(collocation) @ rhs
        rank = int(torch.linalg.matrix_rank(collocation))

    if rank < n_columns:
        warnings.warn(
            f"Collocation matrix has rank {rank} for {n_columns} "
            f"coefficients; returning the least-squares solution",
            InterpolationWarning,
            stacklevel=3,
        )

    return solution.reshape(n_columns, *value_shape)
