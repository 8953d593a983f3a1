from typing import Sequence, Union

import torch
from torch import Tensor

from ..basis import basis_evaluate
from ._spline import Spline, spline_basis


def spline_evaluate(
    s: Spline,
    points: Union[Tensor, Sequence[float], float],
) -> Tensor:
    """
    Evaluate a spline at query points.

    Parameters
    ----------
    s : Spline
        Spline to evaluate.
    points : Tensor
        Query points, shape (*query_shape).

    Returns
    -------
    values : Tensor
        Shape (*query_shape, *value_shape). Points outside the knot range
        evaluate to zero.
    """
    values = basis_evaluate(spline_basis(s), points)

    return torch.tensordot(values, s.coefficients.to(values.dtype), dims=1)
