from typing import Union

import torch
from torch import Tensor

from ._spline import Spline


def spline_scale(s: Spline, c: Union[Tensor, float]) -> Spline:
    """Multiply a spline by a scalar.

    Parameters
    ----------
    s : Spline
        Spline to scale.
    c : Tensor or float
        Scalar, or a tensor broadcasting with ``value_shape``.

    Returns
    -------
    Spline
        Scaled spline c * s.
    """
    c = torch.as_tensor(
        c, dtype=s.coefficients.dtype, device=s.coefficients.device
    )

    return Spline(
        knots=s.knots,
        coefficients=s.coefficients * c,
        order=int(s.order),
        batch_size=[],
    )
