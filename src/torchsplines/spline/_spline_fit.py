from typing import Callable, Sequence, Union

from torch import Tensor

from ..basis import Basis
from ..interpolate import interpolate_fit, interpolate_fit_process
from ._spline import Spline


def spline_fit(
    basis: Basis,
    observations: Union[Tensor, Sequence[float]],
    points: Union[Tensor, Sequence[float]],
) -> Spline:
    """
    Fit a spline to observations by least squares.

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
    Spline
        Fitted spline.

    Examples
    --------
    >>> b = basis([0.0, 0.0, 0.0, 0.5, 1.0, 1.0, 1.0], 3)
    >>> x = torch.linspace(0, 1, 11, dtype=torch.float64)
    >>> s = spline_fit(b, x**2, x)
    """
    return Spline(
        knots=basis.knots,
        coefficients=interpolate_fit(basis, observations, points),
        order=int(basis.order),
        batch_size=[],
    )


def spline_fit_process(
    basis: Basis,
    process: Callable[[Tensor], Tensor],
) -> Spline:
    """Fit a spline to a function sampled at the Greville sites."""
    return Spline(
        knots=basis.knots,
        coefficients=interpolate_fit_process(basis, process),
        order=int(basis.order),
        batch_size=[],
    )
