from typing import Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ..basis import Basis


@tensorclass
class Spline:
    """Spline as a coefficient-weighted B-spline basis.

    Attributes
    ----------
    knots : Tensor
        Knot vector of the basis, shape (n_knots,). Non-decreasing.
    coefficients : Tensor
        Coefficients, shape (dim,) or (dim, *value_shape) where
        ``dim = n_knots - order``.
    order : int
        Polynomial order (degree + 1).

    Examples
    --------
    Piecewise linear spline through (0, 0), (0.5, 1), (1, 0.25):
        spline(basis([0.0, 0.0, 0.5, 1.0, 1.0], 2), [0.0, 1.0, 0.25])

    Operator overloading:
        s + t    # spline_add(s, t)
        s - t    # spline_subtract(s, t)
        s * t    # spline_multiply(s, t)
        s * 2.0  # spline_scale(s, 2.0)
        -s       # spline_negate(s)
        s(x)     # spline_evaluate(s, x)
    """

    knots: Tensor
    coefficients: Tensor
    order: int

    def __add__(self, other: "Spline") -> "Spline":
        from ._spline_add import spline_add

        return spline_add(self, other)

    def __sub__(self, other: "Spline") -> "Spline":
        from ._spline_subtract import spline_subtract

        return spline_subtract(self, other)

    def __mul__(self, other: Union["Spline", Tensor, float]) -> "Spline":
        from ._spline_multiply import spline_multiply
        from ._spline_scale import spline_scale

        if isinstance(other, Spline):
            return spline_multiply(self, other)
        return spline_scale(self, other)

    def __rmul__(self, other: Union["Spline", Tensor, float]) -> "Spline":
        from ._spline_multiply import spline_multiply
        from ._spline_scale import spline_scale

        if isinstance(other, Spline):
            return spline_multiply(other, self)
        return spline_scale(self, other)

    def __neg__(self) -> "Spline":
        from ._spline_negate import spline_negate

        return spline_negate(self)

    def __call__(self, points: Tensor) -> Tensor:
        from ._spline_evaluate import spline_evaluate

        return spline_evaluate(self, points)


def spline(
    basis: Basis,
    coefficients: Union[Tensor, Sequence[float]],
) -> Spline:
    """Create a spline from a basis and coefficients.

    Parameters
    ----------
    basis : Basis
        Spline basis.
    coefficients : Tensor or sequence of float
        Shape (dim,) or (dim, *value_shape).

    Returns
    -------
    Spline
        Spline instance.

    Raises
    ------
    ValueError
        If the number of coefficient rows differs from the basis dimension.

    Examples
    --------
    >>> b = basis([0.0, 0.0, 0.5, 1.0, 1.0], 2)
    >>> s = spline(b, [0.0, 1.0, 0.25])
    >>> s(torch.tensor([0.25]))
    tensor([0.5000], dtype=torch.float64)
    """
    knots = basis.knots

    if isinstance(coefficients, Tensor):
        coefficients = coefficients.to(knots.device)
    else:
        coefficients = torch.as_tensor(
            coefficients, dtype=knots.dtype, device=knots.device
        )

    if not coefficients.is_floating_point():
        coefficients = coefficients.to(knots.dtype)

    dim = knots.shape[0] - int(basis.order)

    if coefficients.dim() == 0 or coefficients.shape[0] != dim:
        raise ValueError(
            f"Expected {dim} coefficient rows for the basis, got shape "
            f"{tuple(coefficients.shape)}"
        )

    return Spline(
        knots=knots,
        coefficients=coefficients,
        order=int(basis.order),
        batch_size=[],
    )


def spline_basis(s: Spline) -> Basis:
    """Basis of a spline."""
    return Basis(knots=s.knots, order=int(s.order), batch_size=[])
