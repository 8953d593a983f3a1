from typing import Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._knot_error import KnotError
from .._order_error import OrderError


@tensorclass
class Basis:
    """B-spline basis defined by a knot vector and an order.

    Attributes
    ----------
    knots : Tensor
        Knot vector, shape (n_knots,). Non-decreasing.
    order : int
        Polynomial order (degree + 1). The basis has
        ``n_knots - order`` functions.

    Examples
    --------
    Clamped quadratic basis with a double knot at 0.5:
        basis(torch.tensor([0.0, 0.0, 0.0, 0.5, 0.5, 1.0, 1.0, 1.0]), 3)

    Evaluation:
        b(x)     # basis_evaluate(b, x)
    """

    knots: Tensor
    order: int

    def __call__(self, points: Tensor) -> Tensor:
        from ._basis_evaluate import basis_evaluate

        return basis_evaluate(self, points)


def _as_knots(knots: Union[Tensor, Sequence[float]]) -> Tensor:
    if not isinstance(knots, Tensor):
        return torch.as_tensor(knots, dtype=torch.float64)

    if not knots.is_floating_point():
        knots = knots.to(torch.float64)

    return knots


def basis(knots: Union[Tensor, Sequence[float]], order: int) -> Basis:
    """Create a basis from a knot vector and an order.

    Parameters
    ----------
    knots : Tensor or sequence of float
        Non-decreasing knot vector. Integer input is converted to float64.
    order : int
        Polynomial order (degree + 1), at least 1.

    Returns
    -------
    Basis
        Basis instance.

    Raises
    ------
    KnotError
        If knots are not 1-D or not non-decreasing.
    OrderError
        If order is below 1 or leaves no basis function.

    Examples
    --------
    >>> b = basis([0.0, 0.0, 0.5, 1.0, 1.0], 2)
    >>> b.knots.shape
    torch.Size([5])
    """
    knots = _as_knots(knots)

    if knots.dim() != 1:
        raise KnotError(f"Knots must be 1-D, got shape {tuple(knots.shape)}")

    if knots.shape[0] == 0:
        raise KnotError("Knots must not be empty")

    if not torch.all(knots[1:] >= knots[:-1]):
        raise KnotError("Knots must be non-decreasing")

    order = int(order)

    if order < 1:
        raise OrderError(f"Order must be at least 1, got {order}")

    if knots.shape[0] - order < 1:
        raise OrderError(
            f"Need at least {order + 1} knots for order {order}, "
            f"got {knots.shape[0]}"
        )

    return Basis(knots=knots, order=order, batch_size=[])


def basis_from_breakpoints(
    breakpoints: Union[Tensor, Sequence[float]],
    continuities: Union[Tensor, Sequence[int]],
    order: int,
) -> Basis:
    """Create a basis from breakpoints and continuities.

    Parameters
    ----------
    breakpoints : Tensor or sequence of float
        Strictly increasing breakpoint locations.
    continuities : Tensor or sequence of int
        Continuity at each breakpoint. A breakpoint with continuity ``c``
        becomes a knot of multiplicity ``order - c``.
    order : int
        Polynomial order.

    Returns
    -------
    Basis
        Basis whose knots are ``breakpoints_to_knots(...)``.

    Raises
    ------
    InvalidArgumentError
        If breakpoints and continuities disagree in length or a
        continuity is at least ``order``.
    """
    from ._breakpoints_to_knots import breakpoints_to_knots

    return basis(
        breakpoints_to_knots(_as_knots(breakpoints), continuities, order),
        order,
    )
