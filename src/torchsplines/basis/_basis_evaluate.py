from typing import Sequence, Union

import torch
from torch import Tensor

from .._tolerance import DENOMINATOR_TOLERANCE, DOMAIN_TOLERANCE
from ._basis import Basis


def _interval_indicators(
    points: Tensor,
    knots: Tensor,
    domain_tolerance: float,
) -> Tensor:
    knots_left = knots[:-1].unsqueeze(0)
    knots_right = knots[1:].unsqueeze(0)
    x = points.unsqueeze(-1)

    # (k_i, k_{i+1}], with slack at the two global boundary knots
    at_first = knots_left == knots[0]
    at_last = knots_right == knots[-1]

    above_left = torch.where(
        at_first, x >= knots_left - domain_tolerance, x > knots_left
    )
    below_right = torch.where(
        at_last, x <= knots_right + domain_tolerance, x <= knots_right
    )

    nonempty = knots_right > knots_left

    return (above_left & below_right & nonempty).to(dtype=knots.dtype)


def basis_evaluate(
    basis: Basis,
    points: Union[Tensor, Sequence[float], float],
    denominator_tolerance: float = DENOMINATOR_TOLERANCE,
    domain_tolerance: float = DOMAIN_TOLERANCE,
) -> Tensor:
    """
    Evaluate all basis functions using the Cox-de Boor recurrence.

    Parameters
    ----------
    basis : Basis
        Basis to evaluate.
    points : Tensor
        Evaluation points, shape (*query_shape).
    denominator_tolerance : float
        Knot spans with width at or below this value contribute zero.
    domain_tolerance : float
        Points within this distance outside the first or last knot are
        treated as lying on it.

    Returns
    -------
    values : Tensor
        Shape (*query_shape, dim). Row ``p`` holds the value of every basis
        function at ``points[p]`` in knot-span order.

    Notes
    -----
    Order 1 values are indicators of the half-open knot intervals
    ``(k_i, k_{i+1}]``. Intervals starting at the first knot are closed on
    the left and intervals ending at the last knot extend to it, so both
    domain ends evaluate correctly. Zero-width intervals are never active.

    For order ``o > 1``:

        B_{i,o}(x) = (x - k_i) / (k_{i+o-1} - k_i) * B_{i,o-1}(x)
                   + (k_{i+o} - x) / (k_{i+o} - k_{i+1}) * B_{i+1,o-1}(x)

    A weight whose denominator is at most ``denominator_tolerance`` in
    magnitude is zero. Points outside the knot range evaluate to zero.
    """
    knots = basis.knots
    order = int(basis.order)
    n_knots = knots.shape[0]

    points = torch.as_tensor(points, dtype=knots.dtype, device=knots.device)

    is_scalar = points.dim() == 0
    if is_scalar:
        points = points.unsqueeze(0)

    query_shape = points.shape
    x = points.reshape(-1, 1)

    values = _interval_indicators(points.reshape(-1), knots, domain_tolerance)

    for k in range(2, order + 1):
        n = n_knots - k

        denominator_left = knots[k - 1 : k - 1 + n] - knots[:n]
        denominator_right = knots[k : k + n] - knots[1 : 1 + n]

        valid_left = denominator_left.abs() > denominator_tolerance
        valid_right = denominator_right.abs() > denominator_tolerance

        weight_left = torch.where(
            valid_left,
            (x - knots[:n])
            / torch.where(valid_left, denominator_left, 1.0),
            0.0,
        )
        weight_right = torch.where(
            valid_right,
            (knots[k : k + n] - x)
            / torch.where(valid_right, denominator_right, 1.0),
            0.0,
        )

        values = weight_left * values[:, :n] + weight_right * values[:, 1:]

    result = values.reshape(*query_shape, n_knots - order)

    if is_scalar:
        result = result.squeeze(0)

    return result
