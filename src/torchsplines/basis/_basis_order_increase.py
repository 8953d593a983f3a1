import torch

from ._basis import Basis


def basis_order_increase(basis: Basis, n: int = 1) -> Basis:
    """
    Increase the order of a basis by repeating its boundary knots.

    Parameters
    ----------
    basis : Basis
        Input basis.
    n : int
        Number of orders to add (default 1).

    Returns
    -------
    Basis
        Basis of order ``order + n`` whose first and last knots appear
        ``n`` more times. This is the basis of the n-th integral of splines
        on ``basis``.

    Raises
    ------
    ValueError
        If n is negative.
    """
    if n < 0:
        raise ValueError(f"Order increase must be non-negative, got {n}")

    knots = basis.knots

    if n == 0:
        return Basis(
            knots=knots.clone(), order=int(basis.order), batch_size=[]
        )

    increased = Basis(
        knots=torch.cat([knots[:1], knots, knots[-1:]]),
        order=int(basis.order) + 1,
        batch_size=[],
    )

    return basis_order_increase(increased, n - 1)
