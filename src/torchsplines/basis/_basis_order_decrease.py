from .._order_error import OrderError
from ._basis import Basis


def basis_order_decrease(basis: Basis, n: int = 1) -> Basis:
    """
    Decrease the order of a basis by removing boundary knots.

    Parameters
    ----------
    basis : Basis
        Input basis.
    n : int
        Number of orders to remove (default 1).

    Returns
    -------
    Basis
        Basis of order ``order - n`` on ``knots[n:-n]``. This is the basis
        of the n-th derivative of splines on ``basis``.

    Raises
    ------
    ValueError
        If n is negative.
    OrderError
        If the result would have order below 1 or no basis function.
    """
    if n < 0:
        raise ValueError(f"Order decrease must be non-negative, got {n}")

    if n == 0:
        return Basis(
            knots=basis.knots.clone(), order=int(basis.order), batch_size=[]
        )

    knots = basis.knots
    order = int(basis.order)

    if order - 1 < 1 or knots.shape[0] - 2 - (order - 1) < 1:
        raise OrderError(
            f"Cannot decrease the order of an order-{order} basis "
            f"with {knots.shape[0]} knots"
        )

    decreased = Basis(
        knots=knots[1:-1].clone(), order=order - 1, batch_size=[]
    )

    return basis_order_decrease(decreased, n - 1)
