from .._tolerance import KNOT_TOLERANCE
from ._basis import Basis


def basis_order_elevation(
    basis: Basis,
    n: int = 1,
    tolerance: float = KNOT_TOLERANCE,
) -> Basis:
    """
    Elevate the order of a basis keeping its breakpoints and continuities.

    Parameters
    ----------
    basis : Basis
        Input basis.
    n : int
        Number of orders to add (default 1).
    tolerance : float
        Knot tolerance used to read the breakpoints.

    Returns
    -------
    Basis
        Basis of order ``order + n`` in which every knot multiplicity grew
        by ``n``. Splines on ``basis`` are exactly representable in it.

    Raises
    ------
    ValueError
        If n is negative.

    Notes
    -----
    Unlike ``basis_order_increase``, which only pads the boundary knots,
    elevation raises the multiplicity of every breakpoint so that the
    smoothness at interior breakpoints is unchanged.
    """
    from ._basis_breakpoints import basis_breakpoints
    from ._breakpoints_to_knots import breakpoints_to_knots

    if n < 0:
        raise ValueError(f"Order elevation must be non-negative, got {n}")

    breakpoints, continuities = basis_breakpoints(basis, tolerance)
    order = int(basis.order) + n

    return Basis(
        knots=breakpoints_to_knots(breakpoints, continuities, order),
        order=order,
        batch_size=[],
    )
