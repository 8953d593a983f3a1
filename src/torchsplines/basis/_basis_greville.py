from typing import Optional

from torch import Tensor

from ._basis import Basis


def basis_greville(basis: Basis, i: Optional[int] = None) -> Tensor:
    """
    Greville abscissae (knot averages) of a basis.

    Parameters
    ----------
    basis : Basis
        Input basis.
    i : int, optional
        If specified, return only the site of the i-th basis function.

    Returns
    -------
    sites : Tensor
        Shape (dim,), or a 0-d tensor when ``i`` is given. For order 1 the
        sites are the knots themselves, shape (dim + 1,).

    Raises
    ------
    IndexError
        If ``i`` is not a valid site index.

    Notes
    -----
    The site of basis function ``i`` is the mean of the ``order - 1`` knots
    ``k_{i+1}, ..., k_{i+order-1}``. Interpolating at these sites is the
    canonical, well-conditioned choice for B-spline fitting.
    """
    knots = basis.knots
    order = int(basis.order)
    dim = knots.shape[0] - order

    if order == 1:
        sites = knots.clone()
    else:
        sites = knots.unfold(0, order - 1, 1)[1 : 1 + dim].mean(dim=-1)

    if i is not None:
        n_sites = sites.shape[0]

        if i < 0 or i >= n_sites:
            raise IndexError(
                f"Site index {i} out of range [0, {n_sites - 1}]"
            )

        return sites[i]

    return sites
