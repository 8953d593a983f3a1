from typing import Callable

from torch import Tensor

from ..basis import Basis, basis_greville
from ._interpolate_fit import interpolate_fit


def interpolate_fit_process(
    basis: Basis,
    process: Callable[[Tensor], Tensor],
) -> Tensor:
    """
    Fit spline coefficients to a function sampled at the Greville sites.

    Parameters
    ----------
    basis : Basis
        Basis to fit in.
    process : callable
        Maps sites of shape (n_sites,) to values of shape (n_sites,) or
        (n_sites, *value_shape).

    Returns
    -------
    coefficients : Tensor
        Shape (dim,) or (dim, *value_shape).
    """
    sites = basis_greville(basis)

    return interpolate_fit(basis, process(sites), sites)
