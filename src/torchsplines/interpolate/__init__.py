"""Least-squares fitting of spline coefficients.

Functions
---------
interpolate_fit
    Fit coefficients to observations at given points.
interpolate_fit_process
    Fit coefficients to a function sampled at the Greville sites.
interpolate_fit_hermite
    Fit coefficients to mixed value and derivative observations.
"""

from ._interpolate_fit import interpolate_fit
from ._interpolate_fit_hermite import interpolate_fit_hermite
from ._interpolate_fit_process import interpolate_fit_process

__all__ = [
    "interpolate_fit",
    "interpolate_fit_hermite",
    "interpolate_fit_process",
]
