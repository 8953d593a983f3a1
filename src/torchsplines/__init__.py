"""torchsplines: B-spline bases and splines for PyTorch tensors.

Subpackages
-----------
basis
    Knot vectors, breakpoints, evaluation and coefficient transforms.
interpolate
    Least-squares fitting of spline coefficients.
spline
    Spline records and their algebra.
linear_algebra
    Khatri-Rao and Kronecker products.

Exceptions
----------
SplineError
    Base exception for basis and spline operations.
InvalidArgumentError
    Rejected breakpoint or continuity edit.
KnotError
    Invalid knot vector.
OrderError
    Invalid order or order change.

Warnings
--------
InterpolationWarning
    Rank deficient collocation matrix.
"""

from . import basis, interpolate, linear_algebra, spline
from ._interpolation_warning import InterpolationWarning
from ._invalid_argument_error import InvalidArgumentError
from ._knot_error import KnotError
from ._order_error import OrderError
from ._spline_error import SplineError

__all__ = [
    "InterpolationWarning",
    "InvalidArgumentError",
    "KnotError",
    "OrderError",
    "SplineError",
    "basis",
    "interpolate",
    "linear_algebra",
    "spline",
]

__version__ = "0.1.0"
