"""Splines as coefficient-weighted B-spline bases.

Data Types
----------
Spline
    Knots, order and coefficients.

Construction
------------
spline
    Create a spline from a basis and coefficients.
spline_basis
    Basis of a spline.
spline_fit
    Fit a spline to observations.
spline_fit_process
    Fit a spline to a function sampled at the Greville sites.

Evaluation
----------
spline_evaluate
    Evaluate a spline at query points.

Arithmetic
----------
spline_negate
    Negate a spline.
spline_scale
    Multiply a spline by a scalar.
spline_add
    Add two splines.
spline_subtract
    Subtract two splines.
spline_multiply
    Multiply two splines.

Calculus
--------
spline_derivative
    Derivative of a spline.
spline_integral
    Antiderivative of a spline.

Refinement
----------
spline_insert_knots
    Insert knots keeping the function.
spline_order_elevation
    Raise the order keeping the function.
spline_segment
    Restrict to a range of segments.
spline_clamped
    Equivalent spline on a clamped basis.
"""

from ._spline import Spline, spline, spline_basis
from ._spline_add import spline_add
from ._spline_clamped import spline_clamped
from ._spline_derivative import spline_derivative
from ._spline_evaluate import spline_evaluate
from ._spline_fit import spline_fit, spline_fit_process
from ._spline_insert_knots import spline_insert_knots
from ._spline_integral import spline_integral
from ._spline_multiply import spline_multiply
from ._spline_negate import spline_negate
from ._spline_order_elevation import spline_order_elevation
from ._spline_scale import spline_scale
from ._spline_segment import spline_segment
from ._spline_subtract import spline_subtract

__all__ = [
    "Spline",
    "spline",
    "spline_add",
    "spline_basis",
    "spline_clamped",
    "spline_derivative",
    "spline_evaluate",
    "spline_fit",
    "spline_fit_process",
    "spline_insert_knots",
    "spline_integral",
    "spline_multiply",
    "spline_negate",
    "spline_order_elevation",
    "spline_scale",
    "spline_segment",
    "spline_subtract",
]
