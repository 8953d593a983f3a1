"""B-spline bases defined by a knot vector and an order.

Data Types
----------
Basis
    Knot vector and polynomial order.

Construction
------------
basis
    Create a basis from knots and an order.
basis_from_breakpoints
    Create a basis from breakpoints and continuities.

Properties
----------
basis_dim
    Number of basis functions.
basis_evaluate
    Evaluate every basis function at query points.
basis_greville
    Greville abscissae (knot averages).

Breakpoints
-----------
knots_to_breakpoints
    Convert knots to breakpoints and continuities.
breakpoints_to_knots
    Convert breakpoints and continuities to knots.
basis_breakpoints
    Breakpoints and continuities of a basis.
basis_set_breakpoints
    Replace selected breakpoints.
basis_set_continuities
    Replace selected continuities.

Refinement
----------
basis_combine
    Merge the breakpoints of two bases.
basis_insert_knots
    Insert knots.
basis_order_decrease
    Remove boundary knots and lower the order.
basis_order_increase
    Repeat boundary knots and raise the order.
basis_order_elevation
    Raise the order keeping continuities.
basis_segment
    Restrict to a range of segments.
basis_clamped
    Clamp at the ends of the valid domain.

Transforms
----------
basis_derivative
    Derivative basis and coefficient map.
basis_derivative_coefficients
    Derivative applied directly to coefficients.
basis_integral
    Antiderivative basis and coefficient map.
basis_integral_coefficients
    Antiderivative applied directly to coefficients.
basis_add
    Basis and maps of a spline sum.
basis_prod
    Basis and map of a spline product.
"""

from ._basis import Basis, basis, basis_from_breakpoints
from ._basis_add import basis_add
from ._basis_breakpoints import basis_breakpoints, knots_to_breakpoints
from ._basis_clamped import basis_clamped
from ._basis_combine import basis_combine
from ._basis_derivative import basis_derivative, basis_derivative_coefficients
from ._basis_dim import basis_dim
from ._basis_evaluate import basis_evaluate
from ._basis_greville import basis_greville
from ._basis_insert_knots import basis_insert_knots
from ._basis_integral import basis_integral, basis_integral_coefficients
from ._basis_order_decrease import basis_order_decrease
from ._basis_order_elevation import basis_order_elevation
from ._basis_order_increase import basis_order_increase
from ._basis_prod import basis_prod
from ._basis_segment import basis_segment
from ._basis_set_breakpoints import basis_set_breakpoints
from ._basis_set_continuities import basis_set_continuities
from ._breakpoints_to_knots import breakpoints_to_knots

__all__ = [
    "Basis",
    "basis",
    "basis_add",
    "basis_breakpoints",
    "basis_clamped",
    "basis_combine",
    "basis_derivative",
    "basis_derivative_coefficients",
    "basis_dim",
    "basis_evaluate",
    "basis_from_breakpoints",
    "basis_greville",
    "basis_insert_knots",
    "basis_integral",
    "basis_integral_coefficients",
    "basis_order_decrease",
    "basis_order_elevation",
    "basis_order_increase",
    "basis_prod",
    "basis_segment",
    "basis_set_breakpoints",
    "basis_set_continuities",
    "breakpoints_to_knots",
    "knots_to_breakpoints",
]
