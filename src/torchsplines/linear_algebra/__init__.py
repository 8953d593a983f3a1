"""Matrix products used to build spline coefficient transforms.

Functions
---------
khatri_rao
    Row-wise Kronecker product of two matrices with equal row counts.
kron
    Kronecker product of two matrices.
"""

from ._khatri_rao import khatri_rao
from ._kron import kron

__all__ = [
    "khatri_rao",
    "kron",
]
