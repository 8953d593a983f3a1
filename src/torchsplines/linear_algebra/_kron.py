import torch
from torch import Tensor


def kron(a: Tensor, b: Tensor) -> Tensor:
    r"""
    Kronecker product of two matrices.

    Parameters
    ----------
    a : Tensor
        Matrix of shape (m, n).
    b : Tensor
        Matrix of shape (p, q).

    Returns
    -------
    Tensor
        Matrix of shape (m * p, n * q) with
        ``out[i * p + k, j * q + l] = a[i, j] * b[k, l]``.

    Raises
    ------
    ValueError
        If the inputs are not 2-D.
    """
    if a.dim() != 2 or b.dim() != 2:
        raise ValueError(
            f"kron expects 2-D inputs, got {a.dim()}-D and {b.dim()}-D"
        )

    m, n = a.shape
    p, q = b.shape

    return torch.einsum("ij,kl->ikjl", a, b).reshape(m * p, n * q)
