import torch
from torch import Tensor


def khatri_rao(a: Tensor, b: Tensor) -> Tensor:
    r"""
    Row-wise Kronecker (Khatri-Rao) product.

    Parameters
    ----------
    a : Tensor
        Matrix of shape (m, p).
    b : Tensor
        Matrix of shape (m, q).

    Returns
    -------
    Tensor
        Matrix of shape (m, p * q) with
        ``out[i, j * q + k] = a[i, j] * b[i, k]``.

    Raises
    ------
    ValueError
        If the inputs are not 2-D or their row counts differ.

    Notes
    -----
    Row ``i`` of the result is ``kron(a[i], b[i])``. Evaluating two bases
    at the same points and taking the Khatri-Rao product gives the values
    of every pairwise product of basis functions, which is how spline
    products are expressed in a combined basis.

    Examples
    --------
    >>> a = torch.tensor([[1.0, 2.0], [3.0, 4.0]])
    >>> b = torch.tensor([[5.0, 6.0], [7.0, 8.0]])
    >>> khatri_rao(a, b)
    tensor([[ 5.,  6., 10., 12.],
            [21., 24., 28., 32.]])
    """
    if a.dim() != 2 or b.dim() != 2:
        raise ValueError(
            f"khatri_rao expects 2-D inputs, got {a.dim()}-D and {b.dim()}-D"
        )

    if a.shape[0] != b.shape[0]:
        raise ValueError(
            f"Row counts must match, got {a.shape[0]} and {b.shape[0]}"
        )

    m = a.shape[0]

    return torch.einsum("ij,ik->ijk", a, b).reshape(
        m, a.shape[1] * b.shape[1]
    )
