from ._basis import Basis


def basis_dim(basis: Basis) -> int:
    """Number of basis functions, ``len(knots) - order``."""
    return basis.knots.shape[0] - int(basis.order)
