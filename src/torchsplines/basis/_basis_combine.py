import torch

from .._tolerance import KNOT_TOLERANCE
from ._basis import Basis


def basis_combine(
    basis: Basis,
    other: Basis,
    order: int,
    accuracy: float = KNOT_TOLERANCE,
) -> Basis:
    """
    Combine the breakpoints of two bases into a basis of the given order.

    Parameters
    ----------
    basis : Basis
        First basis.
    other : Basis
        Second basis.
    order : int
        Order of the combined basis.
    accuracy : float
        Knots closer than this are treated as equal.

    Returns
    -------
    Basis
        Basis of ``order`` that represents every function of either input
        basis (after order elevation) and their products when
        ``order = basis.order + other.order - 1``.

    Notes
    -----
    Both bases are converted to breakpoints and re-expanded at ``order``
    with their own continuities. The two knot vectors are then merged:
    the smaller knot is taken when the heads differ by more than
    ``accuracy``; otherwise one occurrence is emitted and both cursors
    advance. Once one side is exhausted the rest of the other side is
    appended. A breakpoint shared by both bases therefore keeps the larger
    multiplicity, i.e. the lower continuity.
    """
    from ._basis_breakpoints import basis_breakpoints
    from ._breakpoints_to_knots import breakpoints_to_knots

    breakpoints, continuities = basis_breakpoints(basis, accuracy)
    knots_left = breakpoints_to_knots(breakpoints, continuities, order)

    breakpoints, continuities = basis_breakpoints(other, accuracy)
    knots_right = breakpoints_to_knots(breakpoints, continuities, order)

    left = knots_left.tolist()
    right = knots_right.tolist()

    merged = []
    i = j = 0

    while i < len(left) or j < len(right):
        if j == len(right):
            merged.append(left[i])
            i += 1
        elif i == len(left):
            merged.append(right[j])
            j += 1
        elif left[i] < right[j] - accuracy:
            merged.append(left[i])
            i += 1
        elif right[j] < left[i] - accuracy:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
            j += 1

    knots = torch.tensor(
        merged, dtype=knots_left.dtype, device=knots_left.device
    )

    return Basis(knots=knots, order=order, batch_size=[])
