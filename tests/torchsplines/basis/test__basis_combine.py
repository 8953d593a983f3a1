"""Tests for combining bases and inserting knots."""

import torch


def _knots(*values):
    return torch.tensor(values, dtype=torch.float64)


class TestBasisCombine:
    """Tests for basis_combine."""

    def test_disjoint_breakpoints(self):
        """Interior breakpoints of both bases appear in the result."""
        from torchsplines.basis import basis, basis_combine

        left = basis([0.0, 0.0, 0.0, 0.5, 1.0, 1.0, 1.0], 3)
        right = basis([0.0, 0.0, 0.0, 0.25, 1.0, 1.0, 1.0], 3)

        combined = basis_combine(left, right, 3)

        assert combined.order == 3
        torch.testing.assert_close(
            combined.knots, _knots(0.0, 0.0, 0.0, 0.25, 0.5, 1.0, 1.0, 1.0)
        )

    def test_product_order(self):
        """Continuities are kept when re-expanding at a higher order."""
        from torchsplines.basis import basis, basis_combine

        left = basis([0.0, 0.0, 0.0, 0.5, 1.0, 1.0, 1.0], 3)
        right = basis([0.0, 0.0, 0.0, 0.25, 1.0, 1.0, 1.0], 3)

        combined = basis_combine(left, right, 5)

        expected = _knots(*([0.0] * 5 + [0.25] * 3 + [0.5] * 3 + [1.0] * 5))

        torch.testing.assert_close(combined.knots, expected)

    def test_shared_breakpoint_keeps_larger_multiplicity(self):
        """A shared breakpoint keeps the lower continuity."""
        from torchsplines.basis import basis, basis_combine

        left = basis([0.0, 0.0, 0.0, 0.5, 1.0, 1.0, 1.0], 3)
        right = basis([0.0, 0.0, 0.0, 0.5, 0.5, 1.0, 1.0, 1.0], 3)

        combined = basis_combine(left, right, 3)

        torch.testing.assert_close(
            combined.knots, _knots(0.0, 0.0, 0.0, 0.5, 0.5, 1.0, 1.0, 1.0)
        )

    def test_accuracy(self):
        """Breakpoints closer than the accuracy merge."""
        from torchsplines.basis import basis, basis_combine

        left = basis([0.0, 0.0, 0.5, 1.0, 1.0], 2)
        right = basis([0.0, 0.0, 0.5 + 1e-9, 1.0, 1.0], 2)

        combined = basis_combine(left, right, 2)

        assert combined.knots.shape == (5,)


class TestBasisInsertKnots:
    """Tests for basis_insert_knots."""

    def test_sorted_union(self):
        """Inserted knots are merged in order, duplicates kept."""
        from torchsplines.basis import basis, basis_insert_knots

        b = basis([0.0, 0.0, 0.0, 0.5, 1.0, 1.0, 1.0], 3)

        refined = basis_insert_knots(b, [0.4, 0.5, 0.6])

        assert refined.order == 3
        torch.testing.assert_close(
            refined.knots,
            _knots(0.0, 0.0, 0.0, 0.4, 0.5, 0.5, 0.6, 1.0, 1.0, 1.0),
        )

    def test_input_unchanged(self):
        """The input basis keeps its knots."""
        from torchsplines.basis import basis, basis_insert_knots

        b = basis([0.0, 0.0, 1.0, 1.0], 2)

        basis_insert_knots(b, [0.5])

        torch.testing.assert_close(b.knots, _knots(0.0, 0.0, 1.0, 1.0))
