"""Tests for Greville abscissae."""

import pytest
import torch


class TestBasisGreville:
    """Tests for basis_greville."""

    def test_order_2(self):
        """Order 2 sites are the interior knots of each hat."""
        from torchsplines.basis import basis, basis_greville

        b = basis([0.0, 0.0, 0.5, 1.0, 1.0], 2)

        torch.testing.assert_close(
            basis_greville(b),
            torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64),
        )

    def test_order_4(self):
        """Order 4 sites average three consecutive knots."""
        from torchsplines.basis import basis, basis_greville

        b = basis([0.0, 0.0, 0.0, 0.0, 0.3, 0.7, 1.0, 1.0, 1.0, 1.0], 4)

        expected = torch.tensor(
            [0.0, 0.1, 1.0 / 3.0, 2.0 / 3.0, 0.9, 1.0], dtype=torch.float64
        )

        torch.testing.assert_close(basis_greville(b), expected)

    def test_order_1(self):
        """Order 1 sites are the knots themselves."""
        from torchsplines.basis import basis, basis_greville

        b = basis([0.0, 0.25, 1.0], 1)

        torch.testing.assert_close(basis_greville(b), b.knots)

    def test_single_site(self):
        """Index i selects one site."""
        from torchsplines.basis import basis, basis_greville

        b = basis([0.0, 0.0, 0.0, 0.0, 0.3, 0.7, 1.0, 1.0, 1.0, 1.0], 4)

        assert basis_greville(b, 2).item() == pytest.approx(1.0 / 3.0)

    def test_order_1_last_site(self):
        """Order 1 has dim + 1 sites and the last one is selectable."""
        from torchsplines.basis import basis, basis_greville

        b = basis([0.0, 0.25, 1.0], 1)

        assert basis_greville(b, 2).item() == pytest.approx(1.0)

        with pytest.raises(IndexError):
            basis_greville(b, 3)

    def test_index_out_of_range_raises(self):
        """Indices outside the sites raise IndexError."""
        from torchsplines.basis import basis, basis_greville

        b = basis([0.0, 0.0, 0.5, 1.0, 1.0], 2)

        with pytest.raises(IndexError):
            basis_greville(b, 3)

        with pytest.raises(IndexError):
            basis_greville(b, -1)
