"""Tests for sum and product maps of two bases."""

import torch

LEFT_KNOTS = [0.0, 0.0, 0.0, 0.5, 1.0, 1.0, 1.0]
RIGHT_KNOTS = [0.0, 0.0, 0.0, 0.0, 0.3, 1.0, 1.0, 1.0, 1.0]


class TestBasisAdd:
    """Tests for basis_add."""

    def test_sum(self):
        """left @ c1 + right @ c2 represents the pointwise sum."""
        from torchsplines.basis import basis, basis_add, basis_evaluate

        left = basis(LEFT_KNOTS, 3)
        right = basis(RIGHT_KNOTS, 4)

        c1 = torch.tensor([0.3, -1.0, 0.5, 2.0], dtype=torch.float64)
        c2 = torch.tensor([1.0, 0.0, -0.5, 0.25, 1.5], dtype=torch.float64)

        combined, map_left, map_right = basis_add(left, right)

        assert combined.order == 4
        assert map_left.shape == (combined.knots.shape[0] - 4, 4)
        assert map_right.shape == (combined.knots.shape[0] - 4, 5)

        points = torch.linspace(0.0, 1.0, 21, dtype=torch.float64)

        torch.testing.assert_close(
            basis_evaluate(combined, points) @ (map_left @ c1 + map_right @ c2),
            basis_evaluate(left, points) @ c1
            + basis_evaluate(right, points) @ c2,
        )


class TestBasisProd:
    """Tests for basis_prod."""

    def test_product_orders_3_and_4(self):
        """transform @ kron(c1, c2) represents the pointwise product."""
        from torchsplines.basis import basis, basis_evaluate, basis_prod
        from torchsplines.linear_algebra import kron

        left = basis(LEFT_KNOTS, 3)
        right = basis(RIGHT_KNOTS, 4)

        c1 = torch.tensor([0.3, -1.0, 0.5, 2.0], dtype=torch.float64)
        c2 = torch.tensor([1.0, 0.0, -0.5, 0.25, 1.5], dtype=torch.float64)

        combined, transform = basis_prod(left, right)

        assert combined.order == 6
        assert transform.shape[1] == 20

        points = torch.linspace(0.0, 1.0, 21, dtype=torch.float64)

        coefficients = transform @ kron(c1[:, None], c2[:, None])

        torch.testing.assert_close(
            (basis_evaluate(combined, points) @ coefficients)[:, 0],
            (basis_evaluate(left, points) @ c1)
            * (basis_evaluate(right, points) @ c2),
        )

    def test_matrix_coefficients(self):
        """Matrix coefficients multiply column by column."""
        from torchsplines.basis import basis, basis_evaluate, basis_prod
        from torchsplines.linear_algebra import khatri_rao

        left = basis(LEFT_KNOTS, 3)
        right = basis([0.0, 0.0, 0.25, 1.0, 1.0], 2)

        c1 = torch.rand(4, 2, dtype=torch.float64)
        c2 = torch.rand(3, 2, dtype=torch.float64)

        combined, transform = basis_prod(left, right)

        # column j of khatri_rao(c1.T, c2.T).T is kron(c1[:, j], c2[:, j])
        coefficients = transform @ khatri_rao(c1.T, c2.T).T

        points = torch.linspace(0.0, 1.0, 21, dtype=torch.float64)

        torch.testing.assert_close(
            basis_evaluate(combined, points) @ coefficients,
            (basis_evaluate(left, points) @ c1)
            * (basis_evaluate(right, points) @ c2),
        )
