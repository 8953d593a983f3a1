"""Tests for the Kronecker product."""

import pytest
import torch


class TestKron:
    """Tests for kron."""

    def test_known_values(self):
        """Block (i, j) is a[i, j] * b."""
        from torchsplines.linear_algebra import kron

        a = torch.tensor([[1.0, 2.0], [3.0, 4.0]], dtype=torch.float64)
        b = torch.tensor([[0.0, 1.0], [2.0, 3.0]], dtype=torch.float64)

        expected = torch.tensor(
            [
                [0.0, 1.0, 0.0, 2.0],
                [2.0, 3.0, 4.0, 6.0],
                [0.0, 3.0, 0.0, 4.0],
                [6.0, 9.0, 8.0, 12.0],
            ],
            dtype=torch.float64,
        )

        torch.testing.assert_close(kron(a, b), expected)

    def test_matches_torch_kron(self):
        """Agrees with torch.kron for rectangular inputs."""
        from torchsplines.linear_algebra import kron

        a = torch.rand(2, 3, dtype=torch.float64)
        b = torch.rand(4, 5, dtype=torch.float64)

        result = kron(a, b)

        assert result.shape == (8, 15)
        torch.testing.assert_close(result, torch.kron(a, b))

    def test_empty(self):
        """Empty inputs give an empty product of the right shape."""
        from torchsplines.linear_algebra import kron

        a = torch.zeros(0, 2, dtype=torch.float64)
        b = torch.zeros(3, 4, dtype=torch.float64)

        assert kron(a, b).shape == (0, 8)

    def test_not_2d_raises(self):
        """Vectors raise ValueError."""
        from torchsplines.linear_algebra import kron

        with pytest.raises(ValueError):
            kron(torch.zeros(2), torch.zeros(2, 2))
