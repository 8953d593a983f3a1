"""Tests for least-squares fitting of spline coefficients."""

import pytest
import torch

KNOTS = [0.0, 0.0, 0.0, 0.5, 0.5, 1.0, 1.0, 1.0]


class TestInterpolateFit:
    """Tests for interpolate_fit."""

    def test_recovers_coefficients(self):
        """Fitting sampled spline values recovers the coefficients."""
        from torchsplines.basis import basis, basis_evaluate
        from torchsplines.interpolate import interpolate_fit

        b = basis(KNOTS, 3)
        coefficients = torch.tensor(
            [[0.5, -1.0], [1.0, 0.0], [-0.25, 2.0], [0.0, 1.0], [1.5, -0.5]],
            dtype=torch.float64,
        )

        points = torch.linspace(0.0, 1.0, 21, dtype=torch.float64)
        observations = basis_evaluate(b, points) @ coefficients

        torch.testing.assert_close(
            interpolate_fit(b, observations, points), coefficients
        )

    def test_vector_observations(self):
        """1-D observations give 1-D coefficients."""
        from torchsplines.basis import basis
        from torchsplines.interpolate import interpolate_fit

        b = basis([0.0, 0.0, 0.5, 1.0, 1.0], 2)

        result = interpolate_fit(b, [0.0, 1.0, 0.25], [0.0, 0.5, 1.0])

        torch.testing.assert_close(
            result, torch.tensor([0.0, 1.0, 0.25], dtype=torch.float64)
        )

    def test_polynomial_least_squares(self):
        """A polynomial of lower degree is reproduced from noisy-free data."""
        from torchsplines.basis import basis, basis_evaluate
        from torchsplines.interpolate import interpolate_fit

        b = basis(KNOTS, 3)
        points = torch.linspace(0.0, 1.0, 50, dtype=torch.float64)

        coefficients = interpolate_fit(b, 1.0 - points**2, points)

        torch.testing.assert_close(
            basis_evaluate(b, points) @ coefficients, 1.0 - points**2
        )

    def test_count_mismatch_raises(self):
        """Observation rows must match the number of points."""
        from torchsplines.basis import basis
        from torchsplines.interpolate import interpolate_fit

        with pytest.raises(ValueError):
            interpolate_fit(basis(KNOTS, 3), [0.0, 1.0], [0.0, 0.5, 1.0])

    def test_rank_deficient_warns(self):
        """Too few points warn but still return a solution."""
        from torchsplines import InterpolationWarning
        from torchsplines.basis import basis
        from torchsplines.interpolate import interpolate_fit

        b = basis(KNOTS, 3)

        with pytest.warns(InterpolationWarning):
            result = interpolate_fit(b, [1.0, 2.0], [0.0, 1.0])

        assert result.shape == (5,)


class TestInterpolateFitProcess:
    """Tests for interpolate_fit_process."""

    def test_quadratic(self):
        """A quadratic is reproduced exactly by an order 3 basis."""
        from torchsplines.basis import basis, basis_evaluate
        from torchsplines.interpolate import interpolate_fit_process

        b = basis(KNOTS, 3)

        coefficients = interpolate_fit_process(b, lambda x: 3.0 * x**2 - x)

        points = torch.linspace(0.0, 1.0, 11, dtype=torch.float64)

        torch.testing.assert_close(
            basis_evaluate(b, points) @ coefficients, 3.0 * points**2 - points
        )

    def test_vector_valued_process(self):
        """Processes may return several outputs per site."""
        from torchsplines.basis import basis
        from torchsplines.interpolate import interpolate_fit_process

        b = basis(KNOTS, 3)

        coefficients = interpolate_fit_process(
            b, lambda x: torch.stack([x, 1.0 - x], dim=-1)
        )

        assert coefficients.shape == (5, 2)


class TestInterpolateFitHermite:
    """Tests for interpolate_fit_hermite."""

    def test_values_and_first_derivatives(self):
        """Values and slopes at the breakpoints recover a cubic spline."""
        from torchsplines.basis import (
            basis,
            basis_derivative_coefficients,
            basis_evaluate,
        )
        from torchsplines.interpolate import interpolate_fit_hermite

        b = basis([0.0, 0.0, 0.0, 0.0, 0.5, 1.0, 1.0, 1.0, 1.0], 4)
        coefficients = torch.tensor(
            [0.0, 1.0, -0.5, 0.25, 2.0], dtype=torch.float64
        )

        derivative, derivative_coefficients = basis_derivative_coefficients(
            b, coefficients
        )

        points = torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)

        values = basis_evaluate(b, points) @ coefficients
        slopes = basis_evaluate(derivative, points) @ derivative_coefficients

        observations = [
            torch.stack([values[j], slopes[j]]) for j in range(3)
        ]

        result = interpolate_fit_hermite(
            b, observations, [[0, 1], [0, 1], [0, 1]], points
        )

        torch.testing.assert_close(result, coefficients)

    def test_values_only_matches_fit(self):
        """With only order 0 observations it is a plain fit."""
        from torchsplines.basis import basis
        from torchsplines.interpolate import (
            interpolate_fit,
            interpolate_fit_hermite,
        )

        b = basis([0.0, 0.0, 0.5, 1.0, 1.0], 2)
        points = torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)

        result = interpolate_fit_hermite(
            b, [[0.0], [1.0], [0.25]], [[0], [0], [0]], points
        )

        torch.testing.assert_close(
            result, interpolate_fit(b, [0.0, 1.0, 0.25], points)
        )

    def test_mismatched_group_raises(self):
        """Each observation needs a derivative order."""
        from torchsplines.basis import basis
        from torchsplines.interpolate import interpolate_fit_hermite

        b = basis([0.0, 0.0, 0.5, 1.0, 1.0], 2)

        with pytest.raises(ValueError):
            interpolate_fit_hermite(
                b, [[0.0, 1.0], [1.0], [0.25]], [[0], [0], [0]], [0.0, 0.5, 1.0]
            )
