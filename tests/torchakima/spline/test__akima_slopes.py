"""Tests for Akima first-derivative estimation."""

import math

import pytest
import torch


class TestThreePointDerivative:
    def test_quadratic_at_samples(self):
        """Test exact derivatives of a quadratic at the sample points."""
        from torchakima.spline import three_point_derivative

        x = torch.tensor([0.0, 1.0, 3.0], dtype=torch.float64)
        y = 3 * x**2 - 2 * x + 1  # y' = 6x - 2

        for i in range(3):
            d = three_point_derivative(x, y, i, 0, 1, 2)
            torch.testing.assert_close(
                d, 6 * x[i] - 2, atol=1e-12, rtol=1e-12
            )

    def test_quadratic_away_from_samples(self):
        """Test evaluation at a knot that is not one of the samples."""
        from torchakima.spline import three_point_derivative

        x = torch.tensor([0.0, 1.0, 3.0, 4.0, 6.0], dtype=torch.float64)
        y = 3 * x**2 - 2 * x + 1

        d = three_point_derivative(x, y, 3, 0, 1, 2)

        torch.testing.assert_close(
            d, torch.tensor(22.0, dtype=torch.float64), atol=1e-12, rtol=1e-12
        )

    def test_multidimensional_values(self):
        """Test that value dimensions are differentiated independently."""
        from torchakima.spline import three_point_derivative

        x = torch.tensor([0.0, 0.5, 2.0], dtype=torch.float64)
        y = torch.stack([x**2, -x], dim=-1)

        d = three_point_derivative(x, y, 2, 0, 1, 2)

        torch.testing.assert_close(
            d, torch.tensor([4.0, -1.0], dtype=torch.float64)
        )


class TestAkimaSlopes:
    def test_linear_data(self):
        """Test that linear data gets its constant slope everywhere."""
        from torchakima.spline import akima_slopes

        x = torch.tensor([0.0, 0.3, 1.0, 1.7, 2.0, 4.0], dtype=torch.float64)
        y = 2 * x + 1

        slopes = akima_slopes(x, y)

        torch.testing.assert_close(
            slopes, torch.full_like(x, 2.0), atol=1e-12, rtol=1e-12
        )

    def test_quadratic_uniform_grid(self):
        """Test that slopes of x^2 on a uniform grid are exact."""
        from torchakima.spline import akima_slopes

        x = torch.linspace(0, 2, 9, dtype=torch.float64)
        y = x**2

        slopes = akima_slopes(x, y)

        torch.testing.assert_close(slopes, 2 * x, atol=1e-12, rtol=1e-12)

    def test_weighted_and_flat_regions(self):
        """Test the weighted average next to a kink and the flat fallback."""
        from torchakima.spline import akima_slopes

        x = torch.arange(7, dtype=torch.float64)
        y = torch.tensor([0.0, 0.0, 0.0, 0.0, 1.0, 2.0, 3.0], dtype=torch.float64)

        slopes = akima_slopes(x, y)

        expected = torch.tensor(
            [0.0, 0.0, 0.0, 0.5, 1.0, 1.0, 1.0], dtype=torch.float64
        )
        torch.testing.assert_close(slopes, expected, atol=1e-12, rtol=1e-12)

    def test_flat_region_uses_distance_weights(self):
        """Test that the flat fallback weights secants by interval width."""
        from torchakima.spline import akima_slopes

        x = torch.tensor([0.0, 1.0, 2.0, 3.0, 5.0, 6.0, 7.0], dtype=torch.float64)
        y = torch.tensor([0.0, 0.0, 0.0, 0.0, 2.0, 3.0, 4.0], dtype=torch.float64)

        slopes = akima_slopes(x, y)

        # Knot 3 blends secants 0 and 1 with weights 2/3 and 1/3
        expected = torch.tensor(
            [0.0, 0.0, 0.0, 1.0 / 3.0, 1.0, 1.0, 1.0], dtype=torch.float64
        )
        torch.testing.assert_close(slopes, expected, atol=1e-12, rtol=1e-12)

    def test_five_points(self):
        """Test the smallest supported input."""
        from torchakima.spline import akima_slopes

        x = torch.linspace(0, 1, 5, dtype=torch.float64)
        y = torch.sin(x * math.pi)

        slopes = akima_slopes(x, y)

        assert slopes.shape == (5,)
        assert torch.all(torch.isfinite(slopes))

    def test_multidimensional_values(self):
        """Test that each value channel matches a separate estimate."""
        from torchakima.spline import akima_slopes

        x = torch.tensor([0.0, 1.0, 2.0, 3.0, 5.0, 6.0, 7.0], dtype=torch.float64)
        y0 = torch.tensor([0.0, 0.0, 0.0, 0.0, 2.0, 3.0, 4.0], dtype=torch.float64)
        y1 = torch.cos(x)

        slopes = akima_slopes(x, torch.stack([y0, y1], dim=-1))

        assert slopes.shape == (7, 2)
        torch.testing.assert_close(slopes[:, 0], akima_slopes(x, y0))
        torch.testing.assert_close(slopes[:, 1], akima_slopes(x, y1))

    def test_scipy_comparison_interior(self):
        """Test interior slopes against scipy.interpolate.Akima1DInterpolator."""
        pytest.importorskip("scipy")
        from scipy.interpolate import Akima1DInterpolator

        from torchakima.spline import akima_slopes

        x = torch.tensor(
            [0.0, 0.4, 1.1, 1.5, 2.6, 3.0, 3.9, 4.8, 5.2, 6.0],
            dtype=torch.float64,
        )
        y = torch.sin(x) + 0.1 * x**2

        slopes = akima_slopes(x, y)

        reference = Akima1DInterpolator(x.numpy(), y.numpy())
        expected = torch.from_numpy(reference(x.numpy(), 1))

        # Boundary handling differs; interior knots 2..n-3 use the same rule
        torch.testing.assert_close(
            slopes[2:-2], expected[2:-2], atol=1e-10, rtol=1e-10
        )
