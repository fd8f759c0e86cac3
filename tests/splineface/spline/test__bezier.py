"""Tests for the Bernstein-form Bezier curve evaluator."""

import hypothesis
import pytest
import torch

from splineface.spline import (
    DegreeError,
    ExtrapolationError,
    bezier,
    bezier_spline,
    bezier_spline_evaluate,
)
from splineface.testing.strategies import control_points, unit_interval


@pytest.fixture
def arch():
    return torch.tensor([[0.0, 0.0, 0.0], [1.0, 1.0, 0.0], [2.0, 0.0, 0.0]])


class TestBezier:
    """Tests for bezier function."""

    def test_returns_callable(self, arch):
        curve = bezier(arch)

        assert callable(curve)

    def test_endpoints(self, arch):
        """Curve starts at the first and ends at the last control point."""
        curve = bezier(arch)

        torch.testing.assert_close(curve(0.0), torch.tensor([0.0, 0.0, 0.0]))
        torch.testing.assert_close(curve(1.0), torch.tensor([2.0, 0.0, 0.0]))

    def test_midpoint(self, arch):
        """C(0.5) = 0.25 P0 + 0.5 P1 + 0.25 P2 = (1, 0.5, 0)."""
        point = bezier(arch)(0.5)

        assert 0.9 < point[0].item() < 1.1
        assert 0.4 < point[1].item() < 0.6
        torch.testing.assert_close(point, torch.tensor([1.0, 0.5, 0.0]))

    def test_linear_is_interpolation(self):
        curve = bezier(torch.tensor([[0.0], [1.0]]))

        u = torch.tensor([0.0, 0.25, 0.5, 0.75, 1.0])
        torch.testing.assert_close(curve(u), u.unsqueeze(-1))

    def test_single_control_point_is_constant(self):
        curve = bezier(torch.tensor([[1.0, 2.0, 3.0]]))

        u = torch.tensor([0.0, 0.3, 1.0])
        torch.testing.assert_close(
            curve(u), torch.tensor([[1.0, 2.0, 3.0]]).expand(3, 3)
        )

    def test_batch_query(self, arch):
        """Output shape is (*query_shape, *value_shape)."""
        curve = bezier(arch)

        u = torch.tensor([[0.0, 0.5], [0.75, 1.0]])
        assert curve(u).shape == (2, 2, 3)

    def test_scalar_valued_control_points(self):
        curve = bezier(torch.tensor([0.0, 1.0, 0.0]))

        torch.testing.assert_close(curve(0.5), torch.tensor(0.5))

    def test_repeated_evaluation_is_bit_identical(self, arch):
        curve = bezier(arch)
        u = torch.linspace(0, 1, 9)

        first = curve(u)
        for _ in range(3):
            assert torch.equal(curve(u), first)

    def test_does_not_modify_control_points(self, arch):
        original = arch.clone()

        bezier(arch)(torch.linspace(0, 1, 5))

        assert torch.equal(arch, original)

    def test_ignores_later_mutation(self, arch):
        """The curve evaluates the control points given at creation."""
        curve = bezier(arch)
        expected = arch[-1].clone()

        arch[-1, 0] = 10.0

        torch.testing.assert_close(curve(1.0), expected)

    @hypothesis.given(points=control_points(), u=unit_interval())
    def test_agrees_with_de_casteljau(self, points, u):
        """Bernstein form and De Casteljau give the same point."""
        expected = bezier_spline_evaluate(bezier_spline(points), u)[:3]

        torch.testing.assert_close(
            bezier(points)(u), expected, atol=1e-9, rtol=1e-9
        )

    def test_no_control_points_raises(self):
        with pytest.raises(DegreeError):
            bezier(torch.empty(0, 3))

    def test_extrapolate_error(self, arch):
        curve = bezier(arch)

        with pytest.raises(ExtrapolationError):
            curve(torch.tensor(-0.1))

        with pytest.raises(ExtrapolationError):
            curve(torch.tensor(1.1))

    def test_extrapolate_clamp(self, arch):
        curve = bezier(arch, extrapolate="clamp")

        torch.testing.assert_close(curve(-0.5), arch[0])
        torch.testing.assert_close(curve(1.5), arch[-1])

    def test_invalid_extrapolate_raises(self, arch):
        with pytest.raises(ValueError):
            bezier(arch, extrapolate="periodic")

    def test_gradient_control_points(self, arch):
        """Gradient of C(u) w.r.t. P_i is B_{i,n}(u)."""
        points = arch.to(torch.float64).requires_grad_(True)

        bezier(points)(0.5).sum().backward()

        expected = torch.tensor([0.25, 0.5, 0.25], dtype=torch.float64)
        torch.testing.assert_close(
            points.grad, expected.unsqueeze(-1).expand(3, 3)
        )
