"""Unit tests for the algebraic circle fit."""

import math

import pytest

from strokefont.core.circle_fit import Circle, fit_circle, max_radial_error
from strokefont.domain import Point


def circle_points(cx: float, cy: float, r: float, start_deg: float, end_deg: float, n: int) -> list[Point]:
    step = (end_deg - start_deg) / (n - 1)
    return [
        Point(cx + r * math.cos(math.radians(start_deg + k * step)), cy + r * math.sin(math.radians(start_deg + k * step)))
        for k in range(n)
    ]


class TestFitCircle:
    """Tests for fit_circle."""

    def test_exact_points(self) -> None:
        """Test points on a circle recover its center and radius."""
        circle = fit_circle(circle_points(30.0, -12.0, 25.0, 10, 200, 12))
        assert circle is not None
        assert circle.center.x == pytest.approx(30.0, abs=1e-6)
        assert circle.center.y == pytest.approx(-12.0, abs=1e-6)
        assert circle.radius == pytest.approx(25.0, abs=1e-6)

    def test_three_points(self) -> None:
        """Test the minimum of three points fits their circumcircle."""
        circle = fit_circle([Point(1, 0), Point(0, 1), Point(-1, 0)])
        assert circle is not None
        assert circle.center.x == pytest.approx(0.0, abs=1e-9)
        assert circle.center.y == pytest.approx(0.0, abs=1e-9)
        assert circle.radius == pytest.approx(1.0)

    @pytest.mark.parametrize("n", [0, 1, 2])
    def test_too_few_points(self, n: int) -> None:
        """Test fewer than three points cannot be fitted."""
        assert fit_circle([Point(i, i * i) for i in range(n)]) is None

    def test_collinear_points(self) -> None:
        """Test collinear input is degenerate."""
        assert fit_circle([Point(i, 2 * i + 1) for i in range(6)]) is None

    def test_identical_points(self) -> None:
        """Test repeated points are degenerate."""
        assert fit_circle([Point(3, 3)] * 5) is None

    def test_noisy_points(self) -> None:
        """Test small noise gives a close fit."""
        points = circle_points(0.0, 0.0, 10.0, 0, 180, 19)
        noisy = [Point(p.x + (0.05 if k % 2 else -0.05), p.y) for k, p in enumerate(points)]
        circle = fit_circle(noisy)
        assert circle is not None
        assert circle.radius == pytest.approx(10.0, abs=0.1)
        assert max_radial_error(noisy, circle) < 0.2


class TestCircle:
    """Tests for Circle helpers."""

    def test_radial_error(self) -> None:
        """Test the distance of a point from the outline."""
        circle = Circle(center=Point(0, 0), radius=5.0)
        assert circle.radial_error(Point(3, 4)) == pytest.approx(0.0)
        assert circle.radial_error(Point(0, 7)) == pytest.approx(2.0)
        assert circle.radial_error(Point(0, 0)) == pytest.approx(5.0)

    def test_max_radial_error_empty(self) -> None:
        """Test no points means no error."""
        assert max_radial_error([], Circle(Point(0, 0), 1.0)) == 0.0
