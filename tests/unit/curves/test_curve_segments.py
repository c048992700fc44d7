"""
Test curve segment evaluation.
"""

import math

import pytest

from flowpath.core.types import Point3
from flowpath.curves import (
    CatmullRomSegment,
    CubicBezierSegment,
    LineSegment,
    QuadraticBezierSegment,
)


class TestLineSegment:
    """Test straight segments."""

    def test_endpoints_are_exact(self):
        """Test that t=0 and t=1 return the endpoints exactly."""
        line = LineSegment(Point3(0.1, 0.2, 0.3), Point3(7.7, -3.3, 1.9))

        assert line.point_at(0.0) == Point3(0.1, 0.2, 0.3)
        assert line.point_at(1.0) == Point3(7.7, -3.3, 1.9)

    def test_zero_length_line(self):
        """Test that a zero-length line samples to its single point."""
        p = Point3(1, 2, 3)
        points = LineSegment(p, p).get_points(3)

        assert len(points) == 4
        assert all(q == p for q in points)


class TestBezierSegments:
    """Test quadratic and cubic beziers."""

    def test_quadratic_midpoint(self):
        """Test the quadratic bezier at t=0.5."""
        quad = QuadraticBezierSegment(Point3(0, 0, 0), Point3(1, 2, 0), Point3(2, 0, 0))

        assert quad.point_at(0.5) == Point3(1, 1, 0)
        assert quad.end == Point3(2, 0, 0)

    def test_cubic_endpoints_and_midpoint(self):
        """Test the cubic bezier endpoints and midpoint."""
        cubic = CubicBezierSegment(
            Point3(0, 0, 0), Point3(0, 2, 0), Point3(4, 2, 0), Point3(4, 0, 0)
        )

        assert cubic.start == Point3(0, 0, 0)
        assert cubic.end == Point3(4, 0, 0)
        assert cubic.point_at(0.5).to_tuple() == pytest.approx((2.0, 1.5, 0.0))

    def test_get_points_count(self):
        """Test divisions + 1 samples."""
        cubic = CubicBezierSegment(
            Point3(0, 0, 0), Point3(1, 0, 0), Point3(1, 1, 0), Point3(2, 1, 0)
        )

        assert len(cubic.get_points(7)) == 8


class TestCatmullRomSegment:
    """Test centripetal Catmull-Rom splines."""

    def test_passes_through_points(self):
        """Test that the spline interpolates every control point."""
        points = (Point3(0, 0, 0), Point3(1, 1, 0), Point3(2, 0, 0), Point3(3, 1, 0))
        spline = CatmullRomSegment(points)

        assert spline.point_at(0.0) == points[0]
        assert spline.point_at(1.0) == points[-1]
        assert spline.point_at(1.0 / 3.0).to_tuple() == pytest.approx(points[1].to_tuple())
        assert spline.point_at(2.0 / 3.0).to_tuple() == pytest.approx(points[2].to_tuple())

    def test_accepts_list(self):
        """Test that a list of points is stored as a tuple."""
        spline = CatmullRomSegment([Point3(0, 0, 0), Point3(1, 0, 0)])

        assert isinstance(spline.points, tuple)

    def test_single_point(self):
        """Test that a one-point spline is constant."""
        p = Point3(1, 1, 1)
        spline = CatmullRomSegment((p,))

        assert spline.point_at(0.5) == p

    def test_empty_rejected(self):
        """Test that an empty spline is rejected."""
        with pytest.raises(ValueError):
            CatmullRomSegment(())

    def test_repeated_points_stay_finite(self):
        """Test that coincident control points do not divide by zero."""
        spline = CatmullRomSegment((Point3(0, 0, 0), Point3(0, 0, 0), Point3(1, 0, 0)))

        for p in spline.get_points(8):
            assert all(math.isfinite(c) for c in p.to_tuple())

    def test_straight_points_stay_on_line(self):
        """Test that collinear points produce a curve on that line."""
        spline = CatmullRomSegment((Point3(0, 0, 0), Point3(1, 0, 0), Point3(3, 0, 0)))

        for p in spline.get_points(10):
            assert p.y == pytest.approx(0.0)
            assert p.z == pytest.approx(0.0)
