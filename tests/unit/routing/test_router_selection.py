"""
Test the straight, spline, offset, split and custom routers and router selection.
"""

import pytest

from flow_policies import EdgePolicy, StepPolicy
from flowpath.core.errors import UnimplementedRouterError
from flowpath.core.types import Point3
from flowpath.curves import CatmullRomSegment, LineSegment, PathBuilder
from flowpath.routing import (
    BezierRouter,
    CustomRouter,
    LineStyle,
    OffsetRouter,
    RouteRequest,
    RouteResult,
    SplineRouter,
    SplitRouter,
    StepRouter,
    StraightRouter,
    get_edge_center,
    get_router,
)


class TestStraightRouter:
    """Test the straight router and the edge center formula."""

    def test_reference_label(self):
        """Test the label for the reference edge."""
        result = StraightRouter().route(RouteRequest.create((0, 0, 0), (4, 2, 0)))

        assert result.label == Point3(2, 1, 0)
        assert result.offset == Point3(2, 1, 0)
        assert result.path.segment_count == 1
        assert isinstance(result.path.segments[0], LineSegment)

    def test_reversed_edge_label(self):
        """Test that the label is reached from the target toward the source."""
        label, offset = get_edge_center(Point3(4, 2, 0), Point3(0, 0, 0))

        assert label == Point3(2, 1, 0)
        assert offset == Point3(2, 1, 0)

    def test_three_dimensional_label(self):
        """Test the label in all three axes."""
        label, _ = get_edge_center(Point3(0, 0, 0), Point3(2, -4, 6))

        assert label == Point3(1, -2, 3)

    def test_sampled_endpoints(self):
        """Test that sampling starts at the source and ends at the target."""
        result = StraightRouter().route(RouteRequest.create((0, 0, 0), (4, 2, 0)))
        points = result.path.get_points(4)

        assert points[0] == Point3(0, 0, 0)
        assert points[-1] == Point3(4, 2, 0)


class TestOffsetRouters:
    """Test the spline and offset polyline routers."""

    def test_offset_polyline(self):
        """Test the three-leg polyline through both offset points."""
        result = OffsetRouter(0.2).route(RouteRequest.create((0, 0, 0), (4, 0, 0), "right", "left"))
        segments = result.path.segments

        assert len(segments) == 3
        assert segments[0].p1.to_tuple() == pytest.approx((0.2, 0, 0))
        assert segments[1].p1.to_tuple() == pytest.approx((3.8, 0, 0))
        assert result.label == Point3(2, 0, 0)

    def test_spline_through_offset_points(self):
        """Test the Catmull-Rom spline passes through the offset points."""
        result = SplineRouter(0.5).route(RouteRequest.create((0, 0, 0), (0, 4, 0), "top", "bottom"))
        segment = result.path.segments[0]

        assert result.path.segment_count == 1
        assert isinstance(segment, CatmullRomSegment)
        assert segment.points[1].to_tuple() == pytest.approx((0, 0.5, 0))
        assert segment.points[2].to_tuple() == pytest.approx((0, 3.5, 0))
        assert result.path.end == Point3(0, 4, 0)


class TestSplitRouter:
    """Test the split polyline router."""

    def _points(self, result):
        segments = result.path.segments
        return [segments[0].p0.to_tuple()] + [s.p1.to_tuple() for s in segments]

    def test_horizontal_to_vertical_single_corner(self):
        """Test that a right side meeting a top side bends once at the shared corner."""
        result = SplitRouter(0.2).route(RouteRequest.create((0, 0, 0), (4, 2, 0), "right", "top"))

        assert result.path.segment_count == 2
        assert all(isinstance(s, LineSegment) for s in result.path.segments)
        assert self._points(result) == [(0, 0, 0), (4, 0, 0), (4, 2, 0)]
        assert result.label == Point3(2, 1, 0)

    def test_vertical_to_horizontal_single_corner(self):
        """Test that a top side meeting a right side turns at the source's x."""
        result = SplitRouter(0.2).route(RouteRequest.create((0, 0, 0), (4, 2, 0), "top", "right"))

        assert self._points(result) == [(0, 0, 0), (0, 2, 0), (4, 2, 0)]

    def test_corner_depth_follows_shared_endpoint(self):
        """Test that the corner takes its depth from the endpoint it shares a leg with."""
        horizontal = SplitRouter().route(RouteRequest.create((0, 0, 0), (4, -2, 3), "right", "bottom"))
        vertical = SplitRouter().route(RouteRequest.create((0, 0, 0), (4, -2, 3), "bottom", "right"))

        assert horizontal.path.segments[0].p1 == Point3(4, 0, 0)
        assert vertical.path.segments[0].p1 == Point3(0, -2, 3)

    def test_opposite_horizontal_sides_cross_at_mid_x(self):
        """Test that facing left/right sides cross at the midpoint x."""
        result = SplitRouter(0.2).route(RouteRequest.create((0, 0, 0), (4, 2, 0), "right", "left"))
        points = self._points(result)

        assert result.path.segment_count == 3
        assert points[1] == pytest.approx((2, 0, 0))
        assert points[2] == pytest.approx((2, 2, 0))
        assert points[3] == (4, 2, 0)

    def test_opposite_vertical_sides_cross_at_mid_y(self):
        """Test that facing bottom/top sides cross at the midpoint y."""
        result = SplitRouter(0.2).route(RouteRequest.create((0, 0, 0), (2, -4, 0), "bottom", "top"))
        points = self._points(result)

        assert points[1] == pytest.approx((0, -2, 0))
        assert points[2] == pytest.approx((2, -2, 0))

    def test_depth_sides_use_plain_offsets(self):
        """Test that front/back sources keep the pushed-out points unchanged."""
        result = SplitRouter(0.2).route(RouteRequest.create((0, 0, 0), (1, 1, 2), "front", "back"))
        points = self._points(result)

        assert points[1] == pytest.approx((0, 0, 0.2))
        assert points[2] == pytest.approx((1, 1, 1.8))


class TestCustomRouter:
    """Test the custom routing hook."""

    def test_missing_function_raises(self):
        """Test that an unconfigured custom router signals 'not provided'."""
        with pytest.raises(UnimplementedRouterError):
            CustomRouter().route(RouteRequest.create((0, 0, 0), (1, 0, 0)))

    def test_delegates_to_function(self):
        """Test that the custom function's result is returned unchanged."""
        def arc_router(request):
            path = (
                PathBuilder()
                .move_to(request.source)
                .quadratic_curve_to(Point3(0, 5, 0), request.target)
                .build()
            )
            return RouteResult(path=path, label=Point3(0, 2.5, 0), offset=Point3())

        result = CustomRouter(arc_router).route(RouteRequest.create((-1, 0, 0), (1, 0, 0)))

        assert result.label == Point3(0, 2.5, 0)
        assert result.path.end == Point3(1, 0, 0)


class TestGetRouter:
    """Test line style to router mapping."""

    @pytest.mark.parametrize("style,router_cls", [
        ("straight", StraightRouter),
        ("step", StepRouter),
        ("bezier", BezierRouter),
        ("spline", SplineRouter),
        ("offset", OffsetRouter),
        ("split", SplitRouter),
        ("custom", CustomRouter),
        (LineStyle.STEP, StepRouter),
    ])
    def test_style_mapping(self, style, router_cls):
        """Test that each style builds its router."""
        assert isinstance(get_router(style), router_cls)

    def test_policy_settings_are_passed(self):
        """Test that per-style settings come from the edge policy."""
        policy = EdgePolicy(line_offset=0.5, step=StepPolicy(border_radius=0.3))

        assert get_router("spline", policy).line_offset == 0.5
        assert get_router("step", policy).policy.border_radius == 0.3

    def test_custom_function_is_passed(self):
        """Test that the custom route function reaches the router."""
        def fn(request):
            return None

        assert get_router("custom", custom_router=fn).route_fn is fn

    def test_unknown_style(self):
        """Test that unknown styles raise ValueError."""
        with pytest.raises(ValueError, match="Unknown linestyle"):
            get_router("zigzag")
