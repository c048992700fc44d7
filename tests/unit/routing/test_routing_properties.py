"""
Properties every built-in router must satisfy for every pair of anchor sides.
"""

import itertools
import math

import pytest

from flowpath.core.anchors import AnchorSide
from flowpath.routing import RouteRequest, get_router

STYLES = ["straight", "step", "bezier", "spline", "offset", "split"]
SIDES = [side.value for side in AnchorSide]
SIDE_PAIRS = list(itertools.product(SIDES, SIDES))


def _close(a, b):
    return a.to_tuple() == pytest.approx(b.to_tuple(), abs=1e-9)


@pytest.mark.parametrize("style", STYLES)
class TestRouterProperties:
    """Test path shape properties over all side pairs."""

    def test_path_connects_endpoints(self, style):
        """Test that every route starts at the source and ends at the target."""
        router = get_router(style)
        for source_side, target_side in SIDE_PAIRS:
            request = RouteRequest.create((0, 0, 0), (3, -2, 1), source_side, target_side)
            path = router.route(request).path

            assert path.segment_count > 0
            assert _close(path.start, request.source)
            assert _close(path.end, request.target)

    def test_sample_count(self, style):
        """Test that sampling yields divisions + 1 points per segment."""
        router = get_router(style)
        for source_side, target_side in SIDE_PAIRS:
            request = RouteRequest.create((1, 2, 0), (-2, 5, 0), source_side, target_side)
            path = router.route(request).path

            assert len(path.get_points(6)) == path.segment_count * 7

    def test_routing_is_repeatable(self, style):
        """Test that routing the same request twice gives the same result."""
        router = get_router(style)
        request = RouteRequest.create((0, 0, 0), (4, 3, -1), "right", "top")

        assert router.route(request) == router.route(request)

    def test_coincident_endpoints(self, style):
        """Test that coincident endpoints never raise and stay finite."""
        router = get_router(style)
        for source_side, target_side in SIDE_PAIRS:
            request = RouteRequest.create((1, 1, 1), (1, 1, 1), source_side, target_side)
            result = router.route(request)

            for p in result.path.get_points(4):
                assert all(math.isfinite(c) for c in p.to_tuple())
            assert all(math.isfinite(c) for c in result.label.to_tuple())


class TestStepLegs:
    """Test that step routes stay axis-aligned between corners."""

    @pytest.mark.parametrize("source_side,target_side", [
        ("right", "left"),
        ("left", "right"),
        ("top", "bottom"),
        ("bottom", "top"),
        ("right", "bottom"),
        ("top", "left"),
        ("left", "left"),
        ("top", "top"),
    ])
    def test_waypoint_legs_are_axis_aligned(self, source_side, target_side):
        """Test that consecutive waypoints differ along at most one in-plane axis."""
        router = get_router("step")
        request = RouteRequest.create((0, 0, 0), (3, -2, 0), source_side, target_side)
        points = router.calc_points(request).points

        for a, b in zip(points, points[1:]):
            moved = [axis for axis in ("x", "y") if abs(a[axis] - b[axis]) > 1e-12]
            assert len(moved) <= 1
