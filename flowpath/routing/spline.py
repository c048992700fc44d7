"""Offset-based routers: a smooth spline, a three-leg polyline and a split polyline."""

from typing import List, Tuple

from ..core.anchors import HORIZONTAL_SIDES, VERTICAL_SIDES, gapped_point
from ..core.types import Point3
from ..curves.path import PathBuilder
from .base import EdgeRouter, LineStyle, RouteRequest, RouteResult, get_edge_center


class _OffsetRouterBase(EdgeRouter):
    """Shared setup: both styles pass through the endpoints pushed out by `line_offset`."""

    def __init__(self, line_offset: float = 0.2):
        self.line_offset = line_offset

    def offset_points(self, request: RouteRequest) -> Tuple[Point3, Point3]:
        return (
            gapped_point(request.source, request.source_side, self.line_offset),
            gapped_point(request.target, request.target_side, self.line_offset),
        )


class SplineRouter(_OffsetRouterBase):
    """Centripetal Catmull-Rom spline through source, both offset points and target."""

    style = LineStyle.SPLINE

    def route(self, request: RouteRequest) -> RouteResult:
        a1, b1 = self.offset_points(request)
        path = (
            PathBuilder()
            .move_to(request.source)
            .spline_thru([a1, b1, request.target])
            .build()
        )
        label, offset = get_edge_center(request.source, request.target)
        return RouteResult(path=path, label=label, offset=offset)


class OffsetRouter(_OffsetRouterBase):
    """Polyline source -> offset source -> offset target -> target."""

    style = LineStyle.OFFSET

    def route(self, request: RouteRequest) -> RouteResult:
        a1, b1 = self.offset_points(request)
        path = PathBuilder([request.source, a1, b1, request.target]).build()
        label, offset = get_edge_center(request.source, request.target)
        return RouteResult(path=path, label=label, offset=offset)


class SplitRouter(_OffsetRouterBase):
    """
    Right-angle polyline that bends halfway between the endpoints.

    A horizontal side facing a vertical one bends once at the corner
    shared by both axes. Any other pairing leaves along the source side,
    crosses at the midpoint between the endpoints and arrives along the
    target side.
    """

    style = LineStyle.SPLIT

    def waypoints(self, request: RouteRequest) -> List[Point3]:
        source, target = request.source, request.target
        source_horizontal = request.source_side in HORIZONTAL_SIDES
        source_vertical = request.source_side in VERTICAL_SIDES

        if source_horizontal and request.target_side in VERTICAL_SIDES:
            return [source, Point3(target.x, source.y, source.z), target]
        if source_vertical and request.target_side in HORIZONTAL_SIDES:
            return [source, Point3(source.x, target.y, target.z), target]

        a1, b1 = self.offset_points(request)
        if source_horizontal:
            mid_x = source.x - (source.x - target.x) / 2
            a1, b1 = a1.replace(x=mid_x), b1.replace(x=mid_x)
        elif source_vertical:
            mid_y = source.y - (source.y - target.y) / 2
            a1, b1 = a1.replace(y=mid_y), b1.replace(y=mid_y)
        return [source, a1, b1, target]

    def route(self, request: RouteRequest) -> RouteResult:
        path = PathBuilder(self.waypoints(request)).build()
        label, offset = get_edge_center(request.source, request.target)
        return RouteResult(path=path, label=label, offset=offset)


__all__ = ["SplineRouter", "OffsetRouter", "SplitRouter"]
