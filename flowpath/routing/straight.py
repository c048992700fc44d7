"""Straight-line router."""

from ..curves.path import PathBuilder
from .base import EdgeRouter, LineStyle, RouteRequest, RouteResult, get_edge_center


class StraightRouter(EdgeRouter):
    """Single line from source to target, label at the edge center."""

    style = LineStyle.STRAIGHT

    def route(self, request: RouteRequest) -> RouteResult:
        label, offset = get_edge_center(request.source, request.target)
        path = (
            PathBuilder()
            .move_to(request.source)
            .line_to(request.target)
            .build()
        )
        return RouteResult(path=path, label=label, offset=offset)


__all__ = ["StraightRouter"]
