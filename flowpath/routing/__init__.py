"""
Edge routers.

Each line style is a small strategy object implementing
EdgeRouter.route(request) -> RouteResult. Use get_router() to build the one
an EdgePolicy selects.
"""

from .base import (
    LineStyle,
    RouteRequest,
    RouteResult,
    EdgeRouter,
    get_edge_center,
)
from .straight import StraightRouter
from .step import StepRouter, StepWaypoints, calc_bend_size
from .bezier import (
    BezierRouter,
    calculate_control_offset,
    get_control_with_curvature,
    get_bezier_edge_center,
)
from .spline import SplineRouter, OffsetRouter, SplitRouter
from .custom import CustomRouter, RouteFunction
from .registry import get_router

__all__ = [
    "LineStyle",
    "RouteRequest",
    "RouteResult",
    "EdgeRouter",
    "get_edge_center",
    "StraightRouter",
    "StepRouter",
    "StepWaypoints",
    "calc_bend_size",
    "BezierRouter",
    "calculate_control_offset",
    "get_control_with_curvature",
    "get_bezier_edge_center",
    "SplineRouter",
    "OffsetRouter",
    "SplitRouter",
    "CustomRouter",
    "RouteFunction",
    "get_router",
]
