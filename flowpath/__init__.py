"""
flowpath - 3D edge path routing for node/connector diagrams.

Given two anchored endpoints, flowpath computes a smooth deterministic
curve between them (straight, orthogonal step, cubic bezier, spline or
offset polyline), a label anchor, and arrowhead placements. The sampled
curve can be swept into a tube mesh for rendering.

Usage:
    from flowpath import build_edge_geometry
    from flow_policies import EdgePolicy

    edge = build_edge_geometry((0, 0, 0), (4, 2, 0), "right", "left",
                               policy=EdgePolicy(linestyle="step"))
    edge.polyline, edge.label
"""

__version__ = "0.1.0"

from .core import (
    Point3,
    AnchorSide,
    direction,
    gapped_point,
    resolve_center_sides,
    FlowPathError,
    EmptyPathError,
    UnimplementedRouterError,
)
from .curves import Path3, PathBuilder, EllipticalArc
from .routing import (
    LineStyle,
    RouteRequest,
    RouteResult,
    EdgeRouter,
    StraightRouter,
    StepRouter,
    BezierRouter,
    SplineRouter,
    OffsetRouter,
    SplitRouter,
    CustomRouter,
    get_router,
)
from .ops import (
    ArrowPlacement,
    place_arrow,
    place_edge_arrows,
    EdgeGeometry,
    build_edge_geometry,
    sweep_edge_tube,
    route_diagram,
)

__all__ = [
    "__version__",
    "Point3",
    "AnchorSide",
    "direction",
    "gapped_point",
    "resolve_center_sides",
    "FlowPathError",
    "EmptyPathError",
    "UnimplementedRouterError",
    "Path3",
    "PathBuilder",
    "EllipticalArc",
    "LineStyle",
    "RouteRequest",
    "RouteResult",
    "EdgeRouter",
    "StraightRouter",
    "StepRouter",
    "BezierRouter",
    "SplineRouter",
    "OffsetRouter",
    "SplitRouter",
    "CustomRouter",
    "get_router",
    "ArrowPlacement",
    "place_arrow",
    "place_edge_arrows",
    "EdgeGeometry",
    "build_edge_geometry",
    "sweep_edge_tube",
    "route_diagram",
]
