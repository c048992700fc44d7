"""
Cubic bezier router.

Each endpoint's control point is pushed out along its anchor direction.
When the other endpoint lies ahead of the anchor the push is half the
distance along that direction; when it lies behind, the push grows with
the square root of the overshoot so the curve loops around instead of
cutting back through the node.

UNIT CONVENTIONS
----------------
The loop-around term is scaled by `BezierPolicy.curvature_scale`: 25 for
pixel coordinates and 2.5 for scene coordinates (see flowpath.utils.units).
"""

from typing import Optional, Tuple
import logging
import math

from flow_policies import BezierPolicy

from ..core.anchors import SideLike, direction
from ..core.types import Point3
from ..curves.path import PathBuilder
from .base import EdgeRouter, LineStyle, RouteRequest, RouteResult

logger = logging.getLogger(__name__)


def calculate_control_offset(distance: float, curvature: float, scale: float = 2.5) -> float:
    """
    Distance to push a control point along its anchor direction.

    Parameters
    ----------
    distance : float
        Signed distance from the endpoint to the other endpoint, measured
        along the anchor direction
    curvature : float
        Curve tension
    scale : float
        Unit-dependent multiplier of the loop-around term

    Returns
    -------
    float
        Non-negative control offset
    """
    if distance >= 0:
        return 0.5 * distance
    return curvature * scale * math.sqrt(-distance)


def get_control_with_curvature(
    side: SideLike,
    point: Point3,
    other: Point3,
    curvature: float,
    scale: float = 2.5,
) -> Point3:
    """Control point for `point` anchored on `side`, curving toward `other`."""
    dir_vec = direction(side)
    distance = dir_vec.dot(other - point)
    return point + dir_vec * calculate_control_offset(distance, curvature, scale)


def get_bezier_edge_center(
    source: Point3,
    source_control: Point3,
    target_control: Point3,
    target: Point3,
) -> Tuple[Point3, Point3]:
    """Curve midpoint (t = 0.5) and its per-axis distance from the source."""
    label = (
        source * 0.125
        + source_control * 0.375
        + target_control * 0.375
        + target * 0.125
    )
    delta = label - source
    offset = Point3(abs(delta.x), abs(delta.y), abs(delta.z))
    return label, offset


class BezierRouter(EdgeRouter):
    """Single cubic bezier between the endpoints."""

    style = LineStyle.BEZIER

    def __init__(self, policy: Optional[BezierPolicy] = None):
        self.policy = policy or BezierPolicy()

    def control_points(self, request: RouteRequest) -> Tuple[Point3, Point3]:
        curvature = self.policy.curvature
        scale = self.policy.curvature_scale
        source_control = get_control_with_curvature(
            request.source_side, request.source, request.target, curvature, scale
        )
        target_control = get_control_with_curvature(
            request.target_side, request.target, request.source, curvature, scale
        )
        return source_control, target_control

    def route(self, request: RouteRequest) -> RouteResult:
        source_control, target_control = self.control_points(request)
        logger.debug(
            f"Bezier controls {source_control.to_tuple()} / {target_control.to_tuple()}"
        )
        path = (
            PathBuilder()
            .move_to(request.source)
            .bezier_curve_to(source_control, target_control, request.target)
            .build()
        )
        label, offset = get_bezier_edge_center(
            request.source, source_control, target_control, request.target
        )
        return RouteResult(path=path, label=label, offset=offset)


__all__ = [
    "BezierRouter",
    "calculate_control_offset",
    "get_control_with_curvature",
    "get_bezier_edge_center",
]
