"""
Orthogonal ("step") router.

Routes an edge as a sequence of axis-aligned legs between the two
endpoints, with every interior corner rounded by a short quadratic bezier.
This is the smooth-step routing used by 2D flow-diagram editors, lifted
into 3D.

Algorithm
---------
1. Push both endpoints outward along their anchor directions by
   `offset` (the gapped points) so edges never hug the node surface.
2. Pick the dominant axis from the source anchor: x for left/right
   anchors, y otherwise. The heading along that axis comes from the
   relative position of the gapped points.
3. Opposite-facing anchors (right -> left, top -> bottom, ...) bend
   through two split points sharing the edge center on one axis.
4. Same-side and mixed anchors bend through one L-shaped corner built
   from one gapped point's x and the other's y.
5. Interior corners are rounded with a bend no larger than half of
   either adjacent leg or the configured radius.

Label placement
---------------
For L-shaped routes the label goes to the middle of the longest leg.
Ties are broken in the fixed order x, then y, then z.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging

from flow_policies import StepPolicy

from ..core.anchors import HORIZONTAL_SIDES, VERTICAL_SIDES, AnchorSide, direction
from ..core.types import Point3
from ..curves.path import Path3, PathBuilder
from .base import EdgeRouter, LineStyle, RouteRequest, RouteResult, get_edge_center

logger = logging.getLogger(__name__)

# Relative tolerance for treating two legs as collinear
COLLINEAR_TOLERANCE = 1e-9
# Absolute distance below which a bend starts at the cursor
JOIN_TOLERANCE = 1e-12


@dataclass(frozen=True)
class StepWaypoints:
    """Corner points of a step route before rounding."""
    points: Tuple[Point3, ...]
    label: Point3
    offset: Point3


def _heading(source_gapped: Point3, side: AnchorSide, target_gapped: Point3) -> Point3:
    """Signed unit axis pointing from the source toward the target."""
    if side in HORIZONTAL_SIDES:
        return Point3(1.0, 0.0, 0.0) if source_gapped.x < target_gapped.x else Point3(-1.0, 0.0, 0.0)
    if side in VERTICAL_SIDES:
        return Point3(0.0, 1.0, 0.0) if source_gapped.y < target_gapped.y else Point3(0.0, -1.0, 0.0)
    return Point3(0.0, 0.0, 1.0) if source_gapped.z < target_gapped.z else Point3(0.0, 0.0, -1.0)


def _collapse_duplicates(points: Sequence[Point3]) -> List[Point3]:
    """Drop consecutive coincident points."""
    result: List[Point3] = []
    for point in points:
        if not result or result[-1] != point:
            result.append(point)
    return result


def _is_collinear(incoming: Point3, outgoing: Point3) -> bool:
    scale = incoming.length() * outgoing.length()
    if scale == 0.0:
        return True
    return incoming.cross(outgoing).length() <= COLLINEAR_TOLERANCE * scale


def calc_bend_size(a: Point3, b: Point3, c: Point3, radius: float) -> float:
    """Corner size at b: at most half of either adjacent leg, and never negative."""
    return max(0.0, min(a.distance_to(b) / 2, b.distance_to(c) / 2, radius))


class StepRouter(EdgeRouter):
    """
    Orthogonal router with rounded corners.

    Parameters
    ----------
    policy : StepPolicy, optional
        Corner radius, gap offset, optional center override and the
        minimum gap kept when same-side endpoints crowd each other
    """

    style = LineStyle.STEP

    def __init__(self, policy: Optional[StepPolicy] = None):
        self.policy = policy or StepPolicy()

    def route(self, request: RouteRequest) -> RouteResult:
        waypoints = self.calc_points(request)
        path = self.build_path(waypoints.points)
        return RouteResult(path=path, label=waypoints.label, offset=waypoints.offset)

    def calc_points(self, request: RouteRequest) -> StepWaypoints:
        """Compute the unrounded corner points, label and label offset."""
        offset = self.policy.offset
        source, target = request.source, request.target
        source_side, target_side = request.source_side, request.target_side

        source_dir = direction(source_side)
        target_dir = direction(target_side)
        source_gapped = source + source_dir * offset
        target_gapped = target + target_dir * offset

        heading = _heading(source_gapped, source_side, target_gapped)
        axis = "x" if heading.x != 0 else "y"
        curr_dir = heading[axis]

        default_center, default_offset = get_edge_center(source, target)
        override = self.policy.center or (None, None, None)
        center_x = default_center.x if override[0] is None else override[0]
        center_y = default_center.y if override[1] is None else override[1]
        center_z = default_center.z if override[2] is None else override[2]

        source_gap_offset = Point3()
        target_gap_offset = Point3()

        if source_dir[axis] * target_dir[axis] == -1:
            # Opposite anchors, e.g.
            #    --->
            #    |
            # >---
            vertical_split = [
                Point3(center_x, source_gapped.y, source_gapped.z),
                Point3(center_x, target_gapped.y, target_gapped.z),
            ]
            #    |
            #  ---
            #  |
            horizontal_split = [
                Point3(source_gapped.x, center_y, source_gapped.z),
                Point3(target_gapped.x, center_y, target_gapped.z),
            ]
            if source_dir[axis] == curr_dir:
                points = vertical_split if axis == "x" else horizontal_split
            else:
                points = horizontal_split if axis == "x" else vertical_split
            label = Point3(center_x, center_y, center_z)
        else:
            # source_target takes x from the source and y from the target
            source_target = [Point3(source_gapped.x, target_gapped.y, target_gapped.z)]
            target_source = [Point3(target_gapped.x, source_gapped.y, source_gapped.z)]
            if axis == "x":
                points = target_source if source_dir.x == curr_dir else source_target
            else:
                points = source_target if source_dir.y == curr_dir else target_source

            if source_side == target_side:
                # Same-side endpoints closer than the gap would put the corner
                # on top of a gapped point, so pull one gapped point back
                diff = abs(source[axis] - target[axis])
                if diff <= offset:
                    gap = max(0.0, min(offset - self.policy.min_gap, offset - diff))
                    pull_source = source_dir[axis] == curr_dir
                    node, gapped = (source, source_gapped) if pull_source else (target, target_gapped)
                    # Anchors that do not push along this axis have nothing to pull back
                    if gapped[axis] != node[axis]:
                        sign = -1.0 if gapped[axis] > node[axis] else 1.0
                        pull = Point3().replace(**{axis: sign * gap})
                        if pull_source:
                            source_gap_offset = pull
                        else:
                            target_gap_offset = pull
            else:
                # Mixed anchors such as right -> bottom
                opposite = "y" if axis == "x" else "x"
                is_same_dir = source_dir[axis] == target_dir[opposite]
                source_gt_target = source_gapped[opposite] > target_gapped[opposite]
                source_lt_target = source_gapped[opposite] < target_gapped[opposite]
                flip = (
                    source_dir[axis] == 1
                    and ((not is_same_dir and source_gt_target) or (is_same_dir and source_lt_target))
                ) or (
                    source_dir[axis] != 1
                    and ((not is_same_dir and source_lt_target) or (is_same_dir and source_gt_target))
                )
                if flip:
                    points = source_target if axis == "x" else target_source

            label = self._longest_leg_center(
                source_gapped + source_gap_offset,
                points[0],
                target_gapped + target_gap_offset,
            )

        waypoints = _collapse_duplicates([
            source,
            source_gapped + source_gap_offset,
            *points,
            target_gapped + target_gap_offset,
            target,
        ])
        logger.debug(
            f"Step route {source_side.value} -> {target_side.value} along {axis}: "
            f"{len(waypoints)} waypoints"
        )
        return StepWaypoints(points=tuple(waypoints), label=label, offset=default_offset)

    @staticmethod
    def _longest_leg_center(source_point: Point3, corner: Point3, target_point: Point3) -> Point3:
        """Middle of the longest leg around an L-shaped corner (ties: x, y, z)."""
        max_x = max(abs(source_point.x - corner.x), abs(target_point.x - corner.x))
        max_y = max(abs(source_point.y - corner.y), abs(target_point.y - corner.y))
        max_z = max(abs(source_point.z - corner.z), abs(target_point.z - corner.z))

        if max_x >= max_y and max_x >= max_z:
            return corner.replace(x=(source_point.x + target_point.x) / 2)
        if max_y >= max_z:
            return corner.replace(y=(source_point.y + target_point.y) / 2)
        return corner.replace(z=(source_point.z + target_point.z) / 2)

    def build_path(self, points: Sequence[Point3]) -> Path3:
        """Connect corner points with lines, rounding every interior corner."""
        builder = PathBuilder().move_to(points[0])
        if len(points) == 1:
            # Fully degenerate route: keep one zero-length segment to sample
            return builder.line_to(points[0]).build()

        for i in range(1, len(points) - 1):
            self._add_bend(points[i - 1], points[i], points[i + 1], builder)
        builder.line_to(points[-1])
        return builder.build()

    def _add_bend(self, a: Point3, b: Point3, c: Point3, builder: PathBuilder) -> None:
        size = calc_bend_size(a, b, c, self.policy.border_radius)
        incoming = b - a
        outgoing = c - b

        if size == 0.0 or _is_collinear(incoming, outgoing):
            builder.line_to(b)
            return

        approach = b - incoming.normalized() * size
        # Back-to-back bends on a short leg meet exactly at the leg midpoint
        if builder.current_point.distance_to(approach) > JOIN_TOLERANCE:
            builder.line_to(approach)
        builder.quadratic_curve_to(b, b + outgoing.normalized() * size)


__all__ = ["StepRouter", "StepWaypoints", "calc_bend_size"]
