"""
Piecewise 3D paths.

A Path3 is an immutable, ordered sequence of contiguous segments. Paths are
assembled with a PathBuilder, which owns the "current point" cursor used to
append segments fluently; the cursor lives only as long as the builder.

Sampling conventions
--------------------
Both sampling operations treat every segment as having equal weight:

- get_points(divisions) samples each segment uniformly in its own
  parameter space and concatenates the results, so density is not uniform
  in arc length.
- point_at_fraction(t) splits [0, 1] into one equal sub-interval per
  segment. Arrow placement depends on this convention.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple
import logging
import math
import numbers

from ..core.errors import EmptyPathError
from ..core.types import Point3
from .ellipse import EllipticalArc, TWO_PI
from .segments import (
    CatmullRomSegment,
    CubicBezierSegment,
    LineSegment,
    QuadraticBezierSegment,
    Segment,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Path3:
    """Immutable piecewise curve."""
    segments: Tuple[Segment, ...] = ()

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    @property
    def is_empty(self) -> bool:
        return len(self.segments) == 0

    @property
    def start(self) -> Point3:
        if self.is_empty:
            raise EmptyPathError("Path has no segments")
        return self.segments[0].start

    @property
    def end(self) -> Point3:
        if self.is_empty:
            raise EmptyPathError("Path has no segments")
        return self.segments[-1].end

    def get_points(self, divisions: int) -> List[Point3]:
        """
        Sample the path into a polyline.

        Parameters
        ----------
        divisions : int
            Steps per segment (>= 1). Each segment contributes
            divisions + 1 points, including both of its endpoints.

        Returns
        -------
        list of Point3
            Concatenated samples; empty when the path has no segments.
        """
        if isinstance(divisions, bool) or not isinstance(divisions, numbers.Integral) or divisions < 1:
            raise ValueError(f"divisions must be an integer >= 1, got {divisions!r}")

        points: List[Point3] = []
        for segment in self.segments:
            points.extend(segment.get_points(divisions))
        return points

    def point_at_fraction(self, t: float) -> Point3:
        """
        Evaluate the path at a normalized fraction, one equal share per segment.

        Raises
        ------
        EmptyPathError
            If the path has no segments
        """
        if self.is_empty:
            raise EmptyPathError("Cannot evaluate a point on an empty path")

        t = min(max(t, 0.0), 1.0)
        n = len(self.segments)
        scaled = t * n
        index = min(int(math.floor(scaled)), n - 1)
        return self.segments[index].point_at(scaled - index)

    def to_dict(self) -> Dict[str, Any]:
        return {"segments": [segment.to_dict() for segment in self.segments]}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Path3":
        return cls(tuple(segment_from_dict(s) for s in d.get("segments", [])))


def segment_from_dict(d: Dict[str, Any]) -> Segment:
    """Rebuild a segment from its to_dict() form."""
    kind = d.get("type")
    if kind == EllipticalArc.kind:
        return EllipticalArc(
            center=Point3.from_any(d["center"]),
            radii=Point3.from_any(d["radii"]),
            start_angle=float(d["start_angle"]),
            end_angle=float(d["end_angle"]),
            clockwise=bool(d["clockwise"]),
            rotation=float(d["rotation"]),
        )

    points = [Point3.from_any(p) for p in d.get("points", [])]
    if kind == LineSegment.kind:
        return LineSegment(*points)
    if kind == QuadraticBezierSegment.kind:
        return QuadraticBezierSegment(*points)
    if kind == CubicBezierSegment.kind:
        return CubicBezierSegment(*points)
    if kind == CatmullRomSegment.kind:
        return CatmullRomSegment(tuple(points))
    raise ValueError(f"Unknown segment type '{kind}'")


class PathBuilder:
    """
    Fluent builder for Path3.

    Example
    -------
    >>> path = (PathBuilder()
    ...         .move_to(Point3(0, 0, 0))
    ...         .line_to(Point3(1, 0, 0))
    ...         .quadratic_curve_to(Point3(2, 0, 0), Point3(2, 1, 0))
    ...         .build())
    >>> path.segment_count
    2
    """

    def __init__(self, points: Optional[Sequence[Point3]] = None):
        self._segments: List[Segment] = []
        self.current_point = Point3()
        if points:
            self.set_from_points(points)

    def set_from_points(self, points: Sequence[Point3]) -> "PathBuilder":
        """Move to the first point and draw lines through the rest."""
        self.move_to(points[0])
        for point in points[1:]:
            self.line_to(point)
        return self

    def move_to(self, point: Point3) -> "PathBuilder":
        self.current_point = point
        return self

    def line_to(self, point: Point3) -> "PathBuilder":
        self._segments.append(LineSegment(self.current_point, point))
        self.current_point = point
        return self

    def quadratic_curve_to(self, control: Point3, point: Point3) -> "PathBuilder":
        self._segments.append(QuadraticBezierSegment(self.current_point, control, point))
        self.current_point = point
        return self

    def bezier_curve_to(self, c1: Point3, c2: Point3, point: Point3) -> "PathBuilder":
        self._segments.append(CubicBezierSegment(self.current_point, c1, c2, point))
        self.current_point = point
        return self

    def spline_thru(self, points: Iterable[Point3]) -> "PathBuilder":
        """Append a Catmull-Rom spline from the cursor through `points`."""
        points = list(points)
        if not points:
            return self
        self._segments.append(CatmullRomSegment((self.current_point, *points)))
        self.current_point = points[-1]
        return self

    def arc(
        self,
        center: Point3 = Point3(),
        radii: Point3 = Point3(1.0, 1.0, 1.0),
        start_angle: float = 0.0,
        end_angle: float = TWO_PI,
        clockwise: bool = False,
        rotation: float = 0.0,
    ) -> "PathBuilder":
        """Circular-style arc with `center` relative to the cursor."""
        return self.absellipse(
            self.current_point + center, radii, start_angle, end_angle, clockwise, rotation
        )

    def absarc(
        self,
        center: Point3 = Point3(),
        radii: Point3 = Point3(1.0, 1.0, 1.0),
        start_angle: float = 0.0,
        end_angle: float = TWO_PI,
        clockwise: bool = False,
        rotation: float = 0.0,
    ) -> "PathBuilder":
        return self.absellipse(center, radii, start_angle, end_angle, clockwise, rotation)

    def ellipse(
        self,
        center: Point3 = Point3(),
        radii: Point3 = Point3(1.0, 1.0, 1.0),
        start_angle: float = 0.0,
        end_angle: float = TWO_PI,
        clockwise: bool = False,
        rotation: float = 0.0,
    ) -> "PathBuilder":
        """Elliptical arc with `center` relative to the cursor."""
        return self.absellipse(
            self.current_point + center, radii, start_angle, end_angle, clockwise, rotation
        )

    def absellipse(
        self,
        center: Point3 = Point3(),
        radii: Point3 = Point3(1.0, 1.0, 1.0),
        start_angle: float = 0.0,
        end_angle: float = TWO_PI,
        clockwise: bool = False,
        rotation: float = 0.0,
    ) -> "PathBuilder":
        """
        Append an elliptical arc at an absolute center.

        When the path already has segments and the arc does not start at
        the cursor, a straight line bridges the gap first.
        """
        arc = EllipticalArc(center, radii, start_angle, end_angle, clockwise, rotation)

        if self._segments:
            first_point = arc.point_at(0.0)
            if first_point != self.current_point:
                logger.debug(f"Bridging gap from {self.current_point} to arc start {first_point}")
                self.line_to(first_point)

        self._segments.append(arc)
        self.current_point = arc.point_at(1.0)
        return self

    def build(self) -> Path3:
        """Freeze the appended segments into a Path3."""
        return Path3(tuple(self._segments))


__all__ = ["Path3", "PathBuilder", "segment_from_dict"]
