"""
Curve segments used to build edge paths.

Each segment is an immutable parametric curve over t in [0, 1]. Evaluation
returns the exact start point at t = 0 and the exact end point at t = 1 so
that consecutive segments of a path join without drift.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple
import math

from ..core.types import Point3


class Segment(ABC):
    """Base class for all path segments."""

    kind: str = "segment"

    @abstractmethod
    def point_at(self, t: float) -> Point3:
        """Evaluate the segment at parameter t in [0, 1]."""

    @property
    def start(self) -> Point3:
        return self.point_at(0.0)

    @property
    def end(self) -> Point3:
        return self.point_at(1.0)

    def get_points(self, divisions: int) -> List[Point3]:
        """Sample divisions + 1 points uniformly in parameter space."""
        return [self.point_at(k / divisions) for k in range(divisions + 1)]

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable form, tagged with the segment kind."""


@dataclass(frozen=True)
class LineSegment(Segment):
    """Straight line between two points."""
    p0: Point3
    p1: Point3

    kind = "line"

    def point_at(self, t: float) -> Point3:
        if t == 1.0:
            return self.p1
        return (self.p1 - self.p0) * t + self.p0

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "points": [self.p0.to_tuple(), self.p1.to_tuple()]}


@dataclass(frozen=True)
class QuadraticBezierSegment(Segment):
    """Quadratic bezier with one control point."""
    p0: Point3
    control: Point3
    p1: Point3

    kind = "quadratic"

    def point_at(self, t: float) -> Point3:
        k = 1.0 - t
        return self.p0 * (k * k) + self.control * (2.0 * k * t) + self.p1 * (t * t)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "points": [self.p0.to_tuple(), self.control.to_tuple(), self.p1.to_tuple()],
        }


@dataclass(frozen=True)
class CubicBezierSegment(Segment):
    """Cubic bezier with two control points."""
    p0: Point3
    c1: Point3
    c2: Point3
    p1: Point3

    kind = "cubic"

    def point_at(self, t: float) -> Point3:
        k = 1.0 - t
        return (
            self.p0 * (k * k * k)
            + self.c1 * (3.0 * k * k * t)
            + self.c2 * (3.0 * k * t * t)
            + self.p1 * (t * t * t)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "points": [p.to_tuple() for p in (self.p0, self.c1, self.c2, self.p1)],
        }


def _cubic_coefficients(
    x0: float, x1: float, x2: float, x3: float,
    dt0: float, dt1: float, dt2: float,
) -> Tuple[float, float, float, float]:
    """Hermite coefficients of a non-uniform Catmull-Rom span from x1 to x2."""
    t1 = (x1 - x0) / dt0 - (x2 - x0) / (dt0 + dt1) + (x2 - x1) / dt1
    t2 = (x2 - x1) / dt1 - (x3 - x1) / (dt1 + dt2) + (x3 - x2) / dt2
    t1 *= dt1
    t2 *= dt1
    return (
        x1,
        t1,
        -3.0 * x1 + 3.0 * x2 - 2.0 * t1 - t2,
        2.0 * x1 - 2.0 * x2 + t1 + t2,
    )


@dataclass(frozen=True)
class CatmullRomSegment(Segment):
    """
    Centripetal Catmull-Rom spline through a sequence of points.

    The curve passes through every point. Open ends are extended by
    reflecting the neighbouring point, and knot spacing uses the square
    root of the chord length (centripetal parametrization), which avoids
    cusps and self-intersections on tight diagram corners.
    """
    points: Tuple[Point3, ...]

    kind = "catmullrom"

    def __post_init__(self):
        if len(self.points) == 0:
            raise ValueError("CatmullRomSegment needs at least one point")
        # Accept lists but store an immutable tuple
        object.__setattr__(self, "points", tuple(self.points))

    def point_at(self, t: float) -> Point3:
        pts = self.points
        n = len(pts)
        if n == 1 or t <= 0.0:
            return pts[0]
        if t >= 1.0:
            return pts[-1]

        p = (n - 1) * t
        index = int(math.floor(p))
        weight = p - index

        if index == 0:
            p0 = pts[0] * 2.0 - pts[1]
        else:
            p0 = pts[index - 1]
        p1 = pts[index]
        p2 = pts[index + 1]
        if index + 2 < n:
            p3 = pts[index + 2]
        else:
            p3 = pts[n - 1] * 2.0 - pts[n - 2]

        dt0 = math.pow(p0.distance_to(p1), 0.5)
        dt1 = math.pow(p1.distance_to(p2), 0.5)
        dt2 = math.pow(p2.distance_to(p3), 0.5)

        # Guard against repeated points
        if dt1 < 1e-4:
            dt1 = 1.0
        if dt0 < 1e-4:
            dt0 = dt1
        if dt2 < 1e-4:
            dt2 = dt1

        components = []
        for axis in ("x", "y", "z"):
            c0, c1, c2, c3 = _cubic_coefficients(
                p0[axis], p1[axis], p2[axis], p3[axis], dt0, dt1, dt2
            )
            components.append(c0 + c1 * weight + c2 * weight ** 2 + c3 * weight ** 3)
        return Point3(*components)

    @property
    def start(self) -> Point3:
        return self.points[0]

    @property
    def end(self) -> Point3:
        return self.points[-1]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "points": [p.to_tuple() for p in self.points]}


__all__ = [
    "Segment",
    "LineSegment",
    "QuadraticBezierSegment",
    "CubicBezierSegment",
    "CatmullRomSegment",
]
