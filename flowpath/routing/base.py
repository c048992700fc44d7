"""
Shared types for edge routers.

Routers are small stateless strategies: each takes a RouteRequest (two
anchored endpoints) and returns a RouteResult (path, label point and label
offset). Calling a router twice with the same request yields identical
results.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from ..core.anchors import AnchorSide, SideLike, as_side
from ..core.types import Point3
from ..curves.path import Path3


class LineStyle(str, Enum):
    """Routing modes selectable from an edge policy."""
    STRAIGHT = "straight"
    STEP = "step"
    BEZIER = "bezier"
    SPLINE = "spline"
    OFFSET = "offset"
    SPLIT = "split"
    CUSTOM = "custom"


@dataclass(frozen=True)
class RouteRequest:
    """Two anchored endpoints to connect."""
    source: Point3
    target: Point3
    source_side: AnchorSide = AnchorSide.BOTTOM
    target_side: AnchorSide = AnchorSide.TOP

    def __post_init__(self):
        object.__setattr__(self, "source", Point3.from_any(self.source))
        object.__setattr__(self, "target", Point3.from_any(self.target))
        object.__setattr__(self, "source_side", as_side(self.source_side))
        object.__setattr__(self, "target_side", as_side(self.target_side))

    @classmethod
    def create(
        cls,
        source: Any,
        target: Any,
        source_side: SideLike = AnchorSide.BOTTOM,
        target_side: SideLike = AnchorSide.TOP,
    ) -> "RouteRequest":
        return cls(source, target, source_side, target_side)


@dataclass(frozen=True)
class RouteResult:
    """
    Output of a router.

    Attributes
    ----------
    path : Path3
        The routed curve
    label : Point3
        Where to center the edge's text anchor
    offset : Point3
        Per-axis label displacement magnitude, for auxiliary layout
    """
    path: Path3
    label: Point3
    offset: Point3

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path.to_dict(),
            "label": self.label.to_dict(),
            "offset": self.offset.to_dict(),
        }


class EdgeRouter(ABC):
    """Strategy interface for computing an edge path."""

    style: LineStyle

    @abstractmethod
    def route(self, request: RouteRequest) -> RouteResult:
        """Route an edge between the request's endpoints."""


def get_edge_center(source: Point3, target: Point3) -> Tuple[Point3, Point3]:
    """
    Label center and offset for an edge between two points.

    Per axis the offset is half the separation and the center is reached
    by stepping that offset from the target back toward the source.

    Returns
    -------
    (center, offset) : (Point3, Point3)
    """
    center = []
    offset = []
    for axis in ("x", "y", "z"):
        s = source[axis]
        t = target[axis]
        half = abs(t - s) / 2
        center.append(t + half if t < s else t - half)
        offset.append(half)
    return Point3(*center), Point3(*offset)


__all__ = [
    "LineStyle",
    "RouteRequest",
    "RouteResult",
    "EdgeRouter",
    "get_edge_center",
]
