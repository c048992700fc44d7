"""
Elliptical arc primitive.

A 3D ellipse generator with independent x/y/z radii. The z coordinate
reuses the sine term of the y coordinate, so an arc with a non-zero z
radius tilts out of the xy plane without needing a separate angle.
"""

from dataclasses import dataclass
from typing import Any, Dict
import math
import sys

from ..core.types import Point3
from .segments import Segment

EPSILON = sys.float_info.epsilon
TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class EllipticalArc(Segment):
    """
    Elliptical arc around `center`.

    Parameters
    ----------
    center : Point3
        Arc center
    radii : Point3
        Per-axis radii (x, y, z)
    start_angle, end_angle : float
        Angles in radians
    clockwise : bool
        Sweep direction
    rotation : float
        Rotation of the arc about the center, applied to x and y only
    """
    center: Point3
    radii: Point3 = Point3(1.0, 1.0, 1.0)
    start_angle: float = 0.0
    end_angle: float = TWO_PI
    clockwise: bool = False
    rotation: float = 0.0

    kind = "ellipse"

    def __post_init__(self):
        if not (math.isfinite(self.start_angle) and math.isfinite(self.end_angle)):
            raise ValueError(
                f"Arc angles must be finite, got {self.start_angle} -> {self.end_angle}"
            )

    def sweep(self) -> float:
        """Signed angular sweep covered as t goes from 0 to 1."""
        delta = self.end_angle - self.start_angle
        same_points = abs(delta) < EPSILON

        # Wrap into [0, 2pi)
        delta = math.fmod(delta, TWO_PI)
        if delta < 0:
            delta += TWO_PI

        if delta < EPSILON:
            delta = 0.0 if same_points else TWO_PI

        if self.clockwise and not same_points:
            delta = -TWO_PI if delta == TWO_PI else delta - TWO_PI

        return delta

    def point_at(self, t: float) -> Point3:
        angle = self.start_angle + t * self.sweep()
        cx, cy, cz = self.center.x, self.center.y, self.center.z

        x = cx + self.radii.x * math.cos(angle)
        y = cy + self.radii.y * math.sin(angle)
        z = cz + self.radii.z * math.sin(angle)

        if self.rotation != 0:
            cos = math.cos(self.rotation)
            sin = math.sin(self.rotation)
            tx = x - cx
            ty = y - cy
            x = tx * cos - ty * sin + cx
            y = tx * sin + ty * cos + cy

        return Point3(x, y, z)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "center": self.center.to_tuple(),
            "radii": self.radii.to_tuple(),
            "start_angle": self.start_angle,
            "end_angle": self.end_angle,
            "clockwise": self.clockwise,
            "rotation": self.rotation,
        }


__all__ = ["EllipticalArc"]
