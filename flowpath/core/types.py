"""
Core value types for edge geometry.

Points are immutable value objects; every router builds fresh ones and
nothing in the library holds on to them between calls.
"""

from dataclasses import dataclass
from typing import Any, Dict
import math

import numpy as np


@dataclass(frozen=True)
class Point3:
    """3D point (or vector) with value semantics."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Point3") -> "Point3":
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point3") -> "Point3":
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Point3":
        return Point3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __getitem__(self, axis: str) -> float:
        """Component access by axis name ('x', 'y' or 'z')."""
        if axis not in ("x", "y", "z"):
            raise KeyError(axis)
        return getattr(self, axis)

    def replace(self, **components: float) -> "Point3":
        """Return a copy with some components replaced."""
        return Point3(
            components.get("x", self.x),
            components.get("y", self.y),
            components.get("z", self.z),
        )

    def dot(self, other: "Point3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Point3") -> "Point3":
        return Point3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def distance_to(self, other: "Point3") -> float:
        return (self - other).length()

    def normalized(self) -> "Point3":
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Point3()
        return self * (1.0 / length)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def to_tuple(self):
        return (self.x, self.y, self.z)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_array(cls, arr: Any) -> "Point3":
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    @classmethod
    def from_any(cls, value: Any) -> "Point3":
        """
        Build a point from a Point3, a dict with x/y/z keys, or a sequence.

        Two-element sequences and dicts without 'z' get z = 0, which is how
        flat diagram coordinates usually arrive.
        """
        if isinstance(value, Point3):
            return value
        if isinstance(value, dict):
            return cls(float(value["x"]), float(value["y"]), float(value.get("z", 0.0)))
        values = [float(v) for v in value]
        if len(values) == 2:
            values.append(0.0)
        if len(values) != 3:
            raise ValueError(f"Expected 2 or 3 coordinates, got {len(values)}")
        return cls(*values)


ORIGIN = Point3()


__all__ = ["Point3", "ORIGIN"]
