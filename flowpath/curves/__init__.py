"""
Curve primitives and piecewise paths.

This module provides the segment types (line, quadratic and cubic bezier,
elliptical arc, Catmull-Rom spline) and the Path3 / PathBuilder pair the
routers build on.
"""

from .segments import (
    Segment,
    LineSegment,
    QuadraticBezierSegment,
    CubicBezierSegment,
    CatmullRomSegment,
)
from .ellipse import EllipticalArc
from .path import Path3, PathBuilder, segment_from_dict

__all__ = [
    "Segment",
    "LineSegment",
    "QuadraticBezierSegment",
    "CubicBezierSegment",
    "CatmullRomSegment",
    "EllipticalArc",
    "Path3",
    "PathBuilder",
    "segment_from_dict",
]
