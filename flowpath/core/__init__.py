"""Core value types, anchor directions and errors."""

from .types import Point3, ORIGIN
from .anchors import (
    AnchorSide,
    ANCHOR_DIRECTIONS,
    as_side,
    direction,
    gapped_point,
    resolve_center_sides,
)
from .errors import FlowPathError, EmptyPathError, UnimplementedRouterError

__all__ = [
    "Point3",
    "ORIGIN",
    "AnchorSide",
    "ANCHOR_DIRECTIONS",
    "as_side",
    "direction",
    "gapped_point",
    "resolve_center_sides",
    "FlowPathError",
    "EmptyPathError",
    "UnimplementedRouterError",
]
