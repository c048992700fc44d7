"""
Anchor direction model.

An anchor side names the face of a node or connector an edge attaches to.
Each side maps to a fixed unit direction (y up, z toward the viewer) used
to push endpoints outward before routing and to aim bezier control points.
"""

from enum import Enum
from types import MappingProxyType
from typing import Tuple, Union
import logging

from .types import Point3

logger = logging.getLogger(__name__)


class AnchorSide(str, Enum):
    """Side of a node an edge endpoint is anchored to."""
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    FRONT = "front"
    BACK = "back"
    CENTER = "center"


SideLike = Union[AnchorSide, str]

# Read-only so concurrent routing calls can share it
ANCHOR_DIRECTIONS = MappingProxyType({
    AnchorSide.LEFT: Point3(-1.0, 0.0, 0.0),
    AnchorSide.RIGHT: Point3(1.0, 0.0, 0.0),
    AnchorSide.TOP: Point3(0.0, 1.0, 0.0),
    AnchorSide.BOTTOM: Point3(0.0, -1.0, 0.0),
    AnchorSide.FRONT: Point3(0.0, 0.0, 1.0),
    AnchorSide.BACK: Point3(0.0, 0.0, -1.0),
    AnchorSide.CENTER: Point3(0.0, 0.0, 0.0),
})

HORIZONTAL_SIDES = frozenset({AnchorSide.LEFT, AnchorSide.RIGHT})
VERTICAL_SIDES = frozenset({AnchorSide.TOP, AnchorSide.BOTTOM})


def as_side(side: SideLike) -> AnchorSide:
    """Normalize a side given as an enum member or its string value."""
    if isinstance(side, AnchorSide):
        return side
    try:
        return AnchorSide(str(side).lower())
    except ValueError:
        raise ValueError(
            f"Unknown anchor side '{side}'. Supported: {[s.value for s in AnchorSide]}"
        ) from None


def direction(side: SideLike) -> Point3:
    """Unit direction for an anchor side (zero vector for center)."""
    return ANCHOR_DIRECTIONS[as_side(side)]


def gapped_point(point: Point3, side: SideLike, offset: float) -> Point3:
    """Push a point outward along its anchor direction by `offset`."""
    return point + direction(side) * offset


def resolve_center_sides(
    source: Point3,
    target: Point3,
    source_side: SideLike = AnchorSide.CENTER,
    target_side: SideLike = AnchorSide.CENTER,
) -> Tuple[AnchorSide, AnchorSide]:
    """
    Replace 'center' anchors with the side that faces the other endpoint.

    The dominant in-plane delta decides: when |dx| >= |dy| the edge leaves
    through left/right, otherwise through top/bottom. Sides that are not
    'center' are returned unchanged.

    Parameters
    ----------
    source, target : Point3
        Endpoint positions
    source_side, target_side : AnchorSide or str
        Requested sides

    Returns
    -------
    (AnchorSide, AnchorSide)
        Resolved source and target sides
    """
    source_side = as_side(source_side)
    target_side = as_side(target_side)
    if source_side is not AnchorSide.CENTER and target_side is not AnchorSide.CENTER:
        return source_side, target_side

    dx = target.x - source.x
    dy = target.y - source.y
    if abs(dx) >= abs(dy):
        facing = (AnchorSide.RIGHT, AnchorSide.LEFT) if dx >= 0 else (AnchorSide.LEFT, AnchorSide.RIGHT)
    else:
        facing = (AnchorSide.TOP, AnchorSide.BOTTOM) if dy > 0 else (AnchorSide.BOTTOM, AnchorSide.TOP)

    resolved = (
        facing[0] if source_side is AnchorSide.CENTER else source_side,
        facing[1] if target_side is AnchorSide.CENTER else target_side,
    )
    logger.debug(f"Resolved center anchors to {resolved[0].value} -> {resolved[1].value}")
    return resolved


__all__ = [
    "AnchorSide",
    "ANCHOR_DIRECTIONS",
    "HORIZONTAL_SIDES",
    "VERTICAL_SIDES",
    "as_side",
    "direction",
    "gapped_point",
    "resolve_center_sides",
]
