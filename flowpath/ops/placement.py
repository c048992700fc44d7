"""
Arrowhead placement along a routed path.

An arrow sits at a normalized fraction of the path (using the
equal-share-per-segment convention of Path3.point_at_fraction) and is
rotated in the xy plane to follow the local tangent. The arrow glyph is
drawn pointing along -y in its own frame, so a quarter turn is added to
the tangent angle.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging
import math

import numpy as np

from flow_policies import ArrowPolicy

from ..core.types import Point3
from ..curves.path import Path3

logger = logging.getLogger(__name__)

ARROW_ROTATION_CORRECTION = math.pi / 2


def _clamp(t: float) -> float:
    return min(max(t, 0.0), 1.0)


@dataclass(frozen=True)
class ArrowPlacement:
    """
    Position and orientation of one arrowhead.

    Attributes
    ----------
    position : Point3
        Where the arrow tip sits
    rotation : float
        Rotation about z in radians
    fraction : float
        Path fraction the arrow was placed at
    toward_end : bool
        True when the arrow points toward the path end
    """
    position: Point3
    rotation: float
    fraction: float
    toward_end: bool

    def outline(self, policy: Optional[ArrowPolicy] = None) -> np.ndarray:
        """
        World-space outline of the arrow glyph as a (4, 3) array.

        The glyph is the notched triangle tip, left wing, notch, right wing,
        scaled by policy.scale and rotated about the tip.
        """
        policy = policy or ArrowPolicy()
        local = np.array([
            [0.0, 0.0],
            [-policy.width, policy.height + policy.indent],
            [0.0, policy.height],
            [policy.width, policy.height + policy.indent],
        ]) * policy.scale

        c, s = math.cos(self.rotation), math.sin(self.rotation)
        rot = np.array([[c, -s], [s, c]])
        xy = local @ rot.T

        outline = np.zeros((4, 3))
        outline[:, :2] = xy + [self.position.x, self.position.y]
        outline[:, 2] = self.position.z
        return outline

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position.to_dict(),
            "rotation": self.rotation,
            "fraction": self.fraction,
            "toward_end": self.toward_end,
        }


def place_arrow(
    path: Path3,
    fraction: float,
    toward_end: bool = True,
    delta: float = 0.05,
) -> ArrowPlacement:
    """
    Place an arrowhead on a path.

    Parameters
    ----------
    path : Path3
        Routed path
    fraction : float
        Normalized position along the path, clamped to [0, 1]
    toward_end : bool
        Orient the arrow toward the path end (True) or start (False)
    delta : float
        Fraction spread of the two samples used to estimate the tangent

    Returns
    -------
    ArrowPlacement

    Raises
    ------
    EmptyPathError
        If the path has no segments
    """
    fraction = _clamp(fraction)
    position = path.point_at_fraction(fraction)

    behind = path.point_at_fraction(_clamp(fraction - delta))
    ahead = path.point_at_fraction(_clamp(fraction + delta))
    if not toward_end:
        behind, ahead = ahead, behind

    tangent = ahead - behind
    rotation = math.atan2(tangent.y, tangent.x) + ARROW_ROTATION_CORRECTION
    return ArrowPlacement(position=position, rotation=rotation, fraction=fraction, toward_end=toward_end)


def place_edge_arrows(
    path: Path3,
    from_arrow: Optional[ArrowPolicy] = None,
    to_arrow: Optional[ArrowPolicy] = None,
) -> Dict[str, ArrowPlacement]:
    """
    Place the enabled arrowheads of an edge.

    The 'to' arrow sits `offset` before the path end and points at the end;
    the 'from' arrow sits `offset` after the start and points at the start.

    Returns
    -------
    dict
        Subset of {'from': ArrowPlacement, 'to': ArrowPlacement}
    """
    arrows: Dict[str, ArrowPlacement] = {}
    if to_arrow is not None and to_arrow.enabled:
        arrows["to"] = place_arrow(path, 1.0 - to_arrow.offset, toward_end=True, delta=to_arrow.delta)
    if from_arrow is not None and from_arrow.enabled:
        arrows["from"] = place_arrow(path, from_arrow.offset, toward_end=False, delta=from_arrow.delta)

    if arrows:
        logger.debug(f"Placed arrows: {sorted(arrows)}")
    return arrows


__all__ = ["ArrowPlacement", "place_arrow", "place_edge_arrows", "ARROW_ROTATION_CORRECTION"]
