"""
Polyline helpers shared by edge assembly and tube meshing.

Sampled paths repeat the joint point between consecutive segments, and
degenerate routes can collapse to a single location; these helpers give
the consumers a clean array to work with.
"""

from typing import Iterable, Sequence

import numpy as np

from ..core.types import Point3


def points_to_array(points: Iterable[Point3]) -> np.ndarray:
    """
    Stack points into an (N, 3) float array.

    Accepts Point3 instances or anything Point3.from_any understands.
    """
    rows = [Point3.from_any(p).to_tuple() for p in points]
    if not rows:
        return np.zeros((0, 3), dtype=float)
    return np.array(rows, dtype=float)


def dedupe_consecutive(points: np.ndarray, tol: float = 1e-12) -> np.ndarray:
    """
    Drop points that coincide with their predecessor.

    Parameters
    ----------
    points : np.ndarray
        (N, 3) polyline
    tol : float
        Distance below which two consecutive points are the same

    Returns
    -------
    np.ndarray
        (M, 3) polyline with M <= N; the first point is always kept
    """
    points = np.asarray(points, dtype=float)
    if len(points) < 2:
        return points.copy()

    step = np.linalg.norm(np.diff(points, axis=0), axis=1)
    keep = np.concatenate([[True], step > tol])
    return points[keep]


def polyline_length(points: Sequence) -> float:
    """Total length of a polyline given as an array or a list of points."""
    arr = points if isinstance(points, np.ndarray) else points_to_array(points)
    if len(arr) < 2:
        return 0.0
    return float(np.linalg.norm(np.diff(arr, axis=0), axis=1).sum())


__all__ = ["points_to_array", "dedupe_consecutive", "polyline_length"]
