"""
Edge operations built on the routers.

- placement: arrowhead position and orientation
- edge: route + sample + arrows for one edge, with an OperationReport
- tube: trimesh tube along a sampled edge
- diagram: route every edge of a networkx diagram
"""

from .placement import ArrowPlacement, place_arrow, place_edge_arrows
from .edge import EdgeGeometry, build_edge_geometry
from .tube import SweepReport, sweep_edge_tube, compute_transport_frames
from .diagram import route_diagram

__all__ = [
    "ArrowPlacement",
    "place_arrow",
    "place_edge_arrows",
    "EdgeGeometry",
    "build_edge_geometry",
    "SweepReport",
    "sweep_edge_tube",
    "compute_transport_frames",
    "route_diagram",
]
