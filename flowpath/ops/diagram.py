"""
Route every edge of a diagram graph.

Diagrams are networkx DiGraphs. Nodes carry a `position`; edges may carry
per-endpoint overrides and a policy override dict:

    G.add_node("a", position=(0, 0, 0))
    G.add_node("b", position=(4, 2, 0))
    G.add_edge("a", "b", from_side="right", to_side="left",
               policy={"linestyle": "step"})

Edges are routed independently, so one failing edge never affects the
others. Results are keyed by (u, v).
"""

from typing import Dict, Hashable, Optional, Tuple
import logging

import networkx as nx

from flow_policies import EdgePolicy, OperationReport

from ..core.anchors import AnchorSide
from ..routing import RouteFunction
from .edge import EdgeGeometry, build_edge_geometry

logger = logging.getLogger(__name__)

EdgeKey = Tuple[Hashable, Hashable]


def _endpoint(graph: nx.DiGraph, node: Hashable, data: Dict, key: str):
    """Explicit edge endpoint if given, else the node's position."""
    if data.get(key) is not None:
        return data[key]
    position = graph.nodes[node].get("position")
    if position is None:
        raise ValueError(f"Node '{node}' has no position and edge gives no '{key}'")
    return position


def route_diagram(
    graph: nx.DiGraph,
    policy: Optional[EdgePolicy] = None,
    custom_router: Optional[RouteFunction] = None,
) -> Tuple[Dict[EdgeKey, EdgeGeometry], OperationReport]:
    """
    Route all edges of a diagram.

    Parameters
    ----------
    graph : nx.DiGraph
        Diagram with node attribute `position` and optional edge attributes
        `from_side`, `to_side`, `from_position`, `to_position` and `policy`
    policy : EdgePolicy, optional
        Default policy; an edge's `policy` dict is merged over it
    custom_router : callable, optional
        Route function for edges using the 'custom' line style

    Returns
    -------
    edges : dict
        (u, v) -> EdgeGeometry
    report : OperationReport
        Aggregate report; per-edge warnings are prefixed with the edge key
    """
    policy = policy or EdgePolicy()
    report = OperationReport(
        operation="route_diagram",
        requested_policy=policy.to_dict(),
        effective_policy=policy.to_dict(),
    )

    edges: Dict[EdgeKey, EdgeGeometry] = {}
    skipped = 0
    for u, v, data in graph.edges(data=True):
        edge_policy = policy.merged(data.get("policy"))
        geometry = build_edge_geometry(
            _endpoint(graph, u, data, "from_position"),
            _endpoint(graph, v, data, "to_position"),
            data.get("from_side", AnchorSide.CENTER),
            data.get("to_side", AnchorSide.CENTER),
            policy=edge_policy,
            custom_router=custom_router,
        )
        edges[(u, v)] = geometry

        for warning in geometry.report.warnings:
            report.add_warning(f"{u}->{v}: {warning}")
        for error in geometry.report.errors:
            report.add_error(f"{u}->{v}: {error}")
        if not geometry.rendered:
            skipped += 1

    report.metrics.update({
        "edge_count": len(edges),
        "rendered_count": len(edges) - skipped,
        "skipped_count": skipped,
    })
    logger.info(f"Routed {len(edges)} diagram edges ({skipped} skipped)")
    return edges, report


__all__ = ["route_diagram"]
