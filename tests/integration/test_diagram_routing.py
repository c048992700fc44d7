"""
Test routing whole diagrams built as networkx graphs.
"""

import networkx as nx
import pytest

from flow_policies import EdgePolicy
from flowpath.core.anchors import AnchorSide
from flowpath.core.types import Point3
from flowpath.ops import route_diagram
from flowpath.utils.units import preset_policy


def _diagram():
    graph = nx.DiGraph()
    graph.add_node("a", position=(0, 0, 0))
    graph.add_node("b", position=(4, 2, 0))
    graph.add_node("c", position=(4, -3, 1))
    graph.add_edge("a", "b", from_side="right", to_side="left", policy={"linestyle": "step"})
    graph.add_edge("a", "c")
    graph.add_edge("b", "c", from_side="bottom", to_side="top", policy={"lineoffset": 0.5, "linestyle": "offset"})
    return graph


class TestRouteDiagram:
    """Test diagram-wide routing."""

    def test_every_edge_is_routed(self):
        """Test that all edges are routed with their own styles."""
        edges, report = route_diagram(_diagram())

        assert set(edges) == {("a", "b"), ("a", "c"), ("b", "c")}
        assert edges[("a", "b")].linestyle == "step"
        assert edges[("a", "c")].linestyle == "bezier"
        assert edges[("b", "c")].linestyle == "offset"
        assert report.metrics["edge_count"] == 3
        assert report.metrics["rendered_count"] == 3
        assert report.metrics["skipped_count"] == 0
        assert report.success

    def test_edge_overrides_use_legacy_names(self):
        """Test that legacy option names in edge overrides are honored."""
        edges, _ = route_diagram(_diagram())
        offset_edge = edges[("b", "c")]

        assert offset_edge.path.segments[0].p1.to_tuple() == pytest.approx((4, 1.5, 0))

    def test_center_sides_resolved_per_edge(self):
        """Test that edges without sides face each other."""
        edges, _ = route_diagram(_diagram())

        assert edges[("a", "c")].request.source_side is AnchorSide.RIGHT
        assert edges[("a", "c")].request.target_side is AnchorSide.LEFT

    def test_default_policy_applies(self):
        """Test that the diagram policy is the base for every edge."""
        edges, _ = route_diagram(_diagram(), policy=preset_policy("scene", divisions=5))

        for geometry in edges.values():
            assert geometry.report.effective_policy["divisions"] == 5
        assert len(edges[("a", "c")].polyline) == 6

    def test_explicit_edge_positions(self):
        """Test that edge endpoint positions override node positions."""
        graph = nx.DiGraph()
        graph.add_edge("x", "y", from_position=(0, 0, 0), to_position=(2, 0, 0))
        edges, _ = route_diagram(graph, EdgePolicy(linestyle="straight"))

        assert edges[("x", "y")].path.end == Point3(2, 0, 0)

    def test_missing_position(self):
        """Test that a node without a position is a configuration error."""
        graph = nx.DiGraph()
        graph.add_edge("x", "y")

        with pytest.raises(ValueError, match="has no position"):
            route_diagram(graph)

    def test_skipped_edges_are_reported(self):
        """Test that unroutable edges are counted and prefixed in warnings."""
        graph = _diagram()
        graph.add_edge("c", "a", policy={"linestyle": "custom"})
        edges, report = route_diagram(graph)

        assert not edges[("c", "a")].rendered
        assert edges[("a", "b")].rendered
        assert report.metrics["skipped_count"] == 1
        assert any(w.startswith("c->a: ") for w in report.warnings)

    def test_failing_custom_router_does_not_stop_the_diagram(self):
        """Test that one raising route function only skips its own edge."""
        def broken_router(request):
            raise RuntimeError("no route")

        graph = nx.DiGraph()
        graph.add_node("u", position=(0, 0, 0))
        graph.add_node("v", position=(3, 1, 0))
        graph.add_edge("u", "v", policy={"linestyle": "custom"})
        graph.add_edge("v", "u", policy={"linestyle": "straight"})
        edges, report = route_diagram(graph, custom_router=broken_router)

        assert not edges[("u", "v")].rendered
        assert edges[("v", "u")].rendered
        assert report.metrics["skipped_count"] == 1
        assert report.metrics["rendered_count"] == 1
        assert not report.success
        assert any(e.startswith("u->v: ") and "no route" in e for e in report.errors)
