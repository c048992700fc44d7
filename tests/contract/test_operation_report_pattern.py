"""
Test that public operations return OperationReport with requested/effective policy.

This module validates the contract that edge and diagram operations report
both the policy they were asked for and the policy they actually used.
"""

import json

import networkx as nx

from flow_policies import EdgePolicy, OperationReport


class TestBuildEdgeGeometryReport:
    """Test build_edge_geometry carries an OperationReport."""

    def test_edge_report_has_policies(self):
        """Test the edge report records requested and effective policies."""
        from flowpath.ops import build_edge_geometry

        edge = build_edge_geometry((0, 0, 0), (1, 1, 0), policy=EdgePolicy(divisions=2))
        report = edge.report

        assert isinstance(report, OperationReport)
        assert report.operation == "build_edge_geometry"
        assert report.requested_policy["divisions"] == 2
        assert report.effective_policy["divisions"] == 3

    def test_edge_report_is_json_serializable(self):
        """Test the edge report serializes to JSON."""
        from flowpath.ops import build_edge_geometry

        edge = build_edge_geometry((0, 0, 0), (1, 1, 0), policy=EdgePolicy(linestyle="step"))
        data = json.loads(edge.report.to_json())

        assert data["operation"] == "build_edge_geometry"
        assert data["metrics"]["rendered"] is True


class TestRouteDiagramReport:
    """Test route_diagram returns an aggregate OperationReport."""

    def test_diagram_report(self):
        """Test the diagram report merges per-edge results."""
        from flowpath.ops import route_diagram

        graph = nx.DiGraph()
        graph.add_node(1, position=(0, 0, 0))
        graph.add_node(2, position=(2, 0, 0))
        graph.add_edge(1, 2)
        _, report = route_diagram(graph)

        assert isinstance(report, OperationReport)
        assert report.operation == "route_diagram"
        assert report.effective_policy == EdgePolicy().to_dict()
        json.loads(report.to_json())


class TestOperationReport:
    """Test the report helpers."""

    def test_add_error_marks_failure(self):
        """Test that recording an error flips success."""
        report = OperationReport(operation="test")
        report.add_warning("careful")

        assert report.success
        report.add_error("broken")
        assert not report.success
        assert report.warnings == ["careful"]

    def test_merge(self):
        """Test merging reports."""
        a = OperationReport(operation="a", metrics={"x": 1})
        b = OperationReport(operation="b", metrics={"y": 2})
        b.add_error("bad")
        a.merge(b)

        assert not a.success
        assert a.errors == ["bad"]
        assert a.metrics == {"x": 1, "y": 2}
