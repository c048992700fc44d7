"""
Test that all modules can be imported without collisions.

This module validates that the public packages import cleanly and expose
their documented entry points.
"""

import pytest


class TestFlowPoliciesImport:
    """Test flow_policies package imports cleanly."""

    def test_flow_policies_import(self):
        """Test flow_policies exposes every policy."""
        import flow_policies

        assert hasattr(flow_policies, "EdgePolicy")
        assert hasattr(flow_policies, "StepPolicy")
        assert hasattr(flow_policies, "BezierPolicy")
        assert hasattr(flow_policies, "ArrowPolicy")
        assert hasattr(flow_policies, "TubeMeshPolicy")
        assert hasattr(flow_policies, "OperationReport")


class TestFlowpathImport:
    """Test flowpath package imports cleanly."""

    def test_top_level_api(self):
        """Test the top-level re-exports."""
        import flowpath

        assert flowpath.__version__
        for name in flowpath.__all__:
            assert hasattr(flowpath, name), name

    @pytest.mark.parametrize("module", [
        "flowpath.core",
        "flowpath.curves",
        "flowpath.routing",
        "flowpath.ops",
        "flowpath.utils",
        "flowpath.cli",
    ])
    def test_subpackages(self, module):
        """Test that each subpackage imports on its own."""
        import importlib

        mod = importlib.import_module(module)
        for name in getattr(mod, "__all__", []):
            assert hasattr(mod, name), f"{module}.{name}"
