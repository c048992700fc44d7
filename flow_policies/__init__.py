"""
Flow Policies - Centralized policy definitions for edge routing.

This package provides the policy dataclasses consumed by the flowpath
routers and edge builders. All policies are JSON-serializable and support
the "requested vs effective" reporting pattern.

Usage:
    from flow_policies import EdgePolicy, StepPolicy, OperationReport
    from flow_policies.routing import BezierPolicy
"""

from .base import (
    OperationReport,
    validate_policy,
    coerce_float,
    coerce_vec3,
    alias_fields,
)

from .routing import (
    StepPolicy,
    BezierPolicy,
    ArrowPolicy,
    EdgePolicy,
    TubeMeshPolicy,
    LINE_STYLES,
)

__all__ = [
    # Base
    "OperationReport",
    "validate_policy",
    "coerce_float",
    "coerce_vec3",
    "alias_fields",
    # Routing
    "StepPolicy",
    "BezierPolicy",
    "ArrowPolicy",
    "EdgePolicy",
    "TubeMeshPolicy",
    "LINE_STYLES",
]
