"""
Edge assembly: route, sample and decorate one edge.

build_edge_geometry is what a rendering layer calls whenever an endpoint
moves or the edge style changes. It never raises for routing failures:
a missing custom router or an empty path is logged as a warning, recorded
in the report, and the edge comes back without a polyline so the caller
can skip its visual update. A route function that raises or returns
something other than a RouteResult, and a policy missing its required
fields, are handled the same way but recorded as report errors.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional
import logging

from flow_policies import EdgePolicy, OperationReport, validate_policy

from ..core.anchors import AnchorSide, SideLike, resolve_center_sides
from ..core.errors import EmptyPathError, FlowPathError, UnimplementedRouterError
from ..core.types import Point3
from ..curves.path import Path3
from ..routing import RouteFunction, RouteRequest, RouteResult, get_router
from ..utils.geometry import polyline_length
from .placement import ArrowPlacement, place_edge_arrows

logger = logging.getLogger(__name__)

# Fewer samples than this per segment cannot show a bend
MIN_DIVISIONS = 3


@dataclass
class EdgeGeometry:
    """
    Everything a renderer needs for one edge.

    `polyline` is empty when the edge could not be rendered. `path`,
    `label` and `offset` stay None when no router was available.
    """
    request: RouteRequest
    linestyle: str
    path: Optional[Path3] = None
    polyline: List[Point3] = field(default_factory=list)
    label: Optional[Point3] = None
    offset: Optional[Point3] = None
    arrows: Dict[str, ArrowPlacement] = field(default_factory=dict)
    report: OperationReport = field(default_factory=OperationReport)

    @property
    def rendered(self) -> bool:
        return bool(self.polyline)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.request.source.to_dict(),
            "target": self.request.target.to_dict(),
            "source_side": self.request.source_side.value,
            "target_side": self.request.target_side.value,
            "linestyle": self.linestyle,
            "path": self.path.to_dict() if self.path is not None else None,
            "polyline": [p.to_dict() for p in self.polyline],
            "label": self.label.to_dict() if self.label is not None else None,
            "offset": self.offset.to_dict() if self.offset is not None else None,
            "arrows": {name: arrow.to_dict() for name, arrow in self.arrows.items()},
            "report": self.report.to_dict(),
        }


def build_edge_geometry(
    source: Any,
    target: Any,
    source_side: SideLike = AnchorSide.CENTER,
    target_side: SideLike = AnchorSide.CENTER,
    policy: Optional[EdgePolicy] = None,
    custom_router: Optional[RouteFunction] = None,
) -> EdgeGeometry:
    """
    Route an edge and sample it for rendering.

    Parameters
    ----------
    source, target : Point3, tuple or dict
        Endpoint positions
    source_side, target_side : AnchorSide or str
        Anchor sides; 'center' is resolved to the side facing the other endpoint
    policy : EdgePolicy, optional
        Routing style, sampling and arrow settings
    custom_router : callable, optional
        Route function for the 'custom' line style

    Returns
    -------
    EdgeGeometry
        Routed edge; check `rendered` (or `report.warnings` and `report.errors`) for skipped edges

    Raises
    ------
    ValueError
        For invalid configuration (unknown side or line style)
    """
    policy = policy or EdgePolicy()
    report = OperationReport(
        operation="build_edge_geometry",
        requested_policy=policy.to_dict(),
    )

    source = Point3.from_any(source)
    target = Point3.from_any(target)
    resolved_source_side, resolved_target_side = resolve_center_sides(
        source, target, source_side, target_side
    )
    request = RouteRequest(source, target, resolved_source_side, resolved_target_side)

    errors = validate_policy(policy, ["linestyle", "divisions"])
    if errors:
        for error in errors:
            report.add_error(error)
        logger.warning(f"Skipping edge with invalid policy: {'; '.join(errors)}")
        report.effective_policy = policy.to_dict()
        report.metrics["rendered"] = False
        return EdgeGeometry(request=request, linestyle=policy.linestyle, report=report)

    divisions = max(MIN_DIVISIONS, int(policy.divisions))
    if divisions != policy.divisions:
        report.add_warning(
            f"divisions {policy.divisions} raised to the minimum of {MIN_DIVISIONS}"
        )
    effective = replace(policy, divisions=divisions)
    report.effective_policy = effective.to_dict()

    geometry = EdgeGeometry(request=request, linestyle=effective.linestyle, report=report)

    router = get_router(effective.linestyle, effective, custom_router)
    try:
        result = router.route(request)
        if not isinstance(result, RouteResult):
            raise FlowPathError(
                f"{effective.linestyle} router returned {type(result).__name__}, "
                f"expected RouteResult"
            )
    except UnimplementedRouterError as e:
        logger.warning(f"Skipping {effective.linestyle} edge: {e}")
        report.add_warning(str(e))
        report.metrics["rendered"] = False
        return geometry
    except Exception as e:
        logger.warning(f"Routing failed for {effective.linestyle} edge: {e}")
        report.add_error(f"Routing failed: {e}")
        report.metrics["rendered"] = False
        return geometry

    geometry.path = result.path
    geometry.label = result.label
    geometry.offset = result.offset

    try:
        polyline = result.path.get_points(divisions)
        if not polyline:
            raise EmptyPathError(f"{effective.linestyle} router produced no sample points")
        geometry.arrows = place_edge_arrows(result.path, effective.from_arrow, effective.to_arrow)
    except EmptyPathError as e:
        logger.warning(f"Skipping render update: {e}")
        report.add_warning(str(e))
        report.metrics["rendered"] = False
        return geometry

    geometry.polyline = polyline
    report.metrics.update({
        "rendered": True,
        "segment_count": result.path.segment_count,
        "point_count": len(polyline),
        "polyline_length": polyline_length(polyline),
        "arrows": sorted(geometry.arrows),
    })
    logger.debug(
        f"Built {effective.linestyle} edge {request.source_side.value} -> "
        f"{request.target_side.value}: {len(polyline)} points"
    )
    return geometry


__all__ = ["EdgeGeometry", "build_edge_geometry", "MIN_DIVISIONS"]
