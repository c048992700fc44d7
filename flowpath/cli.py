"""
Command-Line Interface

CLI for routing diagram edges and exporting edge tubes from the command line.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import networkx as nx

from flow_policies import EdgePolicy, TubeMeshPolicy

from .core.anchors import AnchorSide
from .ops.diagram import route_diagram
from .ops.edge import build_edge_geometry
from .ops.tube import sweep_edge_tube
from .routing.base import LineStyle
from .utils.units import UNIT_PRESETS, preset_policy

logger = logging.getLogger(__name__)

SIDE_CHOICES = [s.value for s in AnchorSide]
STYLE_CHOICES = [s.value for s in LineStyle if s is not LineStyle.CUSTOM]


def _parse_point(text: str) -> List[float]:
    values = [float(v) for v in text.split(",")]
    if len(values) not in (2, 3):
        raise argparse.ArgumentTypeError(f"Expected 'x,y' or 'x,y,z', got '{text}'")
    return values


def _load_json(path: Optional[str]) -> Dict[str, Any]:
    if not path:
        return {}
    with open(path) as f:
        return json.load(f)


def _build_policy(args) -> EdgePolicy:
    """Unit preset, then policy file, then explicit flags."""
    policy = preset_policy(args.units)
    policy = policy.merged(_load_json(args.policy))

    overrides: Dict[str, Any] = {}
    if args.style is not None:
        overrides["linestyle"] = args.style
    if args.divisions is not None:
        overrides["divisions"] = args.divisions
    if getattr(args, "thickness", None) is not None:
        overrides["thickness"] = args.thickness
    if args.arrows in ("to", "both"):
        overrides["to_arrow"] = {"enabled": True}
    if args.arrows in ("from", "both"):
        overrides["from_arrow"] = {"enabled": True}
    return policy.merged(overrides)


def _add_edge_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--from", dest="source", type=_parse_point, required=True,
                   help="Source point as x,y[,z]")
    p.add_argument("--to", dest="target", type=_parse_point, required=True,
                   help="Target point as x,y[,z]")
    p.add_argument("--from-side", choices=SIDE_CHOICES, default="center",
                   help="Source anchor side (default: center)")
    p.add_argument("--to-side", choices=SIDE_CHOICES, default="center",
                   help="Target anchor side (default: center)")
    p.add_argument("--style", choices=STYLE_CHOICES, default=None,
                   help="Line style (default: from policy, bezier)")


def _add_common_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--units", choices=list(UNIT_PRESETS.keys()), default="scene",
                   help="Coordinate units for the routing constants (default: scene)")
    p.add_argument("--policy", type=str, default=None,
                   help="JSON file with an EdgePolicy (or overrides)")
    p.add_argument("--divisions", type=int, default=None,
                   help="Samples per path segment")
    p.add_argument("--arrows", choices=["none", "to", "from", "both"], default="none",
                   help="Arrowheads to place (default: none)")
    p.add_argument("--verbose", "-v", action="store_true",
                   help="Enable verbose output")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flowpath",
        description="flowpath - 3D edge routing for flow diagrams",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    route_parser = subparsers.add_parser("route", help="Route one edge and print it as JSON")
    _add_edge_arguments(route_parser)
    _add_common_arguments(route_parser)

    tube_parser = subparsers.add_parser("tube", help="Route one edge and export its tube mesh")
    _add_edge_arguments(tube_parser)
    _add_common_arguments(tube_parser)
    tube_parser.add_argument("--output", "-o", type=str, required=True,
                             help="Mesh file to write (.stl, .ply, .obj)")
    tube_parser.add_argument("--thickness", type=float, default=None,
                             help="Tube radius (default: from policy)")
    tube_parser.add_argument("--radial-sections", type=int, default=16,
                             help="Vertices per tube ring (default: 16)")
    tube_parser.add_argument("--no-caps", action="store_true",
                             help="Leave the tube ends open")

    diagram_parser = subparsers.add_parser("diagram", help="Route every edge of a JSON diagram")
    diagram_parser.add_argument("--input", "-i", type=str, required=True,
                                help="Diagram JSON with 'nodes' and 'edges' lists")
    diagram_parser.add_argument("--style", choices=STYLE_CHOICES, default=None,
                                help="Default line style")
    _add_common_arguments(diagram_parser)

    return parser


def run_route(args) -> int:
    """Run the route command."""
    geometry = build_edge_geometry(
        args.source, args.target, args.from_side, args.to_side, policy=_build_policy(args)
    )
    print(json.dumps(geometry.to_dict(), indent=2))
    return 0 if geometry.rendered else 1


def run_tube(args) -> int:
    """Run the tube command."""
    policy = _build_policy(args)
    geometry = build_edge_geometry(
        args.source, args.target, args.from_side, args.to_side, policy=policy
    )
    if not geometry.rendered:
        print(f"Edge was not rendered: {geometry.report.warnings}")
        return 1

    mesh, report = sweep_edge_tube(
        geometry.polyline,
        thickness=policy.thickness,
        policy=TubeMeshPolicy(radial_sections=args.radial_sections, cap_ends=not args.no_caps),
    )
    if not report.success:
        print(f"Tube sweep failed: {report.errors}")
        return 1

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    mesh.export(str(output))
    print(f"Wrote {output} ({report.vertex_count} vertices, {report.face_count} faces)")
    return 0


def diagram_from_dict(data: Dict[str, Any]) -> nx.DiGraph:
    """
    Build a diagram graph from its JSON form.

    {"nodes": [{"id": "a", "position": [x, y, z]}, ...],
     "edges": [{"from": "a", "to": "b", "from_side": "right", ...}, ...]}
    """
    graph = nx.DiGraph()
    for node in data.get("nodes", []):
        attrs = {k: v for k, v in node.items() if k != "id"}
        graph.add_node(node["id"], **attrs)
    for edge in data.get("edges", []):
        attrs = {k: v for k, v in edge.items() if k not in ("from", "to")}
        graph.add_edge(edge["from"], edge["to"], **attrs)
    return graph


def run_diagram(args) -> int:
    """Run the diagram command."""
    graph = diagram_from_dict(_load_json(args.input))
    edges, report = route_diagram(graph, policy=_build_policy(args))
    output = {
        "edges": [
            {"from": u, "to": v, **geometry.to_dict()}
            for (u, v), geometry in edges.items()
        ],
        "report": report.to_dict(),
    }
    print(json.dumps(output, indent=2, default=str))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.command == "route":
            return run_route(args)
        if args.command == "tube":
            return run_tube(args)
        return run_diagram(args)
    except (OSError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
