"""
Edge routing policies.

This module contains the policy dataclasses that configure how an edge
between two anchored endpoints is routed, sampled and decorated.

All policies are JSON-serializable and support from_dict/to_dict methods.

UNIT CONVENTIONS
----------------
Defaults are in SCENE units (roughly meters at diagram scale). Pixel-scale
presets are available from flowpath.utils.units.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .base import alias_fields, coerce_float, coerce_vec3


# Option names used by diagram editors for edge settings
EDGE_ALIASES = {
    "lineoffset": "line_offset",
    "linedivisions": "divisions",
    "fromarrow": "from_arrow",
    "toarrow": "to_arrow",
}

STEP_ALIASES = {
    "stepRadius": "border_radius",
    "borderRadius": "border_radius",
    "stepOffset": "offset",
}

BEZIER_ALIASES = {
    "bezierCurvature": "curvature",
}

LINE_STYLES = ("straight", "step", "bezier", "spline", "offset", "split", "custom")


@dataclass
class StepPolicy:
    """
    Policy for orthogonal ("step") routing.

    JSON Schema:
    {
        "border_radius": float (corner radius),
        "offset": float (gap pushed out from the node surface),
        "center": [x|null, y|null, z|null] | null,
        "min_gap": float (smallest gap kept when endpoints crowd)
    }
    """
    border_radius: float = 0.1
    offset: float = 0.1
    center: Optional[Tuple[Optional[float], Optional[float], Optional[float]]] = None
    min_gap: float = 0.01

    def to_dict(self) -> Dict[str, Any]:
        return {
            "border_radius": self.border_radius,
            "offset": self.offset,
            "center": list(self.center) if self.center is not None else None,
            "min_gap": self.min_gap,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "StepPolicy":
        d = alias_fields(d, STEP_ALIASES)
        kwargs = {k: v for k, v in d.items() if k in cls.__dataclass_fields__}
        if "center" in kwargs:
            kwargs["center"] = coerce_vec3(kwargs["center"])
        for name in ("border_radius", "offset", "min_gap"):
            if name in kwargs:
                kwargs[name] = coerce_float(kwargs[name], getattr(cls, name))
        return cls(**kwargs)


@dataclass
class BezierPolicy:
    """
    Policy for cubic bezier routing.

    When an endpoint sits "behind" the other relative to its anchor
    direction the control offset grows with the square root of that
    distance, scaled by curvature * curvature_scale. The scale depends on
    the unit system: 25 for pixel coordinates, 2.5 for scene coordinates.

    JSON Schema:
    {
        "curvature": float,
        "curvature_scale": float
    }
    """
    curvature: float = 0.25
    curvature_scale: float = 2.5

    def to_dict(self) -> Dict[str, Any]:
        return {
            "curvature": self.curvature,
            "curvature_scale": self.curvature_scale,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "BezierPolicy":
        d = alias_fields(d, BEZIER_ALIASES)
        return cls(**{
            k: coerce_float(v, getattr(cls, k))
            for k, v in d.items() if k in cls.__dataclass_fields__
        })


@dataclass
class ArrowPolicy:
    """
    Policy for one arrowhead.

    `offset` is the normalized distance from the path end where the arrow
    sits; `delta` is the fraction spread used to estimate the tangent.

    JSON Schema:
    {
        "enabled": bool,
        "offset": float (0-1),
        "delta": float (0-1),
        "width": float,
        "height": float,
        "indent": float,
        "scale": float
    }
    """
    enabled: bool = False
    offset: float = 0.1
    delta: float = 0.05
    width: float = 0.15
    height: float = 0.3
    indent: float = 0.05
    scale: float = 1.0 / 3.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "offset": self.offset,
            "delta": self.delta,
            "width": self.width,
            "height": self.height,
            "indent": self.indent,
            "scale": self.scale,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ArrowPolicy":
        # An arrow given as an (even empty) dict is an arrow the caller wants
        kwargs = {k: v for k, v in d.items() if k in cls.__dataclass_fields__}
        kwargs.setdefault("enabled", True)
        return cls(**kwargs)


@dataclass
class EdgePolicy:
    """
    Policy for a complete edge: routing style, sampling and decorations.

    JSON Schema:
    {
        "linestyle": "straight" | "step" | "bezier" | "spline" | "offset" | "split" | "custom",
        "divisions": int (samples per path segment, >= 3),
        "thickness": float (tube radius),
        "line_offset": float (spline/offset/split styles),
        "step": StepPolicy,
        "bezier": BezierPolicy,
        "from_arrow": ArrowPolicy,
        "to_arrow": ArrowPolicy
    }
    """
    linestyle: str = "bezier"
    divisions: int = 20
    thickness: float = 0.01
    line_offset: float = 0.2
    step: StepPolicy = field(default_factory=StepPolicy)
    bezier: BezierPolicy = field(default_factory=BezierPolicy)
    from_arrow: ArrowPolicy = field(default_factory=ArrowPolicy)
    to_arrow: ArrowPolicy = field(default_factory=ArrowPolicy)

    def __post_init__(self):
        if self.linestyle not in LINE_STYLES:
            raise ValueError(
                f"Unknown linestyle '{self.linestyle}'. Supported: {list(LINE_STYLES)}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "linestyle": self.linestyle,
            "divisions": self.divisions,
            "thickness": self.thickness,
            "line_offset": self.line_offset,
            "step": self.step.to_dict(),
            "bezier": self.bezier.to_dict(),
            "from_arrow": self.from_arrow.to_dict(),
            "to_arrow": self.to_arrow.to_dict(),
        }

    @staticmethod
    def _normalize(d: Dict[str, Any]) -> Dict[str, Any]:
        """Apply aliases and fold flat legacy keys (stepRadius, ...) into the nested policies."""
        d = alias_fields(d, EDGE_ALIASES)
        for key, aliases in (("step", STEP_ALIASES), ("bezier", BEZIER_ALIASES)):
            nested = alias_fields(dict(d.get(key) or {}), aliases)
            for legacy, canonical in aliases.items():
                if legacy in d:
                    nested.setdefault(canonical, d.pop(legacy))
            if nested or key in d:
                d[key] = nested
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "EdgePolicy":
        d = cls._normalize(d)

        kwargs = {
            k: v for k, v in d.items()
            if k in cls.__dataclass_fields__
            and k not in ("step", "bezier", "from_arrow", "to_arrow")
        }
        if "divisions" in kwargs:
            kwargs["divisions"] = int(kwargs["divisions"])
        for name in ("thickness", "line_offset"):
            if name in kwargs:
                kwargs[name] = coerce_float(kwargs[name], getattr(cls, name))

        kwargs["step"] = StepPolicy.from_dict(d.get("step") or {})
        kwargs["bezier"] = BezierPolicy.from_dict(d.get("bezier") or {})
        for arrow_key in ("from_arrow", "to_arrow"):
            arrow = d.get(arrow_key)
            if arrow is not None:
                kwargs[arrow_key] = ArrowPolicy.from_dict(arrow)
        return cls(**kwargs)

    @classmethod
    def for_units(cls, units: str = "scene", **overrides: Any) -> "EdgePolicy":
        """Policy preset for 'px' or 'scene' coordinates."""
        from flowpath.utils.units import preset_policy
        return preset_policy(units, **overrides)

    def merged(self, overrides: Optional[Dict[str, Any]]) -> "EdgePolicy":
        """Return a copy with a (possibly nested) override dict applied."""
        if not overrides:
            return self
        base = self.to_dict()
        for key, value in self._normalize(overrides).items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                base[key] = {**base[key], **value}
            else:
                base[key] = value
        return EdgePolicy.from_dict(base)


@dataclass
class TubeMeshPolicy:
    """
    Policy for sweeping an edge polyline into a tube mesh.

    JSON Schema:
    {
        "radial_sections": int,
        "cap_ends": bool
    }
    """
    radial_sections: int = 16
    cap_ends: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "radial_sections": self.radial_sections,
            "cap_ends": self.cap_ends,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "TubeMeshPolicy":
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})


__all__ = [
    "StepPolicy",
    "BezierPolicy",
    "ArrowPolicy",
    "EdgePolicy",
    "TubeMeshPolicy",
    "LINE_STYLES",
]
