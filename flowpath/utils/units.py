"""
Unit-system presets for edge routing.

Diagrams are laid out either in screen pixels (the convention of 2D flow
editors) or in scene units (roughly meters in a 3D viewer, where a node is
about one unit wide). The routing formulas are the same in both; only
the length-valued constants change.

UNIT CONVENTIONS
----------------
SCENE units are the default everywhere in flowpath. Use preset_policy("px")
when feeding pixel coordinates straight from a 2D editor.
"""

from typing import Any, Dict

from flow_policies import BezierPolicy, EdgePolicy, StepPolicy

DEFAULT_UNITS = "scene"

UNIT_PRESETS: Dict[str, Dict[str, float]] = {
    "px": {
        "curvature_scale": 25.0,
        "border_radius": 5.0,
        "step_offset": 20.0,
        "min_gap": 1.0,
    },
    "scene": {
        "curvature_scale": 2.5,
        "border_radius": 0.1,
        "step_offset": 0.1,
        "min_gap": 0.01,
    },
}


def get_unit_preset(units: str = DEFAULT_UNITS) -> Dict[str, float]:
    """
    Length constants for a unit system.

    Parameters
    ----------
    units : str
        'px' or 'scene'

    Returns
    -------
    dict
        Copy of the preset (curvature_scale, border_radius, step_offset, min_gap)
    """
    if units not in UNIT_PRESETS:
        raise ValueError(f"Unknown unit system '{units}'. Supported: {list(UNIT_PRESETS.keys())}")
    return dict(UNIT_PRESETS[units])


def preset_policy(units: str = DEFAULT_UNITS, **overrides: Any) -> EdgePolicy:
    """
    EdgePolicy with the step and bezier constants for a unit system.

    Keyword overrides are applied to the top-level EdgePolicy fields
    (linestyle, divisions, thickness, line_offset).

    Examples
    --------
    >>> preset_policy("px").bezier.curvature_scale
    25.0
    >>> preset_policy("scene", linestyle="step").step.offset
    0.1
    """
    preset = get_unit_preset(units)
    step = StepPolicy(
        border_radius=preset["border_radius"],
        offset=preset["step_offset"],
        min_gap=preset["min_gap"],
    )
    bezier = BezierPolicy(curvature_scale=preset["curvature_scale"])
    return EdgePolicy(step=step, bezier=bezier, **overrides)


__all__ = ["DEFAULT_UNITS", "UNIT_PRESETS", "get_unit_preset", "preset_policy"]
