"""Utility functions for flowpath."""

from .units import (
    DEFAULT_UNITS,
    UNIT_PRESETS,
    get_unit_preset,
    preset_policy,
)

from .geometry import (
    points_to_array,
    dedupe_consecutive,
    polyline_length,
)

__all__ = [
    "DEFAULT_UNITS",
    "UNIT_PRESETS",
    "get_unit_preset",
    "preset_policy",
    "points_to_array",
    "dedupe_consecutive",
    "polyline_length",
]
