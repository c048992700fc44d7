"""
Base utilities for flow policies.

This module provides shared helpers and the OperationReport dataclass
returned by edge routing operations.
"""

from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, List, Tuple
import json


def validate_policy(policy: Any, required_fields: Optional[List[str]] = None) -> List[str]:
    """
    Validate a policy object.

    Parameters
    ----------
    policy : Any
        Policy dataclass instance to validate
    required_fields : List[str], optional
        List of field names that must be non-None

    Returns
    -------
    List[str]
        List of validation error messages (empty if valid)
    """
    errors = []

    if required_fields:
        for field_name in required_fields:
            if not hasattr(policy, field_name):
                errors.append(f"Missing required field: {field_name}")
            elif getattr(policy, field_name) is None:
                errors.append(f"Required field is None: {field_name}")

    return errors


def coerce_float(value: Any, default: float = 0.0) -> float:
    """
    Coerce a value to float, with fallback to default.

    Policy files written by hand often carry numbers as strings
    ("0.25") or leave a field out entirely.
    """
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def coerce_vec3(value: Any) -> Optional[Tuple[Optional[float], Optional[float], Optional[float]]]:
    """
    Coerce a partial 3D vector, keeping missing components as None.

    Used for per-axis overrides such as a step edge center, where any
    axis may be left to the router's default.

    Accepts:
    - None (no override)
    - tuple/list of up to 3 numbers (or None entries)
    - dict with any of the x, y, z keys
    - object with x, y, z attributes

    Parameters
    ----------
    value : Any
        Value to coerce

    Returns
    -------
    tuple or None
        (x, y, z) with None for each axis that is not overridden
    """
    if value is None:
        return None

    if isinstance(value, dict):
        raw = [value.get("x"), value.get("y"), value.get("z")]
    elif isinstance(value, (tuple, list)):
        raw = list(value)[:3] + [None] * (3 - min(len(value), 3))
    elif hasattr(value, "x") and hasattr(value, "y") and hasattr(value, "z"):
        raw = [value.x, value.y, value.z]
    else:
        raise ValueError(f"Cannot interpret {value!r} as a 3D vector")

    return tuple(None if v is None else float(v) for v in raw)


def alias_fields(d: Dict[str, Any], aliases: Dict[str, str]) -> Dict[str, Any]:
    """
    Apply field aliases to a dictionary.

    This allows legacy (camelCase) edge parameter names to be mapped to
    canonical names.

    Parameters
    ----------
    d : dict
        Input dictionary
    aliases : dict
        Mapping of legacy_name -> canonical_name

    Returns
    -------
    dict
        Dictionary with aliases applied
    """
    result = d.copy()
    for legacy_name, canonical_name in aliases.items():
        if legacy_name in result and canonical_name not in result:
            result[canonical_name] = result.pop(legacy_name)
    return result


@dataclass
class OperationReport:
    """
    Standard report structure for routing operations.

    Every edge build returns a report with requested vs effective policy,
    warnings, errors and operation-specific metrics. Routing failures are
    recorded here instead of being raised so one bad edge never takes the
    rest of a diagram down with it.
    """
    operation: str = "unknown"
    success: bool = True
    requested_policy: Dict[str, Any] = field(default_factory=dict)
    effective_policy: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def add_error(self, message: str) -> None:
        """Add an error message and mark as failed."""
        self.errors.append(message)
        self.success = False

    def merge(self, other: "OperationReport") -> None:
        """Merge another report into this one."""
        self.warnings.extend(other.warnings)
        self.errors.extend(other.errors)
        if not other.success:
            self.success = False
        self.metrics.update(other.metrics)


__all__ = [
    "OperationReport",
    "validate_policy",
    "coerce_float",
    "coerce_vec3",
    "alias_fields",
]
