"""
Router selection.

Maps an EdgePolicy's linestyle to a configured router instance.
"""

from typing import Optional, Union

from flow_policies import EdgePolicy

from .base import EdgeRouter, LineStyle
from .bezier import BezierRouter
from .custom import CustomRouter, RouteFunction
from .spline import OffsetRouter, SplineRouter, SplitRouter
from .step import StepRouter
from .straight import StraightRouter


def get_router(
    style: Union[LineStyle, str],
    policy: Optional[EdgePolicy] = None,
    custom_router: Optional[RouteFunction] = None,
) -> EdgeRouter:
    """
    Build the router for a line style.

    Parameters
    ----------
    style : LineStyle or str
        Routing mode
    policy : EdgePolicy, optional
        Source of the per-style settings; defaults when omitted
    custom_router : callable, optional
        Route function used by the 'custom' style

    Raises
    ------
    ValueError
        If the style is not a known line style
    """
    try:
        style = LineStyle(style)
    except ValueError:
        raise ValueError(
            f"Unknown linestyle '{style}'. Supported: {[s.value for s in LineStyle]}"
        ) from None

    policy = policy or EdgePolicy()

    if style is LineStyle.STRAIGHT:
        return StraightRouter()
    if style is LineStyle.STEP:
        return StepRouter(policy.step)
    if style is LineStyle.BEZIER:
        return BezierRouter(policy.bezier)
    if style is LineStyle.SPLINE:
        return SplineRouter(policy.line_offset)
    if style is LineStyle.OFFSET:
        return OffsetRouter(policy.line_offset)
    if style is LineStyle.SPLIT:
        return SplitRouter(policy.line_offset)
    return CustomRouter(custom_router)


__all__ = ["get_router"]
