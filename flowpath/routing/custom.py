"""
Custom router hook.

Applications plug in their own routing by handing a callable to
CustomRouter. The callable receives the RouteRequest and must return a
RouteResult.
"""

from typing import Callable, Optional

from ..core.errors import UnimplementedRouterError
from .base import EdgeRouter, LineStyle, RouteRequest, RouteResult

RouteFunction = Callable[[RouteRequest], RouteResult]


class CustomRouter(EdgeRouter):
    """Delegates routing to a user-supplied function."""

    style = LineStyle.CUSTOM

    def __init__(self, route_fn: Optional[RouteFunction] = None):
        self.route_fn = route_fn

    def route(self, request: RouteRequest) -> RouteResult:
        if self.route_fn is None:
            raise UnimplementedRouterError(
                "Custom line style selected but no route function was supplied"
            )
        return self.route_fn(request)


__all__ = ["CustomRouter", "RouteFunction"]
