"""
Exceptions raised by the routing core.

Routers themselves never raise for degenerate geometry; these errors mark
the two conditions a caller has to handle explicitly.
"""


class FlowPathError(Exception):
    """Base exception for flowpath errors."""
    pass


class EmptyPathError(FlowPathError):
    """Raised when a path has no segments to sample or evaluate."""
    pass


class UnimplementedRouterError(FlowPathError):
    """Raised when custom routing is requested but no implementation was supplied."""
    pass


__all__ = ["FlowPathError", "EmptyPathError", "UnimplementedRouterError"]
