"""Route search over the yard grid."""

from .reachability import RouteOption, is_reachable, manhattan, shortest_options

__all__ = ["RouteOption", "is_reachable", "manhattan", "shortest_options"]
