"""Connector routing subpackage for world map layout.

Public API:
- route: Control points for one connector
- route_connections: Route every visible edge of a snapshot
- ConnectionPath, Curve, Obstacle: Routing result types
- edge_seed, edge_endpoints: Per-edge helpers
- find_nearby_obstacles: Obstacle lookup around an edge midpoint
"""

from worldmap.layout.routing.common import (
    ConnectionPath,
    Curve,
    Obstacle,
    edge_endpoints,
    edge_seed,
    string_hash,
)
from worldmap.layout.routing.core import route, route_connections
from worldmap.layout.routing.obstacles import find_nearby_obstacles

__all__ = [
    "ConnectionPath",
    "Curve",
    "Obstacle",
    "edge_endpoints",
    "edge_seed",
    "find_nearby_obstacles",
    "route",
    "route_connections",
    "string_hash",
]
