"""Obstacle lookup around an edge."""

from __future__ import annotations

from worldmap.layout.constants import OBSTACLE_SEARCH_FRACTION
from worldmap.layout.routing.common import Obstacle
from worldmap.parser.model import Location, Point


def find_nearby_obstacles(
    from_id: str,
    to_id: str,
    from_center: Point,
    to_center: Point,
    centers: dict[str, Point],
    locations: list[Location],
    search_fraction: float = OBSTACLE_SEARCH_FRACTION,
) -> list[Obstacle]:
    """Return obstacle locations near the midpoint of an edge.

    Only locations other than the two endpoints are considered, and only
    those strictly closer to the midpoint than ``search_fraction`` times
    the edge length. Results keep input order.
    """
    midpoint = Point((from_center.x + to_center.x) / 2,
                     (from_center.y + to_center.y) / 2)
    search_radius = from_center.distance_to(to_center) * search_fraction

    obstacles = []
    for loc in locations:
        if loc.id in (from_id, to_id):
            continue
        terrain = loc.obstacle_type
        center = centers.get(loc.id)
        if terrain is None or center is None:
            continue
        if center.distance_to(midpoint) < search_radius:
            obstacles.append(Obstacle(loc.id, center, terrain))
    return obstacles
