"""Hand-drawn connector routing with obstacle avoidance.

A connector is a gently meandering curve between two markers rather
than a straight line. The wobble comes from a PRNG seeded by the
location pair, so the same pair always gets the same shape. Nearby
obstacle terrain (lakes, mountains, swamps, open water) pushes the
control points sideways, away from the obstacle.

The push is a bias, not a clearance guarantee: obstacle shapes are
irregular blobs, so the curve only has to read as going around them.
"""

from __future__ import annotations

import random
from math import sqrt

import structlog

from worldmap.layout.connectivity import MapEdge, classify_edges, visible_edges
from worldmap.layout.constants import (
    CONTROL_POINT_SPACING,
    JITTER_FRACTION,
    MARKER_DIAMETER,
    MAX_CONTROL_POINTS,
    MAX_DEVIATION_FRACTION,
    MIN_CONTROL_POINTS,
    MIN_CURVE_LENGTH,
    MOMENTUM,
    OBSTACLE_INFLUENCE_FRACTION,
    OBSTACLE_PUSH,
    TAPER,
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
)
from worldmap.layout.engine import MapLayout, project_positions
from worldmap.layout.routing.common import (
    ConnectionPath,
    Curve,
    Obstacle,
    edge_endpoints,
    edge_seed,
)
from worldmap.layout.routing.obstacles import find_nearby_obstacles
from worldmap.parser.model import Location, Point

logger = structlog.get_logger(__name__)


def route(
    start: Point,
    end: Point,
    seed: int,
    obstacles: list[Obstacle] | None = None,
) -> Curve:
    """Compute the control points of a connector from ``start`` to ``end``.

    Control points are spaced evenly along the segment and offset along
    its perpendicular. Each offset blends the previous one (momentum)
    with a seeded random wobble and the obstacle push, is clamped to the
    maximum deviation, and is tapered to zero near both ends.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    distance = sqrt(dx * dx + dy * dy)

    if distance < MIN_CURVE_LENGTH:
        return _smooth([start, end])

    rng = random.Random(seed)
    perp_x = -dy / distance
    perp_y = dx / distance

    n_points = min(max(int(distance / CONTROL_POINT_SPACING), MIN_CONTROL_POINTS),
                   MAX_CONTROL_POINTS)
    max_deviation = distance * MAX_DEVIATION_FRACTION
    influence_radius = distance * OBSTACLE_INFLUENCE_FRACTION

    points = [start]
    offset = 0.0
    for i in range(1, n_points + 1):
        t = i / (n_points + 1)
        base_x = start.x + dx * t
        base_y = start.y + dy * t

        push = 0.0
        for obstacle in obstacles or ():
            ox = obstacle.point.x - base_x
            oy = obstacle.point.y - base_y
            dist = sqrt(ox * ox + oy * oy)
            if MIN_CURVE_LENGTH < dist < influence_radius:
                strength = (1.0 - dist / influence_radius) * max_deviation * OBSTACLE_PUSH
                # Move to the side of the segment opposite the obstacle
                side = ox * perp_x + oy * perp_y
                push += -strength if side > 0 else strength

        jitter = (rng.random() - 0.5) * 2.0 * max_deviation * JITTER_FRACTION
        offset = offset * MOMENTUM + (jitter + push) * (1.0 - MOMENTUM)
        offset = max(-max_deviation, min(max_deviation, offset))

        taper = max(0.0, min(1.0, min(t, 1.0 - t) * TAPER))
        points.append(Point(base_x + perp_x * offset * taper,
                            base_y + perp_y * offset * taper))
    points.append(end)

    return _smooth(points)


def _smooth(points: list[Point]) -> Curve:
    """Join control points with quadratic pieces through their midpoints."""
    if len(points) <= 2:
        return Curve(control_points=points)

    lead_in = _midpoint(points[0], points[1])
    segments = [
        (points[i], _midpoint(points[i], points[i + 1]))
        for i in range(1, len(points) - 1)
    ]
    return Curve(control_points=points, lead_in=lead_in, segments=segments)


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def route_connections(
    locations: list[Location],
    layout: MapLayout,
    width: float = VIEWPORT_WIDTH,
    height: float = VIEWPORT_HEIGHT,
    marker_diameter: float = MARKER_DIAMETER,
    focused_id: str | None = None,
    edges: list[MapEdge] | None = None,
    visible_only: bool = True,
) -> list[ConnectionPath]:
    """Route a connector for every (visible) edge of the snapshot.

    Edges whose markers overlap in pixel space are dropped.
    """
    if edges is None:
        edges = classify_edges(locations)
    if visible_only:
        edges = visible_edges(edges, focused_id)

    centers = project_positions(layout, width, height, marker_diameter)
    marker_radius = marker_diameter / 2

    paths: list[ConnectionPath] = []
    for edge in edges:
        from_center = centers.get(edge.from_id)
        to_center = centers.get(edge.to_id)
        if from_center is None or to_center is None:
            continue

        # Shape depends only on the unordered pair, not on exit order
        first_id, second_id = edge.key
        endpoints = edge_endpoints(centers[first_id], centers[second_id],
                                   marker_radius)
        if endpoints is None:
            continue
        start, end = endpoints

        obstacles = find_nearby_obstacles(
            edge.from_id, edge.to_id, from_center, to_center, centers, locations,
        )
        if obstacles:
            logger.debug("routing.obstacles", from_id=edge.from_id,
                         to_id=edge.to_id,
                         terrains=[o.terrain.value for o in obstacles])

        seed = edge_seed(edge.from_id, edge.to_id)
        curve = route(start, end, seed,
                      sorted(obstacles, key=lambda o: o.location_id))
        if first_id != edge.from_id:
            start, end = end, start
            curve = _smooth(curve.control_points[::-1])

        paths.append(ConnectionPath(
            from_id=edge.from_id,
            to_id=edge.to_id,
            start=start,
            end=end,
            seed=seed,
            is_two_way=edge.is_two_way,
            obstacles=obstacles,
            curve=curve,
        ))

    return paths
