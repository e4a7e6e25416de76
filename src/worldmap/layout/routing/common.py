"""Shared types and helper functions for connector routing."""

from __future__ import annotations

from dataclasses import dataclass, field

from worldmap.parser.model import Point, TerrainType


@dataclass(frozen=True)
class Obstacle:
    """A nearby obstacle location the connector should bend away from."""

    location_id: str
    point: Point
    terrain: TerrainType


@dataclass
class Curve:
    """A smoothed connector: control points plus quadratic segments.

    ``segments`` holds (control, end) pairs for quadratic Bezier pieces
    that follow the initial ``start -> lead_in`` straight run.
    """

    control_points: list[Point]
    lead_in: Point | None = None
    segments: list[tuple[Point, Point]] = field(default_factory=list)

    @property
    def start(self) -> Point:
        return self.control_points[0]

    @property
    def end(self) -> Point:
        return self.control_points[-1]


@dataclass
class ConnectionPath:
    """A routed connector between two locations."""

    from_id: str
    to_id: str
    start: Point
    end: Point
    seed: int
    is_two_way: bool
    obstacles: list[Obstacle] = field(default_factory=list)
    curve: Curve | None = None


def string_hash(text: str) -> int:
    """Return a 32-bit signed hash of ``text`` that is stable across runs.

    Uses the ``s[0]*31^(n-1) + ... + s[n-1]`` polynomial over UTF-16
    code units, so seeds match the game client's.
    """
    h = 0
    data = text.encode("utf-16-be", "surrogatepass")
    for i in range(0, len(data), 2):
        h = (31 * h + (data[i] << 8 | data[i + 1])) & 0xFFFFFFFF
    return h - (1 << 32) if h & 0x80000000 else h


def edge_seed(a: str, b: str) -> int:
    """Seed for a location pair; symmetric in its arguments."""
    return string_hash(a) ^ string_hash(b)


def edge_endpoints(
    from_center: Point,
    to_center: Point,
    marker_radius: float,
) -> tuple[Point, Point] | None:
    """Shorten a center-to-center segment so it touches both marker edges.

    Returns None when the markers touch or overlap.
    """
    distance = from_center.distance_to(to_center)
    if distance <= marker_radius * 2:
        return None

    nx = (to_center.x - from_center.x) / distance
    ny = (to_center.y - from_center.y) / distance
    return (
        Point(from_center.x + nx * marker_radius, from_center.y + ny * marker_radius),
        Point(to_center.x - nx * marker_radius, to_center.y - ny * marker_radius),
    )
