"""Data model for world map snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from math import sqrt

DEFAULT_AREA = "overworld"

GridPosition = tuple[int, int]


class Direction(Enum):
    """Exit direction between two locations."""

    NORTH = "north"
    NORTHEAST = "northeast"
    EAST = "east"
    SOUTHEAST = "southeast"
    SOUTH = "south"
    SOUTHWEST = "southwest"
    WEST = "west"
    NORTHWEST = "northwest"
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    UNKNOWN = "unknown"

    @property
    def grid_offset(self) -> GridPosition:
        """Cell offset used for placement (positive x east, positive y south)."""
        return _GRID_OFFSETS[self]

    @property
    def unit_vector(self) -> tuple[float, float]:
        """Visual bearing of the direction."""
        return _UNIT_VECTORS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def is_compass(self) -> bool:
        """True for the eight planar directions."""
        return self in _COMPASS

    @classmethod
    def from_offset(cls, dx: int, dy: int) -> Direction:
        """Return the compass direction for a one-cell offset, else UNKNOWN."""
        for direction in _COMPASS:
            if _GRID_OFFSETS[direction] == (dx, dy):
                return direction
        return cls.UNKNOWN

    @classmethod
    def parse(cls, text: str | None) -> Direction:
        """Parse a direction name or abbreviation (``"north"``, ``"NE"``, ``"u"``)."""
        if not text:
            return cls.UNKNOWN
        key = text.strip().lower()
        if key in _ABBREVIATIONS:
            return _ABBREVIATIONS[key]
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN


_COMPASS = (
    Direction.NORTH,
    Direction.NORTHEAST,
    Direction.EAST,
    Direction.SOUTHEAST,
    Direction.SOUTH,
    Direction.SOUTHWEST,
    Direction.WEST,
    Direction.NORTHWEST,
)

_GRID_OFFSETS: dict[Direction, GridPosition] = {
    Direction.NORTH: (0, -1),
    Direction.NORTHEAST: (1, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTHEAST: (1, 1),
    Direction.SOUTH: (0, 1),
    Direction.SOUTHWEST: (-1, 1),
    Direction.WEST: (-1, 0),
    Direction.NORTHWEST: (-1, -1),
    # Vertical and portal links change level, not cell
    Direction.UP: (0, 0),
    Direction.DOWN: (0, 0),
    Direction.ENTER: (0, 0),
    # Unknown exits default to south
    Direction.UNKNOWN: (0, 1),
}

_UNIT_VECTORS: dict[Direction, tuple[float, float]] = {
    Direction.NORTH: (0.0, -1.0),
    Direction.NORTHEAST: (0.707, -0.707),
    Direction.EAST: (1.0, 0.0),
    Direction.SOUTHEAST: (0.707, 0.707),
    Direction.SOUTH: (0.0, 1.0),
    Direction.SOUTHWEST: (-0.707, 0.707),
    Direction.WEST: (-1.0, 0.0),
    Direction.NORTHWEST: (-0.707, -0.707),
    Direction.UP: (0.0, 0.0),
    Direction.DOWN: (0.0, 0.0),
    Direction.ENTER: (0.0, 0.0),
    Direction.UNKNOWN: (0.0, 0.0),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.NORTHEAST: Direction.SOUTHWEST,
    Direction.EAST: Direction.WEST,
    Direction.SOUTHEAST: Direction.NORTHWEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.SOUTHWEST: Direction.NORTHEAST,
    Direction.WEST: Direction.EAST,
    Direction.NORTHWEST: Direction.SOUTHEAST,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.ENTER: Direction.ENTER,
    Direction.UNKNOWN: Direction.UNKNOWN,
}

_ABBREVIATIONS: dict[str, Direction] = {
    "n": Direction.NORTH,
    "ne": Direction.NORTHEAST,
    "e": Direction.EAST,
    "se": Direction.SOUTHEAST,
    "s": Direction.SOUTH,
    "sw": Direction.SOUTHWEST,
    "w": Direction.WEST,
    "nw": Direction.NORTHWEST,
    "u": Direction.UP,
    "d": Direction.DOWN,
    "in": Direction.ENTER,
    "portal": Direction.ENTER,
}


class TerrainType(Enum):
    """Terrain labels attached to a location by the data store."""

    ROAD = "road"
    FOREST = "forest"
    WATER = "water"
    STREAM = "stream"
    RIVER = "river"
    LAKE = "lake"
    MOUNTAIN = "mountain"
    GRASS = "grass"
    BUILDING = "building"
    CAVE = "cave"
    DESERT = "desert"
    COAST = "coast"
    HILLS = "hills"
    SWAMP = "swamp"
    CHURCH = "church"
    CASTLE = "castle"
    PORT = "port"
    RUINS = "ruins"


# Terrain that connector paths bend around, most significant first
OBSTACLE_TERRAINS: tuple[TerrainType, ...] = (
    TerrainType.LAKE,
    TerrainType.MOUNTAIN,
    TerrainType.SWAMP,
    TerrainType.WATER,
)


@dataclass(frozen=True)
class Exit:
    """A directed exit from one location to another."""

    target_id: str
    direction: Direction = Direction.UNKNOWN


@dataclass
class Location:
    """A location in the world snapshot.

    Locations are borrowed read-only by the layout engine; grid
    coordinates are only present when the data store already has them.
    """

    id: str
    name: str = ""
    exits: list[Exit] = field(default_factory=list)
    grid_x: int | None = None
    grid_y: int | None = None
    area_id: str = DEFAULT_AREA
    terrains: frozenset[TerrainType] = field(default_factory=frozenset)

    @property
    def has_stored_coords(self) -> bool:
        return self.grid_x is not None and self.grid_y is not None

    @property
    def stored_position(self) -> GridPosition | None:
        if self.grid_x is None or self.grid_y is None:
            return None
        return (self.grid_x, self.grid_y)

    @property
    def is_obstacle(self) -> bool:
        """True when paths should route around this location."""
        return any(t in self.terrains for t in OBSTACLE_TERRAINS)

    @property
    def obstacle_type(self) -> TerrainType | None:
        """Most significant obstacle label, or None."""
        for terrain in OBSTACLE_TERRAINS:
            if terrain in self.terrains:
                return terrain
        return None


@dataclass(frozen=True)
class NormalizedPosition:
    """A location position in padded [0, 1] render space."""

    x: float
    y: float


@dataclass(frozen=True)
class GridBounds:
    """Integer bounding box of a placed grid."""

    min_x: int
    max_x: int
    min_y: int
    max_y: int
    padding: float = 0.15


@dataclass(frozen=True)
class Point:
    """A point in pixel space."""

    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        return sqrt(dx * dx + dy * dy)


def locations_in_area(
    locations: list[Location],
    area_id: str = DEFAULT_AREA,
) -> list[Location]:
    """Return the locations belonging to one area, in input order."""
    return [loc for loc in locations if (loc.area_id or DEFAULT_AREA) == area_id]
