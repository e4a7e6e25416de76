"""Layout coordinator: grid placement, normalization, and pixel projection."""

from __future__ import annotations

from dataclasses import dataclass, field

from worldmap.layout.constants import (
    MARKER_DIAMETER,
    PADDING,
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
)
from worldmap.layout.normalize import normalize_positions
from worldmap.layout.placement import place_locations
from worldmap.parser.model import (
    GridBounds,
    GridPosition,
    Location,
    NormalizedPosition,
    Point,
)


@dataclass
class MapLayout:
    """Result of one layout pass over a location snapshot."""

    grid_positions: dict[str, GridPosition] = field(default_factory=dict)
    positions: dict[str, NormalizedPosition] = field(default_factory=dict)
    bounds: GridBounds = field(default_factory=lambda: GridBounds(0, 0, 0, 0))


def compute_layout(
    locations: list[Location],
    padding: float = PADDING,
) -> MapLayout:
    """Place every location on the grid and normalize to render space."""
    grid_positions = place_locations(locations)
    positions, bounds = normalize_positions(grid_positions, padding=padding)
    return MapLayout(grid_positions=grid_positions, positions=positions,
                     bounds=bounds)


def project_positions(
    layout: MapLayout,
    width: float = VIEWPORT_WIDTH,
    height: float = VIEWPORT_HEIGHT,
    marker_diameter: float = MARKER_DIAMETER,
) -> dict[str, Point]:
    """Convert normalized positions to marker centers in pixel space.

    The marker box is kept inside the viewport, so a position of 0 puts
    the marker's left/top edge on the viewport edge.
    """
    half = marker_diameter / 2
    return {
        loc_id: Point(
            pos.x * (width - marker_diameter) + half,
            pos.y * (height - marker_diameter) + half,
        )
        for loc_id, pos in layout.positions.items()
    }
