"""Grid placement for world map locations (integer cell per location).

Locations with stored coordinates are anchors. Everything else is
placed by a multi-source breadth-first expansion from all anchors at
once: a location reached through an exit lands one step away from its
source in the exit's direction. Collisions are resolved with a bounded
spiral search, so placement always terminates with exactly one free
cell per location.
"""

from __future__ import annotations

__all__ = ["find_nearby_free_spot", "place_locations"]

from collections import deque
from collections.abc import Iterator

import structlog

from worldmap.layout.constants import (
    DISCONNECTED_ROW_GAP,
    FALLBACK_OFFSET,
    MAX_SPIRAL_RADIUS,
)
from worldmap.parser.model import GridPosition, Location

logger = structlog.get_logger(__name__)


def place_locations(locations: list[Location]) -> dict[str, GridPosition]:
    """Assign each location a grid cell.

    Stored coordinates are authoritative. Exits are followed in input
    order and each location is placed exactly once; later edges into
    an already placed location are ignored.

    Returns a dict mapping location_id -> (x, y) where positive x is
    east and positive y is south.
    """
    if not locations:
        return {}
    if len(locations) == 1:
        loc = locations[0]
        return {loc.id: loc.stored_position or (0, 0)}

    by_id = {loc.id: loc for loc in locations}
    positions: dict[str, GridPosition] = {}
    occupied: set[GridPosition] = set()

    def assign(loc_id: str, cell: GridPosition) -> None:
        positions[loc_id] = cell
        occupied.add(cell)

    # Seed phase: every stored-coordinate location is an anchor, so the
    # expansion below never moves one
    for loc in locations:
        stored = loc.stored_position
        if stored is None:
            continue
        if stored in occupied:
            logger.warning("placement.stored_collision", location=loc.id,
                           cell=stored)
            stored = find_nearby_free_spot(stored, occupied)
        assign(loc.id, stored)
    if not positions:
        assign(locations[0].id, (0, 0))

    # Expansion phase: BFS from all anchors at once
    queue = deque(positions)
    visited = set(positions)
    while queue:
        current_id = queue.popleft()
        cx, cy = positions[current_id]
        for exit_ in by_id[current_id].exits:
            target = by_id.get(exit_.target_id)
            if target is None or target.id in visited:
                continue

            dx, dy = exit_.direction.grid_offset
            assign(target.id, find_nearby_free_spot((cx + dx, cy + dy), occupied))
            visited.add(target.id)
            queue.append(target.id)

    # Disconnected remainder: rows below the placed graph, input order
    unreached = [loc for loc in locations if loc.id not in positions]
    for index, loc in enumerate(unreached):
        max_y = max(y for _, y in occupied)
        assign(loc.id, find_nearby_free_spot(
            (index, max_y + DISCONNECTED_ROW_GAP), occupied,
        ))

    return positions


def find_nearby_free_spot(
    target: GridPosition,
    occupied: set[GridPosition],
    max_radius: int = MAX_SPIRAL_RADIUS,
) -> GridPosition:
    """Return ``target`` if free, else the first free cell on the nearest ring.

    Rings are squares of radius 1..max_radius around the target. Within
    a ring, columns are visited nearest-first (dx = 0, -1, 1, -2, 2, ...)
    and each column top to bottom, keeping only perimeter cells. If all
    rings are full the search continues east from ``target + FALLBACK_OFFSET``
    until a free cell turns up.
    """
    if target not in occupied:
        return target

    tx, ty = target
    for radius in range(1, max_radius + 1):
        for dx, dy in _ring_cells(radius):
            candidate = (tx + dx, ty + dy)
            if candidate not in occupied:
                logger.debug("placement.collision", wanted=target,
                             placed=candidate, radius=radius)
                return candidate

    fallback = (tx + FALLBACK_OFFSET[0], ty + FALLBACK_OFFSET[1])
    while fallback in occupied:
        fallback = (fallback[0] + 1, fallback[1])
    logger.warning("placement.fallback", wanted=target, placed=fallback,
                   max_radius=max_radius)
    return fallback


def _ring_cells(radius: int) -> Iterator[GridPosition]:
    """Yield the perimeter offsets of a square ring in scan order."""
    columns = [0]
    for step in range(1, radius + 1):
        columns.extend((-step, step))
    for dx in columns:
        for dy in range(-radius, radius + 1):
            if max(abs(dx), abs(dy)) == radius:
                yield (dx, dy)
