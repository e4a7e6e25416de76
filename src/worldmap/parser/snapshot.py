"""Parser for JSON world snapshots.

Accepts either ``{"locations": [...]}`` or a bare list of location
objects. Keys follow the game server's camelCase DTOs (``gridX``,
``areaId``, ``locationId``) with snake_case aliases accepted too.
"""

from __future__ import annotations

import json

from worldmap.parser.model import (
    DEFAULT_AREA,
    Direction,
    Exit,
    Location,
    TerrainType,
)

_TERRAIN_BY_LABEL = {t.value: t for t in TerrainType}


def parse_snapshot(text: str) -> list[Location]:
    """Parse a JSON location snapshot into Location objects."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Snapshot is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("locations", [])
    if not isinstance(data, list):
        raise ValueError("Snapshot must be a list of locations or an object "
                         "with a 'locations' list")

    locations: list[Location] = []
    seen: set[str] = set()
    for i, raw in enumerate(data):
        if not isinstance(raw, dict):
            raise ValueError(f"Location #{i} is not an object")
        loc = _parse_location(raw, i)
        if loc.id in seen:
            raise ValueError(f"Duplicate location id '{loc.id}'")
        seen.add(loc.id)
        locations.append(loc)

    return locations


def _parse_location(raw: dict, index: int) -> Location:
    loc_id = raw.get("id")
    if loc_id is None or str(loc_id) == "":
        raise ValueError(f"Location #{index} has no 'id'")
    loc_id = str(loc_id)

    grid_x = _coord(raw, "gridX", "grid_x", loc_id)
    grid_y = _coord(raw, "gridY", "grid_y", loc_id)
    area_id = raw.get("areaId", raw.get("area_id")) or DEFAULT_AREA

    exits = []
    for raw_exit in _list_field(raw, "exits", loc_id):
        if isinstance(raw_exit, str):
            exits.append(Exit(raw_exit))
            continue
        if not isinstance(raw_exit, dict):
            raise ValueError(f"Exit on '{loc_id}' is not an object or id")
        target = raw_exit.get("locationId", raw_exit.get("target"))
        if target is None:
            raise ValueError(f"Exit on '{loc_id}' has no target location")
        direction = raw_exit.get("direction")
        if not isinstance(direction, str):
            direction = None
        exits.append(Exit(str(target), Direction.parse(direction)))

    # Unknown labels are ignored; classification is owned by the data store
    terrains = frozenset(
        _TERRAIN_BY_LABEL[label.lower()]
        for label in _list_field(raw, "terrains", loc_id)
        if isinstance(label, str) and label.lower() in _TERRAIN_BY_LABEL
    )

    return Location(
        id=loc_id,
        name=str(raw.get("name", "")),
        exits=exits,
        grid_x=grid_x,
        grid_y=grid_y,
        area_id=str(area_id),
        terrains=terrains,
    )


def _list_field(raw: dict, key: str, loc_id: str) -> list:
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"Location '{loc_id}' has non-list {key}: {value!r}")
    return value


def _coord(raw: dict, key: str, alias: str, loc_id: str) -> int | None:
    value = raw.get(key, raw.get(alias))
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Location '{loc_id}' has non-integer {key}: {value!r}")
    return value
