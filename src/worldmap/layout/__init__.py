"""Grid layout, normalization, connectivity and routing."""

from worldmap.layout.connectivity import classify_edges, visible_edges
from worldmap.layout.engine import MapLayout, compute_layout, project_positions
from worldmap.layout.normalize import normalize_positions
from worldmap.layout.placement import find_nearby_free_spot, place_locations

__all__ = [
    "MapLayout",
    "classify_edges",
    "compute_layout",
    "find_nearby_free_spot",
    "normalize_positions",
    "place_locations",
    "project_positions",
    "visible_edges",
]
