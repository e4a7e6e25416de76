"""Map integer grid cells into padded [0, 1] render space."""

from __future__ import annotations

__all__ = ["grid_bounds", "normalize_positions"]

from worldmap.layout.constants import DEGENERATE_CENTER, PADDING
from worldmap.parser.model import GridBounds, GridPosition, NormalizedPosition


def grid_bounds(
    grid_positions: dict[str, GridPosition],
    padding: float = PADDING,
) -> GridBounds:
    """Return the integer bounding box of the placed cells."""
    if not grid_positions:
        return GridBounds(0, 0, 0, 0, padding)
    xs = [x for x, _ in grid_positions.values()]
    ys = [y for _, y in grid_positions.values()]
    return GridBounds(min(xs), max(xs), min(ys), max(ys), padding)


def normalize_positions(
    grid_positions: dict[str, GridPosition],
    padding: float = PADDING,
) -> tuple[dict[str, NormalizedPosition], GridBounds]:
    """Normalize grid cells to [padding, 1 - padding] on each axis.

    An axis on which every cell shares the same coordinate is centered
    at 0.5 instead of collapsing onto the padding edge.

    Returns (location_id -> NormalizedPosition, bounds).
    """
    bounds = grid_bounds(grid_positions, padding)

    normalized = {
        loc_id: NormalizedPosition(
            _normalize_axis(x, bounds.min_x, bounds.max_x, padding),
            _normalize_axis(y, bounds.min_y, bounds.max_y, padding),
        )
        for loc_id, (x, y) in grid_positions.items()
    }
    return normalized, bounds


def _normalize_axis(value: int, lo: int, hi: int, padding: float) -> float:
    if hi == lo:
        return DEGENERATE_CENTER
    span = max(1, hi - lo)
    return padding + (1.0 - 2.0 * padding) * (value - lo) / span
