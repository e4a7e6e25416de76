"""Tests for grid placement, normalization and the layout coordinator."""

from __future__ import annotations

import pytest

from worldmap.layout.engine import compute_layout, project_positions
from worldmap.layout.normalize import normalize_positions
from worldmap.layout.placement import find_nearby_free_spot, place_locations
from worldmap.parser.model import Direction, Exit, Location, NormalizedPosition


def _loc(loc_id, *exits, x=None, y=None):
    return Location(
        loc_id,
        exits=[Exit(target, direction) for target, direction in exits],
        grid_x=x,
        grid_y=y,
    )


def _make_village():
    """A small connected map with no stored coordinates."""
    return [
        _loc("square", ("gate", Direction.NORTH), ("market", Direction.EAST),
             ("mill", Direction.WEST), ("well", Direction.SOUTH)),
        _loc("gate", ("square", Direction.SOUTH), ("road", Direction.NORTH)),
        _loc("market", ("square", Direction.WEST), ("docks", Direction.SOUTHEAST)),
        _loc("mill", ("square", Direction.EAST)),
        _loc("well", ("square", Direction.NORTH), ("cellar", Direction.DOWN)),
        _loc("road", ("gate", Direction.SOUTH)),
        _loc("docks", ("market", Direction.NORTHWEST)),
        _loc("cellar", ("well", Direction.UP)),
    ]


# ---------------------------------------------------------------------------
# Placement
# ---------------------------------------------------------------------------


def test_place_empty():
    assert place_locations([]) == {}


def test_place_single_without_coords():
    assert place_locations([_loc("a")]) == {"a": (0, 0)}


def test_place_single_with_coords():
    assert place_locations([_loc("a", x=4, y=-2)]) == {"a": (4, -2)}


def test_place_east_neighbor():
    locs = [_loc("a", ("b", Direction.EAST), x=0, y=0), _loc("b")]
    assert place_locations(locs) == {"a": (0, 0), "b": (1, 0)}


def test_place_first_location_seeds_origin():
    locs = [_loc("a", ("b", Direction.SOUTH)), _loc("b")]
    assert place_locations(locs) == {"a": (0, 0), "b": (0, 1)}


def test_place_collision_uses_spiral():
    """B wants (1, 0) but C already holds it, so B moves to (1, -1)."""
    locs = [
        _loc("a", ("b", Direction.EAST), x=0, y=0),
        _loc("b"),
        _loc("c", x=1, y=0),
    ]
    positions = place_locations(locs)
    assert positions["a"] == (0, 0)
    assert positions["c"] == (1, 0)
    assert positions["b"] == (1, -1)


def test_place_offsets_follow_exit_directions():
    positions = place_locations(_make_village())
    assert positions["square"] == (0, 0)
    assert positions["gate"] == (0, -1)
    assert positions["market"] == (1, 0)
    assert positions["mill"] == (-1, 0)
    assert positions["well"] == (0, 1)
    assert positions["road"] == (0, -2)
    assert positions["docks"] == (2, 1)


def test_place_north_exit_offset_consistency():
    """A north exit between expansion-placed locations is one cell up."""
    locs = [
        _loc("a", ("b", Direction.NORTH)),
        _loc("b", ("c", Direction.EAST)),
        _loc("c", ("d", Direction.SOUTH)),
        _loc("d"),
    ]
    positions = place_locations(locs)
    ax, ay = positions["a"]
    assert positions["b"] == (ax, ay - 1)
    assert positions["c"] == (ax + 1, ay - 1)
    assert positions["d"] == (ax + 1, ay)


def test_place_vertical_exit_displaced_from_source():
    """Down/up exits want the same cell as their source and get spiraled."""
    positions = place_locations(_make_village())
    assert positions["cellar"] != positions["well"]
    wx, wy = positions["well"]
    cx, cy = positions["cellar"]
    assert max(abs(cx - wx), abs(cy - wy)) == 1


def test_place_no_collisions():
    positions = place_locations(_make_village())
    cells = list(positions.values())
    assert len(cells) == len(set(cells))


def test_place_every_location_exactly_once():
    locs = _make_village() + [_loc("hermit"), _loc("ruins", x=7, y=7)]
    positions = place_locations(locs)
    assert set(positions) == {loc.id for loc in locs}


def test_place_stored_coords_win_over_offsets():
    locs = [
        _loc("a", ("b", Direction.NORTH), x=0, y=0),
        _loc("b", x=5, y=5),
    ]
    assert place_locations(locs) == {"a": (0, 0), "b": (5, 5)}


def test_place_multi_source_islands():
    """Each stored-coordinate island expands from its own anchor."""
    locs = [
        _loc("a", ("a2", Direction.EAST), x=0, y=0),
        _loc("a2"),
        _loc("b", ("b2", Direction.WEST), x=20, y=20),
        _loc("b2"),
    ]
    positions = place_locations(locs)
    assert positions["a2"] == (1, 0)
    assert positions["b2"] == (19, 20)


def test_place_first_edge_into_location_wins():
    locs = [
        _loc("a", ("c", Direction.EAST), ("b", Direction.SOUTH)),
        _loc("b", ("c", Direction.NORTH)),
        _loc("c"),
    ]
    positions = place_locations(locs)
    assert positions["c"] == (1, 0)


def test_place_disconnected_below_graph():
    locs = [
        _loc("a", ("b", Direction.EAST)),
        _loc("b"),
        _loc("c"),
        _loc("d"),
    ]
    positions = place_locations(locs)
    assert positions["a"] == (0, 0)
    assert positions["b"] == (1, 0)
    assert positions["c"] == (0, 2)
    assert positions["d"] == (1, 4)


def test_place_ignores_exits_to_unknown_locations():
    locs = [_loc("a", ("ghost", Direction.EAST), ("b", Direction.WEST)), _loc("b")]
    assert place_locations(locs) == {"a": (0, 0), "b": (-1, 0)}


def test_place_duplicate_stored_coords_are_separated():
    locs = [_loc("a", x=0, y=0), _loc("b", x=0, y=0)]
    positions = place_locations(locs)
    assert positions["a"] == (0, 0)
    assert positions["b"] != (0, 0)


def test_place_duplicate_inside_full_block_gets_own_cell():
    """Every ring around the wanted cell is taken, so the fallback must be free."""
    locs = [_loc(f"c{x}_{y}", x=x, y=y)
            for x in range(-10, 11) for y in range(-10, 11)]
    locs.append(_loc("dup", x=0, y=0))
    positions = place_locations(locs)
    assert len(set(positions.values())) == len(locs)
    assert positions["dup"] == (11, 0)


def test_place_is_deterministic():
    first = place_locations(_make_village())
    second = place_locations(_make_village())
    assert first == second


# ---------------------------------------------------------------------------
# Spiral search
# ---------------------------------------------------------------------------


class TestFindNearbyFreeSpot:
    def test_free_target_returned(self):
        assert find_nearby_free_spot((3, 3), {(0, 0)}) == (3, 3)

    def test_first_ring_cell_is_above(self):
        assert find_nearby_free_spot((0, 0), {(0, 0)}) == (0, -1)

    def test_scan_order_within_ring(self):
        occupied = {(0, 0), (0, -1), (0, 1)}
        assert find_nearby_free_spot((0, 0), occupied) == (-1, -1)

    def test_moves_to_second_ring_when_first_full(self):
        occupied = {(x, y) for x in range(-1, 2) for y in range(-1, 2)}
        spot = find_nearby_free_spot((0, 0), occupied)
        assert max(abs(spot[0]), abs(spot[1])) == 2
        assert spot == (0, -2)

    def test_fallback_when_all_rings_full(self):
        occupied = {(x, y) for x in range(-10, 11) for y in range(-10, 11)}
        assert find_nearby_free_spot((0, 0), occupied) == (11, 0)

    def test_fallback_steps_east_past_taken_cells(self):
        occupied = {(x, y) for x in range(-10, 11) for y in range(-10, 11)}
        occupied |= {(11, 0), (12, 0)}
        assert find_nearby_free_spot((0, 0), occupied) == (13, 0)

    def test_fallback_is_relative_to_target(self):
        occupied = {(x, y) for x in range(-5, 16) for y in range(-7, 14)}
        assert find_nearby_free_spot((5, 3), occupied) == (16, 3)

    def test_smaller_radius_bound(self):
        occupied = {(x, y) for x in range(-1, 2) for y in range(-1, 2)}
        assert find_nearby_free_spot((0, 0), occupied, max_radius=1) == (10, 0)


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def test_normalize_empty():
    positions, bounds = normalize_positions({})
    assert positions == {}
    assert (bounds.min_x, bounds.max_x, bounds.min_y, bounds.max_y) == (0, 0, 0, 0)


def test_normalize_single_point_centered():
    positions, _ = normalize_positions({"a": (3, -4)})
    assert positions["a"] == NormalizedPosition(0.5, 0.5)


def test_normalize_two_cells_east():
    positions, bounds = normalize_positions({"a": (0, 0), "b": (1, 0)})
    assert (bounds.min_x, bounds.max_x, bounds.min_y, bounds.max_y) == (0, 1, 0, 0)
    assert positions["a"].x == pytest.approx(0.15)
    assert positions["b"].x == pytest.approx(0.85)
    assert positions["a"].y == 0.5
    assert positions["b"].y == 0.5


def test_normalize_within_padding():
    grid = place_locations(_make_village())
    positions, _ = normalize_positions(grid)
    for pos in positions.values():
        assert 0.15 - 1e-9 <= pos.x <= 0.85 + 1e-9
        assert 0.15 - 1e-9 <= pos.y <= 0.85 + 1e-9


def test_normalize_extremes_hit_padding():
    positions, _ = normalize_positions({"a": (-2, 1), "b": (2, 5), "c": (0, 3)})
    assert positions["a"].x == pytest.approx(0.15)
    assert positions["b"].x == pytest.approx(0.85)
    assert positions["c"].x == pytest.approx(0.5)
    assert positions["a"].y == pytest.approx(0.15)
    assert positions["b"].y == pytest.approx(0.85)


def test_normalize_is_monotone():
    grid = {"a": (0, 0), "b": (1, 2), "c": (3, 1), "d": (7, 4)}
    positions, _ = normalize_positions(grid)
    by_x = sorted(grid, key=lambda k: grid[k][0])
    xs = [positions[k].x for k in by_x]
    assert xs == sorted(xs)


def test_normalize_custom_padding():
    positions, bounds = normalize_positions({"a": (0, 0), "b": (4, 4)}, padding=0.1)
    assert bounds.padding == 0.1
    assert positions["a"].x == pytest.approx(0.1)
    assert positions["a"].y == pytest.approx(0.1)
    assert positions["b"].x == pytest.approx(0.9)


# ---------------------------------------------------------------------------
# Coordinator
# ---------------------------------------------------------------------------


def test_compute_layout_single_location():
    layout = compute_layout([_loc("only")])
    assert layout.grid_positions == {"only": (0, 0)}
    assert layout.positions == {"only": NormalizedPosition(0.5, 0.5)}


def test_compute_layout_empty():
    layout = compute_layout([])
    assert layout.grid_positions == {}
    assert layout.positions == {}


def test_compute_layout_deterministic():
    first = compute_layout(_make_village())
    second = compute_layout(_make_village())
    assert first.grid_positions == second.grid_positions
    assert first.positions == second.positions
    assert first.bounds == second.bounds


def test_project_positions_keeps_markers_inside():
    layout = compute_layout([_loc("a", ("b", Direction.EAST), x=0, y=0), _loc("b")])
    centers = project_positions(layout, width=800, height=600, marker_diameter=10)
    assert centers["a"].x == pytest.approx(0.15 * 790 + 5)
    assert centers["b"].x == pytest.approx(0.85 * 790 + 5)
    assert centers["a"].y == pytest.approx(0.5 * 590 + 5)
