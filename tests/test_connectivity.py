"""Tests for edge classification and one-way visibility."""

from __future__ import annotations

from worldmap.layout.connectivity import (
    MapEdge,
    canonical_key,
    classify_edges,
    is_edge_visible,
    visible_edges,
)
from worldmap.parser.model import Direction, Exit, Location


def _make_graph():
    """a <-> b two-way, a -> c one-way, d isolated."""
    return [
        Location("a", exits=[Exit("b", Direction.EAST), Exit("c", Direction.SOUTH)]),
        Location("b", exits=[Exit("a", Direction.WEST)]),
        Location("c"),
        Location("d"),
    ]


def test_reciprocal_exits_give_one_two_way_edge():
    locs = [
        Location("a", exits=[Exit("b", Direction.EAST)]),
        Location("b", exits=[Exit("a", Direction.WEST)]),
    ]
    edges = classify_edges(locs)
    assert edges == [MapEdge("a", "b", True)]


def test_classify_mixed_graph():
    edges = classify_edges(_make_graph())
    assert edges == [MapEdge("a", "b", True), MapEdge("a", "c", False)]


def test_one_way_from_id_is_exit_owner():
    locs = [Location("z", exits=[Exit("a")]), Location("a")]
    assert classify_edges(locs) == [MapEdge("z", "a", False)]


def test_two_way_regardless_of_direction_labels():
    """Reciprocity only looks at targets, not at whether directions are opposite."""
    locs = [
        Location("a", exits=[Exit("b", Direction.NORTH)]),
        Location("b", exits=[Exit("a", Direction.ENTER)]),
    ]
    assert classify_edges(locs)[0].is_two_way


def test_duplicate_exits_to_same_target_recorded_once():
    locs = [
        Location("a", exits=[Exit("b", Direction.EAST), Exit("b", Direction.NORTH)]),
        Location("b"),
    ]
    assert len(classify_edges(locs)) == 1


def test_self_and_unknown_exits_skipped():
    locs = [Location("a", exits=[Exit("a"), Exit("nowhere")])]
    assert classify_edges(locs) == []


def test_classify_empty():
    assert classify_edges([]) == []


def test_canonical_key_is_symmetric():
    assert canonical_key("b", "a") == canonical_key("a", "b") == ("a", "b")
    assert MapEdge("b", "a", False).key == ("a", "b")


class TestVisibility:
    one_way = MapEdge("a", "c", False)
    two_way = MapEdge("a", "b", True)

    def test_two_way_always_visible(self):
        assert is_edge_visible(self.two_way, None)
        assert is_edge_visible(self.two_way, "zzz")

    def test_one_way_hidden_without_focus(self):
        assert not is_edge_visible(self.one_way, None)

    def test_one_way_visible_when_endpoint_focused(self):
        assert is_edge_visible(self.one_way, "a")
        assert is_edge_visible(self.one_way, "c")

    def test_one_way_hidden_when_other_location_focused(self):
        assert not is_edge_visible(self.one_way, "b")

    def test_visible_edges_filters(self):
        edges = classify_edges(_make_graph())
        assert visible_edges(edges, None) == [MapEdge("a", "b", True)]
        assert visible_edges(edges, "c") == edges
