"""Edge de-duplication and one-way visibility.

Each unordered pair of connected locations yields a single edge. An
edge is two-way when both locations declare exits to each other. Two-way
edges are always shown; one-way edges only when one of their endpoints
is focused.
"""

from __future__ import annotations

__all__ = [
    "MapEdge",
    "canonical_key",
    "classify_edges",
    "exit_graph",
    "is_edge_visible",
    "visible_edges",
]

from dataclasses import dataclass

import networkx as nx

from worldmap.parser.model import Location


@dataclass(frozen=True)
class MapEdge:
    """An undirected connection between two locations."""

    from_id: str
    to_id: str
    is_two_way: bool

    @property
    def key(self) -> tuple[str, str]:
        return canonical_key(self.from_id, self.to_id)


def canonical_key(a: str, b: str) -> tuple[str, str]:
    """Order a pair of IDs so (a, b) and (b, a) share a key."""
    return (a, b) if a < b else (b, a)


def exit_graph(locations: list[Location]) -> nx.DiGraph:
    """Build a directed graph of exits between known locations."""
    G = nx.DiGraph()
    for loc in locations:
        G.add_node(loc.id)
    for loc in locations:
        for exit_ in loc.exits:
            if exit_.target_id in G and exit_.target_id != loc.id:
                G.add_edge(loc.id, exit_.target_id)
    return G


def classify_edges(locations: list[Location]) -> list[MapEdge]:
    """Return one edge per connected pair, in first-seen exit order.

    ``from_id`` is the location whose exit was encountered first.
    Self-exits and exits to IDs outside the snapshot are skipped.
    """
    G = exit_graph(locations)
    edges: list[MapEdge] = []
    seen: set[tuple[str, str]] = set()

    for loc in locations:
        for exit_ in loc.exits:
            to_id = exit_.target_id
            if to_id == loc.id or to_id not in G:
                continue
            key = canonical_key(loc.id, to_id)
            if key in seen:
                continue
            seen.add(key)
            edges.append(MapEdge(loc.id, to_id, G.has_edge(to_id, loc.id)))

    return edges


def is_edge_visible(edge: MapEdge, focused_id: str | None) -> bool:
    """Two-way edges always; one-way edges only when an endpoint is focused."""
    if edge.is_two_way:
        return True
    if focused_id is None:
        return False
    return focused_id in (edge.from_id, edge.to_id)


def visible_edges(edges: list[MapEdge], focused_id: str | None) -> list[MapEdge]:
    return [e for e in edges if is_edge_visible(e, focused_id)]
