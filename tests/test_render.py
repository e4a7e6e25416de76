"""Tests for SVG rendering."""

import xml.etree.ElementTree as ET

from worldmap.parser.model import Direction, Exit, Location, TerrainType
from worldmap.render.svg import render_svg
from worldmap.themes import NIGHT_THEME, PARCHMENT_THEME


def _make_map():
    return [
        Location("a", name="Harbor", grid_x=0, grid_y=0,
                 exits=[Exit("b", Direction.EAST), Exit("c", Direction.SOUTH)]),
        Location("b", name="Lighthouse", exits=[Exit("a", Direction.WEST)]),
        Location("c", name="Tidepool", terrains=frozenset({TerrainType.LAKE})),
    ]


def _render_simple(**kwargs):
    return render_svg(_make_map(), PARCHMENT_THEME, **kwargs)


def test_render_produces_valid_svg():
    svg = _render_simple()
    root = ET.fromstring(svg)
    assert root.tag.endswith("svg") or "svg" in root.tag


def test_render_ends_with_newline():
    assert _render_simple().endswith("</svg>\n")


def test_render_contains_location_labels():
    svg = _render_simple()
    assert "Harbor" in svg
    assert "Lighthouse" in svg
    assert "Tidepool" in svg


def test_render_contains_title():
    svg = _render_simple(title="Coastline")
    assert "Coastline" in svg


def test_render_one_marker_per_location():
    assert _render_simple().count("<circle") == 3


def test_render_hides_one_way_without_focus():
    svg = _render_simple()
    assert svg.count("<path") == 1
    assert PARCHMENT_THEME.two_way_color in svg
    assert PARCHMENT_THEME.one_way_color not in svg


def test_render_shows_one_way_with_focus():
    svg = _render_simple(focused_id="a")
    assert svg.count("<path") == 2
    assert PARCHMENT_THEME.one_way_color in svg
    assert PARCHMENT_THEME.focus_stroke in svg


def test_render_obstacle_fill():
    assert PARCHMENT_THEME.obstacle_fill in _render_simple()


def test_render_theme_background():
    assert PARCHMENT_THEME.background_color in _render_simple()
    night = render_svg(_make_map(), NIGHT_THEME)
    assert NIGHT_THEME.background_color in night


def test_render_viewport_size():
    root = ET.fromstring(_render_simple(width=640, height=480))
    assert root.get("width") == "640"
    assert root.get("height") == "480"


def test_render_deterministic():
    assert _render_simple(focused_id="c") == _render_simple(focused_id="c")


def test_render_empty():
    svg = render_svg([], PARCHMENT_THEME)
    root = ET.fromstring(svg)
    assert len(root) == 0


def test_render_padding_changes_layout():
    assert _render_simple(padding=0.05) != _render_simple()
