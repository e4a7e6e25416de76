"""SVG preview rendering."""

from worldmap.render.svg import render_svg

__all__ = ["render_svg"]
