"""SVG preview of a world map layout using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from worldmap.layout.constants import MARKER_DIAMETER, PADDING
from worldmap.layout.engine import compute_layout, project_positions
from worldmap.layout.routing import ConnectionPath, route_connections
from worldmap.parser.model import Location, Point
from worldmap.render.style import Theme


def render_svg(
    locations: list[Location],
    theme: Theme,
    width: int = 800,
    height: int = 600,
    marker_diameter: float = MARKER_DIAMETER,
    focused_id: str | None = None,
    title: str = "",
    padding: float = PADDING,
) -> str:
    """Render a location snapshot to an SVG string."""
    if not locations:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>\n'

    layout = compute_layout(locations, padding=padding)
    centers = project_positions(layout, width, height, marker_diameter)
    paths = route_connections(
        locations, layout, width, height, marker_diameter, focused_id=focused_id,
    )

    d = draw.Drawing(width, height)
    d.append(draw.Rectangle(0, 0, width, height, fill=theme.background_color))

    if title:
        d.append(draw.Text(
            title,
            theme.title_font_size,
            marker_diameter, theme.title_font_size + 4,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    # Connectors behind markers
    _render_connectors(d, paths, theme)
    _render_markers(d, locations, centers, theme, marker_diameter / 2, focused_id)
    _render_labels(d, locations, centers, theme, marker_diameter / 2)

    return d.as_svg().rstrip("\n") + "\n"


def _render_connectors(
    d: draw.Drawing,
    paths: list[ConnectionPath],
    theme: Theme,
) -> None:
    """Render connector curves as dashed quadratic paths."""
    for conn in paths:
        color = theme.two_way_color if conn.is_two_way else theme.one_way_color
        curve = conn.curve
        path = draw.Path(
            stroke=color,
            stroke_width=theme.connector_width,
            fill="none",
            stroke_linecap="round",
            stroke_linejoin="round",
            stroke_dasharray=f"{theme.dash_length},{theme.gap_length}",
        )
        path.M(conn.start.x, conn.start.y)

        if curve is None or curve.lead_in is None:
            path.L(conn.end.x, conn.end.y)
        else:
            path.L(curve.lead_in.x, curve.lead_in.y)
            for ctrl, end in curve.segments:
                path.Q(ctrl.x, ctrl.y, end.x, end.y)
            path.L(curve.end.x, curve.end.y)

        d.append(path)


def _render_markers(
    d: draw.Drawing,
    locations: list[Location],
    centers: dict[str, Point],
    theme: Theme,
    radius: float,
    focused_id: str | None,
) -> None:
    """Render a dot per location; obstacle terrain gets its own fill."""
    for loc in locations:
        center = centers.get(loc.id)
        if center is None:
            continue
        focused = loc.id == focused_id
        d.append(draw.Circle(
            center.x, center.y, radius,
            fill=theme.obstacle_fill if loc.is_obstacle else theme.marker_fill,
            stroke=theme.focus_stroke if focused else theme.marker_stroke,
            stroke_width=theme.marker_stroke_width * (2 if focused else 1),
        ))


def _render_labels(
    d: draw.Drawing,
    locations: list[Location],
    centers: dict[str, Point],
    theme: Theme,
    radius: float,
) -> None:
    """Render location names below their markers."""
    for loc in locations:
        center = centers.get(loc.id)
        if center is None or not loc.name:
            continue
        d.append(draw.Text(
            loc.name,
            theme.label_font_size,
            center.x, center.y + radius + theme.label_offset,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            text_anchor="middle",
        ))
