"""Theme and style constants for world map previews."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a world map preview."""

    name: str
    background_color: str
    marker_fill: str
    marker_stroke: str
    marker_stroke_width: float
    obstacle_fill: str
    focus_stroke: str
    two_way_color: str
    one_way_color: str
    connector_width: float
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    dash_length: float = 6.0
    gap_length: float = 4.0
    label_offset: float = 12.0
