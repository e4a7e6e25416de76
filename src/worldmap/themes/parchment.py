"""Parchment theme (hand-drawn map look)."""

from worldmap.render.style import Theme

PARCHMENT_THEME = Theme(
    name="parchment",
    background_color="#f4e4c1",
    marker_fill="#3a3022",
    marker_stroke="#f4e4c1",
    marker_stroke_width=1.5,
    obstacle_fill="#6b8e9f",
    focus_stroke="#c0392b",
    two_way_color="rgba(255, 152, 0, 0.7)",
    one_way_color="rgba(255, 87, 34, 0.8)",
    connector_width=2.0,
    label_color="#3a3022",
    label_font_family="Georgia, 'Times New Roman', serif",
    label_font_size=11.0,
    title_color="#3a3022",
    title_font_size=20.0,
)
