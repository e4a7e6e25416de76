"""Dark theme for exploration mode."""

from worldmap.render.style import Theme

NIGHT_THEME = Theme(
    name="night",
    background_color="#1e1e24",
    marker_fill="#ffffff",
    marker_stroke="#333333",
    marker_stroke_width=1.5,
    obstacle_fill="#4f7a8c",
    focus_stroke="#ff9800",
    two_way_color="rgba(255, 152, 0, 0.7)",
    one_way_color="rgba(255, 87, 34, 0.8)",
    connector_width=3.5,
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=12.0,
    title_color="#ffffff",
    title_font_size=20.0,
    dash_length=10.0,
    gap_length=3.0,
)
