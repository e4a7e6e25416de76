"""Layout constants used across layout and routing modules."""

# ---------------------------------------------------------------------------
# Grid placement
# ---------------------------------------------------------------------------
MAX_SPIRAL_RADIUS: int = 10
"""Largest ring searched when resolving a cell collision."""

FALLBACK_OFFSET: tuple[int, int] = (10, 0)
"""Offset from the wanted cell used when every ring is full."""

DISCONNECTED_ROW_GAP: int = 2
"""Rows between the lowest placed cell and unreached locations."""

# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------
PADDING: float = 0.15
"""Fraction of render space reserved on each side of an axis."""

DEGENERATE_CENTER: float = 0.5
"""Normalized coordinate for an axis where all cells coincide."""

# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------
VIEWPORT_WIDTH: float = 800.0
"""Default viewport width in device-independent pixels."""

VIEWPORT_HEIGHT: float = 600.0
"""Default viewport height in device-independent pixels."""

MARKER_DIAMETER: float = 10.0
"""Default diameter of a location marker."""

# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------
OBSTACLE_SEARCH_FRACTION: float = 0.8
"""Obstacle search radius around an edge midpoint, as a fraction of edge length."""

OBSTACLE_INFLUENCE_FRACTION: float = 0.6
"""Radius, as a fraction of edge length, within which an obstacle bends a control point."""

OBSTACLE_PUSH: float = 0.8
"""Obstacle push strength as a fraction of the maximum deviation."""

MAX_DEVIATION_FRACTION: float = 0.12
"""Largest sideways offset of a control point, as a fraction of edge length."""

JITTER_FRACTION: float = 0.3
"""Random wobble amplitude as a fraction of the maximum deviation."""

MOMENTUM: float = 0.5
"""Share of the previous control point offset carried into the next."""

CONTROL_POINT_SPACING: float = 30.0
"""Pixels of edge length per interior control point."""

MIN_CONTROL_POINTS: int = 4
MAX_CONTROL_POINTS: int = 12

TAPER: float = 4.0
"""Taper slope so offsets fall to zero at both endpoints."""

MIN_CURVE_LENGTH: float = 1.0
"""Edges shorter than this are drawn straight."""
