"""Theme definitions for world map previews."""

from worldmap.themes.night import NIGHT_THEME
from worldmap.themes.parchment import PARCHMENT_THEME

THEMES = {
    "parchment": PARCHMENT_THEME,
    "night": NIGHT_THEME,
}

__all__ = ["THEMES", "PARCHMENT_THEME", "NIGHT_THEME"]
