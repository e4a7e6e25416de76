"""worldmap: grid layout and connector routing for game world maps."""

__version__ = "0.1.0"
