"""Widget toolkit core: bitmap font, file registry, draw-command renderer, fonts, widgets and event loop."""

__version__ = "0.1.0"