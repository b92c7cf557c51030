"""A small top-down 2D game with a menu, an animated player and polygon collision."""

__version__ = "0.1.0"