"""A frame-based terminal game engine with an interactive A* path-finding demo."""

__version__ = "0.1.0"