"""Grid raycaster: .cub scene parsing and validation, XPM loading, and a pygame first-person view."""

__version__ = "0.1.0"

__all__ = ["__version__"]