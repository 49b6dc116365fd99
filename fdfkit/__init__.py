"""Height-map grids, XPM parsing, colour names and in-memory pixel images."""

__version__ = "0.1.0"
__all__ = ["colors", "textscan", "pixels", "xpm", "matrix"]