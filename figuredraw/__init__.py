"""Simple diagram editor for rectangles, ellipses, triangles and their connections."""

__version__ = "0.1.0"
__all__ = ["figures", "connection", "editor", "app"]