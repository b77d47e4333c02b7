"""Heightmap reading, 3D projection and wireframe drawing, with a viewer window."""

__version__ = "0.1.0"
__all__ = ["app", "color", "geometry", "parsing", "raster", "scene"]