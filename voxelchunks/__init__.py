"""Voxel chunk mesh generation, matrix helpers, OpenGL entry-point loading and a wireframe viewer."""

__version__ = "0.1.0"