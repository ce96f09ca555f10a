"""Projection, shapefile path and quad code helpers for vector map tiling."""

__version__ = "0.1.0"