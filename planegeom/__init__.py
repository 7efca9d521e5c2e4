"""Planar computational geometry: points, edges, polygons, classic algorithms, JSON methods and an HTTP server."""

__version__ = "0.1.0"