"""Geodesic primitives, GeoJSON helpers and the buffer algorithm."""
