"""
Module `geo.buffer` computes geodesic buffers of GeoJSON shapes.

Points become circles of ``resolution`` spokes, lines become the union of
one capsule (offset rectangle plus two rounded caps) per segment, and
polygons are buffered through their boundary line and merged back with the
original area. Every call returns a FeatureCollection.
"""

import copy
from typing import Any, Callable, Dict, List

from geobuffer.core.config import BufferOptions, ConfigManager
from geobuffer.core.errors import (
    InvalidArgument,
    InvalidGeometry,
    UnsupportedGeometry,
)
from geobuffer.core.logger import Logger
from geobuffer.geo.features import (
    GeoJSON,
    close_ring,
    coord_each,
    feature_collection,
    feature_each,
    get_geometry,
    line_string,
    point,
    polygon,
    polygon_to_line,
    union,
)
from geobuffer.geo.measure import bearing, destination, get_coord

logger = Logger.get_logger(__name__)

COLLECTION_TYPES = ("FeatureCollection", "GeometryCollection")


def buffer(
    geojson: GeoJSON,
    radius: float | None,
    units: str | None = None,
    resolution: int | None = None,
    config: ConfigManager | None = None,
) -> GeoJSON:
    """
    Buffer a Feature, geometry, FeatureCollection or GeometryCollection.

    Args:
        geojson: shape to buffer.
        radius: buffer distance; required, zero allowed.
        units: distance units (defaults to the configured ``default_units``).
        resolution: spokes per full circle; falsy means the configured
            ``default_resolution`` (64).
        config: optional ConfigManager supplying the defaults.

    Returns:
        A FeatureCollection holding every buffered polygon. Collection
        members are buffered independently and their results flattened in
        input order.
    """
    options = BufferOptions.resolve(radius, units, resolution, config)
    if not isinstance(geojson, dict):
        raise InvalidArgument(f"GeoJSON object expected, got {type(geojson).__name__}")

    if geojson.get("type") in COLLECTION_TYPES:
        if geojson["type"] == "FeatureCollection":
            members = geojson.get("features") or []
        else:
            members = geojson.get("geometries") or []
        results: List[GeoJSON] = []
        for member in members:
            results.extend(feature_each(buffer_feature(member, options)))
        logger.debug(
            "Buffered %d %s member(s) into %d polygon(s)",
            len(members),
            geojson["type"],
            len(results),
        )
        return feature_collection(results)

    return buffer_feature(geojson, options)


def buffer_feature(geojson: GeoJSON, options: BufferOptions) -> GeoJSON:
    """Buffer a single Feature or geometry with already-resolved options."""
    geometry = get_geometry(geojson)
    properties = geojson.get("properties") or {}
    geom_type = geometry.get("type") if geometry else None
    handler = _GEOMETRY_HANDLERS.get(geom_type)
    if handler is None:
        raise UnsupportedGeometry(geom_type)
    logger.debug("Buffering %s by %s %s", geom_type, options.radius, options.units)
    return feature_collection(handler(geometry, properties, options))


def point_buffer(
    center: Any,
    radius: float,
    units: str = ConfigManager.DEFAULT_UNITS,
    resolution: int = ConfigManager.DEFAULT_RESOLUTION,
    properties: Dict[str, Any] | None = None,
) -> GeoJSON:
    """
    Approximate the circle of ``radius`` around ``center`` by a closed ring
    of ``resolution`` spokes in increasing bearing order (clockwise from
    north), plus the closing position.
    """
    step = 360.0 / resolution
    spokes = [destination(center, radius, i * step, units) for i in range(resolution)]
    ring = close_ring(spokes)
    return polygon([ring], copy.deepcopy(properties or {}))


def line_buffer(
    line: GeoJSON,
    radius: float,
    units: str = ConfigManager.DEFAULT_UNITS,
    resolution: int = ConfigManager.DEFAULT_RESOLUTION,
    properties: Dict[str, Any] | None = None,
) -> GeoJSON:
    """
    Buffer a LineString as the union of one capsule polygon per segment.

    Capsules of neighbouring segments share their endpoint caps, so the
    union is a single connected polygon. Segments are unioned in line order.
    """
    geometry = get_geometry(line)
    if not geometry or geometry.get("type") != "LineString":
        raise InvalidGeometry("line_buffer needs a LineString")
    coords = geometry.get("coordinates") or []
    if len(coords) < 2:
        raise InvalidGeometry("a LineString needs two or more positions to buffer")

    spoke_num = resolution // 2
    capsules = [
        _segment_capsule(bottom, top, radius, units, spoke_num)
        for bottom, top in zip(coords[:-1], coords[1:])
    ]
    logger.debug("Unioning %d segment capsule(s)", len(capsules))
    return union(*capsules, properties=copy.deepcopy(properties or {}))


def polygon_buffer(
    poly: GeoJSON,
    radius: float,
    units: str = ConfigManager.DEFAULT_UNITS,
    resolution: int = ConfigManager.DEFAULT_RESOLUTION,
    properties: Dict[str, Any] | None = None,
) -> GeoJSON:
    """
    Buffer a Polygon: buffer its outer boundary line, then union the band
    with the original polygon so the interior stays covered.
    """
    boundary = polygon_to_line(poly, properties={})
    band = line_buffer(boundary, radius, units, resolution)
    return union(band, get_geometry(poly), properties=copy.deepcopy(properties or {}))


def multipolygon_buffer(
    multi: GeoJSON,
    radius: float,
    units: str = ConfigManager.DEFAULT_UNITS,
    resolution: int = ConfigManager.DEFAULT_RESOLUTION,
    properties: Dict[str, Any] | None = None,
) -> List[GeoJSON]:
    """
    Buffer each part of a MultiPolygon.

    Each part's boundary band is unioned with the whole MultiPolygon, not
    just that part, so every output feature covers all of the original area.
    """
    geometry = get_geometry(multi)
    results = []
    for rings in geometry.get("coordinates") or []:
        part = polygon([close_ring(ring) for ring in rings])
        boundary = polygon_to_line(part, properties={})
        band = line_buffer(boundary, radius, units, resolution)
        results.append(
            union(band, geometry, properties=copy.deepcopy(properties or {}))
        )
    return results


def _segment_capsule(
    bottom: List[float],
    top: List[float],
    radius: float,
    units: str,
    spoke_num: int,
) -> GeoJSON:
    """
    Capsule polygon around the segment ``bottom`` -> ``top``:

        topLeft -> cap around top -> topRight -> bottomRight
                -> cap around bottom -> bottomLeft -> topLeft
    """
    bottom, top = get_coord(bottom), get_coord(top)
    direction = bearing(bottom, top)

    bottom_left = destination(bottom, radius, direction - 90, units)
    bottom_right = destination(bottom, radius, direction + 90, units)
    top_left = destination(top, radius, direction - 90, units)
    top_right = destination(top, radius, direction + 90, units)

    coords = [top_left]
    coords.extend(_cap(top, top_left, radius, units, spoke_num))
    coords.append(top_right)
    coords.append(bottom_right)
    coords.extend(_cap(bottom, bottom_right, radius, units, spoke_num))
    coords.append(bottom_left)
    coords.append(list(top_left))
    return polygon([coords])


def _cap(
    center: List[float],
    start: List[float],
    radius: float,
    units: str,
    spoke_num: int,
) -> List[List[float]]:
    """Intermediate spokes of the half circle swept clockwise from ``start``."""
    start_bearing = bearing(center, start)
    return [
        destination(center, radius, start_bearing + 180 * (k / spoke_num), units)
        for k in range(1, spoke_num)
    ]


def _buffer_point(geometry, properties, options) -> List[GeoJSON]:
    return [
        point_buffer(
            geometry["coordinates"],
            options.radius,
            options.units,
            options.resolution,
            properties,
        )
    ]


def _buffer_multi_point(geometry, properties, options) -> List[GeoJSON]:
    return [
        point_buffer(
            point(coord), options.radius, options.units, options.resolution, properties
        )
        for coord in coord_each(geometry)
    ]


def _buffer_line_string(geometry, properties, options) -> List[GeoJSON]:
    return [
        line_buffer(
            geometry, options.radius, options.units, options.resolution, properties
        )
    ]


def _buffer_multi_line_string(geometry, properties, options) -> List[GeoJSON]:
    results = []
    for coords in geometry.get("coordinates") or []:
        part = buffer_feature(line_string(coords, properties), options)
        results.append(part["features"][0])
    return results


def _buffer_polygon(geometry, properties, options) -> List[GeoJSON]:
    return [
        polygon_buffer(
            geometry, options.radius, options.units, options.resolution, properties
        )
    ]


def _buffer_multi_polygon(geometry, properties, options) -> List[GeoJSON]:
    return multipolygon_buffer(
        geometry, options.radius, options.units, options.resolution, properties
    )


_GEOMETRY_HANDLERS: Dict[str, Callable[..., List[GeoJSON]]] = {
    "Point": _buffer_point,
    "MultiPoint": _buffer_multi_point,
    "LineString": _buffer_line_string,
    "MultiLineString": _buffer_multi_line_string,
    "Polygon": _buffer_polygon,
    "MultiPolygon": _buffer_multi_polygon,
}

SUPPORTED_GEOMETRY_TYPES = tuple(_GEOMETRY_HANDLERS)
