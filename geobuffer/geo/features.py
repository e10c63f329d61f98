"""
Module `geo.features` builds and walks GeoJSON-style dicts and wraps the
shapely operations (boundary extraction, union) the buffer routines use.
"""

import copy
from functools import reduce
from typing import Any, Dict, Iterator, List, Optional

from shapely.errors import GEOSException
from shapely.geometry import mapping, shape

from geobuffer.core.errors import InvalidArgument, InvalidGeometry, UnsupportedOperation

GeoJSON = Dict[str, Any]


def feature(geometry: GeoJSON, properties: Optional[Dict[str, Any]] = None) -> GeoJSON:
    """Wrap a geometry dict in a Feature."""
    return {
        "type": "Feature",
        "properties": properties if properties is not None else {},
        "geometry": geometry,
    }


def feature_collection(features: List[GeoJSON]) -> GeoJSON:
    return {"type": "FeatureCollection", "features": list(features)}


def point(coordinates, properties=None) -> GeoJSON:
    if len(coordinates) < 2:
        raise InvalidGeometry(f"a position needs two values, got {coordinates!r}")
    return feature({"type": "Point", "coordinates": list(coordinates)}, properties)


def line_string(coordinates, properties=None) -> GeoJSON:
    """LineString Feature; at least two positions are required."""
    if len(coordinates) < 2:
        raise InvalidGeometry("a LineString needs two or more positions")
    return feature(
        {"type": "LineString", "coordinates": [list(c) for c in coordinates]},
        properties,
    )


def polygon(rings, properties=None) -> GeoJSON:
    """Polygon Feature; every ring must be non-empty and closed."""
    for ring in rings:
        if not ring:
            raise InvalidGeometry("a Polygon ring needs at least one position")
        if list(ring[0]) != list(ring[-1]):
            raise InvalidGeometry(
                "first and last positions of a Polygon ring must be equivalent"
            )
    return feature(
        {"type": "Polygon", "coordinates": [[list(c) for c in r] for r in rings]},
        properties,
    )


def close_ring(ring) -> List[List[float]]:
    """
    Return ``ring`` as a list of positions whose last position repeats the
    first. The ring counts as open when either longitude or latitude differs.
    """
    closed = [list(c) for c in ring]
    if closed and closed[0] != closed[-1]:
        closed.append(list(closed[0]))
    return closed


def get_geometry(geojson: GeoJSON) -> Optional[GeoJSON]:
    """Return the bare geometry of a Feature, or the geometry itself."""
    if not isinstance(geojson, dict):
        raise InvalidArgument(f"GeoJSON object expected, got {type(geojson).__name__}")
    if geojson.get("type") == "Feature":
        return geojson.get("geometry")
    return geojson


def feature_each(geojson: GeoJSON) -> Iterator[GeoJSON]:
    """Yield every Feature of a FeatureCollection, Feature or bare geometry."""
    kind = geojson.get("type")
    if kind == "FeatureCollection":
        yield from geojson.get("features", [])
    elif kind == "Feature":
        yield geojson
    else:
        yield feature(geojson)


def coord_each(geojson: GeoJSON) -> Iterator[List[float]]:
    """Yield every position of a Feature or geometry, in document order."""

    def _walk(coords):
        if coords and isinstance(coords[0], (int, float)):
            yield coords
        else:
            for child in coords:
                yield from _walk(child)

    geometry = get_geometry(geojson)
    if geometry is None:
        return
    if geometry.get("type") == "GeometryCollection":
        for member in geometry.get("geometries", []):
            yield from coord_each(member)
    else:
        yield from _walk(geometry.get("coordinates", []))


def polygon_to_line(geojson: GeoJSON, properties=None) -> GeoJSON:
    """
    Convert a Polygon (Feature or geometry) to a LineString Feature tracing
    its outer ring. Holes are ignored.
    """
    geometry = get_geometry(geojson)
    if not geometry or geometry.get("type") != "Polygon":
        kind = geometry.get("type") if geometry else None
        raise UnsupportedOperation(f"cannot extract a boundary from {kind}")
    rings = geometry.get("coordinates") or []
    if not rings or len(rings[0]) < 2:
        raise UnsupportedOperation("Polygon has no outer ring to extract")
    if properties is None and geojson.get("type") == "Feature":
        properties = geojson.get("properties")
    return line_string(close_ring(rings[0]), properties)


def _listify(coords):
    if coords and isinstance(coords[0], (int, float)):
        return [float(c) for c in coords]
    return [_listify(c) for c in coords]


def union(*polygons: GeoJSON, properties=None) -> GeoJSON:
    """
    Union Polygon/MultiPolygon Features or geometries into one Feature.

    Inputs are folded strictly left to right. Zero-area inputs contribute
    nothing; when every input is zero-area the first one is returned as is.
    """
    if not polygons:
        raise InvalidArgument("union needs at least one polygon")
    try:
        shapes = [shape(get_geometry(p)) for p in polygons]
    except (GEOSException, ValueError, TypeError, KeyError, AttributeError) as exc:
        raise UnsupportedOperation(f"cannot read polygon for union: {exc}") from exc

    solid = [s for s in shapes if not s.is_empty and s.area > 0]
    if not solid:
        return feature(copy.deepcopy(get_geometry(polygons[0])), properties)

    try:
        merged = reduce(lambda left, right: left.union(right), solid)
    except GEOSException as exc:
        raise UnsupportedOperation(f"union failed: {exc}") from exc

    if merged.is_empty or merged.geom_type not in ("Polygon", "MultiPolygon"):
        raise UnsupportedOperation(
            f"union produced a {merged.geom_type}, not a polygonal region"
        )
    geometry = mapping(merged)
    return feature(
        {"type": geometry["type"], "coordinates": _listify(geometry["coordinates"])},
        properties,
    )
