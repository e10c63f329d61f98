"""
Module `geo.measure` holds the spherical-Earth primitives the buffering
routines are built on: unit conversion, destination point, initial bearing
and great-circle distance.

Points are ``[lon, lat]`` coordinates, Point geometries or Point Features.
"""

import math
from typing import Any, List

from geobuffer.core.errors import InvalidArgument

# Mean Earth radius in metres
EARTH_RADIUS = 6371008.8

# Earth radius expressed in each supported unit
FACTORS = {
    "meters": EARTH_RADIUS,
    "metres": EARTH_RADIUS,
    "millimeters": EARTH_RADIUS * 1000,
    "millimetres": EARTH_RADIUS * 1000,
    "centimeters": EARTH_RADIUS * 100,
    "centimetres": EARTH_RADIUS * 100,
    "kilometers": EARTH_RADIUS / 1000,
    "kilometres": EARTH_RADIUS / 1000,
    "miles": EARTH_RADIUS / 1609.344,
    "nauticalmiles": EARTH_RADIUS / 1852,
    "inches": EARTH_RADIUS * 39.370,
    "yards": EARTH_RADIUS / 0.9144,
    "feet": EARTH_RADIUS * 3.28084,
    "radians": 1.0,
    "degrees": 180.0 / math.pi,
}


def _factor(units: str) -> float:
    try:
        return FACTORS[units]
    except KeyError as exc:
        raise InvalidArgument(f"units '{units}' is not supported") from exc


def get_coord(obj: Any) -> List[float]:
    """Return the ``[lon, lat]`` pair of a coordinate, Point or Point Feature."""
    if isinstance(obj, dict):
        geom = obj.get("geometry") if obj.get("type") == "Feature" else obj
        if not geom or geom.get("type") != "Point":
            raise InvalidArgument("coordinate, Point or Point Feature is required")
        obj = geom["coordinates"]
    if not isinstance(obj, (list, tuple)) or len(obj) < 2:
        raise InvalidArgument(f"invalid coordinate: {obj!r}")
    return [float(obj[0]), float(obj[1])]


def length_to_radians(distance: float, units: str = "kilometers") -> float:
    """Convert a distance in ``units`` to an angle (radians) on the sphere."""
    return distance / _factor(units)


def radians_to_length(radians: float, units: str = "kilometers") -> float:
    """Convert an angle (radians) on the sphere to a distance in ``units``."""
    return radians * _factor(units)


def destination(
    origin: Any, distance: float, bearing_deg: float, units: str = "kilometers"
) -> List[float]:
    """
    Return the point reached by travelling ``distance`` from ``origin`` along
    the great circle that starts at ``bearing_deg`` (degrees clockwise from
    north).

    Args:
        origin: starting coordinate, Point or Point Feature.
        distance: distance to travel, expressed in ``units``.
        bearing_deg: initial bearing in degrees.
        units: any key of :data:`FACTORS`.

    Returns:
        ``[lon, lat]`` of the destination, in degrees.
    """
    lon1, lat1 = (math.radians(c) for c in get_coord(origin))
    bearing_rad = math.radians(bearing_deg)
    delta = length_to_radians(distance, units)

    lat2 = math.asin(
        math.sin(lat1) * math.cos(delta)
        + math.cos(lat1) * math.sin(delta) * math.cos(bearing_rad)
    )
    lon2 = lon1 + math.atan2(
        math.sin(bearing_rad) * math.sin(delta) * math.cos(lat1),
        math.cos(delta) - math.sin(lat1) * math.sin(lat2),
    )
    return [math.degrees(lon2), math.degrees(lat2)]


def bearing(start: Any, end: Any) -> float:
    """Initial great-circle bearing from ``start`` to ``end``, in (-180, 180]."""
    lon1, lat1 = (math.radians(c) for c in get_coord(start))
    lon2, lat2 = (math.radians(c) for c in get_coord(end))
    y = math.sin(lon2 - lon1) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(
        lat2
    ) * math.cos(lon2 - lon1)
    result = math.degrees(math.atan2(y, x))
    # atan2 yields [-180, 180]; fold the closed end onto +180
    return 180.0 if result == -180.0 else result


def distance(start: Any, end: Any, units: str = "kilometers") -> float:
    """Great-circle (haversine) distance between two points in ``units``."""
    lon1, lat1 = (math.radians(c) for c in get_coord(start))
    lon2, lat2 = (math.radians(c) for c in get_coord(end))
    a = (
        math.sin((lat2 - lat1) / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2
    )
    return radians_to_length(2 * math.atan2(math.sqrt(a), math.sqrt(1 - a)), units)


def angle_difference(a: float, b: float) -> float:
    """Smallest absolute difference between two bearings, in degrees."""
    return abs((a - b + 180.0) % 360.0 - 180.0)

