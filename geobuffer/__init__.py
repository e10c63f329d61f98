"""geobuffer: geodesic buffers of GeoJSON points, lines and polygons."""

from geobuffer.core.errors import (
    GeoBufferError,
    InvalidArgument,
    InvalidGeometry,
    UnsupportedGeometry,
    UnsupportedOperation,
)
from geobuffer.geo.buffer import buffer

__version__ = "0.1.0"

__all__ = [
    "buffer",
    "GeoBufferError",
    "InvalidArgument",
    "InvalidGeometry",
    "UnsupportedGeometry",
    "UnsupportedOperation",
]
