"""
Module `core.errors` defines the exceptions raised while buffering shapes.
Every failure is fatal to the current call; there is no partial-success mode.
"""


class GeoBufferError(Exception):
    """Base class for all buffering failures."""


class InvalidArgument(GeoBufferError):
    """Raised when a call argument is missing or unusable (e.g. no radius)."""


class UnsupportedGeometry(GeoBufferError):
    """Raised when a geometry type is outside the supported set."""

    def __init__(self, geometry_type):
        self.geometry_type = geometry_type
        super().__init__(f"geometry type {geometry_type} not supported")


class InvalidGeometry(GeoBufferError):
    """Raised for structurally degenerate input such as a one-point line."""


class UnsupportedOperation(GeoBufferError):
    """Raised when union or boundary extraction cannot handle its input."""
