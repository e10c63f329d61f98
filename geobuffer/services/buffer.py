"""File-to-file buffering workflow shared by the CLI and scripts."""

from __future__ import annotations

import logging
from typing import Any, Dict

from geobuffer.core.config import ConfigManager
from geobuffer.geo.buffer import buffer
from geobuffer.geo.io import read_geojson, write_geojson

from .base import BaseService


class BufferService(BaseService):
    """Read a vector file, buffer every shape in it and write the result."""

    def __init__(
        self,
        config: ConfigManager | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(logger)
        self.config = config or ConfigManager()

    def buffer_geojson(
        self,
        geojson: Dict[str, Any],
        radius: float | None,
        units: str | None = None,
        resolution: int | None = None,
    ) -> Dict[str, Any]:
        """Buffer an in-memory GeoJSON object using this service's config."""
        return buffer(geojson, radius, units, resolution, config=self.config)

    def buffer_file(
        self,
        input_path: str,
        output_path: str,
        radius: float | None,
        units: str | None = None,
        resolution: int | None = None,
    ) -> Dict[str, Any]:
        """Buffer the shapes in ``input_path`` and write them to ``output_path``."""
        geojson = read_geojson(input_path, self.config)
        self.logger.info(
            "Buffering %s by %s %s",
            input_path,
            radius,
            units or self.config.get("default_units"),
        )
        result = self.buffer_geojson(geojson, radius, units, resolution)
        write_geojson(result, output_path, self.config)
        self.logger.info(
            "Wrote %d buffered feature(s) to %s", len(result["features"]), output_path
        )
        return result
