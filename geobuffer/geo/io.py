"""
Module `geo.io` reads and writes the vector files buffered by the CLI.
GeoJSON is handled directly; other supported formats go through GeoPandas.
"""

import json
import os
from typing import Any, Dict

import geopandas as gpd

from geobuffer.core.config import ConfigManager
from geobuffer.core.errors import InvalidArgument

GEOJSON_EXTS = (".geojson", ".json")


def _check_ext(path: str, config: ConfigManager | None) -> str:
    ext = os.path.splitext(path)[1].lower()
    formats = (config or ConfigManager()).get("supported_input_formats")
    if ext not in formats:
        raise InvalidArgument(
            f"Unsupported vector format '{ext}' for {path}. Choose from: {formats}"
        )
    return ext


def read_geojson(path: str, config: ConfigManager | None = None) -> Dict[str, Any]:
    """
    Load ``path`` as a GeoJSON dict.

    ``.geojson``/``.json`` files are returned as parsed; any other supported
    format is read with GeoPandas and converted to a FeatureCollection.
    """
    ext = _check_ext(path, config)
    if ext in GEOJSON_EXTS:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    gdf = gpd.read_file(path)
    if gdf.crs is not None:
        gdf = gdf.to_crs("EPSG:4326")
    return json.loads(gdf.to_json())


def write_geojson(
    collection: Dict[str, Any], path: str, config: ConfigManager | None = None
) -> str:
    """Write a FeatureCollection to ``path`` and return the path."""
    ext = _check_ext(path, config)
    dirpath = os.path.dirname(path) or "."
    os.makedirs(dirpath, exist_ok=True)
    if ext in GEOJSON_EXTS:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(collection, f)
        return path
    gdf = gpd.GeoDataFrame.from_features(collection["features"], crs="EPSG:4326")
    gdf.to_file(path)
    return path
