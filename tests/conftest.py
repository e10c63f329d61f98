# pylint: disable=missing-module-docstring,redefined-outer-name
import json

import pytest

from geobuffer.core.logger import Logger


@pytest.fixture
def point_feature():
    """Point Feature at the origin carrying a couple of properties."""
    return {
        "type": "Feature",
        "properties": {"id": 1, "name": "origin", "tags": ["a", "b"]},
        "geometry": {"type": "Point", "coordinates": [0, 0]},
    }


@pytest.fixture
def line_feature():
    """Two-point LineString running one degree north from the origin."""
    return {
        "type": "Feature",
        "properties": {"id": 2},
        "geometry": {"type": "LineString", "coordinates": [[0, 0], [0, 1]]},
    }


@pytest.fixture
def square_coords():
    return [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]]


@pytest.fixture
def square_feature(square_coords):
    """One-degree square Polygon Feature."""
    return {
        "type": "Feature",
        "properties": {"id": 3},
        "geometry": {"type": "Polygon", "coordinates": square_coords},
    }


@pytest.fixture
def two_squares():
    """MultiPolygon of two disjoint one-degree squares."""
    return {
        "type": "MultiPolygon",
        "coordinates": [
            [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]],
            [[[5, 5], [5, 6], [6, 6], [6, 5], [5, 5]]],
        ],
    }


@pytest.fixture
def geojson_file(tmp_path, point_feature):
    """FeatureCollection with a single Point written to disk."""
    path = tmp_path / "points.geojson"
    path.write_text(
        json.dumps({"type": "FeatureCollection", "features": [point_feature]}),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """The CLI attaches a handler bound to the runner's stream; drop it after each test."""
    yield
    Logger.reset()
