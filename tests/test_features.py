"""Tests for the GeoJSON helpers and the union wrapper."""

import pytest
from shapely.geometry import Point, shape

from geobuffer.core.errors import InvalidGeometry, UnsupportedOperation
from geobuffer.geo.features import (
    coord_each,
    feature_collection,
    feature_each,
    line_string,
    polygon,
    polygon_to_line,
    union,
)


def test_polygon_requires_closed_ring():
    with pytest.raises(InvalidGeometry):
        polygon([[[0, 0], [0, 1], [1, 1]]])


def test_line_string_requires_two_positions():
    with pytest.raises(InvalidGeometry):
        line_string([[0, 0]])


def test_feature_each_and_coord_each():
    fc = feature_collection(
        [line_string([[0, 0], [1, 1]]), polygon([[[0, 0], [1, 0], [1, 1], [0, 0]]])]
    )
    assert len(list(feature_each(fc))) == 2
    bare = list(feature_each({"type": "Point", "coordinates": [3, 4]}))
    assert bare[0]["type"] == "Feature"
    assert bare[0]["properties"] == {}

    multi = {"type": "MultiPoint", "coordinates": [[0, 0], [1, 1], [2, 2]]}
    assert list(coord_each(multi)) == [[0, 0], [1, 1], [2, 2]]


def test_polygon_to_line_uses_outer_ring(square_feature):
    holed = dict(square_feature)
    holed["geometry"] = {
        "type": "Polygon",
        "coordinates": square_feature["geometry"]["coordinates"]
        + [[[0.2, 0.2], [0.4, 0.2], [0.4, 0.4], [0.2, 0.2]]],
    }
    line = polygon_to_line(holed)
    assert line["geometry"]["type"] == "LineString"
    assert line["geometry"]["coordinates"] == square_feature["geometry"]["coordinates"][0]
    assert line["properties"] == {"id": 3}


def test_polygon_to_line_rejects_other_types():
    with pytest.raises(UnsupportedOperation):
        polygon_to_line({"type": "Point", "coordinates": [0, 0]})


def test_union_merges_overlapping_squares():
    a = polygon([[[0, 0], [0, 2], [2, 2], [2, 0], [0, 0]]])
    b = polygon([[[1, 1], [1, 3], [3, 3], [3, 1], [1, 1]]])
    merged = union(a, b, properties={"k": "v"})
    assert merged["geometry"]["type"] == "Polygon"
    assert merged["properties"] == {"k": "v"}
    assert shape(merged["geometry"]).area == pytest.approx(7.0)
    ring = merged["geometry"]["coordinates"][0]
    assert ring[0] == ring[-1]
    assert isinstance(ring[0], list)


def test_union_of_disjoint_squares_is_multipolygon(two_squares):
    parts = two_squares["coordinates"]
    merged = union(polygon(parts[0]), polygon(parts[1]))
    assert merged["geometry"]["type"] == "MultiPolygon"
    geom = shape(merged["geometry"])
    assert geom.contains(Point(0.5, 0.5))
    assert geom.contains(Point(5.5, 5.5))


def test_union_keeps_degenerate_input():
    flat = polygon([[[0, 0], [0, 0], [0, 0], [0, 0]]])
    merged = union(flat)
    assert merged["geometry"] == flat["geometry"]


def test_union_rejects_unreadable_polygon():
    with pytest.raises(UnsupportedOperation):
        union({"type": "Polygon", "coordinates": [[[0, 0], [1, 1]]]})


def test_polygon_to_line_closes_open_ring():
    line = polygon_to_line({"type": "Polygon", "coordinates": [[[0, 0], [0, 1], [1, 1], [1, 0]]]})
    coords = line["geometry"]["coordinates"]
    assert len(coords) == 5
    assert coords[0] == coords[-1] == [0, 0]
