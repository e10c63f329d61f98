"""Tests for the `geobuffer buffer` command."""

import json

import yaml
from click.testing import CliRunner

from geobuffer.core.cli import cli


def test_buffer_command_writes_polygons(tmp_path, geojson_file):
    out = tmp_path / "out.geojson"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["buffer", str(geojson_file), str(out), "--radius", "1", "--resolution", "8"],
    )
    assert result.exit_code == 0, result.output
    assert "Buffered 1 feature(s)" in result.output

    data = json.loads(out.read_text(encoding="utf-8"))
    feat = data["features"][0]
    assert feat["geometry"]["type"] == "Polygon"
    assert len(feat["geometry"]["coordinates"][0]) == 9
    assert feat["properties"]["id"] == 1


def test_buffer_command_reads_config(tmp_path, geojson_file):
    cfg = tmp_path / "geobuffer.yaml"
    cfg.write_text(yaml.safe_dump({"default_resolution": 16}), encoding="utf-8")
    out = tmp_path / "out.geojson"

    result = CliRunner().invoke(
        cli,
        ["buffer", str(geojson_file), str(out), "-r", "500", "-u", "meters", "-c", str(cfg)],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data["features"][0]["geometry"]["coordinates"][0]) == 17


def test_radius_is_required(tmp_path, geojson_file):
    result = CliRunner().invoke(
        cli, ["buffer", str(geojson_file), str(tmp_path / "out.geojson")]
    )
    assert result.exit_code == 2
    assert "--radius" in result.output


def test_unsupported_geometry_exits_with_error(tmp_path):
    src = tmp_path / "circle.geojson"
    src.write_text(json.dumps({"type": "Circle", "coordinates": [0, 0]}), encoding="utf-8")
    out = tmp_path / "out.geojson"

    result = CliRunner().invoke(cli, ["buffer", str(src), str(out), "-r", "1"])
    assert result.exit_code == 1
    assert "Buffering failed" in result.output
    assert "Circle" in result.output
    assert not out.exists()
