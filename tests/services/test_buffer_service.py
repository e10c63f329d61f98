"""Tests for BufferService, the read-buffer-write workflow."""

import json
from unittest.mock import MagicMock

import pytest

from geobuffer.core.config import ConfigManager
from geobuffer.core.errors import InvalidArgument
from geobuffer.services import BufferService


def test_buffer_file_round_trip(tmp_path, geojson_file):
    logger = MagicMock()
    svc = BufferService(logger=logger)
    out = tmp_path / "buffered.geojson"

    result = svc.buffer_file(str(geojson_file), str(out), 2, "kilometers", 8)

    assert len(result["features"]) == 1
    assert json.loads(out.read_text(encoding="utf-8")) == result
    assert logger.info.call_count == 2


def test_service_uses_its_config(point_feature):
    cfg = ConfigManager()
    cfg.config["default_resolution"] = 6
    svc = BufferService(config=cfg, logger=MagicMock())

    result = svc.buffer_geojson(point_feature, 1)
    assert len(result["features"][0]["geometry"]["coordinates"][0]) == 7


def test_missing_radius_writes_nothing(tmp_path, geojson_file):
    svc = BufferService(logger=MagicMock())
    out = tmp_path / "buffered.geojson"
    with pytest.raises(InvalidArgument):
        svc.buffer_file(str(geojson_file), str(out), None)
    assert not out.exists()
