"""共用測試夾具"""

import json
import logging

import pytest
import yaml

from geodatum import Coordinate


@pytest.fixture
def beijing():
    return Coordinate(39.9042, 116.3915)


@pytest.fixture
def equator_square():
    """赤道上 0.1° × 0.1° 的正方形（未閉合）"""
    return [
        Coordinate(0.0, 0.0),
        Coordinate(0.0, 0.1),
        Coordinate(0.1, 0.1),
        Coordinate(0.1, 0.0),
    ]


@pytest.fixture
def unit_square():
    """1° × 1° 正方形，左下角在 (0, 0)"""
    return [
        Coordinate(0, 0),
        Coordinate(0, 1),
        Coordinate(1, 1),
        Coordinate(1, 0),
    ]


@pytest.fixture
def geojson_square_file(tmp_path):
    path = tmp_path / "square.geojson"
    data = {
        "type": "Feature",
        "properties": {},
        "geometry": {
            "type": "Polygon",
            "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]],
        },
    }
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def yaml_square_file(tmp_path):
    path = tmp_path / "square.yaml"
    data = {"points": [[0, 0], [0, 1], [1, 1], [1, 0]]}
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """每個測試後移除 setup_logger 掛上的處理器"""
    yield
    package_logger = logging.getLogger('geodatum')
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
