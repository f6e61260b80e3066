"""文件讀寫與多邊形載入測試"""

import json

import pytest

from geodatum import Coordinate, GeoArgumentError
from geodatum.utils.file_io import (
    load_polygon,
    parse_polygon,
    read_json,
    read_structured,
    read_yaml,
    write_json,
    write_yaml,
)


class TestJsonYaml:

    def test_json_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "data.json"
        assert write_json(str(path), {"名稱": "測試", "n": 1})
        assert read_json(str(path)) == {"名稱": "測試", "n": 1}

    def test_yaml_round_trip(self, tmp_path):
        path = tmp_path / "data.yaml"
        assert write_yaml(str(path), {"a": [1, 2], "b": "文字"})
        assert read_yaml(str(path)) == {"a": [1, 2], "b": "文字"}

    def test_missing_file_returns_none(self, tmp_path):
        assert read_json(str(tmp_path / "missing.json")) is None
        assert read_yaml(str(tmp_path / "missing.yaml")) is None

    def test_bad_json_returns_none(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert read_json(str(path)) is None

    def test_read_structured_rejects_unknown_extension(self, tmp_path):
        with pytest.raises(GeoArgumentError):
            read_structured(str(tmp_path / "polygon.txt"))


class TestParsePolygon:

    def test_points_are_lat_lon(self):
        vertices = parse_polygon({"points": [[10, 20], [11, 20], [11, 21]]})
        assert vertices[0] == Coordinate(10, 20)

    def test_geojson_is_lon_lat(self):
        data = {"type": "Polygon", "coordinates": [[[20, 10], [21, 10], [21, 11]]]}
        assert parse_polygon(data)[0] == Coordinate(10, 20)

    def test_feature_collection_uses_first_feature(self):
        data = {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "geometry": {"type": "Polygon", "coordinates": [[[1, 2], [3, 4], [5, 6]]]}},
                {"type": "Feature", "geometry": {"type": "Polygon", "coordinates": [[[7, 8], [9, 10], [11, 12]]]}},
            ],
        }
        assert parse_polygon(data) == [Coordinate(2, 1), Coordinate(4, 3), Coordinate(6, 5)]

    @pytest.mark.parametrize('data', [
        [],
        {"type": "Point", "coordinates": [1, 2]},
        {"type": "FeatureCollection", "features": []},
        {"type": "Feature"},
        {"type": "Polygon", "coordinates": []},
        {"points": [[1]]},
        {"points": ["1,2"]},
    ])
    def test_invalid_structure(self, data):
        with pytest.raises(GeoArgumentError):
            parse_polygon(data)

    def test_out_of_range_vertex(self):
        with pytest.raises(GeoArgumentError):
            parse_polygon({"points": [[100, 0], [0, 0], [1, 1]]})


class TestLoadPolygon:

    def test_geojson(self, geojson_square_file):
        vertices = load_polygon(str(geojson_square_file))
        assert len(vertices) == 5
        assert vertices[1] == Coordinate(0, 1)

    def test_yaml(self, yaml_square_file):
        vertices = load_polygon(str(yaml_square_file))
        assert vertices == [Coordinate(0, 0), Coordinate(0, 1), Coordinate(1, 1), Coordinate(1, 0)]

    def test_json_points(self, tmp_path):
        path = tmp_path / "points.json"
        path.write_text(json.dumps({"points": [[1, 2], [3, 4], [5, 6]]}), encoding="utf-8")
        assert load_polygon(str(path))[2] == Coordinate(5, 6)

    def test_missing_file(self, tmp_path):
        with pytest.raises(GeoArgumentError):
            load_polygon(str(tmp_path / "missing.geojson"))
