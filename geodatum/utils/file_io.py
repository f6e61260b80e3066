"""
文件讀寫工具模組
提供 JSON、YAML 讀寫與多邊形文件載入
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

import yaml

from ..core.geometry.coordinate import Coordinate
from ..core.geometry.errors import GeoArgumentError


logger = logging.getLogger(__name__)


# ==========================================
# JSON 文件讀寫
# ==========================================
def read_json(filepath: str) -> Optional[Dict[str, Any]]:
    """
    讀取 JSON 文件

    參數:
        filepath: 文件路徑

    返回:
        JSON 資料，失敗返回 None
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"文件不存在: {filepath}")
        return None
    except json.JSONDecodeError as e:
        logger.error(f"JSON 解析錯誤: {e}")
        return None


def write_json(filepath: str, data: Dict[str, Any],
               indent: int = 4, ensure_ascii: bool = False) -> bool:
    """
    寫入 JSON 文件

    參數:
        filepath: 文件路徑
        data: 要寫入的資料
        indent: 縮排空格數
        ensure_ascii: 是否確保 ASCII 編碼

    返回:
        是否成功
    """
    try:
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=indent, ensure_ascii=ensure_ascii)
        return True
    except OSError as e:
        logger.error(f"寫入 JSON 失敗: {e}")
        return False


# ==========================================
# YAML 文件讀寫
# ==========================================
def read_yaml(filepath: str) -> Optional[Dict[str, Any]]:
    """
    讀取 YAML 文件

    參數:
        filepath: 文件路徑

    返回:
        YAML 資料，失敗返回 None
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)
    except FileNotFoundError:
        logger.error(f"文件不存在: {filepath}")
        return None
    except yaml.YAMLError as e:
        logger.error(f"YAML 解析錯誤: {e}")
        return None


def write_yaml(filepath: str, data: Dict[str, Any]) -> bool:
    """
    寫入 YAML 文件

    參數:
        filepath: 文件路徑
        data: 要寫入的資料

    返回:
        是否成功
    """
    try:
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(filepath, 'w', encoding='utf-8') as f:
            yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False)
        return True
    except OSError as e:
        logger.error(f"寫入 YAML 失敗: {e}")
        return False


def read_structured(filepath: str) -> Optional[Any]:
    """依副檔名讀取 JSON / GeoJSON / YAML"""
    extension = os.path.splitext(filepath)[1].lower()
    if extension in ('.yaml', '.yml'):
        return read_yaml(filepath)
    if extension in ('.json', '.geojson'):
        return read_json(filepath)
    raise GeoArgumentError(f"不支援的文件格式: {extension or filepath}")


# ==========================================
# 多邊形文件
# ==========================================
def _geojson_exterior_ring(data: Dict[str, Any]) -> List[Any]:
    kind = data.get('type')
    if kind == 'FeatureCollection':
        features = data.get('features') or []
        if not features:
            raise GeoArgumentError("FeatureCollection 沒有任何 feature")
        return _geojson_exterior_ring(features[0])
    if kind == 'Feature':
        geometry = data.get('geometry')
        if not isinstance(geometry, dict):
            raise GeoArgumentError("Feature 缺少 geometry")
        return _geojson_exterior_ring(geometry)
    if kind == 'Polygon':
        rings = data.get('coordinates') or []
        if not rings:
            raise GeoArgumentError("Polygon 沒有任何環")
        return rings[0]
    raise GeoArgumentError(f"不支援的 GeoJSON 類型: {kind}")


def parse_polygon(data: Any) -> List[Coordinate]:
    """
    將已解析的文件內容轉為頂點串列

    支援：
    - GeoJSON Polygon / Feature / FeatureCollection（外環，[經度, 緯度]）
    - {'points': [[緯度, 經度], ...]}

    參數:
        data: json / yaml 解析結果

    返回:
        Coordinate 串列
    """
    if not isinstance(data, dict):
        raise GeoArgumentError("多邊形文件必須是物件")

    if 'points' in data:
        pairs = data['points'] or []
        lat_first = True
    else:
        pairs = _geojson_exterior_ring(data)
        lat_first = False

    vertices = []
    for pair in pairs:
        if not isinstance(pair, (list, tuple)) or len(pair) < 2:
            raise GeoArgumentError(f"無效的座標: {pair!r}")
        if lat_first:
            vertices.append(Coordinate(pair[0], pair[1]))
        else:
            vertices.append(Coordinate(pair[1], pair[0]))
    return vertices


def load_polygon(filepath: str) -> List[Coordinate]:
    """
    從 .json / .geojson / .yaml / .yml 文件載入多邊形

    參數:
        filepath: 文件路徑

    返回:
        Coordinate 串列
    """
    data = read_structured(filepath)
    if data is None:
        raise GeoArgumentError(f"無法讀取多邊形文件: {filepath}")

    vertices = parse_polygon(data)
    logger.info(f"載入多邊形: {filepath} ({len(vertices)} 個頂點)")
    return vertices
