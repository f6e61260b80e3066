"""
多邊形運算模組
提供球面多邊形面積與點在多邊形內判斷

- 面積：以第 0 點扇形三角剖分，逐一以 L'Huilier 公式求球面角盈
- 點在多邊形內：經度對齊參考經度後以射線法判斷，邊界視為在內
"""

import logging
import math
from decimal import Context, Decimal
from typing import Iterable, Optional

import numpy as np

from ...utils.logger import log_execution_time
from ...utils.math_utils import adjust_longitude
from .constants import (
    DEGENERATE_EDGE_TOLERANCE,
    HORIZONTAL_EDGE_TOLERANCE,
    ON_SEGMENT_TOLERANCE,
)
from .coordinate import Coordinate
from .decimal_math import AGGREGATE_CONTEXT
from .errors import GeoArgumentError
from .geodesic import (
    GeodesicCalculator,
    close_ring,
    get_default_calculator,
    valid_vertices,
)


logger = logging.getLogger(__name__)


# ==========================================
# 面積
# ==========================================
def spherical_triangle_area(a: Coordinate, b: Coordinate, c: Coordinate,
                            calculator: GeodesicCalculator) -> float:
    """
    計算球面三角形面積（L'Huilier 公式）

    邊長取大地線距離，再除以平均半徑 R = (a + b) / 2 換成弧度：
        tan²(E/4) = tan(s/2)·tan((s-a)/2)·tan((s-b)/2)·tan((s-c)/2)
        面積 = E·R²

    退化三角形（半周長不大於任一邊、或乘積不為正）返回 0。

    參數:
        a, b, c: 三角形頂點
        calculator: 大地線計算器

    返回:
        面積（平方公尺）
    """
    def side(p: Coordinate, q: Coordinate) -> float:
        return calculator.distance(
            float(p.latitude), float(p.longitude),
            float(q.latitude), float(q.longitude),
        )

    radius = calculator.mean_radius
    side_a = side(b, c) / radius
    side_b = side(a, c) / radius
    side_c = side(a, b) / radius

    s = (side_a + side_b + side_c) / 2.0
    if s <= 0 or s <= side_a or s <= side_b or s <= side_c:
        return 0.0

    tan_product = (
        math.tan(s / 2.0)
        * math.tan((s - side_a) / 2.0)
        * math.tan((s - side_b) / 2.0)
        * math.tan((s - side_c) / 2.0)
    )
    if not tan_product > 0:
        return 0.0

    excess = 4.0 * math.atan(math.sqrt(tan_product))
    return excess * radius * radius


@log_execution_time()
def area(points: Optional[Iterable[Optional[Coordinate]]],
         calculator: Optional[GeodesicCalculator] = None,
         context: Optional[Context] = None) -> Decimal:
    """
    計算多邊形面積（球面近似，誤差 < 0.1%）

    過濾 None 後至少需要 3 點；首尾不同時自動閉合。
    以第 0 點為公共頂點剖分為 (0, i, i+1) 三角形後加總，取絕對值。

    參數:
        points: 有序頂點
        calculator: 大地線計算器（預設 GeographicLib）
        context: 累加精度（預設 AGGREGATE_CONTEXT）

    返回:
        面積（平方公尺，>= 0）
    """
    ring = close_ring(valid_vertices(points))
    calculator = calculator or get_default_calculator()
    context = context or AGGREGATE_CONTEXT

    origin = ring[0]
    total = Decimal(0)
    degenerate = 0
    for p1, p2 in zip(ring[1:-1], ring[2:]):
        triangle = spherical_triangle_area(origin, p1, p2, calculator)
        if triangle == 0.0:
            degenerate += 1
            continue
        total = context.add(total, Decimal(str(triangle)))

    if degenerate:
        logger.debug(f"面積計算略過 {degenerate} 個退化三角形")
    return context.abs(total)


# ==========================================
# 點在多邊形內
# ==========================================
def is_point_on_segment(px: float, py: float,
                        x1: float, y1: float,
                        x2: float, y2: float) -> bool:
    """
    判斷點是否在線段上

    參數:
        px, py: 測試點（經度, 緯度）
        x1, y1: 線段起點
        x2, y2: 線段終點

    返回:
        True 如果點在線段上（含端點）
    """
    dx = x2 - x1
    dy = y2 - y1
    squared_length = dx * dx + dy * dy

    if squared_length == 0:
        return (abs(px - x1) <= DEGENERATE_EDGE_TOLERANCE
                and abs(py - y1) <= DEGENERATE_EDGE_TOLERANCE)

    cross = (py - y1) * dx - (px - x1) * dy
    if abs(cross) > ON_SEGMENT_TOLERANCE:
        return False

    dot = (px - x1) * dx + (py - y1) * dy
    return 0 <= dot <= squared_length


def contains(point: Optional[Coordinate],
             polygon: Optional[Iterable[Optional[Coordinate]]]) -> bool:
    """
    判斷點是否在多邊形內（射線法，邊界視為在內）

    所有經度先對齊第 0 點的經度，使跨越 ±180° 經線的多邊形也能正確判斷。

    參數:
        point: 測試點
        polygon: 多邊形頂點（至少 3 個有效頂點）

    返回:
        True 如果點在多邊形內或邊上
    """
    if point is None:
        raise GeoArgumentError("point 不可為 None")
    vertices = valid_vertices(polygon, 'polygon')

    ref_longitude = float(vertices[0].longitude)
    ring = np.array([
        [float(v.latitude), adjust_longitude(float(v.longitude), ref_longitude)]
        for v in vertices
    ])

    test_lat = float(point.latitude)
    test_lon = adjust_longitude(float(point.longitude), ref_longitude)

    inside = False
    n = len(ring)
    j = n - 1
    for i in range(n):
        yi, xi = ring[i]
        yj, xj = ring[j]

        if is_point_on_segment(test_lon, test_lat, xi, yi, xj, yj):
            return True

        # 近水平邊跳過，避免除以接近 0 的數
        if abs(yj - yi) >= HORIZONTAL_EDGE_TOLERANCE:
            if ((yi > test_lat) != (yj > test_lat)) and (
                test_lon < (xj - xi) * (test_lat - yi) / (yj - yi) + xi
            ):
                inside = not inside

        j = i

    return inside
