"""
大地測量模組
WGS-84 橢球大地線距離與多邊形周長
"""

import logging
from abc import ABC, abstractmethod
from decimal import Context, Decimal
from typing import Iterable, List, Optional

from geographiclib.geodesic import Geodesic

from ...utils.logger import log_execution_time
from .coordinate import Coordinate
from .decimal_math import AGGREGATE_CONTEXT
from .errors import GeoArgumentError


logger = logging.getLogger(__name__)

MIN_RING_VERTICES = 3


# ==========================================
# 大地線計算介面
# ==========================================
class GeodesicCalculator(ABC):
    """
    大地線距離計算器介面

    面積與周長只透過 distance() 取得邊長，
    可替換為任何 WGS-84 橢球距離演算法（例如 Vincenty）。
    """

    @property
    @abstractmethod
    def semi_major_axis(self) -> float:
        """長半軸 (m)"""

    @property
    @abstractmethod
    def semi_minor_axis(self) -> float:
        """短半軸 (m)"""

    @property
    def mean_radius(self) -> float:
        """面積近似用的平均半徑 (a + b) / 2"""
        return (self.semi_major_axis + self.semi_minor_axis) / 2.0

    @abstractmethod
    def distance(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """
        計算兩點間大地線長度

        參數:
            lat1, lon1: 第一點的緯度和經度（度）
            lat2, lon2: 第二點的緯度和經度（度）

        返回:
            距離（公尺）
        """


class KarneyGeodesic(GeodesicCalculator):
    """以 GeographicLib (Karney 2013) 解大地線反算問題"""

    def __init__(self, geodesic: Optional[Geodesic] = None):
        self._geodesic = geodesic or Geodesic.WGS84

    @property
    def semi_major_axis(self) -> float:
        return self._geodesic.a

    @property
    def semi_minor_axis(self) -> float:
        return self._geodesic.a * (1 - self._geodesic.f)

    def distance(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        result = self._geodesic.Inverse(lat1, lon1, lat2, lon2, outmask=Geodesic.DISTANCE)
        return result['s12']


_default_calculator: GeodesicCalculator = KarneyGeodesic()


def get_default_calculator() -> GeodesicCalculator:
    return _default_calculator


# ==========================================
# 多邊形輸入整理
# ==========================================
def valid_vertices(points: Optional[Iterable[Optional[Coordinate]]],
                   name: str = 'coordinates') -> List[Coordinate]:
    """
    過濾 None 並檢查頂點數

    返回的是新串列，不修改呼叫端的集合。
    """
    if points is None:
        raise GeoArgumentError(f"{name} 不可為 None")

    vertices = [p for p in points if p is not None]
    if len(vertices) < MIN_RING_VERTICES:
        raise GeoArgumentError(
            f"{name} 至少需要 {MIN_RING_VERTICES} 個有效座標，但只有 {len(vertices)} 個"
        )
    return vertices


def close_ring(vertices: List[Coordinate]) -> List[Coordinate]:
    """首尾不同時在尾端補上第一點（以十進位值比較）"""
    closed = list(vertices)
    if closed[0] != closed[-1]:
        closed.append(closed[0])
    return closed


# ==========================================
# 距離與周長
# ==========================================
def distance(start: Optional[Coordinate], end: Optional[Coordinate],
             calculator: Optional[GeodesicCalculator] = None) -> float:
    """
    計算兩點間 WGS-84 大地線距離

    參數:
        start: 起點
        end: 終點
        calculator: 大地線計算器（預設 GeographicLib）

    返回:
        距離（公尺）
    """
    if start is None:
        raise GeoArgumentError("start 不可為 None")
    if end is None:
        raise GeoArgumentError("end 不可為 None")

    calculator = calculator or _default_calculator
    return calculator.distance(
        float(start.latitude), float(start.longitude),
        float(end.latitude), float(end.longitude),
    )


@log_execution_time()
def perimeter(points: Optional[Iterable[Optional[Coordinate]]],
              calculator: Optional[GeodesicCalculator] = None,
              context: Optional[Context] = None) -> Decimal:
    """
    計算多邊形周長

    過濾 None 後至少需要 3 點；首尾不同時自動閉合。

    參數:
        points: 有序頂點
        calculator: 大地線計算器（預設 GeographicLib）
        context: 累加精度（預設 AGGREGATE_CONTEXT）

    返回:
        周長（公尺）
    """
    ring = close_ring(valid_vertices(points))
    calculator = calculator or _default_calculator
    context = context or AGGREGATE_CONTEXT

    total = Decimal(0)
    for p1, p2 in zip(ring, ring[1:]):
        segment = distance(p1, p2, calculator)
        total = context.add(total, Decimal(str(segment)))

    logger.debug(f"周長計算完成: {len(ring) - 1} 條邊, {total} m")
    return total
