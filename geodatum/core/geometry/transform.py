"""
大地基準轉換模組
WGS-84 ↔ GCJ-02（中國加密偏移座標）

GCJ-02 = WGS-84 + Δ，WGS-84 ≈ GCJ-02 − Δ
反向轉換以同一個 Δ 取反近似，誤差約 50-500 公尺。
中國邊界框之外的座標兩個方向都原樣返回。
"""

import logging
from decimal import Context, Decimal
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from . import decimal_math as dm
from .constants import (
    GCJ_ECCENTRICITY_SQUARED,
    GCJ_ORIGIN_LATITUDE,
    GCJ_ORIGIN_LONGITUDE,
    GCJ_PI,
    GCJ_SEMI_MAJOR_AXIS,
    HARMONIC_SCALE_DENOMINATOR,
    HARMONIC_SCALE_NUMERATOR,
    LAT_CONSTANT,
    LAT_HARMONIC_2PI,
    LAT_HARMONIC_6PI,
    LAT_HARMONIC_PI,
    LAT_HARMONIC_PI_12,
    LAT_HARMONIC_PI_3,
    LAT_HARMONIC_PI_30,
    LAT_SQRT_WEIGHT,
    LAT_X_WEIGHT,
    LAT_XY_WEIGHT,
    LAT_Y_WEIGHT,
    LAT_YY_WEIGHT,
    LON_CONSTANT,
    LON_HARMONIC_2PI,
    LON_HARMONIC_6PI,
    LON_HARMONIC_PI,
    LON_HARMONIC_PI_12,
    LON_HARMONIC_PI_3,
    LON_HARMONIC_PI_30,
    LON_SQRT_WEIGHT,
    LON_XX_WEIGHT,
    LON_XY_WEIGHT,
    LON_Y_WEIGHT,
)
from .coordinate import Coordinate


logger = logging.getLogger(__name__)

_ONE_HUNDRED_EIGHTY = Decimal(180)


# ==========================================
# 偏移量計算
# ==========================================
def _sin_pi(value: Decimal, factor: Decimal, divisor: Decimal,
            context: Context) -> Decimal:
    """sin(value * factor / divisor * π)"""
    angle = context.multiply(context.divide(context.multiply(value, factor), divisor), GCJ_PI)
    return dm.sin(angle, context)


def _harmonic_group(first: Decimal, second: Decimal, context: Context) -> Decimal:
    """(first + second) * 2 / 3"""
    return context.divide(
        context.multiply(context.add(first, second), HARMONIC_SCALE_NUMERATOR),
        HARMONIC_SCALE_DENOMINATOR,
    )


def _short_wave_group(x: Decimal, weight_6pi: Decimal, weight_2pi: Decimal,
                      context: Context) -> Decimal:
    return _harmonic_group(
        context.multiply(weight_6pi, _sin_pi(x, Decimal(6), Decimal(1), context)),
        context.multiply(weight_2pi, _sin_pi(x, Decimal(2), Decimal(1), context)),
        context,
    )


def _long_wave_groups(v: Decimal,
                      weight_pi: Decimal, weight_pi_3: Decimal,
                      weight_pi_12: Decimal, weight_pi_30: Decimal,
                      context: Context) -> Decimal:
    one = Decimal(1)
    middle = _harmonic_group(
        context.multiply(weight_pi, _sin_pi(v, one, one, context)),
        context.multiply(weight_pi_3, _sin_pi(v, one, Decimal(3), context)),
        context,
    )
    long_wave = _harmonic_group(
        context.multiply(weight_pi_12, _sin_pi(v, one, Decimal(12), context)),
        context.multiply(weight_pi_30, _sin_pi(v, one, Decimal(30), context)),
        context,
    )
    return context.add(middle, long_wave)


def transform_longitude(x: Decimal, y: Decimal, context: Context) -> Decimal:
    """
    經度偏移多項式

    300 + x + 2y + 0.1x² + 0.1xy + 0.1√|x|
        + (20sin(6πx) + 20sin(2πx))·2/3
        + (20sin(πx) + 40sin(πx/3))·2/3
        + (150sin(πx/12) + 300sin(πx/30))·2/3

    參數:
        x: 經度 - 105
        y: 緯度 - 35
        context: 運算精度
    """
    total = context.add(LON_CONSTANT, x)
    total = context.add(total, context.multiply(LON_Y_WEIGHT, y))
    total = context.add(total, context.multiply(LON_XX_WEIGHT, context.multiply(x, x)))
    total = context.add(total, context.multiply(LON_XY_WEIGHT, context.multiply(x, y)))
    total = context.add(total, context.multiply(LON_SQRT_WEIGHT, dm.sqrt(context.abs(x), context)))
    total = context.add(total, _short_wave_group(x, LON_HARMONIC_6PI, LON_HARMONIC_2PI, context))
    total = context.add(total, _long_wave_groups(
        x, LON_HARMONIC_PI, LON_HARMONIC_PI_3, LON_HARMONIC_PI_12, LON_HARMONIC_PI_30, context
    ))
    return total


def transform_latitude(x: Decimal, y: Decimal, context: Context) -> Decimal:
    """
    緯度偏移多項式

    -100 + 2x + 3y + 0.2y² + 0.1xy + 0.2√|x|
        + (20sin(6πx) + 20sin(2πx))·2/3
        + (20sin(πy) + 40sin(πy/3))·2/3
        + (160sin(πy/12) + 320sin(πy/30))·2/3

    參數:
        x: 經度 - 105
        y: 緯度 - 35
        context: 運算精度
    """
    total = context.add(LAT_CONSTANT, context.multiply(LAT_X_WEIGHT, x))
    total = context.add(total, context.multiply(LAT_Y_WEIGHT, y))
    total = context.add(total, context.multiply(LAT_YY_WEIGHT, context.multiply(y, y)))
    total = context.add(total, context.multiply(LAT_XY_WEIGHT, context.multiply(x, y)))
    total = context.add(total, context.multiply(LAT_SQRT_WEIGHT, dm.sqrt(context.abs(x), context)))
    total = context.add(total, _short_wave_group(x, LAT_HARMONIC_6PI, LAT_HARMONIC_2PI, context))
    total = context.add(total, _long_wave_groups(
        y, LAT_HARMONIC_PI, LAT_HARMONIC_PI_3, LAT_HARMONIC_PI_12, LAT_HARMONIC_PI_30, context
    ))
    return total


def compute_delta(coordinate: Coordinate,
                  context: Optional[Context] = None) -> Tuple[Decimal, Decimal]:
    """
    計算 WGS-84 → GCJ-02 的偏移量

    多項式輸出除以該緯度下的曲率半徑換算為度：
    - 緯度：子午圈曲率半徑 a(1-e²) / (1-e²sin²φ)^(3/2)
    - 經度：卯酉圈曲率半徑 a / √(1-e²sin²φ) 乘 cos φ

    參數:
        coordinate: 輸入座標
        context: 運算精度（預設 DATUM_CONTEXT，至少 32 位）

    返回:
        (Δ緯度, Δ經度)（度）

    例外:
        GeoArgumentError: context 精度低於 32 位
    """
    context = dm.require_datum_precision(context or dm.DATUM_CONTEXT)

    x = context.subtract(coordinate.longitude, GCJ_ORIGIN_LONGITUDE)
    y = context.subtract(coordinate.latitude, GCJ_ORIGIN_LATITUDE)

    rad_latitude = context.multiply(context.divide(coordinate.latitude, _ONE_HUNDRED_EIGHTY), GCJ_PI)
    sin_latitude = dm.sin(rad_latitude, context)
    magic = context.subtract(
        1, context.multiply(GCJ_ECCENTRICITY_SQUARED, context.multiply(sin_latitude, sin_latitude))
    )
    sqrt_magic = dm.sqrt(magic, context)

    meridian = context.divide(
        context.multiply(GCJ_SEMI_MAJOR_AXIS, context.subtract(1, GCJ_ECCENTRICITY_SQUARED)),
        context.multiply(magic, sqrt_magic),
    )
    delta_latitude = context.divide(
        context.multiply(transform_latitude(x, y, context), _ONE_HUNDRED_EIGHTY),
        context.multiply(meridian, GCJ_PI),
    )

    parallel = context.multiply(
        context.divide(GCJ_SEMI_MAJOR_AXIS, sqrt_magic),
        dm.cos(rad_latitude, context),
    )
    delta_longitude = context.divide(
        context.multiply(transform_longitude(x, y, context), _ONE_HUNDRED_EIGHTY),
        context.multiply(parallel, GCJ_PI),
    )

    return delta_latitude, delta_longitude


# ==========================================
# 轉換函數
# ==========================================
def wgs84_to_gcj02(coordinate: Optional[Coordinate],
                   context: Optional[Context] = None) -> Optional[Coordinate]:
    """
    WGS-84 轉 GCJ-02

    參數:
        coordinate: WGS-84 座標
        context: 運算精度（預設 DATUM_CONTEXT，至少 32 位）

    返回:
        GCJ-02 座標；輸入為 None 時返回 None；境外座標原樣返回
    """
    if coordinate is None:
        return None
    context = dm.require_datum_precision(context or dm.DATUM_CONTEXT)
    if coordinate.is_out_of_china():
        return coordinate

    delta_latitude, delta_longitude = compute_delta(coordinate, context)
    return Coordinate(
        context.add(coordinate.latitude, delta_latitude),
        context.add(coordinate.longitude, delta_longitude),
    )


def gcj02_to_wgs84(coordinate: Optional[Coordinate],
                   context: Optional[Context] = None) -> Optional[Coordinate]:
    """
    GCJ-02 轉 WGS-84（以正向偏移取反近似）

    參數:
        coordinate: GCJ-02 座標
        context: 運算精度（預設 DATUM_CONTEXT，至少 32 位）

    返回:
        WGS-84 座標；輸入為 None 時返回 None；境外座標原樣返回
    """
    if coordinate is None:
        return None
    context = dm.require_datum_precision(context or dm.DATUM_CONTEXT)
    if coordinate.is_out_of_china():
        return coordinate

    delta_latitude, delta_longitude = compute_delta(coordinate, context)
    return Coordinate(
        context.subtract(coordinate.latitude, delta_latitude),
        context.subtract(coordinate.longitude, delta_longitude),
    )


def wgs84_to_gcj02_batch(coordinates: Iterable[Optional[Coordinate]],
                         context: Optional[Context] = None) -> List[Optional[Coordinate]]:
    """批次 WGS-84 轉 GCJ-02，保留 None 項目"""
    result = [wgs84_to_gcj02(c, context) for c in coordinates]
    logger.debug(f"WGS-84 → GCJ-02 批次轉換: {len(result)} 點")
    return result


def gcj02_to_wgs84_batch(coordinates: Iterable[Optional[Coordinate]],
                         context: Optional[Context] = None) -> List[Optional[Coordinate]]:
    """批次 GCJ-02 轉 WGS-84，保留 None 項目"""
    result = [gcj02_to_wgs84(c, context) for c in coordinates]
    logger.debug(f"GCJ-02 → WGS-84 批次轉換: {len(result)} 點")
    return result


# ==========================================
# 座標系類型
# ==========================================
class CoordinateType(Enum):
    """座標所屬的大地基準"""
    WGS_84 = 'wgs84'
    GCJ_02 = 'gcj02'

    def to_gcj02(self, coordinate: Optional[Coordinate],
                 context: Optional[Context] = None) -> Optional[Coordinate]:
        """將此基準下的座標轉為 GCJ-02"""
        if self is CoordinateType.GCJ_02:
            return coordinate
        return wgs84_to_gcj02(coordinate, context)

    def to_wgs84(self, coordinate: Optional[Coordinate],
                 context: Optional[Context] = None) -> Optional[Coordinate]:
        """將此基準下的座標轉為 WGS-84"""
        if self is CoordinateType.WGS_84:
            return coordinate
        return gcj02_to_wgs84(coordinate, context)

    def convert(self, coordinate: Optional[Coordinate], target: 'CoordinateType',
                context: Optional[Context] = None) -> Optional[Coordinate]:
        if target is CoordinateType.GCJ_02:
            return self.to_gcj02(coordinate, context)
        return self.to_wgs84(coordinate, context)
