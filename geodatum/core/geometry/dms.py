"""
度分秒 (DMS) 轉換模組
十進位度 ↔ 度分秒字串

字串格式固定為 {度}°{分}'{秒:.2f}"{方向}，例如 39°54'15.12"N
"""

from decimal import Context, Decimal, InvalidOperation, ROUND_DOWN, ROUND_HALF_UP
from typing import Optional

from .constants import (
    DEGREE_CHAR,
    EAST_CHAR,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    MINUTE_CHAR,
    NORTH_CHAR,
    SECOND_CHAR,
    SOUTH_CHAR,
    WEST_CHAR,
)
from .decimal_math import DATUM_CONTEXT, NumberLike, to_decimal
from .errors import DMSFormatError


SIXTY = Decimal(60)
THREE_THOUSAND_SIX_HUNDRED = Decimal(3600)
SECONDS_QUANTUM = Decimal('0.01')


def to_latitude_dms(value: Optional[NumberLike],
                    context: Optional[Context] = None) -> Optional[str]:
    """
    緯度轉度分秒字串

    參數:
        value: 十進位度緯度
        context: 運算精度（預設 DATUM_CONTEXT）

    返回:
        度分秒字串；None 或超出 [-90, 90] 時返回 None
    """
    if value is None:
        return None
    degrees = to_decimal(value, 'latitude')
    if degrees < MIN_LATITUDE or degrees > MAX_LATITUDE:
        return None
    return _to_dms(degrees, True, context or DATUM_CONTEXT)


def to_longitude_dms(value: Optional[NumberLike],
                     context: Optional[Context] = None) -> Optional[str]:
    """
    經度轉度分秒字串

    參數:
        value: 十進位度經度
        context: 運算精度（預設 DATUM_CONTEXT）

    返回:
        度分秒字串；None 或超出 [-180, 180] 時返回 None
    """
    if value is None:
        return None
    degrees = to_decimal(value, 'longitude')
    if degrees < MIN_LONGITUDE or degrees > MAX_LONGITUDE:
        return None
    return _to_dms(degrees, False, context or DATUM_CONTEXT)


def _to_dms(value: Decimal, latitude: bool, context: Context) -> str:
    negative = value < 0
    absolute = context.abs(value)

    # 度、分向零截斷；秒四捨五入到兩位
    degrees = absolute.to_integral_value(rounding=ROUND_DOWN, context=context)
    remaining = context.subtract(absolute, degrees)
    total_minutes = context.multiply(remaining, SIXTY)
    minutes = total_minutes.to_integral_value(rounding=ROUND_DOWN, context=context)
    seconds = context.multiply(context.subtract(total_minutes, minutes), SIXTY)
    seconds = seconds.quantize(SECONDS_QUANTUM, rounding=ROUND_HALF_UP, context=context)

    if latitude:
        direction = SOUTH_CHAR if negative else NORTH_CHAR
    else:
        direction = WEST_CHAR if negative else EAST_CHAR

    return (
        f"{int(degrees)}{DEGREE_CHAR}"
        f"{int(minutes)}{MINUTE_CHAR}"
        f"{seconds:.2f}{SECOND_CHAR}"
        f"{direction}"
    )


def from_dms(text: Optional[str],
             context: Optional[Context] = None) -> Optional[Decimal]:
    """
    度分秒字串轉十進位度

    依序由左至右尋找 °、'、" 三個分隔符，取出度、分、秒三段數值，
    結尾為 S 或 W 時取負值。

    參數:
        text: 度分秒字串
        context: 運算精度（預設 DATUM_CONTEXT）

    返回:
        十進位度；空白字串返回 None

    例外:
        DMSFormatError: 缺少分隔符或數值無法解析
    """
    if text is None or not text.strip():
        return None

    context = context or DATUM_CONTEXT

    degree_index = text.find(DEGREE_CHAR)
    if degree_index < 0:
        raise DMSFormatError(f"無效的度分秒格式（缺少 {DEGREE_CHAR}）: {text!r}")
    minute_index = text.find(MINUTE_CHAR, degree_index)
    if minute_index < 0:
        raise DMSFormatError(f"無效的度分秒格式（缺少 {MINUTE_CHAR}）: {text!r}")
    second_index = text.find(SECOND_CHAR, minute_index)
    if second_index < 0:
        raise DMSFormatError(f"無效的度分秒格式（缺少 {SECOND_CHAR}）: {text!r}")

    degrees = _parse_component(text[:degree_index], text)
    minutes = _parse_component(text[degree_index + 1:minute_index], text)
    seconds = _parse_component(text[minute_index + 1:second_index], text)

    value = context.add(
        context.add(degrees, context.divide(minutes, SIXTY)),
        context.divide(seconds, THREE_THOUSAND_SIX_HUNDRED),
    )

    direction = text[-1]
    if direction in (SOUTH_CHAR, WEST_CHAR):
        value = context.minus(value)
    return value


def _parse_component(part: str, text: str) -> Decimal:
    try:
        number = Decimal(part)
    except InvalidOperation:
        raise DMSFormatError(f"無效的度分秒格式: {text!r}") from None
    if not number.is_finite():
        raise DMSFormatError(f"無效的度分秒格式: {text!r}")
    return number
