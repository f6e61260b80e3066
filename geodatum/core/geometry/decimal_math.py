"""
高精度十進位數學模組
提供在明確 Context 下運算的 sin、cos、sqrt 與數值轉換

所有函數都只透過傳入的 decimal.Context 的方法運算，
不讀取也不修改執行緒預設的 decimal context。
"""

from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_EVEN, ROUND_HALF_UP
from typing import Union

from .constants import PI_DIGITS
from .errors import GeoArgumentError


NumberLike = Union[Decimal, int, float, str]

MIN_PRECISION = 7
MAX_PRECISION = 50

# 大地基準轉換至少需要的有效位數
MIN_DATUM_PRECISION = 32

# 週期化簡與級數累加時額外保留的位數
_GUARD_DIGITS = 10

ROUNDING_MODES = {
    'HALF_EVEN': ROUND_HALF_EVEN,
    'HALF_UP': ROUND_HALF_UP,
}


def make_context(precision: int, rounding: str = 'HALF_EVEN') -> Context:
    """
    建立運算用的 decimal Context

    參數:
        precision: 有效位數
        rounding: 捨入模式名稱 ('HALF_EVEN' 或 'HALF_UP')

    返回:
        decimal.Context
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise ValueError(f"精度必須是整數: {precision!r}")
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise ValueError(
            f"精度必須在 {MIN_PRECISION}-{MAX_PRECISION} 之間: {precision}"
        )
    if not isinstance(rounding, str) or rounding not in ROUNDING_MODES:
        raise ValueError(f"不支援的捨入模式: {rounding!r}")
    return Context(prec=precision, rounding=ROUNDING_MODES[rounding])


# 資料轉換：34 位（>= 32 位有效數字）
DATUM_CONTEXT = make_context(34)

# 周長、面積累加
AGGREGATE_CONTEXT = make_context(16)


def to_decimal(value: NumberLike, name: str = 'value') -> Decimal:
    """
    將數值轉為有限的 Decimal

    float 先經過 str()，使 39.9042 保持為 Decimal('39.9042')。

    參數:
        value: Decimal、int、float 或數字字串
        name: 錯誤訊息中使用的參數名稱

    返回:
        Decimal
    """
    if value is None:
        raise GeoArgumentError(f"{name} 不可為 None")
    if isinstance(value, bool):
        raise GeoArgumentError(f"{name} 必須是數值: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            raise GeoArgumentError(f"{name} 不是有效數值: {value!r}") from None
    else:
        raise GeoArgumentError(f"{name} 必須是數值: {value!r}")

    if not result.is_finite():
        raise GeoArgumentError(f"{name} 必須是有限數值: {value!r}")
    return result


def pi(context: Context) -> Decimal:
    """以 context 精度取圓周率"""
    return context.plus(PI_DIGITS)


def sqrt(x: Decimal, context: Context) -> Decimal:
    return context.sqrt(x)


def _working_context(x: Decimal, context: Context) -> Context:
    # 引數越大，化簡時損失的位數越多
    extra = max(0, x.adjusted()) + _GUARD_DIGITS
    return Context(prec=context.prec + extra, rounding=ROUND_HALF_EVEN)


def _reduce(x: Decimal, work: Context) -> Decimal:
    """將角度化簡到 [-π, π]"""
    two_pi = work.multiply(2, pi(work))
    k = work.to_integral_value(work.divide(x, two_pi))
    return work.subtract(x, work.multiply(k, two_pi))


def sin(x: Decimal, context: Context) -> Decimal:
    """
    正弦（泰勒級數）

    參數:
        x: 弧度
        context: 結果精度

    返回:
        sin(x)，捨入到 context 精度
    """
    work = _working_context(x, context)
    r = _reduce(x, work)
    r2 = work.multiply(r, r)

    term = r
    total = r
    n = 1
    while True:
        term = work.minus(work.divide(work.multiply(term, r2), (n + 1) * (n + 2)))
        n += 2
        next_total = work.add(total, term)
        if next_total == total:
            break
        total = next_total

    return context.plus(total)


def cos(x: Decimal, context: Context) -> Decimal:
    """
    餘弦（泰勒級數）

    參數:
        x: 弧度
        context: 結果精度

    返回:
        cos(x)，捨入到 context 精度
    """
    work = _working_context(x, context)
    r = _reduce(x, work)
    r2 = work.multiply(r, r)

    term = Decimal(1)
    total = Decimal(1)
    n = 0
    while True:
        term = work.minus(work.divide(work.multiply(term, r2), (n + 1) * (n + 2)))
        n += 2
        next_total = work.add(total, term)
        if next_total == total:
            break
        total = next_total

    return context.plus(total)


def require_datum_precision(context: Context) -> Context:
    """大地基準轉換的 Context 不得低於 MIN_DATUM_PRECISION 位"""
    if context.prec < MIN_DATUM_PRECISION:
        raise GeoArgumentError(
            f"大地基準轉換精度至少需要 {MIN_DATUM_PRECISION} 位: {context.prec}"
        )
    return context
