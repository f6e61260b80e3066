"""
座標值物件模組
WGS-84 / GCJ-02 十進位度座標
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

import numpy as np

from .constants import (
    CHINA_MAX_LATITUDE,
    CHINA_MAX_LONGITUDE,
    CHINA_MIN_LATITUDE,
    CHINA_MIN_LONGITUDE,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from .decimal_math import NumberLike, to_decimal
from .dms import from_dms, to_latitude_dms, to_longitude_dms
from .errors import GeoArgumentError


@dataclass(frozen=True)
class Coordinate:
    """
    地理座標點（十進位度，不可變）

    建構時立即檢查範圍：
    - 緯度 [-90, 90]
    - 經度 [-180, 180]

    使用方法：
        ```python
        beijing = Coordinate(39.9042, 116.4074)
        beijing.latitude          # Decimal('39.9042')
        beijing.is_out_of_china() # False
        ```
    """
    latitude: Decimal
    longitude: Decimal

    def __post_init__(self):
        latitude = to_decimal(self.latitude, 'latitude')
        longitude = to_decimal(self.longitude, 'longitude')

        if not MIN_LATITUDE <= latitude <= MAX_LATITUDE:
            raise GeoArgumentError(f"緯度超出範圍 [-90, 90]: {latitude}")
        if not MIN_LONGITUDE <= longitude <= MAX_LONGITUDE:
            raise GeoArgumentError(f"經度超出範圍 [-180, 180]: {longitude}")

        object.__setattr__(self, 'latitude', latitude)
        object.__setattr__(self, 'longitude', longitude)

    @classmethod
    def of(cls, latitude: NumberLike, longitude: NumberLike) -> 'Coordinate':
        return cls(latitude, longitude)

    @classmethod
    def from_dms(cls, latitude_dms: str, longitude_dms: str) -> 'Coordinate':
        """
        從度分秒字串建立座標

        參數:
            latitude_dms: 緯度，例如 39°54'15.12"N
            longitude_dms: 經度，例如 116°23'29.40"E

        返回:
            Coordinate 對象
        """
        latitude = from_dms(latitude_dms)
        longitude = from_dms(longitude_dms)
        if latitude is None or longitude is None:
            raise GeoArgumentError("度分秒字串不可為空")
        return cls(latitude, longitude)

    def is_out_of_china(self) -> bool:
        """
        是否位於中國邊界框之外

        只用於判斷是否套用 GCJ-02 偏移，並非座標有效性檢查。
        """
        inside = (
            CHINA_MIN_LONGITUDE < self.longitude < CHINA_MAX_LONGITUDE
            and CHINA_MIN_LATITUDE < self.latitude < CHINA_MAX_LATITUDE
        )
        return not inside

    def to_tuple(self) -> Tuple[Decimal, Decimal]:
        return (self.latitude, self.longitude)

    def to_array(self) -> np.ndarray:
        return np.array([float(self.latitude), float(self.longitude)])

    def __str__(self) -> str:
        """經度在前，例如 116°23'29.40"E,39°54'15.12"N"""
        return f"{to_longitude_dms(self.longitude)},{to_latitude_dms(self.latitude)}"
