"""
geodatum
========

地理座標與多邊形幾何引擎

主要功能：
- WGS-84 十進位度座標值物件
- WGS-84 ↔ GCJ-02 大地基準轉換
- 度分秒字串轉換
- 橢球大地線距離、多邊形周長與面積、點在多邊形內判斷

使用方式：
    from geodatum import Coordinate, wgs84_to_gcj02, area, contains

    gcj = wgs84_to_gcj02(Coordinate(39.9042, 116.3915))
"""

__version__ = "1.0.0"

from .core.geometry.errors import (
    GeoArgumentError,
    DMSFormatError
)

from .core.geometry.coordinate import (
    Coordinate
)

from .core.geometry.dms import (
    to_latitude_dms,
    to_longitude_dms,
    from_dms
)

from .core.geometry.transform import (
    CoordinateType,
    wgs84_to_gcj02,
    gcj02_to_wgs84
)

from .core.geometry.geodesic import (
    GeodesicCalculator,
    KarneyGeodesic,
    distance,
    perimeter
)

from .core.geometry.polygon import (
    area,
    contains
)

__all__ = [
    # Errors
    'GeoArgumentError',
    'DMSFormatError',

    # Coordinate
    'Coordinate',
    'CoordinateType',

    # DMS
    'to_latitude_dms',
    'to_longitude_dms',
    'from_dms',

    # Datum transform
    'wgs84_to_gcj02',
    'gcj02_to_wgs84',

    # Geodesy
    'GeodesicCalculator',
    'KarneyGeodesic',
    'distance',
    'perimeter',
    'area',
    'contains',
]
