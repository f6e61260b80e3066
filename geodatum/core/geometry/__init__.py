"""
Geometry 幾何運算模組
"""

from .errors import (
    GeoArgumentError,
    DMSFormatError
)

from .decimal_math import (
    DATUM_CONTEXT,
    AGGREGATE_CONTEXT,
    make_context
)

from .dms import (
    to_latitude_dms,
    to_longitude_dms,
    from_dms
)

from .coordinate import (
    Coordinate
)

from .transform import (
    CoordinateType,
    compute_delta,
    wgs84_to_gcj02,
    gcj02_to_wgs84,
    wgs84_to_gcj02_batch,
    gcj02_to_wgs84_batch
)

from .geodesic import (
    GeodesicCalculator,
    KarneyGeodesic,
    distance,
    perimeter
)

from .polygon import (
    area,
    contains
)

__all__ = [
    'GeoArgumentError',
    'DMSFormatError',
    'DATUM_CONTEXT',
    'AGGREGATE_CONTEXT',
    'make_context',
    'to_latitude_dms',
    'to_longitude_dms',
    'from_dms',
    'Coordinate',
    'CoordinateType',
    'compute_delta',
    'wgs84_to_gcj02',
    'gcj02_to_wgs84',
    'wgs84_to_gcj02_batch',
    'gcj02_to_wgs84_batch',
    'GeodesicCalculator',
    'KarneyGeodesic',
    'distance',
    'perimeter',
    'area',
    'contains'
]
