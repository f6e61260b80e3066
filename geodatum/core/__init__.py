"""
Core 核心演算法模組
"""

from .geometry import Coordinate, CoordinateType

__all__ = [
    'Coordinate', 'CoordinateType'
]
