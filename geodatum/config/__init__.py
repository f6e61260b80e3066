"""
配置模組
提供運算精度與日誌配置
"""

from .settings import (
    GlobalSettings,
    PrecisionSettings,
    LogSettings,
    get_settings,
    init_settings
)

__all__ = [
    'GlobalSettings',
    'PrecisionSettings',
    'LogSettings',
    'get_settings',
    'init_settings'
]
