"""
工具模組
提供數學計算、日誌管理等基礎工具

文件讀寫（依賴幾何模組）請由 geodatum.utils.file_io 匯入。
"""

from .math_utils import (
    normalize_angle,
    adjust_longitude
)

from .logger import (
    setup_logger,
    get_logger,
    log_execution_time
)

__all__ = [
    # Math utilities
    'normalize_angle',
    'adjust_longitude',

    # Logger
    'setup_logger',
    'get_logger',
    'log_execution_time'
]
