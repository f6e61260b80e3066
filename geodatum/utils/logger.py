"""
日誌工具模組
提供統一的日誌管理功能，支援文件輸出和格式化

函式庫模組一律使用 logging.getLogger(__name__)，
由本模組在 'geodatum' 命名空間上掛載處理器。
"""

import functools
import logging
import os
import sys
import time
from datetime import datetime
from typing import Optional


DEFAULT_LOGGER_NAME = 'geodatum'


# ==========================================
# 日誌等級映射
# ==========================================
LOG_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}


# ==========================================
# 日誌格式定義
# ==========================================
class LogFormatter(logging.Formatter):
    """自訂日誌格式器，支援顏色輸出（終端機）"""

    # ANSI 顏色碼
    COLORS = {
        'DEBUG': '\033[36m',      # 青色
        'INFO': '\033[32m',       # 綠色
        'WARNING': '\033[33m',    # 黃色
        'ERROR': '\033[31m',      # 紅色
        'CRITICAL': '\033[35m',   # 紫色
        'RESET': '\033[0m'
    }

    def __init__(self, use_color: bool = True, stream=None):
        """
        初始化格式器

        參數:
            use_color: 是否使用顏色
            stream: 輸出串流，用於判斷是否為終端機
        """
        super().__init__(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        self.use_color = use_color
        self.stream = stream

    def format(self, record):
        """格式化日誌記錄"""
        stream = self.stream or sys.stderr
        if self.use_color and hasattr(stream, 'isatty') and stream.isatty():
            levelname = record.levelname
            if levelname in self.COLORS:
                # 複製一份，避免顏色碼汙染其他處理器
                record = logging.makeLogRecord(record.__dict__)
                record.levelname = (
                    f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
                )

        return super().format(record)


# ==========================================
# 日誌管理器
# ==========================================
class Logger:
    """統一的日誌管理器"""

    _instances = {}

    def __init__(self, name: str = DEFAULT_LOGGER_NAME,
                 level: str = 'INFO',
                 log_dir: Optional[str] = None,
                 log_to_file: bool = False,
                 log_to_console: bool = True):
        """
        初始化日誌管理器

        參數:
            name: 日誌名稱
            level: 日誌等級
            log_dir: 日誌目錄（log_to_file 為 True 時必填）
            log_to_file: 是否輸出到文件
            log_to_console: 是否輸出到控制台
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(LOG_LEVELS.get(level.upper(), logging.INFO))

        # 清除現有處理器
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        # 控制台處理器（輸出到 stderr，stdout 留給命令結果）
        if log_to_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(LogFormatter(use_color=True, stream=sys.stderr))
            self.logger.addHandler(console_handler)

        # 文件處理器
        if log_to_file:
            if not log_dir:
                raise ValueError("輸出日誌文件時必須指定 log_dir")

            os.makedirs(log_dir, exist_ok=True)

            # 建立日誌文件（按日期命名）
            log_filename = f"{name}_{datetime.now().strftime('%Y%m%d')}.log"
            log_filepath = os.path.join(log_dir, log_filename)

            file_handler = logging.FileHandler(log_filepath, encoding='utf-8')
            file_handler.setFormatter(LogFormatter(use_color=False))
            self.logger.addHandler(file_handler)

        # 防止日誌向上傳播
        self.logger.propagate = False

        Logger._instances[name] = self

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def error(self, message: str):
        self.logger.error(message)

    def set_level(self, level: str):
        """
        設定日誌等級

        參數:
            level: 日誌等級（DEBUG, INFO, WARNING, ERROR, CRITICAL）
        """
        self.logger.setLevel(LOG_LEVELS.get(level.upper(), logging.INFO))

    @classmethod
    def get_instance(cls, name: str = DEFAULT_LOGGER_NAME, **kwargs) -> 'Logger':
        """
        獲取日誌實例（單例模式）

        參數:
            name: 日誌名稱
            **kwargs: 其他初始化參數

        返回:
            Logger 實例
        """
        if name not in cls._instances:
            cls(name, **kwargs)
        return cls._instances[name]


# ==========================================
# 便捷函數
# ==========================================
def setup_logger(name: str = DEFAULT_LOGGER_NAME,
                 level: str = 'INFO',
                 log_dir: Optional[str] = None,
                 log_to_file: bool = False,
                 log_to_console: bool = True) -> Logger:
    """
    設定日誌管理器

    參數:
        name: 日誌名稱
        level: 日誌等級
        log_dir: 日誌目錄
        log_to_file: 是否輸出到文件
        log_to_console: 是否輸出到控制台

    返回:
        Logger 實例
    """
    return Logger(name, level, log_dir, log_to_file, log_to_console)


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> Logger:
    """獲取日誌實例"""
    return Logger.get_instance(name)


# ==========================================
# 日誌裝飾器
# ==========================================
def log_execution_time(logger: Optional[logging.Logger] = None):
    """
    日誌裝飾器，以 DEBUG 記錄函數執行時間

    參數:
        logger: logging.Logger（預設為被裝飾函數所在模組的 logger）

    使用範例:
        @log_execution_time()
        def area(points):
            ...
    """
    def decorator(func):
        _logger = logger or logging.getLogger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                execution_time = time.perf_counter() - start_time
                _logger.debug(
                    f"函數 {func.__name__} 執行失敗 "
                    f"({execution_time:.4f} 秒): {e}"
                )
                raise
            execution_time = time.perf_counter() - start_time
            _logger.debug(f"函數 {func.__name__} 執行時間: {execution_time:.4f} 秒")
            return result
        return wrapper
    return decorator
