"""
全局配置管理模組
提供運算精度與日誌配置，支援 YAML / JSON 配置文件

函式庫函數不會隱式讀取這裡的配置；呼叫端以 datum_context() /
aggregate_context() 取得 Context 後明確傳入。
"""

import logging
import os
from dataclasses import asdict, dataclass, fields
from decimal import Context
from typing import Any, Dict, Optional

from ..core.geometry.decimal_math import MIN_DATUM_PRECISION, make_context
from ..utils.file_io import read_structured, write_json, write_yaml
from ..utils.logger import LOG_LEVELS


logger = logging.getLogger(__name__)


@dataclass
class PrecisionSettings:
    """十進位運算精度配置"""
    # 大地基準轉換、度分秒解析
    datum_precision: int = 34
    # 周長、面積累加
    aggregate_precision: int = 16
    # 'HALF_EVEN' 或 'HALF_UP'
    rounding: str = 'HALF_EVEN'

    def __post_init__(self):
        """建立一次 Context 以驗證參數"""
        make_context(self.datum_precision, self.rounding)
        make_context(self.aggregate_precision, self.rounding)
        if self.datum_precision < MIN_DATUM_PRECISION:
            raise ValueError(
                f"datum_precision 至少需要 {MIN_DATUM_PRECISION} 位: {self.datum_precision}"
            )


@dataclass
class LogSettings:
    """日誌配置"""
    level: str = 'INFO'
    log_to_file: bool = False
    log_dir: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.level, str) or self.level.upper() not in LOG_LEVELS:
            raise ValueError(f"不支援的日誌等級: {self.level!r}")
        if not isinstance(self.log_to_file, bool):
            raise ValueError(f"log_to_file 必須是布林值: {self.log_to_file!r}")
        if self.log_dir is not None and not isinstance(self.log_dir, str):
            raise ValueError(f"log_dir 必須是字串: {self.log_dir!r}")


def _build(cls, data: Optional[Dict[str, Any]]):
    """只取 dataclass 認得的欄位，其餘記錄警告後忽略"""
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise ValueError(f"配置項 ({cls.__name__}) 必須是物件: {data!r}")
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        logger.warning(f"忽略未知的配置項 ({cls.__name__}): {sorted(map(str, unknown))}")
    return cls(**{k: v for k, v in data.items() if k in known})


class GlobalSettings:
    """全局配置管理器"""

    def __init__(self, config_file: Optional[str] = None):
        """
        初始化全局配置

        參數:
            config_file: 配置文件路徑（.yaml / .yml / .json，可選）
        """
        self.precision = PrecisionSettings()
        self.log = LogSettings()
        self.config_file = config_file

        if config_file:
            self.load()

    def load(self) -> bool:
        """
        從文件載入配置

        返回:
            是否成功載入
        """
        if not self.config_file or not os.path.exists(self.config_file):
            logger.warning(f"配置文件不存在: {self.config_file}")
            return False

        config_data = read_structured(self.config_file)
        if config_data is None:
            return False
        if not isinstance(config_data, dict):
            raise ValueError(f"配置文件格式錯誤: {self.config_file}")

        self.precision = _build(PrecisionSettings, config_data.get('precision'))
        self.log = _build(LogSettings, config_data.get('log'))
        logger.debug(f"配置已載入: {self.config_file}")
        return True

    def save(self, config_file: Optional[str] = None) -> bool:
        """
        儲存配置到文件

        參數:
            config_file: 目標路徑（預設為載入時的路徑）

        返回:
            是否成功儲存
        """
        target = config_file or self.config_file
        if not target:
            raise ValueError("未指定配置文件路徑")

        if target.lower().endswith(('.yaml', '.yml')):
            return write_yaml(target, self.get_dict())
        return write_json(target, self.get_dict())

    def reset_to_default(self):
        """重設為預設配置"""
        self.precision = PrecisionSettings()
        self.log = LogSettings()

    def get_dict(self) -> Dict[str, Any]:
        """獲取配置字典"""
        return {
            'precision': asdict(self.precision),
            'log': asdict(self.log),
        }

    def datum_context(self) -> Context:
        return make_context(self.precision.datum_precision, self.precision.rounding)

    def aggregate_context(self) -> Context:
        return make_context(self.precision.aggregate_precision, self.precision.rounding)


# 全局配置實例
_global_settings: Optional[GlobalSettings] = None


def get_settings() -> GlobalSettings:
    """
    獲取全局配置實例（單例模式）

    返回:
        GlobalSettings實例
    """
    global _global_settings
    if _global_settings is None:
        _global_settings = GlobalSettings()
    return _global_settings


def init_settings(config_file: Optional[str] = None) -> GlobalSettings:
    """
    初始化全局配置

    參數:
        config_file: 配置文件路徑（可選）

    返回:
        GlobalSettings實例
    """
    global _global_settings
    _global_settings = GlobalSettings(config_file)
    return _global_settings
