"""
幾何引擎例外類型
"""


class GeoArgumentError(ValueError):
    """結構性輸入錯誤：缺少必要座標、頂點不足、座標超出範圍"""


class DMSFormatError(ValueError):
    """度分秒字串存在但無法解析為三個數值分量"""
