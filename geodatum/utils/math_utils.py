"""
數學工具模組
提供角度標準化與經度對齊
"""


# ==========================================
# 角度標準化
# ==========================================
def normalize_angle(angle_deg: float, min_angle: float = -180.0) -> float:
    """
    標準化角度到指定範圍

    參數:
        angle_deg: 角度值
        min_angle: 最小角度（預設-180）

    返回:
        標準化後的角度（在 [min_angle, min_angle+360) 範圍內）
    """
    angle = angle_deg
    while angle >= min_angle + 360.0:
        angle -= 360.0
    while angle < min_angle:
        angle += 360.0
    return angle


def adjust_longitude(lon: float, ref_lon: float) -> float:
    """
    將經度平移 ±360° 使其與參考經度的差落在 [-180, 180)

    用於跨越 ±180° 經線的多邊形：對齊後的經度可直接做平面射線判斷，
    結果可能超出 [-180, 180]。

    參數:
        lon: 經度（度）
        ref_lon: 參考經度（度）

    返回:
        對齊後的經度
    """
    return ref_lon + normalize_angle(lon - ref_lon, -180.0)
