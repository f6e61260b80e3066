"""
地理常數表
DMS 符號、方向字元、全球經緯度範圍、中國邊界框、GCJ-02 多項式權重與橢球參數

所有數值皆以字串建立 Decimal，避免經過二進位浮點數。
"""

from decimal import Decimal


# ==========================================
# DMS 符號與方向
# ==========================================
DEGREE_CHAR = '°'
MINUTE_CHAR = "'"
SECOND_CHAR = '"'

NORTH_CHAR = 'N'
SOUTH_CHAR = 'S'
EAST_CHAR = 'E'
WEST_CHAR = 'W'


# ==========================================
# 全球範圍
# ==========================================
MIN_LATITUDE = Decimal('-90')
MAX_LATITUDE = Decimal('90')
MIN_LONGITUDE = Decimal('-180')
MAX_LONGITUDE = Decimal('180')


# ==========================================
# 中國邊界框（大陸極點，開區間比較）
# ==========================================
CHINA_MIN_LATITUDE = Decimal('0.8293')     # 曾母暗沙
CHINA_MAX_LATITUDE = Decimal('55.8271')    # 漠河
CHINA_MIN_LONGITUDE = Decimal('72.004')    # 帕米爾高原
CHINA_MAX_LONGITUDE = Decimal('137.8347')  # 黑瞎子島


# ==========================================
# 數學常數
# ==========================================
# 70 位圓周率，僅用於三角函數的週期化簡
PI_DIGITS = Decimal('3.1415926535897932384626433832795028841971693993751058209749445923078164')


# ==========================================
# GCJ-02 演算法常數
# 來源：公開流傳的 GCJ-02 (eviltransform / coordtransform) 參考實作，
# 逐字抄錄，不可推導；任何改動都會使結果與其他實作不一致。
# ==========================================
# 演算法內建的 π 字面值（與數學 π 在第 23 位後不同）
GCJ_PI = Decimal('3.1415926535897932384626')

# Krasovsky 1940 橢球長半軸 (m)
GCJ_SEMI_MAJOR_AXIS = Decimal('6378245.0')

# Krasovsky 1940 第一離心率平方
GCJ_ECCENTRICITY_SQUARED = Decimal('0.00669342162296594323')

# 偏移參考點 105°E / 35°N
GCJ_ORIGIN_LONGITUDE = Decimal('105.0')
GCJ_ORIGIN_LATITUDE = Decimal('35.0')

# 經度多項式：常數項、y 係數、x² 係數、xy 係數、√|x| 係數
# (x 的一次項係數為 1)
LON_CONSTANT = Decimal('300.0')
LON_Y_WEIGHT = Decimal('2.0')
LON_XX_WEIGHT = Decimal('0.1')
LON_XY_WEIGHT = Decimal('0.1')
LON_SQRT_WEIGHT = Decimal('0.1')

# 經度諧波：sin(6πx)、sin(2πx) / sin(πx)、sin(πx/3) / sin(πx/12)、sin(πx/30)
LON_HARMONIC_6PI = Decimal('20.0')
LON_HARMONIC_2PI = Decimal('20.0')
LON_HARMONIC_PI = Decimal('20.0')
LON_HARMONIC_PI_3 = Decimal('40.0')
LON_HARMONIC_PI_12 = Decimal('150.0')
LON_HARMONIC_PI_30 = Decimal('300.0')

# 緯度多項式：常數項、x 係數、y 係數、y² 係數、xy 係數、√|x| 係數
LAT_CONSTANT = Decimal('-100.0')
LAT_X_WEIGHT = Decimal('2.0')
LAT_Y_WEIGHT = Decimal('3.0')
LAT_YY_WEIGHT = Decimal('0.2')
LAT_XY_WEIGHT = Decimal('0.1')
LAT_SQRT_WEIGHT = Decimal('0.2')

# 緯度諧波：sin(6πx)、sin(2πx) / sin(πy)、sin(πy/3) / sin(πy/12)、sin(πy/30)
LAT_HARMONIC_6PI = Decimal('20.0')
LAT_HARMONIC_2PI = Decimal('20.0')
LAT_HARMONIC_PI = Decimal('20.0')
LAT_HARMONIC_PI_3 = Decimal('40.0')
LAT_HARMONIC_PI_12 = Decimal('160.0')
LAT_HARMONIC_PI_30 = Decimal('320.0')

# 每組諧波乘以 2 後除以 3
HARMONIC_SCALE_NUMERATOR = Decimal('2.0')
HARMONIC_SCALE_DENOMINATOR = Decimal('3.0')


# ==========================================
# 多邊形判斷容差
# ==========================================
ON_SEGMENT_TOLERANCE = 1e-9       # 叉積接近 0 的判定
DEGENERATE_EDGE_TOLERANCE = 1e-12  # 零長度邊的端點比較
HORIZONTAL_EDGE_TOLERANCE = 1e-12  # 近水平邊跳過
