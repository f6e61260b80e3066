"""
geodatum - 命令列入口
座標轉換與多邊形量測

使用方式:
    python -m geodatum dms encode --lat 39.9042
    python -m geodatum convert --from wgs84 --to gcj02 39.9042 116.3915
    python -m geodatum area polygon.geojson
"""

import argparse
import sys
from typing import List, Optional

from .config import init_settings
from .core.geometry.coordinate import Coordinate
from .core.geometry.dms import from_dms, to_latitude_dms, to_longitude_dms
from .core.geometry.geodesic import distance, perimeter
from .core.geometry.polygon import area, contains
from .core.geometry.transform import CoordinateType
from .utils.file_io import load_polygon
from .utils.logger import setup_logger


DATUMS = {
    'wgs84': CoordinateType.WGS_84,
    'gcj02': CoordinateType.GCJ_02,
}


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """解析命令列參數"""
    parser = argparse.ArgumentParser(
        prog='geodatum',
        description='geodatum - 地理座標轉換與多邊形量測',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='配置文件路徑 (.yaml / .json)'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='日誌等級（覆蓋配置文件）'
    )

    commands = parser.add_subparsers(dest='command', required=True)

    # 度分秒
    dms = commands.add_parser('dms', help='度分秒轉換')
    dms_commands = dms.add_subparsers(dest='dms_command', required=True)

    encode = dms_commands.add_parser('encode', help='十進位度 → 度分秒')
    axis = encode.add_mutually_exclusive_group(required=True)
    axis.add_argument('--lat', type=str, help='緯度')
    axis.add_argument('--lon', type=str, help='經度')

    decode = dms_commands.add_parser('decode', help='度分秒 → 十進位度')
    decode.add_argument('text', type=str, help='度分秒字串，例如 39°54\'15.12"N')

    # 大地基準轉換
    convert = commands.add_parser('convert', help='WGS-84 / GCJ-02 轉換')
    convert.add_argument('--from', dest='source', choices=sorted(DATUMS), required=True)
    convert.add_argument('--to', dest='target', choices=sorted(DATUMS), required=True)
    convert.add_argument('lat', type=str)
    convert.add_argument('lon', type=str)

    # 距離
    dist = commands.add_parser('distance', help='兩點大地線距離（公尺）')
    for name in ('lat1', 'lon1', 'lat2', 'lon2'):
        dist.add_argument(name, type=str)

    # 多邊形
    for name, text in (('perimeter', '多邊形周長（公尺）'), ('area', '多邊形面積（平方公尺）')):
        sub = commands.add_parser(name, help=text)
        sub.add_argument('file', type=str, help='多邊形文件 (.geojson / .json / .yaml)')

    inside = commands.add_parser('contains', help='點是否在多邊形內')
    inside.add_argument('lat', type=str)
    inside.add_argument('lon', type=str)
    inside.add_argument('file', type=str, help='多邊形文件 (.geojson / .json / .yaml)')

    return parser.parse_args(argv)


def initialize_system(args: argparse.Namespace):
    """初始化日誌與配置"""
    settings = init_settings(args.config)

    level = args.log_level or settings.log.level
    logger = setup_logger(
        level=level,
        log_dir=settings.log.log_dir,
        log_to_file=settings.log.log_to_file,
        log_to_console=True
    )
    logger.debug(f"配置文件: {args.config or '使用預設配置'}")
    return logger, settings


def run_command(args: argparse.Namespace, settings) -> str:
    """執行子命令並返回輸出文字"""
    datum_context = settings.datum_context()
    aggregate_context = settings.aggregate_context()

    if args.command == 'dms':
        if args.dms_command == 'encode':
            if args.lat is not None:
                result = to_latitude_dms(args.lat, datum_context)
            else:
                result = to_longitude_dms(args.lon, datum_context)
            if result is None:
                raise ValueError("座標超出範圍")
            return result
        value = from_dms(args.text, datum_context)
        if value is None:
            raise ValueError("度分秒字串為空")
        return str(value)

    if args.command == 'convert':
        source = DATUMS[args.source]
        result = source.convert(Coordinate(args.lat, args.lon), DATUMS[args.target], datum_context)
        return f"{result.latitude},{result.longitude}"

    if args.command == 'distance':
        meters = distance(Coordinate(args.lat1, args.lon1), Coordinate(args.lat2, args.lon2))
        return f"{meters:.3f}"

    if args.command == 'perimeter':
        return str(perimeter(load_polygon(args.file), context=aggregate_context))

    if args.command == 'area':
        return str(area(load_polygon(args.file), context=aggregate_context))

    if args.command == 'contains':
        point = Coordinate(args.lat, args.lon)
        return 'true' if contains(point, load_polygon(args.file)) else 'false'

    raise ValueError(f"未知的命令: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """主函數"""
    args = parse_arguments(argv)

    try:
        logger, settings = initialize_system(args)
    except ValueError as e:
        print(f"初始化失敗: {e}", file=sys.stderr)
        return 2

    try:
        output = run_command(args, settings)
    except ValueError as e:
        logger.error(str(e))
        return 2

    print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
