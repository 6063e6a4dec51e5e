# src/beaconzone/parsers/sensor_parser.py
"""
將謎題輸入文字解析為感測器列表。
"""

# 1. 標準庫導入
import logging
import re

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from beaconzone.core.sensor import Sensor
from beaconzone.utils.geometry_utils import Point

SENSOR_PATTERN = re.compile(
    r"Sensor at x=(-?\d+),\s+y=(-?\d+):\s+closest beacon is at x=(-?\d+),\s+y=(-?\d+)"
)


def _point_from_strings(x: str, y: str) -> Point:
    return Point(int(x), int(y))


def _log_skipped(fragment: str):
    """以 DEBUG 層級記錄兩筆記錄之間被略過的非空白內容。"""
    if fragment.strip():
        logging.debug(f"略過不符合感測器格式的內容: {fragment.strip()!r}")


def parse(text: str) -> list[Sensor]:
    """
    在整段輸入文字上比對，依出現順序回傳所有感測器。

    比對不以行為單位，跨越換行的記錄 (例如在逗號後斷行) 同樣會被解析；
    記錄之間不符合格式的內容會被略過，僅以 DEBUG 層級記錄。
    """
    sensors: list[Sensor] = []
    position = 0
    for match in SENSOR_PATTERN.finditer(text):
        _log_skipped(text[position:match.start()])
        sensors.append(
            Sensor(
                location=_point_from_strings(match[1], match[2]),
                closest=_point_from_strings(match[3], match[4]),
            )
        )
        position = match.end()
    _log_skipped(text[position:])

    logging.debug(f"解析完成，共 {len(sensors)} 個感測器。")
    return sensors
