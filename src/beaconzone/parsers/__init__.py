# src/beaconzone/parsers/__init__.py
"""
解析器套件，負責將謎題輸入文字轉換為結構化資料。
"""

from .sensor_parser import SENSOR_PATTERN, parse

__all__ = [
    "SENSOR_PATTERN",
    "parse",
]
