# src/beaconzone/core/__init__.py
"""
BeaconZone 的核心套件。

此套件負責設定載入、輸入選擇與資料模型，
並將解析與分析子系統串連成完整的求解流程。
"""

from .config_loader import ConfigLoader
from .errors import BeaconZoneError, ConfigError, PuzzleInputError
from .puzzle_inputs import SAMPLE, load_puzzle_input, select_input
from .puzzle_runner import PuzzleRunner
from .sensor import Sensor

__all__ = [
    "SAMPLE",
    "BeaconZoneError",
    "ConfigError",
    "ConfigLoader",
    "PuzzleInputError",
    "PuzzleRunner",
    "Sensor",
    "load_puzzle_input",
    "select_input",
]
