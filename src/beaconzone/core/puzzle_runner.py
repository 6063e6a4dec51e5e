# src/beaconzone/core/puzzle_runner.py
"""
BeaconZone 的核心處理流程：選擇輸入、解析、分析指定橫列。
"""

# 1. 標準庫導入
import logging
from pathlib import Path

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from beaconzone.analyzers.exclusion_analyzer import count_impossible_locations
from beaconzone.core.puzzle_inputs import select_input
from beaconzone.parsers.sensor_parser import parse


class PuzzleRunner:
    """一個處理單次謎題求解流程的類別。"""

    def __init__(self, puzzle_input: bool, row: int, input_path: Path | None = None):
        self.puzzle_input = puzzle_input
        self.row = row
        self.input_path = input_path

    def run(self) -> int:
        """執行完整流程，回傳該列上不可能存在信標的位置數量。"""
        text = select_input(self.puzzle_input, self.input_path)
        sensors = parse(text)
        if not sensors:
            logging.warning("輸入中沒有任何感測器記錄。")

        logging.info(f"--- 開始分析第 {self.row} 列 ({len(sensors)} 個感測器) ---")
        count = count_impossible_locations(self.row, sensors)
        logging.info(f"第 {self.row} 列共有 {count} 個位置不可能存在信標。")
        return count
