# src/beaconzone/core/puzzle_inputs.py
"""
管理兩種輸入來源：內建的範例文字，以及隨套件發佈的謎題輸入檔。
"""

# 1. 標準庫導入
import importlib.resources
import logging
from pathlib import Path

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from beaconzone.core.errors import PuzzleInputError

PUZZLE_INPUT_FILENAME = "day15.txt"

SAMPLE = """Sensor at x=2, y=18: closest beacon is at x=-2, y=15
Sensor at x=9, y=16: closest beacon is at x=10, y=16
Sensor at x=13, y=2: closest beacon is at x=15, y=3
Sensor at x=12, y=14: closest beacon is at x=10, y=16
Sensor at x=10, y=20: closest beacon is at x=10, y=16
Sensor at x=14, y=17: closest beacon is at x=10, y=16
Sensor at x=8, y=7: closest beacon is at x=2, y=10
Sensor at x=2, y=0: closest beacon is at x=2, y=10
Sensor at x=0, y=11: closest beacon is at x=2, y=10
Sensor at x=20, y=14: closest beacon is at x=25, y=17
Sensor at x=17, y=20: closest beacon is at x=21, y=22
Sensor at x=16, y=7: closest beacon is at x=15, y=3
Sensor at x=14, y=3: closest beacon is at x=15, y=3
Sensor at x=20, y=1: closest beacon is at x=15, y=3"""


def load_puzzle_input(path: Path | None = None) -> str:
    """
    讀取謎題輸入。

    Args:
        path: 指定的輸入檔路徑；為 None 時讀取套件 data 目錄中的 day15.txt。

    Returns:
        輸入檔的完整文字內容。

    Raises:
        PuzzleInputError: 檔案不存在或無法讀取。
    """
    if path is None:
        resource = importlib.resources.files("beaconzone") / "data" / PUZZLE_INPUT_FILENAME
        source_name = f"beaconzone/data/{PUZZLE_INPUT_FILENAME}"
    else:
        resource = path
        source_name = str(path)

    if not resource.is_file():
        raise PuzzleInputError(f"找不到謎題輸入檔: {source_name}")

    try:
        text = resource.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PuzzleInputError(f"讀取謎題輸入檔 '{source_name}' 時發生錯誤: {e}") from e

    logging.info(f"已載入謎題輸入: {source_name}")
    return text


def select_input(puzzle_input: bool, path: Path | None = None) -> str:
    """依旗標選擇輸入：False 使用範例文字，True 使用謎題輸入檔。"""
    if not puzzle_input:
        logging.info("使用內建範例輸入。")
        return SAMPLE
    return load_puzzle_input(path)
