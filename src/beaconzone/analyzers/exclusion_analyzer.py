# src/beaconzone/analyzers/exclusion_analyzer.py
"""
排除區分析器：計算指定橫列上不可能存在信標的位置。

以區間運算取代逐點掃描，正式謎題中單列可能有數百萬個位置，
計數時不需要把它們一一列舉出來。
"""

# 1. 標準庫導入
import logging

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from beaconzone.core.sensor import Sensor
from beaconzone.utils.geometry_utils import Interval, Point, interval_length, merge_intervals


def excluded_intervals(row: int, sensors: list[Sensor]) -> list[Interval]:
    """回傳所有感測器在該列上排除區的聯集 (已合併的閉區間)。"""
    coverages = [coverage for sensor in sensors if (coverage := sensor.coverage_on_row(row)) is not None]
    return merge_intervals(coverages)


def beacons_on_row(row: int, sensors: list[Sensor]) -> set[int]:
    """回傳已知信標中位於該列者的 x 座標。"""
    return {sensor.closest.x for sensor in sensors if sensor.closest.y == row}


def _is_covered(x: int, intervals: list[Interval]) -> bool:
    return any(start <= x <= end for start, end in intervals)


def count_impossible_locations(row: int, sensors: list[Sensor]) -> int:
    """
    計算該列上不可能存在信標的位置數量。

    數量等於排除區聯集的長度，扣除恰好位於該列且落在排除區內的已知信標。
    """
    intervals = excluded_intervals(row, sensors)
    beacons = beacons_on_row(row, sensors)
    logging.debug(f"第 {row} 列的排除區間: {intervals}")
    logging.debug(f"第 {row} 列的已知信標: {sorted(beacons)}")

    covered = sum(interval_length(interval) for interval in intervals)
    occupied = sum(1 for x in beacons if _is_covered(x, intervals))
    return covered - occupied


def impossible_locations(row: int, sensors: list[Sensor]) -> list[Point]:
    """
    依 x 由小到大列出該列上所有不可能存在信標的點。

    會實際展開每個位置，適合範例輸入或除錯使用。
    """
    intervals = excluded_intervals(row, sensors)
    beacons = beacons_on_row(row, sensors)
    return [
        Point(x, row)
        for start, end in intervals
        for x in range(start, end + 1)
        if x not in beacons
    ]
