# src/beaconzone/utils/geometry_utils.py
"""
提供整數平面上的點、曼哈頓距離與閉區間合併等幾何工具。
"""

# 1. 標準庫導入
from collections.abc import Iterable
from typing import NamedTuple

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

Interval = tuple[int, int]


class Point(NamedTuple):
    """整數平面上的一個點。"""

    x: int
    y: int


def taxicab_distance(p: Point, q: Point) -> int:
    """計算兩點之間的曼哈頓 (taxicab) 距離。"""
    return abs(p.x - q.x) + abs(p.y - q.y)


def merge_intervals(intervals: Iterable[Interval]) -> list[Interval]:
    """
    合併一組整數閉區間。

    重疊或相鄰 (例如 (1, 3) 與 (4, 6)) 的區間會被合併為一個，
    輸入不需事先排序。

    Args:
        intervals: 由 (start, end) 組成的可迭代物件，start <= end。

    Returns:
        依起點排序、互不相交且互不相鄰的區間列表。
    """
    merged: list[Interval] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1] + 1:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def interval_length(interval: Interval) -> int:
    """回傳閉區間內的整數個數。"""
    start, end = interval
    return end - start + 1
