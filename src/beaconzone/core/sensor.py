# src/beaconzone/core/sensor.py
"""
感測器資料模型。
"""

# 1. 標準庫導入
from dataclasses import dataclass, field

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from beaconzone.utils.geometry_utils import Interval, Point, taxicab_distance


@dataclass(frozen=True)
class Sensor:
    """
    一個感測器及其回報的最近信標。

    distance 在建構時由兩點的曼哈頓距離算出，
    距離內 (含邊界) 的所有點都不可能存在其他信標。
    """

    location: Point
    closest: Point
    distance: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "distance", taxicab_distance(self.location, self.closest))

    def impossible_location(self, p: Point) -> bool:
        """判斷點 p 是否落在此感測器的排除區內。"""
        return taxicab_distance(self.location, p) <= self.distance

    def coverage_on_row(self, row: int) -> Interval | None:
        """
        計算排除區 (菱形) 與指定橫列相交的 x 閉區間。

        若該列超出感測器的距離範圍，回傳 None。
        """
        half_width = self.distance - abs(self.location.y - row)
        if half_width < 0:
            return None
        return self.location.x - half_width, self.location.x + half_width
