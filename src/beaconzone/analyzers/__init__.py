# src/beaconzone/analyzers/__init__.py
"""
分析器套件，負責在解析後的感測器資料上求解謎題。
"""

from .exclusion_analyzer import (
    beacons_on_row,
    count_impossible_locations,
    excluded_intervals,
    impossible_locations,
)

__all__ = [
    "beacons_on_row",
    "count_impossible_locations",
    "excluded_intervals",
    "impossible_locations",
]
