# src/beaconzone/utils/__init__.py
"""
通用工具函式套件。
"""

from .geometry_utils import Interval, Point, interval_length, merge_intervals, taxicab_distance
from .logging_utils import configure_logging
from .path_utils import find_project_root

__all__ = [
    "Interval",
    "Point",
    "configure_logging",
    "find_project_root",
    "interval_length",
    "merge_intervals",
    "taxicab_distance",
]
