# src/beaconzone/__init__.py
"""
BeaconZone：Advent of Code「Beacon Exclusion Zone」謎題的命令列工具。
"""

__version__ = "0.1.0"
