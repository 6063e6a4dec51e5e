# src/beaconzone/core/errors.py
"""
BeaconZone 的例外類別階層。
入口點只需攔截 BeaconZoneError 即可處理所有預期內的失敗。
"""


class BeaconZoneError(Exception):
    """所有 BeaconZone 預期錯誤的基底類別。"""


class PuzzleInputError(BeaconZoneError):
    """謎題輸入檔不存在或無法讀取。"""


class ConfigError(BeaconZoneError):
    """設定檔存在，但內容無法解析或數值型別不正確。"""
