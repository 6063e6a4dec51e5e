# src/beaconzone/core/config_loader.py
"""
負責載入、合併與驗證 BeaconZone 的設定。
"""

# 1. 標準庫導入
import copy
import logging
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import yaml

# 3. 本專案導入
from beaconzone.core.errors import ConfigError
from beaconzone.utils.path_utils import find_project_root

DEFAULT_CONFIG_RELATIVE_PATH = Path("configs") / "beaconzone.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "puzzle": {
        "row": 10,
        "input_path": None,
    },
    "logging": {
        "level": "INFO",
    },
}

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigLoader:
    """一個處理設定檔載入、與預設值合併及型別驗證的類別。"""

    def __init__(self, config_path: Path | None = None):
        self.explicit = config_path is not None
        self.config_path = config_path if config_path is not None else self._default_config_path()
        user_config = self._load_yaml(self.config_path) if self.config_path else {}
        self.config = self._merge_configs(copy.deepcopy(DEFAULT_CONFIG), user_config)
        self._validate()

    @staticmethod
    def _default_config_path() -> Path | None:
        """在專案根目錄下尋找預設設定檔路徑。"""
        try:
            return find_project_root() / DEFAULT_CONFIG_RELATIVE_PATH
        except FileNotFoundError as e:
            logging.debug(f"無法定位專案根目錄，將使用預設設定: {e}")
            return None

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """安全地載入一個 YAML 檔案；檔案不存在時回傳空字典。"""
        if not path.is_file():
            message = f"設定檔不存在，將使用預設設定: {path}"
            if self.explicit:
                logging.warning(message)
            else:
                logging.debug(message)
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"解析設定檔 '{path.name}' 時發生錯誤: {e}") from e
        except OSError as e:
            raise ConfigError(f"讀取設定檔 '{path}' 時發生錯誤: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"設定檔 '{path.name}' 的頂層必須是映射 (mapping)。")
        logging.debug(f"已載入設定檔: {path}")
        return data

    @staticmethod
    def _merge_configs(default: dict, user: dict) -> dict:
        """遞迴地合併使用者設定到預設設定中。"""
        for key, value in user.items():
            if isinstance(value, dict) and isinstance(default.get(key), dict):
                default[key] = ConfigLoader._merge_configs(default[key], value)
            else:
                default[key] = value
        return default

    def _validate(self):
        """檢查合併後各欄位的型別。"""
        puzzle = self.config.get("puzzle")
        logging_config = self.config.get("logging")
        if not isinstance(puzzle, dict) or not isinstance(logging_config, dict):
            raise ConfigError("設定中的 'puzzle' 與 'logging' 必須是映射 (mapping)。")

        row = puzzle.get("row")
        if isinstance(row, bool) or not isinstance(row, int):
            raise ConfigError(f"'puzzle.row' 必須是整數，實際為: {row!r}")

        input_path = puzzle.get("input_path")
        if input_path is not None and not isinstance(input_path, str):
            raise ConfigError(f"'puzzle.input_path' 必須是字串或 null，實際為: {input_path!r}")

        level = logging_config.get("level")
        if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
            raise ConfigError(f"'logging.level' 必須是 {', '.join(VALID_LOG_LEVELS)} 之一，實際為: {level!r}")

    @property
    def row(self) -> int:
        return self.config["puzzle"]["row"]

    @property
    def input_path(self) -> Path | None:
        """謎題輸入檔路徑；相對路徑以設定檔所在目錄為基準。"""
        input_path_str = self.config["puzzle"]["input_path"]
        if not input_path_str:
            return None
        input_path = Path(input_path_str)
        if not input_path.is_absolute() and self.config_path is not None:
            input_path = (self.config_path.parent / input_path).resolve()
        return input_path

    @property
    def log_level(self) -> str:
        return self.config["logging"]["level"].upper()
