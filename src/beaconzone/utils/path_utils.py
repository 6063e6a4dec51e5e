# src/beaconzone/utils/path_utils.py
"""
定位 BeaconZone 專案根目錄，供設定載入器尋找 configs/beaconzone.yaml。
"""

# 1. 標準庫導入
import importlib.resources
from pathlib import Path

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)


def _walk_up(start: Path, marker: str) -> Path | None:
    for candidate in (start, *start.parents):
        if (candidate / marker).exists():
            return candidate
    return None


def find_project_root(marker: str = "pyproject.toml") -> Path:
    """
    回傳含有標記檔案的 BeaconZone 專案根目錄，其下的 configs/ 存放預設設定檔。

    先從已安裝套件的位置向上尋找 (以可編輯模式安裝時即為原始碼樹)，
    再從當前工作目錄向上尋找。以一般模式安裝時通常兩者皆找不到，
    此時由呼叫端改用內建預設設定。

    Raises:
        FileNotFoundError: 兩個起點都找不到標記檔案。
    """
    try:
        anchor = Path(str(importlib.resources.files("beaconzone")))
    except ModuleNotFoundError:
        anchor = Path(__file__).resolve().parent.parent

    for start in (anchor, Path.cwd()):
        root = _walk_up(start, marker)
        if root is not None:
            return root

    raise FileNotFoundError(
        f"找不到含有 '{marker}' 的專案根目錄 (起點: '{anchor}' 與當前工作目錄)，無法定位 configs/beaconzone.yaml"
    )
