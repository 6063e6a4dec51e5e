# src/beaconzone/utils/logging_utils.py
"""
提供與日誌記錄相關的通用工具。
"""

# 1. 標準庫導入
import logging

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
CONSOLE_HANDLER_NAME = "beaconzone.console"


def configure_logging(level: int | str = logging.INFO):
    """
    設定根日誌記錄器。

    僅在根記錄器尚無處理器時加入 StreamHandler；
    每次呼叫都會更新根記錄器與此處加入的處理器的層級，其他處理器維持原狀。
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not root_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(console_handler)

    for handler in root_logger.handlers:
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            handler.setLevel(level)
