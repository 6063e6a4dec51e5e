# src/beaconzone/__main__.py
"""
BeaconZone 主執行入口。
"""

# 1. 標準庫導入
import argparse
import logging
import sys
from pathlib import Path

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from beaconzone.core.config_loader import ConfigLoader
from beaconzone.core.errors import BeaconZoneError
from beaconzone.core.puzzle_runner import PuzzleRunner
from beaconzone.utils.logging_utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """建立命令列參數解析器。"""
    parser = argparse.ArgumentParser(prog="beaconzone", description="Beacon Exclusion Zone")
    parser.add_argument(
        "-p",
        "--puzzle-input",
        action="store_true",
        help="使用謎題輸入檔，而非內建範例",
    )
    parser.add_argument(
        "-r",
        "--row",
        type=int,
        default=None,
        help="要分析的橫列 (預設取自設定檔，否則為 10)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="設定檔路徑 (預設為專案根目錄下的 configs/beaconzone.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="輸出 DEBUG 層級日誌",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """主函式，解析參數與設定後執行求解流程，回傳程序結束碼。"""
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config_loader = ConfigLoader(args.config)
        if not args.verbose:
            configure_logging(config_loader.log_level)

        row = args.row if args.row is not None else config_loader.row
        runner = PuzzleRunner(
            puzzle_input=args.puzzle_input,
            row=row,
            input_path=config_loader.input_path,
        )
        count = runner.run()
    except BeaconZoneError as e:
        logging.error(f"執行失敗: {e}")
        return 1
    except Exception as e:
        logging.error(f"執行時發生未預期的嚴重錯誤: {e}", exc_info=True)
        return 1

    print(f"impossible_locations = {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
