"""Command-line entry point — flags, output and exit codes."""

import pytest

from beaconzone.__main__ import build_parser, main
from beaconzone.core.puzzle_inputs import SAMPLE


@pytest.fixture
def default_config(write_config):
    return write_config("puzzle:\n  row: 10\n")


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.puzzle_input is False
    assert args.row is None
    assert args.config is None
    assert args.verbose is False


def test_parser_short_flags():
    args = build_parser().parse_args(["-p", "-r", "2000000", "-v"])
    assert args.puzzle_input is True
    assert args.row == 2000000
    assert args.verbose is True


def test_sample_run_prints_count(default_config, capsys):
    assert main(["-c", str(default_config)]) == 0
    assert capsys.readouterr().out.strip() == "impossible_locations = 26"


def test_row_flag_overrides_config(write_config, capsys):
    config = write_config("puzzle:\n  row: 10\n")
    assert main(["-c", str(config), "--row", "100"]) == 0
    assert capsys.readouterr().out.strip() == "impossible_locations = 0"


def test_row_from_config(write_config, capsys):
    config = write_config("puzzle:\n  row: 100\n")
    assert main(["--config", str(config)]) == 0
    assert capsys.readouterr().out.strip() == "impossible_locations = 0"


def test_puzzle_input_from_configured_path(write_config, tmp_path, capsys):
    (tmp_path / "day15.txt").write_text(SAMPLE, encoding="utf-8")
    config = write_config("puzzle:\n  row: 10\n  input_path: day15.txt\n")
    assert main(["-c", str(config), "--puzzle-input"]) == 0
    assert capsys.readouterr().out.strip() == "impossible_locations = 26"


def test_missing_puzzle_input_exits_with_error(write_config, capsys):
    config = write_config("puzzle:\n  input_path: missing.txt\n")
    assert main(["-c", str(config), "-p"]) == 1
    assert capsys.readouterr().out == ""


def test_bad_config_exits_with_error(write_config, capsys):
    config = write_config("puzzle:\n  row: ten\n")
    assert main(["-c", str(config)]) == 1
    assert capsys.readouterr().out == ""


def test_missing_packaged_input_exits_with_error(default_config, packaged_root, capsys):
    assert main(["-c", str(default_config), "-p"]) == 1
    assert capsys.readouterr().out == ""


def test_packaged_input_run(default_config, packaged_root, capsys):
    (packaged_root / "data" / "day15.txt").write_text(SAMPLE, encoding="utf-8")
    assert main(["-c", str(default_config), "-p"]) == 0
    assert capsys.readouterr().out.strip() == "impossible_locations = 26"
