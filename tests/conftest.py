"""Shared fixtures for the BeaconZone test suite."""

import importlib.resources

import pytest

from beaconzone.core.puzzle_inputs import SAMPLE
from beaconzone.core.sensor import Sensor
from beaconzone.parsers.sensor_parser import parse
from beaconzone.utils.geometry_utils import Point


@pytest.fixture
def sample_sensors() -> list[Sensor]:
    return parse(SAMPLE)


@pytest.fixture
def lone_sensor() -> Sensor:
    # distance 9 diamond centred on (8, 7)
    return Sensor(location=Point(8, 7), closest=Point(2, 10))


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config into tmp_path and return its path."""

    def _write(text: str, name: str = "beaconzone.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def packaged_root(tmp_path, monkeypatch):
    """Point the package resource root at an empty beaconzone/ dir under tmp_path."""
    root = tmp_path / "beaconzone"
    (root / "data").mkdir(parents=True)
    monkeypatch.setattr(importlib.resources, "files", lambda package: root)
    return root
