"""Exclusion analyzer — positions on a row where no beacon can be.

Tests:
    - Sample row 10 has 26 impossible positions (part one)
    - Counting by intervals agrees with enumerating points
    - Known beacons on the row are not counted
    - Part two is not implemented
"""

import pytest

from beaconzone.analyzers.exclusion_analyzer import (
    beacons_on_row,
    count_impossible_locations,
    excluded_intervals,
    impossible_locations,
)
from beaconzone.utils.geometry_utils import Point


def test_part_1(sample_sensors):
    assert count_impossible_locations(10, sample_sensors) == 26
    assert len(impossible_locations(10, sample_sensors)) == 26


def test_sample_row_10_intervals(sample_sensors):
    assert excluded_intervals(10, sample_sensors) == [(-2, 24)]
    assert beacons_on_row(10, sample_sensors) == {2}


def test_impossible_locations_are_sorted_and_skip_beacons(sample_sensors):
    locations = impossible_locations(10, sample_sensors)
    xs = [p.x for p in locations]
    assert xs == sorted(xs)
    assert Point(2, 10) not in locations
    assert locations[0] == Point(-2, 10)
    assert locations[-1] == Point(24, 10)


@pytest.mark.parametrize(
    ("row", "expected"),
    [
        (7, 19),
        (10, 12),
        (16, 1),
        (17, 0),
    ],
)
def test_single_sensor_rows(lone_sensor, row, expected):
    assert count_impossible_locations(row, [lone_sensor]) == expected
    assert len(impossible_locations(row, [lone_sensor])) == expected


@pytest.mark.parametrize("row", range(-5, 30))
def test_count_matches_enumeration(sample_sensors, row):
    assert count_impossible_locations(row, sample_sensors) == len(impossible_locations(row, sample_sensors))


def test_no_sensors():
    assert count_impossible_locations(10, []) == 0
    assert impossible_locations(10, []) == []


@pytest.mark.skip(reason="part two (uncovered position search) is not implemented")
def test_part_2(sample_sensors):
    pass
