"""
Option list helpers for selects and sets.
"""
from __future__ import annotations

from dataclasses import dataclass

import pytest

from backend.formation.options import (
    countries,
    number_options,
    offset_options,
    prep_options,
    provinces,
    simple_options,
    states,
    times,
)


def test_prep_options_from_records():
    @dataclass
    class Plan:
        id: int
        name: str

    rows = [{"id": 1, "name": "Basic"}, {"id": 2}, Plan(3, "Team")]
    assert prep_options(rows, ("id", "name")) == {1: "Basic", 3: "Team"}
    assert prep_options(rows, "id") == {1: 1, 2: 2, 3: 3}
    assert prep_options(rows, ()) == {}


def test_simple_and_offset_options():
    assert simple_options(["red", "blue"]) == {"red": "red", "blue": "blue"}
    assert offset_options(["red", "blue"]) == {1: "red", 2: "blue"}


def test_number_options_count_up_and_down():
    assert list(number_options(1, 3)) == [1, 2, 3]
    assert list(number_options(3, 1)) == [3, 2, 1]


def test_number_options_with_decimals():
    assert list(number_options(0, 1, 0.25, 2)) == ["0.00", "0.25", "0.50", "0.75", "1.00"]


def test_number_options_rejects_non_positive_increment():
    with pytest.raises(ValueError):
        number_options(1, 5, 0)


def test_region_lists():
    assert states()["CA"] == "California"
    assert states(False)[0] == "Alabama"
    assert provinces()["QC"] == "Quebec"
    assert "Ontario" in provinces(False)
    assert countries()[:2] == ["Canada", "United States"]


def test_times_in_twelve_hour_display():
    half = times()
    assert len(half) == 48
    assert half["00:00:00"] == "12:00am"
    assert half["12:00:00"] == "12:00pm"
    assert half["13:30:00"] == "01:30pm"
    assert len(times("quarter")) == 96
    assert len(times("all")) == 24 * 60
    assert len(times("whenever")) == 24
