"""Day x hour heat-map intensity mapping."""
import random

from analytics_viewer.services.heatmap_service import (
    HEATMAP_DAYS, LIGHT_TEXT_THRESHOLD, build_heatmap, intensity_for
)


def test_sparse_table_produces_full_grid():
    grid = build_heatmap({"Mon": {9: 5, 14: 10}})

    assert len(grid.cells) == 168
    assert [row.day for row in grid.rows] == list(HEATMAP_DAYS)
    assert grid.hours == list(range(24))
    assert grid.max_value == 10

    assert grid.cell("Mon", 14).intensity == 1.0
    assert grid.cell("Mon", 9).intensity == 0.5
    others = [c for c in grid.cells if not (c.day == "Mon" and c.hour in (9, 14))]
    assert len(others) == 166
    assert all(c.intensity == 0 and c.value == 0 for c in others)


def test_empty_table_still_has_168_cells():
    grid = build_heatmap({})
    assert len(grid.cells) == 168
    assert grid.max_value == 0
    assert all(c.intensity == 0 for c in grid.cells)


def test_string_hour_keys_and_null_values():
    grid = build_heatmap({"Sun": {"0": 2.0, "23": None}, "Sat": {"12": 4.0}})
    assert grid.cell("Sun", 0).intensity == 0.5
    assert grid.cell("Sun", 23).value == 0
    assert grid.cell("Sat", 12).intensity == 1.0


def test_colors_and_text_threshold():
    grid = build_heatmap({"Mon": {9: 5, 14: 10}})
    peak = grid.cell("Mon", 14)
    half = grid.cell("Mon", 9)
    empty = grid.cell("Tue", 0)

    assert peak.background_color == "rgba(76, 175, 80, 1)"
    assert peak.text_color == "white"
    assert half.background_color == "rgba(76, 175, 80, 0.5)"
    assert half.text_color == "black"
    assert empty.background_color == "rgba(76, 175, 80, 0)"
    assert peak.tooltip == "10 kWh"


def test_text_turns_light_only_above_threshold():
    grid = build_heatmap({"Wed": {1: 6, 2: 6.5, 3: 10}})
    assert LIGHT_TEXT_THRESHOLD == 0.6
    assert grid.cell("Wed", 1).text_color == "black"
    assert grid.cell("Wed", 2).text_color == "white"


def test_intensity_is_monotonic_for_fixed_maximum():
    rng = random.Random(7)
    values = sorted(rng.uniform(0, 100) for _ in range(200))
    intensities = [intensity_for(v, 100.0) for v in values]
    assert intensities == sorted(intensities)
    assert intensity_for(5, 0) == 0


def test_days_outside_grid_still_count_for_maximum():
    grid = build_heatmap({"Mon": {3: 5}, "Holiday": {3: 20}})
    assert grid.max_value == 20
    assert grid.cell("Mon", 3).intensity == 0.25
    assert len(grid.cells) == 168
