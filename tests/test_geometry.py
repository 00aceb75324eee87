"""
Tests for grid geometry: pointer mapping, lookups, bounds and occupancy.
"""

import numpy as np

from grid_generator.editor import CanvasRect, CellCoord, GridSpan
from grid_generator.editor.geometry import (
    EMPTY_CELL, cell_from_point, clamp, covered_items, is_area_valid,
    is_cell_occupied, item_at_cell, occupancy_map,
)

from conftest import make_item


def test_cell_from_point_maps_by_floor_division():
    """
    Scenario: 300x300 canvas, 3x3 grid, 100px cells.
    Expectation: points map to the cell containing them, edges belong to the next cell.
    """
    rect = CanvasRect(0, 0, 300, 300)
    assert cell_from_point(0, 0, rect, 3, 3) == CellCoord(1, 1)
    assert cell_from_point(99.9, 150, rect, 3, 3) == CellCoord(1, 2)
    assert cell_from_point(100, 100, rect, 3, 3) == CellCoord(2, 2)
    assert cell_from_point(299, 299, rect, 3, 3) == CellCoord(3, 3)


def test_cell_from_point_respects_rect_offset():
    rect = CanvasRect(16, 16, 300, 150)
    assert cell_from_point(16, 16, rect, 3, 3) == CellCoord(1, 1)
    assert cell_from_point(216, 116, rect, 3, 3) == CellCoord(3, 3)


def test_cell_from_point_outside_returns_none():
    rect = CanvasRect(0, 0, 300, 300)
    assert cell_from_point(-1, 50, rect, 3, 3) is None
    assert cell_from_point(50, -0.5, rect, 3, 3) is None
    assert cell_from_point(300, 50, rect, 3, 3) is None
    assert cell_from_point(50, 301, rect, 3, 3) is None


def test_cell_from_point_degenerate_rect():
    assert cell_from_point(0, 0, CanvasRect(0, 0, 0, 100), 3, 3) is None


def test_item_at_cell_first_match_wins():
    """
    Scenario: two overlapping items (not producible by the editor).
    Expectation: the earlier item in list order is returned.
    """
    first = make_item("a", 1, 3, 1, 2)
    second = make_item("b", 2, 4, 1, 2)
    items = [first, second]

    assert item_at_cell(2, 1, items) is first
    assert item_at_cell(3, 1, items) is second
    assert item_at_cell(2, 1, items, exclude_id="a") is second
    assert item_at_cell(1, 2, items) is None


def test_half_open_span_end_lines_are_exclusive():
    item = make_item("a", 1, 3, 1, 2)
    assert is_cell_occupied(2, 1, [item])
    assert not is_cell_occupied(3, 1, [item])
    assert not is_cell_occupied(1, 2, [item])


def test_is_area_valid_is_bounds_only():
    assert is_area_valid(1, 4, 1, 4, 3, 3)
    assert not is_area_valid(0, 2, 1, 2, 3, 3)
    assert not is_area_valid(1, 5, 1, 2, 3, 3)
    assert not is_area_valid(1, 2, 2, 5, 3, 3)


def test_occupancy_map_marks_first_item_index():
    items = [make_item("a", 1, 3, 1, 2), make_item("b", 2, 3, 1, 3)]
    grid = occupancy_map(items, 3, 3)

    assert grid.shape == (3, 3)
    assert grid.dtype == np.int32
    assert grid[0].tolist() == [0, 0, EMPTY_CELL]
    assert grid[1].tolist() == [EMPTY_CELL, 1, EMPTY_CELL]
    assert (grid[2] == EMPTY_CELL).all()


def test_occupancy_map_clips_out_of_bounds_spans():
    items = [make_item("a", 3, 6, 3, 5)]
    grid = occupancy_map(items, 3, 3)
    assert grid[2, 2] == 0
    assert (grid != EMPTY_CELL).sum() == 1


def test_covered_items_scans_column_major():
    """
    Scenario: target span covers a 2x2 block with item B at (2,1) and A at (1,2).
    Expectation: A is found first because column 1 is scanned before column 2.
    """
    a = make_item("a", 1, 2, 2, 3)
    b = make_item("b", 2, 3, 1, 2)
    found = covered_items(GridSpan(1, 3, 1, 3), [b, a], 3, 3)
    assert [i.id for i in found] == ["a", "b"]


def test_covered_items_distinct_and_excluding():
    wide = make_item("wide", 1, 3, 1, 3)
    found = covered_items(GridSpan(1, 4, 1, 4), [wide], 3, 3)
    assert found == [wide]
    assert covered_items(GridSpan(1, 4, 1, 4), [wide], 3, 3, exclude_id="wide") == []


def test_clamp_lower_bound_wins():
    assert clamp(5, 1, 3) == 3
    assert clamp(-2, 1, 3) == 1
    assert clamp(2, 1, 3) == 2
    # Item wider than the grid: high < low
    assert clamp(2, 1, 0) == 1


def test_span_cells_are_column_major():
    cells = list(GridSpan(1, 3, 1, 3).cells())
    assert cells == [CellCoord(1, 1), CellCoord(1, 2), CellCoord(2, 1), CellCoord(2, 2)]
