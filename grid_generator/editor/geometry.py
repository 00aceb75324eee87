"""
Grid geometry: pointer <-> cell mapping, occupancy and bounds tests.

Everything here is a pure function of a grid size and an item list.
Item lookups use first-match semantics: when items overlap (which the
editor never produces, but a shell may hand us), the earlier item in
list order wins.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

import numpy as np

from .data_model import CanvasRect, CellCoord, GridItem, GridSpan

EMPTY_CELL = -1


def cell_from_point(x: float, y: float, rect: CanvasRect,
                    columns: int, rows: int) -> Optional[CellCoord]:
    """Convert a pointer position to the cell under it.

    Args:
        x, y: Pointer position in the same space as rect
        rect: Canvas bounding rectangle
        columns, rows: Grid size

    Returns:
        1-based cell, or None if the pointer is outside the grid.
    """
    if rect.width <= 0 or rect.height <= 0 or columns < 1 or rows < 1:
        return None

    cell_width = rect.width / columns
    cell_height = rect.height / rows

    col = math.floor((x - rect.left) / cell_width) + 1
    row = math.floor((y - rect.top) / cell_height) + 1

    if col < 1 or col > columns or row < 1 or row > rows:
        return None
    return CellCoord(col, row)


def item_at_cell(col: int, row: int, items: Sequence[GridItem],
                 exclude_id: Optional[str] = None) -> Optional[GridItem]:
    """Return the first item covering (col, row), skipping exclude_id."""
    for item in items:
        if exclude_id is not None and item.id == exclude_id:
            continue
        if item.span.covers(col, row):
            return item
    return None


def is_cell_occupied(col: int, row: int, items: Sequence[GridItem]) -> bool:
    return item_at_cell(col, row, items) is not None


def is_area_valid(col_start: int, col_end: int, row_start: int, row_end: int,
                  columns: int, rows: int) -> bool:
    """Bounds check only; overlap is not considered."""
    return (col_start >= 1 and col_end <= columns + 1 and
            row_start >= 1 and row_end <= rows + 1)


def is_span_valid(span: GridSpan, columns: int, rows: int) -> bool:
    return is_area_valid(span.column_start, span.column_end,
                         span.row_start, span.row_end, columns, rows)


def occupancy_map(items: Sequence[GridItem], columns: int, rows: int,
                  exclude_id: Optional[str] = None) -> np.ndarray:
    """Build a rows x columns map of item indices.

    Each cell holds the list index of the first item covering it, or
    EMPTY_CELL. Spans reaching outside the grid are clipped.
    """
    grid = np.full((max(rows, 0), max(columns, 0)), EMPTY_CELL, dtype=np.int32)

    # Paint in reverse so earlier items overwrite later ones (first match wins)
    for index in range(len(items) - 1, -1, -1):
        item = items[index]
        if exclude_id is not None and item.id == exclude_id:
            continue
        c0 = max(item.column_start, 1) - 1
        c1 = min(item.column_end, columns + 1) - 1
        r0 = max(item.row_start, 1) - 1
        r1 = min(item.row_end, rows + 1) - 1
        if c0 >= c1 or r0 >= r1:
            continue
        grid[r0:r1, c0:c1] = index

    return grid


def covered_items(span: GridSpan, items: Sequence[GridItem], columns: int, rows: int,
                  exclude_id: Optional[str] = None) -> List[GridItem]:
    """Distinct items whose cells fall inside span.

    Cells are scanned column by column, top to bottom within a column, and
    items are returned in order of first encounter.
    """
    grid = occupancy_map(items, columns, rows, exclude_id)

    c0 = max(span.column_start, 1) - 1
    c1 = min(span.column_end, columns + 1) - 1
    r0 = max(span.row_start, 1) - 1
    r1 = min(span.row_end, rows + 1) - 1
    if c0 >= c1 or r0 >= r1:
        return []

    # Transpose so ravel() walks columns first
    window = grid[r0:r1, c0:c1].T.ravel()
    hits = window[window != EMPTY_CELL]
    if hits.size == 0:
        return []

    _, first_seen = np.unique(hits, return_index=True)
    ordered = hits[np.sort(first_seen)]
    return [items[int(i)] for i in ordered]


def clamp(value: int, low: int, high: int) -> int:
    """Clamp with the lower bound winning when low > high."""
    return max(low, min(value, high))
