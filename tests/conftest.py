"""
Pytest configuration and shared fixtures.

Includes:
- Syspath patching so the package imports without installing it.
- A 3x3 editor with deterministic item ids.
- A 300x300 canvas rect (100px cells) and a helper for cell centers.
"""

import itertools
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from grid_generator.editor import CanvasRect, GridConfig, GridEditor, GridItem  # noqa: E402

CELL_PX = 100


@pytest.fixture
def rect():
    return CanvasRect(0, 0, 3 * CELL_PX, 3 * CELL_PX)


def center(col, row):
    """Pixel position of the middle of a cell on the 100px fixture canvas."""
    return (col - 0.5) * CELL_PX, (row - 0.5) * CELL_PX


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def editor(id_factory):
    return GridEditor(GridConfig(columns=3, rows=3), id_factory=id_factory)


def make_item(item_id, col_start, col_end, row_start, row_end, label=None):
    return GridItem(item_id, col_start, col_end, row_start, row_end, label or item_id)
