"""
Data model for the grid editor.

Defines the core data structures shared by the canvas, the interaction
state machine and the code writers:
- GridConfig: Column/row counts and gap settings
- GridSpan: Half-open range of grid lines an item occupies
- GridItem: A placed item with identity, span and label
- CellCoord: 1-based cell position (col, row)
- CanvasRect: Canvas bounding rectangle in device pixels
- CSSFormat / UIFramework: Output dialect selection
- OutputSettings: Dialect choice plus container class name

Coordinate System:
- Grid lines are 1-based, matching CSS `grid-column: 1 / 3`
- A span from line i to line j (i < j) covers cells i..j-1
- Cells are addressed by the line they start on, so cell (1, 1) is top-left

All types are frozen so snapshots handed to the shell never alias
editor state.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, Optional, Tuple


class CSSFormat(Enum):
    """Styling system the generated code targets."""
    VANILLA = "vanilla"
    BOOTSTRAP = "bootstrap"
    TAILWIND = "tailwind"

    def __str__(self) -> str:
        return self.value


class UIFramework(Enum):
    """Component library wrapper (only meaningful with TAILWIND)."""
    NONE = "none"
    SHADCN = "shadcn"
    MUI = "mui"
    CHAKRA = "chakra"
    ANTD = "antd"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CellCoord:
    """Grid cell coordinate (1-based)."""
    col: int
    row: int

    def __sub__(self, other: 'CellCoord') -> 'CellCoord':
        return CellCoord(self.col - other.col, self.row - other.row)


@dataclass(frozen=True)
class CanvasRect:
    """Canvas bounding rectangle in device pixels."""
    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True)
class GridConfig:
    """Grid structure: track counts and gaps (pixels)."""
    columns: int = 3
    rows: int = 3
    gap: float = 16
    column_gap: float = 16
    row_gap: float = 16
    use_uniform_gap: bool = True

    def with_gap(self, value: float) -> 'GridConfig':
        """Set all three gap fields at once (the shell's single gap control)."""
        return replace(self, gap=value, column_gap=value, row_gap=value)


@dataclass(frozen=True)
class GridSpan:
    """Half-open span of grid lines: [column_start, column_end) x [row_start, row_end)."""
    column_start: int
    column_end: int
    row_start: int
    row_end: int

    @property
    def width(self) -> int:
        return self.column_end - self.column_start

    @property
    def height(self) -> int:
        return self.row_end - self.row_start

    @property
    def origin(self) -> CellCoord:
        return CellCoord(self.column_start, self.row_start)

    def covers(self, col: int, row: int) -> bool:
        """Check if the cell starting at (col, row) lies inside this span."""
        return (self.column_start <= col < self.column_end and
                self.row_start <= row < self.row_end)

    def cells(self) -> Iterator[CellCoord]:
        """Iterate covered cells, column-major (matches collision scan order)."""
        for col in range(self.column_start, self.column_end):
            for row in range(self.row_start, self.row_end):
                yield CellCoord(col, row)

    def moved_to(self, col: int, row: int) -> 'GridSpan':
        """Same size, anchored at a new origin cell."""
        return GridSpan(col, col + self.width, row, row + self.height)


@dataclass(frozen=True)
class GridItem:
    """An item placed on the grid."""
    id: str
    column_start: int
    column_end: int
    row_start: int
    row_end: int
    label: str = ""

    @staticmethod
    def create(col: int, row: int, label: str,
               item_id: Optional[str] = None) -> 'GridItem':
        """Create a 1x1 item at the given cell."""
        return GridItem(
            id=item_id or new_item_id(),
            column_start=col,
            column_end=col + 1,
            row_start=row,
            row_end=row + 1,
            label=label,
        )

    @property
    def span(self) -> GridSpan:
        return GridSpan(self.column_start, self.column_end,
                        self.row_start, self.row_end)

    def with_span(self, span: GridSpan) -> 'GridItem':
        return replace(
            self,
            column_start=span.column_start,
            column_end=span.column_end,
            row_start=span.row_start,
            row_end=span.row_end,
        )


@dataclass(frozen=True)
class OutputSettings:
    """Which dialect to render and how to name the container."""
    css_format: CSSFormat = CSSFormat.VANILLA
    ui_framework: UIFramework = UIFramework.NONE
    container_class_name: str = "grid-container"

    def normalized(self) -> 'OutputSettings':
        """Drop the framework choice when the format is not Tailwind."""
        if self.css_format is not CSSFormat.TAILWIND and self.ui_framework is not UIFramework.NONE:
            return replace(self, ui_framework=UIFramework.NONE)
        return self


def new_item_id() -> str:
    """Generate a fresh, unique item id."""
    return f"item-{uuid.uuid4().hex[:12]}"


DEFAULT_GRID_CONFIG = GridConfig()
DEFAULT_OUTPUT_SETTINGS = OutputSettings()

ItemSnapshot = Tuple[GridItem, ...]
