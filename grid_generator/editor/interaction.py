"""
Interaction state machine for the grid canvas.

Tracks selection and drag/resize gestures over an item snapshot. A
gesture never touches the authoritative items: every pointer move
recomputes a preview map ({item_id: GridSpan}) from the snapshot taken
when the gesture started, and release() commits that preview in one
step. cancel_gesture() simply drops it.

Modes:
    IDLE      nothing selected
    SELECTED  one item selected
    DRAGGING  selected item is being moved (single-item swap allowed)
    RESIZING  selected item's end lines follow the pointer (never overlaps)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, Optional

from .data_model import (
    CanvasRect, CellCoord, GridConfig, GridItem, GridSpan, ItemSnapshot,
    DEFAULT_GRID_CONFIG, new_item_id,
)
from .geometry import (
    cell_from_point, clamp, covered_items, is_span_valid, item_at_cell,
)
from ..validation import ValidationError, validate_grid_config

logger = logging.getLogger(__name__)


class EditorMode(Enum):
    IDLE = "idle"
    SELECTED = "selected"
    DRAGGING = "dragging"
    RESIZING = "resizing"


class GestureKind(Enum):
    DRAG = "drag"
    RESIZE = "resize"


@dataclass
class Gesture:
    """An in-progress drag or resize.

    Attributes:
        kind: DRAG or RESIZE
        item_id: The item being manipulated
        origin: Item snapshot at gesture start
        preview: Candidate span per item id
        offset: Grab point relative to the item's origin cell (drag only)
    """
    kind: GestureKind
    item_id: str
    origin: ItemSnapshot
    preview: Dict[str, GridSpan] = field(default_factory=dict)
    offset: CellCoord = CellCoord(0, 0)

    def origin_item(self) -> Optional[GridItem]:
        for item in self.origin:
            if item.id == self.item_id:
                return item
        return None

    def reset_preview(self):
        self.preview = {item.id: item.span for item in self.origin}


class GridEditor:
    """Selection, placement and drag/resize logic for one grid.

    Usage:
        editor = GridEditor(GridConfig(columns=3, rows=3))
        editor.click_cell(1, 1)
        editor.begin_drag(editor.selected_id, x, y, rect)
        editor.pointer_move(x2, y2, rect)
        items = editor.release()
    """

    def __init__(self, config: GridConfig = DEFAULT_GRID_CONFIG,
                 items: Iterable[GridItem] = (),
                 id_factory: Optional[Callable[[], str]] = None):
        self._config = DEFAULT_GRID_CONFIG
        self._items: ItemSnapshot = tuple(items)
        self._selected_id: Optional[str] = None
        self._gesture: Optional[Gesture] = None
        self._id_factory = id_factory or new_item_id
        self.set_config(config)

    # ---------------------------------------------------------------
    # State access
    # ---------------------------------------------------------------

    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def items(self) -> ItemSnapshot:
        return self._items

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def selected_item(self) -> Optional[GridItem]:
        return self._find(self._selected_id)

    @property
    def mode(self) -> EditorMode:
        if self._gesture is not None:
            if self._gesture.kind is GestureKind.DRAG:
                return EditorMode.DRAGGING
            return EditorMode.RESIZING
        if self._selected_id is not None:
            return EditorMode.SELECTED
        return EditorMode.IDLE

    @property
    def is_gesture_active(self) -> bool:
        return self._gesture is not None

    @property
    def preview(self) -> Dict[str, GridSpan]:
        """Copy of the current preview map (empty outside a gesture)."""
        if self._gesture is None:
            return {}
        return dict(self._gesture.preview)

    def display_spans(self) -> Dict[str, GridSpan]:
        """Span to draw for every item: preview if present, else committed."""
        preview = self._gesture.preview if self._gesture else {}
        return {item.id: preview.get(item.id, item.span) for item in self._items}

    def _find(self, item_id: Optional[str]) -> Optional[GridItem]:
        if item_id is None:
            return None
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    # ---------------------------------------------------------------
    # Grid and item management
    # ---------------------------------------------------------------

    def set_config(self, config: GridConfig):
        """Replace the grid configuration.

        Raises:
            ValidationError: If columns/rows are not positive or a gap is negative
        """
        result = validate_grid_config(config)
        if result.failed:
            raise ValidationError(result)
        for issue in result.warnings:
            logger.warning(issue.format())

        self._discard_gesture()
        if config != self._config:
            logger.info("Grid config: %dx%d", config.columns, config.rows)
        self._config = config

    def set_items(self, items: Iterable[GridItem]):
        """Replace the item snapshot wholesale."""
        self._discard_gesture()
        self._items = tuple(items)
        if self._find(self._selected_id) is None:
            self._selected_id = None

    def delete_item(self, item_id: str) -> bool:
        """Remove an item. Unknown ids are a no-op."""
        if self._find(item_id) is None:
            return False

        self._discard_gesture()
        self._items = tuple(i for i in self._items if i.id != item_id)
        if self._selected_id == item_id:
            self._selected_id = None
        logger.info("Deleted item %s", item_id)
        return True

    def delete_selected(self) -> bool:
        if self._selected_id is None:
            return False
        return self.delete_item(self._selected_id)

    def clear_all(self):
        """Remove every item and return to IDLE."""
        self._discard_gesture()
        self._selected_id = None
        if self._items:
            logger.info("Cleared %d items", len(self._items))
        self._items = ()

    # ---------------------------------------------------------------
    # Clicks and selection
    # ---------------------------------------------------------------

    def click_cell(self, col: int, row: int) -> Optional[GridItem]:
        """Create a 1x1 item on an empty cell and select it.

        Returns:
            The new item, or None if the cell is occupied or off-grid.
        """
        if not (1 <= col <= self._config.columns and 1 <= row <= self._config.rows):
            return None
        if item_at_cell(col, row, self._items) is not None:
            return None

        self._discard_gesture()
        item = GridItem.create(col, row, label=str(len(self._items) + 1),
                               item_id=self._id_factory())
        self._items = self._items + (item,)
        self._selected_id = item.id
        logger.info("Created item %s at (%d, %d)", item.id, col, row)
        return item

    def click_point(self, x: float, y: float, rect: CanvasRect) -> Optional[GridItem]:
        """Route a click at a pointer position to click_cell/click_item.

        Returns:
            The item that was created or clicked, or None off-grid.
        """
        cell = cell_from_point(x, y, rect, self._config.columns, self._config.rows)
        if cell is None:
            return None
        hit = item_at_cell(cell.col, cell.row, self._items)
        if hit is not None:
            self.click_item(hit.id)
            return hit
        return self.click_cell(cell.col, cell.row)

    def click_item(self, item_id: str):
        """Toggle selection of an item, discarding any gesture."""
        if self._find(item_id) is None:
            return
        self._discard_gesture()
        self._selected_id = None if self._selected_id == item_id else item_id

    def click_background(self):
        """Deselect."""
        self._discard_gesture()
        self._selected_id = None

    # ---------------------------------------------------------------
    # Gestures
    # ---------------------------------------------------------------

    def begin_drag(self, item_id: str, x: float, y: float, rect: CanvasRect) -> bool:
        """Start moving the selected item.

        The grab offset is the cell under the pointer minus the item's
        origin, so the item stays "held" at the same point while dragging.
        """
        if not self._can_begin(item_id):
            return False

        item = self._find(item_id)
        cell = cell_from_point(x, y, rect, self._config.columns, self._config.rows)
        offset = cell - item.span.origin if cell is not None else CellCoord(0, 0)

        self._gesture = Gesture(GestureKind.DRAG, item_id, self._items, offset=offset)
        self._gesture.reset_preview()
        logger.debug("Drag start %s offset=(%d, %d)", item_id, offset.col, offset.row)
        return True

    def begin_resize(self, item_id: str) -> bool:
        """Start resizing the selected item from its bottom-right handle."""
        if not self._can_begin(item_id):
            return False

        self._gesture = Gesture(GestureKind.RESIZE, item_id, self._items)
        self._gesture.reset_preview()
        logger.debug("Resize start %s", item_id)
        return True

    def _can_begin(self, item_id: str) -> bool:
        return (self._gesture is None and
                self._selected_id == item_id and
                self._find(item_id) is not None)

    def pointer_move(self, x: float, y: float, rect: CanvasRect) -> bool:
        """Recompute the preview for the pointer position.

        Returns:
            True if the preview changed.
        """
        gesture = self._gesture
        if gesture is None:
            return False

        cell = cell_from_point(x, y, rect, self._config.columns, self._config.rows)
        if cell is None:
            return False

        item = gesture.origin_item()
        if item is None:
            return False

        if gesture.kind is GestureKind.DRAG:
            preview = self._drag_preview(gesture, item, cell)
        else:
            preview = self._resize_preview(gesture, item, cell)

        if preview is None or preview == gesture.preview:
            return False
        gesture.preview = preview
        return True

    def _drag_preview(self, gesture: Gesture, item: GridItem,
                      cell: CellCoord) -> Dict[str, GridSpan]:
        columns, rows = self._config.columns, self._config.rows
        original = item.span

        col = clamp(cell.col - gesture.offset.col, 1, columns - original.width + 1)
        row = clamp(cell.row - gesture.offset.row, 1, rows - original.height + 1)
        target = original.moved_to(col, row)

        preview = {i.id: i.span for i in gesture.origin}
        preview[item.id] = target

        overlapped = covered_items(target, gesture.origin, columns, rows, exclude_id=item.id)
        if len(overlapped) == 1:
            other = overlapped[0]
            swapped = other.span.moved_to(original.column_start, original.row_start)
            if is_span_valid(swapped, columns, rows):
                preview[other.id] = swapped
                logger.debug("Swap preview: %s -> (%d, %d)", other.id,
                             swapped.column_start, swapped.row_start)
        elif len(overlapped) > 1:
            logger.debug("Drag over %d items, no swap", len(overlapped))

        return preview

    def _resize_preview(self, gesture: Gesture, item: GridItem,
                        cell: CellCoord) -> Optional[Dict[str, GridSpan]]:
        columns, rows = self._config.columns, self._config.rows
        original = item.span

        col_end = clamp(cell.col + 1, original.column_start + 1, columns + 1)
        row_end = clamp(cell.row + 1, original.row_start + 1, rows + 1)
        candidate = GridSpan(original.column_start, col_end, original.row_start, row_end)

        if covered_items(candidate, gesture.origin, columns, rows, exclude_id=item.id):
            logger.debug("Resize of %s to %d/%d rejected: overlap", item.id, col_end, row_end)
            return None

        preview = {i.id: i.span for i in gesture.origin}
        preview[item.id] = candidate
        return preview

    def release(self) -> ItemSnapshot:
        """Commit the preview and return to SELECTED."""
        gesture = self._gesture
        if gesture is None:
            return self._items

        preview = gesture.preview
        self._items = tuple(
            item.with_span(preview[item.id]) if item.id in preview else item
            for item in self._items
        )
        self._gesture = None
        self._selected_id = gesture.item_id
        logger.debug("Committed %s for %s", gesture.kind.value, gesture.item_id)
        return self._items

    def cancel_gesture(self) -> bool:
        """Drop the preview without committing."""
        if self._gesture is None:
            return False
        self._discard_gesture()
        return True

    def _discard_gesture(self):
        if self._gesture is not None:
            logger.debug("Discarded %s of %s", self._gesture.kind.value, self._gesture.item_id)
        self._gesture = None
