"""
Canvas widget for the grid editor.

Provides:
- Painted grid with empty-cell "+" targets
- Click-to-place 1x1 items, click-to-select/deselect
- Drag-to-move with single-item swap preview
- Resize from the bottom-right handle of the selected item
- Delete badge on the selected item, Delete/Backspace and Escape keys

All decisions are made by GridEditor; this widget only maps Qt events
to editor calls and paints editor.display_spans().
"""

import logging
from typing import Optional, Tuple

from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, QRectF, QPointF, pyqtSignal
from PyQt5.QtGui import (
    QPainter, QPen, QBrush, QFont, QPolygonF, QMouseEvent, QKeyEvent,
)

from grid_generator.editor.data_model import CanvasRect, GridConfig, GridSpan
from grid_generator.editor.geometry import cell_from_point, item_at_cell
from grid_generator.editor.interaction import EditorMode, GridEditor
from grid_generator.settings.editor_settings import CANVAS_MIN_SIZE, CANVAS_PADDING
from grid_generator.ui import style_constants as sc

logger = logging.getLogger(__name__)


class GridCanvas(QWidget):
    """Interactive canvas bound to a GridEditor."""

    # Signals
    items_changed = pyqtSignal(object)       # Emitted with the new item tuple
    selection_changed = pyqtSignal(object)   # Emitted with item id or None
    status_message = pyqtSignal(str)

    def __init__(self, editor: GridEditor, parent=None):
        super().__init__(parent)
        self._editor = editor

        self._hover_cell: Optional[Tuple[int, int]] = None
        self._gesture_moved = False
        self._press_item_id: Optional[str] = None

        self.setMinimumSize(CANVAS_MIN_SIZE, CANVAS_MIN_SIZE)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)

    # ---------------------------------------------------------------
    # Editor binding
    # ---------------------------------------------------------------

    @property
    def editor(self) -> GridEditor:
        return self._editor

    def set_config(self, config: GridConfig):
        self._editor.set_config(config)
        self.update()

    def clear_items(self):
        had_selection = self._editor.selected_id is not None
        self._editor.clear_all()
        self.items_changed.emit(self._editor.items)
        if had_selection:
            self.selection_changed.emit(None)
        self.update()

    def delete_selected(self):
        item_id = self._editor.selected_id
        if item_id is None:
            return
        if self._editor.delete_item(item_id):
            self.items_changed.emit(self._editor.items)
            self.selection_changed.emit(None)
            self.update()

    # ---------------------------------------------------------------
    # Coordinate conversion
    # ---------------------------------------------------------------

    def canvas_rect(self) -> CanvasRect:
        """The grid area in widget coordinates."""
        w = max(self.width() - 2 * CANVAS_PADDING, 1)
        h = max(self.height() - 2 * CANVAS_PADDING, 1)
        return CanvasRect(CANVAS_PADDING, CANVAS_PADDING, w, h)

    def _cell_size(self) -> Tuple[float, float]:
        rect = self.canvas_rect()
        config = self._editor.config
        return rect.width / config.columns, rect.height / config.rows

    def _gaps(self) -> Tuple[float, float]:
        """Column/row gap in pixels, capped so cells stay visible."""
        config = self._editor.config
        if config.use_uniform_gap:
            col_gap = row_gap = config.gap
        else:
            col_gap, row_gap = config.column_gap, config.row_gap
        cell_w, cell_h = self._cell_size()
        return min(col_gap, cell_w / 3), min(row_gap, cell_h / 3)

    def _span_rect(self, span: GridSpan) -> QRectF:
        rect = self.canvas_rect()
        cell_w, cell_h = self._cell_size()
        col_gap, row_gap = self._gaps()
        x = rect.left + (span.column_start - 1) * cell_w + col_gap / 2
        y = rect.top + (span.row_start - 1) * cell_h + row_gap / 2
        w = max(span.width * cell_w - col_gap, 1.0)
        h = max(span.height * cell_h - row_gap, 1.0)
        return QRectF(x, y, w, h)

    def _delete_badge_rect(self, span: GridSpan) -> QRectF:
        r = self._span_rect(span)
        s = sc.DELETE_BADGE_SIZE
        return QRectF(r.right() - s / 2, r.top() - s / 2, s, s)

    def _resize_handle_rect(self, span: GridSpan) -> QRectF:
        r = self._span_rect(span)
        s = sc.RESIZE_HANDLE_SIZE
        return QRectF(r.right() - s, r.bottom() - s, s, s)

    # ---------------------------------------------------------------
    # Drawing
    # ---------------------------------------------------------------

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        painter.fillRect(self.rect(), sc.CANVAS_BACKGROUND)
        painter.setPen(QPen(sc.CANVAS_BORDER, 1))
        painter.drawRect(QRectF(self.rect()).adjusted(0.5, 0.5, -0.5, -0.5))

        self._draw_empty_cells(painter)
        self._draw_items(painter)
        painter.end()

    def _draw_empty_cells(self, painter: QPainter):
        config = self._editor.config
        spans = self._editor.display_spans()

        mark_font = QFont()
        mark_font.setPointSize(10)
        painter.setFont(mark_font)

        for row in range(1, config.rows + 1):
            for col in range(1, config.columns + 1):
                if any(span.covers(col, row) for span in spans.values()):
                    continue
                rect = self._span_rect(GridSpan(col, col + 1, row, row + 1))
                hovered = self._hover_cell == (col, row) and not self._editor.is_gesture_active
                fill = sc.EMPTY_CELL_HOVER if hovered else sc.EMPTY_CELL_FILL
                painter.setPen(QPen(sc.EMPTY_CELL_BORDER, 1, Qt.DashLine))
                painter.setBrush(QBrush(fill))
                painter.drawRoundedRect(rect, 2, 2)
                painter.setPen(QPen(sc.EMPTY_CELL_MARK))
                painter.drawText(rect, Qt.AlignCenter, "+")

    def _draw_items(self, painter: QPainter):
        spans = self._editor.display_spans()
        selected_id = self._editor.selected_id
        label_font = QFont()
        label_font.setPointSize(11)
        label_font.setBold(True)

        # Selected item last so it paints on top
        ordered = sorted(self._editor.items, key=lambda i: i.id == selected_id)
        for item in ordered:
            span = spans[item.id]
            rect = self._span_rect(span)
            is_selected = item.id == selected_id
            moved = span != item.span

            if is_selected:
                painter.setPen(QPen(sc.ITEM_OUTLINE_SELECTED, 2))
                painter.setBrush(QBrush(sc.ITEM_FILL_SELECTED))
            else:
                painter.setPen(Qt.NoPen)
                painter.setBrush(QBrush(sc.ITEM_PREVIEW_MOVED if moved else sc.ITEM_FILL))
            painter.drawRoundedRect(rect, 3, 3)

            painter.setFont(label_font)
            painter.setPen(QPen(sc.ITEM_TEXT))
            painter.drawText(rect, Qt.AlignCenter, item.label)

            if is_selected:
                self._draw_selection_affordances(painter, span)

    def _draw_selection_affordances(self, painter: QPainter, span: GridSpan):
        # Resize handle (bottom-right triangle)
        handle = self._resize_handle_rect(span)
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(sc.RESIZE_HANDLE))
        painter.drawPolygon(QPolygonF([
            QPointF(handle.right(), handle.top()),
            QPointF(handle.right(), handle.bottom()),
            QPointF(handle.left(), handle.bottom()),
        ]))

        if self._editor.is_gesture_active:
            return

        # Delete badge (top-right circle with an x)
        badge = self._delete_badge_rect(span)
        painter.setBrush(QBrush(sc.DELETE_BADGE))
        painter.drawEllipse(badge)
        painter.setPen(QPen(sc.ITEM_TEXT, 2))
        inset = badge.width() * 0.3
        painter.drawLine(badge.topLeft() + QPointF(inset, inset),
                         badge.bottomRight() - QPointF(inset, inset))
        painter.drawLine(QPointF(badge.right() - inset, badge.top() + inset),
                         QPointF(badge.left() + inset, badge.bottom() - inset))

    # ---------------------------------------------------------------
    # Mouse events
    # ---------------------------------------------------------------

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return

        pos = event.pos()
        x, y = pos.x(), pos.y()
        editor = self._editor
        selected = editor.selected_item
        self._press_item_id = None
        self._gesture_moved = False

        if selected is not None:
            if self._delete_badge_rect(selected.span).contains(QPointF(pos)):
                self.delete_selected()
                event.accept()
                return
            if self._resize_handle_rect(selected.span).contains(QPointF(pos)):
                editor.begin_resize(selected.id)
                self.setCursor(Qt.SizeFDiagCursor)
                event.accept()
                return

        rect = self.canvas_rect()
        config = editor.config
        cell = cell_from_point(x, y, rect, config.columns, config.rows)
        if cell is None:
            self._deselect()
            event.accept()
            return

        hit = item_at_cell(cell.col, cell.row, editor.items)
        if hit is None:
            item = editor.click_cell(cell.col, cell.row)
            if item is not None:
                self.items_changed.emit(editor.items)
                self.selection_changed.emit(item.id)
                self.status_message.emit(f"Added item {item.label} at ({cell.col}, {cell.row})")
        elif hit.id == editor.selected_id:
            # Press on the selected item: start a drag, toggle on a plain click
            self._press_item_id = hit.id
            editor.begin_drag(hit.id, x, y, rect)
            self.setCursor(Qt.ClosedHandCursor)
        else:
            editor.click_item(hit.id)
            self.selection_changed.emit(editor.selected_id)

        self.update()
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent):
        pos = event.pos()
        editor = self._editor

        if editor.is_gesture_active:
            if editor.pointer_move(pos.x(), pos.y(), self.canvas_rect()):
                self._gesture_moved = True
                self.update()
            event.accept()
            return

        config = editor.config
        cell = cell_from_point(pos.x(), pos.y(), self.canvas_rect(), config.columns, config.rows)
        hover = (cell.col, cell.row) if cell else None
        if hover != self._hover_cell:
            self._hover_cell = hover
            self.update()
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() != Qt.LeftButton:
            super().mouseReleaseEvent(event)
            return

        editor = self._editor
        if editor.is_gesture_active:
            was_drag = editor.mode is EditorMode.DRAGGING
            before = editor.items
            after = editor.release()
            if after != before:
                self.items_changed.emit(after)
            elif was_drag and not self._gesture_moved and self._press_item_id:
                editor.click_item(self._press_item_id)
                self.selection_changed.emit(editor.selected_id)
            self.unsetCursor()

        self._press_item_id = None
        self._gesture_moved = False
        self.update()
        event.accept()

    def leaveEvent(self, event):
        self._hover_cell = None
        self.update()
        super().leaveEvent(event)

    def keyPressEvent(self, event: QKeyEvent):
        key = event.key()
        if key in (Qt.Key_Delete, Qt.Key_Backspace):
            self.delete_selected()
            event.accept()
            return
        if key == Qt.Key_Escape:
            if self._editor.cancel_gesture():
                self.unsetCursor()
                self.status_message.emit("Gesture cancelled")
                self.update()
            else:
                self._deselect()
            event.accept()
            return
        super().keyPressEvent(event)

    def _deselect(self):
        if self._editor.selected_id is None and not self._editor.is_gesture_active:
            return
        self._editor.click_background()
        self.selection_changed.emit(None)
        self.update()
