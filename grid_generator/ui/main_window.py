"""
Main application window for Grid Generator.

Three panels: structure/output controls on the left, the interactive
grid canvas in the middle, and the generated code on the right. The
code is regenerated whenever the grid, the items or the output choice
change.
"""

import logging
from typing import Optional

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton,
    QLabel, QSplitter, QScrollArea,
)
from PyQt5.QtCore import Qt

from grid_generator.conversion import generate_code
from grid_generator.editor.data_model import DEFAULT_GRID_CONFIG, GridConfig, OutputSettings
from grid_generator.editor.interaction import GridEditor
from grid_generator.settings.output_settings import OUTPUT_PREFERENCES, OutputPreferences
from grid_generator.validation import ValidationError, validate_layout
from grid_generator.ui.controls_panel import ControlsPanel
from grid_generator.ui.code_output import CodeOutputPanel
from grid_generator.ui.grid_canvas import GridCanvas
from grid_generator.ui import style_constants as sc
from grid_generator.ui.style_constants import set_accessible

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Grid Generator main window."""

    def __init__(self, preferences: Optional[OutputPreferences] = None):
        super().__init__()
        self._preferences = preferences or OUTPUT_PREFERENCES
        self._output = self._preferences.load()
        self._editor = GridEditor(DEFAULT_GRID_CONFIG)

        self._setup_ui()
        self._connect_signals()
        self._refresh()

    # ---------------------------------------------------------------
    # UI setup
    # ---------------------------------------------------------------

    def _setup_ui(self):
        self.setWindowTitle("Grid Generator")
        self.setMinimumSize(960, 560)
        self.resize(1280, 760)

        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(4, 4, 4, 4)

        self.main_splitter = QSplitter(Qt.Horizontal)
        root.addWidget(self.main_splitter)

        # === LEFT PANEL (Controls) ===
        self.controls = ControlsPanel(self._editor.config, self._output)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.controls)
        self.main_splitter.addWidget(scroll)

        # === CENTER PANEL (Canvas) ===
        center = QWidget()
        center_layout = QVBoxLayout(center)
        center_layout.setContentsMargins(4, 4, 4, 4)

        header = QHBoxLayout()
        self.item_count_label = QLabel()
        self.item_count_label.setStyleSheet(sc.SECTION_HEADER_STYLE)
        header.addWidget(self.item_count_label)
        header.addStretch()

        self.clear_btn = QPushButton("Clear All")
        self.clear_btn.setStyleSheet(sc.DANGER_BUTTON_STYLE)
        set_accessible(self.clear_btn, "Clear All", "Remove every item from the grid")
        header.addWidget(self.clear_btn)
        center_layout.addLayout(header)

        self.canvas = GridCanvas(self._editor)
        center_layout.addWidget(self.canvas, stretch=1)

        hint = QLabel("Click an empty cell to add an item. Drag the selected item to move "
                      "or swap it, drag its corner to resize.")
        hint.setWordWrap(True)
        hint.setStyleSheet(f"color: {sc.TEXT_TERTIARY}; font-size: {sc.FONT_SIZE_XS};")
        center_layout.addWidget(hint)
        self.main_splitter.addWidget(center)

        # === RIGHT PANEL (Code) ===
        self.code_output = CodeOutputPanel()
        self.main_splitter.addWidget(self.code_output)

        self.main_splitter.setStretchFactor(0, 0)
        self.main_splitter.setStretchFactor(1, 1)
        self.main_splitter.setStretchFactor(2, 1)
        self.main_splitter.setSizes([260, 560, 460])

        self.statusBar().setStyleSheet(f"QStatusBar {{ font-size: {sc.FONT_SIZE_SM}; color: {sc.TEXT_SECONDARY}; }}")
        self.statusBar().showMessage("Ready")

    def _connect_signals(self):
        self.controls.config_changed.connect(self._on_config_changed)
        self.controls.output_changed.connect(self._on_output_changed)
        self.canvas.items_changed.connect(self._on_items_changed)
        self.canvas.status_message.connect(lambda msg: self._show_status(msg, "info"))
        self.clear_btn.clicked.connect(self._on_clear_all)

    # ---------------------------------------------------------------
    # Handlers
    # ---------------------------------------------------------------

    def _on_config_changed(self, config: GridConfig):
        try:
            self.canvas.set_config(config)
        except ValidationError as e:
            logger.error("Rejected grid config: %s", e)
            self._show_status(str(e), "error")
            self.controls.set_config(self._editor.config)
            return
        self._refresh()

    def _on_output_changed(self, output: OutputSettings):
        self._output = output
        self._preferences.save(output)
        self._refresh()

    def _on_items_changed(self, items):
        self._refresh()

    def _on_clear_all(self):
        self.canvas.clear_items()
        self._show_status("Cleared all items", "info")

    # ---------------------------------------------------------------
    # Refresh
    # ---------------------------------------------------------------

    def _refresh(self):
        config = self._editor.config
        items = self._editor.items
        output = self._output

        code = generate_code(config, items, output.css_format, output.ui_framework,
                             output.container_class_name)
        self.code_output.set_code(code)

        count = len(items)
        self.item_count_label.setText(f"{count} ITEM{'S' if count != 1 else ''}")
        self.clear_btn.setVisible(count > 0)

        result = validate_layout(config, items)
        if result.warnings:
            self._show_status(result.warnings[0].message, "warning")

    def _show_status(self, message: str, severity: str):
        if severity == "warning":
            self.statusBar().setStyleSheet(f"QStatusBar {{ color: {sc.WARNING_COLOR}; }}")
            self.statusBar().showMessage(f"⚠ {message}", 5000)
        elif severity == "error":
            self.statusBar().setStyleSheet(f"QStatusBar {{ color: {sc.DANGER_COLOR}; }}")
            self.statusBar().showMessage(f"✗ {message}", 5000)
        else:
            self.statusBar().setStyleSheet(f"QStatusBar {{ color: {sc.TEXT_SECONDARY}; }}")
            self.statusBar().showMessage(message, 3000)

    def closeEvent(self, event):
        self._preferences.save(self._output)
        event.accept()
