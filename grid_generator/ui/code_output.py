"""
Generated code panel: markup and stylesheet tabs with copy buttons.
"""

import logging

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QTabWidget, QPlainTextEdit,
    QPushButton, QApplication,
)
from PyQt5.QtCore import QTimer
from PyQt5.QtGui import QFontDatabase

from grid_generator.conversion import GeneratedCode
from grid_generator.ui import style_constants as sc
from grid_generator.ui.style_constants import set_accessible

logger = logging.getLogger(__name__)

COPY_FEEDBACK_MS = 2000


class CodePane(QWidget):
    """Read-only code view with a Copy button."""

    def __init__(self, title: str, parent=None):
        super().__init__(parent)
        self._title = title

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        toolbar = QHBoxLayout()
        toolbar.addStretch()
        self._copy_btn = QPushButton("Copy")
        self._copy_btn.clicked.connect(self._copy)
        set_accessible(self._copy_btn, f"Copy {title}", f"Copy the generated {title} to the clipboard")
        toolbar.addWidget(self._copy_btn)
        layout.addLayout(toolbar)

        self._view = QPlainTextEdit()
        self._view.setReadOnly(True)
        self._view.setLineWrapMode(QPlainTextEdit.NoWrap)
        self._view.setFont(QFontDatabase.systemFont(QFontDatabase.FixedFont))
        self._view.setStyleSheet(sc.CODE_VIEW_STYLE)
        set_accessible(self._view, f"Generated {title}")
        layout.addWidget(self._view)

    def text(self) -> str:
        return self._view.toPlainText()

    def set_text(self, text: str):
        if text != self._view.toPlainText():
            self._view.setPlainText(text)

    def _copy(self):
        QApplication.clipboard().setText(self.text())
        logger.debug("Copied %s (%d chars)", self._title, len(self.text()))
        self._copy_btn.setText("Copied")
        self._copy_btn.setEnabled(False)
        QTimer.singleShot(COPY_FEEDBACK_MS, self._reset_copy_button)

    def _reset_copy_button(self):
        self._copy_btn.setText("Copy")
        self._copy_btn.setEnabled(True)


class CodeOutputPanel(QTabWidget):
    """Tabs for the generated markup and stylesheet."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._markup = CodePane("HTML")
        self._style = CodePane("CSS")
        self.addTab(self._markup, "HTML")
        self.addTab(self._style, "CSS")

    def set_code(self, code: GeneratedCode):
        self._markup.set_text(code.markup)
        self._style.set_text(code.style)

    def markup(self) -> str:
        return self._markup.text()

    def style_text(self) -> str:
        return self._style.text()
