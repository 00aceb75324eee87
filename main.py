#!/usr/bin/env python3
"""
Grid Generator - Main Application Entry Point

Initializes logging and the Qt application, then launches the main UI.
"""

import logging
import os
import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtGui import QPalette, QColor
from PyQt5.QtCore import Qt

LOG_LEVEL_ENV = "GRID_GENERATOR_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging():
    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if level_name != logging.getLevelName(level):
        logging.getLogger(__name__).warning(
            "Unknown %s=%r, using INFO", LOG_LEVEL_ENV, level_name)


def dark_palette() -> QPalette:
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor(43, 43, 43))
    palette.setColor(QPalette.WindowText, Qt.white)
    palette.setColor(QPalette.Base, QColor(35, 35, 35))
    palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    palette.setColor(QPalette.ToolTipBase, QColor(53, 53, 53))
    palette.setColor(QPalette.ToolTipText, QColor(224, 224, 224))
    palette.setColor(QPalette.Text, Qt.white)
    palette.setColor(QPalette.Button, QColor(53, 53, 53))
    palette.setColor(QPalette.ButtonText, Qt.white)
    palette.setColor(QPalette.BrightText, Qt.red)
    palette.setColor(QPalette.Link, QColor(76, 175, 80))
    palette.setColor(QPalette.Highlight, QColor(76, 175, 80))
    palette.setColor(QPalette.HighlightedText, Qt.black)
    return palette


def main():
    """Main application entry point."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = QApplication(sys.argv)
    app.setApplicationName("Grid Generator")
    app.setApplicationDisplayName("Grid Generator")
    app.setOrganizationName("GridGenerator")
    app.setStyle("Fusion")
    app.setPalette(dark_palette())

    from grid_generator.ui.main_window import MainWindow
    window = MainWindow()
    window.show()
    logger.info("Grid Generator started")

    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
