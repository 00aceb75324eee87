"""
Grid Generator - UI Module

PyQt5 presentation shell: canvas, controls panel, code output panel and
the main window that wires them to the editor core.
"""

from .main_window import MainWindow

__all__ = [
    'MainWindow'
]
