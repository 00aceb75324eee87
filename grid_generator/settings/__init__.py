"""
Editor settings: control ranges and persisted output preferences.

output_settings imports PyQt5.QtCore and is not imported here, so the
core editor can be used without Qt.
"""

from .editor_settings import (
    COLUMN_RANGE,
    ROW_RANGE,
    GAP_RANGE,
    GAP_STEP,
)

__all__ = [
    'COLUMN_RANGE',
    'ROW_RANGE',
    'GAP_RANGE',
    'GAP_STEP',
]
