"""
Control ranges for the grid editor.

The core only requires columns and rows >= 1 and non-negative gaps;
these ranges are what the controls panel exposes and what validation
reports as GRID-003 warnings when a config strays outside them.
"""

from typing import Tuple

# (min, max) inclusive
COLUMN_RANGE: Tuple[int, int] = (1, 12)
ROW_RANGE: Tuple[int, int] = (1, 12)
GAP_RANGE: Tuple[int, int] = (0, 64)
GAP_STEP = 4

# Spacing scale base units (pixels per unit)
TAILWIND_SPACING_PX = 4
CHAKRA_SPACING_PX = 4
MUI_SPACING_PX = 8

# Canvas widget
CANVAS_MIN_SIZE = 320
CANVAS_PADDING = 16
