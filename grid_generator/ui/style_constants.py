"""
Centralized style constants for the Grid Generator UI.

Design tokens for the dark theme shared by the canvas, the controls
panel and the code output panel. Use these instead of hardcoded values.
"""

from PyQt5.QtGui import QColor

# =============================================================================
# COLOR PALETTE - Semantic roles
# =============================================================================

PRIMARY_ACTION = "#4CAF50"        # Green - primary buttons
PRIMARY_ACTION_HOVER = "#45a049"

DANGER_COLOR = "#f44336"          # Red - delete, clear all
DANGER_HOVER = "#da190b"

WARNING_COLOR = "#FF9800"         # Orange - validation warnings

SELECTED_STATE = "#2196F3"        # Blue - selected item outline
FOCUS_COLOR = "#64B5F6"

# =============================================================================
# BACKGROUND / TEXT / BORDER
# =============================================================================

BG_DARKEST = "#1e1e1e"            # Code panes
BG_DARK = "#2d2d2d"               # Window background
BG_LIGHT = "#404040"              # Inputs
BG_HIGHLIGHT = "#4a4a4a"

TEXT_PRIMARY = "#e0e0e0"
TEXT_SECONDARY = "#c0c0c0"
TEXT_TERTIARY = "#a0a0a0"
TEXT_ERROR = "#ff8888"
TEXT_SUCCESS = "#88ff88"

BORDER_MEDIUM = "#555555"

FONT_SIZE_XS = "10pt"
FONT_SIZE_SM = "11pt"
FONT_MONO = "Menlo, Consolas, 'DejaVu Sans Mono', monospace"

SPACING_SM = 8
SPACING_LG = 16

BORDER_RADIUS_SM = "3px"

# =============================================================================
# CANVAS COLORS (QColor, used by QPainter)
# =============================================================================

CANVAS_BACKGROUND = QColor(30, 30, 30)
CANVAS_BORDER = QColor(85, 85, 85)
EMPTY_CELL_FILL = QColor(45, 45, 45)
EMPTY_CELL_BORDER = QColor(80, 80, 80)
EMPTY_CELL_HOVER = QColor(60, 80, 60)
EMPTY_CELL_MARK = QColor(120, 120, 120)

ITEM_FILL = QColor(76, 175, 80, 180)
ITEM_FILL_SELECTED = QColor(76, 175, 80)
ITEM_TEXT = QColor(255, 255, 255)
ITEM_OUTLINE_SELECTED = QColor(33, 150, 243)
ITEM_PREVIEW_MOVED = QColor(76, 175, 80, 120)

DELETE_BADGE = QColor(244, 67, 54)
RESIZE_HANDLE = QColor(255, 255, 255, 90)

# Pixel sizes of the selected item's affordances
DELETE_BADGE_SIZE = 18
RESIZE_HANDLE_SIZE = 14

# =============================================================================
# STYLESHEETS
# =============================================================================

DANGER_BUTTON_STYLE = f"""
    QPushButton {{
        background: {DANGER_COLOR};
        color: white;
        border: none;
        border-radius: {BORDER_RADIUS_SM};
        padding: 4px 12px;
    }}
    QPushButton:hover {{ background: {DANGER_HOVER}; }}
"""

CODE_VIEW_STYLE = f"""
    QPlainTextEdit {{
        background: {BG_DARKEST};
        color: {TEXT_PRIMARY};
        border: 1px solid {BORDER_MEDIUM};
        font-family: {FONT_MONO};
        font-size: {FONT_SIZE_SM};
    }}
"""

SECTION_HEADER_STYLE = (
    f"color: {TEXT_TERTIARY}; font-size: {FONT_SIZE_XS}; "
    "font-weight: bold; letter-spacing: 2px;"
)


def set_accessible(widget, name: str, description: str = "") -> None:
    """Set accessibility labels for a widget.

    Args:
        widget: The PyQt5 widget to label.
        name: Short accessible name (e.g., "Columns").
        description: Optional longer description of the widget's purpose.
    """
    widget.setAccessibleName(name)
    if description:
        widget.setAccessibleDescription(description)
    widget.setToolTip(description or name)
