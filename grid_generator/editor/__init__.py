"""
Grid editor core: data model, geometry and the interaction state machine.

The canvas widget forwards pointer events to GridEditor; the editor
returns immutable item snapshots that the code writers render.
"""

from .data_model import (
    CSSFormat,
    UIFramework,
    CellCoord,
    CanvasRect,
    GridConfig,
    GridSpan,
    GridItem,
    OutputSettings,
    DEFAULT_GRID_CONFIG,
    DEFAULT_OUTPUT_SETTINGS,
)
from .geometry import (
    cell_from_point,
    item_at_cell,
    is_area_valid,
    occupancy_map,
    covered_items,
)
from .interaction import EditorMode, Gesture, GestureKind, GridEditor

__all__ = [
    'CSSFormat',
    'UIFramework',
    'CellCoord',
    'CanvasRect',
    'GridConfig',
    'GridSpan',
    'GridItem',
    'OutputSettings',
    'DEFAULT_GRID_CONFIG',
    'DEFAULT_OUTPUT_SETTINGS',
    'cell_from_point',
    'item_at_cell',
    'is_area_valid',
    'occupancy_map',
    'covered_items',
    'EditorMode',
    'Gesture',
    'GestureKind',
    'GridEditor',
]
