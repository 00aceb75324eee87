"""
Grid Generator - visual CSS Grid editor.

Place items on a grid canvas, drag/swap/resize them, and export the
layout as vanilla CSS, Bootstrap, or Tailwind (optionally wrapped in
shadcn/ui, Material UI, Chakra UI or Ant Design components).
"""

__version__ = "0.1.0"

from .editor import (
    CSSFormat,
    UIFramework,
    GridConfig,
    GridItem,
    GridSpan,
    OutputSettings,
    GridEditor,
    EditorMode,
)
from .conversion import GeneratedCode, generate_code

__all__ = [
    'CSSFormat',
    'UIFramework',
    'GridConfig',
    'GridItem',
    'GridSpan',
    'OutputSettings',
    'GridEditor',
    'EditorMode',
    'GeneratedCode',
    'generate_code',
]
