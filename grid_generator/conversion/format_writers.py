"""
Code writers for the supported output dialects.

Each writer renders a grid config + item list into a (markup, style)
pair. Writers are stateless: the same inputs always give byte-identical
output, items are emitted in list order, and an empty item list yields
the container alone.

Dialects:
    vanilla              CSS rules with explicit line ranges
    bootstrap            d-grid container with inline grid styles
    tailwind / none      grid-cols/grid-rows/gap + col-start/col-span classes
    tailwind / shadcn    Tailwind classes on <Card> components
    tailwind / mui       <Box sx> container, <Paper> items (8px spacing unit)
    tailwind / chakra    <Grid>/<GridItem> props (4px spacing unit)
    tailwind / antd      inline-styled div with <Card> items
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple, Union

from ..editor.data_model import CSSFormat, GridConfig, GridItem, UIFramework
from ..settings.editor_settings import (
    CHAKRA_SPACING_PX, MUI_SPACING_PX, TAILWIND_SPACING_PX,
)

logger = logging.getLogger(__name__)

DEFAULT_CONTAINER_CLASS = "grid-container"


@dataclass(frozen=True)
class GeneratedCode:
    """Rendered output: markup (HTML/JSX) and style (CSS or setup notes)."""
    markup: str
    style: str


# ---------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------

def format_number(value: Union[int, float]) -> str:
    """Render a number without a trailing .0 when it is integral."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_spacing_units(pixels: Union[int, float], base: int) -> int:
    """Convert pixels to a spacing-scale unit, rounding halves up."""
    return int(math.floor(pixels / base + 0.5))


def _span_sizes(item: GridItem) -> Tuple[int, int]:
    col_span = item.column_end - item.column_start
    row_span = item.row_end - item.row_start
    if col_span < 1 or row_span < 1:
        logger.warning("Item %s has a non-positive span (%d x %d), clamping to 1",
                       item.id, col_span, row_span)
    return max(col_span, 1), max(row_span, 1)


def _line_ranges(item: GridItem) -> Tuple[str, str]:
    end_col = max(item.column_end, item.column_start + 1)
    end_row = max(item.row_end, item.row_start + 1)
    if (end_col, end_row) != (item.column_end, item.row_end):
        logger.warning("Item %s has a non-positive span, clamping end lines", item.id)
    return (f"{item.column_start} / {end_col}", f"{item.row_start} / {end_row}")


def tailwind_position_classes(item: GridItem) -> str:
    col_span, row_span = _span_sizes(item)
    return (f"col-start-{item.column_start} col-span-{col_span} "
            f"row-start-{item.row_start} row-span-{row_span}")


def tailwind_grid_classes(config: GridConfig) -> str:
    if config.use_uniform_gap:
        gap_class = f"gap-{to_spacing_units(config.gap, TAILWIND_SPACING_PX)}"
    else:
        gap_class = (f"gap-x-{to_spacing_units(config.column_gap, TAILWIND_SPACING_PX)} "
                     f"gap-y-{to_spacing_units(config.row_gap, TAILWIND_SPACING_PX)}")
    return f"grid grid-cols-{config.columns} grid-rows-{config.rows} {gap_class}"


# ---------------------------------------------------------------
# Writers
# ---------------------------------------------------------------

class GridCodeWriter(ABC):
    """Abstract base for dialect writers."""

    @abstractmethod
    def format_name(self) -> str: ...

    @abstractmethod
    def write_item(self, item: GridItem, index: int) -> str:
        """Return the markup block for one item (without leading newline)."""
        ...

    @abstractmethod
    def open_container(self, config: GridConfig, container_class: str) -> str: ...

    @abstractmethod
    def close_container(self) -> str: ...

    @abstractmethod
    def write_style(self, config: GridConfig, items: Sequence[GridItem],
                    container_class: str) -> str: ...

    def write(self, config: GridConfig, items: Sequence[GridItem],
              container_class: str = DEFAULT_CONTAINER_CLASS) -> GeneratedCode:
        parts: List[str] = [self.open_container(config, container_class)]
        for index, item in enumerate(items):
            parts.append("\n  " + self.write_item(item, index))
        parts.append("\n" + self.close_container())
        return GeneratedCode(
            markup="".join(parts),
            style=self.write_style(config, items, container_class),
        )


class VanillaCSSWriter(GridCodeWriter):
    """Plain HTML with one CSS rule per item."""

    def format_name(self) -> str:
        return "vanilla"

    @staticmethod
    def item_class(index: int) -> str:
        return f"grid-item-{index + 1}"

    def open_container(self, config: GridConfig, container_class: str) -> str:
        return f'<div class="{container_class}">'

    def write_item(self, item: GridItem, index: int) -> str:
        return f'<div class="{self.item_class(index)}">{item.label}</div>'

    def close_container(self) -> str:
        return "</div>"

    def write_style(self, config: GridConfig, items: Sequence[GridItem],
                    container_class: str) -> str:
        if config.use_uniform_gap:
            gap = f"{format_number(config.gap)}px"
        else:
            gap = f"{format_number(config.row_gap)}px {format_number(config.column_gap)}px"

        rules = [
            f".{container_class} {{\n"
            f"  display: grid;\n"
            f"  grid-template-columns: repeat({config.columns}, 1fr);\n"
            f"  grid-template-rows: repeat({config.rows}, 1fr);\n"
            f"  gap: {gap};\n"
            f"}}"
        ]
        for index, item in enumerate(items):
            column, row = _line_ranges(item)
            rules.append(
                f".{self.item_class(index)} {{\n"
                f"  grid-column: {column};\n"
                f"  grid-row: {row};\n"
                f"}}"
            )
        return "\n\n".join(rules)


BOOTSTRAP_STYLE_NOTE = """/* Bootstrap 5 with CSS Grid */
/* Make sure to include Bootstrap CSS in your project:
   <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/css/bootstrap.min.css" rel="stylesheet">
*/

/* d-grid enables CSS Grid display in Bootstrap 5 */"""


class BootstrapWriter(GridCodeWriter):
    """Bootstrap 5 d-grid with inline grid placement.

    Bootstrap's own grid is a 12-column flex system, so placement goes
    through inline CSS Grid styles. Always uses the uniform gap.
    """

    def format_name(self) -> str:
        return "bootstrap"

    def open_container(self, config: GridConfig, container_class: str) -> str:
        return (f'<div class="d-grid" style="grid-template-columns: repeat({config.columns}, 1fr); '
                f'grid-template-rows: repeat({config.rows}, 1fr); '
                f'gap: {format_number(config.gap)}px;">')

    def write_item(self, item: GridItem, index: int) -> str:
        column, row = _line_ranges(item)
        return f'<div style="grid-column: {column}; grid-row: {row};">{item.label}</div>'

    def close_container(self) -> str:
        return "</div>"

    def write_style(self, config, items, container_class) -> str:
        return BOOTSTRAP_STYLE_NOTE


class TailwindWriter(GridCodeWriter):
    """Tailwind utility classes on plain divs."""

    def format_name(self) -> str:
        return "tailwind"

    def open_container(self, config: GridConfig, container_class: str) -> str:
        return f'<div class="{tailwind_grid_classes(config)}">'

    def write_item(self, item: GridItem, index: int) -> str:
        return f'<div class="{tailwind_position_classes(item)}">{item.label}</div>'

    def close_container(self) -> str:
        return "</div>"

    def write_style(self, config, items, container_class) -> str:
        return ("/* Tailwind CSS - No additional CSS needed */\n"
                "/* Make sure Tailwind CSS is configured in your project */")


class ShadcnWriter(GridCodeWriter):
    """shadcn/ui Card components placed with Tailwind classes."""

    def format_name(self) -> str:
        return "tailwind/shadcn"

    def open_container(self, config: GridConfig, container_class: str) -> str:
        return ("{/* shadcn/ui with Tailwind Grid */}\n"
                f'<div className="{tailwind_grid_classes(config)}">')

    def write_item(self, item: GridItem, index: int) -> str:
        return (f'<Card className="{tailwind_position_classes(item)}">\n'
                f'    <CardContent className="p-4">\n'
                f'      {item.label}\n'
                f'    </CardContent>\n'
                f'  </Card>')

    def close_container(self) -> str:
        return "</div>"

    def write_style(self, config, items, container_class) -> str:
        return ("// Import shadcn/ui components\n"
                'import { Card, CardContent } from "@/components/ui/card"\n'
                "\n"
                "// No additional CSS needed with Tailwind")


class MUIWriter(GridCodeWriter):
    """Material UI Box/Paper with sx grid props (spacing unit = 8px)."""

    def format_name(self) -> str:
        return "tailwind/mui"

    def open_container(self, config: GridConfig, container_class: str) -> str:
        gap = to_spacing_units(config.gap, MUI_SPACING_PX)
        return ("{/* Material UI with CSS Grid */}\n"
                "<Box\n"
                "  sx={{\n"
                "    display: 'grid',\n"
                f"    gridTemplateColumns: 'repeat({config.columns}, 1fr)',\n"
                f"    gridTemplateRows: 'repeat({config.rows}, 1fr)',\n"
                f"    gap: {gap},\n"
                "  }}\n"
                ">")

    def write_item(self, item: GridItem, index: int) -> str:
        column, row = _line_ranges(item)
        return ("<Paper\n"
                "    sx={{\n"
                f"      gridColumn: '{column}',\n"
                f"      gridRow: '{row}',\n"
                "      p: 2,\n"
                "    }}\n"
                "  >\n"
                f"    {item.label}\n"
                "  </Paper>")

    def close_container(self) -> str:
        return "</Box>"

    def write_style(self, config, items, container_class) -> str:
        return ("// Import MUI components\n"
                "import Box from '@mui/material/Box';\n"
                "import Paper from '@mui/material/Paper';\n"
                "\n"
                "// No additional CSS needed with MUI")


class ChakraWriter(GridCodeWriter):
    """Chakra UI Grid/GridItem props (spacing unit = 4px)."""

    def format_name(self) -> str:
        return "tailwind/chakra"

    def open_container(self, config: GridConfig, container_class: str) -> str:
        gap = to_spacing_units(config.gap, CHAKRA_SPACING_PX)
        return ("{/* Chakra UI Grid */}\n"
                "<Grid\n"
                f'  templateColumns="repeat({config.columns}, 1fr)"\n'
                f'  templateRows="repeat({config.rows}, 1fr)"\n'
                f"  gap={{{gap}}}\n"
                ">")

    def write_item(self, item: GridItem, index: int) -> str:
        col_span, row_span = _span_sizes(item)
        return (f"<GridItem colStart={{{item.column_start}}} "
                f"colEnd={{{item.column_start + col_span}}} "
                f"rowStart={{{item.row_start}}} "
                f"rowEnd={{{item.row_start + row_span}}}>\n"
                '    <Box p={4} bg="gray.100">\n'
                f"      {item.label}\n"
                "    </Box>\n"
                "  </GridItem>")

    def close_container(self) -> str:
        return "</Grid>"

    def write_style(self, config, items, container_class) -> str:
        return ("// Import Chakra UI components\n"
                "import { Grid, GridItem, Box } from '@chakra-ui/react'\n"
                "\n"
                "// No additional CSS needed with Chakra UI")


class AntDesignWriter(GridCodeWriter):
    """Ant Design Cards in an inline-styled CSS Grid (gap in px)."""

    def format_name(self) -> str:
        return "tailwind/antd"

    def open_container(self, config: GridConfig, container_class: str) -> str:
        return ("{/* Ant Design with CSS Grid */}\n"
                "<div\n"
                "  style={{\n"
                "    display: 'grid',\n"
                f"    gridTemplateColumns: 'repeat({config.columns}, 1fr)',\n"
                f"    gridTemplateRows: 'repeat({config.rows}, 1fr)',\n"
                f"    gap: {format_number(config.gap)},\n"
                "  }}\n"
                ">")

    def write_item(self, item: GridItem, index: int) -> str:
        column, row = _line_ranges(item)
        return ("<Card\n"
                "    style={{\n"
                f"      gridColumn: '{column}',\n"
                f"      gridRow: '{row}',\n"
                "    }}\n"
                "  >\n"
                f"    {item.label}\n"
                "  </Card>")

    def close_container(self) -> str:
        return "</div>"

    def write_style(self, config, items, container_class) -> str:
        return ("// Import Ant Design components\n"
                "import { Card } from 'antd';\n"
                "\n"
                "// No additional CSS needed - using inline CSS Grid styles")


# ---------------------------------------------------------------
# Dialect dispatch
# ---------------------------------------------------------------

def _build_writer_table() -> Dict[Tuple[CSSFormat, UIFramework], GridCodeWriter]:
    vanilla = VanillaCSSWriter()
    bootstrap = BootstrapWriter()
    tailwind = {
        UIFramework.NONE: TailwindWriter(),
        UIFramework.SHADCN: ShadcnWriter(),
        UIFramework.MUI: MUIWriter(),
        UIFramework.CHAKRA: ChakraWriter(),
        UIFramework.ANTD: AntDesignWriter(),
    }

    table: Dict[Tuple[CSSFormat, UIFramework], GridCodeWriter] = {}
    for framework in UIFramework:
        table[(CSSFormat.VANILLA, framework)] = vanilla
        table[(CSSFormat.BOOTSTRAP, framework)] = bootstrap
        table[(CSSFormat.TAILWIND, framework)] = tailwind[framework]
    return table


WRITERS = _build_writer_table()


def get_writer(css_format: Union[CSSFormat, str],
               ui_framework: Union[UIFramework, str] = UIFramework.NONE) -> GridCodeWriter:
    """Look up the writer for a dialect.

    Raises:
        ValueError: If a string does not name a known format or framework
    """
    return WRITERS[(CSSFormat(css_format), UIFramework(ui_framework))]


def generate_code(config: GridConfig, items: Sequence[GridItem],
                  css_format: Union[CSSFormat, str] = CSSFormat.VANILLA,
                  ui_framework: Union[UIFramework, str] = UIFramework.NONE,
                  container_class: str = DEFAULT_CONTAINER_CLASS) -> GeneratedCode:
    """Render a grid into the chosen dialect.

    Args:
        config: Grid structure
        items: Items in display order
        css_format: vanilla, bootstrap or tailwind
        ui_framework: Component wrapper (tailwind only; ignored otherwise)
        container_class: Container class name (vanilla only)

    Returns:
        GeneratedCode with markup and style strings
    """
    writer = get_writer(css_format, ui_framework)
    code = writer.write(config, items, container_class or DEFAULT_CONTAINER_CLASS)
    logger.debug("Generated %s output for %d items", writer.format_name(), len(items))
    return code
