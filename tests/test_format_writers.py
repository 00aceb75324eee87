"""
Tests for the dialect code writers.
"""

import pytest

from grid_generator.conversion import (
    WRITERS, GeneratedCode, generate_code, get_writer, to_spacing_units,
)
from grid_generator.conversion.format_writers import (
    BootstrapWriter, ChakraWriter, TailwindWriter, VanillaCSSWriter, format_number,
)
from grid_generator.editor import CSSFormat, GridConfig, UIFramework

from conftest import make_item

CONFIG_3X3 = GridConfig(columns=3, rows=3)
ALL_DIALECTS = sorted(WRITERS, key=lambda key: (key[0].value, key[1].value))


def _dialect_id(key):
    return f"{key[0].value}-{key[1].value}"


# ---------------------------------------------------------------
# Vanilla
# ---------------------------------------------------------------

def test_vanilla_single_item_scenario(editor):
    """
    Scenario: 3x3 grid, uniform gap 16, click cell (1,1).
    Expectation: container rule with repeat(3, 1fr) and one item rule at 1 / 2.
    """
    editor.click_cell(1, 1)
    code = generate_code(editor.config, editor.items)

    assert code.markup == (
        '<div class="grid-container">\n'
        '  <div class="grid-item-1">1</div>\n'
        '</div>'
    )
    assert code.style == (
        ".grid-container {\n"
        "  display: grid;\n"
        "  grid-template-columns: repeat(3, 1fr);\n"
        "  grid-template-rows: repeat(3, 1fr);\n"
        "  gap: 16px;\n"
        "}\n"
        "\n"
        ".grid-item-1 {\n"
        "  grid-column: 1 / 2;\n"
        "  grid-row: 1 / 2;\n"
        "}"
    )


def test_vanilla_items_follow_list_order():
    items = [make_item("b", 2, 4, 2, 4, "B"), make_item("a", 1, 2, 1, 2, "A")]
    code = generate_code(CONFIG_3X3, items, CSSFormat.VANILLA)

    assert code.markup.index(">B<") < code.markup.index(">A<")
    assert ".grid-item-1 {\n  grid-column: 2 / 4;\n  grid-row: 2 / 4;\n}" in code.style
    assert ".grid-item-2 {\n  grid-column: 1 / 2;\n  grid-row: 1 / 2;\n}" in code.style


def test_vanilla_custom_container_class():
    code = generate_code(CONFIG_3X3, [], CSSFormat.VANILLA, container_class="layout")
    assert code.markup.startswith('<div class="layout">')
    assert code.style.startswith(".layout {")


def test_vanilla_axis_gaps_when_not_uniform():
    config = GridConfig(columns=2, rows=2, gap=16, column_gap=24, row_gap=8, use_uniform_gap=False)
    code = generate_code(config, [], CSSFormat.VANILLA)
    assert "  gap: 8px 24px;\n" in code.style


# ---------------------------------------------------------------
# Bootstrap
# ---------------------------------------------------------------

def test_bootstrap_inline_grid_styles():
    items = [make_item("a", 1, 3, 2, 3, "Hero")]
    code = generate_code(CONFIG_3X3, items, CSSFormat.BOOTSTRAP)

    assert code.markup == (
        '<div class="d-grid" style="grid-template-columns: repeat(3, 1fr); '
        'grid-template-rows: repeat(3, 1fr); gap: 16px;">\n'
        '  <div style="grid-column: 1 / 3; grid-row: 2 / 3;">Hero</div>\n'
        '</div>'
    )
    assert code.style.startswith("/* Bootstrap 5 with CSS Grid */")


def test_bootstrap_uses_uniform_gap_only():
    config = GridConfig(columns=2, rows=2, gap=12, column_gap=40, row_gap=4, use_uniform_gap=False)
    code = generate_code(config, [], CSSFormat.BOOTSTRAP)
    assert "gap: 12px;" in code.markup
    assert "40px" not in code.markup


# ---------------------------------------------------------------
# Tailwind family
# ---------------------------------------------------------------

def test_tailwind_container_and_span_classes():
    """
    Scenario: tailwind/none, uniform gap 16, item spanning columns 1-3.
    Expectation: gap-4 on the container and col-start-1 col-span-2 on the item.
    """
    items = [make_item("a", 1, 3, 1, 2, "1")]
    code = generate_code(CONFIG_3X3, items, CSSFormat.TAILWIND, UIFramework.NONE)

    assert "grid-cols-3 grid-rows-3 gap-4" in code.markup
    assert "col-start-1 col-span-2" in code.markup
    assert code.markup == (
        '<div class="grid grid-cols-3 grid-rows-3 gap-4">\n'
        '  <div class="col-start-1 col-span-2 row-start-1 row-span-1">1</div>\n'
        '</div>'
    )
    assert code.style.startswith("/* Tailwind CSS")


def test_tailwind_axis_gaps_when_not_uniform():
    config = GridConfig(columns=4, rows=2, column_gap=24, row_gap=8, use_uniform_gap=False)
    code = generate_code(config, [], CSSFormat.TAILWIND)
    assert 'class="grid grid-cols-4 grid-rows-2 gap-x-6 gap-y-2"' in code.markup


def test_shadcn_wraps_items_in_cards():
    items = [make_item("a", 2, 3, 1, 3, "Nav")]
    code = generate_code(CONFIG_3X3, items, "tailwind", "shadcn")

    assert code.markup == (
        "{/* shadcn/ui with Tailwind Grid */}\n"
        '<div className="grid grid-cols-3 grid-rows-3 gap-4">\n'
        '  <Card className="col-start-2 col-span-1 row-start-1 row-span-2">\n'
        '    <CardContent className="p-4">\n'
        '      Nav\n'
        '    </CardContent>\n'
        '  </Card>\n'
        '</div>'
    )
    assert 'import { Card, CardContent } from "@/components/ui/card"' in code.style


def test_mui_uses_eight_pixel_units():
    items = [make_item("a", 1, 2, 1, 3, "Side")]
    code = generate_code(CONFIG_3X3, items, CSSFormat.TAILWIND, UIFramework.MUI)

    assert "    gap: 2,\n" in code.markup
    assert "      gridColumn: '1 / 2',\n      gridRow: '1 / 3',\n" in code.markup
    assert code.markup.endswith("</Paper>\n</Box>")
    assert "import Box from '@mui/material/Box';" in code.style


def test_chakra_uses_four_pixel_units_and_line_props():
    items = [make_item("a", 2, 4, 1, 3, "Main")]
    code = generate_code(GridConfig(columns=3, rows=3).with_gap(24), items,
                         CSSFormat.TAILWIND, UIFramework.CHAKRA)

    assert "  gap={6}\n" in code.markup
    assert "<GridItem colStart={2} colEnd={4} rowStart={1} rowEnd={3}>" in code.markup
    assert code.markup.endswith("</GridItem>\n</Grid>")


def test_antd_uses_raw_pixel_gap():
    items = [make_item("a", 1, 4, 3, 4, "Footer")]
    code = generate_code(GridConfig(columns=3, rows=3).with_gap(20), items,
                         CSSFormat.TAILWIND, UIFramework.ANTD)

    assert "    gap: 20,\n" in code.markup
    assert "      gridColumn: '1 / 4',\n      gridRow: '3 / 4',\n" in code.markup
    assert "import { Card } from 'antd';" in code.style


def test_spacing_units_round_half_up():
    assert to_spacing_units(16, 4) == 4
    assert to_spacing_units(16, 8) == 2
    assert to_spacing_units(12, 8) == 2
    assert to_spacing_units(4, 8) == 1
    assert to_spacing_units(0, 8) == 0
    assert to_spacing_units(6, 4) == 2


def test_format_number_drops_integral_fraction():
    assert format_number(16) == "16"
    assert format_number(16.0) == "16"
    assert format_number(16.5) == "16.5"


# ---------------------------------------------------------------
# Dispatch and shared properties
# ---------------------------------------------------------------

def test_dispatch_table_covers_every_dialect():
    assert len(WRITERS) == len(CSSFormat) * len(UIFramework)
    assert isinstance(get_writer("vanilla", "mui"), VanillaCSSWriter)
    assert isinstance(get_writer(CSSFormat.BOOTSTRAP, UIFramework.CHAKRA), BootstrapWriter)
    assert isinstance(get_writer("tailwind"), TailwindWriter)
    assert isinstance(get_writer("tailwind", "chakra"), ChakraWriter)


def test_framework_ignored_outside_tailwind():
    items = [make_item("a", 1, 2, 1, 2, "1")]
    assert (generate_code(CONFIG_3X3, items, "vanilla", "antd") ==
            generate_code(CONFIG_3X3, items, "vanilla"))


@pytest.mark.parametrize("css_format, ui_framework", [("less", "none"), ("tailwind", "bulma")])
def test_unknown_dialect_raises(css_format, ui_framework):
    with pytest.raises(ValueError):
        generate_code(CONFIG_3X3, [], css_format, ui_framework)


@pytest.mark.parametrize("dialect", ALL_DIALECTS, ids=_dialect_id)
def test_empty_list_renders_container_only(dialect):
    css_format, ui_framework = dialect
    writer = get_writer(css_format, ui_framework)
    code = generate_code(CONFIG_3X3, [], css_format, ui_framework)

    assert isinstance(code, GeneratedCode)
    assert code.markup and code.style
    assert code.markup == (writer.open_container(CONFIG_3X3, "grid-container") + "\n" +
                           writer.close_container())


@pytest.mark.parametrize("dialect", ALL_DIALECTS, ids=_dialect_id)
def test_generation_is_deterministic(dialect):
    items = [make_item("a", 1, 3, 1, 2, "1"), make_item("b", 3, 4, 1, 4, "2")]
    config = GridConfig(columns=3, rows=3, column_gap=8, row_gap=12, use_uniform_gap=False)
    first = generate_code(config, items, *dialect)
    second = generate_code(config, list(items), *dialect)
    assert first == second


@pytest.mark.parametrize("dialect", ALL_DIALECTS, ids=_dialect_id)
def test_clear_all_matches_empty_output(editor, dialect):
    """
    Scenario: five items placed, then cleared.
    Expectation: output is byte-identical to rendering an empty list.
    """
    for col, row in [(1, 1), (2, 1), (3, 1), (1, 2), (2, 2)]:
        editor.click_cell(col, row)
    assert len(editor.items) == 5

    editor.clear_all()
    assert editor.items == ()
    assert (generate_code(editor.config, editor.items, *dialect) ==
            generate_code(editor.config, [], *dialect))


def test_inverted_span_is_clamped_in_output():
    items = [make_item("bad", 3, 2, 2, 2, "X")]
    tailwind = generate_code(CONFIG_3X3, items, CSSFormat.TAILWIND)
    vanilla = generate_code(CONFIG_3X3, items, CSSFormat.VANILLA)

    assert "col-span-1" in tailwind.markup
    assert "row-span-1" in tailwind.markup
    assert "grid-column: 3 / 4;" in vanilla.style
    assert "grid-row: 2 / 3;" in vanilla.style
