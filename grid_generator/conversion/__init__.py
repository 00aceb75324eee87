"""
Grid to code conversion package.

Renders a grid config and item list into markup/style for each
supported output dialect.
"""

from .format_writers import (
    GeneratedCode,
    GridCodeWriter,
    VanillaCSSWriter,
    BootstrapWriter,
    TailwindWriter,
    ShadcnWriter,
    MUIWriter,
    ChakraWriter,
    AntDesignWriter,
    WRITERS,
    get_writer,
    generate_code,
    to_spacing_units,
)

__all__ = [
    'GeneratedCode',
    'GridCodeWriter',
    'VanillaCSSWriter',
    'BootstrapWriter',
    'TailwindWriter',
    'ShadcnWriter',
    'MUIWriter',
    'ChakraWriter',
    'AntDesignWriter',
    'WRITERS',
    'get_writer',
    'generate_code',
    'to_spacing_units',
]
