"""
Validation for grid configurations and item lists.

Usage:
    from grid_generator.validation import validate_layout

    result = validate_layout(config, items)
    if result.failed:
        for issue in result.errors:
            print(issue)
"""

from .core import Severity, ValidationIssue, ValidationResult, ValidationError
from .grid_checks import validate_grid_config, validate_items, validate_layout

__all__ = [
    'Severity',
    'ValidationIssue',
    'ValidationResult',
    'ValidationError',
    'validate_grid_config',
    'validate_items',
    'validate_layout',
]
