"""
Checks for grid configurations and item lists.

Rules:
- GRID-001 (FAIL): columns/rows must be positive integers
- GRID-002 (FAIL): gaps must be non-negative
- GRID-003 (WARN): values outside the editor's control ranges
- ITEM-001 (FAIL): item span is empty or inverted
- ITEM-002 (WARN): item span reaches outside the grid
- ITEM-003 (WARN): two items share a cell
- ITEM-004 (FAIL): duplicate item id
"""

import logging
from typing import Sequence

from ..editor.data_model import GridConfig, GridItem
from ..editor.geometry import is_span_valid
from ..settings.editor_settings import COLUMN_RANGE, GAP_RANGE, ROW_RANGE
from .core import Severity, ValidationIssue, ValidationResult

logger = logging.getLogger(__name__)


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def validate_grid_config(config: GridConfig) -> ValidationResult:
    result = ValidationResult()

    for name in ("columns", "rows"):
        value = getattr(config, name)
        if not _is_positive_int(value):
            result.add_issue(ValidationIssue(
                severity=Severity.FAIL,
                code="GRID-001",
                message=f"{name} must be a positive integer, got {value!r}",
                remediation=f"Set {name} to at least 1",
            ))

    for name in ("gap", "column_gap", "row_gap"):
        value = getattr(config, name)
        if value < 0:
            result.add_issue(ValidationIssue(
                severity=Severity.FAIL,
                code="GRID-002",
                message=f"{name} must be non-negative, got {value!r}",
                remediation=f"Set {name} to 0 or more",
            ))

    if result.passed:
        for name, (low, high) in (("columns", COLUMN_RANGE), ("rows", ROW_RANGE)):
            value = getattr(config, name)
            if not low <= value <= high:
                result.add_issue(ValidationIssue(
                    severity=Severity.WARN,
                    code="GRID-003",
                    message=f"{name}={value} is outside the editor range {low}-{high}",
                ))
        low, high = GAP_RANGE
        for name in ("gap", "column_gap", "row_gap"):
            value = getattr(config, name)
            if value > high:
                result.add_issue(ValidationIssue(
                    severity=Severity.WARN,
                    code="GRID-003",
                    message=f"{name}={value}px is outside the editor range {low}-{high}px",
                ))

    return result


def validate_items(items: Sequence[GridItem], config: GridConfig) -> ValidationResult:
    result = ValidationResult()
    seen_ids = set()

    for item in items:
        if item.id in seen_ids:
            result.add_issue(ValidationIssue(
                severity=Severity.FAIL,
                code="ITEM-004",
                message=f"Duplicate item id {item.id!r}",
                item_id=item.id,
            ))
        seen_ids.add(item.id)

        span = item.span
        if span.width < 1 or span.height < 1:
            result.add_issue(ValidationIssue(
                severity=Severity.FAIL,
                code="ITEM-001",
                message=(f"Item {item.label!r} has an empty span "
                         f"{span.column_start}/{span.column_end} x {span.row_start}/{span.row_end}"),
                remediation="Ends must be greater than starts",
                item_id=item.id,
            ))
        elif not is_span_valid(span, config.columns, config.rows):
            result.add_issue(ValidationIssue(
                severity=Severity.WARN,
                code="ITEM-002",
                message=f"Item {item.label!r} extends outside the {config.columns}x{config.rows} grid",
                remediation="Move or resize the item, or enlarge the grid",
                item_id=item.id,
            ))

    claimed = {}
    for item in items:
        span = item.span
        for cell in span.cells():
            owner = claimed.get(cell)
            if owner is None:
                claimed[cell] = item
                continue
            result.add_issue(ValidationIssue(
                severity=Severity.WARN,
                code="ITEM-003",
                message=f"Items {owner.label!r} and {item.label!r} overlap at ({cell.col}, {cell.row})",
                item_id=item.id,
            ))
            break

    return result


def validate_layout(config: GridConfig, items: Sequence[GridItem]) -> ValidationResult:
    """Run config and item checks together."""
    result = validate_grid_config(config)
    if result.passed:
        result.merge(validate_items(items, config))
    for issue in result.issues:
        if issue.severity != Severity.INFO:
            logger.debug(issue.format())
    return result
