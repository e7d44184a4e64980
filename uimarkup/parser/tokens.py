"""Design-token rules for layout attributes.

Spacing follows a 4px grid (``spacing={1}`` is 4px, ``spacing={2}`` is 8px)
and grids always use twelve columns. Each rule is independent and only
applies when its attribute is present and numeric; strings and booleans pass
through untouched.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, List, Mapping

VALID_SPACING_VALUES = (0, 1, 2, 3, 4, 5, 6, 8, 10, 12, 16, 20, 24)
GRID_TYPE = "Grid"
GRID_COLUMNS = 12
MAX_COLUMN_SPAN = 12

_SCALE_TEXT = ", ".join(str(value) for value in VALID_SPACING_VALUES)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_integral(value: Real) -> bool:
    return isinstance(value, int) or (isinstance(value, float) and value.is_integer())


def _format(value: Real) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def design_token_violations(component_type: str, properties: Mapping[str, Any]) -> List[str]:
    """Return one message per broken rule, in a stable order."""
    violations: List[str] = []

    for key in ("spacing", "gap"):
        value = properties.get(key)
        if _is_number(value) and value not in VALID_SPACING_VALUES:
            violations.append(
                f"Invalid {key} value: {_format(value)}. Must be one of: {_SCALE_TEXT} "
                "(4px grid system)"
            )

    span = properties.get("gridColumnSpan")
    if _is_number(span) and (not _is_integral(span) or span < 1 or span > MAX_COLUMN_SPAN):
        violations.append(
            f"Invalid gridColumnSpan value: {_format(span)}. "
            f"Must be an integer between 1 and {MAX_COLUMN_SPAN}"
        )

    row_span = properties.get("gridRowSpan")
    if _is_number(row_span) and (not _is_integral(row_span) or row_span < 1):
        violations.append(
            f"Invalid gridRowSpan value: {_format(row_span)}. Must be a positive integer"
        )

    columns = properties.get("columns")
    if component_type == GRID_TYPE and _is_number(columns) and columns != GRID_COLUMNS:
        violations.append(
            f"Invalid Grid columns value: {_format(columns)}. "
            f"Grid must use columns={{{GRID_COLUMNS}}} ({GRID_COLUMNS}-column system)"
        )

    return violations


__all__ = [
    "VALID_SPACING_VALUES",
    "GRID_TYPE",
    "GRID_COLUMNS",
    "design_token_violations",
]
