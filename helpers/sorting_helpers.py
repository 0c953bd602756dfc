"""
Unified sorting helper for remote tables.

A remote table never reorders its rows; the page sorts them from the
FormState before building the table, and the table shows the indicator.
"""
from typing import Any, Mapping, Optional, Sequence

from constants import SORTING_STATE_DESC
from data_table import Column, FormState
from data_table.table import active_sort, field_indexes
from data_table.table import row_value as lookup_row_value
from logging_helper import LoggingHelper, LogType

logger = LoggingHelper.get_logger(LogType.MAIN)

NUMERIC_SORT_TYPE = 'numeric'


def row_value(row: Any, column_key: str, field_names: Optional[Sequence[str]] = None) -> Any:
    """
    Read one column's value from a row, the same way the table renders it.

    Returns None when the row has no data for the column.

    Raises:
        StructuralRenderError: if a row is shorter than the field names require
    """
    return lookup_row_value(row, column_key, field_indexes(field_names))


def _numeric(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def _text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, str):
        return value.lower()
    return str(value)


def sort_rows(rows, state: Optional[FormState], columns: Sequence[Column],
              field_names: Optional[Sequence[str]] = None):
    """
    Sort table rows by the active sort of the form.

    Args:
        rows: Mapping of row id to row, or a sequence of rows
        state: Submitted state (None sorts by default sorts only)
        columns: Table columns; a column whose sortable type is "numeric"
            compares numerically, everything else case-insensitively
        field_names: Column keys of positional rows

    Returns:
        A new dict (row ids kept) or list, in sorted order. Without an
        active sort the rows come back in their original order.
    """
    column, direction = active_sort(columns, state)
    is_mapping = isinstance(rows, Mapping)
    items = list(rows.items()) if is_mapping else list(enumerate(rows))

    if column is not None:
        convert = _numeric if column.sortable == NUMERIC_SORT_TYPE else _text
        items.sort(
            key=lambda item: convert(row_value(item[1], column.key, field_names)),
            reverse=(direction == SORTING_STATE_DESC)
        )
        logger.debug(f"Sorted {len(items)} rows by '{column.key}' {direction}")

    if is_mapping:
        return dict(items)
    return [row for _, row in items]
