"""
Helper functions for filtering rows by the submitted search state.

Like sorting, searching a remote table happens before the table is built:
the table only echoes the search terms back into its inputs.
"""
import re
from typing import Any, Mapping, Optional, Sequence

from constants import (
    NUMERIC_SEARCH_TYPES,
    SEARCH_EQUAL,
    SEARCH_GREATER_OR_EQUAL,
    SEARCH_GREATER_THAN,
    SEARCH_LESS_OR_EQUAL,
    SEARCH_LESS_THAN,
    SEARCH_LIKE,
    SEARCH_RLIKE,
)
from data_table import Column, FormState
from error_handler import ConfigurationError
from logging_helper import LoggingHelper, LogType

from .sorting_helpers import row_value

logger = LoggingHelper.get_logger(LogType.MAIN)

_COMPARISONS = {
    SEARCH_GREATER_THAN: lambda value, term: value > term,
    SEARCH_GREATER_OR_EQUAL: lambda value, term: value >= term,
    SEARCH_LESS_THAN: lambda value, term: value < term,
    SEARCH_LESS_OR_EQUAL: lambda value, term: value <= term,
    SEARCH_EQUAL: lambda value, term: value == term,
}


def _to_number(value: Any) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def matches(value: Any, term: str, search_type: str) -> bool:
    """
    Check one cell value against one search term.

    Args:
        value: Cell value (None matches nothing)
        term: Submitted search term
        search_type: like (case-sensitive substring), rlike (regular
            expression) or a numeric operator (gt, ge, lt, le, eq)

    Returns:
        True if the value matches
    """
    if value is None:
        return False

    if search_type == SEARCH_LIKE:
        return term in str(value)

    if search_type == SEARCH_RLIKE:
        try:
            return re.search(term, str(value)) is not None
        except re.error:
            # An invalid pattern is searched for literally
            return term in str(value)

    number = _to_number(value)
    wanted = _to_number(term)
    if number is None or wanted is None:
        return False
    return _COMPARISONS[search_type](number, wanted)


def search_rows(rows, state: Optional[FormState], columns: Sequence[Column],
                search_type: str = SEARCH_LIKE,
                field_names: Optional[Sequence[str]] = None):
    """
    Keep the rows matching every non-empty search term of the form.

    Args:
        rows: Mapping of row id to row, or a sequence of rows
        state: Submitted state; None or no terms keeps every row
        columns: Table columns; only searchable ones are filtered on
        search_type: How terms are matched. For numeric types the operator
            submitted in ``form[search_op][column]`` wins when present.
        field_names: Column keys of positional rows

    Returns:
        A new dict (row ids kept) or list, in the original order

    Raises:
        ConfigurationError: If search_type is unknown
    """
    if search_type not in (SEARCH_LIKE, SEARCH_RLIKE) and search_type not in NUMERIC_SEARCH_TYPES:
        raise ConfigurationError(f"Unknown search type '{search_type}'")

    terms = []
    if state is not None:
        for column in columns:
            if not column.searchable:
                continue
            term = state.get_searching_state(column.key)
            if not term:
                continue
            column_type = search_type
            if search_type in NUMERIC_SEARCH_TYPES:
                column_type = state.get_search_operator(column.key) or search_type
            terms.append((column.key, term, column_type))

    is_mapping = isinstance(rows, Mapping)
    items = list(rows.items()) if is_mapping else list(enumerate(rows))

    if terms:
        items = [
            (row_id, row) for row_id, row in items
            if all(matches(row_value(row, key, field_names), term, column_type)
                   for key, term, column_type in terms)
        ]
        logger.debug(f"Search {terms} kept {len(items)} rows")

    if is_mapping:
        return dict(items)
    return [row for _, row in items]
