"""
A table of data which is also part of a form.

Columns are displayed in order and matched with row data by key: directly
when a row is keyed, or through the table's field names when a row is
positional. Sorting and searching state is round-tripped through the form
when the table has a remote URL, and left to the client-side sorter and
filter otherwise.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from constants import (
    HEADER_ROW_CLASS,
    METHOD_POST,
    PLACEMENT_BOTTOM,
    PLACEMENT_TOP,
    ROW_BASE_CLASS,
    ROW_CLASS_EVEN,
    ROW_CLASS_ODD,
    SEARCHING_STATE_KEY,
    SORT_COLUMN_KEY,
    SORT_INDICATORS,
    SORTING_STATE_KEY,
    TABLE_AUTOSORT_CLASS,
    TABLE_STRIPE_CLASSES,
)
from error_handler import StructuralRenderError
from logging_helper import LoggingHelper, LogType

from .behavior import RefreshBehavior, action_attribute
from .button import Button
from .column import Column
from .field_path import encode
from .form_state import FormState, next_sorting_state
from .widgets import display_hidden, escape_attr

logger = LoggingHelper.get_logger(LogType.MAIN)

Rows = Union[Mapping[Any, Any], Sequence[Any]]


def _is_record(row: Any) -> bool:
    if isinstance(row, Mapping):
        return True
    return isinstance(row, Sequence) and not isinstance(row, (str, bytes))


def _cell_html(value: Any) -> str:
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


def field_indexes(field_names: Optional[Sequence[str]]) -> Dict[str, int]:
    return {field_name: position for position, field_name in enumerate(field_names or ())}


def row_value(row: Any, column_key: str, indexes: Mapping[str, int]) -> Any:
    """
    Read one column's value from a keyed or positional row.

    A keyed row is read by column key first; otherwise the column's position
    in the field names is used, for mapping and sequence rows alike.

    Returns:
        The value, or None when the column has no data in the row

    Raises:
        StructuralRenderError: if the row is shorter than the field names require
    """
    if isinstance(row, Mapping) and column_key in row:
        return row[column_key]
    if column_key in indexes:
        index = indexes[column_key]
        if index >= len(row):
            raise StructuralRenderError(
                f"Tried to get index {index} of row with {len(row)} columns"
            )
        if isinstance(row, Mapping):
            return row.get(index)
        return row[index]
    # a column with no data is a common case, e.g. the row selection checkbox
    return None


def active_sort(columns: Sequence[Column], state: Optional[FormState]):
    """
    Find the one column a table is sorted by.

    A submitted sort wins over default sorts. When several sortable columns
    carry a submitted sort, the clicked column (``form[sort_column]``) wins,
    else the one submitted last. Without a submitted sort, the first column
    with a default sort is active.

    Returns:
        Tuple of (column, 'asc' or 'desc'), or (None, None) when nothing
        is sorted
    """
    sortable = [column for column in columns if column.sortable]
    if state is not None:
        submitted = [column for column in sortable if state.get_sorting_state(column.key)]
        if submitted:
            chosen = next((column for column in submitted if column.key == state.sort_column), None)
            if chosen is None:
                order = list(state.sorting_state)
                chosen = max(submitted, key=lambda column: order.index(column.key))
            return chosen, state.get_sorting_state(chosen.key)
    for column in sortable:
        if column.default_sort:
            return column, column.default_sort
    return None, None


class Table:
    """
    Ordered columns plus the rows, buttons and remote URL of one table.

    Args:
        columns: Columns in display order (keys unique)
        rows: Mapping of row id to row data, or a sequence of rows whose ids
            are their positions. Each row is a mapping keyed by column key or
            a positional sequence matched against ``field_names``.
        field_names: Column keys of positional rows, in row order
        buttons: Buttons rendered above or below the table
        remote: URL sort and search requests are sent to, or None for a
            purely client-side table
        row_classes: Row id to CSS class, overriding the default striping
    """

    def __init__(self, columns: Sequence[Column], rows: Optional[Rows] = None,
                 field_names: Optional[Sequence[str]] = None,
                 buttons: Optional[Sequence[Button]] = None,
                 remote: Optional[str] = None,
                 row_classes: Optional[Mapping[Any, str]] = None):
        self._columns = tuple(columns)
        self._rows = rows if rows is not None else {}
        self._field_names = tuple(field_names or ())
        self._buttons = tuple(buttons or ())
        self._remote = remote or None
        self._row_classes = {str(k): v for k, v in (row_classes or {}).items()}

    @property
    def columns(self):
        return self._columns

    @property
    def rows(self):
        return self._rows

    @property
    def field_names(self):
        return self._field_names

    @property
    def buttons(self):
        return self._buttons

    @property
    def remote(self) -> Optional[str]:
        return self._remote

    @property
    def row_classes(self) -> Dict[str, str]:
        return dict(self._row_classes)

    def is_sortable(self) -> bool:
        return any(column.sortable for column in self._columns)

    def is_searchable(self) -> bool:
        return any(column.searchable for column in self._columns)

    def render(self, form_name: str, state: Optional[FormState] = None,
               form_method: str = METHOD_POST) -> str:
        """
        Returns HTML for the table, including its buttons.

        This is also what an asynchronous refresh puts back into the page.

        Raises:
            StructuralRenderError: if a row is not a record, or a positional
                row is shorter than the field names require
        """
        logger.debug(f"Rendering table for form '{form_name}' with {len(self._rows)} rows")

        indexes = field_indexes(self._field_names)

        parts: List[str] = []
        parts.extend(self._display_buttons(PLACEMENT_TOP, form_name, form_method, state))

        if self.is_sortable():
            parts.append(f"<table class='{TABLE_AUTOSORT_CLASS} {TABLE_STRIPE_CLASSES}'>")
        else:
            parts.append(f"<table class='{TABLE_STRIPE_CLASSES}'>")

        parts.append("<thead>")
        parts.append(self._header_row(form_name, form_method, state))
        if self.is_searchable():
            parts.append(self._search_row(form_name, state))
        parts.append("</thead>")

        parts.append("<tbody>")
        parts.extend(self._body_rows(form_name, state, indexes))
        parts.append("</tbody>")
        parts.append("</table>")

        parts.extend(self._display_buttons(PLACEMENT_BOTTOM, form_name, form_method, state))
        return ''.join(parts)

    def current_sorting_state(self, column: Column, state: Optional[FormState]) -> Optional[str]:
        """The sort of a column if it is the active sort column, else None."""
        active_column, direction = active_sort(self._columns, state)
        if active_column is not None and active_column.key == column.key:
            return direction
        return None

    def _display_buttons(self, placement: str, form_name: str, form_method: str,
                         state: Optional[FormState]) -> List[str]:
        return [
            button.display(form_name, form_method, state, default_action=self._remote)
            for button in self._buttons
            if button.placement == placement
        ]

    def _header_row(self, form_name: str, form_method: str, state: Optional[FormState]) -> str:
        cells = [f"<tr class='{HEADER_ROW_CLASS}'>"]
        for column in self._columns:
            column_key = column.key
            column_class = f"column_{escape_attr(column_key)}"
            remote_sortable = bool(column.sortable) and self._remote is not None

            if remote_sortable:
                cells.append(f"<th class='{column_class}'>")
                current = self.current_sorting_state(column, state)
                if state is not None:
                    cells.append(display_hidden(form_name, [SORTING_STATE_KEY, column_key], current or ''))
                if current in SORT_INDICATORS:
                    cells.append(SORT_INDICATORS[current])

                next_state = next_sorting_state(current)
                sort_name = encode(form_name, [SORTING_STATE_KEY, column_key])
                behavior = RefreshBehavior({
                    sort_name: next_state,
                    encode(form_name, [SORT_COLUMN_KEY]): column_key,
                })
                description = behavior.action(form_name, self._remote, form_method)
                cells.append(f"<a {action_attribute(description)}>")
                cells.append(_cell_html(column.get_display_header(form_name, column_key)))
                cells.append("</a>")
            elif column.sortable:
                sort_type = escape_attr(column.sortable)
                cells.append(
                    f"<th class='{column_class} table-sortable:{sort_type} table-sortable' "
                    f"title='Click to sort'>"
                )
                cells.append(_cell_html(column.get_display_header(form_name, column_key)))
            else:
                cells.append(f"<th class='{column_class}'>")
                cells.append(_cell_html(column.get_display_header(form_name, column_key)))
            cells.append("</th>")
        cells.append("</tr>")
        return ''.join(cells)

    def _search_row(self, form_name: str, state: Optional[FormState]) -> str:
        cells = [f"<tr class='{HEADER_ROW_CLASS}'>"]
        for column in self._columns:
            cells.append("<th>")
            if column.searchable:
                if self._remote is None:
                    cells.append("<input size='8' data-table-filter='true' />")
                else:
                    previous = state.get_searching_state(column.key) if state is not None else None
                    name = encode(form_name, [SEARCHING_STATE_KEY, column.key])
                    cells.append(
                        f"<input size='8' name='{escape_attr(name)}' value='{escape_attr(previous or '')}' />"
                    )
            cells.append("</th>")
        cells.append("</tr>")
        return ''.join(cells)

    def _row_items(self):
        if isinstance(self._rows, Mapping):
            return self._rows.items()
        return enumerate(self._rows)

    def _body_rows(self, form_name: str, state: Optional[FormState],
                   indexes: Dict[str, int]) -> List[str]:
        rows = []
        for row_count, (row_id, row) in enumerate(self._row_items()):
            if not _is_record(row):
                raise StructuralRenderError(
                    f"Each row in rows expected to be a mapping or sequence, got {type(row).__name__} "
                    f"for row '{row_id}'"
                )
            row_id = str(row_id)

            if row_id in self._row_classes:
                row_class = self._row_classes[row_id]
            elif row_count % 2 == 0:
                row_class = ROW_CLASS_EVEN
            else:
                row_class = ROW_CLASS_ODD

            cells = [f"<tr class='{ROW_BASE_CLASS} {escape_attr(row_class)}'>"]
            for column in self._columns:
                column_key = column.key
                value = row_value(row, column_key, indexes)
                css = f" {escape_attr(column.css)}" if column.css else ''
                cells.append(f"<td class='column_{escape_attr(column_key)}{css}'>")
                cells.append(_cell_html(column.get_display_data(form_name, column_key, value, row_id, state)))
                cells.append("</td>")
            cells.append("</tr>")
            rows.append(''.join(cells))
        return rows

    def __repr__(self) -> str:
        keys = [column.key for column in self._columns]
        return f"Table(columns={keys!r}, rows={len(self._rows)}, remote={self._remote!r})"
