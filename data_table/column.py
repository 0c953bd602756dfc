"""
Column configuration for a data table.
"""

from typing import Any, Optional, Union

from constants import DEFAULT_SORT_TYPE

from .form_state import FormState
from .formatters import (
    CellFormatter,
    DefaultCellFormatter,
    DefaultHeaderFormatter,
    HeaderFormatter,
)


class Column:
    """
    Immutable configuration for one table column.

    Values are matched to a column through ``key``: either a key of a keyed
    row, or a name in the table's field names for positional rows. Build
    columns through ``ColumnBuilder`` to have the arguments validated.

    Args:
        key: Key matching this column to row data (unique within a table)
        label: Header text
        sortable: False, or a sort type such as "numeric" or "alphanumeric"
            used as a CSS class by the client-side sorter (True means
            "alphanumeric")
        searchable: Whether a search input is shown for this column
        header_formatter: Formats the header; defaults to bold text
        cell_formatter: Formats each cell; defaults to the raw value
        css: Extra CSS class for this column's cells
        default_sort: "asc", "desc" or None, used while no sort is submitted
    """

    __slots__ = ('_key', '_label', '_sortable', '_searchable', '_header_formatter',
                 '_cell_formatter', '_css', '_default_sort')

    def __init__(self, key: str, label: str = '', sortable: Union[bool, str] = False,
                 searchable: bool = False,
                 header_formatter: Optional[HeaderFormatter] = None,
                 cell_formatter: Optional[CellFormatter] = None,
                 css: str = '', default_sort: Optional[str] = None):
        self._key = key
        self._label = label
        if sortable is True:
            sortable = DEFAULT_SORT_TYPE
        self._sortable = sortable or False
        self._searchable = bool(searchable)
        self._header_formatter = header_formatter or DefaultHeaderFormatter()
        self._cell_formatter = cell_formatter or DefaultCellFormatter()
        self._css = css or ''
        self._default_sort = default_sort

    @property
    def key(self) -> str:
        return self._key

    @property
    def label(self) -> str:
        return self._label

    @property
    def sortable(self) -> Union[bool, str]:
        return self._sortable

    @property
    def searchable(self) -> bool:
        return self._searchable

    @property
    def css(self) -> str:
        return self._css

    @property
    def default_sort(self) -> Optional[str]:
        return self._default_sort

    @property
    def header_formatter(self) -> HeaderFormatter:
        return self._header_formatter

    @property
    def cell_formatter(self) -> CellFormatter:
        return self._cell_formatter

    def get_display_header(self, form_name: str, column_key: str) -> str:
        """Returns HTML formatted column header."""
        return self._header_formatter.format(form_name, column_key, self._label)

    def get_display_data(self, form_name: str, column_key: str, value: Any, row_id: str,
                         state: Optional[FormState]) -> Any:
        """Returns HTML formatted version of ``value`` to print out."""
        return self._cell_formatter.format(form_name, column_key, value, row_id, state)

    def __repr__(self) -> str:
        return f"Column({self._key!r}, label={self._label!r}, sortable={self._sortable!r})"
