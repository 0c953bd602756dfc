"""
Validating builders for columns, buttons, tables and forms.

Pages describe their tables through these builders instead of calling the
constructors directly: every setter returns the builder for chaining, and
``build()`` validates everything before handing back an immutable object.
Misuse raises ConfigurationError at build time, never at render time.

Usage:
    column = ColumnBuilder.create('city').label('City').sortable('alphanumeric').build()
    table = (TableBuilder.create()
             .columns([column])
             .rows({'rome': {'city': 'Rome'}})
             .remote('/cities')
             .build())
"""

from typing import Any, List, Mapping, Optional, Sequence, Union

from constants import DEFAULT_SORT_TYPE, METHOD_POST, PLACEMENT_TOP, PLACEMENTS, SORTING_STATES
from error_handler import ConfigurationError, require_string
from logging_helper import LoggingHelper, LogType

from .behavior import DataTableBehavior, normalize_method
from .button import Button
from .column import Column
from .form import DataForm
from .formatters import CellFormatter, HeaderFormatter
from .table import Table
from .widgets import Widget

logger = LoggingHelper.get_logger(LogType.MAIN)


class ColumnBuilder:
    """Builder for a single Column."""

    def __init__(self, key: str):
        self._key = key
        self._label: Optional[str] = None
        self._sortable: Union[bool, str] = False
        self._searchable = False
        self._header_formatter: Optional[HeaderFormatter] = None
        self._cell_formatter: Optional[CellFormatter] = None
        self._css = ''
        self._default_sort: Optional[str] = None

    @classmethod
    def create(cls, key: str) -> 'ColumnBuilder':
        return cls(key)

    def label(self, label: str) -> 'ColumnBuilder':
        self._label = label
        return self

    def sortable(self, sortable: Union[bool, str] = True) -> 'ColumnBuilder':
        """
        Mark the column sortable.

        Args:
            sortable: A sort type such as "numeric" (used as a CSS class), True
                for the default "alphanumeric", or False
        """
        self._sortable = sortable
        return self

    def searchable(self, searchable: bool = True) -> 'ColumnBuilder':
        self._searchable = searchable
        return self

    def header_formatter(self, formatter: HeaderFormatter) -> 'ColumnBuilder':
        self._header_formatter = formatter
        return self

    def cell_formatter(self, formatter: CellFormatter) -> 'ColumnBuilder':
        self._cell_formatter = formatter
        return self

    def css(self, css: str) -> 'ColumnBuilder':
        self._css = css
        return self

    def default_sort(self, default_sort: Optional[str]) -> 'ColumnBuilder':
        self._default_sort = default_sort
        return self

    def build(self) -> Column:
        """
        Raises:
            ConfigurationError: If any setting is invalid
        """
        require_string(self._key, 'column key')
        label = self._key if self._label is None else self._label
        require_string(label, 'label', allow_empty=True)

        sortable = self._sortable
        if sortable is True:
            sortable = DEFAULT_SORT_TYPE
        elif sortable is not False:
            require_string(sortable, 'sortable')

        if not isinstance(self._searchable, bool):
            raise ConfigurationError("searchable must be a bool")
        if self._header_formatter is not None and not callable(getattr(self._header_formatter, 'format', None)):
            raise ConfigurationError("header_formatter must have a format() method")
        if self._cell_formatter is not None and not callable(getattr(self._cell_formatter, 'format', None)):
            raise ConfigurationError("cell_formatter must have a format() method")
        require_string(self._css, 'css', allow_empty=True)
        if self._default_sort is not None and (
                not isinstance(self._default_sort, str) or self._default_sort not in SORTING_STATES):
            raise ConfigurationError("default_sort must be 'asc', 'desc' or None")

        return Column(
            self._key,
            label=label,
            sortable=sortable,
            searchable=self._searchable,
            header_formatter=self._header_formatter,
            cell_formatter=self._cell_formatter,
            css=self._css,
            default_sort=self._default_sort,
        )


class ButtonBuilder:
    """Builder for a Button."""

    def __init__(self):
        self._text = ''
        self._type = 'submit'
        self._name = ''
        self._form_action: Optional[str] = None
        self._behavior: Optional[DataTableBehavior] = None
        self._placement = PLACEMENT_TOP

    @classmethod
    def create(cls) -> 'ButtonBuilder':
        return cls()

    def text(self, text: str) -> 'ButtonBuilder':
        self._text = text
        return self

    def type(self, button_type: str) -> 'ButtonBuilder':
        self._type = button_type
        return self

    def name(self, name: str) -> 'ButtonBuilder':
        self._name = name
        return self

    def form_action(self, form_action: str) -> 'ButtonBuilder':
        self._form_action = form_action
        return self

    def behavior(self, behavior: DataTableBehavior) -> 'ButtonBuilder':
        self._behavior = behavior
        return self

    def placement(self, placement: str) -> 'ButtonBuilder':
        self._placement = placement
        return self

    def build(self) -> Button:
        if self._placement not in PLACEMENTS:
            raise ConfigurationError("placement must be 'top' or 'bottom'")
        return Button(
            text=self._text,
            type=self._type,
            name=self._name,
            form_action=self._form_action,
            behavior=self._behavior,
            placement=self._placement,
        )


class TableBuilder:
    """Builder for a Table."""

    def __init__(self):
        self._columns: List[Column] = []
        self._rows: Any = {}
        self._field_names: List[str] = []
        self._buttons: List[Button] = []
        self._remote: Optional[str] = None
        self._row_classes: Mapping[Any, str] = {}

    @classmethod
    def create(cls) -> 'TableBuilder':
        return cls()

    def columns(self, columns: Sequence[Column]) -> 'TableBuilder':
        self._columns = list(columns)
        return self

    def rows(self, rows: Any) -> 'TableBuilder':
        """
        Args:
            rows: Mapping of row id to row, or a sequence of rows. Rows are
                checked while rendering, since they are often supplied late.
        """
        self._rows = rows
        return self

    def field_names(self, field_names: Sequence[str]) -> 'TableBuilder':
        self._field_names = list(field_names)
        return self

    def buttons(self, buttons: Sequence[Button]) -> 'TableBuilder':
        self._buttons = list(buttons)
        return self

    def remote(self, remote: Optional[str]) -> 'TableBuilder':
        self._remote = remote
        return self

    def row_classes(self, row_classes: Mapping[Any, str]) -> 'TableBuilder':
        self._row_classes = row_classes
        return self

    def validate(self) -> None:
        """
        Raises:
            ConfigurationError: If validation fails
        """
        seen = set()
        for column in self._columns:
            if not isinstance(column, Column):
                raise ConfigurationError("Each item in columns must be a Column")
            if column.key in seen:
                raise ConfigurationError(f"Duplicate column key '{column.key}'")
            seen.add(column.key)

        for field_name in self._field_names:
            require_string(field_name, 'field name')

        for button in self._buttons:
            if not isinstance(button, Button):
                raise ConfigurationError("Each item in buttons must be a Button")

        if self._remote is not None:
            require_string(self._remote, 'remote')

        if not isinstance(self._rows, (Mapping, Sequence)) or isinstance(self._rows, (str, bytes)):
            raise ConfigurationError("rows must be a mapping or a sequence")

        if not isinstance(self._row_classes, Mapping):
            raise ConfigurationError("row_classes must be a mapping")
        for css_class in self._row_classes.values():
            require_string(css_class, 'row class')

    def build(self) -> Table:
        self.validate()
        logger.debug(
            f"Built table with columns {[column.key for column in self._columns]}, "
            f"remote={self._remote!r}"
        )
        return Table(
            self._columns,
            rows=self._rows,
            field_names=self._field_names,
            buttons=self._buttons,
            remote=self._remote,
            row_classes=self._row_classes,
        )


class FormBuilder:
    """Builder for a DataForm."""

    def __init__(self, name: str):
        self._name = name
        self._tables: List[Table] = []
        self._widgets: List[Widget] = []
        self._remote: Optional[str] = None
        self._method = METHOD_POST

    @classmethod
    def create(cls, name: str) -> 'FormBuilder':
        return cls(name)

    def tables(self, tables: Sequence[Table]) -> 'FormBuilder':
        self._tables = list(tables)
        return self

    def widgets(self, widgets: Sequence[Widget]) -> 'FormBuilder':
        self._widgets = list(widgets)
        return self

    def remote(self, remote: Optional[str]) -> 'FormBuilder':
        self._remote = remote
        return self

    def method(self, method: str) -> 'FormBuilder':
        self._method = method
        return self

    def build(self) -> DataForm:
        return DataForm(
            self._name,
            tables=self._tables,
            widgets=self._widgets,
            remote=self._remote,
            method=normalize_method(self._method),
        )
