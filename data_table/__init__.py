"""
Data tables rendered as part of an HTML form.

Sort and search state round-trips through nested field names
(``form[sort][column]``); a FormState reads it back from each submission and
the Table renders against it. All names are re-exported here.
"""

# Field names and submitted state
from .field_path import (
    encode,
    decode,
    split_field_name,
    to_payload
)
from .form_state import (
    FormState,
    next_sorting_state
)

# Behaviors
from .behavior import (
    BehaviorKind,
    DataTableBehavior,
    NoBehavior,
    SubmitBehavior,
    ValidateThenSubmitBehavior,
    RefreshBehavior,
    RefreshImageBehavior,
    ClearSortThenRefreshBehavior,
    ResetBehavior,
    CustomBehavior,
    action_attribute
)

# Formatters and columns
from .formatters import (
    HeaderFormatter,
    CellFormatter,
    DefaultHeaderFormatter,
    DefaultCellFormatter,
    TextboxCellFormatter,
    CheckboxCellFormatter,
    HtmlCellFormatter,
    EscapedCellFormatter
)
from .column import Column

# Widgets
from .widgets import (
    Widget,
    HiddenWidget,
    TextboxWidget
)
from .search_widget import (
    SearchWidget,
    TextSearchFormatter,
    NumericSearchFormatter
)
from .button import Button

# Tables and forms
from .table import Table
from .form import DataForm
from .builders import (
    ColumnBuilder,
    ButtonBuilder,
    TableBuilder,
    FormBuilder
)

# Sanitization
from .sanitization import sanitize_html

__all__ = [
    # Field names and submitted state
    'encode',
    'decode',
    'split_field_name',
    'to_payload',
    'FormState',
    'next_sorting_state',
    # Behaviors
    'BehaviorKind',
    'DataTableBehavior',
    'NoBehavior',
    'SubmitBehavior',
    'ValidateThenSubmitBehavior',
    'RefreshBehavior',
    'RefreshImageBehavior',
    'ClearSortThenRefreshBehavior',
    'ResetBehavior',
    'CustomBehavior',
    'action_attribute',
    # Formatters and columns
    'HeaderFormatter',
    'CellFormatter',
    'DefaultHeaderFormatter',
    'DefaultCellFormatter',
    'TextboxCellFormatter',
    'CheckboxCellFormatter',
    'HtmlCellFormatter',
    'EscapedCellFormatter',
    'Column',
    # Widgets
    'Widget',
    'HiddenWidget',
    'TextboxWidget',
    'SearchWidget',
    'TextSearchFormatter',
    'NumericSearchFormatter',
    'Button',
    # Tables and forms
    'Table',
    'DataForm',
    'ColumnBuilder',
    'ButtonBuilder',
    'TableBuilder',
    'FormBuilder',
    # Sanitization
    'sanitize_html',
]
