"""
Header and cell formatters for table columns.

A column never builds its own markup: it hands the label to a header
formatter and each cell value to a cell formatter. Anything with a matching
``format`` method works; the classes below are the stock implementations.
"""

import html
from abc import ABC, abstractmethod
from typing import Any, Optional

from .form_state import FormState
from .sanitization import sanitize_html
from .widgets import display_checkbox, display_textbox


class HeaderFormatter(ABC):
    @abstractmethod
    def format(self, form_name: str, column_key: str, label: str) -> str:
        """
        Args:
            form_name: Name of HTML form
            column_key: Column key
            label: Text to display

        Returns:
            HTML for the header cell content
        """


class CellFormatter(ABC):
    @abstractmethod
    def format(self, form_name: str, column_key: str, value: Any, row_id: str,
               state: Optional[FormState]) -> Any:
        """
        Args:
            form_name: Name of HTML form
            column_key: Column key
            value: Data for the cell, None when the row has none
            row_id: ID of the cell's row
            state: State of the form, to keep previously submitted values

        Returns:
            HTML for the cell content
        """


class DefaultHeaderFormatter(HeaderFormatter):
    def format(self, form_name, column_key, label):
        return f"<strong>{html.escape(str(label))}</strong>"


class DefaultCellFormatter(CellFormatter):
    """Pass the value through untouched. Escaping is the caller's job."""

    def format(self, form_name, column_key, value, row_id, state):
        return value


class TextboxCellFormatter(CellFormatter):
    """A text input per row, named ``form[column][row_id]``."""

    def format(self, form_name, column_key, value, row_id, state):
        return display_textbox(form_name, [column_key, row_id], None, 'post', None, value, state)


class CheckboxCellFormatter(CellFormatter):
    """
    A selection checkbox per row, named ``form[column][row_id]``.

    The submitted value is the cell value, or the row id when the column has
    no backing data. The box stays checked across refreshes.
    """

    def format(self, form_name, column_key, value, row_id, state):
        checkbox_value = row_id if value is None else value
        checked = state is not None and state.find_item([column_key, row_id]) is not None
        return display_checkbox(form_name, [column_key, row_id], checkbox_value, checked)


class HtmlCellFormatter(CellFormatter):
    """Render cell values as markup, restricted to a safe subset of tags."""

    def format(self, form_name, column_key, value, row_id, state):
        return sanitize_html(value)


class EscapedCellFormatter(CellFormatter):
    """Render cell values as plain text."""

    def format(self, form_name, column_key, value, row_id, state):
        if value is None:
            return ''
        return html.escape(str(value))
