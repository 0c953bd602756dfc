"""
Standalone search controls for a single column.

A SearchWidget sits above or below the tables of a form and writes into the
same ``form[search][column]`` field the table's own search row uses, so the
page sees one search state regardless of where the user typed.
"""

import html
from abc import ABC, abstractmethod
from typing import Any, Optional

from constants import (
    NUMERIC_SEARCH_LABELS,
    NUMERIC_SEARCH_TYPES,
    PLACEMENT_TOP,
    SEARCH_EQUAL,
    SEARCH_OPERATOR_KEY,
    SEARCHING_STATE_KEY,
    TEXT_SEARCH_TYPES,
)
from error_handler import ConfigurationError, require_string

from .behavior import RefreshBehavior
from .field_path import encode
from .form_state import FormState
from .widgets import Widget, display_textbox, escape_attr, require_placement


class SearchFormatter(ABC):
    """Renders the controls of one SearchWidget."""

    @abstractmethod
    def format(self, form_name: str, form_action: Optional[str], form_method: str,
               column_key: str, state: Optional[FormState], default_value: Any,
               label: str) -> str:
        """Returns HTML for the search controls of ``column_key``."""

    @staticmethod
    def _label(column_key: str, label: str) -> str:
        if not label:
            return ''
        return f"<label class='search-label column_{escape_attr(column_key)}'>{html.escape(label)}</label> "


class TextSearchFormatter(SearchFormatter):
    """A single text box; ``like`` is a substring match, ``rlike`` a regex."""

    def __init__(self, search_type: str):
        self.search_type = search_type

    def format(self, form_name, form_action, form_method, column_key, state, default_value, label):
        behavior = RefreshBehavior() if form_action else None
        textbox = display_textbox(form_name, [SEARCHING_STATE_KEY, column_key], form_action,
                                  form_method, behavior, default_value or '', state)
        return (
            f"<span class='search-widget' data-search-type='{self.search_type}'>"
            + self._label(column_key, label)
            + textbox
            + "</span>"
        )


class NumericSearchFormatter(SearchFormatter):
    """An operator select (``form[search_op][column]``) followed by a text box."""

    def format(self, form_name, form_action, form_method, column_key, state, default_value, label):
        current_op = state.get_search_operator(column_key) if state is not None else None
        current_op = current_op or SEARCH_EQUAL

        select_name = encode(form_name, [SEARCH_OPERATOR_KEY, column_key])
        options = []
        for op in NUMERIC_SEARCH_TYPES:
            selected = " selected='selected'" if op == current_op else ''
            options.append(
                f"<option value='{op}'{selected}>{html.escape(NUMERIC_SEARCH_LABELS[op])}</option>"
            )
        select = f"<select name='{escape_attr(select_name)}'>" + ''.join(options) + "</select>"

        textbox = display_textbox(form_name, [SEARCHING_STATE_KEY, column_key], None,
                                  form_method, None, default_value or '', state)
        return (
            "<span class='search-widget' data-search-type='numeric'>"
            + self._label(column_key, label)
            + select + " " + textbox
            + "</span>"
        )


def search_formatter_for(search_type: str) -> SearchFormatter:
    """Pick the formatter for a search type, rejecting unknown types."""
    if search_type in TEXT_SEARCH_TYPES:
        return TextSearchFormatter(search_type)
    if search_type in NUMERIC_SEARCH_TYPES:
        return NumericSearchFormatter()
    raise ConfigurationError(f"Unknown search type '{search_type}'")


class SearchWidget(Widget):
    """
    Search controls for one column, placed above or below the tables.

    Args:
        column_key: Column whose search state this widget edits
        search_type: One of like, rlike, gt, ge, lt, le, eq
        form_action: URL refreshed when the text box is submitted
        label: Optional label text
        default_value: Shown while nothing was submitted
        placement: "top" or "bottom"
    """

    def __init__(self, column_key: str, search_type: str, form_action: Optional[str] = None,
                 label: str = '', default_value: Any = '', placement: str = PLACEMENT_TOP):
        self.column_key = require_string(column_key, 'column_key')
        self.search_type = search_type
        self.formatter = search_formatter_for(search_type)
        if form_action is not None:
            require_string(form_action, 'form_action', allow_empty=True)
        self.form_action = form_action
        self.label = require_string(label, 'label', allow_empty=True)
        self.default_value = default_value
        self.placement = require_placement(placement)

    def display(self, form_name: str, form_method: str, state: Optional[FormState]) -> str:
        return self.formatter.format(form_name, self.form_action, form_method, self.column_key,
                                     state, self.default_value, self.label)
