"""
HTML emitters for the form controls a table or form can carry.

Every widget follows one contract: ``display(form_name, form_method, state)``
returns HTML and ``placement`` says whether it goes above or below the
tables of its form.
"""

import html
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from constants import PLACEMENT_TOP, PLACEMENTS
from error_handler import ConfigurationError, require_string

from .behavior import DataTableBehavior, action_attribute
from .field_path import encode
from .form_state import FormState


def escape_attr(value: Any) -> str:
    """Escape a value for use inside a quoted HTML attribute."""
    if value is None:
        return ''
    return html.escape(str(value), quote=True)


def require_placement(placement: Any) -> str:
    if placement not in PLACEMENTS:
        raise ConfigurationError("placement must be 'top' or 'bottom'")
    return placement


def display_textbox(form_name: str, name_segments: Sequence[Any], form_action: Optional[str],
                    form_method: str, behavior: Optional[DataTableBehavior],
                    default_text: Any, state: Optional[FormState] = None) -> str:
    """
    Render a text input named ``form_name[seg1][seg2]...``.

    The value is the previously submitted one when the state has it, else
    ``default_text``. When both a target URL and a behavior are given, the
    behavior's action description is attached for the client runtime.
    """
    attributes = ''
    if form_action and behavior is not None:
        attributes += ' ' + action_attribute(behavior.action(form_name, form_action, form_method))

    text = default_text
    if name_segments and state is not None:
        previous = state.find_item(name_segments)
        if previous is not None:
            text = previous

    if name_segments:
        attributes = f' name="{escape_attr(encode(form_name, name_segments))}"' + attributes

    return f'<input type="text"{attributes} value="{escape_attr(text)}" />'


def display_hidden(form_name: str, name_segments: Sequence[Any], value: Any) -> str:
    qualified_name = encode(form_name, name_segments)
    return f'<input type="hidden" name="{escape_attr(qualified_name)}" value="{escape_attr(value)}" />'


def display_checkbox(form_name: str, name_segments: Sequence[Any], value: Any, checked: bool) -> str:
    qualified_name = encode(form_name, name_segments)
    checked_attr = ' checked="checked"' if checked else ''
    return (
        f'<input type="checkbox" name="{escape_attr(qualified_name)}" '
        f'value="{escape_attr(value)}"{checked_attr} />'
    )


class Widget(ABC):
    """Base class for anything rendered alongside the tables of a form."""

    placement = PLACEMENT_TOP

    @abstractmethod
    def display(self, form_name: str, form_method: str, state: Optional[FormState]) -> str:
        """Returns HTML for the widget."""


class HiddenWidget(Widget):
    """
    A hidden input ``form[name]``.

    Submit behaviors can only set parameters that already exist as hidden
    fields on the form, so pages declare them with this widget.
    """

    def __init__(self, name: str, value: Any = ''):
        self.name = require_string(name, 'name')
        self.value = '' if value is None else value

    def display(self, form_name: str, form_method: str, state: Optional[FormState]) -> str:
        return display_hidden(form_name, [self.name], self.value)


class TextboxWidget(Widget):
    """A free-standing text input ``form[name]`` pre-filled from the state."""

    def __init__(self, text: str = '', name: str = '', form_action: Optional[str] = None,
                 behavior: Optional[DataTableBehavior] = None, placement: str = PLACEMENT_TOP):
        self.text = require_string(text, 'text', allow_empty=True)
        self.name = require_string(name, 'name', allow_empty=True)
        if form_action is not None:
            require_string(form_action, 'form_action', allow_empty=True)
        if behavior is not None and not isinstance(behavior, DataTableBehavior):
            raise ConfigurationError("behavior must be a DataTableBehavior")
        self.form_action = form_action
        self.behavior = behavior
        self.placement = require_placement(placement)

    def display(self, form_name: str, form_method: str, state: Optional[FormState]) -> str:
        segments = [self.name] if self.name else []
        return display_textbox(form_name, segments, self.form_action, form_method,
                               self.behavior, self.text, state)
