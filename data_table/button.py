"""
Buttons placed above or below a table.
"""

import html
from typing import Optional

from constants import PLACEMENT_TOP
from error_handler import ConfigurationError, require_string

from .behavior import DataTableBehavior, action_attribute
from .field_path import encode
from .form_state import FormState
from .widgets import Widget, escape_attr, require_placement


class Button(Widget):
    """
    A clickable element wired to a behavior.

    Args:
        text: Label shown on the button
        type: HTML button type ("submit", "button", "reset")
        name: Optional field name, qualified as ``form[name]``
        form_action: URL the behavior targets; falls back to the table's
            remote URL
        behavior: What happens on click; None leaves the browser default
        placement: "top" or "bottom"
    """

    def __init__(self, text: str = '', type: str = 'submit', name: str = '',
                 form_action: Optional[str] = None,
                 behavior: Optional[DataTableBehavior] = None,
                 placement: str = PLACEMENT_TOP):
        self.text = require_string(text, 'text', allow_empty=True)
        self.type = require_string(type, 'type')
        self.name = require_string(name, 'name', allow_empty=True)
        if form_action is not None:
            require_string(form_action, 'form_action', allow_empty=True)
        if behavior is not None and not isinstance(behavior, DataTableBehavior):
            raise ConfigurationError("behavior must be a DataTableBehavior")
        self.form_action = form_action
        self.behavior = behavior
        self.placement = require_placement(placement)

    def display(self, form_name: str, form_method: str, state: Optional[FormState],
                default_action: Optional[str] = None) -> str:
        attributes = [f"type='{escape_attr(self.type)}'"]
        if self.name:
            attributes.append(f"name='{escape_attr(encode(form_name, [self.name]))}'")
        if self.behavior is not None:
            form_action = self.form_action or default_action
            attributes.append(action_attribute(self.behavior.action(form_name, form_action, form_method)))
        return f"<button {' '.join(attributes)}>{html.escape(self.text)}</button>"

    def __repr__(self) -> str:
        return f"Button({self.text!r}, placement={self.placement!r}, behavior={self.behavior!r})"
