"""
An HTML form holding one or more data tables and their widgets.
"""

from typing import Optional, Sequence

from constants import METHOD_POST, PLACEMENT_BOTTOM, PLACEMENT_TOP
from error_handler import ConfigurationError, require_string

from .behavior import flash_name, normalize_method
from .form_state import FormState
from .table import Table
from .widgets import Widget, escape_attr


class DataForm:
    """
    A named form wrapping tables and widgets.

    ``display`` renders the whole fragment for a full page: the flash region
    where validation messages land, and a div named after the form that an
    asynchronous refresh replaces. ``display_form`` renders just the
    ``<form>`` element, which is the answer to a display-only request.

    Args:
        name: Form name; prefixes every field name
        tables: Tables rendered in order
        widgets: Hidden fields, text boxes, search widgets and buttons
        remote: URL the form submits to
        method: "get" or "post"
    """

    def __init__(self, name: str, tables: Sequence[Table] = (), widgets: Sequence[Widget] = (),
                 remote: Optional[str] = None, method: str = METHOD_POST):
        self.name = require_string(name, 'name')
        if remote is not None:
            require_string(remote, 'remote', allow_empty=True)
        self.remote = remote
        self.method = normalize_method(method)
        for table in tables:
            if not isinstance(table, Table):
                raise ConfigurationError("Each item in tables must be a Table")
        for widget in widgets:
            if not isinstance(widget, Widget):
                raise ConfigurationError("Each item in widgets must be a Widget")
        self.tables = tuple(tables)
        self.widgets = tuple(widgets)

    def state_from_payload(self, payload) -> FormState:
        """Build the FormState of this form from a nested payload."""
        return FormState(self.name, payload)

    def _display_widgets(self, placement: str, state: Optional[FormState]) -> str:
        return ''.join(
            widget.display(self.name, self.method, state)
            for widget in self.widgets
            if widget.placement == placement
        )

    def display_form(self, state: Optional[FormState] = None) -> str:
        """Returns the ``<form>`` element with its widgets and tables."""
        action = f" action='{escape_attr(self.remote)}'" if self.remote else ''
        parts = [f"<form name='{escape_attr(self.name)}' method='{self.method}'{action}>"]
        parts.append(self._display_widgets(PLACEMENT_TOP, state))
        for table in self.tables:
            parts.append(table.render(self.name, state, self.method))
        parts.append(self._display_widgets(PLACEMENT_BOTTOM, state))
        parts.append("</form>")
        return ''.join(parts)

    def display(self, state: Optional[FormState] = None) -> str:
        """Returns the flash region and the form wrapped in its refresh target."""
        return (
            f"<div class='data-form-flash' id='{escape_attr(flash_name(self.name))}'></div>"
            f"<div class='data-form' id='{escape_attr(self.name)}'>"
            + self.display_form(state)
            + "</div>"
        )

    def __repr__(self) -> str:
        return f"DataForm({self.name!r}, tables={len(self.tables)}, method={self.method!r})"
