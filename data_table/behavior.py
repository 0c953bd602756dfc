"""
Client actions for buttons, header clicks and inputs.

A behavior turns ``(form_name, form_action, form_method)`` into a
JSON-serializable action description. The description is attached to an
element's ``data-form-action`` attribute and interpreted by the client
runtime; no script is ever emitted inline.

Every variant is listed in ``BehaviorKind``; ``action`` is abstract on the
base class so a new variant cannot be added without producing a description.
"""

import html
import json
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from constants import (
    ACTION_ATTRIBUTE,
    FLASH_SUFFIX,
    FORM_METHODS,
    HEIGHT_KEY,
    ONLY_DISPLAY_FORM_KEY,
    ONLY_VALIDATE_KEY,
    RESET_KEY,
    TRUE_VALUE,
    WIDTH_KEY,
)
from error_handler import ConfigurationError, require_params, require_string

from .field_path import encode


class BehaviorKind(Enum):
    """The closed set of action descriptions the client runtime understands."""
    NONE = 'none'
    SUBMIT = 'submit'
    VALIDATE_THEN_SUBMIT = 'validate_then_submit'
    REFRESH = 'refresh'
    REFRESH_IMAGE = 'refresh_image'
    CLEAR_SORT_THEN_REFRESH = 'clear_sort_then_refresh'
    RESET = 'reset'
    CUSTOM = 'custom'


def normalize_method(form_method: Any) -> str:
    """Lower-case and validate an HTTP method token."""
    if not isinstance(form_method, str) or form_method.lower() not in FORM_METHODS:
        raise ConfigurationError(f"Unknown method '{form_method}'")
    return form_method.lower()


def flash_name(form_name: str) -> str:
    return form_name + FLASH_SUFFIX


def action_attribute(description: Any) -> str:
    """
    Render an action description as a ``data-form-action`` attribute.

    Strings (from CustomBehavior) are emitted as-is; anything else is JSON.
    """
    if isinstance(description, str):
        payload = description
    else:
        payload = json.dumps(description)
    return f"{ACTION_ATTRIBUTE}='{html.escape(payload, quote=True)}'"


class DataTableBehavior(ABC):
    """Base class for all behaviors."""

    kind: BehaviorKind

    @abstractmethod
    def action(self, form_name: str, form_action: Optional[str], form_method: str) -> Any:
        """
        Args:
            form_name: Name of form
            form_action: URL to submit to or refresh from
            form_method: Method of the form, GET or POST

        Returns:
            Action description for the client runtime
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NoBehavior(DataTableBehavior):
    """Inert action: the client swallows the event."""

    kind = BehaviorKind.NONE

    def action(self, form_name, form_action, form_method):
        return {'action': self.kind.value}


class SubmitBehavior(DataTableBehavior):
    """
    Set attributes on the form and values on hidden fields, then submit.

    Parameters set here must already exist as hidden fields on the form
    (see HiddenWidget) for the client to set them.

    Args:
        params: Hidden field name -> value
        form_params: Form attribute name -> value (e.g. ``target``)
    """

    kind = BehaviorKind.SUBMIT

    def __init__(self, params: Optional[Mapping[str, Any]] = None,
                 form_params: Optional[Mapping[str, Any]] = None):
        self.params = require_params(params, 'params')
        self.form_params = require_params(form_params, 'form_params')

    def action(self, form_name, form_action, form_method):
        form_method = normalize_method(form_method)
        if not form_action:
            raise ConfigurationError("form_action is empty")
        form_params = dict(self.form_params)
        form_params['action'] = form_action
        form_params['method'] = form_method
        form_params.setdefault('target', '')

        return {
            'action': self.kind.value,
            'form_params': form_params,
            'params': dict(self.params),
        }


class ValidateThenSubmitBehavior(DataTableBehavior):
    """
    Post the form with the validate-only flag to ``validation_url`` first.

    An empty response means the form is valid and is submitted; anything
    else is shown in the form's flash region.
    """

    kind = BehaviorKind.VALIDATE_THEN_SUBMIT

    def __init__(self, validation_url: str):
        self.validation_url = require_string(validation_url, 'validation_url')

    def action(self, form_name, form_action, form_method):
        form_method = normalize_method(form_method)
        validate_name = encode(form_name, [ONLY_VALIDATE_KEY])

        return {
            'action': self.kind.value,
            'form_action': form_action,
            'form_method': form_method,
            'validation_url': self.validation_url,
            'flash_name': flash_name(form_name),
            'params': {validate_name: TRUE_VALUE},
        }


class RefreshBehavior(DataTableBehavior):
    """
    Fetch the display-only rendering of the form and replace it in place.

    Args:
        extra_params: Field name -> value sent along with the form, e.g. the
            next sort state of a column header
    """

    kind = BehaviorKind.REFRESH

    def __init__(self, extra_params: Optional[Mapping[str, Any]] = None):
        self.extra_params = require_params(extra_params, 'extra_params')

    def _params(self, form_name: str) -> Dict[str, Any]:
        params = dict(self.extra_params)
        params[encode(form_name, [ONLY_DISPLAY_FORM_KEY])] = TRUE_VALUE
        return params

    def action(self, form_name, form_action, form_method):
        form_method = normalize_method(form_method)
        return {
            'action': self.kind.value,
            'form_action': form_action,
            'form_method': form_method,
            'form_name': form_name,
            'flash_name': flash_name(form_name),
            'params': self._params(form_name),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.extra_params!r})"


class RefreshImageBehavior(RefreshBehavior):
    """
    Refresh into ``div`` with the div's height and width sent along.

    Used for responses that carry an image sized to the region it lands in.
    ``div_overlay`` is the loading overlay shown while the request runs.
    """

    kind = BehaviorKind.REFRESH_IMAGE

    def __init__(self, div: str, div_overlay: str, extra_params: Optional[Mapping[str, Any]] = None):
        super().__init__(extra_params)
        self.div = require_string(div, 'div')
        self.div_overlay = require_string(div_overlay, 'div_overlay')

    def action(self, form_name, form_action, form_method):
        form_method = normalize_method(form_method)
        return {
            'action': self.kind.value,
            'form_action': form_action,
            'form_method': form_method,
            'div_name': self.div,
            'div_overlay_name': self.div_overlay,
            'height_name': encode(form_name, [HEIGHT_KEY]),
            'width_name': encode(form_name, [WIDTH_KEY]),
            'params': self._params(form_name),
        }


class ClearSortThenRefreshBehavior(RefreshBehavior):
    """Clear the sort fields client-side and refresh with the reset flag."""

    kind = BehaviorKind.CLEAR_SORT_THEN_REFRESH

    def _params(self, form_name: str) -> Dict[str, Any]:
        params = super()._params(form_name)
        params[encode(form_name, [RESET_KEY])] = TRUE_VALUE
        return params


class ResetBehavior(DataTableBehavior):
    """Refresh and ignore the previous state."""

    kind = BehaviorKind.RESET

    def action(self, form_name, form_action, form_method):
        reset_name = encode(form_name, [RESET_KEY])
        refresh = RefreshBehavior({reset_name: TRUE_VALUE})
        return refresh.action(form_name, form_action, form_method)


class CustomBehavior(DataTableBehavior):
    """Return the caller's action description verbatim. Nothing is validated."""

    kind = BehaviorKind.CUSTOM

    def __init__(self, action: Any):
        self.custom_action = action

    def action(self, form_name, form_action, form_method):
        return self.custom_action
