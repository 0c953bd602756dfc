"""
Parsed snapshot of one submitted payload for one named form.

A FormState is built once per request from the raw payload and then only
read. Tables use it to pre-fill search inputs, to carry the current sort in
hidden fields and to work out what the next header click should request.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

from constants import (
    FALSE_VALUES,
    NUMERIC_SEARCH_TYPES,
    ONLY_DISPLAY_FORM_KEY,
    ONLY_VALIDATE_KEY,
    RESET_KEY,
    SEARCH_OPERATOR_KEY,
    SEARCHING_STATE_KEY,
    SORT_COLUMN_KEY,
    SORTING_STATE_ASC,
    SORTING_STATE_DESC,
    SORTING_STATES,
    SORTING_STATE_KEY,
)
from logging_helper import LoggingHelper, LogType

from .field_path import decode

logger = LoggingHelper.get_logger(LogType.MAIN)

_EMPTY = MappingProxyType({})


def next_sorting_state(current: Optional[str]) -> str:
    """
    Two-state sort toggle: ``asc`` becomes ``desc``, anything else ``asc``.
    """
    if current == SORTING_STATE_ASC:
        return SORTING_STATE_DESC
    return SORTING_STATE_ASC


def _is_truthy(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() not in FALSE_VALUES


class FormState:
    """
    Read-only view of the sort, search and control flags of one form.

    Args:
        form_name: Name of the form whose payload section is read
        payload: Nested submission payload (see ``field_path.to_payload``)

    When the reset flag is present, previous sort, search and widget values
    are ignored; only the control flags survive.
    """

    def __init__(self, form_name: str, payload: Optional[Mapping[str, Any]] = None):
        self._form_name = form_name
        self._payload = payload if isinstance(payload, Mapping) else {}

        self._only_display_form = _is_truthy(self._lookup([ONLY_DISPLAY_FORM_KEY]))
        self._only_validate = _is_truthy(self._lookup([ONLY_VALIDATE_KEY]))
        self._reset = _is_truthy(self._lookup([RESET_KEY]))

        if self._reset:
            self._sorting_state = _EMPTY
            self._searching_state = _EMPTY
            self._search_operators = _EMPTY
            self._sort_column = None
        else:
            self._sorting_state = MappingProxyType(self._parse_sorting())
            self._searching_state = MappingProxyType(self._parse_searching())
            self._search_operators = MappingProxyType(self._parse_operators())
            self._sort_column = self._parse_sort_column()

        logger.debug(
            f"FormState '{form_name}': sort={dict(self._sorting_state)} "
            f"search={dict(self._searching_state)} display_only={self._only_display_form} "
            f"validate_only={self._only_validate} reset={self._reset}"
        )

    def _lookup(self, segments: Sequence[Any]) -> Any:
        return decode(self._payload, self._form_name, segments)

    def _section(self, key: str) -> Mapping[str, Any]:
        section = self._lookup([key])
        return section if isinstance(section, Mapping) else {}

    def _parse_sorting(self) -> dict:
        sorting = {}
        for column_key, value in self._section(SORTING_STATE_KEY).items():
            if isinstance(value, str) and value in SORTING_STATES:
                sorting[str(column_key)] = value
            elif value not in (None, ''):
                logger.debug(f"Ignoring unrecognized sort value for column '{column_key}'")
        return sorting

    def _parse_sort_column(self) -> Optional[str]:
        column_key = self._lookup([SORT_COLUMN_KEY])
        if isinstance(column_key, str) and column_key in self._sorting_state:
            return column_key
        return None

    def _parse_searching(self) -> dict:
        return {
            str(column_key): value
            for column_key, value in self._section(SEARCHING_STATE_KEY).items()
            if isinstance(value, str)
        }

    def _parse_operators(self) -> dict:
        return {
            str(column_key): value
            for column_key, value in self._section(SEARCH_OPERATOR_KEY).items()
            if isinstance(value, str) and value in NUMERIC_SEARCH_TYPES
        }

    @property
    def form_name(self) -> str:
        return self._form_name

    @property
    def sorting_state(self) -> Mapping[str, str]:
        """Column key to ``asc``/``desc`` for every column with an active sort."""
        return self._sorting_state

    @property
    def sort_column(self) -> Optional[str]:
        """Key of the column whose header was clicked, if that column has a sort."""
        return self._sort_column

    @property
    def searching_state(self) -> Mapping[str, str]:
        """Column key to search term, as submitted (possibly empty)."""
        return self._searching_state

    @property
    def only_display_form(self) -> bool:
        """True when the client only wants the form fragment (asynchronous refresh)."""
        return self._only_display_form

    @property
    def only_validate(self) -> bool:
        return self._only_validate

    @property
    def reset(self) -> bool:
        return self._reset

    def get_sorting_state(self, column_key: str) -> Optional[str]:
        return self._sorting_state.get(column_key)

    def get_searching_state(self, column_key: str) -> Optional[str]:
        return self._searching_state.get(column_key)

    def get_search_operator(self, column_key: str) -> Optional[str]:
        return self._search_operators.get(column_key)

    def find_item(self, segments: Sequence[Any]) -> Any:
        """
        Return the previously submitted value at ``form[segments...]``.

        Returns None when the value is absent, or when the reset flag asks
        for previous values to be ignored.
        """
        if self._reset:
            return None
        return self._lookup(segments)

    def __repr__(self) -> str:
        return (
            f"FormState({self._form_name!r}, sort={dict(self._sorting_state)!r}, "
            f"search={dict(self._searching_state)!r})"
        )
