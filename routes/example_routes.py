"""
Routes for the example data form pages.

Provides a searchable, sortable list and a two-step city selection. Both
pages answer display-only requests with the bare form so the client can
refresh them in place.
"""

from flask import Blueprint, current_app, request, url_for

from constants import METHOD_POST, PLACEMENT_BOTTOM
from data_table import (
    ButtonBuilder,
    CheckboxCellFormatter,
    ColumnBuilder,
    DataForm,
    EscapedCellFormatter,
    FormBuilder,
    FormState,
    RefreshBehavior,
    TableBuilder,
    ValidateThenSubmitBehavior,
)
from error_handler import DataTableError
from helpers.request_helpers import get_form_state
from helpers.response_helpers import error_page, form_response, validation_response
from helpers.search_helpers import search_rows
from helpers.sorting_helpers import sort_rows
from logging_helper import LoggingHelper, LogType

# Get logger instance
logger = LoggingHelper.get_logger(LogType.MAIN)

bp = Blueprint('examples', __name__)

SEARCHABLE_FORM = 'searchable'
SELECT_CITIES_FORM = 'select_cities'
CONFIRM_CITIES_FORM = 'confirm_cities'

BIRD_ORDERS = [
    "1.1 Struthioniformes",
    "1.2 Anseriformes",
    "1.3 Galliformes",
    "1.4 Charadriiformes",
    "1.5 Gruiformes",
    "1.6 Podicipediformes",
    "1.7 Ciconiiformes",
    "1.8 Pelecaniformes",
    "1.9 Procellariiformes",
    "1.10 Sphenisciformes",
    "1.11 Columbiformes",
    "1.12 Psittaciformes",
    "1.13 Cuculiformes",
    "1.14 Falconiformes",
    "1.15 Strigiformes",
    "1.16 Caprimulgiformes",
    "1.17 Apodiformes",
    "1.18 Coraciiformes",
    "1.19 Piciformes",
    "1.20 Passeriformes",
]

CITIES = [
    {'city': 'Amsterdam', 'country': 'Netherlands', 'population': 921402},
    {'city': 'Berlin', 'country': 'Germany', 'population': 3677472},
    {'city': 'Lisbon', 'country': 'Portugal', 'population': 545796},
    {'city': 'Madrid', 'country': 'Spain', 'population': 3280782},
    {'city': 'Paris', 'country': 'France', 'population': 2102650},
    {'city': 'Rome', 'country': 'Italy', 'population': 2749031},
    {'city': 'Vienna', 'country': 'Austria', 'population': 1982097},
]


def _form_method() -> str:
    return current_app.config.get('DATA_TABLE_FORM_METHOD', METHOD_POST)


def make_searchable_form(state: FormState) -> DataForm:
    """
    Build the bird order list: sorted and searched (case-sensitive) remotely.

    Args:
        state: State of the current request

    Returns:
        The form, with its rows already filtered and ordered
    """
    this_url = url_for('examples.searchable')

    columns = [
        ColumnBuilder.create('bird').label('Bird').sortable().searchable().build()
    ]

    rows = [{'bird': bird} for bird in BIRD_ORDERS]
    rows = search_rows(rows, state, columns)
    rows = sort_rows(rows, state, columns)

    buttons = [
        ButtonBuilder.create()
        .text('Refresh')
        .name('refresh')
        .form_action(this_url)
        .behavior(RefreshBehavior())
        .build()
    ]

    table = TableBuilder.create().columns(columns).rows(rows).remote(this_url).buttons(buttons).build()
    return (FormBuilder.create(SEARCHABLE_FORM)
            .tables([table])
            .remote(this_url)
            .method(_form_method())
            .build())


def make_select_cities_form(state: FormState) -> DataForm:
    """
    Build the first step of the city selection.

    The selection column has no data of its own, so each checkbox submits
    its row id: the city name.
    """
    this_url = url_for('examples.select_cities')
    next_url = url_for('examples.confirm_cities')

    columns = [
        ColumnBuilder.create('select').label('Select').cell_formatter(CheckboxCellFormatter()).build(),
        ColumnBuilder.create('city').label('City').sortable().cell_formatter(EscapedCellFormatter()).build(),
        ColumnBuilder.create('population').label('Population').sortable('numeric').build(),
    ]

    rows = {obj['city']: obj for obj in CITIES}
    rows = sort_rows(rows, state, columns)

    buttons = [
        ButtonBuilder.create()
        .text('Continue >>')
        .form_action(next_url)
        .behavior(ValidateThenSubmitBehavior(next_url))
        .placement(PLACEMENT_BOTTOM)
        .build()
    ]

    table = TableBuilder.create().columns(columns).rows(rows).buttons(buttons).remote(this_url).build()
    return (FormBuilder.create(SELECT_CITIES_FORM)
            .tables([table])
            .remote(this_url)
            .method(_form_method())
            .build())


def selected_cities(state: FormState) -> list:
    """Cities checked in the selection step, in display order."""
    selection = state.find_item(['select'])
    if not isinstance(selection, dict):
        return []
    return [obj for obj in CITIES if obj['city'] in selection]


def make_confirm_form(cities: list) -> DataForm:
    """Build the read-only list of selected cities."""
    columns = [
        ColumnBuilder.create('city').label('City').sortable().cell_formatter(EscapedCellFormatter()).build(),
        ColumnBuilder.create('country').label('Country').cell_formatter(EscapedCellFormatter()).build(),
    ]
    table = TableBuilder.create().columns(columns).rows({obj['city']: obj for obj in cities}).build()
    return FormBuilder.create(CONFIRM_CITIES_FORM).tables([table]).method(_form_method()).build()


@bp.route('/examples/searchable', methods=['GET', 'POST'])
def searchable():
    """Display the searchable bird order list."""
    try:
        state = get_form_state(SEARCHABLE_FORM)
        form = make_searchable_form(state)
        return form_response(form, state, 'Simple table example')
    except DataTableError as e:
        LoggingHelper.log_error_with_trace("Error rendering searchable example", e)
        return error_page(e)


@bp.route('/examples/select-cities', methods=['GET', 'POST'])
def select_cities():
    """Display the city selection step."""
    try:
        state = get_form_state(SELECT_CITIES_FORM)
        form = make_select_cities_form(state)
        return form_response(form, state, 'Select cities')
    except DataTableError as e:
        LoggingHelper.log_error_with_trace("Error rendering city selection", e)
        return error_page(e)


@bp.route('/examples/select-cities/confirm', methods=['GET', 'POST'])
def confirm_cities():
    """
    Validate or display the city selection.

    A validate-only request gets an empty body when at least one city is
    selected, and the message to flash otherwise.
    """
    try:
        state = get_form_state(SELECT_CITIES_FORM)
        cities = selected_cities(state)

        if state.only_validate:
            messages = [] if cities else ['Select at least one city']
            return validation_response(messages)

        logger.info(f"Confirming {len(cities)} selected cities ({request.method})")
        form = make_confirm_form(cities)
        intro = f"You selected {len(cities)} cities." if cities else "You did not select any cities."
        return form_response(form, FormState(CONFIRM_CITIES_FORM), 'Selected cities', intro=intro)
    except DataTableError as e:
        LoggingHelper.log_error_with_trace("Error rendering selected cities", e)
        return error_page(e)
