"""
Tests for table rendering.

Covers header, search row and body rendering for local and remote tables,
row striping, keyed and positional rows, and malformed row data.
"""
import html
import json
import re
import unittest

import pytest

from data_table import (
    Button,
    Column,
    ColumnBuilder,
    FormState,
    RefreshBehavior,
    Table,
    TableBuilder,
)
from error_handler import StructuralRenderError
from helpers.search_helpers import search_rows
from helpers.sorting_helpers import sort_rows

ROW_CLASS_PATTERN = re.compile(r"<tr class='unshadedbg ([^']*)'>")
CELL_PATTERN = re.compile(r"<td class='column_bird'>([^<]*)</td>")


def _descriptions(markup):
    """All action descriptions in the markup, in order."""
    return [
        json.loads(html.unescape(value))
        for value in re.findall(r"data-form-action='([^']*)'", markup)
    ]


def _bird_table(rows, remote=None):
    column = ColumnBuilder.create('bird').label('Bird').sortable().searchable().build()
    return TableBuilder.create().columns([column]).rows(rows).remote(remote).build()


# =============================================================================
# Local (client-side) tables
# =============================================================================

def test_local_table_keeps_row_order():
    rows = [{'bird': 'c'}, {'bird': 'a'}, {'bird': 'b'}]
    markup = _bird_table(rows).render('birds', FormState('birds'))
    assert CELL_PATTERN.findall(markup) == ['c', 'a', 'b']
    assert '&uarr;' not in markup
    assert '&darr;' not in markup


def test_searched_rows_reduce_to_match():
    rows = [{'bird': 'c'}, {'bird': 'a'}, {'bird': 'b'}]
    table = _bird_table(rows)
    state = FormState('birds', {'birds': {'search': {'bird': 'b'}}})

    filtered = search_rows(rows, state, table.columns)
    markup = _bird_table(filtered).render('birds', state)

    assert CELL_PATTERN.findall(markup) == ['b']
    assert '&uarr;' not in markup
    assert '&darr;' not in markup
    assert 'data-form-action' not in markup


def test_local_sortable_header():
    markup = _bird_table([]).render('birds')
    assert "<table class='table-autosort table-stripeclass:shadedbg table-altstripeclass:shadedbg'>" in markup
    assert (
        "<th class='column_bird table-sortable:alphanumeric table-sortable' title='Click to sort'>"
        "<strong>Bird</strong></th>"
    ) in markup


def test_local_search_row():
    markup = _bird_table([]).render('birds')
    assert "<input size='8' data-table-filter='true' />" in markup


def test_unsortable_table_has_no_autosort():
    column = ColumnBuilder.create('bird').label('Bird').build()
    table = TableBuilder.create().columns([column]).build()
    markup = table.render('birds')
    assert 'table-autosort' not in markup
    assert "<th class='column_bird'><strong>Bird</strong></th>" in markup
    assert not table.is_sortable()
    assert not table.is_searchable()


def test_table_without_searchable_columns_has_no_search_row():
    column = ColumnBuilder.create('bird').sortable().build()
    markup = TableBuilder.create().columns([column]).build().render('birds')
    assert markup.count('<tr') == 1


# =============================================================================
# Remote tables
# =============================================================================

def test_remote_header_requests_next_sort():
    state = FormState('cities', {'cities': {'sort': {'city': 'asc'}}})
    column = ColumnBuilder.create('city').label('City').sortable().build()
    table = TableBuilder.create().columns([column]).rows([{'city': 'Rome'}]).remote('/cities').build()

    markup = table.render('cities', state)

    assert '<input type="hidden" name="cities[sort][city]" value="asc" />' in markup
    assert '&uarr; ' in markup
    description = _descriptions(markup)[0]
    assert description['action'] == 'refresh'
    assert description['form_action'] == '/cities'
    assert description['params'] == {
        'cities[sort][city]': 'desc',
        'cities[sort_column]': 'city',
        'cities[only_display_form]': 'true',
    }


def test_remote_header_desc_toggles_to_asc():
    state = FormState('cities', {'cities': {'sort': {'city': 'desc'}}})
    column = ColumnBuilder.create('city').sortable().build()
    table = TableBuilder.create().columns([column]).remote('/cities').build()

    markup = table.render('cities', state, 'get')

    assert '&darr; ' in markup
    description = _descriptions(markup)[0]
    assert description['params']['cities[sort][city]'] == 'asc'
    assert description['form_method'] == 'get'


def test_remote_header_without_sort():
    column = ColumnBuilder.create('city').label('City').sortable().build()
    table = TableBuilder.create().columns([column]).remote('/cities').build()

    markup = table.render('cities', FormState('cities'))

    assert '<input type="hidden" name="cities[sort][city]" value="" />' in markup
    assert '&uarr;' not in markup and '&darr;' not in markup
    assert _descriptions(markup)[0]['params']['cities[sort][city]'] == 'asc'
    assert "<th class='column_city'>" in markup
    assert "<strong>City</strong></a></th>" in markup


def test_remote_header_without_state_has_no_hidden_field():
    column = ColumnBuilder.create('city').sortable().build()
    markup = TableBuilder.create().columns([column]).remote('/cities').build().render('cities')
    assert 'type="hidden"' not in markup


def test_default_sort_used_until_submitted():
    column = ColumnBuilder.create('city').sortable().default_sort('desc').build()
    table = TableBuilder.create().columns([column]).remote('/cities').build()

    markup = table.render('cities', FormState('cities'))
    assert '<input type="hidden" name="cities[sort][city]" value="desc" />' in markup
    assert '&darr; ' in markup

    state = FormState('cities', {'cities': {'sort': {'city': 'asc'}}})
    assert '&uarr; ' in table.render('cities', state)


def _city_table():
    columns = [
        ColumnBuilder.create('city').label('City').sortable().build(),
        ColumnBuilder.create('population').label('Population').sortable('numeric').build(),
    ]
    return TableBuilder.create().columns(columns).remote('/cities').build()


def test_only_clicked_column_shows_sort():
    state = FormState('cities', {'cities': {
        'sort': {'city': 'asc', 'population': 'asc'},
        'sort_column': 'population',
    }})

    markup = _city_table().render('cities', state)

    assert markup.count('&uarr; ') == 1
    assert markup.index('&uarr; ') > markup.index("<th class='column_population'>")
    assert '<input type="hidden" name="cities[sort][city]" value="" />' in markup
    assert '<input type="hidden" name="cities[sort][population]" value="asc" />' in markup
    city_params, population_params = [d['params'] for d in _descriptions(markup)]
    assert city_params['cities[sort][city]'] == 'asc'
    assert population_params['cities[sort][population]'] == 'desc'


def test_each_header_names_its_column():
    markup = _city_table().render('cities', FormState('cities'))
    assert [d['params']['cities[sort_column]'] for d in _descriptions(markup)] == ['city', 'population']


def test_later_sort_shows_without_clicked_column():
    state = FormState('cities', {'cities': {'sort': {'city': 'desc', 'population': 'asc'}}})
    markup = _city_table().render('cities', state)
    assert '&darr;' not in markup
    assert markup.count('&uarr; ') == 1
    assert '<input type="hidden" name="cities[sort][city]" value="" />' in markup


def test_default_sort_yields_to_submitted_sort():
    columns = [
        ColumnBuilder.create('city').sortable().default_sort('desc').build(),
        ColumnBuilder.create('population').sortable('numeric').build(),
    ]
    table = TableBuilder.create().columns(columns).remote('/cities').build()
    state = FormState('cities', {'cities': {'sort': {'population': 'asc'}}})

    markup = table.render('cities', state)

    assert '&darr;' not in markup
    assert '<input type="hidden" name="cities[sort][city]" value="" />' in markup
    assert table.current_sorting_state(columns[0], state) is None
    assert table.current_sorting_state(columns[1], state) == 'asc'


def test_remote_search_row_prefilled():
    state = FormState('birds', {'birds': {'search': {'bird': 'Pici'}}})
    markup = _bird_table([], remote='/birds').render('birds', state)
    assert "<input size='8' name='birds[search][bird]' value='Pici' />" in markup


def test_remote_search_row_escapes_value():
    state = FormState('birds', {'birds': {'search': {'bird': "o'ne"}}})
    markup = _bird_table([], remote='/birds').render('birds', state)
    assert "value='o&#x27;ne'" in markup


# =============================================================================
# Body rows
# =============================================================================

def test_row_striping():
    markup = _bird_table({'A': {'bird': 'x'}, 'B': {'bird': 'y'}, 'C': {'bird': 'z'}}).render('birds')
    assert ROW_CLASS_PATTERN.findall(markup) == ['standard_row_even', 'standard_row_odd', 'standard_row_even']


def test_row_striping_independent_of_ids():
    first = _bird_table({'A': {'bird': 'x'}, 'B': {'bird': 'y'}, 'C': {'bird': 'z'}}).render('birds')
    renamed = _bird_table({'7': {'bird': 'x'}, '2': {'bird': 'y'}, '9': {'bird': 'z'}}).render('birds')
    assert ROW_CLASS_PATTERN.findall(first) == ROW_CLASS_PATTERN.findall(renamed)
    assert first == renamed


def test_row_class_override():
    column = ColumnBuilder.create('bird').build()
    table = (TableBuilder.create()
             .columns([column])
             .rows({'a': {'bird': 'x'}, 'b': {'bird': 'y'}})
             .row_classes({'b': 'highlight'})
             .build())
    assert ROW_CLASS_PATTERN.findall(table.render('birds')) == ['standard_row_even', 'highlight']


def test_keyed_and_positional_rows_render_alike():
    column = ColumnBuilder.create('city').label('City').build()
    keyed = TableBuilder.create().columns([column]).field_names(['city', 'pop']).rows(
        [{'city': 'Rome', 'pop': 3}]).build()
    positional = TableBuilder.create().columns([column]).field_names(['city', 'pop']).rows(
        [['Rome', 3]]).build()

    keyed_markup = keyed.render('cities')
    assert "<td class='column_city'>Rome</td>" in keyed_markup
    assert keyed_markup == positional.render('cities')


def test_missing_value_renders_empty_cell():
    columns = [ColumnBuilder.create('city').build(), ColumnBuilder.create('note').css('small').build()]
    table = TableBuilder.create().columns(columns).rows([{'city': 'Rome'}]).build()
    assert "<td class='column_note small'></td>" in table.render('cities')


def test_non_string_values_rendered_as_text():
    column = ColumnBuilder.create('pop').build()
    table = TableBuilder.create().columns([column]).rows([{'pop': 2749031}]).build()
    assert "<td class='column_pop'>2749031</td>" in table.render('cities')


def test_cell_formatter_receives_row_id_and_state():
    seen = []

    class RecordingFormatter:
        def format(self, form_name, column_key, value, row_id, state):
            seen.append((form_name, column_key, value, row_id, state))
            return 'cell'

    state = FormState('cities')
    column = ColumnBuilder.create('city').cell_formatter(RecordingFormatter()).build()
    TableBuilder.create().columns([column]).rows({'rome': {'city': 'Rome'}}).build().render('cities', state)
    assert seen == [('cities', 'city', 'Rome', 'rome', state)]


def test_sequence_row_ids_are_positions():
    seen = []

    class RecordingFormatter:
        def format(self, form_name, column_key, value, row_id, state):
            seen.append(row_id)
            return ''

    column = ColumnBuilder.create('city').cell_formatter(RecordingFormatter()).build()
    TableBuilder.create().columns([column]).rows([{'city': 'a'}, {'city': 'b'}]).build().render('f')
    assert seen == ['0', '1']


def test_scalar_row_is_structural_error():
    table = _bird_table({'a': {'bird': 'x'}, 'b': 'not a record'})
    with pytest.raises(StructuralRenderError):
        table.render('birds')


def test_short_positional_row_is_structural_error():
    column = ColumnBuilder.create('pop').build()
    table = TableBuilder.create().columns([column]).field_names(['city', 'pop']).rows([['Rome']]).build()
    with pytest.raises(StructuralRenderError):
        table.render('cities')


def test_empty_table():
    markup = _bird_table([]).render('birds')
    assert '<tbody></tbody>' in markup
    assert markup.endswith('</table>')


# =============================================================================
# Buttons
# =============================================================================

class TestTableButtons(unittest.TestCase):

    def setUp(self):
        column = ColumnBuilder.create('bird').build()
        self.table = Table(
            [column],
            rows=[{'bird': 'x'}],
            buttons=[
                Button('Top', behavior=RefreshBehavior()),
                Button('Bottom', placement='bottom'),
            ],
            remote='/birds',
        )

    def test_buttons_placed_around_table(self):
        markup = self.table.render('birds')
        self.assertTrue(markup.startswith('<button '))
        self.assertTrue(markup.endswith("<button type='submit'>Bottom</button>"))
        self.assertLess(markup.index('>Top</button>'), markup.index('<table'))

    def test_button_uses_table_remote(self):
        description = _descriptions(self.table.render('birds'))[0]
        self.assertEqual(description['form_action'], '/birds')

    def test_repr(self):
        self.assertIn("remote='/birds'", repr(self.table))


def test_sorted_rows_render_in_sorted_order():
    rows = [{'bird': 'c'}, {'bird': 'a'}, {'bird': 'b'}]
    table = _bird_table(rows, remote='/birds')
    state = FormState('birds', {'birds': {'sort': {'bird': 'desc'}}})
    markup = _bird_table(sort_rows(rows, state, table.columns), remote='/birds').render('birds', state)
    assert CELL_PATTERN.findall(markup) == ['c', 'b', 'a']


def test_column_sortable_true_renders_alphanumeric():
    column = Column('bird', label='Bird', sortable=True)
    assert column.sortable == 'alphanumeric'
    markup = Table([column]).render('birds')
    assert "<th class='column_bird table-sortable:alphanumeric table-sortable' title='Click to sort'>" in markup


def test_positional_mapping_row_renders_by_field_names():
    column = ColumnBuilder.create('pop').build()
    table = TableBuilder.create().columns([column]).field_names(['city', 'pop']).rows(
        {'rome': {0: 'Rome', 1: 3}}).build()
    assert "<td class='column_pop'>3</td>" in table.render('cities')
