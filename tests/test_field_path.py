"""
Tests for nested bracket field names.
"""
import pytest

from data_table.field_path import decode, encode, split_field_name, to_payload


def test_encode_single_segment():
    assert encode('cities', ['reset']) == 'cities[reset]'


def test_encode_nested_segments():
    assert encode('cities', ['sort', 'city']) == 'cities[sort][city]'


def test_encode_converts_segments_to_strings():
    assert encode('grid', ['amount', 3]) == 'grid[amount][3]'


def test_encode_without_segments_is_form_name():
    assert encode('cities', []) == 'cities'


def test_decode_finds_nested_value():
    payload = {'cities': {'sort': {'city': 'asc'}}}
    assert decode(payload, 'cities', ['sort', 'city']) == 'asc'


def test_decode_missing_path_returns_default():
    payload = {'cities': {'sort': {}}}
    assert decode(payload, 'cities', ['sort', 'city']) is None
    assert decode(payload, 'cities', ['sort', 'city'], default='none') == 'none'


def test_decode_other_form_is_absent():
    payload = {'other': {'sort': {'city': 'asc'}}}
    assert decode(payload, 'cities', ['sort', 'city']) is None


def test_decode_through_scalar_is_absent():
    payload = {'cities': {'sort': 'asc'}}
    assert decode(payload, 'cities', ['sort', 'city']) is None


def test_decode_empty_string_is_a_value():
    payload = {'cities': {'search': {'city': ''}}}
    assert decode(payload, 'cities', ['search', 'city'], default=None) == ''


def test_decode_non_mapping_payload():
    assert decode(None, 'cities', ['sort']) is None
    assert decode('cities', 'cities', []) is None


def test_split_field_name():
    assert split_field_name('cities[sort][city]') == ('cities', ['sort', 'city'])


def test_split_field_name_plain_name():
    assert split_field_name('page') == ('page', [])


def test_split_field_name_empty_segment():
    assert split_field_name('cities[select][]') == ('cities', ['select', ''])


@pytest.mark.parametrize('name', ['cities[sort', 'cities[sort]x', '[sort]', 'cities[a[b]]'])
def test_split_field_name_malformed(name):
    assert split_field_name(name) == (name, [])


def test_to_payload_nests_pairs():
    payload = to_payload({
        'cities[sort][city]': 'asc',
        'cities[search][city]': 'Ro',
        'cities[only_display_form]': 'true',
        'page': '2',
    })
    assert payload == {
        'cities': {
            'sort': {'city': 'asc'},
            'search': {'city': 'Ro'},
            'only_display_form': 'true',
        },
        'page': '2',
    }


def test_to_payload_accepts_pairs():
    payload = to_payload([('a[x]', '1'), ('a[y]', '2')])
    assert payload == {'a': {'x': '1', 'y': '2'}}


def test_to_payload_later_duplicate_wins():
    payload = to_payload([('a[x]', '1'), ('a[x]', '2')])
    assert payload == {'a': {'x': '2'}}


def test_to_payload_path_replaces_scalar():
    payload = to_payload([('a[x]', '1'), ('a[x][y]', '2')])
    assert payload == {'a': {'x': {'y': '2'}}}


@pytest.mark.parametrize('form_name,segments,value', [
    ('cities', ['sort', 'city'], 'desc'),
    ('searchable', ['search', 'bird'], 'Pici'),
    ('f', ['select', 'Rome'], 'Rome'),
    ('f', ['only_validate'], 'true'),
])
def test_path_round_trip(form_name, segments, value):
    payload = to_payload({encode(form_name, segments): value})
    assert decode(payload, form_name, segments) == value
