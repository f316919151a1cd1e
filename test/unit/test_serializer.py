# SPDX-License-Identifier: AGPL-3.0-or-later
"""Test serializer module."""
import pytest

from preferheader import Preference, convert_to_header_value, normalize_token_value, parse


@pytest.mark.parametrize(
    "preference,expected",
    [
        (Preference('foo', 'true'), 'foo'),
        (Preference('foo', 'TRUE'), 'foo'),
        (Preference('foo', '42'), 'foo=42'),
        (Preference('foo', 'bar, baz; qux'), 'foo="bar, baz; qux"'),
        (Preference('response-cache-headers', 'etag, last-modified'), 'response-cache-headers="etag, last-modified"'),
        (Preference('foo', ''), 'foo'),
        (Preference('foo', None), 'foo'),
    ]
)
def test_convert_preference(preference, expected):
    assert convert_to_header_value(preference) == expected


@pytest.mark.parametrize(
    "preference,expected",
    [
        (Preference('foo', 'true', {'bar': 'true'}), 'foo; bar'),
        (Preference('respond-async', 'true', {'wait': '100'}), 'respond-async; wait=100'),
        (
            Preference('handling', 'strict', {'abort-early': 'true', 'path-format': 'json-pointer'}),
            'handling=strict; abort-early; path-format=json-pointer'
        ),
        (Preference('foo', 'true', {'bar': 'a;b'}), 'foo; bar="a;b"'),
    ]
)
def test_convert_preference_with_parameters(preference, expected):
    assert convert_to_header_value(preference) == expected


def test_convert_none():
    assert convert_to_header_value(None) is None


def test_convert_empty_list():
    assert convert_to_header_value([]) is None


def test_convert_list():
    preferences = [Preference('respond-async'), None, Preference('wait', '10'), Preference('return', 'minimal')]
    assert convert_to_header_value(preferences) == 'respond-async,wait=10,return=minimal'


def test_convert_list_of_none():
    assert convert_to_header_value([None]) == ''


def test_convert_invalid_type():
    with pytest.raises(TypeError):
        convert_to_header_value('foo')
    with pytest.raises(TypeError):
        convert_to_header_value([{'name': 'foo'}])


def test_normalize_token_value():
    assert normalize_token_value('') == ''
    assert normalize_token_value(None) is None
    assert normalize_token_value('True') == ''
    assert normalize_token_value('10') == '=10'
    assert normalize_token_value('a,b') == '="a,b"'


@pytest.mark.parametrize(
    "header",
    [
        'respond-async',
        'wait=100',
        'handling=strict; abort-early; path-format=json-pointer',
        'respond-async,wait=100,handling=lenient',
        'response-cache-headers="etag, last-modified"',
    ]
)
def test_round_trip(header):
    preferences = parse(header)
    assert convert_to_header_value(preferences) == header
    assert parse(convert_to_header_value(preferences)) == preferences
