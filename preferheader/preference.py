# SPDX-License-Identifier: AGPL-3.0-or-later
"""Preference value class."""

from collections.abc import Mapping

TRUE = 'true'


class Preference:
    """A single preference of a Prefer or Preference-Applied header.

    Args:
        name (str): preference name, lowercase without spaces when parsed.
        value (str): preference value, "true" for a bare token.
        parameters (dict): ordered mapping of parameter names to values.
    """

    __slots__ = ('name', 'value', 'parameters')

    def __init__(self, name, value=TRUE, parameters=None):
        self.name = name
        self.value = value
        self.parameters = dict(parameters) if parameters else {}

    def __eq__(self, other):
        if not isinstance(other, Preference):
            return NotImplemented
        return (self.name, self.value, self.parameters) == (other.name, other.value, other.parameters)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        if self.parameters:
            return '{}({!r}, {!r}, {!r})'.format(type(self).__name__, self.name, self.value, self.parameters)
        return '{}({!r}, {!r})'.format(type(self).__name__, self.name, self.value)

    def to_dict(self):
        return {
            'name': self.name,
            'value': self.value,
            'parameters': dict(self.parameters),
        }

    @classmethod
    def from_dict(cls, d):
        """Build a preference from a dict as returned by :meth:`to_dict`.

        A missing, null or empty value means "true". Booleans and numbers
        are converted to their header form.

        Raises:
            KeyError: when the name is missing.
            ValueError: when the name is not a non-empty string.
            TypeError: when parameters is not a mapping or a value is not a
                string, number or boolean.
        """
        name = d['name']
        if not isinstance(name, str) or not name:
            raise ValueError('preference name must be a non-empty string, got %r' % (name,))

        parameters = d.get('parameters')
        if parameters is None:
            parameters = {}
        elif not isinstance(parameters, Mapping):
            raise TypeError('parameters of %r must be a mapping, got %s' % (name, type(parameters).__name__))

        return cls(
            name,
            _from_json_value(d.get('value')),
            {key: _from_json_value(value) for key, value in parameters.items()},
        )


def _from_json_value(value):
    if value is None or value == '':
        return TRUE
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return str(value)
    if not isinstance(value, str):
        raise TypeError('preference value must be a string, got %s' % type(value).__name__)
    return value
