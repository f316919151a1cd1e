# SPDX-License-Identifier: AGPL-3.0-or-later
"""Prefer header parser.

Parses the HTTP Prefer (and Preference-Applied) header as described in
https://tools.ietf.org/html/rfc7240 into a list of :class:`Preference`.

The header is split twice with the same quote aware scanner, first on commas
into preferences and then on semicolons into the preference itself and its
parameters. Quoted strings are not unescaped, every double quote toggles the
quote state.

Lacks validation of tokens per RFC: https://tools.ietf.org/html/rfc7230#section-3.2.6
"""
import logging

from .preference import TRUE, Preference

QUOTE = '"'
PREFERENCE_SEPARATOR = ','
PARAMETER_SEPARATOR = ';'


def split_quoted(text, delimiter):
    """Split text on every delimiter which is not inside double quotes.

    Args:
        text (str): text to split.
        delimiter (str): single separator character.

    Yields:
        str: the parts between the delimiters, including empty ones.
    """
    start = 0
    quoted = False
    for i, c in enumerate(text):
        if c == QUOTE:
            quoted = not quoted
        elif c == delimiter and not quoted:
            yield text[start:i]
            start = i + 1

    if quoted:
        logging.debug('unbalanced quotes in header value, %r is taken as is', text[start:])
    yield text[start:]


def _normalize_name(name):
    return name.strip().lower().replace(' ', '')


def parse_token(part):
    """Parse a `token` or `token=value` part into a name and value tuple."""
    name, sep, value = part.partition('=')
    if not sep:
        return _normalize_name(name), TRUE

    value = value.strip()
    if value.startswith(QUOTE) and value.endswith(QUOTE):
        value = value.replace(QUOTE, '')
    return _normalize_name(name), value or TRUE


def parse_preference(segment):
    """Parse a single preference including its parameters.

    Returns:
        Preference: the parsed preference or None for a blank segment.
    """
    tokens = (parse_token(part) for part in split_quoted(segment, PARAMETER_SEPARATOR))

    name, value = next(tokens)
    if not name:
        return None

    parameters = {}
    for key, parameter_value in tokens:
        # Empty parts, e.g. from "foo;;bar" or a trailing semicolon.
        if not key:
            continue
        parameters[key] = parameter_value

    return Preference(name, value, parameters)


def parse(header):
    """Parse Prefer header values.

    Args:
        header (str or list): the header value, or the values of a header
            which was given multiple times.

    Returns:
        list: unique (by name) preferences in order of appearance, first one
            wins. None when nothing was given.

    Raises:
        TypeError: header is neither a string nor an iterable of strings.
    """
    if header is None:
        return None
    if isinstance(header, bytes):
        raise TypeError('header must be str or list of str, not bytes')
    if not isinstance(header, str):
        header = PREFERENCE_SEPARATOR.join(value or '' for value in header)
    if not header:
        return None

    preferences = {}
    for segment in split_quoted(header, PREFERENCE_SEPARATOR):
        preference = parse_preference(segment)
        if preference is None:
            continue
        if preference.name in preferences:
            logging.debug('ignoring duplicate preference %r', preference.name)
            continue
        preferences[preference.name] = preference

    return list(preferences.values())
