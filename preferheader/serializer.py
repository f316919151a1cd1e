# SPDX-License-Identifier: AGPL-3.0-or-later
"""Convert preferences back into Prefer / Preference-Applied header values."""

from .preference import TRUE, Preference

_QUOTE_TRIGGERS = (';', ',')


def normalize_token_value(value):
    """Return the `=value` suffix for a token.

    Empty values are returned unchanged and "true" becomes an empty suffix,
    which is the RFC 7240 short form for boolean preferences. Values which
    contain a separator are quoted (without escaping).
    """
    if not value:
        return value
    if value.lower() == TRUE:
        return ''
    if any(c in value for c in _QUOTE_TRIGGERS):
        return '="{}"'.format(value)
    return '={}'.format(value)


def _convert_preference(preference):
    parts = [preference.name + (normalize_token_value(preference.value) or '')]
    for name, value in preference.parameters.items():
        parts.append(name + (normalize_token_value(value) or ''))
    return '; '.join(parts)


def convert_to_header_value(preferences):
    """Convert a preference or a list of preferences into a header value.

    Args:
        preferences (Preference or list): what to convert. None entries of a
            list are skipped.

    Returns:
        str: the header value or None when there is nothing to convert.

    Raises:
        TypeError: for anything which is not a Preference.
    """
    if preferences is None:
        return None
    if isinstance(preferences, Preference):
        return _convert_preference(preferences)
    if isinstance(preferences, (str, bytes)):
        raise TypeError('expected Preference or list of Preference, got %s' % type(preferences).__name__)

    preferences = list(preferences)
    if not preferences:
        return None

    values = []
    for preference in preferences:
        if preference is None:
            continue
        if not isinstance(preference, Preference):
            raise TypeError('expected Preference, got %s' % type(preference).__name__)
        values.append(_convert_preference(preference))
    return ','.join(values)
