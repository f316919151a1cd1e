# SPDX-License-Identifier: AGPL-3.0-or-later

from .parser import _normalize_name as _key, parse
from .preference import TRUE, Preference
from .serializer import convert_to_header_value

_marker = {}


class Prefer:
    """Preferences of a single request.

    Keeps track of the preferences which were honored, to be reported back
    with the Preference-Applied response header.
    """

    def __init__(self, header_values):
        self.preferences = parse(header_values) or []
        self._prefer = {p.name: p for p in self.preferences}
        self._parsed = {p.name: p.value for p in self.preferences}
        self._applied = {}

    def __contains__(self, name):
        return _key(name) in self._prefer

    def __iter__(self):
        return iter(self.preferences)

    def __len__(self):
        return len(self.preferences)

    def get(self, name, default=None, raw=False, apply=True):
        name = _key(name)
        if not raw:
            v = self._parsed.get(name, _marker)
            if v is _marker:
                return default
            if apply:
                self.applied(name)
            return v
        else:
            v = self._prefer.get(name, _marker)
            if v is _marker:
                return default
            return v.value

    def get_preference(self, name):
        return self._prefer.get(_key(name))

    def update(self, name, value):
        self._parsed[_key(name)] = value

    def applied(self, name, value=None):
        name = _key(name)
        if value is None:
            preference = self._prefer.get(name)
            value = preference.value if preference is not None else TRUE
        self._applied[name] = value

    def preference_applied(self):
        """Return the Preference-Applied header value, None if nothing was applied."""
        return convert_to_header_value([Preference(name, value) for name, value in self._applied.items()])

    def set_headers(self, resp):
        if self._applied:
            resp.set_header('Preference-Applied', self.preference_applied())
