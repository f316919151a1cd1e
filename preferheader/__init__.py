# SPDX-License-Identifier: AGPL-3.0-or-later
"""Parser and serializer for the HTTP Prefer header (RFC 7240)."""
from .parser import parse, parse_preference, split_quoted
from .prefer import Prefer
from .preference import Preference
from .serializer import convert_to_header_value, normalize_token_value

__all__ = (
    "Prefer",
    "Preference",
    "convert_to_header_value",
    "normalize_token_value",
    "parse",
    "parse_preference",
    "split_quoted",
)
