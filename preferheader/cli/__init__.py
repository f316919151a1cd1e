# SPDX-License-Identifier: AGPL-3.0-or-later
import logging
import sys

import ujson

from preferheader import Preference, convert_to_header_value, parse

try:
    import colorlog
    COLORLOG = True
except ImportError:
    COLORLOG = False


def init_logging(log_level, log_timestamp=True):
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError('Invalid log level: %s' % log_level)

    fmt = '%(levelname)-8s %(message)s'
    if log_timestamp:
        fmt = '%(asctime)s ' + fmt

    if COLORLOG:
        handler = colorlog.StreamHandler()
        handler.setFormatter(colorlog.ColoredFormatter('%(log_color)s' + fmt))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.addHandler(handler)

    # Send all warnings to logging.
    logging.captureWarnings(True)


def _dumps(obj, indent):
    return ujson.dumps(obj, indent=indent, escape_forward_slashes=False, ensure_ascii=False)


def run_parse(args):
    """Print the preferences of the given header values as JSON."""
    preferences = parse(args.headers)
    logging.debug('parsed %d preferences', len(preferences or []))
    if preferences is None:
        data = None
    else:
        data = [preference.to_dict() for preference in preferences]
    print(_dumps(data, args.indent))
    return 0


def run_format(args):
    """Print the header value for preferences given as JSON."""
    raw = args.json if args.json is not None else sys.stdin.read()
    try:
        data = ujson.loads(raw)
    except ValueError as e:
        logging.error('invalid JSON input: %s', e)
        return 1

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        logging.error('expected a JSON object or array, got %s', type(data).__name__)
        return 1

    try:
        preferences = [Preference.from_dict(d) if d is not None else None for d in data]
        header = convert_to_header_value(preferences)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logging.error('invalid preference in JSON input: %r', e)
        return 1

    if header is not None:
        print(header)
    return 0
