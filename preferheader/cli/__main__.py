# SPDX-License-Identifier: AGPL-3.0-or-later
import argparse
import sys

from preferheader.cli import init_logging, run_format, run_parse

# Defaults
PROG_NAME = 'prefer-header'
LOG_LEVEL = 'WARNING'
INDENT = 2


def opt_args(argv=None):
    parser = argparse.ArgumentParser(prog=PROG_NAME, description='Parse and format HTTP Prefer headers (RFC 7240)')
    parser.add_argument("--log-level", dest='log_level', default=LOG_LEVEL,
                        help="log level (default: {})".format(LOG_LEVEL))
    parser.add_argument("--indent", dest='indent', type=is_indent, default=INDENT,
                        help="indentation of JSON output (default: {})".format(INDENT), metavar="N")

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True

    parse_parser = subparsers.add_parser('parse', help="parse header values into JSON")
    parse_parser.add_argument("headers", nargs='+', metavar='HEADER',
                              help="header value, repeat for multiple headers")
    parse_parser.set_defaults(func=run_parse)

    format_parser = subparsers.add_parser('format', help="format JSON preferences into a header value")
    format_parser.add_argument("json", nargs='?', metavar='JSON',
                               help="JSON object or array of preferences (default: read from stdin)")
    format_parser.set_defaults(func=run_format)

    return parser.parse_args(argv)


def is_indent(value):
    try:
        indent = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("is_indent:{} is not a number".format(value))
    if indent < 0:
        raise argparse.ArgumentTypeError("is_indent:{} must not be negative".format(value))
    return indent


def main(args=None):
    """The main routine."""
    if args is None:
        args = opt_args()

    init_logging(args.log_level)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
