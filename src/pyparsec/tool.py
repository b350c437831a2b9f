# Copyright 2014 Google Inc. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Parse a student record and print it.

Usage:

    $ python -m pyparsec --example
    name: guy id: 12345 grades: [100,90,80,100,96,10]
    $ echo '{"name":ann,"id":7,"grades":[90]}' | python -m pyparsec --as-json
    {
      "name": "ann",
      "id": 7,
      "grades": [
        90
      ]
    }
    $ python -m pyparsec -c '{name:ann}'
    Failed Parsing
"""

import argparse
import json
import os
import sys

try:
    import pyparsec
except ModuleNotFoundError:  # pragma: no cover
    src_dir = os.path.dirname(os.path.dirname(__file__))
    sys.path.insert(0, src_dir)
    import pyparsec

from pyparsec import record, support


def main(argv=None, host=None):
    host = host or support.Host()

    try:
        args = _parse_args(host, argv)

        if args.version:
            host.print(pyparsec.__version__)
            return 0

        if args.cmd is not None:
            inp = args.cmd
        elif args.example:
            inp = record.EXAMPLE
        elif args.file == '-':
            inp = _strip_line_ending(host.stdin.read())
        elif not host.exists(args.file):
            host.print(f'Error: no such file: "{args.file}"', file=host.stderr)
            return 1
        else:
            inp = _strip_line_ending(host.read_text_file(args.file))

        rec = record.parse_record(inp, allow_trailing=args.allow_trailing)
        if rec is None:
            host.print(record.FAILED_MESSAGE)
            return 1

        if args.as_json:
            host.print(json.dumps(rec.to_json(), indent=args.indent))
        else:
            host.print(str(rec))
        return 0
    except KeyboardInterrupt:  # pragma: no cover
        host.print('Interrupted, exiting.', file=host.stderr)
        return 130  # SIGINT


def _strip_line_ending(s):
    # Text read from a file or stdin normally ends in a newline; drop one.
    if s.endswith('\r\n'):
        return s[:-2]
    if s.endswith('\n'):
        return s[:-1]
    return s


class _HostedArgumentParser(argparse.ArgumentParser):
    """An argument parser that plays nicely w/ host objects."""

    def __init__(self, host, **kwargs):
        self.host = host
        super().__init__(**kwargs)

    def exit(self, status=0, message=None):
        if message:
            self._print_message(message, self.host.stderr)
        sys.exit(status)

    def error(self, message):
        self.host.print(f'usage: {self.usage}', end='', file=self.host.stderr)
        self.host.print('    -h/--help for help\n', file=self.host.stderr)
        self.exit(2, f'error: {message}\n')

    def print_help(self, file=None):
        self.host.print(self.format_help(), file=file)


def _indent(s):
    if s == 'None':
        return None
    try:
        return int(s)
    except ValueError:
        return s


def _parse_args(host, argv):
    usage = 'pyparsec [options] [FILE]\n'

    parser = _HostedArgumentParser(
        host,
        prog='pyparsec',
        usage=usage,
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '-V',
        '--version',
        action='store_true',
        help=f'show version ({pyparsec.__version__})',
    )
    parser.add_argument(
        '-c',
        metavar='STR',
        dest='cmd',
        help='inline string to read instead of reading from a file',
    )
    parser.add_argument(
        '--example',
        action='store_true',
        help='parse the built-in example record',
    )
    parser.add_argument(
        '--allow-trailing',
        action='store_true',
        help='ignore anything after the closing brace of the record',
    )
    parser.add_argument(
        '--as-json',
        dest='as_json',
        action='store_const',
        const=True,
        default=False,
        help='output as JSON',
    )
    parser.add_argument(
        '--indent',
        dest='indent',
        default=2,
        type=_indent,
        help='amount to indent each line of JSON output (default is 2)',
    )
    parser.add_argument(
        'file',
        metavar='FILE',
        nargs='?',
        default='-',
        help='optional file to read the record from; if '
        'not specified or "-", will read from stdin '
        'instead',
    )
    return parser.parse_args(argv)


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
