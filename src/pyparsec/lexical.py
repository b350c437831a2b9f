# Copyright 2025 Dirk Pranke. All rights reserved.
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


"""Character-level parsers built on top of `satisfy()`."""

from pyparsec.parser import Parser, many, satisfy, some, unit


def char(c: str) -> Parser:
    if len(c) != 1:
        raise ValueError(f'char() expects a single character, got {c!r}')
    return satisfy(lambda ch: ch == c)


def digit() -> Parser:
    return satisfy(str.isdecimal)


def letter() -> Parser:
    return satisfy(str.isalpha)


def lower() -> Parser:
    return satisfy(str.islower)


def upper() -> Parser:
    return satisfy(str.isupper)


def alpha_num() -> Parser:
    return satisfy(lambda ch: ch.isalpha() or ch.isdecimal())


def quoted_string() -> Parser:
    """Matches a double-quoted, non-empty run of alphanumeric characters.

    There are no escapes; the value is the text between the quotes.
    """
    quote = char('"')
    return quote.bind(
        lambda _: some(alpha_num()).bind(
            lambda chars: quote.bind(lambda _: unit(''.join(chars)))
        )
    )


def space() -> Parser:
    """Skips any amount of whitespace (including none). The value is None.

    Whitespace is anything `str.isspace()` accepts: spaces, tabs, newlines,
    carriage returns, form feeds and the Unicode space separators.
    """
    return many(satisfy(str.isspace)).map(lambda _: None)


def token(p: Parser) -> Parser:
    """Matches `p` with optional whitespace on either side."""
    ws = space()
    return ws.bind(lambda _: p.bind(lambda val: ws.bind(lambda _: unit(val))))


def natural() -> Parser:
    """Matches one or more digits and returns them as an unsigned int."""

    def _fold(digits):
        n = 0
        for d in digits:
            n = n * 10 + int(d)
        return n

    return some(digit()).map(_fold)
