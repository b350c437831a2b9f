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


"""A parser for a fixed, JSON-like student record.

The only accepted shape is

    {"name":<letters>,"id":<digits>,"grades":[<digits>,<digits>,...]}

with the fields in exactly that order, no whitespace anywhere except
before the opening brace, unquoted values, and at least one grade.
This is intentionally not a general JSON parser.
"""

from typing import Any, NamedTuple, Optional

from pyparsec.lexical import char, letter, natural, quoted_string, space
from pyparsec.parser import (
    Parser,
    end,
    failure,
    sep_end_by1,
    some,
    unit,
)


EXAMPLE = '{"name":guy,"id":12345,"grades":[100,90,80,100,96,10]}'

FAILED_MESSAGE = 'Failed Parsing'


class Record(NamedTuple):
    name: str
    id: int
    grades: list[int]

    def __str__(self):
        grades = ','.join(str(g) for g in self.grades)
        return f'name: {self.name} id: {self.id} grades: [{grades}]'

    def to_json(self) -> dict[str, Any]:
        return {'name': self.name, 'id': self.id, 'grades': list(self.grades)}


def _field(key: str, value: Parser) -> Parser:
    # Matches `"key":value`, failing if the quoted key is anything else.
    colon = char(':')
    return quoted_string().bind(
        lambda k: colon.bind(lambda _: value) if k == key else failure()
    )


def name_field() -> Parser:
    return _field('name', some(letter()).map(''.join))


def id_field() -> Parser:
    return _field('id', natural())


def grade_list() -> Parser:
    """Matches `<n>,<n>,...]`, i.e. everything after the opening bracket."""
    return sep_end_by1(natural(), char(','), char(']'))


def grades_field() -> Parser:
    grades = grade_list()
    return _field('grades', char('[').bind(lambda _: grades))


def record() -> Parser:
    """Returns a parser for a `Record`.

    The parser stops after the closing brace and doesn't look at anything
    that follows it.
    """
    comma = char(',')
    name, id_, grades = name_field(), id_field(), grades_field()
    # fmt: off
    return space().bind(lambda _:
        char('{').bind(lambda _:
        name.bind(lambda n:
        comma.bind(lambda _:
        id_.bind(lambda i:
        comma.bind(lambda _:
        grades.bind(lambda g:
        char('}').bind(lambda _:
        unit(Record(n, i, g))))))))))
    # fmt: on


_LENIENT = record()
_STRICT = _LENIENT.bind(lambda r: end().map(lambda _: r))


def parse_record(text: str, allow_trailing: bool = False) -> Optional[Record]:
    """Parse `text` as a `Record`, returning None if it doesn't match.

    By default the record must make up the entire text. If `allow_trailing`
    is True, anything after the closing brace is ignored.
    """
    res = (_LENIENT if allow_trailing else _STRICT).run(text)
    if not res.ok:
        return None
    return res.val
