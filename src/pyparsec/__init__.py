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


"""A small backtracking parser-combinator library.

Parsers are immutable values wrapping a function from text to an
`Outcome` (either a `Success` with a value and the remaining text, or a
`Failure`). They are combined with:

- unit, failure, item, satisfy, end - the primitive parsers
- Parser.bind, Parser.map           - sequencing
- option (also `p1 | p2`)           - ordered choice with full backtracking
- many, some                        - repetition
- sep_end_by1                       - delimited, terminated lists

`pyparsec.lexical` has character-level parsers built on these, and
`pyparsec.record` uses them to parse a small, fixed, JSON-like record
format (see `parse_record()`).
"""

import types

from pyparsec.lexical import (  # noqa: F401 (unused-import)
    alpha_num,
    char,
    digit,
    letter,
    lower,
    natural,
    quoted_string,
    space,
    token,
    upper,
)
from pyparsec.outcome import (  # noqa: F401 (unused-import)
    FAILURE,
    Failure,
    Outcome,
    Success,
)
from pyparsec.parser import (  # noqa: F401 (unused-import)
    Parser,
    end,
    failure,
    item,
    many,
    option,
    satisfy,
    sep_end_by1,
    some,
    unit,
)
from pyparsec.record import (  # noqa: F401 (unused-import)
    EXAMPLE,
    FAILED_MESSAGE,
    Record,
    parse_record,
)
from pyparsec.version import __version__  # noqa: F401 (unused-import)


__all__ = []
for _k in list(globals()):
    if not _k.startswith('_') and not isinstance(
        globals()[_k], types.ModuleType
    ):
        __all__.append(_k)
