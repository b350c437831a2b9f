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


"""The `Parser` type and the combinators that everything else is built from.

A `Parser` wraps a function from a string to an `Outcome`. Parsers never
hold any state of their own, so a parser can be built once and then run
any number of times, on any number of inputs.

The only way to recover from a failure is `option()`, which retries its
second alternative against the same text it gave to the first. Nothing
else ever looks at the text left over by a failed attempt; a `Failure`
doesn't even record one.

`many()` and `sep_end_by1()` are written as loops rather than recursively,
so that long runs of input use a constant amount of stack.

The remaining text is passed along as a string slice, so each character
consumed copies the rest of the input. Parsing is quadratic in the length
of the input, which is fine for the small documents this is meant for.
"""

from typing import Any, Callable, Optional

from pyparsec.outcome import FAILURE, Outcome, Success


class Parser:
    __slots__ = ('_fn', 'name')

    def __init__(
        self, fn: Callable[[str], Outcome], name: Optional[str] = None
    ):
        object.__setattr__(self, '_fn', fn)
        object.__setattr__(self, 'name', name)

    def __setattr__(self, key, value):
        raise AttributeError(f'Parser objects are immutable (`{key}`)')

    def __repr__(self):
        return f'Parser({self.name or "<anonymous>"})'

    def __or__(self, other: 'Parser') -> 'Parser':
        return option(self, other)

    def run(self, text: str) -> Outcome:
        """Run the parser over `text` and return the outcome."""
        return self._fn(text)

    def bind(self, binder: Callable[[Any], 'Parser']) -> 'Parser':
        """Sequence this parser with the parser computed by `binder`.

        If this parser fails, the result fails and `binder` is never
        called. Otherwise `binder` is called with the parsed value and the
        parser it returns is run on whatever text is left.
        """

        def _bind(text):
            res = self._fn(text)
            if not res.ok:
                return res
            return binder(res.val).run(res.rest)

        return Parser(_bind, 'bind')

    def map(self, fn: Callable[[Any], Any]) -> 'Parser':
        return self.bind(lambda val: unit(fn(val)))


def unit(val: Any) -> Parser:
    """Returns a parser that succeeds with `val` without consuming input."""
    return Parser(lambda text: Success(val, text), 'unit')


def failure() -> Parser:
    """Returns a parser that always fails."""
    return Parser(lambda text: FAILURE, 'failure')


def item() -> Parser:
    """Returns a parser that consumes and returns any single character."""

    def _item(text):
        if not text:
            return FAILURE
        return Success(text[0], text[1:])

    return Parser(_item, 'item')


def end() -> Parser:
    """Returns a parser that succeeds (with None) only at the end of input."""

    def _end(text):
        if text:
            return FAILURE
        return Success(None, text)

    return Parser(_end, 'end')


def satisfy(predicate: Callable[[str], bool]) -> Parser:
    """Returns a parser for a single character for which `predicate` holds."""
    return item().bind(lambda ch: unit(ch) if predicate(ch) else failure())


def option(p1: Parser, p2: Parser) -> Parser:
    """Ordered choice: try `p1`, and if that fails, try `p2` from the start."""

    def _option(text):
        res = p1.run(text)
        if res.ok:
            return res
        return p2.run(text)

    return Parser(_option, 'option')


def many(p: Parser) -> Parser:
    """Returns a parser for zero or more occurrences of `p`.

    The parser always succeeds, returning a list of the values of every
    consecutive successful application of `p`. A match of `p` that doesn't
    consume anything stops the loop and is not included in the list.
    """

    def _many(text):
        vals = []
        while text:
            res = p.run(text)
            if not res.ok or len(res.rest) == len(text):
                break
            vals.append(res.val)
            text = res.rest
        return Success(vals, text)

    return Parser(_many, 'many')


def some(p: Parser) -> Parser:
    """Returns a parser for one or more occurrences of `p`."""
    rest = many(p)
    return p.bind(lambda first: rest.map(lambda vals: [first] + vals))


def sep_end_by1(
    element: Parser, delimiter: Parser, terminator: Parser
) -> Parser:
    """Returns a parser for a non-empty, delimited, terminated list.

    This matches `element`, followed by any number of `delimiter element`
    pairs, followed by `terminator`, and returns the list of element values.
    At each step the delimiter is tried before the terminator.

    If any part of the list doesn't match, the whole list fails; there is
    no partial result. A `delimiter element` pair that consumes nothing
    is also treated as a failure, since it could otherwise repeat forever.
    """

    def _sep_end_by1(text):
        res = element.run(text)
        if not res.ok:
            return FAILURE
        vals = [res.val]
        cur = res.rest
        while True:
            res = delimiter.run(cur)
            if not res.ok:
                res = terminator.run(cur)
                if not res.ok:
                    return FAILURE
                return Success(vals, res.rest)
            res = element.run(res.rest)
            if not res.ok or len(res.rest) == len(cur):
                return FAILURE
            vals.append(res.val)
            cur = res.rest

    return Parser(_sep_end_by1, 'sep_end_by1')
