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

"""The values returned from running a parser.

An outcome is either a `Success`, holding the parsed value and the
remaining (unconsumed) text, or a `Failure`, which holds nothing at all.

A failed parse has no meaningful position: anything that wants to try
something else after a failure must go back to the text it had before
the attempt. `Failure` deliberately has no `rest` field so that nothing
can come to depend on one.
"""

from typing import Any, NamedTuple, Union


class Success(NamedTuple):
    """A successful parse.

    `val` is the value produced by the parser and `rest` is the suffix of
    the input text that the parser did not consume.
    """

    val: Any
    rest: str

    ok = True


class Failure:
    """A failed parse. All failures are equal to each other."""

    __slots__ = ()

    ok = False

    def __eq__(self, other):
        return isinstance(other, Failure)

    def __hash__(self):
        return hash(Failure)

    def __repr__(self):
        return 'Failure()'


FAILURE = Failure()


Outcome = Union[Success, Failure]
