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


import unittest

from pyparsec import FAILURE, Success
from pyparsec import lexical


class Tests(unittest.TestCase):
    def check(self, p, s, val, rest=''):
        self.assertEqual(p.run(s), Success(val, rest))

    def check_fails(self, p, s):
        self.assertEqual(p.run(s), FAILURE)

    def test_char(self):
        self.check(lexical.char('{'), '{x', '{', 'x')
        self.check_fails(lexical.char('{'), 'x{')
        self.check_fails(lexical.char('{'), '')

    def test_char_needs_one_character(self):
        self.assertRaises(ValueError, lexical.char, '')
        self.assertRaises(ValueError, lexical.char, 'ab')

    def test_classes(self):
        self.check(lexical.digit(), '7a', '7', 'a')
        self.check_fails(lexical.digit(), 'a7')
        self.check(lexical.letter(), 'é1', 'é', '1')
        self.check_fails(lexical.letter(), '1é')
        self.check(lexical.lower(), 'aB', 'a', 'B')
        self.check_fails(lexical.lower(), 'Ba')
        self.check(lexical.upper(), 'Ba', 'B', 'a')
        self.check_fails(lexical.upper(), 'aB')
        self.check(lexical.alpha_num(), 'a_', 'a', '_')
        self.check(lexical.alpha_num(), '1_', '1', '_')
        self.check_fails(lexical.alpha_num(), '_1')

    def test_quoted_string(self):
        p = lexical.quoted_string()
        self.check(p, '"name":', 'name', ':')
        self.check(p, '"a1b2"', 'a1b2')
        self.check_fails(p, 'name')
        self.check_fails(p, '""')
        self.check_fails(p, '"na me"')
        self.check_fails(p, '"name')

    def test_space(self):
        self.check(lexical.space(), ' \t\n x', None, 'x')
        self.check(lexical.space(), 'x', None, 'x')
        self.check(lexical.space(), '', None, '')
        self.check(lexical.space(), '\r\f\u00a0x', None, 'x')

    def test_token(self):
        p = lexical.token(lexical.natural())
        self.check(p, '  12  ,', 12, ',')
        self.check(p, '12,', 12, ',')
        self.check_fails(p, '  ,')

    def test_natural(self):
        p = lexical.natural()
        self.check(p, '0', 0)
        self.check(p, '007x', 7, 'x')
        self.check(p, '12345,', 12345, ',')
        self.check(p, '98765432109876543210', 98765432109876543210)
        self.check_fails(p, '-1')
        self.check_fails(p, '')
