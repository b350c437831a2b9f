# Copyright 2017 Google Inc. All rights reserved.
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


import io
import os
import sys


class Host:
    """Access to the real stdin, stdout, stderr, and filesystem."""

    def __init__(self):
        self.stdin = sys.stdin
        self.stdout = sys.stdout
        self.stderr = sys.stderr

    def exists(self, path):
        return os.path.exists(path)

    def print(self, *args, end='\n', file=None, flush=True):
        file = file or self.stdout
        print(*args, end=end, file=file, flush=flush)

    def read_text_file(self, path):
        with open(path, encoding='utf-8') as f:
            return f.read()


class FakeHost:
    """An in-memory stand-in for `Host`, for use in tests.

    Files live in `self.files`, keyed by path, and the standard streams
    are `io.StringIO` objects.
    """

    def __init__(self):
        self.stdin = io.StringIO()
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        self.files = {}

    def exists(self, path):
        return path in self.files

    def print(self, *args, end='\n', file=None, flush=True):
        file = file or self.stdout
        print(*args, end=end, file=file, flush=flush)

    def read_text_file(self, path):
        return self.files[path]

    def write_text_file(self, path, contents):
        self.files[path] = contents
