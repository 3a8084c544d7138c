# Copyright 2017 The xi-editor Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http:#www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import sys


class Linter(object):
    """Base class for things the editor runs over a document to find problems.

    The editor decides when to lint (usually a short while after the last
    edit); a linter only turns a Document into a list of diagnostics.
    """
    def __init__(self):
        self.identifier = type(self).__name__

    def print_err(self, err):
        print("LINTER {}>>> {}".format(self.identifier, err), file=sys.stderr)
        sys.stderr.flush()

    def lint(self, document):
        raise NotImplementedError
