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


class Edit(object):
    """A convenience class for describing a text replacement."""
    def __init__(self, insert_range, new_text, author=None):
        self.start, self.end = insert_range
        self.text = new_text
        self.author = author

    def apply(self, text):
        """Returns `text` with the edit applied."""
        return ''.join((text[:self.start], self.text, text[self.end:]))

    def to_dict(self):
        return {
            "from": self.start,
            "to": self.end,
            "insert": self.text,
            "author": self.author,
        }

    def __eq__(self, other):
        return isinstance(other, Edit) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return repr(self.to_dict())
