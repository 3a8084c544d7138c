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

from .config import autocorrect_values
from .syntax import Node, node_from_dict


class Document(object):
    """A snapshot of an editor buffer: its text, syntax tree and settings.

    Only the nodes of `tree` are checked. Without a tree the document is a
    bare Document node with no children, so nothing in it gets checked.
    """
    def __init__(self, text, tree=None, config=None):
        self.text = text
        self.tree = tree if tree is not None else Node('Document', 0, len(text))
        self.config = config or {}

    @classmethod
    def from_dict(cls, data):
        return cls(data['text'], node_from_dict(data['tree']), data.get('config'))

    def slice(self, start, end):
        return self.text[start:end]

    @property
    def autocorrect_values(self):
        return autocorrect_values(self.config)

    def __len__(self):
        return len(self.text)
