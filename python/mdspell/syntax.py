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

"""A minimal syntax tree, as handed over by the editor's markdown parser."""

from collections import namedtuple

DESCEND = True
SKIP = False


Node = namedtuple('Node', ['kind', 'start', 'end', 'children'], defaults=((),))


def walk(root, visit):
    """Visits `root` and its descendants depth-first, in document order.

    `visit(node)` returns DESCEND to continue into the node's children or
    SKIP to leave the whole subtree alone.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if visit(node) == SKIP:
            continue
        # reversed, so the leftmost child is popped first
        stack.extend(reversed(node.children))


def node_from_dict(data):
    """Builds a tree from the JSON shape {kind, from, to, children}."""
    children = tuple(node_from_dict(c) for c in data.get('children') or ())
    return Node(data['kind'], data['from'], data['to'], children)
