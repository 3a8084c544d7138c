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

"""Pulls the words worth spellchecking out of a markdown syntax tree.

Every node kind is handled in one of three ways: IGNORE skips the node
and everything below it, PASS looks only at the node's children, and
CONTENT takes the node's text as prose. Prose still carries inline
markdown, so it is cleaned with a series of regular expressions before
being split into words; the surviving words are then located again in
the original text to recover their offsets.
"""

from collections import namedtuple

import regex as re

from .syntax import walk, DESCEND, SKIP

IGNORE = 'ignore'
PASS = 'pass'
CONTENT = 'content'

NODE_HANDLING = {
    'FencedCode': IGNORE,
    'HTMLTag': IGNORE,
    'URL': IGNORE,
    'InlineCode': IGNORE,
    'TableDelimiter': IGNORE,
    'CodeMark': IGNORE,
    'HeaderMark': IGNORE,
    'EmphasisMark': IGNORE,
    'LinkMark': IGNORE,
    'QuoteMark': IGNORE,
    'ListMark': IGNORE,

    'Document': PASS,
    'Link': PASS,
    'Image': PASS,
    'BulletList': PASS,
    'OrderedList': PASS,
    'Table': PASS,
}

FRONTMATTER_PREFIX = 'YAML'
SETEXT_PREFIX = 'SetextHeading'

tag_re = re.compile(
    r'''(?<=^|\s|[({\[])#(#?[^\s,.:;\u2026!?"'`\u00bb\u00ab\u201c\u201d\u2018\u2019\u2014\u2013@$%&*^+=|\\~#<>()\[\]{}]+#?)''')
block_prefix_re = re.compile(r'^(?:#{1,6}|>)\s')
emphasis_re = re.compile(r'[_*]{1,3}')
inline_code_re = re.compile(r'`{1,3}.+?`{1,3}')
link_re = re.compile(r'!?\[(.+?)\]\(.+?\)')
html_re = re.compile(r'<.+?>')
# pictographs, flags, skin tones, joiners and variation selectors
emoji_re = re.compile(
    r'[\p{Extended_Pictographic}\U0001F1E6-\U0001F1FF\U0001F3FB-\U0001F3FF'
    r'\u200d\ufe0f\u20e3]+')

whitespace_re = re.compile(r'\s+')
edge_punctuation_re = re.compile(r'^\W+|\W+$')
word_re = re.compile(r'\w+')
digit_re = re.compile(r'\d')


class Token(namedtuple('Token', ['word', 'offset', 'node_start'])):
    """A word found in the text of a node.

    `offset` is relative to the node's text; the word occupies
    [start, end) in the document.
    """
    __slots__ = ()

    @property
    def start(self):
        return self.node_start + self.offset

    @property
    def end(self):
        return self.start + len(self.word)


def handling_for(kind):
    if kind.startswith(FRONTMATTER_PREFIX):
        return IGNORE
    return NODE_HANDLING.get(kind, CONTENT)


def strip_markup(contents):
    """Removes inline markdown from the text of a content node."""
    contents = tag_re.sub('', contents)
    contents = block_prefix_re.sub('', contents)
    contents = emphasis_re.sub('', contents)
    contents = inline_code_re.sub('', contents)
    contents = link_re.sub(r'\1', contents)
    contents = html_re.sub('', contents)
    return emoji_re.sub('', contents)


def prose_words(contents):
    """Returns the checkable words of `contents`, in order."""
    words = []
    for segment in whitespace_re.split(strip_markup(contents)):
        word = edge_punctuation_re.sub('', segment)
        # numbers and things like "mp3" are never spellchecked
        if word and word_re.fullmatch(word) and not digit_re.search(word):
            words.append(word)
    return words


def locate_words(words, source, node_start):
    """Finds each word in `source`, scanning forward only.

    Words that cannot be found after the previous match are dropped.
    """
    tokens = []
    cursor = 0
    for word in words:
        index = source.find(word, cursor)
        if index == -1:
            continue
        tokens.append(Token(word, index, node_start))
        cursor = index + len(word)
    return tokens


def node_tokens(node, source):
    """Extracts the tokens of a single content node whose text is `source`."""
    contents = source
    # setext headings include their === or --- underline
    if node.kind.startswith(SETEXT_PREFIX) and '\n' in contents:
        contents = contents[:contents.rindex('\n')]
    return locate_words(prose_words(contents), source, node.start)


def extract_tokens(tree, text):
    """Returns the tokens of every content node below `tree`, in document order."""
    tokens = []

    def visit(node):
        handling = handling_for(node.kind)
        if handling == IGNORE:
            return SKIP
        if handling == PASS:
            return DESCEND
        tokens.extend(node_tokens(node, text[node.start:node.end]))
        return SKIP

    walk(tree, visit)
    return tokens
