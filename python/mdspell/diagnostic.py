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

"""Diagnostics for misspelled words, and what to offer the user about them."""

from collections import namedtuple

from .edit import Edit

SEVERITY_ERROR = 'error'
SOURCE = 'spellcheck'
MESSAGE = 'Spelling mistake'

OFFER_REMEDIATION = 'offer-remediation'

ADD_TO_DICTIONARY = 'add-to-dictionary'
NO_SUGGESTION = 'no-suggestion'

# what a remediation ended up doing
NOTHING = 'none'
ADD_WORD = 'add-word'
REPLACE = 'replace'


MenuItem = namedtuple('MenuItem', ['id', 'label', 'enabled', 'type'],
                      defaults=(True, 'normal'))
SEPARATOR = MenuItem(None, '', False, 'separator')

Remediation = namedtuple('Remediation', ['kind', 'edit'], defaults=(None,))


class RemediationAction(object):
    """Describes the options menu attached to a diagnostic.

    The host runs it through `Spellchecker.remediate` when the user asks.
    """
    kind = OFFER_REMEDIATION

    def __init__(self, word, start, end):
        self.word = word
        self.start = start
        self.end = end

    def to_dict(self):
        return {'kind': self.kind, 'word': self.word,
                'from': self.start, 'to': self.end}

    def __repr__(self):
        return repr(self.to_dict())


class Diagnostic(object):
    def __init__(self, start, end, message=MESSAGE, severity=SEVERITY_ERROR,
                 source=SOURCE, action=None):
        self.start = start
        self.end = end
        self.message = message
        self.severity = severity
        self.source = source
        self.action = action

    def to_dict(self):
        data = {
            'from': self.start,
            'to': self.end,
            'message': self.message,
            'severity': self.severity,
            'source': self.source,
        }
        if self.action is not None:
            data['action'] = self.action.to_dict()
        return data

    def __repr__(self):
        return repr(self.to_dict())


def build_diagnostic(token):
    """Returns the diagnostic for a token known to be misspelled."""
    start = token.node_start + token.offset
    end = start + len(token.word)
    return Diagnostic(start, end, action=RemediationAction(token.word, start, end))


def remediation_menu(suggestions):
    """Builds the menu offered for a misspelled word."""
    items = [MenuItem(ADD_TO_DICTIONARY, 'Add to dictionary'), SEPARATOR]
    if suggestions:
        items.extend(MenuItem(s, s) for s in suggestions)
    else:
        items.append(MenuItem(NO_SUGGESTION, 'No suggestions', enabled=False))
    return items


def apply_choice(action, choice, resolver):
    """Carries out the menu entry `choice` the user picked for `action`.

    Exactly one thing happens: nothing (no choice, or the placeholder),
    the word is added to the dictionary, or an Edit replacing the word's
    span is returned for the host to apply.
    """
    if choice is None or choice == NO_SUGGESTION:
        return Remediation(NOTHING)
    if choice == ADD_TO_DICTIONARY:
        resolver.add_word(action.word)
        return Remediation(ADD_WORD)
    return Remediation(REPLACE, Edit((action.start, action.end), choice, SOURCE))
