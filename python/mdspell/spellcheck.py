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

from .diagnostic import build_diagnostic, remediation_menu, apply_choice
from .extract import extract_tokens
from .linter import Linter
from .resolve import Resolver


class Spellchecker(Linter):
    """Spellchecks the prose of markdown documents.

    A pass collects every word first, asks the dictionary about all the
    uncached ones in one request, and then flags the misspelled words in
    document order.
    """
    def __init__(self, cache, dictionary):
        super(Spellchecker, self).__init__()
        self.resolver = Resolver(cache, dictionary)

    @property
    def cache(self):
        return self.resolver.cache

    def lint(self, document, autocorrect_values=None):
        if autocorrect_values is None:
            autocorrect_values = document.autocorrect_values

        tokens = extract_tokens(document.tree, document.text)
        if not self.resolver.resolve_batch([t.word for t in tokens]):
            # correctness unknown, flag nothing
            self.print_err("dictionary unavailable, not flagging {} words".format(len(tokens)))
            return []

        return [build_diagnostic(t) for t in tokens
                if not self.resolver.is_correct(t.word, autocorrect_values)]

    def remediate(self, action, choose):
        """Offers replacements for the word of `action`.

        `choose(items)` presents the menu items and returns the id of the
        one picked, or None. Returns a Remediation; for a replacement its
        `edit` still has to be applied by the caller.
        """
        suggestions = self.resolver.suggestions_for(action.word)
        choice = choose(remediation_menu(suggestions))
        return apply_choice(action, choice, self.resolver)
