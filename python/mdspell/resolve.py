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

from .sanitize import sanitize_term


class Resolver(object):
    """Answers spelling questions from the cache, asking the dictionary on a miss.

    `dictionary` is anything with `check(terms)` and `suggest(terms)`
    returning a list parallel to `terms`, or None when it has no answer
    (see DictionaryPeer).
    """
    def __init__(self, cache, dictionary):
        self.cache = cache
        self.dictionary = dictionary

    def resolve_batch(self, words):
        """Caches the correctness of every word in a single request.

        Words that are already cached are not sent. Returns False if the
        dictionary failed to answer, True otherwise.
        """
        terms = [sanitize_term(w) for w in words]
        terms = [t for t in terms if not self.cache.has_correctness(t)]
        if not terms:
            return True

        generation = self.cache.generation
        correct = self.dictionary.check(terms)
        if correct is None:
            print("could not spellcheck {} terms: dictionary returned nothing".format(len(terms)),
                  file=sys.stderr, flush=True)
            return False

        for term, is_correct in zip(terms, correct):
            self.cache.set_correctness(term, is_correct, generation)
        return True

    def is_correct(self, word, autocorrect_values=()):
        term = sanitize_term(word)
        # autocorrect replacements are always correct
        if term in autocorrect_values:
            return True

        cached = self.cache.correctness(term)
        if cached is not None:
            return cached

        generation = self.cache.generation
        correct = self.dictionary.check([term])
        if correct is None:
            return True
        self.cache.set_correctness(term, correct[0], generation)
        return bool(correct[0])

    def suggestions_for(self, word):
        """Returns the dictionary's ranked replacements for `word`.

        Only called when the user asks for them, never during a lint pass.
        """
        term = sanitize_term(word)
        cached = self.cache.suggestions(term)
        if cached is not None:
            return cached

        generation = self.cache.generation
        suggestions = self.dictionary.suggest([term])
        if suggestions is None:
            print("no suggestions for {!r}: dictionary returned nothing".format(term),
                  file=sys.stderr, flush=True)
            return []
        self.cache.set_suggestions(term, suggestions[0], generation)
        return list(suggestions[0])

    def add_word(self, word):
        """Registers `word` as correct in the dictionary."""
        return self.dictionary.add_word([sanitize_term(word)])
