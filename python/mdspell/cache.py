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

import threading


class LookupCache(object):
    """Remembers what the dictionary said about each sanitized term.

    LookupCache holds two maps: whether a term is spelled correctly, and
    the ranked suggestions for it. Both live until `clear` is called, which
    happens whenever the dictionary announces that its contents changed.
    An entry is never overwritten with a different value in between.

    Every `clear` starts a new generation. Callers that fetch from the
    dictionary capture `generation` first and hand it back to `set_*`;
    answers that arrive after a clear are then dropped instead of
    repopulating the fresh cache with old data.
    """
    def __init__(self):
        self._lock = threading.Lock()
        self._correct = {}
        self._suggestions = {}
        self._generation = 0

    @property
    def generation(self):
        return self._generation

    def __len__(self):
        return len(self._correct)

    def has_correctness(self, term):
        with self._lock:
            return term in self._correct

    def correctness(self, term):
        """Returns True/False for a cached term, or None on a miss."""
        with self._lock:
            return self._correct.get(term)

    def set_correctness(self, term, correct, generation=None):
        with self._lock:
            if generation is not None and generation != self._generation:
                return
            self._correct.setdefault(term, bool(correct))

    def suggestions(self, term):
        """Returns a copy of the cached suggestions, or None on a miss."""
        with self._lock:
            cached = self._suggestions.get(term)
        return list(cached) if cached is not None else None

    def set_suggestions(self, term, suggestions, generation=None):
        with self._lock:
            if generation is not None and generation != self._generation:
                return
            self._suggestions.setdefault(term, tuple(suggestions))

    def clear(self):
        """Drops both maps at once."""
        with self._lock:
            self._correct.clear()
            self._suggestions.clear()
            self._generation += 1
