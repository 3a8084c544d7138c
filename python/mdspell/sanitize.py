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

"""Normalizes words into the keys used for dictionary lookups."""

import re

# right/left single and double quotes, the low quote, angle quotes and
# corner brackets all collapse to the ASCII apostrophe.
QUOTE_VARIANTS = '’‘‚“”‹›«»「」'

_quote_re = re.compile('[{}]'.format(QUOTE_VARIANTS))


def sanitize_term(term):
    """Returns `term` with every typographic quote replaced by `'`.

    The result is the form used for cache keys and for requests to the
    dictionary, so that "don’t" and "don't" share one entry.
    """
    return _quote_re.sub("'", term)
