#!/usr/bin/env python3

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

"""Serves a pyenchant dictionary to mdspell over stdin/stdout.

Run it through `mdspell.spawn_provider(['python3', 'dictionary_provider.py'])`.
"""

import sys

from mdspell import start_provider
from mdspell.config import dictionary_language, personal_word_list

try:
    import enchant
except ImportError:
    print("dictionary provider requires pyenchant: https://github.com/pyenchant/pyenchant",
          file=sys.stderr, flush=True)
    sys.exit(1)


def open_dictionary():
    lang = dictionary_language()
    pwl = personal_word_list()
    if pwl:
        dictionary = enchant.DictWithPWL(lang, pwl)
    else:
        dictionary = enchant.Dict(lang)
    print("PROVIDER>>> loaded dictionary for {}".format(lang), file=sys.stderr, flush=True)
    return dictionary


def main():
    start_provider(open_dictionary())


if __name__ == "__main__":
    main()
