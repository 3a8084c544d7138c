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

import os

DEFAULT_LANG = 'en_US'


def autocorrect_values(config):
    """Returns the replacement texts of the editor's autocorrect table."""
    autocorrect = config.get('autocorrect') or {}
    return [r['value'] for r in autocorrect.get('replacements') or ()]


def dictionary_language(environ=None):
    environ = os.environ if environ is None else environ
    lang = environ.get('MDSPELL_LANG')
    if lang:
        return lang
    # LC_CTYPE looks like en_US.UTF-8
    lang = environ.get('LC_CTYPE', '').split('.')[0]
    return lang if lang and lang not in ('C', 'POSIX') else DEFAULT_LANG


def personal_word_list(environ=None):
    environ = os.environ if environ is None else environ
    return environ.get('MDSPELL_PWL') or None
