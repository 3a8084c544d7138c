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

from .cache import LookupCache
from .diagnostic import Diagnostic, RemediationAction, Remediation
from .document import Document
from .extract import Token, extract_tokens
from .host import DictionaryPeer, SpellcheckHost, connect, spawn_provider
from .linter import Linter
from .provider import DictionaryProvider, start_provider
from .resolve import Resolver
from .sanitize import sanitize_term
from .spellcheck import Spellchecker
from .syntax import Node, walk
