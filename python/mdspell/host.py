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

import subprocess
import sys

from .cache import LookupCache
from .rpc import RpcPeer


class DictionaryPeer(RpcPeer):
    """A proxy object which wraps the RPC methods of a dictionary provider.

    Each method returns None when the provider could not answer.
    """

    def check(self, terms):
        return self._parallel(terms, self.send_rpc_sync('check', {'terms': terms}))

    def suggest(self, terms):
        return self._parallel(terms, self.send_rpc_sync('suggest', {'terms': terms}))

    def add_word(self, terms):
        return self.send_rpc_sync('add', {'terms': terms})

    def _parallel(self, terms, results):
        if results is None:
            return None
        if len(results) != len(terms):
            print("dictionary answered {} results for {} terms".format(
                len(results), len(terms)), file=sys.stderr, flush=True)
            return None
        return results


class SpellcheckHost(object):
    """Handles notifications sent by the dictionary provider."""

    def __init__(self, cache):
        self.cache = cache

    def invalidate_dict(self, peer, **params):
        """The dictionary changed; nothing cached can be trusted any more."""
        self.cache.clear()

    def ping(self, peer, **params):
        pass

    def shutdown(self, peer, **params):
        peer.done = True


def connect(stdin, stdout, cache=None):
    """Returns a (cache, peer) pair talking to a provider over the given streams."""
    cache = cache if cache is not None else LookupCache()
    peer = DictionaryPeer(SpellcheckHost(cache), stdin=stdin, stdout=stdout)
    return cache, peer


def spawn_provider(argv, cache=None):
    """Starts a dictionary provider process and connects to its pipes.

    Returns (cache, peer, process).
    """
    process = subprocess.Popen(argv, stdin=subprocess.PIPE, stdout=subprocess.PIPE,
                               text=True, encoding='utf-8', bufsize=1)
    cache, peer = connect(process.stdout, process.stdin, cache)
    return cache, peer, process
