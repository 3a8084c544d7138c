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

"""The dictionary side of the RPC channel."""

import sys

from .rpc import RpcPeer

PROVIDER_ACK_OK = 1


class DictionaryProvider(object):
    """Answers spellcheck requests from a dictionary object.

    `dictionary` needs `check(word)`, `suggest(word)` and `add(word)`, as
    provided by pyenchant's `Dict` and `DictWithPWL`.
    """
    def __init__(self, dictionary):
        self.dictionary = dictionary

    def print_err(self, err):
        print("PROVIDER>>> {}".format(err), file=sys.stderr)
        sys.stderr.flush()

    def check(self, peer, terms):
        return [bool(self.dictionary.check(t)) for t in terms]

    def suggest(self, peer, terms):
        return [list(self.dictionary.suggest(t)) for t in terms]

    def add(self, peer, terms):
        for term in terms:
            self.dictionary.add(term)
        self.print_err("added {}".format(', '.join(terms)))
        peer.send_rpc('invalidate_dict', {})
        return PROVIDER_ACK_OK

    def ping(self, peer, **params):
        pass

    def shutdown(self, peer, **params):
        peer.done = True


def start_provider(dictionary, stdin=None, stdout=None):
    """Serves `dictionary` over stdin/stdout until the channel closes."""
    provider = DictionaryProvider(dictionary)
    peer = RpcPeer(provider, stdin=stdin, stdout=stdout)
    peer.mainloop()
    provider.print_err("ended main loop")
