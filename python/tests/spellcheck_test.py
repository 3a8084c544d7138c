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

from mdspell import Document, LookupCache, Node, Spellchecker
from mdspell.diagnostic import (
    RemediationAction, ADD_TO_DICTIONARY, NO_SUGGESTION, NOTHING, ADD_WORD, REPLACE)
from mdspell.host import DictionaryPeer, SpellcheckHost
from mdspell.provider import DictionaryProvider
from mdspell.rpc import RpcPeer

from fakes import (
    BrokenPipe, FakeDictionary, FakeEnchant, Loopback, Pipe, block, paragraph_doc)


def make(**kwargs):
    dictionary = FakeDictionary(**kwargs)
    return Spellchecker(LookupCache(), dictionary), dictionary


def test_misspelled_word_is_flagged():
    checker, dictionary = make(misspelled=["recieved"])
    document = paragraph_doc("This is recieved.")
    diagnostics = checker.lint(document)
    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert (diagnostic.start, diagnostic.end) == (8, 16)
    assert document.slice(diagnostic.start, diagnostic.end) == "recieved"
    assert diagnostic.severity == 'error'
    assert diagnostic.source == 'spellcheck'
    assert diagnostic.action.word == "recieved"


def test_one_batch_request_per_pass():
    checker, dictionary = make(misspelled=["wrold"])
    document = paragraph_doc("hello wrold hello again")
    checker.lint(document)
    assert dictionary.checked == [["hello", "wrold", "hello", "again"]]
    checker.lint(document)
    assert len(dictionary.checked) == 1


def test_code_is_never_checked():
    checker, dictionary = make(misspelled=["wrods"])
    text = "```\nsome wrods here\n```"
    tree = Node('Document', 0, len(text), (Node('FencedCode', 0, len(text)),))
    assert checker.lint(Document(text, tree)) == []
    assert dictionary.checked == []


def test_unavailable_dictionary_flags_nothing():
    checker, dictionary = make(misspelled=["wrold"], available=False)
    assert checker.lint(paragraph_doc("hello wrold")) == []
    assert checker.resolver.is_correct("wrold") is True
    assert checker.resolver.is_correct("hello") is True


def test_autocorrect_values_from_config():
    config = {'autocorrect': {'replacements': [{'key': 'teh', 'value': 'thé'}]}}
    checker, dictionary = make(misspelled=["thé"])
    assert checker.lint(paragraph_doc("thé time", config)) == []
    assert len(checker.lint(paragraph_doc("thé time"))) == 1


def test_explicit_autocorrect_values_win():
    checker, dictionary = make(misspelled=["wrold"])
    assert checker.lint(paragraph_doc("wrold"), ["wrold"]) == []


def test_diagnostics_in_document_order():
    checker, dictionary = make(misspelled=["zzz", "aaa", "mmm"])
    text = "zzz first\n\nsecond aaa\n\nmmm"
    tree = Node('Document', 0, len(text), (
        block('Paragraph', text, "zzz first"),
        block('Paragraph', text, "second aaa"),
        block('Paragraph', text, "mmm"),
    ))
    diagnostics = checker.lint(Document(text, tree))
    assert [text[d.start:d.end] for d in diagnostics] == ["zzz", "aaa", "mmm"]


def test_suggestions_are_not_fetched_while_linting():
    checker, dictionary = make(misspelled=["wrold"], suggestions={"wrold": ["world"]})
    checker.lint(paragraph_doc("hello wrold"))
    assert dictionary.suggested == []


def test_remediate_replace():
    checker, dictionary = make(misspelled=["wrold"], suggestions={"wrold": ["world", "would"]})
    document = paragraph_doc("hello wrold")
    action = checker.lint(document)[0].action
    offered = []

    def choose(items):
        offered.extend(items)
        return "world"

    remediation = checker.remediate(action, choose)
    assert [i.id for i in offered] == [ADD_TO_DICTIONARY, None, "world", "would"]
    assert remediation.kind == REPLACE
    assert remediation.edit.apply(document.text) == "hello world"
    assert dictionary.added == []


def test_remediate_add_word():
    checker, dictionary = make(misspelled=["Zettlr"])
    action = RemediationAction("Zettlr", 0, 6)
    remediation = checker.remediate(action, lambda items: ADD_TO_DICTIONARY)
    assert remediation == (ADD_WORD, None)
    assert dictionary.added == ["Zettlr"]


def test_remediate_nothing():
    checker, dictionary = make(misspelled=["wrold"])
    action = RemediationAction("wrold", 0, 5)
    offered = []

    def choose(items):
        offered.extend(items)
        return None

    assert checker.remediate(action, choose).kind == NOTHING
    assert offered[-1].id == NO_SUGGESTION
    assert checker.remediate(action, lambda items: NO_SUGGESTION).kind == NOTHING
    assert dictionary.added == []


def test_lint_over_rpc_and_add_word_invalidates():
    enchant = FakeEnchant(["hello"], {"wrold": ["world"]})
    cache = LookupCache()
    to_client = Pipe()
    provider = RpcPeer(DictionaryProvider(enchant), stdin=Pipe(), stdout=to_client)
    peer = DictionaryPeer(SpellcheckHost(cache), stdin=to_client, stdout=Loopback(provider))
    checker = Spellchecker(cache, peer)

    document = paragraph_doc("hello wrold")
    diagnostics = checker.lint(document)
    assert [document.slice(d.start, d.end) for d in diagnostics] == ["wrold"]
    assert cache.correctness("hello") is True

    remediation = checker.remediate(diagnostics[0].action, lambda items: ADD_TO_DICTIONARY)
    assert remediation.kind == ADD_WORD
    assert "wrold" in enchant.words
    # the provider announced the change, so the old verdict is gone
    assert cache.correctness("wrold") is None
    assert checker.lint(document) == []


def test_dead_provider_flags_nothing():
    cache = LookupCache()
    peer = DictionaryPeer(SpellcheckHost(cache), stdin=Pipe(), stdout=BrokenPipe())
    checker = Spellchecker(cache, peer)
    assert checker.lint(paragraph_doc("hello wrold")) == []
    assert peer.done
    assert checker.resolver.is_correct("wrold") is True
    assert checker.resolver.suggestions_for("wrold") == []


def test_garbled_provider_output_flags_nothing():
    cache = LookupCache()
    peer = DictionaryPeer(SpellcheckHost(cache), stdin=Pipe(['enchant warning: blah']),
                          stdout=Pipe())
    checker = Spellchecker(cache, peer)
    assert checker.lint(paragraph_doc("hello wrold")) == []
    assert len(cache) == 0


def test_concurrent_passes_share_one_peer():
    enchant = FakeEnchant(["hello", "there"])
    cache = LookupCache()
    to_client = Pipe()
    provider = RpcPeer(DictionaryProvider(enchant), stdin=Pipe(), stdout=to_client)
    loopback = Loopback(provider)
    peer = DictionaryPeer(SpellcheckHost(cache), stdin=to_client, stdout=loopback)
    checker = Spellchecker(cache, peer)
    failures = []

    def run(worker):
        for i in range(25):
            typo = "wrold" + "x" * (worker * 25 + i + 1)
            document = paragraph_doc("hello {} there".format(typo))
            found = [document.slice(d.start, d.end) for d in checker.lint(document)]
            if found != [typo]:
                failures.append((typo, found))

    threads = [threading.Thread(target=run, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert failures == []
    assert not peer.done
    # every request got its own id and was answered in turn
    assert [m['id'] for m in loopback.received] == list(range(peer.id_counter))
    assert peer.id_counter >= 100
    assert not to_client.lines
