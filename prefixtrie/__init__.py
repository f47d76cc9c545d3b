"""Prefix trie -- word membership and bounded prefix completion."""

from prefixtrie.api import add_word, contains_word, create, destroy, words_matching_prefix
from prefixtrie.dictionary import Dictionary, load_words
from prefixtrie.errors import (
    AllocationError,
    EmptyWordError,
    NullTrieError,
    NullWordError,
    TrieError,
)
from prefixtrie.hooks import (
    AllocationCounter,
    set_allocation_listener,
    set_deallocation_listener,
)
from prefixtrie.node import NodeList, TrieNode
from prefixtrie.trie import Trie

__all__ = [
    "AllocationCounter",
    "AllocationError",
    "Dictionary",
    "EmptyWordError",
    "NodeList",
    "NullTrieError",
    "NullWordError",
    "Trie",
    "TrieError",
    "TrieNode",
    "add_word",
    "contains_word",
    "create",
    "destroy",
    "load_words",
    "set_allocation_listener",
    "set_deallocation_listener",
    "words_matching_prefix",
]
