"""Handle-style functions over :class:`~prefixtrie.trie.Trie`.

Each function takes the trie as its first argument and raises
NullTrieError when it is ``None``, so callers holding an optional handle
get a trie error rather than an AttributeError.
"""

from __future__ import annotations

from prefixtrie.errors import NullTrieError
from prefixtrie.hooks import (
    AllocationListener,
    set_allocation_listener,
    set_deallocation_listener,
)
from prefixtrie.node import Word
from prefixtrie.trie import Trie

__all__ = [
    "add_word",
    "contains_word",
    "create",
    "destroy",
    "set_allocation_listener",
    "set_deallocation_listener",
    "words_matching_prefix",
]


def _require(trie: Trie | None) -> Trie:
    if trie is None:
        raise NullTrieError("trie is None")
    return trie


def create(
    on_allocate: AllocationListener | None = None,
    on_deallocate: AllocationListener | None = None,
) -> Trie:
    return Trie(on_allocate=on_allocate, on_deallocate=on_deallocate)


def add_word(trie: Trie | None, word: Word) -> None:
    _require(trie).add_word(word)


def contains_word(trie: Trie | None, word: Word) -> bool:
    return _require(trie).contains_word(word)


def words_matching_prefix(trie: Trie | None, prefix: Word, capacity: int) -> tuple[int, list[Word]]:
    """Return ``(count, words)`` with ``count <= capacity``."""
    words = _require(trie).words_matching_prefix(prefix, capacity)
    return len(words), words


def destroy(trie: Trie | None) -> None:
    _require(trie).destroy()
