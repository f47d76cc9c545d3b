"""Prefix trie for word membership and prefix lookups."""

from __future__ import annotations

import logging
from itertools import islice
from typing import Any, Iterable, Iterator

from prefixtrie import hooks
from prefixtrie.errors import AllocationError, EmptyWordError, NullTrieError, NullWordError
from prefixtrie.hooks import AllocationListener
from prefixtrie.node import Char, NodeList, TrieNode, Word

log = logging.getLogger("prefixtrie")


def as_key(word: Any) -> Word:
    """Return the immutable key the trie stores for ``word``.

    ``str`` is used as is and walks by character. Byte-like input is copied
    to ``bytes`` and walks by 8-bit value, so the trie never shares a
    buffer with the caller.
    """
    if word is None:
        raise NullWordError("word is None")
    if isinstance(word, (str, bytes)):
        return word
    if isinstance(word, (bytearray, memoryview)):
        return bytes(word)
    raise TypeError(f"word must be str or bytes-like, not {type(word).__name__}")


class Trie:
    """Prefix trie storing whole words.

    Sibling order follows insertion order, and prefix queries return words
    in that order, depth first.

    Not thread-safe: callers sharing a trie across threads must lock around
    every operation.
    """

    __slots__ = ("_root", "_word_count", "_node_count", "_on_allocate", "_on_deallocate")

    def __init__(
        self,
        on_allocate: AllocationListener | None = None,
        on_deallocate: AllocationListener | None = None,
    ):
        try:
            self._root: NodeList | None = NodeList()
        except MemoryError as exc:
            raise AllocationError("could not allocate trie") from exc
        self._word_count = 0
        self._node_count = 0
        self._on_allocate = on_allocate if on_allocate is not None else hooks.get_allocation_listener()
        self._on_deallocate = on_deallocate if on_deallocate is not None else hooks.get_deallocation_listener()
        if self._on_allocate is not None:
            self._on_allocate(self)

    # Mutation

    def add_word(self, word: Word) -> bool:
        """Insert ``word``. Returns True if it was not stored before.

        Raises EmptyWordError for a zero-length word and AllocationError if a
        node cannot be created; in the latter case the nodes already created
        for the word stay in place.
        """
        root = self._live_root()
        key = as_key(word)
        if not key:
            raise EmptyWordError("cannot add an empty word")

        nodes = root
        node = None
        for ch in key:
            node = nodes.find(ch)
            if node is None:
                node = self._attach_node(nodes, ch)
            nodes = node.children

        if node.word is not None:
            return False
        node.word = key
        self._word_count += 1
        return True

    def add_words(self, words: Iterable[Word]) -> int:
        """Insert every word from ``words``. Returns how many were new."""
        added = 0
        for word in words:
            if self.add_word(word):
                added += 1
        return added

    def destroy(self) -> None:
        """Release every node, then the trie itself.

        The trie cannot be used afterwards; any further call raises
        NullTrieError.
        """
        root = self._live_root()

        # Pre-order walk; released in reverse so children go before parents.
        order: list[TrieNode] = []
        stack = list(root)
        while stack:
            node = stack.pop()
            order.append(node)
            stack.extend(node.children)

        for node in reversed(order):
            node.children.clear()
            node.word = None
            if self._on_deallocate is not None:
                self._on_deallocate(node)

        root.clear()
        self._root = None
        self._word_count = 0
        self._node_count = 0
        log.debug("Destroyed trie, released %d nodes", len(order))
        if self._on_deallocate is not None:
            self._on_deallocate(self)

    # Queries

    def contains_word(self, word: Word) -> bool:
        """True if ``word`` itself was inserted, not merely a longer word
        starting with it. The empty word is never contained."""
        self._live_root()
        key = as_key(word)
        if not key:
            return False
        node = self._walk(key)
        return node is not None and node.word is not None

    def is_prefix(self, prefix: Word) -> bool:
        """True if at least one stored word starts with ``prefix``."""
        return next(self.iter_words_matching_prefix(prefix), None) is not None

    def words_matching_prefix(self, prefix: Word, capacity: int) -> list[Word]:
        """Return at most ``capacity`` stored words starting with ``prefix``.

        An empty prefix matches every word. A prefix with no match gives an
        empty list. The walk stops as soon as ``capacity`` words are found.
        """
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        matches = self.iter_words_matching_prefix(prefix)
        return list(islice(matches, capacity))

    def iter_words_matching_prefix(self, prefix: Word) -> Iterator[Word]:
        """Lazily yield stored words starting with ``prefix``.

        Arguments are checked immediately; the walk itself only advances as
        far as the consumer pulls.
        """
        root = self._live_root()
        key = as_key(prefix)
        if not key:
            return self._collect(list(reversed(root)))
        node = self._walk(key)
        if node is None:
            return iter(())
        return self._collect([node])

    # Python protocols

    def __contains__(self, word: object) -> bool:
        try:
            return self.contains_word(word)
        except (TypeError, NullWordError):
            return False

    def __len__(self) -> int:
        return self._word_count

    def __iter__(self) -> Iterator[Word]:
        return self.iter_words_matching_prefix("")

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def destroyed(self) -> bool:
        return self._root is None

    def __repr__(self) -> str:
        if self._root is None:
            return "Trie(<destroyed>)"
        return f"Trie(words={self._word_count}, nodes={self._node_count})"

    # Internals

    def _live_root(self) -> NodeList:
        if self._root is None:
            raise NullTrieError("trie has been destroyed")
        return self._root

    def _walk(self, key: Word) -> TrieNode | None:
        nodes = self._root
        node = None
        for ch in key:
            node = nodes.find(ch)
            if node is None:
                return None
            nodes = node.children
        return node

    def _attach_node(self, nodes: NodeList, ch: Char) -> TrieNode:
        # Counted and reported only once the node is reachable for destroy().
        try:
            node = TrieNode(ch)
            nodes.append(node)
        except MemoryError as exc:
            log.warning("Node allocation failed for %r; trie keeps the partial path", ch)
            raise AllocationError(f"could not allocate node for {ch!r}") from exc
        self._node_count += 1
        if self._on_allocate is not None:
            self._on_allocate(node)
        return node

    @staticmethod
    def _collect(stack: list[TrieNode]) -> Iterator[Word]:
        # Pre-order: a node's word, then its children, then its next sibling.
        while stack:
            node = stack.pop()
            if node.word is not None:
                yield node.word
            stack.extend(reversed(node.children))
