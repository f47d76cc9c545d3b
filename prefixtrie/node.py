"""Nodes and sibling lists of the prefix trie."""

from __future__ import annotations

from typing import Iterator, Union

Char = Union[str, int]
Word = Union[str, bytes]


class TrieNode:
    """One character at one depth of the trie.

    ``word`` holds the complete word ending here, or ``None`` when the node
    only exists as part of a longer word's path.
    """

    __slots__ = ("char", "word", "children")

    def __init__(self, char: Char):
        self.char: Char = char
        self.word: Word | None = None
        self.children: NodeList = NodeList()

    def __repr__(self) -> str:
        return f"TrieNode({self.char!r}, word={self.word!r}, children={len(self.children)})"


class NodeList:
    """Siblings sharing one parent, kept in insertion order.

    Holds at most one node per character. Lookups are a linear scan since
    a list is bounded by the alphabet size.
    """

    __slots__ = ("_nodes",)

    def __init__(self):
        self._nodes: list[TrieNode] = []

    def find(self, char: Char) -> TrieNode | None:
        for node in self._nodes:
            if node.char == char:
                return node
        return None

    def append(self, node: TrieNode) -> None:
        """Add ``node`` at the end. Callers check ``find`` first."""
        self._nodes.append(node)

    def clear(self) -> None:
        self._nodes.clear()

    def __iter__(self) -> Iterator[TrieNode]:
        return iter(self._nodes)

    def __reversed__(self) -> Iterator[TrieNode]:
        return reversed(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)
