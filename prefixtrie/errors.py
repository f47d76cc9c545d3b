"""Exceptions raised by trie operations."""

from __future__ import annotations


class TrieError(Exception):
    """Base class for every error raised by the trie."""


class NullTrieError(TrieError):
    """Operation invoked without a usable trie (missing or destroyed)."""


class NullWordError(TrieError):
    """Word or prefix argument is missing."""


class EmptyWordError(TrieError):
    """Zero-length word passed for insertion."""


class AllocationError(TrieError):
    """A node could not be allocated.

    Nodes created for the part of the word already walked are kept; the
    trie stays valid but holds the partial path.
    """
