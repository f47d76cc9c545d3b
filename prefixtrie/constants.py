"""Defaults shared by the dictionary loader and the command line."""

from __future__ import annotations

import os

DEFAULT_PREFIX = "bar"
DEFAULT_LIMIT = 6

# Tried in order; the first readable file with at least one word wins.
DICTIONARY_SEARCH_PATHS: list[str] = [
    "dictionary.txt",
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    "/usr/share/dict/words",
]

# Used when no dictionary file can be found.
FALLBACK_WORDS: tuple[str, ...] = (
    "aardvark", "aardwolf", "abacus", "able", "about", "above",
    "bar", "barb", "barbecue", "barber", "bard", "bare", "barely",
    "bargain", "barge", "bark", "barley", "barn", "barrel", "barren",
    "body", "bone", "bonus", "book", "border", "bottle", "bottom",
    "cat", "card", "cart", "dog", "door", "doom", "doll",
    "predict", "prefix", "prepare", "present", "type", "typing",
    "wolf", "word", "world", "write",
)
