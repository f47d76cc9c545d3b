"""Word list loaded into a trie for prefix completion."""

from __future__ import annotations

import logging
import os

from prefixtrie.constants import DICTIONARY_SEARCH_PATHS, FALLBACK_WORDS
from prefixtrie.node import Word
from prefixtrie.trie import Trie

log = logging.getLogger("prefixtrie")


def load_words(trie: Trie, path: str) -> int:
    """Add every non-blank line of ``path`` to ``trie``.

    Returns the number of words that were new to the trie. OSError from
    opening or reading the file propagates.
    """
    added = 0
    with open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
        for line in f:
            word = line.rstrip("\r\n")
            if word and trie.add_word(word):
                added += 1
    log.debug("Read %d new words from %s", added, path)
    return added


class Dictionary:
    """Trie filled from the first dictionary file found.

    An explicit ``dict_path`` is tried first, then the default search
    paths. When nothing is found a small built-in word list is used.
    """

    def __init__(self, dict_path: str | None = None, trie: Trie | None = None):
        self.trie = trie if trie is not None else Trie()
        self.source: str | None = None
        self._load(dict_path)

    def _load(self, dict_path: str | None) -> None:
        search_paths: list[str] = []
        if dict_path:
            search_paths.append(dict_path)
        search_paths.extend(DICTIONARY_SEARCH_PATHS)

        for path in search_paths:
            if os.path.exists(path):
                load_words(self.trie, path)
                if len(self.trie):
                    self.source = path
                    log.info("Loaded %s words from %s", f"{len(self.trie):,}", path)
                    return

        log.warning("No dictionary file found -- using built-in minimal word list.")
        log.warning("Pass --dict or install /usr/share/dict/words for full results.")
        self.trie.add_words(FALLBACK_WORDS)

    def complete(self, prefix: Word, limit: int) -> list[Word]:
        return self.trie.words_matching_prefix(prefix, limit)

    def __contains__(self, word: object) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return len(self.trie)
