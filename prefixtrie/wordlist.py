"""Word lists: reading newline separated files into a trie."""

from __future__ import annotations

import logging
import os

from prefixtrie.constants import COMMENT_PREFIX, DEFAULT_ENCODING, WORDLIST_SEARCH_PATHS
from prefixtrie.trie import Node

log = logging.getLogger("prefixtrie")


def read_words(path: str, encoding: str = DEFAULT_ENCODING) -> list[str]:
    """Words from *path*, one per line, skipping blanks and ``#`` comments."""
    words: list[str] = []
    with open(path, "r", encoding=encoding) as f:
        for line in f:
            word = line.strip()
            if not word or word.startswith(COMMENT_PREFIX):
                continue
            words.append(word)
    return words


def load(path: str, trie: Node | None = None, encoding: str = DEFAULT_ENCODING) -> Node:
    """Index the words in *path* into *trie* (a fresh one by default)."""
    if trie is None:
        trie = Node()
    words = read_words(path, encoding=encoding)
    trie.index(words)
    log.info("Loaded %s words from %s", f"{len(set(words)):,}", path)
    return trie


def find_wordlist(path: str | None = None) -> str | None:
    """First existing word list: *path* if given, then the default locations."""
    search_paths: list[str] = []
    if path:
        search_paths.append(path)
    search_paths.extend(WORDLIST_SEARCH_PATHS)

    for candidate in search_paths:
        if os.path.isfile(candidate):
            log.debug("Using word list %s", candidate)
            return candidate
    return None
