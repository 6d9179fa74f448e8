"""Prefix trie with search, enumeration and printing."""

from prefixtrie.trie import Node, new
from prefixtrie.wordlist import find_wordlist, load, read_words

__all__ = [
    "Node",
    "find_wordlist",
    "load",
    "new",
    "read_words",
]
