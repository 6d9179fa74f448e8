"""Defaults for word-list loading and the command line."""

from __future__ import annotations

import os

DEFAULT_ENCODING = "utf-8"
COMMENT_PREFIX = "#"

# Tried in order when no --dict is given.
WORDLIST_SEARCH_PATHS: list[str] = [
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

LOG_FORMAT = "[%(levelname)s] %(message)s"
