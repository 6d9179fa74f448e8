"""Command line / interactive terminal mode for prefixtrie."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from prefixtrie.constants import LOG_FORMAT
from prefixtrie.trie import Node
from prefixtrie.wordlist import find_wordlist, load

log = logging.getLogger("prefixtrie")


def print_matches(matches: list[str]) -> None:
    for word in matches:
        print(word)


def interactive(trie: Node) -> None:
    """Read prefixes from the terminal and print their completions."""
    print()
    print("Commands:")
    print("  PREFIX   -- list stored words starting with PREFIX")
    print("  :all     -- list every stored word")
    print("  :print   -- show the trie")
    print("  :quit    -- exit")
    print()

    while True:
        try:
            inp = input("  prefix> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if inp == ":quit":
            break
        if inp == ":all":
            print_matches(trie.all(""))
            continue
        if inp == ":print":
            print(trie, end="")
            continue

        t0 = time.time()
        matches = trie.search(inp)
        elapsed = time.time() - t0
        print_matches(matches)
        log.debug("%d matches for %r in %.4fs", len(matches), inp, elapsed)
        if not matches:
            print(f"  No words start with {inp!r}.")


def build_trie(dict_path: str | None, extra_words: list[str]) -> Node:
    """Load the word list and any extra words into a new trie.

    An explicit *dict_path* must be readable; without one the default
    locations are tried, and a missing or unreadable default list leaves
    the trie empty.
    """
    trie = Node()
    if dict_path:
        load(dict_path, trie)
    else:
        found = find_wordlist()
        if found:
            try:
                load(found, trie)
            except (OSError, UnicodeDecodeError) as exc:
                log.warning("Could not read word list %s: %s -- starting with an empty trie.",
                            found, exc)
        else:
            log.warning("No word list found -- starting with an empty trie.")
    trie.index(extra_words)
    return trie


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="prefixtrie",
        description="Prefix trie -- load a word list and query it by prefix",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to a word list, one word per line")
    parser.add_argument("--word", action="append", default=[],
                        help="Extra word to insert (repeatable)")
    parser.add_argument("--search", action="append", default=[], metavar="PREFIX",
                        help="Print the stored words starting with PREFIX (repeatable)")
    parser.add_argument("--all", action="store_true",
                        help="Print every stored word")
    parser.add_argument("--print", action="store_true",
                        help="Print the trie, one character per line")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        trie = build_trie(args.dict, args.word)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Could not read word list %s: %s", args.dict, exc)
        return 1

    if not (args.search or args.all or args.print):
        interactive(trie)
        return 0

    for prefix in args.search:
        print_matches(trie.search(prefix))
    if args.all:
        print_matches(trie.all(""))
    if args.print:
        print(trie, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
