"""Prefix trie for word, prefix and completion lookups."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

from sortedcontainers import SortedDict


def _chars(s: str | bytes) -> str:
    """Decoded text of *s*; bytes are read as UTF-8."""
    if isinstance(s, bytes):
        return s.decode("utf-8", errors="replace")
    return s


class Node:
    """Single node in the prefix trie.

    The root node is the trie itself: every operation is a method on a node
    and works on the subtree below it.  Children are kept in a SortedDict so
    enumeration and printing always go in ascending code-point order.

    Walks over the subtree use an explicit stack, so word length is not
    limited by the interpreter's recursion limit.
    """

    __slots__ = ("children", "is_terminal")

    def __init__(self) -> None:
        self.children: SortedDict[str, Node] = SortedDict()
        self.is_terminal: bool = False

    # building

    def index(self, words: Iterable[str | bytes]) -> None:
        """Insert every word of *words*, in order."""
        for word in words:
            self.insert(word)

    def insert(self, s: str | bytes) -> None:
        node = self
        for ch in _chars(s):
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = Node()
            node = child
        node.is_terminal = True

    # queries

    def search(self, s: str | bytes) -> list[str]:
        """All stored strings that start with *s*, *s* included if stored.

        A prefix that leaves the stored paths anywhere matches nothing.
        """
        s = _chars(s)
        node = self._walk(s)
        if node is None:
            return []
        return node.all(s)

    def all(self, prefix: str = "") -> list[str]:
        """Every string stored under this node, each prefixed by *prefix*."""
        return list(self._words(prefix))

    def _words(self, prefix: str) -> Iterator[str]:
        # pre-order: a node's own word, then its children smallest first
        stack: list[tuple[str, Node]] = [(prefix, self)]
        while stack:
            path, node = stack.pop()
            if node.is_terminal:
                yield path
            for ch in reversed(node.children):
                stack.append((path + ch, node.children[ch]))

    def is_end(self) -> bool:
        return self.is_terminal

    def is_word(self, s: str | bytes) -> bool:
        node = self._walk(_chars(s))
        return node is not None and node.is_terminal

    def is_prefix(self, s: str | bytes) -> bool:
        return self._walk(_chars(s)) is not None

    def for_each(self, f: Callable[[str, Node], None]) -> None:
        """Call ``f(ch, child)`` for each child, smallest character first."""
        for ch, child in self.children.items():
            f(ch, child)

    def _walk(self, s: str) -> Node | None:
        node = self
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # protocols

    def __contains__(self, s: str | bytes) -> bool:
        return self.is_word(s)

    def __len__(self) -> int:
        n = 0
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            if node.is_terminal:
                n += 1
            stack.extend(node.children.values())
        return n

    def __iter__(self) -> Iterator[str]:
        return self._words("")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        stack: list[tuple[Node, Node]] = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a.is_terminal != b.is_terminal:
                return False
            if list(a.children.keys()) != list(b.children.keys()):
                return False
            stack.extend(zip(a.children.values(), b.children.values()))
        return True

    __hash__ = None  # mutable

    # rendering

    def __str__(self) -> str:
        return self._print(0)

    def __repr__(self) -> str:
        return f"<Node words={len(self)} children={list(self.children.keys())}>"

    def _print(self, pad: int) -> str:
        """Each child on its own line, indented by its depth from *pad*, then its subtree."""
        parts: list[str] = []
        stack: list[tuple[int, str, Node]] = [
            (pad, ch, self.children[ch]) for ch in reversed(self.children)
        ]
        while stack:
            depth, ch, node = stack.pop()
            parts.append(" " * depth + ch + "\n")
            for child_ch in reversed(node.children):
                stack.append((depth + 1, child_ch, node.children[child_ch]))
        return "".join(parts)


def new() -> Node:
    """Allocate an empty trie."""
    return Node()
