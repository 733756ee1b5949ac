"""Prefix tree over lower-case ASCII words."""

from __future__ import annotations


def _letter(ch: str) -> str:
    if not "a" <= ch <= "z":
        raise ValueError(f"unsupported character {ch!r}; only a-z allowed")
    return ch


class TrieNode:
    """Node of a trie; the root holds the whole dictionary."""

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.is_end = False
        self.word = ""

    def add(self, word: str) -> None:
        node = self
        for ch in word:
            node = node.children.setdefault(_letter(ch), TrieNode())
        if word:
            node.is_end = True
            node.word = word

    def search_prefix(self, word: str) -> list[str]:
        """Return stored words that prefix ``word``, shortest first, then ``word``."""
        found = []
        node = self
        for ch in word:
            child = node.children.get(_letter(ch))
            if child is None:
                break
            if child.is_end:
                found.append(child.word)
            node = child
        found.append(word)
        return found


def replace_words(dictionary: list[str], sentence: str) -> str:
    """Replace each word of ``sentence`` by its shortest root from ``dictionary``."""
    root = TrieNode()
    for word in dictionary:
        root.add(word)
    return " ".join(root.search_prefix(w)[0] for w in sentence.split(" "))