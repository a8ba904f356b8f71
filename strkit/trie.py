"""A counting trie and the prefix-splitting query built on it."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict = field(default_factory=dict)
    total: int = 0
    ends: int = 0


class Trie:
    """Trie that tracks how many words pass through and end at each node."""

    def __init__(self):
        self.root = _Node()

    def __len__(self) -> int:
        return self.root.total

    def insert(self, word):
        node = self.root
        node.total += 1
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.total += 1
        node.ends += 1

    def split_prefix(self, k):
        """Walk down from the root while the node cannot yet be split into
        ``k`` groups; return the prefix spelled by the path ("" at the root)."""
        if k > self.root.total:
            raise ValueError(f"k={k} exceeds the number of words ({self.root.total})")
        node = self.root
        prefix = []
        while True:
            branches = sorted(node.children.items())
            seen = node.ends + len(branches)
            if seen >= k:
                return "".join(prefix)
            for ch, child in branches:
                seen += child.total - 1
                if seen >= k:
                    k -= seen - child.total
                    node = child
                    prefix.append(ch)
                    break


def solve_case(words, k):
    """Answer one query: the split prefix, or ``"EMPTY"`` when it is empty."""
    trie = Trie()
    for word in words:
        trie.insert(word)
    return trie.split_prefix(k) or "EMPTY"