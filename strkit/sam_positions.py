"""Locating every occurrence of a pattern with a suffix automaton."""

from __future__ import annotations

from strkit.sam import ROOT, build


class PositionAutomaton:
    """Suffix automaton of a lowercase text that reports where patterns occur."""

    def __init__(self, text):
        self.text = text
        self._sam, ends = build(text)
        size = len(self._sam)
        self._end_index = {node: index for index, node in enumerate(ends)}
        self._children = [[] for _ in range(size)]
        first = [len(text)] * size
        for index, node in enumerate(ends):
            first[node] = index
        for node in sorted(range(ROOT + 1, size), key=self._sam.len, reverse=True):
            parent = self._sam.link(node)
            self._children[parent].append(node)
            first[parent] = min(first[parent], first[node])
        self._first_end = first

    def _locate(self, pattern):
        if not pattern:
            raise ValueError("pattern must not be empty")
        node = ROOT
        for ch in pattern:
            c = ord(ch) - ord("a")
            if not 0 <= c < self._sam.alphabet_size:
                return None
            node = self._sam.next(node, c)
            if node == 0:
                return None
        return node

    def first_occurrence(self, pattern):
        """Zero-based start of the first match, or ``None`` if there is none."""
        node = self._locate(pattern)
        if node is None:
            return None
        return self._first_end[node] - len(pattern) + 1

    def occurrences(self, pattern):
        """Sorted zero-based starts of every match."""
        node = self._locate(pattern)
        if node is None:
            return []
        starts = []
        stack = [node]
        while stack:
            current = stack.pop()
            if current in self._end_index:
                starts.append(self._end_index[current] - len(pattern) + 1)
            stack.extend(self._children[current])
        return sorted(starts)