"""Suffix automaton and problems solved with it."""

from __future__ import annotations

from collections import Counter

_SENTINEL = 0
ROOT = 1


class SuffixAutomaton:
    """Suffix automaton over the symbols ``0 .. alphabet_size - 1``.

    Node 0 is a sentinel of length -1 whose every transition leads to the
    root, node 1. Extending from the root after each word builds a
    generalised automaton over several words.
    """

    def __init__(self, alphabet_size=26):
        if alphabet_size <= 0:
            raise ValueError("alphabet_size must be positive")
        self.alphabet_size = alphabet_size
        self._len = [-1, 0]
        self._link = [0, 0]
        self._next = [[ROOT] * alphabet_size, [0] * alphabet_size]

    def _new_node(self, length, link=0, transitions=None):
        self._len.append(length)
        self._link.append(link)
        self._next.append(list(transitions) if transitions else [0] * self.alphabet_size)
        return len(self._len) - 1

    def _follow(self, p, c):
        """Target of the transition ``p --c-->``, splitting it if needed."""
        q = self._next[p][c]
        if self._len[q] == self._len[p] + 1:
            return q
        r = self._new_node(self._len[p] + 1, self._link[q], self._next[q])
        self._link[q] = r
        while self._next[p][c] == q:
            self._next[p][c] = r
            p = self._link[p]
        return r

    def extend(self, p, c):
        """Append symbol ``c`` after the state ``p``; return the new state."""
        if not 0 <= c < self.alphabet_size:
            raise ValueError(f"symbol {c} is outside the alphabet")
        if self._next[p][c]:
            return self._follow(p, c)
        cur = self._new_node(self._len[p] + 1)
        while not self._next[p][c]:
            self._next[p][c] = cur
            p = self._link[p]
        self._link[cur] = self._follow(p, c)
        return cur

    def next(self, p, c):
        return self._next[p][c]

    def link(self, p):
        return self._link[p]

    def len(self, p):
        return self._len[p]

    def __len__(self):
        return len(self._len)


def build(text, alphabet_size=26, base="a"):
    """Build the automaton of ``text``.

    Returns the automaton and, for every prefix of ``text``, the state that
    the prefix ends in.
    """
    sam = SuffixAutomaton(alphabet_size)
    offset = ord(base)
    ends = []
    p = ROOT
    for ch in text:
        p = sam.extend(p, ord(ch) - offset)
        ends.append(p)
    return sam, ends


def _by_length_desc(sam):
    return sorted(range(ROOT + 1, len(sam)), key=sam.len, reverse=True)


def endpos_sizes(sam, ends):
    """Number of end positions of every state (index 0 is the sentinel)."""
    sizes = [0] * len(sam)
    for node in ends:
        sizes[node] += 1
    for node in _by_length_desc(sam):
        sizes[sam.link(node)] += sizes[node]
    return sizes


def max_repeat_value(text):
    """Largest ``occurrences * length`` over substrings occurring more than once."""
    sam, ends = build(text)
    sizes = endpos_sizes(sam, ends)
    return max(
        (sizes[node] * sam.len(node) for node in range(ROOT, len(sam)) if sizes[node] > 1),
        default=0,
    )


def count_distinct_substrings(words):
    """Number of distinct non-empty substrings over all lowercase ``words``."""
    sam = SuffixAutomaton()
    for word in words:
        p = ROOT
        for ch in word:
            p = sam.extend(p, ord(ch) - ord("a"))
    return sum(sam.len(v) - sam.len(sam.link(v)) for v in range(ROOT + 1, len(sam)))


def kth_substring(text, distinct, k):
    """The ``k``-th smallest substring of ``text`` (1-based).

    With ``distinct`` equal substrings count once, otherwise every occurrence
    counts. Returns ``None`` when there are fewer than ``k`` substrings.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    sam, ends = build(text)
    weight = endpos_sizes(sam, ends)
    if distinct:
        weight = [0] + [1] * (len(sam) - 1)
    weight[ROOT] = 0

    total = list(weight)
    for node in _by_length_desc(sam) + [ROOT]:
        total[node] += sum(sam.next(node, c) and total[sam.next(node, c)] for c in range(26))

    if total[ROOT] < k:
        return None

    result = []
    node, remaining = ROOT, k
    while remaining > weight[node]:
        remaining -= weight[node]
        for c in range(26):
            target = sam.next(node, c)
            if not target:
                continue
            if remaining > total[target]:
                remaining -= total[target]
                continue
            result.append(chr(ord("a") + c))
            node = target
            break
    return "".join(result)


def occurrence_counts(text):
    """Occurrences of every distinct substring, found with the automaton."""
    sam, ends = build(text)
    sizes = endpos_sizes(sam, ends)
    counts = Counter()
    for start in range(len(text)):
        node = ROOT
        for end in range(start, len(text)):
            node = sam.next(node, ord(text[end]) - ord("a"))
            counts[text[start:end + 1]] = sizes[node]
    return counts