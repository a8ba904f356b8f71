"""Palindromic tree (eertree) and Manacher's algorithm."""

from __future__ import annotations

_ALPHABET_SIZE = 26
_IMAGINARY = 0
_EMPTY = 1


class PalindromicTree:
    """Tree of the distinct palindromes of a lowercase string built one
    character at a time.

    Node 0 is the imaginary root of length -1 and node 1 the empty
    palindrome; every further node is a distinct non-empty palindrome.
    """

    def __init__(self):
        self._len = [-1, 0]
        self._link = [0, 0]
        self._cnt = [0, 0]
        self._next = [[0] * _ALPHABET_SIZE, [0] * _ALPHABET_SIZE]
        self._suffix = _EMPTY
        self.text = ""

    def _extendable(self, node, pos):
        before = pos - 1 - self._len[node]
        return before >= 0 and self.text[before] == self.text[pos]

    def add(self, ch):
        """Append ``ch``; return whether it created a new palindrome."""
        c = ord(ch) - ord("a")
        if len(ch) != 1 or not 0 <= c < _ALPHABET_SIZE:
            raise ValueError(f"{ch!r} is not a lowercase letter")
        pos = len(self.text)
        self.text += ch
        cur = self._suffix
        while not self._extendable(cur, pos):
            cur = self._link[cur]
        if self._next[cur][c]:
            self._suffix = self._next[cur][c]
            return False

        node = len(self._len)
        self._len.append(self._len[cur] + 2)
        self._link.append(0)
        self._cnt.append(0)
        self._next.append([0] * _ALPHABET_SIZE)
        self._next[cur][c] = node
        self._suffix = node
        if self._len[node] == 1:
            self._link[node] = _EMPTY
            self._cnt[node] = 1
            return True
        while True:
            cur = self._link[cur]
            if self._extendable(cur, pos):
                self._link[node] = self._next[cur][c]
                break
        self._cnt[node] = 1 + self._cnt[self._link[node]]
        return True

    @property
    def palindromes_ending_here(self):
        """Number of palindromic suffixes of the text added so far."""
        return self._cnt[self._suffix]

    def next(self, p, c):
        return self._next[p][c]

    def link(self, p):
        return self._link[p]

    def len(self, p):
        return self._len[p]

    def __len__(self):
        return len(self._len)


def manacher(text):
    """Palindrome radii over ``text`` interleaved with ``#`` separators.

    The result has ``2 * len(text) + 1`` entries; entry ``i`` counts the
    centre itself, so ``r[i] - 1`` is the length of the longest palindrome
    of ``text`` centred there.
    """
    spread = "#" + "".join(ch + "#" for ch in text)
    n = len(spread)
    radius = [0] * n
    j = 0
    for i in range(n):
        if 2 * j - i >= 0 and j + radius[j] > i:
            radius[i] = min(radius[2 * j - i], j + radius[j] - i)
        while (
            i - radius[i] >= 0
            and i + radius[i] < n
            and spread[i - radius[i]] == spread[i + radius[i]]
        ):
            radius[i] += 1
        if i + radius[i] > j + radius[j]:
            j = i
    return radius