"""Counting substring pairs whose concatenation is a palindrome."""

from __future__ import annotations

from itertools import accumulate

from strkit.palindrome import manacher
from strkit.sam import ROOT, SuffixAutomaton

MOD = 1_000_000_007

_LETTERS = 26
_SEPARATOR = _LETTERS


def _require_lowercase(text):
    for ch in text:
        if not "a" <= ch <= "z":
            raise ValueError(f"{ch!r} is not a lowercase letter")


def palindrome_start_counts(text):
    """For every zero-based index, the number of palindromic substrings of
    ``text`` that start there."""
    n = len(text)
    diff = [0] * (n + 1)
    for centre, radius in enumerate(manacher(text)):
        count = radius // 2
        if not count:
            continue
        last = (centre - 1) // 2
        diff[last - count + 1] += 1
        diff[last + 1] -= 1
    return list(accumulate(diff[:n]))


def _shifted(counts):
    """``counts[i + 1]`` for every index, with 0 past the end."""
    return counts[1:] + [0]


def _weighted_matches(weighted, weights, plain):
    """Sum over non-empty strings ``X`` of the total weight of the end
    positions of ``X`` in ``weighted`` times the occurrences of ``X`` in ``plain``."""
    sam = SuffixAutomaton(_LETTERS + 1)
    weighted_ends = []
    p = ROOT
    for ch in weighted:
        p = sam.extend(p, ord(ch) - ord("a"))
        weighted_ends.append(p)
    p = sam.extend(p, _SEPARATOR)
    plain_ends = []
    for ch in plain:
        p = sam.extend(p, ord(ch) - ord("a"))
        plain_ends.append(p)

    weight = [0] * len(sam)
    for node, w in zip(weighted_ends, weights):
        weight[node] += w
    matches = [0] * len(sam)
    for node in plain_ends:
        matches[node] += 1

    for node in sorted(range(ROOT + 1, len(sam)), key=sam.len, reverse=True):
        parent = sam.link(node)
        weight[parent] += weight[node]
        matches[parent] += matches[node]

    return sum(
        matches[v] * weight[v] * (sam.len(v) - sam.len(sam.link(v)))
        for v in range(ROOT + 1, len(sam))
    )


def count_palindrome_concatenations(s, t):
    """Number of pairs (substring of ``s``, substring of ``t``), both
    non-empty and counted by position, whose concatenation is a palindrome,
    modulo ``MOD``."""
    _require_lowercase(s)
    _require_lowercase(t)
    rt = t[::-1]
    # The part taken from s is at least as long: it is rev(B) followed by a
    # possibly empty palindrome.
    s_weights = [1 + count for count in _shifted(palindrome_start_counts(s))]
    longer_s = _weighted_matches(s, s_weights, rt)
    # The part taken from t is longer: reversed, it is A followed by a
    # non-empty palindrome.
    rt_weights = _shifted(palindrome_start_counts(rt))
    longer_t = _weighted_matches(rt, rt_weights, s)
    return (longer_s + longer_t) % MOD