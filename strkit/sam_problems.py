"""Counting problems answered with suffix automaton end-position sets."""

from __future__ import annotations

from bisect import bisect_right

from sortedcontainers import SortedList

from strkit.sam import ROOT, build, endpos_sizes


def _best_split(positions, longest):
    """Best length ``y - x + p`` for one state's sorted end positions."""
    if len(positions) < 3:
        return 0
    x, y = positions[0], positions[-1]
    if y - x < 4:
        return 0
    at = positions.bisect_left((x + y) // 2)
    candidates = []
    if at < len(positions):
        candidates.append(positions[at])
    if at > 0:
        candidates.append(positions[at - 1])
    best = 0
    for z in candidates:
        if not x < z < y:
            continue
        p = min(longest, z - x - 1, y - z - 1)
        if p >= 1:
            best = max(best, y - x + p)
    return best


def longest_triple_pattern(text):
    """Length of the longest substring of the form ``A B A C A``.

    ``A``, ``B`` and ``C`` are non-empty. Returns 0 when no such substring
    exists. End-position sets are merged small-into-large up the suffix-link
    tree.
    """
    sam, ends = build(text)
    sets = [SortedList() for _ in range(len(sam))]
    for index, node in enumerate(ends, start=1):
        sets[node].add(index)

    best = 0
    for node in sorted(range(ROOT + 1, len(sam)), key=sam.len, reverse=True):
        positions = sets[node]
        best = max(best, _best_split(positions, sam.len(node)))
        parent = sam.link(node)
        if len(sets[parent]) < len(positions):
            sets[parent], positions = positions, sets[parent]
        sets[parent].update(positions)
        sets[node] = None
    return best


def count_divisor_repeats(text):
    """Sum of occurrence counts over distinct substrings whose length divides
    their number of occurrences."""
    sam, ends = build(text)
    sizes = endpos_sizes(sam, ends)
    n = len(text)
    divisors = [[] for _ in range(n + 1)]
    for d in range(1, n + 1):
        for multiple in range(d, n + 1, d):
            divisors[multiple].append(d)

    total = 0
    for node in range(ROOT + 1, len(sam)):
        count = sizes[node]
        lengths = divisors[count]
        upper = bisect_right(lengths, sam.len(node))
        lower = bisect_right(lengths, max(sam.len(sam.link(node)), 0))
        total += (upper - lower) * count
    return total