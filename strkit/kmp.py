"""Knuth-Morris-Pratt prefix function and pattern search."""

from __future__ import annotations


def prefix_function(pattern):
    """For every prefix of ``pattern``, the length of its longest proper
    border (a proper prefix that is also a suffix)."""
    border = [0] * len(pattern)
    j = 0
    for i, ch in enumerate(pattern):
        if i == 0:
            continue
        while j and ch != pattern[j]:
            j = border[j - 1]
        if ch == pattern[j]:
            j += 1
        border[i] = j
    return border


def find_occurrences(text, pattern):
    """Zero-based start positions of every (possibly overlapping) match."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    border = prefix_function(pattern)
    m = len(pattern)
    matches = []
    j = 0
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = border[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == m:
            matches.append(i - m + 1)
            j = border[j - 1]
    return matches