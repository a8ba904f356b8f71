"""Sums of longest common prefixes between two sets of suffixes."""

from __future__ import annotations

from collections import Counter

from strkit.suffix_array import SuffixArray


class RangeMin:
    """Sparse table answering minimum queries over fixed values."""

    def __init__(self, values):
        self._table = [list(values)]
        width = 1
        while 2 * width <= len(self._table[0]):
            previous = self._table[-1]
            self._table.append([min(a, b) for a, b in zip(previous, previous[width:])])
            width *= 2

    def __len__(self):
        return len(self._table[0])

    def query(self, left, right):
        """Minimum of ``values[left:right]``; the range must not be empty."""
        if not 0 <= left < right <= len(self):
            raise IndexError(f"invalid range [{left}, {right}) for {len(self)} values")
        level = (right - left).bit_length() - 1
        row = self._table[level]
        return min(row[left], row[right - (1 << level)])


class _LcpIndex:
    def __init__(self, text):
        self.size = len(text)
        self.array = SuffixArray(text)
        self._heights = RangeMin(self.array.height)

    def lcp(self, first, second):
        """Longest common prefix of the suffixes starting at two positions."""
        if first == second:
            return self.size - first
        low, high = sorted((self.array.rank[first], self.array.rank[second]))
        return self._heights.query(low + 1, high + 1)


def _sweep(index, order, a_count, b_count, include_equal):
    """Sum of LCPs between every ``b`` and the ``a`` positions met before it
    in ``order`` (and at the same position when ``include_equal``)."""
    stack = []
    stored = 0
    result = 0
    previous = None
    for pos in order:
        if previous is not None:
            bound = index.lcp(previous, pos)
            merged = 0
            while stack and stack[-1][0] >= bound:
                value, count = stack.pop()
                stored -= value * count
                merged += count
            if merged:
                stack.append((bound, merged))
                stored += bound * merged
        if include_equal and a_count[pos]:
            stack.append((index.size - pos, a_count[pos]))
            stored += (index.size - pos) * a_count[pos]
        result += b_count[pos] * stored
        if not include_equal and a_count[pos]:
            stack.append((index.size - pos, a_count[pos]))
            stored += (index.size - pos) * a_count[pos]
        previous = pos
    return result


def _pair_sum(index, a_positions, b_positions):
    a_count = Counter(a_positions)
    b_count = Counter(b_positions)
    positions = set(a_count) | set(b_count)
    for pos in positions:
        if not 0 <= pos < index.size:
            raise IndexError(f"position {pos} is outside a text of length {index.size}")
    order = sorted(positions, key=index.array.rank.__getitem__)
    forward = _sweep(index, order, a_count, b_count, include_equal=True)
    backward = _sweep(index, order[::-1], a_count, b_count, include_equal=False)
    return forward + backward


def lcp_pair_sum(text, a_positions, b_positions):
    """Sum of ``lcp(text[a:], text[b:])`` over all zero-based ``a`` in
    ``a_positions`` and ``b`` in ``b_positions``."""
    return _pair_sum(_LcpIndex(text), a_positions, b_positions)


def answer_queries(text, queries):
    """Answer several ``(a_positions, b_positions)`` queries on one text."""
    index = _LcpIndex(text)
    return [_pair_sum(index, a, b) for a, b in queries]