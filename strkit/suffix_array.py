"""Suffix arrays built by prefix doubling, and problems solved with them."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from itertools import takewhile


def _initial_ranks(keys: Sequence[Hashable]) -> list[int]:
    """Rank each symbol by value, starting from 1 so that 0 marks 'past the end'."""
    index = {value: position for position, value in enumerate(sorted(set(keys)), start=1)}
    return [index[value] for value in keys]


def _sort_suffixes(keys: Sequence[Hashable]) -> tuple[list[int], list[int]]:
    n = len(keys)
    if n == 0:
        return [], []
    rank = _initial_ranks(keys)
    order = list(range(n))
    width = 1
    while True:
        pairs = [
            (r, rank[i + width] if i + width < n else 0)
            for i, r in enumerate(rank)
        ]
        order.sort(key=pairs.__getitem__)
        new_rank = [0] * n
        distinct = 0
        previous = None
        for start in order:
            if pairs[start] != previous:
                distinct += 1
                previous = pairs[start]
            new_rank[start] = distinct
        rank = new_rank
        if distinct == n:
            break
        width <<= 1
    return order, [r - 1 for r in rank]


def _lcp_heights(keys: Sequence[Hashable], order: list[int], rank: list[int]) -> list[int]:
    n = len(keys)
    height = [0] * n
    common = 0
    for start, r in enumerate(rank):
        if r == 0:
            common = 0
            continue
        if common:
            common -= 1
        other = order[r - 1]
        while (
            start + common < n
            and other + common < n
            and keys[start + common] == keys[other + common]
        ):
            common += 1
        height[r] = common
    return height


class SuffixArray:
    """Sorted suffixes of a string or of a sequence of comparable symbols.

    ``sa[r]`` is the start of the suffix of rank ``r``, ``rank[i]`` the rank
    of the suffix starting at ``i`` and ``height[r]`` the length of the
    longest common prefix of the suffixes of ranks ``r`` and ``r - 1``
    (``height[0]`` is 0). All indices are zero-based.
    """

    def __init__(self, text):
        self.text = text
        keys = [ord(ch) for ch in text] if isinstance(text, str) else list(text)
        self.sa, self.rank = _sort_suffixes(keys)
        self.height = _lcp_heights(keys, self.sa, self.rank)

    def __len__(self) -> int:
        return len(self.sa)


def longest_repeated_k_times(values, k):
    """Length of the longest run of symbols that occurs at least ``k`` times.

    Occurrences may overlap. A length only counts when it is shared by some
    pair of adjacent suffixes, so the result is 0 when nothing repeats.
    """
    heights = SuffixArray(values).height

    def occurs(length: int) -> bool:
        run = 0
        for h in heights:
            if h < length:
                run = 0
            else:
                run += 1
                if run >= k - 1:
                    return True
        return False

    low, high, best = 1, len(heights), 0
    while low <= high:
        mid = (low + high) // 2
        if occurs(mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def most_repeated_substring(text):
    """The longest substring seen more than once, with its occurrence count.

    Among equally long candidates the lexicographically smallest is chosen.
    Returns ``None`` when no substring repeats.
    """
    array = SuffixArray(text)
    longest = max(array.height, default=0)
    if longest == 0:
        return None
    first = array.height.index(longest)
    start = array.sa[first]
    run = sum(1 for _ in takewhile(lambda h: h == longest, array.height[first:]))
    return text[start:start + longest], run + 1


def best_cow_line(letters):
    """Lexicographically smallest string formed by repeatedly taking a letter
    from either end of ``letters``."""
    n = len(letters)
    keys = [ord(ch) for ch in letters]
    rank = SuffixArray(keys + [-1] + keys[::-1]).rank
    result = []
    left, right = 0, n - 1
    while left <= right:
        if left == right:
            take_left = True
        elif letters[left] == letters[right]:
            take_left = rank[left] < rank[2 * n - right]
        else:
            take_left = letters[left] < letters[right]
        if take_left:
            result.append(letters[left])
            left += 1
        else:
            result.append(letters[right])
            right -= 1
    return "".join(result)


def wrap_lines(text, width=80):
    """Insert a newline after every ``width`` characters of ``text``."""
    if width <= 0:
        raise ValueError("width must be positive")
    chunks = (text[start:start + width] for start in range(0, len(text), width))
    return "".join(chunk + "\n" if len(chunk) == width else chunk for chunk in chunks)