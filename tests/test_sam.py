from collections import Counter
from itertools import combinations

import pytest

from strkit.sam import (
    SuffixAutomaton,
    build,
    count_distinct_substrings,
    endpos_sizes,
    kth_substring,
    max_repeat_value,
)

TEXTS = ["a", "aaa", "abab", "abcbc", "aabbaab", "banana", "mississippi"]


def _substrings(text):
    return [text[i:j] for i, j in combinations(range(len(text) + 1), 2)]


def _walk(sam, word):
    node = 1
    for ch in word:
        node = sam.next(node, ord(ch) - ord("a"))
        if node == 0:
            return 0
    return node


@pytest.mark.parametrize("text", TEXTS)
def test_recognises_exactly_substrings(text):
    sam, _ = build(text)
    subs = set(_substrings(text))
    for word in subs:
        assert _walk(sam, word) != 0 and word in text
    for word in ["z", text + "a", "ca" * 3]:
        assert (_walk(sam, word) != 0) == (word in text)


@pytest.mark.parametrize("text", TEXTS)
def test_state_count_bound(text):
    sam, ends = build(text)
    assert len(ends) == len(text)
    assert len(sam) <= 2 * len(text) + 1
    assert sam.len(0) == -1 and sam.len(1) == 0


@pytest.mark.parametrize("text", TEXTS)
def test_endpos_sizes_match_occurrences(text):
    sam, ends = build(text)
    sizes = endpos_sizes(sam, ends)
    assert sizes[1] == len(text)
    for word in set(_substrings(text)):
        expected = sum(text.startswith(word, i) for i in range(len(text)))
        assert sizes[_walk(sam, word)] == expected


def test_uppercase_base():
    sam, ends = build("ABAB", alphabet_size=27, base="A")
    assert sam.len(ends[-1]) == 4
    assert endpos_sizes(sam, ends)[ends[1]] == 2


def test_symbol_outside_alphabet():
    with pytest.raises(ValueError):
        build("abZ")
    with pytest.raises(ValueError):
        SuffixAutomaton(0)


@pytest.mark.parametrize("text", TEXTS)
def test_max_repeat_value(text):
    counts = Counter(
        text[i:i + n] for n in range(1, len(text) + 1) for i in range(len(text) - n + 1)
    )
    expected = max((c * len(w) for w, c in counts.items() if c > 1), default=0)
    assert max_repeat_value(text) == expected


def test_count_distinct_substrings():
    assert count_distinct_substrings(["aaa"]) == 3
    words = ["abab", "bab", "cab"]
    expected = {s for w in words for s in _substrings(w)}
    assert count_distinct_substrings(words) == len(expected)
    assert count_distinct_substrings([]) == 0


@pytest.mark.parametrize("text", TEXTS)
def test_kth_distinct(text):
    ordered = sorted(set(_substrings(text)))
    for k, word in enumerate(ordered, start=1):
        assert kth_substring(text, True, k) == word
    assert kth_substring(text, True, len(ordered) + 1) is None


@pytest.mark.parametrize("text", TEXTS)
def test_kth_with_multiplicity(text):
    ordered = sorted(_substrings(text))
    for k, word in enumerate(ordered, start=1):
        assert kth_substring(text, False, k) == word
    assert kth_substring(text, False, len(ordered) + 1) is None


def test_kth_rejects_non_positive():
    with pytest.raises(ValueError):
        kth_substring("abc", True, 0)