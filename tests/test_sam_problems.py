import random
from collections import Counter

import pytest

from strkit.sam_problems import count_divisor_repeats, longest_triple_pattern


def _has_triple_form(span):
    n = len(span)
    for p in range(1, n):
        a = span[:p]
        if span[-p:] != a:
            continue
        for k in range(p + 1, n - 2 * p):
            if span[k:k + p] == a:
                return True
    return False


def _brute_triple(text):
    best = 0
    for i in range(len(text)):
        for j in range(i + 1, len(text) + 1):
            if j - i > best and _has_triple_form(text[i:j]):
                best = j - i
    return best


def _brute_divisor(text):
    counts = Counter(
        text[i:j] for i in range(len(text)) for j in range(i + 1, len(text) + 1)
    )
    return sum(c for word, c in counts.items() if c % len(word) == 0)


def _random_words(seed, count, alphabet, max_len):
    rng = random.Random(seed)
    return [
        "".join(rng.choice(alphabet) for _ in range(rng.randint(0, max_len)))
        for _ in range(count)
    ]


def test_triple_pattern_all_same_letter():
    assert longest_triple_pattern("aaaaa") == 5


def test_triple_pattern_too_short_or_absent():
    assert longest_triple_pattern("") == 0
    assert longest_triple_pattern("abc") == 0
    assert longest_triple_pattern("aaaa") == 0


@pytest.mark.parametrize("text", _random_words(7, 60, "ab", 12))
def test_triple_pattern_matches_brute_force(text):
    assert longest_triple_pattern(text) == _brute_triple(text)


@pytest.mark.parametrize("text", _random_words(11, 30, "abc", 14))
def test_triple_pattern_three_letters(text):
    assert longest_triple_pattern(text) == _brute_triple(text)


def test_triple_pattern_rejects_uppercase():
    with pytest.raises(ValueError):
        longest_triple_pattern("ABA")


def test_divisor_repeats_empty():
    assert count_divisor_repeats("") == 0


def test_divisor_repeats_single_letter():
    # "a" occurs once and 1 divides 1.
    assert count_divisor_repeats("a") == 1


@pytest.mark.parametrize("text", _random_words(3, 60, "ab", 15))
def test_divisor_repeats_matches_brute_force(text):
    assert count_divisor_repeats(text) == _brute_divisor(text)


@pytest.mark.parametrize("text", _random_words(5, 30, "abcd", 15))
def test_divisor_repeats_wider_alphabet(text):
    assert count_divisor_repeats(text) == _brute_divisor(text)


def test_divisor_repeats_rejects_digits():
    with pytest.raises(ValueError):
        count_divisor_repeats("a1")