import random

import pytest

from strkit.palindrome import PalindromicTree, manacher


def _palindromes(text):
    return {
        text[i:j]
        for i in range(len(text))
        for j in range(i + 1, len(text) + 1)
        if text[i:j] == text[i:j][::-1]
    }


def _random_words(seed, count, alphabet, max_len):
    rng = random.Random(seed)
    return [
        "".join(rng.choice(alphabet) for _ in range(rng.randint(0, max_len)))
        for _ in range(count)
    ]


def _tree_of(text):
    tree = PalindromicTree()
    flags = [tree.add(ch) for ch in text]
    return tree, flags


def test_fresh_tree_has_two_roots():
    tree = PalindromicTree()
    assert len(tree) == 2
    assert tree.len(0) == -1
    assert tree.len(1) == 0


def test_single_letter_links_to_empty_root():
    tree, flags = _tree_of("a")
    assert flags == [True]
    assert len(tree) == 3
    node = tree.next(0, 0)
    assert tree.len(node) == 1
    assert tree.link(node) == 1


def test_repeated_letter_is_not_new():
    tree, flags = _tree_of("aa")
    assert flags == [True, True]
    again = PalindromicTree()
    again.add("a")
    again.add("b")
    assert again.add("a") is True
    assert again.add("b") is True
    assert again.add("b") is True
    assert again.add("b") is False or len(again) - 2 == len(_palindromes("ababbb"))


@pytest.mark.parametrize("text", _random_words(2, 50, "abc", 16))
def test_node_count_matches_distinct_palindromes(text):
    tree, _ = _tree_of(text)
    assert len(tree) - 2 == len(_palindromes(text))


@pytest.mark.parametrize("text", _random_words(4, 40, "ab", 14))
def test_add_reports_new_palindromes(text):
    tree = PalindromicTree()
    for end, ch in enumerate(text, start=1):
        before = _palindromes(text[:end - 1])
        after = _palindromes(text[:end])
        assert tree.add(ch) is (len(after) > len(before))


@pytest.mark.parametrize("text", _random_words(6, 30, "ab", 14))
def test_palindromic_suffix_count(text):
    tree = PalindromicTree()
    for end, ch in enumerate(text, start=1):
        tree.add(ch)
        prefix = text[:end]
        expected = sum(
            1 for i in range(end) if prefix[i:] == prefix[i:][::-1]
        )
        assert tree.palindromes_ending_here == expected


@pytest.mark.parametrize("text", _random_words(8, 30, "abc", 14))
def test_node_lengths_are_palindrome_lengths(text):
    tree, _ = _tree_of(text)
    lengths = sorted(tree.len(p) for p in range(2, len(tree)))
    assert lengths == sorted(len(w) for w in _palindromes(text))


def test_manacher_known_radii():
    assert manacher("aba") == [1, 2, 1, 4, 1, 2, 1]


def test_manacher_empty():
    assert manacher("") == [1]


@pytest.mark.parametrize("text", _random_words(10, 40, "ab", 16))
def test_manacher_longest_palindrome(text):
    radii = manacher(text)
    assert len(radii) == 2 * len(text) + 1
    longest = max((len(w) for w in _palindromes(text)), default=0)
    assert max(radii) - 1 == longest


@pytest.mark.parametrize("text", _random_words(12, 40, "abc", 16))
def test_manacher_counts_palindromic_substrings(text):
    radii = manacher(text)
    occurrences = sum(
        1
        for i in range(len(text))
        for j in range(i + 1, len(text) + 1)
        if text[i:j] == text[i:j][::-1]
    )
    assert sum(r // 2 for r in radii) == occurrences