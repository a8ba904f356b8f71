import pytest

from strkit.trie import Trie, solve_case


def test_split_at_root_is_empty():
    assert solve_case(["a", "b"], 2) == "EMPTY"


def test_split_below_root():
    assert solve_case(["ab", "ac"], 2) == "a"


def test_trie_counts_words():
    trie = Trie()
    for word in ["abc", "abd", "x", "abc"]:
        trie.insert(word)
    assert len(trie) == 4


def test_k_one_stays_at_root():
    trie = Trie()
    for word in ["hello", "help"]:
        trie.insert(word)
    assert trie.split_prefix(1) == ""


def test_single_word_is_always_empty():
    assert solve_case(["abc"], 1) == "EMPTY"


def test_too_many_groups_rejected():
    with pytest.raises(ValueError):
        solve_case(["a", "b"], 3)