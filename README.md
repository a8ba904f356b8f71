# strkit

Classic string algorithms and a few number-theory counting routines, in plain
Python. Every position, index and rank is zero-based.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `strkit.suffix_array` | `SuffixArray` (`sa`, `rank` and `height` lists), `longest_repeated_k_times`, `most_repeated_substring`, `best_cow_line`, `wrap_lines` |
| `strkit.kmp` | `prefix_function`, `find_occurrences` |
| `strkit.trie` | `Trie` with `insert` and `split_prefix`, plus `solve_case` |
| `strkit.sam` | `SuffixAutomaton` (`extend`, `next`, `link`, `len`), `build`, `endpos_sizes`, `max_repeat_value`, `count_distinct_substrings`, `kth_substring`, `occurrence_counts` |
| `strkit.sam_positions` | `PositionAutomaton` with `first_occurrence` and `occurrences` |
| `strkit.sam_problems` | `longest_triple_pattern` (longest substring of the form `A B A C A`), `count_divisor_repeats` |
| `strkit.palindrome` | `PalindromicTree` (`add`, `next`, `link`, `len`, `palindromes_ending_here`), `manacher` |
| `strkit.palindrome_pairs` | `palindrome_start_counts`, `count_palindrome_concatenations` (modulo 1 000 000 007) |
| `strkit.common_prefix` | `RangeMin` sparse table, `lcp_pair_sum`, `answer_queries` |
| `strkit.number_theory` | `Binomial` (`arrangements`, `combinations`), `mobius_table`, `coprime_pair_count`, `count_gcd_pairs`, `count_gcd_in_ranges`, `count_coprime_triples`, `count_divisible_pairs`, `lucas`, `parity_spread`, `binary_string_expectation` |

The suffix automaton, palindromic tree and the routines built on them work on
lowercase letters `a`–`z`.

## Examples

Suffix array of a string:

```python
from strkit.suffix_array import SuffixArray

sa = SuffixArray("banana")
print(sa.sa)      # [5, 3, 1, 0, 4, 2]
print(sa.height)  # [0, 1, 3, 0, 0, 2]
```

Pattern search with the prefix function:

```python
from strkit.kmp import find_occurrences, prefix_function

print(find_occurrences("ABABABC", "ABA"))  # [0, 2]
print(prefix_function("ABA"))              # [0, 0, 1]
```

Distinct substrings with a suffix automaton:

```python
from strkit.sam import count_distinct_substrings, kth_substring

print(count_distinct_substrings(["abc", "abd"]))  # 9
print(kth_substring("aabc", True, 3))              # 'aab'
```

Where a pattern occurs in a text:

```python
from strkit.sam_positions import PositionAutomaton

automaton = PositionAutomaton("abcabadabca")
print(automaton.first_occurrence("abc"))  # 0
print(automaton.occurrences("ab"))        # [0, 3, 7]
```

Palindromes:

```python
from strkit.palindrome import PalindromicTree, manacher

tree = PalindromicTree()
for ch in "abacaba":
    tree.add(ch)
print(len(tree))        # 9: seven palindromes plus the two roots
print(manacher("aba"))  # [1, 2, 1, 4, 1, 2, 1]
```

Number theory:

```python
from strkit.number_theory import Binomial, count_gcd_pairs, lucas

binom = Binomial(1000, 10**9 + 7)
print(binom.combinations(8, 4))   # 70
print(count_gcd_pairs(4, 5, 2))   # 3
print(lucas(10, 3, 2))            # 0
```

## What it does not do

There are no command-line programs: nothing reads problem input from standard
input or prints answers. Each routine is called from Python with its input as
arguments and returns its result.