"""Number-theory counting: Möbius sums, binomials modulo a prime and friends."""

from __future__ import annotations

from functools import lru_cache
from itertools import accumulate
from math import comb, gcd, isqrt

MOD = 1_000_000_007


class Binomial:
    """Factorials and inverse factorials modulo a prime, up to ``limit``."""

    def __init__(self, limit, mod=MOD):
        if limit < 1:
            raise ValueError("limit must be at least 1")
        if mod <= limit:
            raise ValueError("mod must be a prime larger than limit")
        self.limit = limit
        self.mod = mod
        inverse = [0, 1]
        for i in range(2, limit + 1):
            inverse.append((mod - mod // i) * inverse[mod % i] % mod)
        self._fact = [1]
        self._inv_fact = [1]
        for i in range(1, limit + 1):
            self._fact.append(self._fact[-1] * i % mod)
            self._inv_fact.append(self._inv_fact[-1] * inverse[i] % mod)

    def _check(self, m):
        if not 0 <= m <= self.limit:
            raise ValueError(f"{m} is outside the table (limit {self.limit})")

    def arrangements(self, m, n):
        """Number of ordered selections of ``n`` items out of ``m``."""
        if not 0 <= n <= m:
            return 0
        self._check(m)
        return self._fact[m] * self._inv_fact[m - n] % self.mod

    def combinations(self, m, n):
        """Number of ``n``-element subsets of ``m`` items."""
        if not 0 <= n <= m:
            return 0
        self._check(m)
        return self._fact[m] * self._inv_fact[n] % self.mod * self._inv_fact[m - n] % self.mod


def mobius_table(limit):
    """Möbius function for ``0 .. limit`` (entry 0 is 0), by a linear sieve."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    mu = [0] * (limit + 1)
    if limit >= 1:
        mu[1] = 1
    composite = [False] * (limit + 1)
    primes = []
    for i in range(2, limit + 1):
        if not composite[i]:
            primes.append(i)
            mu[i] = -1
        for p in primes:
            product = i * p
            if product > limit:
                break
            composite[product] = True
            if i % p == 0:
                mu[product] = 0
                break
            mu[product] = -mu[i]
    return mu


@lru_cache(maxsize=16)
def _mobius_prefix(limit):
    return [0] + list(accumulate(mobius_table(limit)[1:]))


def coprime_pair_count(n, m):
    """Number of pairs ``1 <= x <= n``, ``1 <= y <= m`` with ``gcd(x, y) == 1``."""
    upper = min(n, m)
    if upper <= 0:
        return 0
    prefix = _mobius_prefix(upper)
    total = 0
    low = 1
    while low <= upper:
        high = min(n // (n // low), m // (m // low), upper)
        total += (prefix[high] - prefix[low - 1]) * (n // low) * (m // low)
        low = high + 1
    return total


def _check_k(k):
    if k < 1:
        raise ValueError("k must be at least 1")


def count_gcd_pairs(a, b, k):
    """Number of pairs ``1 <= x <= a``, ``1 <= y <= b`` with ``gcd(x, y) == k``."""
    _check_k(k)
    return coprime_pair_count(a // k, b // k)


def count_gcd_in_ranges(a, b, c, d, k):
    """Number of pairs ``a <= x <= b``, ``c <= y <= d`` with ``gcd(x, y) == k``."""
    _check_k(k)
    return (
        coprime_pair_count(b // k, d // k)
        - coprime_pair_count((a - 1) // k, d // k)
        - coprime_pair_count(b // k, (c - 1) // k)
        + coprime_pair_count((a - 1) // k, (c - 1) // k)
    )


def _divisors(value):
    found = []
    for j in range(1, isqrt(value) + 1):
        if value % j == 0:
            found.append(j)
            if j * j != value:
                found.append(value // j)
    return found


def count_coprime_triples(values):
    """Number of index triples whose smallest and largest values are coprime."""
    ordered = sorted(values)
    if any(v < 1 for v in ordered):
        raise ValueError("values must be positive")
    if not ordered:
        return 0
    mu = mobius_table(ordered[-1])
    count = {}
    index_sum = {}
    total = 0
    for i, value in enumerate(ordered, start=1):
        for d in _divisors(value):
            if mu[d]:
                total += mu[d] * count.get(d, 0) * (i - 1)
                total -= mu[d] * index_sum.get(d, 0)
            index_sum[d] = index_sum.get(d, 0) + i
            count[d] = count.get(d, 0) + 1
    return total


def count_divisible_pairs(n, m):
    """Number of pairs ``1 <= a <= n``, ``1 <= b <= m`` such that
    ``b * gcd(a, b)`` is a multiple of ``a + b``."""
    total = 0
    for i in range(1, isqrt(n) + 1):
        for j in range(1, isqrt(m) + 1):
            if gcd(i, j) == 1:
                total += min(n // i, m // j) // (i + j)
    return total


def lucas(m, n, p):
    """``C(m, n) mod p`` for a prime ``p`` by Lucas' theorem."""
    if p < 2:
        raise ValueError("p must be a prime")
    if m < 0 or n < 0:
        return 0
    result = 1
    while m or n:
        result = result * comb(m % p, n % p) % p
        if not result:
            return 0
        m //= p
        n //= p
    return result % p


def parity_spread(n, k):
    """Row ``n - 1`` of Pascal's triangle mod 2, with odd entries shown as ``k``."""
    return [k if lucas(n - 1, i, 2) == 1 else 0 for i in range(n)]


def binary_string_expectation(bits):
    """Expected value for a binary string, modulo ``MOD``, from a backward
    recurrence in which each ``1`` moves the running value halfway to one
    and each ``0`` halves it."""
    if any(ch not in "01" for ch in bits):
        raise ValueError("bits must consist of '0' and '1'")
    n = len(bits)
    half = pow(2, MOD - 2, MOD)
    value = 0
    for ch in reversed(bits[1:]):
        if ch == "1":
            value = (value + half * (1 - value)) % MOD
        else:
            value = half * value % MOD
    return ((1 - value) * (n - 1) + value * n) % MOD