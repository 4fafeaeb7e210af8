"""Small number-theory and sequence helpers shared by the problem solvers."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable

DEFAULT_SIEVE_LIMIT = 1_000_000


def smallest_prime_factors(limit: int = DEFAULT_SIEVE_LIMIT) -> list[int]:
    """Return a table where entry ``i`` is the smallest prime dividing ``i``.

    Entries 0 and 1 are 0, since neither has a prime factor.
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    spf = list(range(limit + 1))
    spf[: min(2, limit + 1)] = [0] * min(2, limit + 1)
    i = 2
    while i * i <= limit:
        if spf[i] == i:
            for j in range(i * i, limit + 1, i):
                if spf[j] == j:
                    spf[j] = i
        i += 1
    return spf


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for x in values:
        pos = bisect_left(tails, x)
        if pos == len(tails):
            tails.append(x)
        else:
            tails[pos] = x
    return len(tails)