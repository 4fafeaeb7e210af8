"""Longest stretch of a playlist in which no song repeats."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Hashable


def longest_unique_run(songs: Iterable[Hashable]) -> int:
    """Return the length of the longest contiguous run of distinct songs."""
    last_seen: dict[Hashable, int] = {}
    start = 0
    best = 0
    for index, song in enumerate(songs):
        previous = last_seen.get(song)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[song] = index
        best = max(best, index - start + 1)
    return best


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n`` and ``n`` song ids from standard input and print the answer."""
    tokens = sys.stdin.read().split()
    n = int(tokens[0])
    songs = [int(t) for t in tokens[1 : 1 + n]]
    print(longest_unique_run(songs))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())