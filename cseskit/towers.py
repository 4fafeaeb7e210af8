"""Minimum number of towers when cubes are stacked in the given order."""

from __future__ import annotations

import sys
from bisect import bisect_right
from collections.abc import Iterable, Sequence


def count_towers(cubes: Iterable[int]) -> int:
    """Return how many towers are built.

    Each cube goes on the tower with the smallest top strictly larger than it,
    or starts a new tower if there is none.
    """
    tops: list[int] = []
    for cube in cubes:
        pos = bisect_right(tops, cube)
        if pos == len(tops):
            tops.append(cube)
        else:
            tops[pos] = cube
    return len(tops)


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n`` and ``n`` cube sizes from standard input and print the count."""
    tokens = sys.stdin.read().split()
    n = int(tokens[0])
    cubes = [int(t) for t in tokens[1 : 1 + n]]
    print(count_towers(cubes))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())