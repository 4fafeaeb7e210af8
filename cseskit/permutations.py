"""Permutations of 1..n where neighbouring values never differ by one."""

from __future__ import annotations

import sys
from collections.abc import Sequence


class NoSolution(ValueError):
    """Raised when no such permutation exists for the given ``n``."""

    def __init__(self, n: int) -> None:
        super().__init__(f"no beautiful permutation of length {n}")
        self.n = n


def beautiful_permutation(n: int) -> list[int]:
    """Return the even numbers up to ``n`` followed by the odd ones."""
    if n in (2, 3):
        raise NoSolution(n)
    return [*range(2, n + 1, 2), *range(1, n + 1, 2)]


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n`` from standard input and print a permutation or ``NO SOLUTION``."""
    n = int(sys.stdin.read().split()[0])
    try:
        perm = beautiful_permutation(n)
    except NoSolution:
        sys.stdout.write("NO SOLUTION\n")
    else:
        sys.stdout.write("".join(f"{value} " for value in perm))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())