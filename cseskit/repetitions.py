"""Longest run of one repeated character in a string."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from itertools import groupby


def longest_repetition(text: str) -> int:
    """Return the length of the longest block of identical consecutive characters."""
    return max((sum(1 for _ in group) for _, group in groupby(text)), default=0)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a string from standard input and print its longest repetition."""
    tokens = sys.stdin.read().split()
    print(longest_repetition(tokens[0] if tokens else ""))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())