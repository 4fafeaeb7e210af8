"""Match applicants to apartments whose size is within a tolerance."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence


def count_matches(
    applicants: Iterable[int], apartments: Iterable[int], tolerance: int
) -> int:
    """Return the largest number of applicants that get an apartment.

    An applicant wanting size ``a`` accepts an apartment of size ``b`` when
    ``|a - b| <= tolerance``; each apartment goes to at most one applicant.
    """
    wanted = sorted(applicants)
    sizes = sorted(apartments)
    i = j = matches = 0
    while i < len(wanted) and j < len(sizes):
        if abs(wanted[i] - sizes[j]) <= tolerance:
            i += 1
            j += 1
            matches += 1
        elif wanted[i] > sizes[j]:
            j += 1
        else:
            i += 1
    return matches


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n m k``, the desired sizes and the apartment sizes; print the count."""
    tokens = [int(t) for t in sys.stdin.read().split()]
    n, m, k = tokens[:3]
    applicants = tokens[3 : 3 + n]
    apartments = tokens[3 + n : 3 + n + m]
    print(count_matches(applicants, apartments, k))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())