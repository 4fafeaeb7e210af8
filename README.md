# cseskit

Small, self-contained solvers for a handful of classic algorithmic problems.
Each one can be used as a Python function and as a command that reads the
problem input from standard input and prints the answer.

## Installation

```
pip install .
```

## Commands

| Command              | Input on standard input                       | Output                                     |
|----------------------|-----------------------------------------------|--------------------------------------------|
| `cses-towers`        | `n`, then `n` cube sizes                      | number of towers built                     |
| `cses-apartments`    | `n m k`, then `n` desired sizes, `m` apartment sizes | number of applicants who get an apartment |
| `cses-permutations`  | `n`                                           | the permutation, each value followed by a space, or `NO SOLUTION` |
| `cses-playlist`      | `n`, then `n` song ids                        | longest run of distinct songs              |
| `cses-repetitions`   | a string                                      | longest run of one repeated character      |

Input is read as whitespace-separated tokens, so line breaks do not matter.
The commands take no command-line options.

Example:

```
$ echo "5 3 1 8 2 5" | cses-towers
3
$ echo "ATTCGGGA" | cses-repetitions
3
```

## Library use

```python
from cseskit.towers import count_towers
from cseskit.apartments import count_matches
from cseskit.permutations import beautiful_permutation, NoSolution
from cseskit.playlist import longest_unique_run
from cseskit.repetitions import longest_repetition
from cseskit.toolkit import smallest_prime_factors, longest_increasing_subsequence

count_towers([3, 8, 2, 1, 5])                    # 2
count_matches([60, 45, 80, 60], [30, 60, 75], 5) # 2
beautiful_permutation(5)                         # [2, 4, 1, 3, 5]
longest_unique_run([1, 2, 1, 3, 2, 7, 4, 2])     # 5
longest_repetition("ATTCGGGA")                   # 3
longest_increasing_subsequence([1, 3, 2, 4])     # 3
smallest_prime_factors(10)                       # [0, 0, 2, 3, 2, 5, 2, 7, 2, 3, 2]
```

- `count_towers` places each cube on the tower whose top is the smallest one
  strictly larger than the cube, or starts a new tower.
- `count_matches` pairs applicants with apartments whose size differs by at
  most the tolerance; each apartment goes to at most one applicant.
- `beautiful_permutation(n)` returns the even numbers up to `n` followed by
  the odd ones, and raises `NoSolution` (a `ValueError`) for `n` equal to 2 or 3.
- `longest_unique_run` accepts any hashable items.
- `longest_repetition` returns 0 for an empty string.
- `smallest_prime_factors(limit)` defaults to a limit of 1,000,000, sets
  entries 0 and 1 to 0, and raises `ValueError` for a negative limit.
- `longest_increasing_subsequence` counts a strictly increasing subsequence.

## Running the tests

```
pip install .[test]
pytest
```