"""Counting and listing groups of students."""

from __future__ import annotations

import itertools
import sys
from typing import IO, Iterable, Iterator


def factorial(n: int) -> int:
    """Return n!, treating every n <= 1 as 1."""
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def n_choose_r(n: int, r: int) -> int:
    """Number of ways to choose r items out of n."""
    if r > n:
        return 0
    if r == 0 or r == n:
        return 1
    return factorial(n) // (factorial(r) * factorial(n - r))


def groups(student_ids: Iterable[int], group_size: int) -> Iterator[tuple[int, ...]]:
    """Yield every group of group_size ids, in lexicographic position order."""
    if group_size < 0:
        return
    yield from itertools.combinations(list(student_ids), group_size)


class StudentGroupCombination:
    """Reports group counts and lists groups."""

    def __init__(self, out: IO[str] | None = None) -> None:
        self._out = out if out is not None else sys.stdout

    def calculate_combinations(self, num_students: int, group_size: int) -> int:
        total = n_choose_r(num_students, group_size)
        print("\n=== Student Group Combinations ===", file=self._out)
        print(
            f"Total possible groups of {group_size} from {num_students} "
            f"students: {total}\n",
            file=self._out,
        )
        return total

    def generate_groups(self, student_ids: Iterable[int], group_size: int) -> int:
        """Print every group and return how many were printed."""
        print("Generating all possible groups:", file=self._out)
        count = 0
        for group in groups(student_ids, group_size):
            members = "".join(f"Student-{sid} " for sid in group)
            print(f"Group: {{ {members}}}", file=self._out)
            count += 1
        return count