"""Ordered integer sets and the usual set operations."""

from __future__ import annotations

import sys
from typing import IO, Iterable, Iterator

from .models import format_braces


class IntSet:
    """A set of integers that keeps insertion order."""

    def __init__(self, elements: Iterable[int] = ()) -> None:
        self._elements: dict[int, None] = {}
        for elem in elements:
            self.add(elem)

    def add(self, elem: int) -> None:
        self._elements.setdefault(elem, None)

    def __contains__(self, elem: object) -> bool:
        return elem in self._elements

    def __iter__(self) -> Iterator[int]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self._elements.keys() == other._elements.keys()

    def __str__(self) -> str:
        return format_braces(self)

    def __repr__(self) -> str:
        return f"IntSet({list(self)!r})"


def union(a: Iterable[int], b: Iterable[int]) -> IntSet:
    result = IntSet(a)
    for elem in b:
        result.add(elem)
    return result


def intersection(a: Iterable[int], b: IntSet) -> IntSet:
    return IntSet(elem for elem in a if elem in b)


def difference(a: Iterable[int], b: IntSet) -> IntSet:
    return IntSet(elem for elem in a if elem not in b)


def power_set(a: Iterable[int]) -> Iterator[tuple[int, ...]]:
    """Yield every subset, ordered by the binary counter that selects it."""
    items = list(a)
    for counter in range(1 << len(items)):
        yield tuple(item for bit, item in enumerate(items) if counter & (1 << bit))


def print_power_set(a: Iterable[int], out: IO[str] | None = None) -> None:
    out = out if out is not None else sys.stdout
    print("\nPower Set (all subsets):", file=out)
    for subset in power_set(a):
        members = "".join(f"{elem} " for elem in subset)
        print(f"{{ {members}}}", file=out)


def demonstrate_operations(out: IO[str] | None = None) -> None:
    out = out if out is not None else sys.stdout

    def say(text: str = "") -> None:
        print(text, file=out)

    say("\n=== Set Operations Demonstration ===")
    say("Adding students to CS101: {1, 2, 3, 5}")
    cs101 = IntSet([1, 2, 3, 5])
    say("Adding students to Math101: {2, 3, 4, 6}")
    math101 = IntSet([2, 3, 4, 6])

    say(f"\nCS101 Students: {cs101}")
    say(f"Math101 Students: {math101}")
    say(f"\nUnion (students in at least one course): {union(cs101, math101)}")
    say(f"Intersection (students in BOTH courses): {intersection(cs101, math101)}")
    say(f"Difference (CS101 - Math101): {difference(cs101, math101)}")