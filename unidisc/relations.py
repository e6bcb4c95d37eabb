"""Binary relations and their reflexive, symmetric and transitive properties."""

from __future__ import annotations

import sys
from typing import IO, Iterable

MAX_RELATIONS = 100

_MARKS = {True: "YES ✓", False: "NO ✗"}


class RelationError(Exception):
    """Raised when a pair cannot be added to the relation."""


class RelationsModule:
    """A relation stored as a list of ordered pairs."""

    def __init__(self, out: IO[str] | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._pairs: list[tuple[int, int]] = []

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    @property
    def pairs(self) -> tuple[tuple[int, int], ...]:
        return tuple(self._pairs)

    def add_relation(self, source: int, target: int) -> None:
        if len(self._pairs) >= MAX_RELATIONS:
            raise RelationError("Maximum relations limit reached!")
        self._pairs.append((source, target))
        self._print(f"Relation ({source}, {target}) added successfully!")

    def is_reflexive(self, elements: Iterable[int]) -> bool:
        present = set(self._pairs)
        return all((x, x) in present for x in elements)

    def is_symmetric(self) -> bool:
        present = set(self._pairs)
        return all((b, a) in present for a, b in self._pairs if a != b)

    def is_transitive(self) -> bool:
        present = set(self._pairs)
        return all(
            (a, d) in present
            for a, b in self._pairs
            for c, d in self._pairs
            if b == c
        )

    def is_equivalence(self, elements: Iterable[int]) -> bool:
        return self.is_reflexive(elements) and self.is_symmetric() and self.is_transitive()

    def check_properties(self, elements: Iterable[int]) -> bool:
        """Print each property and return whether the relation is an equivalence."""
        self._print("\n=== Relation Properties Analysis ===")
        reflexive = self.is_reflexive(elements)
        symmetric = self.is_symmetric()
        transitive = self.is_transitive()

        self._print(f"Reflexive: {_MARKS[reflexive]}")
        self._print("  (Every element relates to itself)")
        self._print(f"Symmetric: {_MARKS[symmetric]}")
        self._print("  (If a→b then b→a)")
        self._print(f"Transitive: {_MARKS[transitive]}")
        self._print("  (If a→b and b→c then a→c)")

        equivalence = reflexive and symmetric and transitive
        if equivalence:
            self._print("\n✓ This is an EQUIVALENCE RELATION!")
        else:
            self._print("\n✗ This is NOT an equivalence relation.")
        return equivalence

    def print_relations(self) -> None:
        self._print("\n=== Current Relations ===")
        if not self._pairs:
            self._print("No relations defined yet.")
            return
        body = ", ".join(f"({a},{b})" for a, b in self._pairs)
        self._print(f"Relations = {{ {body} }}")