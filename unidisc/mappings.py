"""Course-to-faculty mappings and their function properties."""

from __future__ import annotations

import sys
from typing import IO, Iterable

MAX_MAPPINGS = 100

_MARKS = {True: "YES ✓", False: "NO ✗"}


class MappingError(Exception):
    """Raised when a mapping cannot be added."""


class FunctionsModule:
    """A mapping from course ids to faculty ids, checked as a function."""

    def __init__(self, out: IO[str] | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._mappings: list[tuple[int, int]] = []

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    @property
    def mappings(self) -> tuple[tuple[int, int], ...]:
        return tuple(self._mappings)

    def add_mapping(self, source: int, target: int) -> None:
        if len(self._mappings) >= MAX_MAPPINGS:
            raise MappingError("Maximum mappings limit reached!")
        self._mappings.append((source, target))
        self._print(f"Mapping added: {source} -> {target}")

    def is_injective(self) -> bool:
        """True when no two different inputs share an output."""
        sources_by_target: dict[int, int] = {}
        for source, target in self._mappings:
            seen = sources_by_target.setdefault(target, source)
            if seen != source:
                return False
        return True

    def is_surjective(self, codomain: Iterable[int]) -> bool:
        """True when every codomain element is some mapping's output."""
        targets = {target for _, target in self._mappings}
        return all(element in targets for element in codomain)

    def is_bijective(self, codomain: Iterable[int]) -> bool:
        return self.is_injective() and self.is_surjective(codomain)

    def check_function_properties(self, codomain: Iterable[int]) -> bool:
        """Print each property and return whether the mapping is bijective."""
        codomain = list(codomain)
        self._print("\n=== Function Properties Analysis ===")
        injective = self.is_injective()
        surjective = self.is_surjective(codomain)
        bijective = self.is_bijective(codomain)

        self._print(f"Injective (One-to-One): {_MARKS[injective]}")
        self._print("  (Each course assigned to different faculty)")
        self._print(f"Surjective (Onto): {_MARKS[surjective]}")
        self._print("  (Every faculty has at least one course)")
        self._print(f"Bijective (One-to-One & Onto): {_MARKS[bijective]}")
        self._print("  (Perfect one-to-one correspondence)")
        if injective:
            self._print("\n✓ Every course is assigned to exactly one faculty!")
        return bijective

    def print_mappings(self) -> None:
        self._print("\n=== Current Function Mappings ===")
        if not self._mappings:
            self._print("No mappings defined yet.")
            return
        self._print("Course -> Faculty mappings:")
        for source, target in self._mappings:
            self._print(f"  Course {source} -> Faculty {target}")