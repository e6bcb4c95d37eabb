"""Rule store for "faculty teaches course implies lab" inferences."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO

MAX_RULES = 50


class LogicError(Exception):
    """Raised when a rule cannot be stored."""


@dataclass(frozen=True)
class Rule:
    """If a faculty member teaches a course, a lab must be assigned."""

    faculty_id: int = -1
    course_id: int = -1
    lab_id: int = -1
    kind: str = "C"

    def matches(self, faculty_id: int, course_id: int) -> bool:
        return self.faculty_id == faculty_id and self.course_id == course_id

    def __str__(self) -> str:
        return (
            f"If Faculty {self.faculty_id} teaches Course {self.course_id} "
            f"=> Lab {self.lab_id}"
        )


class LogicInference:
    """Stores implication rules and checks or infers their consequences."""

    def __init__(self, out: IO[str] | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._rules: list[Rule] = []

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def add_rule(self, faculty_id: int, course_id: int, lab_id: int, kind: str = "C") -> Rule:
        if len(self._rules) >= MAX_RULES:
            raise LogicError("Maximum rules limit reached!")
        rule = Rule(faculty_id, course_id, lab_id, kind)
        self._rules.append(rule)
        self._print("Rule added successfully!")
        return rule

    def verify_rule(self, faculty_id: int, course_id: int, lab_id: int) -> bool:
        """Check the first stored rule for this faculty and course against lab_id."""
        self._print("\n=== Logic Inference Verification ===")
        self._print(
            f"Verifying: If Faculty {faculty_id} teaches Course {course_id} "
            f"=> Lab {lab_id} must be assigned"
        )
        rule = next((r for r in self._rules if r.matches(faculty_id, course_id)), None)
        if rule is None:
            self._print("⚠ No matching rule found in database")
            return False
        if rule.lab_id == lab_id:
            self._print("✓ Rule is VALID (matches stored rule)")
            return True
        self._print(f"✗ CONFLICT: Expected Lab {rule.lab_id} but got Lab {lab_id}")
        return False

    def infer_consequences(self, faculty_id: int, course_id: int) -> list[int]:
        """Print and return every lab implied by the given assignment."""
        self._print("\n=== Inferring Consequences ===")
        self._print(f"Given: Faculty {faculty_id} teaches Course {course_id}")
        self._print("Inferred consequences:")
        labs = [r.lab_id for r in self._rules if r.matches(faculty_id, course_id)]
        for lab in labs:
            self._print(f"  => Lab {lab} must be assigned")
        if not labs:
            self._print("  No consequences found for this assignment")
        return labs

    def display_all_rules(self) -> None:
        self._print("\n=== All Logic Rules ===")
        if not self._rules:
            self._print("No rules defined yet.")
            return
        for number, rule in enumerate(self._rules, start=1):
            self._print(f"Rule {number}: {rule}")