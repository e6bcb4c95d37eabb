"""Prerequisite verification by recursive (strong) induction."""

from __future__ import annotations

import sys
from typing import IO, Iterable

from .models import Course


class InductionModule:
    """Checks that a course and every prerequisite below it are satisfied."""

    def __init__(self, courses: Iterable[Course], out: IO[str] | None = None) -> None:
        self._courses = list(courses)
        self._out = out if out is not None else sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def _find(self, course_id: int) -> Course | None:
        return next((c for c in self._courses if c.course_id == course_id), None)

    def _verify(self, course_id: int, completed: set[int], depth: int) -> bool:
        course = self._find(course_id)
        if course is None:
            self._print(f"Course ID {course_id} not found!")
            return False

        if not course.prerequisites:
            self._print(
                f"Base Case (Depth {depth}): Course '{course.name}' "
                "has no prerequisites ✓"
            )
            return True

        self._print(
            f"Inductive Step (Depth {depth}): Checking prerequisites for "
            f"'{course.name}'"
        )
        for prereq_id in course.prerequisites:
            if prereq_id not in completed:
                self._print(f"  ✗ Missing prerequisite: Course ID {prereq_id}")
                return False
            self._print(f"  ✓ Prerequisite Course ID {prereq_id} is completed")
            if not self._verify(prereq_id, completed, depth + 1):
                return False
        return True

    def verify_prerequisite_chain(self, course_id: int, completed: Iterable[int]) -> bool:
        self._print("\n=== Verifying Prerequisites Using Mathematical Induction ===")
        self._print(f"Checking if student can take Course ID {course_id}\n")
        result = self._verify(course_id, set(completed), 0)
        verdict = "✓ VERIFICATION PASSED" if result else "✗ VERIFICATION FAILED"
        self._print(f"\n{verdict}")
        return result