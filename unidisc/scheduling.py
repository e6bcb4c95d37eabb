"""Course catalogue and generation of prerequisite-respecting orderings."""

from __future__ import annotations

import sys
from typing import IO, Iterator

from .models import Course

MAX_COURSES = 100


class SchedulingError(Exception):
    """Raised when a course cannot be added or found."""


class CourseScheduling:
    """Holds courses and lists every order in which they can all be taken."""

    def __init__(self, out: IO[str] | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._courses: list[Course] = []

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def add_course(self, course_id: int, name: str, credits: int = 3) -> Course:
        if len(self._courses) >= MAX_COURSES:
            raise SchedulingError("Maximum courses limit reached!")
        course = Course(course_id, name, credits)
        self._courses.append(course)
        self._print("Course added successfully!")
        return course

    def add_prerequisite(self, course_id: int, prereq_id: int) -> None:
        course = self.find_course(course_id)
        if course is None:
            raise SchedulingError("Course not found!")
        course.add_prerequisite(prereq_id)
        self._print("Prerequisite added successfully!")

    def _extend(
        self, current: list[Course], remaining: list[Course]
    ) -> Iterator[tuple[Course, ...]]:
        if not remaining:
            yield tuple(current)
            return
        taken_ids = {course.course_id for course in current}
        for position, course in enumerate(remaining):
            if all(prereq in taken_ids for prereq in course.prerequisites):
                current.append(course)
                yield from self._extend(
                    current, remaining[:position] + remaining[position + 1 :]
                )
                current.pop()

    def valid_sequences(self) -> Iterator[tuple[Course, ...]]:
        """Yield every ordering of all courses that respects prerequisites."""
        if not self._courses:
            return
        yield from self._extend([], list(self._courses))

    def generate_valid_sequences(self) -> int:
        """Print every valid ordering and return how many there were."""
        if not self._courses:
            self._print("No courses available!")
            return 0
        self._print("\n=== Generating Valid Course Sequences ===")
        count = 0
        for sequence in self.valid_sequences():
            names = " -> ".join(course.name for course in sequence)
            self._print(f"Valid Sequence: {names}")
            count += 1
        return count

    def display_all_courses(self) -> None:
        self._print("\n=== All Courses ===")
        for course in self._courses:
            self._out.write(course.describe())
            self._print("------------------------")

    def find_course(self, course_id: int) -> Course | None:
        return next((c for c in self._courses if c.course_id == course_id), None)

    def __len__(self) -> int:
        return len(self._courses)

    def __iter__(self) -> Iterator[Course]:
        return iter(self._courses)