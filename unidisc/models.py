"""Course, student and faculty records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

NAME_LIMIT = 49


def format_braces(values: Iterable[object]) -> str:
    """Render values as ``{ a, b, c }``."""
    return "{ " + ", ".join(str(value) for value in values) + " }"


def _clip(name: str) -> str:
    return name[:NAME_LIMIT]


@dataclass
class Course:
    """A course with an id, a name, credits and prerequisite course ids."""

    course_id: int = 0
    name: str = ""
    credits: int = 3
    prerequisites: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = _clip(self.name)

    def add_prerequisite(self, prereq_id: int) -> None:
        self.prerequisites.append(prereq_id)

    def describe(self) -> str:
        prereqs = ", ".join(str(p) for p in self.prerequisites) or "None"
        return (
            f"Course ID: {self.course_id}\n"
            f"Name: {self.name}\n"
            f"Credits: {self.credits}\n"
            f"Prerequisites: {prereqs}\n"
        )


@dataclass
class Student:
    """A student with enrolled and completed course ids."""

    student_id: int = 0
    name: str = ""
    enrolled_courses: list[int] = field(default_factory=list)
    completed_courses: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = _clip(self.name)

    def enroll_course(self, course_id: int) -> None:
        self.enrolled_courses.append(course_id)

    def complete_course(self, course_id: int) -> None:
        self.completed_courses.append(course_id)

    def describe(self) -> str:
        return (
            f"Student ID: {self.student_id}\n"
            f"Name: {self.name}\n"
            f"Enrolled Courses: {format_braces(self.enrolled_courses)}\n"
            f"Completed Courses: {format_braces(self.completed_courses)}\n"
        )


@dataclass
class Faculty:
    """A faculty member with assigned course ids."""

    faculty_id: int = 0
    name: str = ""
    assigned_courses: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = _clip(self.name)

    def assign_course(self, course_id: int) -> None:
        self.assigned_courses.append(course_id)

    def describe(self) -> str:
        return (
            f"Faculty ID: {self.faculty_id}\n"
            f"Name: {self.name}\n"
            f"Assigned Courses: {format_braces(self.assigned_courses)}\n"
        )