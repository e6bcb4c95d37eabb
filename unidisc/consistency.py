"""Checks on student enrolments against the course catalogue."""

from __future__ import annotations

import itertools
import sys
from typing import IO, Iterable, Sequence

from .models import Course, Student


def _writer(out: IO[str] | None):
    stream = out if out is not None else sys.stdout

    def say(text: str = "") -> None:
        print(text, file=stream)

    return say


def _find(courses: Sequence[Course], course_id: int) -> Course | None:
    return next((c for c in courses if c.course_id == course_id), None)


def check_course_overlap(students: Iterable[Student], out: IO[str] | None = None) -> bool:
    """Report every pair of duplicate enrolments; True when there are none."""
    say = _writer(out)
    say("\n=== Checking for Duplicate Course Enrollments ===")
    conflict = False
    for student in students:
        for first, second in itertools.combinations(student.enrolled_courses, 2):
            if first == second:
                say(
                    f"✗ CONFLICT: Student {student.name} (ID: {student.student_id}) "
                    f"enrolled in course {first} twice!"
                )
                conflict = True
    if not conflict:
        say("✓ No duplicate course enrollments detected")
    return not conflict


def check_student_overload(
    students: Iterable[Student],
    courses: Iterable[Course],
    max_credits: int,
    out: IO[str] | None = None,
) -> bool:
    """Report each student's credit load; True when nobody exceeds max_credits.

    Enrolments in courses missing from the catalogue count for no credits.
    """
    say = _writer(out)
    catalogue = list(courses)
    say("\n=== Checking Student Credit Overload ===")
    say(f"Maximum allowed credits: {max_credits}\n")
    overload = False
    for student in students:
        total = 0
        for course_id in student.enrolled_courses:
            course = _find(catalogue, course_id)
            if course is not None:
                total += course.credits
        line = f"Student {student.name} (ID: {student.student_id}): {total} credits"
        if total > max_credits:
            say(f"{line} ✗ OVERLOAD!")
            overload = True
        else:
            say(f"{line} ✓")
    if not overload:
        say("\n✓ No student overload detected")
    return not overload


def check_prerequisite_violations(
    students: Iterable[Student],
    courses: Iterable[Course],
    out: IO[str] | None = None,
) -> bool:
    """Report enrolments whose prerequisites are not completed; True when none."""
    say = _writer(out)
    catalogue = list(courses)
    say("\n=== Checking Prerequisite Violations ===")
    violation = False
    for student in students:
        completed = set(student.completed_courses)
        for course_id in student.enrolled_courses:
            course = _find(catalogue, course_id)
            if course is None:
                continue
            for prereq_id in course.prerequisites:
                if prereq_id not in completed:
                    say(
                        f"✗ VIOLATION: Student {student.name} enrolled in "
                        f"{course.name} without completing prerequisite "
                        f"(ID: {prereq_id})"
                    )
                    violation = True
    if not violation:
        say("✓ No prerequisite violations detected")
    return not violation


def run_all_checks(
    students: Iterable[Student],
    courses: Iterable[Course],
    max_credits: int,
    out: IO[str] | None = None,
) -> bool:
    """Run every check and return whether all of them passed."""
    say = _writer(out)
    roster = list(students)
    catalogue = list(courses)
    say("\n╔══════════════════════════════════════════════════════╗")
    say("║        COMPREHENSIVE CONSISTENCY CHECK               ║")
    say("╚══════════════════════════════════════════════════════╝")

    overlap_ok = check_course_overlap(roster, out)
    overload_ok = check_student_overload(roster, catalogue, max_credits, out)
    prereq_ok = check_prerequisite_violations(roster, catalogue, out)

    bar = "═" * 55
    say(f"\n{bar}")
    passed = overlap_ok and overload_ok and prereq_ok
    if passed:
        say("✓✓✓ ALL CONSISTENCY CHECKS PASSED ✓✓✓")
    else:
        say("✗✗✗ CONSISTENCY VIOLATIONS DETECTED ✗✗✗")
    say(bar)
    return passed