"""Step-by-step proofs of enrolment eligibility and set equality."""

from __future__ import annotations

import sys
from typing import IO, Iterable, Sequence

from .models import Course

_BANNER_TOP = "\n╔══════════════════════════════════════════════════════╗"
_BANNER_BOTTOM = "╚══════════════════════════════════════════════════════╝"


def _writer(out: IO[str] | None):
    stream = out if out is not None else sys.stdout

    def say(text: str = "") -> None:
        print(text, file=stream)

    return say


def _find(courses: Sequence[Course], course_id: int) -> Course | None:
    return next((c for c in courses if c.course_id == course_id), None)


def prove_prerequisite_chain(
    courses: Iterable[Course],
    target_course_id: int,
    completed: Iterable[int],
    out: IO[str] | None = None,
) -> bool:
    """Print a proof that the target course may be taken; return whether it may.

    A course that cannot be found yields False.
    """
    say = _writer(out)
    catalogue = list(courses)
    done = set(completed)

    say(_BANNER_TOP)
    say("║        AUTOMATED FORMAL PROOF                        ║")
    say(_BANNER_BOTTOM)
    say(
        f"\nTheorem: Student can enroll in Course ID {target_course_id} "
        "if and only if all prerequisites are satisfied."
    )
    say("\n--- PROOF ---")

    target = _find(catalogue, target_course_id)
    if target is None:
        say("✗ Course not found. Proof cannot proceed.")
        return False

    say("\nStep 1: Identify the target course")
    say(f"  Target: {target.name} (ID: {target_course_id})")

    say("\nStep 2: Check Base Case (Mathematical Induction)")
    if not target.prerequisites:
        say("  Base case holds: Course has no prerequisites.")
        say("  ∴ Student can enroll immediately.")
        say("\n✓ QED (Quod Erat Demonstrandum - Proof Complete)")
        return True

    say(f"  Course has {len(target.prerequisites)} prerequisite(s).")
    say("\nStep 3: Apply Inductive Hypothesis")
    say("  Assume: If prerequisites are completed, student can enroll.")

    say("\nStep 4: Verify each prerequisite")
    all_satisfied = True
    for number, prereq_id in enumerate(target.prerequisites, start=1):
        prereq = _find(catalogue, prereq_id)
        prereq_name = prereq.name if prereq is not None else "Unknown"
        if prereq_id in done:
            say(
                f"  ✓ Prerequisite {number}: Course ID {prereq_id} "
                f"({prereq_name}) is completed"
            )
        else:
            say(
                f"  ✗ Prerequisite {number}: Course ID {prereq_id} "
                f"({prereq_name}) is NOT completed"
            )
            all_satisfied = False

    say("\nStep 5: Conclusion")
    if all_satisfied:
        say("  All prerequisites are satisfied.")
        say("  By inductive hypothesis: Student CAN enroll.")
        say("\n✓ QED (Proof Complete)")
    else:
        say("  Not all prerequisites are satisfied.")
        say("  By logical negation: Student CANNOT enroll.")
        say("\n✗ Proof shows enrollment is NOT permitted.")
    return all_satisfied


def _check_subset(
    say, left: Sequence[int], right: Sequence[int], left_name: str, right_name: str
) -> bool:
    members = set(right)
    holds = True
    for elem in left:
        if elem not in members:
            say(f"  ✗ Element {elem} in {left_name} but not in {right_name}")
            holds = False
    if holds:
        say(f"  ✓ {left_name} ⊆ {right_name} holds")
    return holds


def prove_set_equality(
    set_a: Iterable[int], set_b: Iterable[int], out: IO[str] | None = None
) -> bool:
    """Print a proof by mutual inclusion and return whether the sets are equal."""
    say = _writer(out)
    a = list(set_a)
    b = list(set_b)

    say(_BANNER_TOP)
    say("║        PROOF: Set Equality                           ║")
    say(_BANNER_BOTTOM)
    say("\nTheorem: Two sets A and B are equal iff A ⊆ B and B ⊆ A")
    say("\nSet A = { " + ", ".join(str(x) for x in a) + " }")
    say("Set B = { " + ", ".join(str(x) for x in b) + " }")

    say("\n--- PROOF ---")
    say("Step 1: Check if A ⊆ B (A is subset of B)")
    a_subset_b = _check_subset(say, a, b, "A", "B")
    say("\nStep 2: Check if B ⊆ A (B is subset of A)")
    b_subset_a = _check_subset(say, b, a, "B", "A")

    say("\nStep 3: Conclusion")
    equal = a_subset_b and b_subset_a
    if equal:
        say("  Both conditions satisfied: A ⊆ B ∧ B ⊆ A")
        say("  ∴ A = B")
        say("\n✓ QED: Sets are EQUAL")
    else:
        say("  Conditions not satisfied.")
        say("  ∴ A ≠ B")
        say("\n✗ Sets are NOT equal")
    return equal