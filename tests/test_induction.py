import io

import pytest

from unidisc.induction import InductionModule
from unidisc.models import Course


@pytest.fixture
def courses():
    intro = Course(101, "Introduction to Programming")
    ds = Course(102, "Data Structures", prerequisites=[101])
    algo = Course(201, "Algorithms", prerequisites=[102])
    return [intro, ds, algo]


def _engine(courses):
    out = io.StringIO()
    return InductionModule(courses, out), out


def test_base_case(courses):
    engine, out = _engine(courses)
    assert engine.verify_prerequisite_chain(101, []) is True
    text = out.getvalue()
    assert "Base Case (Depth 0): Course 'Introduction to Programming'" in text
    assert "✓ VERIFICATION PASSED" in text


def test_missing_direct_prerequisite(courses):
    engine, out = _engine(courses)
    assert engine.verify_prerequisite_chain(102, []) is False
    text = out.getvalue()
    assert "Missing prerequisite: Course ID 101" in text
    assert "✗ VERIFICATION FAILED" in text


def test_full_chain_completed(courses):
    engine, out = _engine(courses)
    assert engine.verify_prerequisite_chain(201, [101, 102]) is True
    assert "Base Case (Depth 2)" in out.getvalue()


def test_strong_induction_checks_deeper_levels(courses):
    engine, out = _engine(courses)
    assert engine.verify_prerequisite_chain(201, [102]) is False
    text = out.getvalue()
    assert "Prerequisite Course ID 102 is completed" in text
    assert "Missing prerequisite: Course ID 101" in text


def test_unknown_course(courses):
    engine, out = _engine(courses)
    assert engine.verify_prerequisite_chain(999, [101]) is False
    assert "Course ID 999 not found!" in out.getvalue()


def test_completed_prerequisite_not_in_catalogue():
    course = Course(5, "Lonely", prerequisites=[77])
    engine, out = _engine([course])
    assert engine.verify_prerequisite_chain(5, [77]) is False
    assert "Course ID 77 not found!" in out.getvalue()