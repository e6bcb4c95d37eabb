import io

import pytest

from unidisc.logic import MAX_RULES, LogicError, LogicInference, Rule


@pytest.fixture
def engine():
    out = io.StringIO()
    return LogicInference(out), out


def test_add_rule_stores_and_reports(engine):
    logic, out = engine
    rule = logic.add_rule(1, 101, 5, "F")
    assert rule == Rule(1, 101, 5, "F")
    assert logic.rules == (rule,)
    assert "Rule added successfully!" in out.getvalue()


def test_rule_limit(engine):
    logic, _ = engine
    for i in range(MAX_RULES):
        logic.add_rule(i, i, i, "F")
    with pytest.raises(LogicError):
        logic.add_rule(0, 0, 0, "F")
    assert len(logic.rules) == MAX_RULES


def test_verify_rule_valid(engine):
    logic, out = engine
    logic.add_rule(1, 101, 5, "F")
    assert logic.verify_rule(1, 101, 5) is True
    assert "✓ Rule is VALID (matches stored rule)" in out.getvalue()


def test_verify_rule_conflict(engine):
    logic, out = engine
    logic.add_rule(1, 101, 5, "F")
    assert logic.verify_rule(1, 101, 6) is False
    assert "Expected Lab 5 but got Lab 6" in out.getvalue()


def test_verify_rule_uses_first_match(engine):
    logic, _ = engine
    logic.add_rule(1, 101, 5, "F")
    logic.add_rule(1, 101, 6, "F")
    assert logic.verify_rule(1, 101, 6) is False
    assert logic.verify_rule(1, 101, 5) is True


def test_verify_rule_missing(engine):
    logic, out = engine
    assert logic.verify_rule(2, 202, 3) is False
    assert "No matching rule found in database" in out.getvalue()


def test_infer_consequences(engine):
    logic, out = engine
    logic.add_rule(1, 101, 5, "F")
    logic.add_rule(2, 101, 9, "F")
    logic.add_rule(1, 101, 7, "F")
    assert logic.infer_consequences(1, 101) == [5, 7]
    assert "  => Lab 7 must be assigned" in out.getvalue()


def test_infer_consequences_none(engine):
    logic, out = engine
    assert logic.infer_consequences(3, 303) == []
    assert "No consequences found for this assignment" in out.getvalue()


def test_display_all_rules(engine):
    logic, out = engine
    logic.display_all_rules()
    assert "No rules defined yet." in out.getvalue()
    logic.add_rule(1, 101, 5, "F")
    logic.display_all_rules()
    assert "Rule 1: If Faculty 1 teaches Course 101 => Lab 5" in out.getvalue()


def test_rule_default_kind():
    assert Rule().kind == "C"
    assert Rule().lab_id == -1