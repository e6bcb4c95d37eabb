import io

import pytest

from unidisc.combinations import (
    StudentGroupCombination,
    factorial,
    groups,
    n_choose_r,
)


def test_factorial_base_cases():
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(-3) == 1


@pytest.mark.parametrize("n", range(2, 12))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_choose_more_than_available():
    assert n_choose_r(3, 5) == 0


@pytest.mark.parametrize("n", range(0, 10))
def test_choose_edges(n):
    assert n_choose_r(n, 0) == 1
    assert n_choose_r(n, n) == 1


@pytest.mark.parametrize("n,r", [(5, 2), (7, 3), (9, 4), (6, 1)])
def test_choose_symmetry_and_pascal(n, r):
    assert n_choose_r(n, r) == n_choose_r(n, n - r)
    assert n_choose_r(n, r) == n_choose_r(n - 1, r - 1) + n_choose_r(n - 1, r)


@pytest.mark.parametrize("n,r", [(4, 2), (5, 3), (6, 0), (3, 3)])
def test_group_count_matches_formula(n, r):
    assert len(list(groups(range(1, n + 1), r))) == n_choose_r(n, r)


def test_groups_order():
    assert list(groups([1, 2, 3], 2)) == [(1, 2), (1, 3), (2, 3)]


def test_groups_negative_size_is_empty():
    assert list(groups([1, 2, 3], -1)) == []


def test_calculate_combinations_output():
    out = io.StringIO()
    total = StudentGroupCombination(out).calculate_combinations(4, 2)
    assert total == n_choose_r(4, 2)
    assert f"Total possible groups of 2 from 4 students: {total}" in out.getvalue()


def test_generate_groups_output():
    out = io.StringIO()
    count = StudentGroupCombination(out).generate_groups([1, 2, 3], 2)
    text = out.getvalue()
    assert count == n_choose_r(3, 2)
    assert "Generating all possible groups:" in text
    assert "Group: { Student-1 Student-2 }" in text
    assert "Group: { Student-2 Student-3 }" in text