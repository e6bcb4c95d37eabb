# unidisc

A library that applies discrete structures to university data: courses and
their prerequisites, students, faculty, and the mathematics that connects them.
Most operations print a readable report. The same operations also return their
result, so you can use them from your own code.

## Installing

```
pip install .
```

## Modules

- `unidisc.models`: the dataclasses `Course`, `Student` and `Faculty`. Names
  are cut to 49 characters. Each dataclass has a `describe()` method that
  returns a text summary. `format_braces(values)` renders a sequence as
  `{ a, b, c }`.
- `unidisc.scheduling`: `CourseScheduling` is a catalogue of up to 100 courses.
  It provides these methods:
  - `add_course`
  - `add_prerequisite`
  - `find_course`
  - `valid_sequences()`, which yields every ordering of all courses that
    respects their prerequisites.
  - `generate_valid_sequences()`, which prints those orderings and returns how
    many there were.
  - `display_all_courses()`

  Going over the limit, or adding a prerequisite to an unknown course, raises
  `SchedulingError`.
- `unidisc.combinations`: this module provides:
  - `factorial`
  - `n_choose_r`
  - `groups(student_ids, group_size)`, which yields every group of the given
    size.
  - `StudentGroupCombination`, which prints the count and the groups.
- `unidisc.induction`: `InductionModule(courses)`. Its
  `verify_prerequisite_chain(course_id, completed)` walks the prerequisites
  recursively, from the base case through each inductive step. It returns
  whether the chain holds.
- `unidisc.logic`: `LogicInference` stores up to 50 `Rule`s of the form "if
  faculty F teaches course C then lab L is assigned". It provides these
  methods:
  - `verify_rule`, which checks the first matching rule.
  - `infer_consequences`, which returns every implied lab.
  - `display_all_rules`

  Going over the limit raises `LogicError`.
- `unidisc.sets`: this module provides:
  - `IntSet`, a set of integers that keeps insertion order.
  - The functions `union`, `intersection` and `difference`.
  - `power_set`, which yields subsets in binary-counter order.
  - `print_power_set`
  - `demonstrate_operations`
- `unidisc.relations`: `RelationsModule` stores up to 100 ordered pairs. It
  tests them with `is_reflexive`, `is_symmetric`, `is_transitive` and
  `is_equivalence`. `check_properties` prints a report. Going over the limit
  raises `RelationError`.
- `unidisc.mappings`: `FunctionsModule` stores up to 100 course → faculty
  mappings. It tests them with `is_injective`, `is_surjective` and
  `is_bijective`. `check_function_properties` prints a report. Going over the
  limit raises `MappingError`.
- `unidisc.proof`: `prove_prerequisite_chain` and `prove_set_equality` print
  step-by-step proofs and return the verdict.
- `unidisc.consistency`: these functions look for problems in enrolment data:
  - `check_course_overlap` finds duplicate enrolments.
  - `check_student_overload` finds credit loads above a maximum.
  - `check_prerequisite_violations` finds enrolments whose prerequisites are
    not completed.
  - `run_all_checks` runs all three.

  Each function returns `True` when it finds nothing wrong.

The printing classes take an optional `out` stream. Their module-level
functions take an optional `out` argument. Output goes to standard output when
`out` is not given.

## Example

```python
from unidisc.scheduling import CourseScheduling
from unidisc.sets import IntSet, power_set

scheduler = CourseScheduling()
scheduler.add_course(101, "Introduction to Programming", 3)
scheduler.add_course(102, "Data Structures", 3)
scheduler.add_prerequisite(102, 101)
for sequence in scheduler.valid_sequences():
    print(" -> ".join(course.name for course in sequence))

a = IntSet([1, 2, 3])
print(len(list(power_set(a))))  # 8
```

## What it does not do

- There is no command-line program or interactive menu. You use the package
  by importing its modules.
- There are no algorithmic-efficiency demonstrations, such as memoised
  Fibonacci or powers of two.
- Data is held only in memory and is never saved.

## Running the tests

```
pip install ".[test]"
pytest
```