"""Discrete structures over university data: courses, sets, relations, functions, rules and proofs."""

__version__ = "1.0.0"