[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unidisc"
version = "1.0.0"
description = "University data checked with discrete structures: prerequisites, groups, sets, relations, functions, rules and proofs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "discrete-mathematics",
    "education",
    "course-scheduling",
    "sets",
    "relations",
    "induction",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["unidisc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
