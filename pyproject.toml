[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structlab"
version = "0.1.0"
description = "Classic data structures and recursive algorithms: dynamic arrays, linked lists, hash tables, binary search trees, loop detection and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "hash-table",
    "linked-list",
    "binary-search-tree",
    "recursion",
    "memoization",
    "determinant",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structlab-recursion = "structlab.recursion:main"
structlab-determinant = "structlab.matrix:main"
structlab-accumulate = "structlab.accumulator:main"
structlab-benchmark = "structlab.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["structlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
