[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data structures and algorithms: searching, graph traversal, string matching, intervals, tries and disjoint sets."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "binary-search",
    "graph",
    "bfs",
    "dfs",
    "kmp",
    "trie",
    "union-find",
    "topological-sort",
    "quickselect",
    "sliding-window",
    "intervals",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsakit-binary-search = "dsakit.binary_search:main"
dsakit-kmp = "dsakit.kmp:main"
dsakit-two-pointer = "dsakit.two_pointer:main"
dsakit-sliding-window = "dsakit.sliding_window:demo_fixed_window"
dsakit-dfs = "dsakit.dfs:main"
dsakit-merge-intervals = "dsakit.merge_intervals:main"
dsakit-quickselect = "dsakit.quickselect:main"
dsakit-bfs = "dsakit.bfs:main"
dsakit-binary-tree = "dsakit.binary_tree:main"
dsakit-topological = "dsakit.topological:main"
dsakit-trie = "dsakit.trie:main"
dsakit-union-find = "dsakit.union_find:main"

[tool.hatch.build.targets.wheel]
packages = ["dsakit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
