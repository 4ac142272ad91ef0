[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "randsearch"
version = "0.1.0"
description = "Benchmarks for randomized selection, sorting and search structures: quickselect, quicksort, skip lists and treaps"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "benchmark",
    "quickselect",
    "quicksort",
    "median-of-medians",
    "skiplist",
    "treap",
    "randomized algorithms",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
randsearch-quick = "randsearch.quick:main"
randsearch-skiplist = "randsearch.skiplist:main"
randsearch-treap = "randsearch.treap:main"

[tool.hatch.build.targets.wheel]
packages = ["randsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
