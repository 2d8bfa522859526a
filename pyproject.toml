[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "streamsort"
version = "0.1.0"
description = "Sequential, sample-based and streaming merge-tree sorting of integer data files, with a generator, a result checker, a stopwatch and a PPM reader and writer."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "merge sort",
    "sample sort",
    "quicksort",
    "streaming",
    "pipeline",
    "fifo",
    "ppm",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
streamsort-generate = "streamsort.generate:main"
streamsort-parallel-sort = "streamsort.parallel_sort:main"
streamsort-merge = "streamsort.merge:main"

[tool.hatch.build.targets.wheel]
packages = ["streamsort"]

[tool.hatch.build.targets.sdist]
include = ["streamsort", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
