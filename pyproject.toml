[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ordenamientos"
version = "0.1.0"
description = "Benchmark classic sorting algorithms over binary integer datasets"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "benchmark",
    "algorithms",
    "insertion sort",
    "merge sort",
    "quick sort",
    "heap sort",
    "counting sort",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
ordenamientos = "ordenamientos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ordenamientos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
