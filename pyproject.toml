[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfsolve"
version = "0.1.0"
description = "Solutions to a set of short competitive-programming problems on numbers, arrays, strings and constructions"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "number-theory", "greedy", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cfsolve = "cfsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cfsolve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
