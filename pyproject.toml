[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tspbb"
version = "0.1.0"
description = "Branch and bound solvers for the travelling salesman problem, with timing benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = ["tsp", "travelling salesman", "branch and bound", "optimization", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tspbb = "tspbb.solver:main"

[tool.hatch.build.targets.wheel]
packages = ["tspbb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
