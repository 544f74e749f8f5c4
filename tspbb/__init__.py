"""Branch and bound solvers and benchmarks for the travelling salesman problem."""

__version__ = "0.1.0"