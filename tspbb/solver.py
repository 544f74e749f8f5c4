"""Run a configured branch-and-bound experiment and report the results."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from tspbb.branch_and_bound import Strategy, TourResult, solve
from tspbb.config import ConfigData, load_config, save_results_to_csv
from tspbb.cost_matrix import CostMatrix
from tspbb.symmetric_matrix import SymmetricCostMatrix

DEFAULT_CONFIG = "config.txt"


@dataclass(frozen=True)
class RunSummary:
    """Outcome of a run: last tour found, mean time and the results file."""

    best_path: tuple[int, ...]
    cost: int | None
    average_time_ms: float
    results_file: Path


def run(config: ConfigData, out: TextIO | None = None) -> RunSummary:
    """Solve the configured instance `iterations` times and save the mean time."""
    out = out if out is not None else sys.stdout
    try:
        strategy = Strategy(config.algorithm)
    except ValueError:
        raise ValueError("Unknown algorithm specified.") from None
    if config.iterations < 1:
        raise ValueError("iterations must be at least 1")

    matrix_type = SymmetricCostMatrix if config.symmetric_matrix else CostMatrix
    rng = random.Random()
    matrix: CostMatrix | SymmetricCostMatrix | None = None
    if not config.random_data:
        matrix = matrix_type.from_file(config.matrix_file)
        kind = "symmetric " if config.symmetric_matrix else ""
        out.write(f"Successfully filled {kind}cost matrix!\n")

    total_ns = 0
    result = TourResult(None, ())
    for iteration in range(1, config.iterations + 1):
        if config.random_data:
            matrix = matrix_type.random(config.num_cities, rng)
        start = time.perf_counter_ns()
        result = solve(matrix, strategy)
        total_ns += time.perf_counter_ns() - start

        if config.progress_info:
            progress = iteration / config.iterations * 100
            out.write(
                f"Progress: {progress:.2f}% completed "
                f"({iteration}/{config.iterations} iterations).\n"
            )

    avg_time = total_ns / (1_000_000 * config.iterations)
    results_file = save_results_to_csv(
        config.algorithm,
        config.symmetric_matrix,
        config.num_cities,
        config.iterations,
        avg_time,
        result.cost,
    )
    out.write("Results saved to the file\n\n")

    if not config.random_data:
        out.write("Best path: " + "".join(f"{city} " for city in result.path) + "\n")
        out.write(f"Average time: {avg_time:g} ms\n")
        out.write(f"Cost: {result.cost if result.found else 'no tour'}\n")
    else:
        out.write(f"Average time for random data: {avg_time:g} ms\n")

    return RunSummary(result.path, result.cost, avg_time, results_file)


def main(argv: list[str] | None = None) -> int:
    """Load the configuration file and run the solver."""
    parser = argparse.ArgumentParser(
        prog="tspbb", description="Branch-and-bound travelling-salesman solver."
    )
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG)
    args = parser.parse_args(argv)
    try:
        config = load_config(args.config)
    except OSError:
        print(f"Unable to open config file: {args.config}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        run(config)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0