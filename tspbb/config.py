"""Run configuration and result files for the solver."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

RESULT_FILES = {
    "branch_and_bound_bfs": "branch_and_bound_bfs_results.csv",
    "branch_and_bound_dfs": "branch_and_bound_dfs_results.csv",
    "branch_and_bound_best_first": "branch_and_bound_best_first_results.csv",
}

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


@dataclass
class ConfigData:
    """Settings for one solver run."""

    algorithm: str = ""
    matrix_file: str = ""
    iterations: int = 0
    random_data: bool = False
    symmetric_matrix: bool = False
    num_cities: int = 0
    progress_info: bool = False


def _parse_int(key: str, value: str) -> int:
    """Parse the leading integer of value, ignoring anything after it."""
    match = _LEADING_INT.match(value)
    if match is None:
        raise ValueError(f"invalid integer for {key}: {value!r}")
    return int(match.group())


def load_config(path: str | Path) -> ConfigData:
    """Read key=value lines; lines that are empty or start with '#' are skipped."""
    config = ConfigData()
    for line in Path(path).read_text().splitlines():
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        if key == "algorithm":
            config.algorithm = value
        elif key == "matrix_file":
            config.matrix_file = value
        elif key == "iterations":
            config.iterations = _parse_int(key, value)
        elif key == "random_data":
            config.random_data = value == "true"
        elif key == "symmetric_matrix":
            config.symmetric_matrix = value == "true"
        elif key == "num_cities":
            config.num_cities = _parse_int(key, value)
        elif key == "progress_info":
            config.progress_info = value == "true"
    return config


def save_results_to_csv(
    algorithm: str,
    symmetric: bool,
    num_cities: int,
    iterations: int,
    avg_time: float,
    avg_cost: int | None,
    directory: str | Path | None = None,
) -> Path:
    """Append one result row to the algorithm's CSV file and return its path."""
    try:
        filename = RESULT_FILES[algorithm]
    except KeyError:
        raise ValueError(f"Unknown algorithm: {algorithm!r}") from None
    target = Path(directory) / filename if directory is not None else Path(filename)
    kind = "Symmetric" if symmetric else "Asymmetric"
    with target.open("a", encoding="utf-8") as handle:
        handle.write(f"{kind},{num_cities},{avg_time:g}\n")
    return target