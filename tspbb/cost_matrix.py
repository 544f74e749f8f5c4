"""Dense (possibly asymmetric) cost matrix for travelling-salesman instances."""

from __future__ import annotations

import random
from pathlib import Path

NO_EDGE = -1


def _read_square_matrix(path: str | Path) -> list[list[int]]:
    """Read a city count followed by a full square matrix of integers."""
    tokens = Path(path).read_text().split()
    if not tokens:
        raise ValueError(f"{path}: missing number of cities")
    try:
        values = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"{path}: non-integer value in cost matrix") from exc
    size, cells = values[0], values[1:]
    if size < 0:
        raise ValueError(f"{path}: negative number of cities")
    if len(cells) < size * size:
        raise ValueError(
            f"{path}: expected {size * size} costs, found {len(cells)}"
        )
    return [cells[row * size:(row + 1) * size] for row in range(size)]


class CostMatrix:
    """Square matrix of travel costs; -1 marks a missing edge."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._costs = [[0] * size for _ in range(size)]

    @classmethod
    def from_file(cls, path: str | Path) -> CostMatrix:
        """Load a matrix written as a city count followed by its rows."""
        rows = _read_square_matrix(path)
        matrix = cls(len(rows))
        matrix._costs = rows
        return matrix

    @classmethod
    def random(cls, num_cities: int, rng: random.Random | None = None) -> CostMatrix:
        """Build a matrix with costs 1-100 and -1 on the diagonal."""
        rng = rng or random.Random()
        matrix = cls(num_cities)
        matrix._costs = [
            [NO_EDGE if i == j else rng.randint(1, 100) for j in range(num_cities)]
            for i in range(num_cities)
        ]
        return matrix

    def _check(self, i: int, j: int) -> None:
        size = len(self)
        if not (0 <= i < size and 0 <= j < size):
            raise IndexError("Index out of bounds")

    def cost(self, i: int, j: int) -> int:
        """Cost of travelling from city i to city j."""
        self._check(i, j)
        return self._costs[i][j]

    def set_cost(self, i: int, j: int, value: int) -> None:
        """Set the cost of travelling from city i to city j."""
        self._check(i, j)
        self._costs[i][j] = value

    def format(self) -> str:
        """Render the matrix as printable text."""
        if not self._costs:
            return "Graph is empty!\n"
        lines = ["Cost matrix:"]
        lines.extend("".join(f"{value:5d}" for value in row) for row in self._costs)
        return "\n".join(lines) + "\n\n"

    def __len__(self) -> int:
        return len(self._costs)