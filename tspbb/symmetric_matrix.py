"""Symmetric cost matrix that stores only one triangle."""

from __future__ import annotations

import random
from pathlib import Path

from tspbb.cost_matrix import NO_EDGE, _read_square_matrix


def _index(row: int, col: int) -> int:
    if row > col:
        row, col = col, row
    return col * (col + 1) // 2 + row


class SymmetricCostMatrix:
    """Cost matrix where cost(i, j) always equals cost(j, i)."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._costs = [0] * (size * (size + 1) // 2)

    @classmethod
    def from_file(cls, path: str | Path) -> SymmetricCostMatrix:
        """Load a full square matrix, keeping its lower triangle."""
        rows = _read_square_matrix(path)
        matrix = cls(len(rows))
        for i, row in enumerate(rows):
            for j, value in enumerate(row[: i + 1]):
                matrix.set_cost(i, j, value)
        return matrix

    @classmethod
    def random(
        cls, num_cities: int, rng: random.Random | None = None
    ) -> SymmetricCostMatrix:
        """Build a matrix with costs 1-100 and -1 on the diagonal."""
        rng = rng or random.Random()
        matrix = cls(num_cities)
        for i in range(num_cities):
            for j in range(i + 1):
                matrix.set_cost(i, j, NO_EDGE if i == j else rng.randint(1, 100))
        return matrix

    def _check(self, i: int, j: int) -> None:
        if not (0 <= i < self._size and 0 <= j < self._size):
            raise IndexError("Index out of bounds")

    def cost(self, i: int, j: int) -> int:
        """Cost between cities i and j."""
        self._check(i, j)
        return self._costs[_index(i, j)]

    def set_cost(self, i: int, j: int, value: int) -> None:
        """Set the cost between cities i and j in both directions."""
        self._check(i, j)
        self._costs[_index(i, j)] = value

    def format(self) -> str:
        """Render the full matrix as printable text."""
        if self._size == 0:
            return "Graph is empty!\n"
        lines = ["Symmetric Cost Matrix:"]
        lines.extend(
            "".join(f"{self.cost(i, j):5d}" for j in range(self._size))
            for i in range(self._size)
        )
        return "\n".join(lines) + "\n\n"

    def __len__(self) -> int:
        return self._size