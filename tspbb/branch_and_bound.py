"""Branch-and-bound solvers for the travelling-salesman problem."""

from __future__ import annotations

import enum
import math
from collections.abc import Collection
from dataclasses import dataclass
from typing import Protocol

from tspbb.cost_matrix import NO_EDGE
from tspbb.frontier import BestFirstFrontier, FifoFrontier, LifoFrontier, Node

START_CITY = 0


class _Matrix(Protocol):
    def cost(self, i: int, j: int) -> int: ...

    def __len__(self) -> int: ...


class Strategy(enum.Enum):
    """Order in which the search tree is explored."""

    BFS = "branch_and_bound_bfs"
    DFS = "branch_and_bound_dfs"
    BEST_FIRST = "branch_and_bound_best_first"


@dataclass(frozen=True)
class TourResult:
    """Best tour found; cost is None and path empty when no tour exists."""

    cost: int | None
    path: tuple[int, ...]

    @property
    def found(self) -> bool:
        return self.cost is not None


def _new_frontier(strategy: Strategy) -> FifoFrontier | LifoFrontier | BestFirstFrontier:
    if strategy is Strategy.BFS:
        return FifoFrontier()
    if strategy is Strategy.DFS:
        return LifoFrontier()
    return BestFirstFrontier()


def lower_bound(
    matrix: _Matrix, visited: Collection[int], current_cost: int
) -> int | float:
    """Current cost plus the cheapest outgoing edge of every unvisited city.

    An unvisited city without any outgoing edge makes the bound infinite.
    """
    size = len(matrix)
    bound: int | float = current_cost
    for city in range(size):
        if city in visited:
            continue
        outgoing = [
            matrix.cost(city, other)
            for other in range(size)
            if other != city and matrix.cost(city, other) != NO_EDGE
        ]
        bound += min(outgoing) if outgoing else math.inf
    return bound


def solve(matrix: _Matrix, strategy: Strategy | str) -> TourResult:
    """Find a cheapest tour starting and ending at city 0."""
    strategy = Strategy(strategy)
    size = len(matrix)
    if size == 0:
        raise ValueError("cost matrix has no cities")

    frontier = _new_frontier(strategy)
    start_path = (START_CITY,)
    frontier.push(
        Node(start_path, 0, lower_bound(matrix, set(start_path), 0), START_CITY)
    )

    best_cost: int | float = math.inf
    best_path: tuple[int, ...] = ()

    while len(frontier):
        current = frontier.pop()
        if current.bound >= best_cost:
            continue

        if len(current.path) == size:
            back = matrix.cost(current.current_city, START_CITY)
            if back != NO_EDGE and current.cost + back < best_cost:
                best_cost = current.cost + back
                best_path = current.path + (START_CITY,)
            continue

        visited = set(current.path)
        for next_city in range(size):
            if next_city in visited:
                continue
            step = matrix.cost(current.current_city, next_city)
            if step == NO_EDGE:
                continue
            new_path = current.path + (next_city,)
            new_cost = current.cost + step
            new_bound = lower_bound(matrix, set(new_path), new_cost)
            if new_bound < best_cost:
                frontier.push(Node(new_path, new_cost, new_bound, next_city))

    if best_path:
        return TourResult(int(best_cost), best_path)
    return TourResult(None, ())


def branch_and_bound_bfs(matrix: _Matrix) -> TourResult:
    """Solve with a breadth-first exploration of the search tree."""
    return solve(matrix, Strategy.BFS)


def branch_and_bound_dfs(matrix: _Matrix) -> TourResult:
    """Solve with a depth-first exploration of the search tree."""
    return solve(matrix, Strategy.DFS)


def branch_and_bound_best_first(matrix: _Matrix) -> TourResult:
    """Solve by always expanding the node with the lowest bound."""
    return solve(matrix, Strategy.BEST_FIRST)