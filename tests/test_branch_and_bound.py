import itertools
import math
import random

import pytest

from tspbb.branch_and_bound import (
    Strategy,
    TourResult,
    branch_and_bound_best_first,
    branch_and_bound_bfs,
    branch_and_bound_dfs,
    lower_bound,
    solve,
)
from tspbb.cost_matrix import CostMatrix
from tspbb.symmetric_matrix import SymmetricCostMatrix

SOLVERS = [branch_and_bound_bfs, branch_and_bound_dfs, branch_and_bound_best_first]


def _exhaustive_best(matrix):
    n = len(matrix)
    best = None
    for order in itertools.permutations(range(1, n)):
        tour = (0, *order, 0)
        legs = [matrix.cost(a, b) for a, b in zip(tour, tour[1:])]
        if -1 in legs:
            continue
        total = sum(legs)
        if best is None or total < best:
            best = total
    return best


def _tour_cost(matrix, path):
    return sum(matrix.cost(a, b) for a, b in zip(path, path[1:]))


def _classic_symmetric():
    matrix = SymmetricCostMatrix(4)
    for i in range(4):
        matrix.set_cost(i, i, -1)
    for (a, b), value in {
        (0, 1): 10, (0, 2): 15, (0, 3): 20,
        (1, 2): 35, (1, 3): 25, (2, 3): 30,
    }.items():
        matrix.set_cost(a, b, value)
    return matrix


@pytest.mark.parametrize("solver", SOLVERS)
def test_classic_symmetric_instance(solver):
    matrix = _classic_symmetric()
    result = solver(matrix)
    assert result.cost == 80
    assert _tour_cost(matrix, result.path) == result.cost


@pytest.mark.parametrize("strategy", list(Strategy))
@pytest.mark.parametrize("seed", range(6))
def test_matches_exhaustive_search_asymmetric(strategy, seed):
    matrix = CostMatrix.random(6, random.Random(seed))
    result = solve(matrix, strategy)
    assert result.cost == _exhaustive_best(matrix)


@pytest.mark.parametrize("strategy", list(Strategy))
@pytest.mark.parametrize("seed", range(6))
def test_matches_exhaustive_search_symmetric(strategy, seed):
    matrix = SymmetricCostMatrix.random(6, random.Random(seed))
    result = solve(matrix, strategy)
    assert result.cost == _exhaustive_best(matrix)


@pytest.mark.parametrize("solver", SOLVERS)
def test_path_is_closed_permutation(solver):
    matrix = CostMatrix.random(7, random.Random(42))
    result = solver(matrix)
    assert result.path[0] == 0 and result.path[-1] == 0
    assert sorted(result.path[:-1]) == list(range(7))
    assert _tour_cost(matrix, result.path) == result.cost


def test_strategies_agree_on_cost():
    matrix = CostMatrix.random(7, random.Random(7))
    costs = {solver(matrix).cost for solver in SOLVERS}
    assert len(costs) == 1


def test_strategy_accepts_config_names():
    matrix = _classic_symmetric()
    assert solve(matrix, "branch_and_bound_dfs") == solve(matrix, Strategy.DFS)
    with pytest.raises(ValueError):
        solve(matrix, "nearest_neighbour")


def test_empty_matrix_rejected():
    with pytest.raises(ValueError):
        solve(CostMatrix(0), Strategy.BFS)


@pytest.mark.parametrize("solver", SOLVERS)
def test_no_tour_when_edges_missing(solver):
    matrix = CostMatrix.random(3, random.Random(1))
    for j in range(3):
        matrix.set_cost(2, j, -1)
    result = solver(matrix)
    assert result == TourResult(None, ())
    assert not result.found


def test_single_city_with_zero_self_cost():
    matrix = CostMatrix(1)
    result = branch_and_bound_bfs(matrix)
    assert result == TourResult(0, (0, 0))


def test_single_city_without_self_loop_has_no_tour():
    matrix = CostMatrix.random(1, random.Random(3))
    assert branch_and_bound_best_first(matrix).found is False


def test_lower_bound_all_visited_is_current_cost():
    matrix = CostMatrix.random(4, random.Random(5))
    assert lower_bound(matrix, {0, 1, 2, 3}, 17) == 17


def test_lower_bound_adds_cheapest_outgoing_edges():
    matrix = CostMatrix(3)
    rows = [[-1, 4, 9], [6, -1, 2], [3, 8, -1]]
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            matrix.set_cost(i, j, value)
    assert lower_bound(matrix, {0}, 5) == 5 + 2 + 3


def test_lower_bound_infinite_for_isolated_city():
    matrix = CostMatrix(3)
    for j in range(3):
        matrix.set_cost(1, j, -1)
    assert lower_bound(matrix, {0}, 0) == math.inf