import itertools
import math
import random

import pytest

from tspbb.permutations import factorial, next_permutation, shuffle


@pytest.mark.parametrize("n", range(0, 10))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_below_zero_is_one():
    assert factorial(-3) == 1


def test_shuffle_keeps_elements():
    cities = list(range(20))
    shuffle(cities, random.Random(1))
    assert sorted(cities) == list(range(20))


def test_shuffle_reproducible():
    first = list(range(10))
    second = list(range(10))
    shuffle(first, random.Random(9))
    shuffle(second, random.Random(9))
    assert first == second


def test_shuffle_empty():
    cities = []
    shuffle(cities, random.Random(0))
    assert cities == []


def test_next_permutation_walks_lexicographic_order():
    nums = [1, 2, 3, 4]
    seen = [tuple(nums)]
    while next_permutation(nums):
        seen.append(tuple(nums))
    assert seen == list(itertools.permutations([1, 2, 3, 4]))
    assert nums == [1, 2, 3, 4]


def test_next_permutation_last_wraps():
    nums = [3, 2, 1]
    assert next_permutation(nums) is False
    assert nums == [1, 2, 3]


def test_next_permutation_with_duplicates():
    nums = [1, 1, 2]
    results = [tuple(nums)]
    while next_permutation(nums):
        results.append(tuple(nums))
    assert results == sorted(set(itertools.permutations([1, 1, 2])))


def test_next_permutation_trivial():
    nums = [7]
    assert next_permutation(nums) is False
    assert nums == [7]