"""Small combinatorial helpers."""

from __future__ import annotations

import math
import random
from collections.abc import MutableSequence


def factorial(n: int) -> int:
    """Return n!, treating every n below 2 as 1."""
    return math.prod(range(2, n + 1))


def shuffle(cities: MutableSequence[int], rng: random.Random | None = None) -> None:
    """Shuffle cities in place with a Fisher-Yates pass."""
    rng = rng or random.Random()
    n = len(cities)
    for i in range(n):
        j = i + rng.randrange(n - i)
        cities[i], cities[j] = cities[j], cities[i]


def next_permutation(nums: MutableSequence[int]) -> bool:
    """Rearrange nums into the next lexicographic permutation.

    Returns False and leaves nums sorted ascending when nums was the last one.
    """
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]), None
    )
    if pivot is None:
        nums[:] = nums[::-1]
        return False
    successor = next(
        j for j in range(len(nums) - 1, pivot, -1) if nums[j] > nums[pivot]
    )
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1:] = nums[pivot + 1:][::-1]
    return True