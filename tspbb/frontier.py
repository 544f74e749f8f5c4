"""Search frontiers used by the branch-and-bound solvers."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class Node:
    """A partial tour in the search tree."""

    path: tuple[int, ...]
    cost: int
    bound: int
    current_city: int

    def __lt__(self, other: Node) -> bool:
        return self.bound < other.bound


class FifoFrontier:
    """First-in first-out frontier (breadth-first search)."""

    def __init__(self) -> None:
        self._items: deque[Node] = deque()

    def push(self, node: Node) -> None:
        self._items.append(node)

    def pop(self) -> Node:
        if not self._items:
            raise IndexError("Queue is empty")
        return self._items.popleft()

    def front(self) -> Node:
        if not self._items:
            raise IndexError("Queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


class LifoFrontier:
    """Last-in first-out frontier (depth-first search)."""

    def __init__(self) -> None:
        self._items: list[Node] = []

    def push(self, node: Node) -> None:
        self._items.append(node)

    def pop(self) -> Node:
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class BestFirstFrontier:
    """Binary min-heap on the node bound (best-first search)."""

    def __init__(self) -> None:
        self._heap: list[Node] = []

    def push(self, node: Node) -> None:
        heap = self._heap
        heap.append(node)
        index = len(heap) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not heap[index] < heap[parent]:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def pop(self) -> Node:
        heap = self._heap
        if not heap:
            raise IndexError("Priority queue is empty")
        top = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            self._sift_down(0)
        return top

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child] < heap[smallest]:
                    smallest = child
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest

    def __len__(self) -> int:
        return len(self._heap)