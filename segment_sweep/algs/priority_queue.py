"""Binary min-heap over a caller-supplied comparator with O(log n) cancellation."""

from __future__ import annotations

from typing import Callable, Dict, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], float]


def natural_order(a, b) -> int:
    return (a > b) - (a < b)


class PriorityQueue(Generic[T]):
    """Min-heap keyed by ``compare(a, b)`` (negative when ``a`` comes first).

    Elements are tracked by identity: the heap keeps a position map from
    ``id(element)`` to its slot so a specific previously enqueued element can be
    removed without scanning.  The same object must not be enqueued twice.
    """

    def __init__(self, compare: Optional[Comparator] = None) -> None:
        self._heap: List[T] = []
        self._pos: Dict[int, int] = {}
        self._compare: Comparator = compare if compare is not None else natural_order

    # ------------------------------------------------------------------ index helpers
    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    def _less(self, i: int, j: int) -> bool:
        return self._compare(self._heap[i], self._heap[j]) < 0

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._pos[id(heap[i])] = i
        self._pos[id(heap[j])] = j

    def _sift_up(self, index: int) -> int:
        while index > 0:
            parent = self._parent(index)
            if not self._less(index, parent):
                break
            self._swap(index, parent)
            index = parent
        return index

    def _sift_down(self, index: int) -> int:
        size = len(self._heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and self._less(left, smallest):
                smallest = left
            if right < size and self._less(right, smallest):
                smallest = right
            if smallest == index:
                return index
            self._swap(index, smallest)
            index = smallest

    # ------------------------------------------------------------------ public API
    def size(self) -> int:
        return len(self._heap)

    __len__ = size

    def is_empty(self) -> bool:
        return not self._heap

    def __contains__(self, element: object) -> bool:
        return id(element) in self._pos

    def list(self) -> Tuple[T, ...]:
        """Read-only snapshot of the backing array in heap order."""
        return tuple(self._heap)

    def enqueue(self, element: T) -> None:
        if id(element) in self._pos:
            raise ValueError("element is already enqueued")
        self._heap.append(element)
        self._pos[id(element)] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def peek(self) -> Optional[T]:
        return self._heap[0] if self._heap else None

    def dequeue(self) -> Optional[T]:
        if not self._heap:
            return None
        top = self._heap[0]
        last = self._heap.pop()
        del self._pos[id(top)]
        if self._heap:
            self._heap[0] = last
            self._pos[id(last)] = 0
            self._sift_down(0)
        return top

    def remove(self, element: T) -> bool:
        """Remove ``element`` (by identity).  Absent elements are a no-op."""
        index = self._pos.get(id(element))
        if index is None:
            return False
        last_index = len(self._heap) - 1
        if index != last_index:
            self._swap(index, last_index)
        self._heap.pop()
        del self._pos[id(element)]
        if index < len(self._heap):
            # the moved element may violate the heap property in either direction
            self._sift_down(self._sift_up(index))
        return True

    def clear(self) -> None:
        self._heap.clear()
        self._pos.clear()


__all__ = ["PriorityQueue", "Comparator", "natural_order"]
