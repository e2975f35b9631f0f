"""
Array-backed binary min-heap used by the top-k selector.
"""

from typing import Any, List


class ArrayHeap:
    """
    Binary min-heap stored in a flat list.

    Children of the node at index i live at 2i + 1 and 2i + 2. Elements only
    need to support `<`.
    """

    def __init__(self):
        self._heap: List[Any] = []

    def __len__(self) -> int:
        return len(self._heap)

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def peek_min(self) -> Any:
        """
        Return the smallest element without removing it.

        Raises:
            IndexError: If the heap is empty
        """
        if not self._heap:
            raise IndexError("peek_min from an empty heap")
        return self._heap[0]

    def insert(self, item: Any) -> None:
        """
        Add an element to the heap in O(log n).

        Raises:
            ValueError: If item is None
        """
        if item is None:
            raise ValueError("Cannot insert None into a heap")
        self._heap.append(item)
        self._percolate_up(len(self._heap) - 1)

    def remove_min(self) -> Any:
        """
        Remove and return the smallest element in O(log n).

        Raises:
            IndexError: If the heap is empty
        """
        if not self._heap:
            raise IndexError("remove_min from an empty heap")
        smallest = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._percolate_down(0)
        return smallest

    def _percolate_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index] < heap[parent]:
                heap[index], heap[parent] = heap[parent], heap[index]
                index = parent
            else:
                break

    def _percolate_down(self, index: int) -> None:
        heap = self._heap
        n = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < n and heap[left] < heap[smallest]:
                smallest = left
            if right < n and heap[right] < heap[smallest]:
                smallest = right
            if smallest == index:
                break
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest
