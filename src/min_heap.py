"""Fixed-capacity minimum priority queue backed by a binary heap.

Elements live in slots 1..size of a list allocated once at construction;
slot 0 is an unused sentinel so that the parent of k is k // 2 and its
children are 2k and 2k + 1. Insert and extract_min are O(log n), peek_min
is O(1). The heap never grows: inserting into a full heap is an error.
"""

from typing import Any, Generic, Iterable, Iterator, List, Optional, Protocol, TypeVar


class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=Comparable)


class HeapError(Exception):
    """Base class for heap errors."""


class HeapCapacityError(HeapError, IndexError):
    """Raised when inserting into a full heap."""


class HeapUnderflowError(HeapError, IndexError):
    """Raised when reading or removing from an empty heap."""


class BinaryMinHeap(Generic[T]):
    def __init__(self, capacity: int, clear_on_remove: bool = True) -> None:
        """
        Args:
            capacity: Maximum number of elements, fixed for the heap's lifetime
            clear_on_remove: Reset vacated slots to None so removed elements
                are not kept alive by the backing list
        """
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
            raise ValueError("capacity must be a non-negative integer")
        self._capacity = capacity
        self._clear_on_remove = clear_on_remove
        self._items: List[Optional[T]] = [None] * (capacity + 1)
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def insert(self, item: T) -> None:
        """Place item in the last slot and swim it up, O(log n)."""
        if self.is_full():
            raise HeapCapacityError("insert into full heap")
        self._size += 1
        self._items[self._size] = item
        self._swim(self._size)

    def peek_min(self) -> T:
        if self._size == 0:
            raise HeapUnderflowError("peek_min from empty heap")
        return self._items[1]

    def extract_min(self) -> T:
        """Remove and return the smallest element, O(log n).

        The last element replaces the root and sinks until both of its
        children are no smaller than it.
        """
        if self._size == 0:
            raise HeapUnderflowError("extract_min from empty heap")
        root = self._items[1]
        self._items[1] = self._items[self._size]
        if self._clear_on_remove:
            self._items[self._size] = None
        self._size -= 1
        self._sink(1)
        return root

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def clear(self) -> None:
        if self._clear_on_remove:
            for i in range(1, self._size + 1):
                self._items[i] = None
        self._size = 0

    def copy(self) -> 'BinaryMinHeap[T]':
        clone: BinaryMinHeap[T] = BinaryMinHeap(self._capacity, self._clear_on_remove)
        clone._items = self._items.copy()
        clone._size = self._size
        return clone

    @classmethod
    def from_iterable(cls, values: Iterable[T], capacity: Optional[int] = None) -> 'BinaryMinHeap[T]':
        """Build a heap by inserting each value in turn.

        Note: capacity defaults to the number of values, so the result is full.
        """
        values = list(values)
        heap: BinaryMinHeap[T] = cls(len(values) if capacity is None else capacity)
        for value in values:
            heap.insert(value)
        return heap

    def render(self) -> str:
        """Dump every backing slot, sentinel included; empty slots show as '-'."""
        return ", ".join(
            "-" if i == 0 or i > self._size else str(item)
            for i, item in enumerate(self._items)
        )

    def _swim(self, k: int) -> None:
        while k > 1 and self._greater(k // 2, k):
            self._swap(k // 2, k)
            k = k // 2

    def _sink(self, k: int) -> None:
        while 2 * k <= self._size:
            j = 2 * k
            # ties stay with the left child
            if j < self._size and self._greater(j, j + 1):
                j += 1
            if not self._greater(k, j):
                break
            self._swap(k, j)
            k = j

    def _greater(self, x: int, y: int) -> bool:
        return self._items[y] < self._items[x]

    def _swap(self, x: int, y: int) -> None:
        self._items[x], self._items[y] = self._items[y], self._items[x]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"BinaryMinHeap(capacity={self._capacity}, size={self._size})"

    def __str__(self) -> str:
        return self.render()

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.extract_min()
