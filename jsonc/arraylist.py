"""A growable array of slots with an element release callback."""

from collections.abc import Callable, Iterator
from typing import Any, Optional

DEFAULT_SIZE = 32


class ArrayList:
    """Sequence of slots; empty slots hold None and are skipped on release.

    Every element that is overwritten, deleted or left when the list is
    freed is passed to ``free_fn``.
    """

    def __init__(self, free_fn: Optional[Callable[[Any], None]] = None,
                 initial_size: int = DEFAULT_SIZE):
        if initial_size < 0:
            raise ValueError("initial_size must not be negative")
        self._free_fn = free_fn
        self._items: list = []
        self._size = initial_size

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._size

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def _release(self, value: Any) -> None:
        if value is not None and self._free_fn is not None:
            self._free_fn(value)

    def _expand(self, needed: int) -> None:
        if needed < self._size:
            return
        self._size = max(self._size * 2, needed)

    def get(self, index: int) -> Any:
        """Return the element at index, or None when it is out of range."""
        if index < 0 or index >= len(self._items):
            return None
        return self._items[index]

    def put(self, index: int, value: Any) -> None:
        """Store value at index, releasing any previous element and padding gaps with None."""
        if index < 0:
            raise IndexError("index must not be negative")
        self._expand(index + 1)
        length = len(self._items)
        if index < length:
            self._release(self._items[index])
            self._items[index] = value
        else:
            self._items.extend([None] * (index - length))
            self._items.append(value)

    def append(self, value: Any) -> None:
        """Add value at the end."""
        self._expand(len(self._items) + 1)
        self._items.append(value)

    def sort(self, key: Optional[Callable[[Any], Any]] = None) -> None:
        """Sort the elements in place using a key function."""
        self._items.sort(key=key)

    def bsearch(self, key: Any, compare: Callable[[Any, Any], int]) -> Any:
        """Binary search a sorted list; compare(key, element) returns <0, 0 or >0.

        Returns the matching element, or None if nothing matches.
        """
        lo, hi = 0, len(self._items)
        while lo < hi:
            mid = (lo + hi) // 2
            element = self._items[mid]
            result = compare(key, element)
            if result == 0:
                return element
            if result < 0:
                hi = mid
            else:
                lo = mid + 1
        return None

    def delete(self, index: int, count: int = 1) -> None:
        """Remove count elements starting at index, releasing each one."""
        if index < 0 or count < 0:
            raise IndexError("index and count must not be negative")
        stop = index + count
        length = len(self._items)
        if index >= length or stop > length:
            raise IndexError("range out of bounds")
        for value in self._items[index:stop]:
            self._release(value)
        del self._items[index:stop]

    def shrink(self, empty_slots: int = 0) -> None:
        """Reserve exactly len(self) + empty_slots slots (at least one)."""
        if empty_slots < 0:
            raise ValueError("empty_slots must not be negative")
        new_size = len(self._items) + empty_slots
        if new_size == self._size:
            return
        if new_size > self._size:
            self._expand(new_size)
            return
        self._size = max(new_size, 1)

    def free(self) -> None:
        """Release every element and empty the list."""
        items, self._items = self._items, []
        for value in items:
            self._release(value)