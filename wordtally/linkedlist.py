"""A double-ended list whose ordering is driven by a three-way comparator."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


def _merge(a: list[T], b: list[T], cmpfn: Callable[[T, T], int]) -> list[T]:
    # On ties the item from the second run goes first.
    merged: list[T] = []
    ia = ib = 0
    while ia < len(a) and ib < len(b):
        if cmpfn(a[ia], b[ib]) < 0:
            merged.append(a[ia])
            ia += 1
        else:
            merged.append(b[ib])
            ib += 1
    merged.extend(a[ia:])
    merged.extend(b[ib:])
    return merged


def _mergesort(items: list[T], cmpfn: Callable[[T, T], int]) -> list[T]:
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(_mergesort(items[:mid], cmpfn), _mergesort(items[mid:], cmpfn), cmpfn)


class LinkedList(Generic[T]):
    """Ordered collection with cheap insertion and removal at both ends."""

    def __init__(self, cmpfn: Callable[[T, T], int]) -> None:
        self._items: deque[T] = deque()
        self.cmpfn = cmpfn

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        yield from self._items

    def __contains__(self, item: Any) -> bool:
        return any(self.cmpfn(existing, item) == 0 for existing in self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def add_first(self, item: T) -> None:
        """Insert an item at the start."""
        self._items.appendleft(item)

    def add_last(self, item: T) -> None:
        """Append an item at the end."""
        self._items.append(item)

    def pop_first(self) -> T:
        """Remove and return the first item; IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty list")
        return self._items.popleft()

    def pop_last(self) -> T:
        """Remove and return the last item; IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty list")
        return self._items.pop()

    def sort(self) -> None:
        """Sort in place with merge sort using the list's comparator."""
        self._items = deque(_mergesort(list(self._items), self.cmpfn))