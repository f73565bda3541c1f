"""A set whose membership is decided by a caller-supplied equality predicate."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Equals = Callable[[Any, Any], bool]


class Set(Generic[T]):
    """An unordered collection without duplicates.

    Two values are duplicates when ``equals(a, b)`` is true. New values are
    placed in front of the existing ones, so iteration yields the most
    recently added value first.
    """

    def __init__(self, iterable: Iterable[T] = (), equals: Equals = operator.eq) -> None:
        self._equals = equals
        self._items: deque[T] = deque()
        for value in iterable:
            self.add(value)

    @property
    def equals(self) -> Equals:
        """The equality predicate used by this set."""
        return self._equals

    def add(self, value: T) -> None:
        """Put ``value`` in front of the set unless an equal value is present."""
        if not self.find(value):
            self._items.appendleft(value)

    def remove(self, value: T) -> None:
        """Remove the value equal to ``value``; do nothing if there is none."""
        for position, item in enumerate(self._items):
            if self._equals(value, item):
                del self._items[position]
                return

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def find(self, value: T) -> bool:
        """Return whether a value equal to ``value`` is in the set."""
        return any(self._equals(value, item) for item in self._items)

    def __contains__(self, value: object) -> bool:
        return self.find(value)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        """Return the value at the 1-based position ``index`` in iteration order."""
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("Set indices must be integers")
        if not 1 <= index <= len(self._items):
            raise IndexError("Range is not valid.")
        return self._items[index - 1]

    def __eq__(self, other: object) -> bool:
        """Sets are equal when they hold the same values, in any order."""
        if not isinstance(other, Set):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(self.find(value) for value in other)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __add__(self, other: Set[T]) -> Set[T]:
        """Return the union of both sets."""
        if not isinstance(other, Set):
            return NotImplemented
        result = Set(self, self._equals)
        for value in other:
            result.add(value)
        return result

    def __sub__(self, other: Set[T]) -> Set[T]:
        """Return the values common to both sets."""
        if not isinstance(other, Set):
            return NotImplemented
        result: Set[T] = Set(equals=self._equals)
        for value in self:
            if other.find(value):
                result.add(value)
        for value in other:
            if self.find(value):
                result.add(value)
        return result

    def __str__(self) -> str:
        return "[" + "".join(f" {value} " for value in self._items) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


def filter_out(source: Set[T], predicate: Callable[[T], bool]) -> Set[T]:
    """Return a new set holding the values of ``source`` that satisfy ``predicate``."""
    result: Set[T] = Set(equals=source.equals)
    for value in source:
        if predicate(value):
            result.add(value)
    return result