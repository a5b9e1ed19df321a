"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, List, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A LIFO stack of values."""

    def __init__(self) -> None:
        self._values: List[T] = []

    def push(self, value: T) -> None:
        self._values.append(value)

    def pop(self) -> T:
        """Remove and return the top value; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("pop from empty stack")
        return self._values.pop()

    def is_empty(self) -> bool:
        return not self._values

    def __len__(self) -> int:
        return len(self._values)