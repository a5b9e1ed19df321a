"""Small higher-order helpers over sequences."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, TypeVar

A = TypeVar("A")
B = TypeVar("B")


def reduce(collection: Iterable[B], fn: Callable[[A, B], A], initial: A) -> A:
    """Fold ``collection`` into one value, starting from ``initial``."""
    result = initial
    for item in collection:
        result = fn(result, item)
    return result


def find(collection: Iterable[A], predicate: Callable[[A], bool]) -> Optional[A]:
    """Return the first item satisfying ``predicate``, or None."""
    return next((item for item in collection if predicate(item)), None)


def mapped(collection: Iterable[A], fn: Callable[[A], B]) -> List[B]:
    """Return a list of ``fn`` applied to every item."""
    return [fn(item) for item in collection]