"""Sums over lists of integers."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .functional import reduce


def sum_of(numbers: Iterable[int]) -> int:
    """Return the sum of ``numbers``."""
    return reduce(numbers, lambda acc, x: acc + x, 0)


def sum_all(*args: Sequence[int]) -> List[int]:
    """Return the sum of each given sequence."""
    return [sum_of(numbers) for numbers in args]


def sum_all_tails(*args: Sequence[int]) -> List[int]:
    """Return the sum of each sequence without its first element; empty gives 0."""
    return [sum_of(numbers[1:]) for numbers in args]