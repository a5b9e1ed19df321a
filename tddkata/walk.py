"""Visit every string reachable inside a value."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping
from typing import Any, Callable


def walk(value: Any, fn: Callable[[str], None]) -> None:
    """Call ``fn`` on each string found in ``value``.

    Dataclass fields are visited in order, sequences item by item, mappings
    by value, iterators until exhausted, and callables are invoked with no
    arguments and their result walked. Other values are ignored.
    """
    if isinstance(value, str):
        fn(value)
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        for field in dataclasses.fields(value):
            walk(getattr(value, field.name), fn)
    elif isinstance(value, (list, tuple)):
        for item in value:
            walk(item, fn)
    elif isinstance(value, Mapping):
        for item in value.values():
            walk(item, fn)
    elif isinstance(value, Iterator):
        for item in value:
            walk(item, fn)
    elif callable(value) and not isinstance(value, type):
        walk(value(), fn)