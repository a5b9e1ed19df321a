from dataclasses import dataclass

from tddkata.functional import find, mapped, reduce


def test_reduce_multiplication():
    assert reduce([1, 2, 3], lambda x, y: x * y, 1) == 6


def test_reduce_concatenate_strings():
    assert reduce(["a", "b", "c"], lambda x, y: x + y, "") == "abc"


def test_reduce_sum():
    assert reduce([1, 2, 3], lambda x, y: x + y, 0) == 6


def test_reduce_empty_returns_initial():
    assert reduce([], lambda x, y: x + y, 42) == 42


def test_find_first_even_number():
    numbers = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert find(numbers, lambda x: x % 2 == 0) == 2


@dataclass(frozen=True)
class Person:
    name: str


def test_find_the_best_programmer():
    people = [Person("Kent Beck"), Person("Martin Fowler"), Person("Chris James")]
    assert find(people, lambda p: "Chris" in p.name) == Person("Chris James")


def test_find_nothing_returns_none():
    assert find([1, 3, 5], lambda x: x % 2 == 0) is None


def test_map_add_two():
    numbers = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert mapped(numbers, lambda x: x + 2) == [3, 4, 5, 6, 7, 8, 9, 10, 11, 12]


def test_map_strings():
    names = ["Anna", "Amiyo", "Ankita"]
    assert mapped(names, lambda x: "Hello, " + x) == [
        "Hello, Anna",
        "Hello, Amiyo",
        "Hello, Ankita",
    ]


def test_map_int_to_string():
    assert mapped([1, 2, 3], lambda x: f"Number: {x}") == [
        "Number: 1",
        "Number: 2",
        "Number: 3",
    ]