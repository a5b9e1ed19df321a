import queue
import threading
from dataclasses import dataclass

import pytest

from tddkata.walk import walk


@dataclass
class Profile:
    age: int
    city: str


@dataclass
class Person:
    name: str
    profile: Profile


@dataclass
class OnlyName:
    name: str


@dataclass
class NameAndAge:
    name: str
    age: int


def collect(value):
    got = []
    walk(value, got.append)
    return got


@pytest.mark.parametrize(
    "value,expected",
    [
        (OnlyName("Chris"), ["Chris"]),
        (NameAndAge("Chris", 33), ["Chris"]),
        (Person("Chris", Profile(33, "London")), ["Chris", "London"]),
        ([Profile(33, "London"), Profile(34, "Dhaka")], ["London", "Dhaka"]),
        ((Profile(33, "London"), Profile(34, "Dhaka")), ["London", "Dhaka"]),
    ],
    ids=["one string field", "non-string field", "nested", "lists", "tuples"],
)
def test_walk(value, expected):
    assert collect(value) == expected


def test_walk_map():
    got = collect({"Cow": "Moo", "Sheep": "Baa"})
    assert sorted(got) == ["Baa", "Moo"]


def test_walk_channel_like_iterator():
    channel = queue.Queue()
    done = object()

    def produce():
        channel.put(Profile(33, "Berlin"))
        channel.put(Profile(34, "Tokyo"))
        channel.put(done)

    threading.Thread(target=produce).start()
    assert collect(iter(channel.get, done)) == ["Berlin", "Tokyo"]


def test_walk_generator():
    profiles = (p for p in (Profile(33, "Berlin"), Profile(34, "Tokyo")))
    assert collect(profiles) == ["Berlin", "Tokyo"]


def test_walk_function():
    def a_function():
        return Profile(33, "Berlin"), Profile(34, "Paris")

    assert collect(a_function) == ["Berlin", "Paris"]


def test_walk_ignores_non_strings():
    assert collect([1, 2.5, None, b"bytes"]) == []


def test_walk_plain_string():
    assert collect("hello") == ["hello"]