import pytest

from tddkata.dictionary import (
    Dictionary,
    DictionaryError,
    WordDoesNotExistError,
    WordExistsError,
    WordNotFoundError,
)


def test_search_known_word():
    dictionary = Dictionary({"test": "this is just a test"})
    assert dictionary.search("test") == "this is just a test"


def test_search_unknown_word():
    dictionary = Dictionary({"test": "this is just a test"})
    with pytest.raises(WordNotFoundError):
        dictionary.search("unknown")


def test_add_record():
    dictionary = Dictionary()
    dictionary.add("test", "this is just a test")
    assert dictionary.search("test") == "this is just a test"


def test_add_existing_word():
    dictionary = Dictionary({"test": "this is just a test"})
    with pytest.raises(WordExistsError):
        dictionary.add("test", "something else")
    assert dictionary.search("test") == "this is just a test"


def test_update_existing_word():
    dictionary = Dictionary({"test": "this is just a test"})
    dictionary.update("test", "new definition")
    assert dictionary.search("test") == "new definition"


def test_update_non_existing_word():
    dictionary = Dictionary()
    with pytest.raises(WordDoesNotExistError):
        dictionary.update("test", "new definition")
    assert "test" not in dictionary


def test_delete_existing_word():
    dictionary = Dictionary({"test": "test definition"})
    dictionary.delete("test")
    with pytest.raises(WordNotFoundError):
        dictionary.search("test")


def test_delete_non_existing_word():
    dictionary = Dictionary()
    with pytest.raises(WordDoesNotExistError):
        dictionary.delete("test")


def test_errors_share_a_base():
    dictionary = Dictionary()
    with pytest.raises(DictionaryError):
        dictionary.search("missing")


def test_initial_entries_are_copied():
    entries = {"a": "1"}
    dictionary = Dictionary(entries)
    dictionary.add("b", "2")
    assert entries == {"a": "1"}
    assert len(dictionary) == 2