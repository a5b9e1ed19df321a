"""A word dictionary with explicit add, update and delete operations."""

from __future__ import annotations

from typing import Iterator, Mapping, Optional


class DictionaryError(LookupError):
    """Base error for dictionary operations."""


class WordNotFoundError(DictionaryError):
    def __init__(self, message: str = "could not find the word you were looking for") -> None:
        super().__init__(message)


class WordExistsError(DictionaryError):
    def __init__(self, message: str = "cannot add word because it already exists") -> None:
        super().__init__(message)


class WordDoesNotExistError(DictionaryError):
    def __init__(
        self,
        message: str = "cannot perform operation on word because it does not exist",
    ) -> None:
        super().__init__(message)


class Dictionary:
    """Maps words to their definitions."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})

    def search(self, word: str) -> str:
        """Return the definition of ``word``; raise WordNotFoundError if absent."""
        try:
            return self._entries[word]
        except KeyError:
            raise WordNotFoundError() from None

    def add(self, word: str, definition: str) -> None:
        """Add a new word; raise WordExistsError if it is already present."""
        if word in self._entries:
            raise WordExistsError()
        self._entries[word] = definition

    def update(self, word: str, definition: str) -> None:
        """Replace a definition; raise WordDoesNotExistError if absent."""
        if word not in self._entries:
            raise WordDoesNotExistError()
        self._entries[word] = definition

    def delete(self, word: str) -> None:
        """Remove a word; raise WordDoesNotExistError if absent."""
        if word not in self._entries:
            raise WordDoesNotExistError()
        del self._entries[word]

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)