"""Insertion-ordered string dictionary for backend-specific variables.

Entries are kept newest first: every insert goes to the front, and that is
the order both iteration styles walk. Two ways to iterate are offered:

- the shared cursor (first()/next()), one position per dictionary
- iterate(), which returns an independent DictionaryIterator per traversal

Any delete or clear resets the shared cursor and ends every outstanding
DictionaryIterator, whichever key was removed.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from ..core.exceptions import InvalidArgumentError, OutOfMemoryError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Entry:
    """A single key with an optional value."""

    key: str
    value: str | None = None

    def as_pair(self) -> tuple[str, str | None]:
        return self.key, self.value


class DictionaryIterator:
    """Independent traversal over a VariableDictionary.

    Yields entries newest first. Once the dictionary has entries deleted or
    cleared, the iterator is exhausted. Inserting while iterating is undefined.
    """

    def __init__(self, dictionary: "VariableDictionary"):
        self._dictionary = dictionary
        self._generation = dictionary._generation
        self._index = 0

    def __iter__(self) -> "DictionaryIterator":
        return self

    def __next__(self) -> Entry:
        entries = self._dictionary._entries
        if self._generation != self._dictionary._generation or self._index >= len(entries):
            raise StopIteration
        entry = entries[self._index]
        self._index += 1
        return entry

    @property
    def valid(self) -> bool:
        """False once a delete or clear has invalidated this traversal."""
        return self._generation == self._dictionary._generation


class VariableDictionary:
    """Caller-driven mapping of string keys to optional string values."""

    def __init__(self) -> None:
        self._entries: list[Entry] = []
        self._cursor: int | None = None
        # Bumped by delete/clear to invalidate DictionaryIterators
        self._generation = 0

    def insert(self, key: str, value: str | None = None) -> Entry:
        """Prepend a new entry without checking for an existing key.

        Raises:
            InvalidArgumentError: key is None.
            OutOfMemoryError: the entry could not be allocated. The
                dictionary is left unchanged.
        """
        if key is None:
            raise InvalidArgumentError("key")

        try:
            entry = Entry(key=key, value=value)
            self._entries.insert(0, entry)
        except MemoryError as e:
            raise OutOfMemoryError(f"insert of '{key}'", str(e) or None) from e

        logger.debug("Inserted dictionary entry '%s' => '%s'", key, value)
        return entry

    def find(self, key: str) -> Entry | None:
        """Return the first entry matching key in iteration order."""
        if key is None:
            return None
        for entry in self._entries:
            if entry.key == key:
                return entry
        return None

    def upsert(self, key: str, value: str | None = None) -> Entry:
        """Update the value of an existing key in place, or insert it.

        The updated entry keeps its identity and position. A value of None
        clears the stored value but keeps the key.
        """
        entry = self.find(key)
        if entry is None:
            return self.insert(key, value)

        entry.value = value
        logger.debug("Updated dictionary entry '%s' => '%s'", key, value)
        return entry

    def delete(self, key: str) -> bool:
        """Remove the first entry matching key.

        The shared cursor is reset and outstanding iterators end even when
        nothing matched.

        Returns:
            True if an entry was removed.
        """
        self._invalidate()
        for index, entry in enumerate(self._entries):
            if entry.key == key:
                del self._entries[index]
                logger.debug("Deleted dictionary entry '%s'", key)
                return True
        return False

    def clear(self) -> None:
        """Remove every entry."""
        count = len(self._entries)
        self._entries.clear()
        self._invalidate()
        logger.debug("Cleared %d dictionary entries", count)

    def first(self) -> Entry | None:
        """Move the shared cursor to the first entry and return it."""
        self._cursor = 0 if self._entries else None
        return self._current()

    def next(self) -> Entry | None:
        """Advance the shared cursor and return the entry it lands on.

        Returns None at the end of the sequence. Calling next() with no
        cursor set is a no-op.
        """
        if self._cursor is None:
            return None
        self._cursor += 1
        if self._cursor >= len(self._entries):
            self._cursor = None
        return self._current()

    def iterate(self) -> DictionaryIterator:
        """Start an independent traversal with its own position."""
        return DictionaryIterator(self)

    def items(self) -> list[tuple[str, str | None]]:
        """Snapshot of (key, value) pairs in iteration order."""
        return [entry.as_pair() for entry in self._entries]

    def _current(self) -> Entry | None:
        if self._cursor is None:
            return None
        return self._entries[self._cursor]

    def _invalidate(self) -> None:
        self._cursor = None
        self._generation += 1

    def __iter__(self) -> Iterator[Entry]:
        return self.iterate()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return any(entry.key == key for entry in self._entries)

    def __repr__(self) -> str:
        return f"VariableDictionary({self.items()!r})"
