"""Ordered hosts document store.

This module owns the entry sequence for one hosts file. The logical
length of the underlying list is the only bound any consumer iterates to.
"""

from __future__ import annotations

from typing import Callable, Iterator

from core.types import Entry, MappingEntry, PassthroughEntry, unhandled_entry


class HostsDocument:
    """Growable, order-preserving sequence of entries."""

    def __init__(self, entries: list[Entry] | None = None) -> None:
        self._entries: list[Entry] = list(entries or [])

    def append(self, entry: Entry) -> None:
        """Append an entry after every existing entry."""
        self._entries.append(entry)

    def length(self) -> int:
        """Return the number of entries in the document."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(tuple(self._entries))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HostsDocument):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"HostsDocument(entries={self._entries!r})"

    def entry_at(self, index: int) -> Entry:
        """Return the entry at a logical position.

        Args:
            index: Zero-based position, ``0 <= index < len(document)``.

        Returns:
            Entry stored at that position.

        Raises:
            IndexError: If the position is outside the document.
        """
        if not 0 <= index < len(self._entries):
            raise IndexError(
                f"Entry index {index} out of range for document of {len(self._entries)} entries."
            )
        return self._entries[index]

    def entries(self) -> tuple[Entry, ...]:
        """Return a snapshot of all entries in order."""
        return tuple(self._entries)

    def mappings(self) -> Iterator[tuple[int, MappingEntry]]:
        """Yield ``(position, mapping)`` pairs in document order."""
        for index, entry in enumerate(self.entries()):
            if isinstance(entry, MappingEntry):
                yield index, entry
            elif isinstance(entry, PassthroughEntry):
                continue
            else:
                unhandled_entry(entry)

    def replace_at(self, index: int, entry: Entry) -> None:
        """Replace the entry at a logical position in place.

        Raises:
            IndexError: If the position is outside the document.
        """
        self.entry_at(index)
        self._entries[index] = entry

    def remove_where(self, predicate: Callable[[Entry], bool]) -> int:
        """Delete every entry matching ``predicate``.

        Args:
            predicate: Selector evaluated once per entry.

        Returns:
            Number of entries removed.
        """
        kept = [entry for entry in self._entries if not predicate(entry)]
        removed_count = len(self._entries) - len(kept)
        self._entries = kept
        return removed_count
