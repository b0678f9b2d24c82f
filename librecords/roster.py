"""An ordered list of student records with 1-based positions."""

from __future__ import annotations

from collections.abc import Iterator

from .student import LibStudent


class StudentList:
    """Student records addressed by 1-based position, optionally kept in name order."""

    def __init__(self) -> None:
        self._items: list[LibStudent] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LibStudent]:
        return iter(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def _index(self, position: int) -> int:
        if not 1 <= position <= len(self._items):
            raise IndexError(f"position {position} out of range 1..{len(self._items)}")
        return position - 1

    def get(self, position: int) -> LibStudent:
        """Return the student at ``position``."""
        return self._items[self._index(position)]

    def set(self, position: int, item: LibStudent) -> None:
        """Replace the student at ``position``."""
        self._items[self._index(position)] = item

    def insert_at(self, position: int, item: LibStudent) -> None:
        """Insert ``item`` so that it ends up at ``position`` (1..len+1)."""
        if not 1 <= position <= len(self._items) + 1:
            raise IndexError(f"position {position} out of range 1..{len(self._items) + 1}")
        self._items.insert(position - 1, item)

    def insert_sorted(self, item: LibStudent) -> None:
        """Insert ``item`` before the first student whose name sorts at or after it."""
        index = next(
            (i for i, existing in enumerate(self._items) if existing.compare_name(item)),
            len(self._items),
        )
        self._items.insert(index, item)

    def remove(self, position: int) -> LibStudent:
        """Remove and return the student at ``position``."""
        return self._items.pop(self._index(position))

    def find_by_id(self, student_id: str) -> LibStudent | None:
        """Return the first student with the given id, or None."""
        return next((s for s in self._items if s.student_id == student_id), None)