from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from notes_api.core.models.note import Note


class NoteRepository(ABC):
    """Abstract repository interface for notes.

    Contract used by services and dependency injection. Operations work on
    process memory only and return without suspending, so they are plain
    (non-async) methods that are safe to call from any thread.
    """

    @abstractmethod
    def append(self, note: Note) -> None:  # pragma: no cover - interface only
        """Add a note after every note already stored."""

    @abstractmethod
    def snapshot(self) -> list[Note]:  # pragma: no cover
        """Return a copy of all stored notes in insertion order."""

    @abstractmethod
    def count(self) -> int:  # pragma: no cover
        """Return the number of stored notes."""

    @property
    @abstractmethod
    def poisoned(self) -> bool:  # pragma: no cover
        """Whether the repository refuses access after an earlier failure."""
