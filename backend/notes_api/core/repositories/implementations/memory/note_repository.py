from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Literal, TypeVar

from notes_api.core.concurrency import Guarded
from notes_api.core.exceptions import StorePoisonedError
from notes_api.core.repositories.note_repository import NoteRepository
from notes_api.utils.logging import get_logger

if TYPE_CHECKING:
    from notes_api.core.models.note import Note

logger = get_logger(__name__)

R = TypeVar("R")

PoisonPolicy = Literal["fail", "recover"]


class InMemoryNoteRepository(NoteRepository):
    """Append-only note list shared by every request of one application.

    All reads and writes go through a single ``Guarded`` list, so appends are
    totally ordered and a snapshot never contains a partially added note.

    ``poison_policy`` decides what happens once the guard has been poisoned:
    ``"fail"`` keeps raising ``StorePoisonedError`` for every later call,
    ``"recover"`` clears the flag, logs a warning and carries on with whatever
    the list holds.
    """

    def __init__(self, *, poison_policy: PoisonPolicy = "fail") -> None:
        self._notes: Guarded[list[Note]] = Guarded([])
        self._poison_policy = poison_policy

    @property
    def poisoned(self) -> bool:
        return self._notes.poisoned

    def append(self, note: Note) -> None:
        def _append(notes: list[Note]) -> int:
            notes.append(note)
            return len(notes)

        count = self._with_notes(_append)
        logger.debug("Stored note %s (total %d)", note.id, count)

    def snapshot(self) -> list[Note]:
        return self._with_notes(list)

    def count(self) -> int:
        return self._with_notes(len)

    def _with_notes(self, operation: Callable[[list[Note]], R]) -> R:
        try:
            with self._notes.access(recover=self._poison_policy == "recover") as notes:
                return operation(notes)
        except StorePoisonedError:
            logger.critical("Note store is poisoned; rejecting access")
            raise
