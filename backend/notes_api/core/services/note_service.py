from __future__ import annotations

from typing import TYPE_CHECKING

from notes_api.utils.logging import get_logger

if TYPE_CHECKING:
    from notes_api.core.models.note import Note
    from notes_api.core.repositories.note_repository import NoteRepository

logger = get_logger(__name__)


class NoteService:
    """Service bridging each request to exactly one repository operation."""

    def __init__(self, repo: NoteRepository) -> None:
        self._repo = repo

    def create_note(self, note: Note) -> None:
        """Append a note as given; ids are neither generated nor checked."""
        self._repo.append(note)
        logger.info("Note accepted", extra={"note_id": note.id})

    def list_notes(self) -> list[Note]:
        """List every note in the order it was created."""
        return self._repo.snapshot()
