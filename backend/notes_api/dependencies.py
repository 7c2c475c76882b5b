from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Request

from notes_api.core.services.note_service import NoteService

if TYPE_CHECKING:
    from notes_api.core.repositories.note_repository import NoteRepository


def get_note_repository(request: Request) -> NoteRepository:
    """Return the note repository shared by every request of this application."""
    return request.app.state.note_repository


def get_note_service(repo: NoteRepository = Depends(get_note_repository)) -> NoteService:
    """Get a request-scoped note service instance."""
    return NoteService(repo)
