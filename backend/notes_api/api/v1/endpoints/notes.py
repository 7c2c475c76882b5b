from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Response, status

from notes_api.api.v1.schemas.note import NoteCreate, NoteRead
from notes_api.core.models.note import Note
from notes_api.dependencies import get_note_service

if TYPE_CHECKING:
    from notes_api.core.services.note_service import NoteService

router = APIRouter()


@router.get("", response_model=list[NoteRead])
async def list_notes(service: NoteService = Depends(get_note_service)):
    notes = service.list_notes()
    return [NoteRead.model_validate(n) for n in notes]


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_note(
    payload: NoteCreate,
    service: NoteService = Depends(get_note_service),
) -> Response:
    """Append the note exactly as sent.

    Ids are caller-supplied and may repeat; posting the same body twice stores
    two notes.
    """
    service.create_note(Note.model_validate(payload.model_dump()))
    return Response(status_code=status.HTTP_201_CREATED)
