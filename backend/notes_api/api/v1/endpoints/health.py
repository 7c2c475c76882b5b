from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from notes_api import __version__
from notes_api.core.exceptions import StorePoisonedError
from notes_api.dependencies import get_note_repository

if TYPE_CHECKING:
    from notes_api.core.repositories.note_repository import NoteRepository

router = APIRouter()


@router.get("")
async def health_check():
    """Health check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "service": "notes-api",
            "version": __version__
        }
    )


@router.get("/ready")
async def readiness_check(repo: NoteRepository = Depends(get_note_repository)):
    """Readiness check endpoint.

    Reports 503 while the note store refuses access after a failure.
    """
    try:
        count = repo.count()
    except StorePoisonedError:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "store": "poisoned"}
        )
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "ready",
            "store": "ok",
            "notes": count,
        }
    )
