from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from notes_api.config import Settings
from notes_api.core.repositories.implementations.memory.note_repository import InMemoryNoteRepository
from notes_api.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def repository() -> InMemoryNoteRepository:
    return InMemoryNoteRepository()


@pytest.fixture
def client(settings, repository):
    app = create_app(settings=settings, note_repository=repository)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def poison():
    """Return a callable that makes a repository's guard fail mid-operation."""

    def _poison(repo: InMemoryNoteRepository) -> None:
        with pytest.raises(RuntimeError):
            with repo._notes.access():
                raise RuntimeError("boom")

    return _poison
