from __future__ import annotations

from pydantic import ConfigDict, Field, StrictInt, StrictStr

from notes_api.core.models.base import AppBaseModel


class NoteCreate(AppBaseModel):
    model_config = ConfigDict(extra="ignore")

    id: StrictInt = Field(description="Caller-supplied note identifier")
    title: StrictStr = Field(description="Note title")
    content: StrictStr = Field(description="Note content")


class NoteRead(AppBaseModel):
    id: int
    title: str
    content: str
