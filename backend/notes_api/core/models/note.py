from __future__ import annotations

from pydantic import ConfigDict, Field, StrictInt, StrictStr

from .base import AppBaseModel


class Note(AppBaseModel):
    """Note domain model.

    Notes are frozen once built. The id is supplied by the caller and is not
    checked for uniqueness; title and content may be empty.
    """

    model_config = ConfigDict(
        frozen=True,
        # Unknown keys are dropped, only the three fields below are matched.
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "title": "Dentist Appointment",
                    "content": "Monday at 10:00 AM. Bring insurance card.",
                }
            ]
        },
    )

    id: StrictInt = Field(description="Caller-supplied note identifier")
    title: StrictStr = Field(description="Note title")
    content: StrictStr = Field(description="Note content")
