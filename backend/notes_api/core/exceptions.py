from __future__ import annotations


class NoteStoreError(Exception):
    """Base error raised by the note store."""


class StorePoisonedError(NoteStoreError):
    """A previous holder of the store guard failed mid-operation.

    The guarded notes may be inconsistent, so the store refuses further access.
    """

    def __init__(self, message: str = "Note store is unavailable after an earlier failure") -> None:
        super().__init__(message)
