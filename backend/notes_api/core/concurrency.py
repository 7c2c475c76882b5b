from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

from notes_api.core.exceptions import StorePoisonedError
from notes_api.utils.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class Guarded(Generic[T]):
    """A value that can only be reached through a scoped, exclusive lock.

    ``access()`` acquires the lock, yields the wrapped value and releases the
    lock on every exit path. If the body raises while holding the lock, the
    guard is marked poisoned and later calls to ``access()`` raise
    ``StorePoisonedError``. ``access(recover=True)`` instead clears the flag
    and yields the value within the same lock window.

    Never ``await`` inside an ``access()`` block.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = threading.Lock()
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def access(self, *, recover: bool = False) -> Iterator[T]:
        with self._lock:
            if self._poisoned:
                if not recover:
                    raise StorePoisonedError()
                logger.warning("Clearing poisoned guard; guarded value may be inconsistent")
                self._poisoned = False
            try:
                yield self._value
            except BaseException:
                self._poisoned = True
                logger.critical("Guard poisoned by a failure inside the guarded section")
                raise
