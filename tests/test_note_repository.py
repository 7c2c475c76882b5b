from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from notes_api.core.concurrency import Guarded
from notes_api.core.exceptions import StorePoisonedError
from notes_api.core.models.note import Note
from notes_api.core.repositories.implementations.memory.note_repository import InMemoryNoteRepository


def test_snapshot_of_empty_store_is_empty_list(repository):
    assert repository.snapshot() == []
    assert repository.count() == 0


def test_sequential_appends_keep_call_order(repository):
    notes = [Note(id=i, title=f"t{i}", content=f"c{i}") for i in range(20)]
    for note in notes:
        repository.append(note)
    assert repository.snapshot() == notes
    assert repository.count() == 20


def test_duplicate_ids_are_kept(repository):
    first = Note(id=1, title="a", content="b")
    second = Note(id=1, title="a", content="b")
    repository.append(first)
    repository.append(second)
    assert repository.snapshot() == [first, second]


def test_concurrent_appends_are_all_stored_once(repository):
    count = 2000
    notes = [Note(id=i, title=f"title {i}", content=f"content {i}") for i in range(count)]

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(repository.append, notes))

    stored = repository.snapshot()
    assert len(stored) == count
    assert sorted(n.id for n in stored) == list(range(count))


def test_snapshots_during_concurrent_appends_are_whole_prefixes(repository):
    count = 1000
    notes = [Note(id=i, title=str(i), content=str(i)) for i in range(count)]
    snapshots: list[list[Note]] = []

    def _read(_):
        snapshots.append(repository.snapshot())

    with ThreadPoolExecutor(max_workers=8) as pool:
        writes = [pool.submit(repository.append, n) for n in notes]
        reads = [pool.submit(_read, i) for i in range(200)]
        for future in writes + reads:
            future.result()

    final = repository.snapshot()
    assert len(final) == count
    assert len(snapshots) == 200
    for snap in snapshots:
        assert snap == final[:len(snap)]


def test_snapshot_is_a_copy(repository):
    repository.append(Note(id=1, title="a", content="b"))
    snap = repository.snapshot()
    snap.clear()
    assert len(repository.snapshot()) == 1


def test_poisoned_store_fails_every_later_access(poison):
    repo = InMemoryNoteRepository(poison_policy="fail")
    repo.append(Note(id=1, title="a", content="b"))
    poison(repo)

    assert repo.poisoned
    with pytest.raises(StorePoisonedError):
        repo.snapshot()
    with pytest.raises(StorePoisonedError):
        repo.count()
    with pytest.raises(StorePoisonedError):
        repo.append(Note(id=2, title="c", content="d"))


def test_poisoned_store_recovers_when_configured(poison):
    repo = InMemoryNoteRepository(poison_policy="recover")
    repo.append(Note(id=1, title="a", content="b"))
    poison(repo)

    repo.append(Note(id=2, title="c", content="d"))
    assert not repo.poisoned
    assert [n.id for n in repo.snapshot()] == [1, 2]


def test_recover_survives_repeated_poisoning(poison):
    repo = InMemoryNoteRepository(poison_policy="recover")
    for i in range(3):
        poison(repo)
        assert repo.poisoned
        repo.append(Note(id=i, title="t", content="c"))
    assert repo.count() == 3


def test_guard_releases_lock_after_failure():
    guard = Guarded([1])
    with pytest.raises(ValueError):
        with guard.access():
            raise ValueError("inside")

    assert guard.poisoned
    with pytest.raises(StorePoisonedError):
        with guard.access():
            pass

    with guard.access(recover=True) as value:
        assert value == [1]
    assert not guard.poisoned
