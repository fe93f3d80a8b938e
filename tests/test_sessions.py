"""Tests for the in-memory session store and its sweeper."""

import asyncio

import pytest

from app.errors import ErrorKind, SessionNotFound
from app.sessions import SessionStore, run_sweeper

MINUTE = 60.0


class FakeClock:
    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return SessionStore(ttl_seconds=30 * MINUTE, clock=clock)


def test_create_and_get(store, clock):
    sid = store.create([3, 1, 4])
    s = store.get(sid)
    assert s.id == sid
    assert s.pool == frozenset({1, 3, 4})
    assert s.created_at == clock.now
    assert sid in store
    assert len(store) == 1


def test_ids_are_unique(store):
    ids = {store.create([0]) for _ in range(100)}
    assert len(ids) == 100


def test_id_collision_regenerates(clock):
    ids = iter(["same", "same", "other"])
    store = SessionStore(clock=clock, id_factory=lambda: next(ids))
    assert store.create([1]) == "same"
    assert store.create([2]) == "other"


def test_get_unknown_raises(store):
    with pytest.raises(SessionNotFound) as exc:
        store.get("nope")
    assert exc.value.kind is ErrorKind.SESSION_NOT_FOUND
    assert exc.value.status_code == 400


def test_session_survives_until_ttl(store, clock):
    sid = store.create([1, 2])
    clock.advance(29 * MINUTE)
    assert store.sweep() == 0
    assert store.get(sid).pool == frozenset({1, 2})


def test_lookup_does_not_check_age(store, clock):
    sid = store.create([1])
    clock.advance(31 * MINUTE)
    # Still readable until a sweep runs.
    assert store.get(sid).id == sid


def test_sweep_removes_expired_only(store, clock):
    old = store.create([1])
    clock.advance(20 * MINUTE)
    young = store.create([2])
    clock.advance(11 * MINUTE)

    assert store.sweep() == 1
    assert old not in store
    assert young in store
    with pytest.raises(SessionNotFound):
        store.get(old)


def test_sweep_with_explicit_now(store, clock):
    sid = store.create([1])
    assert store.sweep(now=clock.now + 30 * MINUTE) == 0
    assert store.sweep(now=clock.now + 35 * MINUTE) == 1
    assert sid not in store


def test_run_sweeper_sweeps_periodically(store, clock):
    sid = store.create([1])
    clock.advance(31 * MINUTE)

    async def scenario():
        task = asyncio.create_task(run_sweeper(store, interval_seconds=0.01))
        for _ in range(100):
            await asyncio.sleep(0.01)
            if sid not in store:
                break
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())
    assert sid not in store
