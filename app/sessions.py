"""In-memory shuffle sessions.

A session binds an opaque id to the pool of catalog indices offered by
one shuffle. Sessions are never updated; they are created, read and
eventually removed by the sweeper. Lookups do not check age, so an
expired session stays readable until the next sweep runs.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Iterable, Optional

from app.errors import SessionNotFound

log = logging.getLogger("tarot.sessions")

DEFAULT_TTL_SECONDS = 30 * 60
DEFAULT_SWEEP_INTERVAL_SECONDS = 5 * 60


def new_session_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Session:
    id: str
    pool: FrozenSet[int]
    created_at: float


class SessionStore:
    """Owns the session map; the only code that adds or removes entries.

    Handlers run on a single event loop and none of these methods await,
    so the map needs no lock.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
        id_factory: Callable[[], str] = new_session_id,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._id_factory = id_factory
        self._sessions: Dict[str, Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self, pool: Iterable[int]) -> str:
        sid = self._id_factory()
        while sid in self._sessions:
            sid = self._id_factory()
        self._sessions[sid] = Session(id=sid, pool=frozenset(pool), created_at=self._clock())
        return sid

    def get(self, session_id: str) -> Session:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFound(session_id) from None

    def sweep(self, now: Optional[float] = None) -> int:
        """Remove sessions older than the TTL. Returns how many were removed."""
        if now is None:
            now = self._clock()
        expired = [sid for sid, s in self._sessions.items() if now - s.created_at > self.ttl_seconds]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            log.info("swept %d expired session(s), %d remaining", len(expired), len(self._sessions))
        else:
            log.debug("sweep found no expired sessions (%d live)", len(self._sessions))
        return len(expired)


async def run_sweeper(store: SessionStore, interval_seconds: float = DEFAULT_SWEEP_INTERVAL_SECONDS) -> None:
    """Sweep ``store`` every ``interval_seconds`` until cancelled."""
    while True:
        await asyncio.sleep(interval_seconds)
        store.sweep()
