"""In-memory engine sessions, one engine per caller."""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field

from minichess.engine import Engine


@dataclass(slots=True)
class Session:
    engine: Engine
    # Engines are not reentrant; every call on one goes through this lock.
    lock: threading.Lock = field(default_factory=threading.Lock)


class InMemorySessionStore:
    """Thread-safe session registry keyed by a generated ``session_id``."""

    def __init__(self, seed: int) -> None:
        self._lock = threading.RLock()
        self._sessions: dict[str, Session] = {}
        self._seed = seed

    def create(self) -> tuple[str, Session]:
        session_id = str(uuid.uuid4())
        session = Session(engine=Engine(seed=self._seed))
        with self._lock:
            self._sessions[session_id] = session
        return session_id, session

    def get(self, session_id: str) -> Session | None:
        with self._lock:
            return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
