"""Per-user state that the engine keeps between interactions."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Hashable, Iterator, Optional

from gridmenu.core.scheduling import ScheduledCall


class UserSession:
    """Own the lock and pending timers of a single user.

    Every engine operation for the user runs while holding ``lock``; it is
    re-entrant so a click handler may open another menu for the same user.
    """

    def __init__(self, user: Hashable) -> None:
        self.user = user
        self.lock = threading.RLock()
        self.pending_close_check: Optional[ScheduledCall] = None

    # ------------------------------------------------------------------
    def cancel_close_check(self) -> bool:
        call = self.pending_close_check
        self.pending_close_check = None
        if call is not None and call.pending:
            call.cancel()
            return True
        return False

    def replace_close_check(self, call: ScheduledCall) -> None:
        self.cancel_close_check()
        self.pending_close_check = call


class SessionRegistry:
    """Create sessions on demand, one per user, and drop them on exit."""

    def __init__(self) -> None:
        self._sessions: Dict[Hashable, UserSession] = {}
        self._lock = threading.Lock()

    def get(self, user: Hashable) -> UserSession:
        session = self._sessions.get(user)
        if session is not None:
            return session
        with self._lock:
            return self._sessions.setdefault(user, UserSession(user))

    def peek(self, user: Hashable) -> Optional[UserSession]:
        return self._sessions.get(user)

    @contextmanager
    def locked(self, user: Hashable) -> Iterator[UserSession]:
        """Hold the lock of the user's live session.

        A session evicted while this thread waited for its lock is skipped in
        favour of the one that replaced it.
        """
        while True:
            session = self.get(user)
            with session.lock:
                if self._sessions.get(user) is session:
                    yield session
                    return

    def evict(self, session: UserSession) -> bool:
        """Forget ``session`` unless it has already been replaced.

        Callers hold ``session.lock``.
        """
        if session.pending_close_check is not None:
            return False
        with self._lock:
            if self._sessions.get(session.user) is not session:
                return False
            del self._sessions[session.user]
            return True

    def __len__(self) -> int:
        return len(self._sessions)


__all__ = ["SessionRegistry", "UserSession"]
