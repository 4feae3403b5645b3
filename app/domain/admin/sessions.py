"""
Admin session store.

Sessions live only in process memory. The store keeps a single live session for the
whole site: a new login replaces whatever session existed before, so logging in from
a second browser signs the first one out. A session ends on logout, on the next login,
when its admin's password is reset, when it expires, or when the process restarts.
"""

import logging
import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Optional

from ...config import ADMIN_SESSION_TTL_HOURS
from ...security_utils import constant_time_compare, generate_secure_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminSession:
    token: str
    username: str
    created_at: float
    expires_at: Optional[float] = None


class AdminSessionStore:
    """Single-slot in-memory store for the live admin session"""

    def __init__(self, ttl_seconds: Optional[float] = None, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds if ttl_seconds else None
        self._clock = clock
        self._lock = Lock()
        self._session: Optional[AdminSession] = None

    def issue(self, username: str) -> AdminSession:
        """Start a new session for username, replacing the current one"""
        now = self._clock()
        session = AdminSession(
            token=generate_secure_token(),
            username=username,
            created_at=now,
            expires_at=now + self.ttl_seconds if self.ttl_seconds else None,
        )
        with self._lock:
            if self._session is not None:
                logger.info(f"🔁 Replacing live admin session of {self._session.username}")
            self._session = session
        return session

    def validate(self, token: Optional[str]) -> Optional[AdminSession]:
        """Return the live session if token matches it and it has not expired"""
        if not token:
            return None

        with self._lock:
            session = self._session
            if session is None or not constant_time_compare(token, session.token):
                return None

            if session.expires_at is not None and self._clock() >= session.expires_at:
                logger.info(f"⌛ Admin session of {session.username} expired")
                self._session = None
                return None

            return session

    def revoke(self, token: str) -> bool:
        """End the session identified by token. Returns True if it was the live session."""
        with self._lock:
            if self._session is not None and constant_time_compare(token, self._session.token):
                self._session = None
                return True
        return False

    def revoke_user(self, username: str) -> None:
        """End the live session if it belongs to username"""
        with self._lock:
            if self._session is not None and self._session.username == username:
                self._session = None

    def clear(self) -> None:
        with self._lock:
            self._session = None


session_store = AdminSessionStore(ttl_seconds=ADMIN_SESSION_TTL_HOURS * 3600)
