"""
Session credentials holder.

The security token and session id are stored as one immutable pair so a
reader never sees one populated without the other.
"""

import threading
from typing import NamedTuple


class SessionCredentials(NamedTuple):
    security_token: str = ""
    session_id: str = ""

    @property
    def complete(self) -> bool:
        return bool(self.security_token) and bool(self.session_id)


class Session:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._credentials = SessionCredentials()

    @property
    def security_token(self) -> str:
        return self.snapshot().security_token

    @property
    def session_id(self) -> str:
        return self.snapshot().session_id

    @property
    def is_authenticated(self) -> bool:
        return self.snapshot().complete

    def snapshot(self) -> SessionCredentials:
        with self._lock:
            return self._credentials

    def update(self, security_token: str, session_id: str) -> None:
        """Replace both credentials together. Empty values are rejected."""
        if not security_token or not session_id:
            raise ValueError("security_token and session_id must both be non-empty")
        with self._lock:
            self._credentials = SessionCredentials(security_token, session_id)

    def __repr__(self) -> str:
        return f"Session(authenticated={self.is_authenticated})"
