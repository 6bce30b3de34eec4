# marketplace/core/sessions.py
"""
Bearer-token session registry.

Sessions are kept in a process-local dict (token -> Session) and are lost on
restart. Tokens are presented as ``Authorization: Token <token>``.
"""
import datetime as dt
import secrets
from dataclasses import dataclass
from typing import Callable, Dict

from marketplace.core.errors import ExpiredToken, InvalidToken, MalformedHeader, MissingToken

AUTH_SCHEME = "Token"
DEFAULT_TTL = dt.timedelta(hours=2)


def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


@dataclass(frozen=True)
class Session:
    token: str
    user_id: str
    expires_at: dt.datetime


def parse_authorization(header: str | None) -> str:
    """
    Extract the token from an ``Authorization`` header value.

    The header must be exactly two space-separated parts, the first being the
    literal scheme ``Token``.

    Raises:
        MissingToken: header absent or empty
        MalformedHeader: any other shape (wrong scheme, extra parts, ...)
    """
    if not header:
        raise MissingToken()
    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != AUTH_SCHEME:
        raise MalformedHeader()
    return parts[1]


class SessionRegistry:
    """
    In-memory map of opaque bearer tokens to sessions.

    Each successful login gets its own session; older sessions of the same user
    stay valid until they expire or are revoked. Expiry is fixed at creation
    (no sliding window) and is checked lazily in ``validate``.

    Args:
        ttl: Session lifetime
        clock: Returns the current aware UTC datetime; injectable for tests
    """

    def __init__(self, ttl: dt.timedelta = DEFAULT_TTL, clock: Callable[[], dt.datetime] = utcnow):
        self.ttl = ttl
        self.clock = clock
        self._sessions: Dict[str, Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, token: str) -> bool:
        return token in self._sessions

    def _new_token(self) -> str:
        # Unique among live sessions only
        token = secrets.token_urlsafe(24)
        while token in self._sessions:
            token = secrets.token_urlsafe(24)
        return token

    def create(self, user_id: str) -> str:
        """Open a session for ``user_id`` and return its token."""
        token = self._new_token()
        self._sessions[token] = Session(token=token, user_id=str(user_id), expires_at=self.clock() + self.ttl)
        return token

    def validate(self, token: str) -> Session:
        """
        Look up a live session.

        Returns:
            The stored Session, unchanged

        Raises:
            InvalidToken: token unknown (never issued, revoked, or already evicted)
            ExpiredToken: now >= expires_at; the entry is evicted
        """
        session = self._sessions.get(token)
        if session is None:
            raise InvalidToken()
        if self.clock() >= session.expires_at:
            self._sessions.pop(token, None)
            raise ExpiredToken()
        return session

    def revoke(self, token: str) -> None:
        """Drop a session. Revoking an unknown token is a no-op."""
        self._sessions.pop(token, None)
