"""
Session provider

Resolves the ``Authorization: Bearer <token>`` header to the user of an
active session. The catalog only looks at the user's ``role`` string.
"""

import logging
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from fastapi import Header

from ..core.errors import AuthorizationError

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


@dataclass
class SessionUser:
    """User attached to a session"""
    user_id: str
    email: str
    role: str = "customer"

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


@dataclass
class Session:
    """Authenticated session"""
    token: str
    user: SessionUser
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class SessionManager:
    """Manages user sessions"""

    def __init__(self):
        self.sessions: dict[str, Session] = {}

    def create_session(self, user: SessionUser, token: Optional[str] = None) -> Session:
        """Create a session for ``user``, with a random token unless one is given"""
        session = Session(token=token or secrets.token_urlsafe(32), user=user)
        self.sessions[session.token] = session
        return session

    def get_session(self, token: str) -> Optional[Session]:
        """Get session by token"""
        return self.sessions.get(token)

    def delete_session(self, token: str) -> bool:
        """Delete a session"""
        if token in self.sessions:
            del self.sessions[token]
            return True
        return False


# Singleton instance
session_manager = SessionManager()


def require_admin(user: Optional[SessionUser]) -> SessionUser:
    """Raise AuthorizationError unless ``user`` is an administrator"""
    if user is None or not user.is_admin:
        logger.warning(
            f"Rejected administrator operation for "
            f"{user.email if user else 'anonymous caller'}"
        )
        raise AuthorizationError("Unauthorized")
    return user


class SessionDependency:
    """
    FastAPI dependency returning the session user, or None.

    Whether the user may do anything is decided by the caller, so that
    the check happens before any side effect of the operation.
    """

    async def __call__(
        self,
        authorization: Optional[str] = Header(None),
    ) -> Optional[SessionUser]:
        if not authorization:
            return None

        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token:
            return None

        session = session_manager.get_session(token.strip())
        return session.user if session else None


optional_session = SessionDependency()
