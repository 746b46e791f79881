# Session provider

from .session import (
    ADMIN_ROLE,
    SessionUser,
    Session,
    SessionManager,
    SessionDependency,
    session_manager,
    optional_session,
    require_admin,
)

__all__ = [
    "ADMIN_ROLE",
    "SessionUser",
    "Session",
    "SessionManager",
    "SessionDependency",
    "session_manager",
    "optional_session",
    "require_admin",
]
