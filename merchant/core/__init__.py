# Core modules

from .config import settings, get_settings
from .errors import StorefrontError, ValidationError, AuthorizationError, NotFoundError

__all__ = [
    "settings",
    "get_settings",
    "StorefrontError",
    "ValidationError",
    "AuthorizationError",
    "NotFoundError",
]
