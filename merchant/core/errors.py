"""Errors raised by the catalog and translated at the HTTP boundary"""


class StorefrontError(Exception):
    """Base error carrying a user-facing message and an HTTP status"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StorefrontError):
    """Required input is missing or malformed"""

    status_code = 400


class AuthorizationError(StorefrontError):
    """Caller has no session or lacks the administrator role"""

    status_code = 401


class NotFoundError(StorefrontError):
    """Requested entity does not exist"""

    status_code = 404
