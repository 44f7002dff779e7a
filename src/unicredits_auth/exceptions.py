"""Authentication exceptions.

Each error carries a stable ``code``; the API layer decides the HTTP status.
"""

from typing import Optional


class AuthError(Exception):
    """Base exception for authentication failures."""

    code = "AUTHENTICATION_FAILED"
    default_message = "Authentication failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Bearer token is malformed, expired, signed with another key or not an access token."""

    code = "INVALID_TOKEN"
    default_message = "Invalid or expired token"


class WeakPasswordError(AuthError):
    code = "WEAK_PASSWORD"
    default_message = "Password does not meet requirements"


class InvalidCredentialsError(AuthError):
    """Login failed. Unknown email and wrong password look the same."""

    code = "INVALID_CREDENTIALS"
    default_message = "Invalid email or password"
