"""Password hashing and JWT access tokens.

Knows nothing about courses or the database; the API layer wires it to
user credentials and turns its errors into 400/401 responses.
"""

from unicredits_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from unicredits_auth.schemas import TokenPayload
from unicredits_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
]
