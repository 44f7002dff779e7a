"""Authentication services.

Provides password hashing and JWT token management.
"""

from unicredits_auth.services.jwt_service import JWTService
from unicredits_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
    "JWTService",
]
