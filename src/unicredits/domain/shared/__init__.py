"""Shared domain components.

This module exports the exception hierarchy and utilities used across
domain boundaries.
"""

from unicredits.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)
from unicredits.domain.shared.time import ensure_tz_aware, utc_now
from unicredits.domain.shared.unset import UNSET, UnsetType

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "ExternalServiceError",
    # Utilities
    "UNSET",
    "UnsetType",
    "ensure_tz_aware",
    "utc_now",
]
