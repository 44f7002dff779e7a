"""Shared utilities for SQLAlchemy repositories."""

from sqlalchemy.exc import IntegrityError


def is_unique_violation(
    exc: IntegrityError,
    table: str,
    columns: tuple[str, ...],
    constraint: str,
) -> bool:
    """
    Tell whether ``exc`` was raised by one specific unique constraint.

    SQLite reports the columns ("UNIQUE constraint failed: users.email"),
    PostgreSQL the constraint or index name.
    """
    message = str(getattr(exc, "orig", exc))
    sqlite_columns = ", ".join(f"{table}.{column}" for column in columns)
    return sqlite_columns in message or constraint in message
