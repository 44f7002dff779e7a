"""Academics domain exceptions."""

from typing import Any
from uuid import UUID

from unicredits.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a course category cannot be found for the current user."""

    def __init__(self, category_id: str | UUID | None = None) -> None:
        super().__init__(
            message=f"Category '{category_id or 'unknown'}' not found",
            code=ErrorCode.CATEGORY_NOT_FOUND,
            details={"category_id": str(category_id) if category_id else None},
        )


class CourseNotFoundError(EntityNotFoundError):
    """Raised when a course cannot be found for the current user."""

    def __init__(self, course_id: str | UUID | None = None) -> None:
        super().__init__(
            message=f"Course '{course_id or 'unknown'}' not found",
            code=ErrorCode.COURSE_NOT_FOUND,
            details={"course_id": str(course_id) if course_id else None},
        )


class CategoryAlreadyExistsError(ConflictError):
    """Raised when a user already has a category with the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(
            message=f"Category with name '{name}' already exists",
            code=ErrorCode.DUPLICATE_CATEGORY,
            details={"name": name},
        )


class InvalidCreditsError(ValidationError):
    """Raised when a credit amount is negative or not a finite number."""

    def __init__(self, value: Any, field: str = "credits") -> None:
        super().__init__(
            message=f"'{field}' must be a non-negative number, got {value!r}",
            code=ErrorCode.INVALID_CREDITS,
            details={"field": field, "value": repr(value)},
        )


class InvalidGradeError(ValidationError):
    """Raised when a grade is not a number between 0 and 100."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            message=f"Grade must be a number between 0 and 100, got {value!r}",
            code=ErrorCode.INVALID_GRADE,
            details={"value": repr(value)},
        )


class InvalidCourseStatusError(ValidationError):
    """Raised when a course status is not one of the known values."""

    def __init__(self, status: Any, valid_statuses: list[str]) -> None:
        super().__init__(
            message=(
                f"Invalid course status {status!r}. "
                f"Valid statuses: {', '.join(valid_statuses)}"
            ),
            code=ErrorCode.INVALID_COURSE_STATUS,
            details={"status": repr(status), "valid_statuses": valid_statuses},
        )


class GradeRequiresCompletedError(ValidationError):
    """Raised when a grade is supplied for a course that is not COMPLETED."""

    def __init__(self, status: str) -> None:
        super().__init__(
            message=f"A grade can only be set on COMPLETED courses (status: {status})",
            code=ErrorCode.GRADE_REQUIRES_COMPLETED,
            details={"status": status},
        )
