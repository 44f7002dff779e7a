"""Academics domain layer exports."""

from unicredits.domain.academics.entities import Course, CourseCategory
from unicredits.domain.academics.exceptions import (
    CategoryAlreadyExistsError,
    CategoryNotFoundError,
    CourseNotFoundError,
    GradeRequiresCompletedError,
    InvalidCourseStatusError,
    InvalidCreditsError,
    InvalidGradeError,
)
from unicredits.domain.academics.repositories import (
    CourseCategoryRepository,
    CourseRepository,
)
from unicredits.domain.academics.services import calculate_gpa_score
from unicredits.domain.academics.value_objects import CourseStatus

__all__ = [
    # Value objects
    "CourseStatus",
    # Entities
    "Course",
    "CourseCategory",
    # Repositories
    "CourseCategoryRepository",
    "CourseRepository",
    # Services
    "calculate_gpa_score",
    # Exceptions
    "CategoryAlreadyExistsError",
    "CategoryNotFoundError",
    "CourseNotFoundError",
    "GradeRequiresCompletedError",
    "InvalidCourseStatusError",
    "InvalidCreditsError",
    "InvalidGradeError",
]
