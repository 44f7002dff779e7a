"""Course status value object."""

from enum import Enum
from typing import Any

from unicredits.domain.academics.exceptions import InvalidCourseStatusError


class CourseStatus(str, Enum):
    """Completion state of a course.

    Only COMPLETED courses may carry a grade. PF (pass/fail) courses earn
    credits but never contribute to the GPA.
    """

    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    PF = "PF"

    @classmethod
    def parse(cls, value: Any) -> "CourseStatus":
        """Parse a status from user input, rejecting unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError) as e:
            raise InvalidCourseStatusError(value, [s.value for s in cls]) from e

    @property
    def earns_credits(self) -> bool:
        return self in CREDIT_EARNING_STATUSES


CREDIT_EARNING_STATUSES = frozenset({CourseStatus.COMPLETED, CourseStatus.PF})
