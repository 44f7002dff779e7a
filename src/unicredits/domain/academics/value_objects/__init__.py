from unicredits.domain.academics.value_objects.course_status import (
    CREDIT_EARNING_STATUSES,
    CourseStatus,
)

__all__ = ["CREDIT_EARNING_STATUSES", "CourseStatus"]
