from unicredits.domain.academics.entities.course import Course
from unicredits.domain.academics.entities.course_category import CourseCategory

__all__ = ["Course", "CourseCategory"]
