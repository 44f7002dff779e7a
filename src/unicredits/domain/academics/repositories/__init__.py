from unicredits.domain.academics.repositories.course_category_repository import (
    CourseCategoryRepository,
)
from unicredits.domain.academics.repositories.course_repository import (
    CourseRepository,
)

__all__ = ["CourseCategoryRepository", "CourseRepository"]
