from unicredits.infrastructure.persistence.sqlalchemy.repositories.academics.course_category_repository import (  # NOQA: E501
    CourseCategoryRepositorySQLAlchemy,
)
from unicredits.infrastructure.persistence.sqlalchemy.repositories.academics.course_repository import (  # NOQA: E501
    CourseRepositorySQLAlchemy,
)

__all__ = ["CourseCategoryRepositorySQLAlchemy", "CourseRepositorySQLAlchemy"]
