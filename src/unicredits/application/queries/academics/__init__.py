"""Academics queries - read operations on categories, courses and credits."""

from unicredits.application.queries.academics.credit_summary_query import (
    CategoryCreditSummary,
    CreditSummary,
    CreditSummaryQuery,
)
from unicredits.application.queries.academics.get_category_query import (
    GetCategoryQuery,
)
from unicredits.application.queries.academics.get_course_query import (
    GetCourseQuery,
)
from unicredits.application.queries.academics.list_categories_query import (
    ListCategoriesQuery,
)
from unicredits.application.queries.academics.list_courses_query import (
    ListCoursesQuery,
)

__all__ = [
    "CategoryCreditSummary",
    "CreditSummary",
    "CreditSummaryQuery",
    "GetCategoryQuery",
    "GetCourseQuery",
    "ListCategoriesQuery",
    "ListCoursesQuery",
]
