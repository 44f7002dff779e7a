"""Academics commands - write operations on categories and courses."""

from unicredits.application.commands.academics.create_category_command import (
    CreateCategoryCommand,
)
from unicredits.application.commands.academics.create_course_command import (
    CreateCourseCommand,
)
from unicredits.application.commands.academics.delete_category_command import (
    DeleteCategoryCommand,
)
from unicredits.application.commands.academics.delete_course_command import (
    DeleteCourseCommand,
)
from unicredits.application.commands.academics.update_category_command import (
    UpdateCategoryCommand,
)
from unicredits.application.commands.academics.update_course_command import (
    UpdateCourseCommand,
)

__all__ = [
    "CreateCategoryCommand",
    "CreateCourseCommand",
    "DeleteCategoryCommand",
    "DeleteCourseCommand",
    "UpdateCategoryCommand",
    "UpdateCourseCommand",
]
